from .context import login, logout, RequestContext
from .encoding import decode_json, encode_json
from .errors import (
    ConfigurationError,
    GraphRouteError,
    InvalidRequestError,
    InvalidSchemaError,
    InvalidVariablesError,
    NoQueryFoundError,
    RelationshipError,
    RequestError,
    UnauthenticatedError,
)
from .execution import Endpoint, execute, executor, resolve_field
from .relationships import children, optional_child, optional_parent, parent, siblings
from .requests import collect, COLLECT, decode_body, decode_query_parameters, QueryRequest, STREAM
from .routes import encode_response, register
from .scalars import DateTime, enum_type, UUID


__all__ = [
    "login",
    "logout",
    "RequestContext",

    "decode_json",
    "encode_json",

    "ConfigurationError",
    "GraphRouteError",
    "InvalidRequestError",
    "InvalidSchemaError",
    "InvalidVariablesError",
    "NoQueryFoundError",
    "RelationshipError",
    "RequestError",
    "UnauthenticatedError",

    "Endpoint",
    "execute",
    "executor",
    "resolve_field",

    "children",
    "optional_child",
    "optional_parent",
    "parent",
    "siblings",

    "collect",
    "COLLECT",
    "decode_body",
    "decode_query_parameters",
    "QueryRequest",
    "STREAM",

    "encode_response",
    "register",

    "DateTime",
    "enum_type",
    "UUID",
]
