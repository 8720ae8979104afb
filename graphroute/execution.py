from collections.abc import Mapping
import logging

import graphql

from .errors import InvalidSchemaError
from .naming import camel_case_to_snake_case


logger = logging.getLogger(__name__)


class Endpoint(object):
    def __init__(self, schema, resolver):
        errors = graphql.validate_schema(schema)
        if errors:
            raise InvalidSchemaError(errors)

        self.schema = schema
        self.resolver = resolver

    def __repr__(self):
        return "Endpoint(schema={!r}, resolver={!r})".format(self.schema, self.resolver)


def execute(query_request, *, schema, resolver, context):
    return executor(schema, resolver)(query_request, context=context)


def executor(schema, resolver):
    endpoint = Endpoint(schema, resolver)

    def execute(query_request, *, context):
        result = graphql.graphql_sync(
            endpoint.schema,
            query_request.query,
            root_value=endpoint.resolver,
            context_value=context,
            variable_values=query_request.variables or {},
            operation_name=query_request.operation_name,
            field_resolver=resolve_field,
        )

        logger.debug(
            "executed GraphQL operation %s with %s error(s)",
            query_request.operation_name or "(anonymous)",
            len(result.errors or ()),
        )

        return result

    return execute


_undefined = object()


def resolve_field(source, info, **args):
    value = _field_value(source, info.field_name)

    if callable(value):
        return value(info.context, **{
            camel_case_to_snake_case(arg_name): arg_value
            for arg_name, arg_value in args.items()
        })
    else:
        return value


def _field_value(source, field_name):
    if source is None:
        return None

    names = (field_name, camel_case_to_snake_case(field_name))

    if isinstance(source, Mapping):
        for name in names:
            if name in source:
                return source[name]
    else:
        for name in names:
            value = getattr(source, name, _undefined)
            if value is not _undefined:
                return value

    return None
