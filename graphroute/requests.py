import io
import json
import logging

from werkzeug.exceptions import BadRequest, RequestEntityTooLarge, UnsupportedMediaType

from .encoding import decode_json
from .errors import InvalidRequestError, InvalidVariablesError, NoQueryFoundError


logger = logging.getLogger(__name__)


class QueryRequest(object):
    def __init__(self, query, operation_name=None, variables=None):
        self.query = query
        self.operation_name = operation_name
        self.variables = variables

    @staticmethod
    def from_json(value):
        query = value.get("query")
        if query is None or query == "":
            raise NoQueryFoundError()
        elif not isinstance(query, str):
            raise InvalidRequestError("query must be a string")

        operation_name = value.get("operationName")
        if operation_name is not None and not isinstance(operation_name, str):
            raise InvalidRequestError("operationName must be a string")

        variables = value.get("variables")
        if isinstance(variables, str):
            variables = _decode_variables(variables)
        elif variables is not None and not isinstance(variables, dict):
            raise InvalidVariablesError("Variables must be an object")

        return QueryRequest(
            query=query,
            operation_name=operation_name or None,
            variables=variables,
        )

    def to_json(self):
        return {
            "query": self.query,
            "operationName": self.operation_name,
            "variables": self.variables,
        }

    def __eq__(self, other):
        if isinstance(other, QueryRequest):
            return (
                self.query == other.query and
                self.operation_name == other.operation_name and
                self.variables == other.variables
            )
        else:
            return NotImplemented

    def __ne__(self, other):
        return not (self == other)

    def __repr__(self):
        return "QueryRequest(query={!r}, operation_name={!r}, variables={!r})".format(
            self.query,
            self.operation_name,
            self.variables,
        )


class collect(object):
    """
    Read the whole request body before decoding it.

    If ``max_size`` is set, bodies larger than ``max_size`` bytes are
    rejected with 413 Request Entity Too Large.
    """

    def __init__(self, max_size=None):
        self.max_size = max_size

    def open(self, request):
        if self._is_too_large(request.content_length):
            raise RequestEntityTooLarge()

        data = request.get_data(cache=True)
        if self._is_too_large(len(data)):
            raise RequestEntityTooLarge()

        return io.BytesIO(data)

    def _is_too_large(self, size):
        return self.max_size is not None and size is not None and size > self.max_size

    def __repr__(self):
        return "collect(max_size={!r})".format(self.max_size)


class _Stream(object):
    def open(self, request):
        return request.stream

    def __repr__(self):
        return "STREAM"


COLLECT = collect()
STREAM = _Stream()


_form_mimetypes = ("application/x-www-form-urlencoded", "multipart/form-data")


def decode_body(request, *, body_stream_strategy=COLLECT):
    mimetype = request.mimetype

    if mimetype == "application/json" or mimetype.endswith("+json"):
        fileobj = body_stream_strategy.open(request)
        try:
            body = json.load(fileobj)
        except ValueError as error:
            raise BadRequest("request body is not valid JSON: {}".format(error))

        if not isinstance(body, dict):
            raise BadRequest("request body must be a JSON object")

        return QueryRequest.from_json(body)

    elif mimetype in _form_mimetypes:
        return _decode_parameters(request.form)

    elif mimetype == "application/graphql":
        charset = request.mimetype_params.get("charset", "utf-8")
        try:
            query = body_stream_strategy.open(request).read().decode(charset)
        except (LookupError, UnicodeDecodeError) as error:
            raise BadRequest("request body is not valid {} text: {}".format(charset, error))

        if not query:
            raise NoQueryFoundError()

        return QueryRequest(query=query)

    else:
        raise UnsupportedMediaType("unsupported content type: {}".format(mimetype or "(none)"))


def decode_query_parameters(request):
    return _decode_parameters(request.args)


def _decode_parameters(parameters):
    query = parameters.get("query")
    if not query:
        raise NoQueryFoundError()

    return QueryRequest(
        query=query,
        operation_name=parameters.get("operationName") or None,
        variables=_decode_variables(parameters.get("variables")),
    )


def _decode_variables(text):
    if not text:
        return None

    try:
        variables = decode_json(text)
    except ValueError as error:
        logger.warning("could not decode GraphQL variables: %s", error)
        raise InvalidVariablesError("Variables are not valid JSON: {}".format(error))

    if variables is None or isinstance(variables, dict):
        return variables
    else:
        raise InvalidVariablesError("Variables must be an object")
