import logging
import re

import flask
from graphql import ExecutionResult

from .context import RequestContext
from .encoding import encode_json
from .errors import RequestError
from .execution import executor
from .requests import COLLECT, decode_body, decode_query_parameters


logger = logging.getLogger(__name__)


def register(router, schema, resolver, *, path="graphql", body_stream_strategy=COLLECT, session_factory=None):
    """
    Serve ``schema`` on ``router`` at ``path``.

    ``router`` is a Flask app or blueprint. ``POST`` requests carry the
    operation in their body and ``GET`` requests in their query string.
    ``resolver`` is the root value whose attributes back the root fields.
    ``session_factory`` creates the SQLAlchemy session exposed to resolvers
    as ``context.db``.
    """
    execute = executor(schema, resolver)
    rule = "/" + path.strip("/")
    endpoint = "graphql_" + (re.sub(r"\W+", "_", path.strip("/")) or "root")

    def resolve(decode):
        context = RequestContext(flask.request, session_factory=session_factory)
        try:
            try:
                query_request = decode(flask.request)
            except RequestError as error:
                logger.warning("could not read GraphQL request: %s", error.message)
                result = ExecutionResult(data=None, errors=[error])
            else:
                result = execute(query_request, context=context)

            return encode_response(result)
        finally:
            context.close()

    def resolve_by_body():
        return resolve(lambda request: decode_body(request, body_stream_strategy=body_stream_strategy))

    def resolve_by_query_parameters():
        return resolve(decode_query_parameters)

    router.add_url_rule(rule, endpoint=endpoint + "_post", view_func=resolve_by_body, methods=["POST"])
    router.add_url_rule(rule, endpoint=endpoint + "_get", view_func=resolve_by_query_parameters, methods=["GET"])

    logger.info("registered GraphQL endpoint at %s", rule)


def encode_response(result):
    body = {"data": result.data}
    if result.errors:
        body["errors"] = [error.formatted for error in result.errors]

    return flask.Response(
        encode_json(body),
        status=200,
        headers={"Content-Type": "application/json"},
    )
