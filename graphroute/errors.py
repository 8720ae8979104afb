from graphql import GraphQLError


class GraphRouteError(Exception):
    pass


class ConfigurationError(GraphRouteError):
    pass


class InvalidSchemaError(GraphRouteError):
    def __init__(self, errors):
        super().__init__("invalid schema:\n{}".format("\n".join(
            "- {}".format(error.message)
            for error in errors
        )))
        self.errors = errors


class RelationshipError(GraphRouteError):
    pass


class RequestError(GraphQLError):
    code = "INVALID_REQUEST"

    def __init__(self, message):
        super().__init__(message, extensions={"code": self.code})


class InvalidRequestError(RequestError):
    pass


class NoQueryFoundError(RequestError):
    code = "NO_QUERY_FOUND"

    def __init__(self, message="No query found"):
        super().__init__(message)


class InvalidVariablesError(RequestError):
    code = "INVALID_VARIABLES"


class UnauthenticatedError(GraphQLError):
    def __init__(self, message="Not authenticated"):
        super().__init__(message, extensions={"code": "UNAUTHENTICATED"})
