import datetime
import uuid

import graphql
from graphql import GraphQLError


def _serialize_uuid(value):
    if isinstance(value, uuid.UUID):
        return str(value)
    elif isinstance(value, str):
        return str(_parse_uuid(value))
    else:
        raise GraphQLError("UUID cannot represent value: {!r}".format(value))


def _parse_uuid(value):
    if not isinstance(value, str):
        raise GraphQLError("UUID cannot represent non-string value: {!r}".format(value))

    try:
        return uuid.UUID(value)
    except ValueError:
        raise GraphQLError("UUID cannot represent value: {!r}".format(value))


def _parse_uuid_literal(value_node, _variables=None):
    if isinstance(value_node, graphql.StringValueNode):
        return _parse_uuid(value_node.value)
    else:
        raise GraphQLError("UUID cannot represent non-string value", value_node)


UUID = graphql.GraphQLScalarType(
    name="UUID",
    description="A UUID in its canonical string form.",
    serialize=_serialize_uuid,
    parse_value=_parse_uuid,
    parse_literal=_parse_uuid_literal,
)


def _serialize_datetime(value):
    if isinstance(value, (datetime.datetime, datetime.date)):
        return value.isoformat()
    elif isinstance(value, str):
        return _parse_datetime(value).isoformat()
    else:
        raise GraphQLError("DateTime cannot represent value: {!r}".format(value))


def _parse_datetime(value):
    if not isinstance(value, str):
        raise GraphQLError("DateTime cannot represent non-string value: {!r}".format(value))

    # fromisoformat only accepts the "Z" suffix from Python 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"

    try:
        return datetime.datetime.fromisoformat(value)
    except ValueError:
        raise GraphQLError("DateTime cannot represent value: {!r}".format(value))


def _parse_datetime_literal(value_node, _variables=None):
    if isinstance(value_node, graphql.StringValueNode):
        return _parse_datetime(value_node.value)
    else:
        raise GraphQLError("DateTime cannot represent non-string value", value_node)


DateTime = graphql.GraphQLScalarType(
    name="DateTime",
    description="An ISO-8601 date and time.",
    serialize=_serialize_datetime,
    parse_value=_parse_datetime,
    parse_literal=_parse_datetime_literal,
)


def enum_type(enum, *, name=None, description=None):
    return graphql.GraphQLEnumType(
        name or enum.__name__,
        values={
            member.value: graphql.GraphQLEnumValue(member)
            for member in enum
        },
        description=description,
    )
