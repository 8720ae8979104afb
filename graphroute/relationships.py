import graphql
import sqlalchemy.orm
from sqlalchemy.orm.interfaces import MANYTOMANY, MANYTOONE, ONETOMANY

from .errors import RelationshipError


def many(query):
    return query.all()


def single(query):
    return query.one()


def single_or_null(query):
    return query.one_or_none()


def children(type, attribute, *, description=None):
    """
    Field for a one-to-many relationship, resolving to every child record.
    """
    return _relationship_field(
        _list_type(type),
        attribute,
        select=many,
        check=_is_one_to_many,
        expected="a one-to-many relationship",
        description=description,
    )


def siblings(type, attribute, *, description=None):
    """
    Field for a many-to-many relationship, resolving to every record
    associated through the relationship's secondary table.
    """
    return _relationship_field(
        _list_type(type),
        attribute,
        select=many,
        check=lambda prop: prop.direction == MANYTOMANY,
        expected="a many-to-many relationship",
        description=description,
    )


def parent(type, attribute, *, description=None):
    """
    Field for a required many-to-one relationship.

    Resolving the field fails if the referenced record does not exist.
    """
    return _relationship_field(
        graphql.GraphQLNonNull(graphql.get_nullable_type(type)),
        attribute,
        select=single,
        check=lambda prop: prop.direction == MANYTOONE,
        expected="a many-to-one relationship",
        description=description,
    )


def optional_parent(type, attribute, *, description=None):
    return _relationship_field(
        graphql.get_nullable_type(type),
        attribute,
        select=single_or_null,
        check=lambda prop: prop.direction == MANYTOONE,
        expected="a many-to-one relationship",
        description=description,
    )


def optional_child(type, attribute, *, description=None):
    return _relationship_field(
        graphql.get_nullable_type(type),
        attribute,
        select=single_or_null,
        check=lambda prop: prop.direction == ONETOMANY and not prop.uselist,
        expected="a one-to-one relationship (uselist=False)",
        description=description,
    )


def _is_one_to_many(prop):
    return prop.direction == ONETOMANY and prop.uselist


def _list_type(type):
    element_type = graphql.GraphQLNonNull(graphql.get_nullable_type(type))
    return graphql.GraphQLNonNull(graphql.GraphQLList(element_type))


def _relationship_field(field_type, attribute, *, select, check, expected, description):
    prop = _relationship_property(attribute)
    if not check(prop):
        raise RelationshipError("{} is not {}".format(attribute, expected))

    target = prop.mapper.class_

    def resolve(record, info):
        query = info.context.db.query(target).filter(sqlalchemy.orm.with_parent(record, attribute))
        return select(query)

    return graphql.GraphQLField(field_type, resolve=resolve, description=description)


def _relationship_property(attribute):
    prop = getattr(attribute, "property", None)
    if not isinstance(prop, sqlalchemy.orm.RelationshipProperty):
        raise RelationshipError("{!r} is not a relationship attribute".format(attribute))

    # direction is only known once mappers are configured
    sqlalchemy.orm.configure_mappers()

    return prop
