from graphql import GraphQLField, GraphQLNonNull, GraphQLObjectType, GraphQLString
from precisely import assert_that, contains_exactly, equal_to, has_attrs
import pytest

import graphroute
from graphroute import QueryRequest
from . import database, graph


class Context(object):
    def __init__(self, db):
        self.db = db


class TestRelationshipResolution(object):
    @pytest.fixture(autouse=True)
    def setup(self):
        self.session = database.create_session_factory()()
        self.execute = graphroute.executor(graph.schema, graph.Resolver())
        yield
        self.session.close()

    def resolve(self, query):
        return self.execute(QueryRequest(query=query), context=Context(self.session))

    def add_user(self, username, **kwargs):
        user = database.User(username=username, **kwargs)
        self.session.add(user)
        self.session.commit()
        return user

    def add_article(self, title, **kwargs):
        article = database.Article(title=title, **kwargs)
        self.session.add(article)
        self.session.commit()
        return article

    def test_parent_resolves_to_referenced_record(self):
        user = self.add_user("tester")
        self.add_article("Hello", user_id=user.id)
        self.add_article("There", user_id=user.id)

        result = self.resolve("""
            query {
                articles {
                    title
                    user {
                        username
                    }
                }
            }
        """)

        assert_that(result, has_attrs(
            errors=None,
            data=equal_to({
                "articles": [
                    {"title": "Hello", "user": {"username": "tester"}},
                    {"title": "There", "user": {"username": "tester"}},
                ],
            }),
        ))

    def test_children_resolve_to_every_child_record(self):
        first = self.add_user("first")
        second = self.add_user("second")
        self.add_article("Hello", user_id=first.id)
        self.add_article("Elsewhere", user_id=second.id)
        self.add_article("There", user_id=first.id)

        result = self.resolve("""
            query {
                users {
                    username
                    articles {
                        title
                    }
                }
            }
        """)

        assert_that(result.data, equal_to({
            "users": [
                {"username": "first", "articles": [{"title": "Hello"}, {"title": "There"}]},
                {"username": "second", "articles": [{"title": "Elsewhere"}]},
            ],
        }))

    def test_children_resolve_to_empty_list_when_there_are_no_children(self):
        self.add_user("tester")

        result = self.resolve("query { users { articles { title } } }")

        assert_that(result.data, equal_to({"users": [{"articles": []}]}))

    def test_siblings_resolve_to_records_associated_through_secondary_table(self):
        python = database.Tag(name="python")
        graphql = database.Tag(name="graphql")
        sql = database.Tag(name="sql")
        self.session.add_all([python, graphql, sql])
        self.add_user("first", tags=[python, sql])
        self.add_user("second", tags=[graphql])

        result = self.resolve("query { users { username tags { name } } }")

        assert_that(result.data, equal_to({
            "users": [
                {"username": "first", "tags": [{"name": "python"}, {"name": "sql"}]},
                {"username": "second", "tags": [{"name": "graphql"}]},
            ],
        }))

    def test_optional_child_resolves_to_record_when_present(self):
        user = self.add_user("tester")
        self.session.add(database.Profile(bio="Writes things", user_id=user.id))
        self.session.commit()

        result = self.resolve("query { users { profile { bio user { username } } } }")

        assert_that(result.data, equal_to({
            "users": [{"profile": {"bio": "Writes things", "user": {"username": "tester"}}}],
        }))

    def test_optional_child_resolves_to_null_when_absent(self):
        self.add_user("tester")

        result = self.resolve("query { users { profile { bio } } }")

        assert_that(result, has_attrs(
            errors=None,
            data=equal_to({"users": [{"profile": None}]}),
        ))

    def test_optional_parent_resolves_to_record_when_present(self):
        author = self.add_user("author")
        editor = self.add_user("editor")
        self.add_article("Hello", user_id=author.id, editor_id=editor.id)

        result = self.resolve("query { articles { editor { username } } }")

        assert_that(result.data, equal_to({"articles": [{"editor": {"username": "editor"}}]}))

    def test_optional_parent_resolves_to_null_when_foreign_key_is_null(self):
        author = self.add_user("author")
        self.add_article("Hello", user_id=author.id)

        result = self.resolve("query { articles { editor { username } } }")

        assert_that(result, has_attrs(
            errors=None,
            data=equal_to({"articles": [{"editor": None}]}),
        ))

    def test_optional_parent_resolves_to_null_when_reference_is_dangling(self):
        author = self.add_user("author")
        self.add_article("Hello", user_id=author.id, editor_id=author.id + 100)

        result = self.resolve("query { articles { editor { username } } }")

        assert_that(result, has_attrs(
            errors=None,
            data=equal_to({"articles": [{"editor": None}]}),
        ))

    def test_parent_fails_when_reference_is_dangling(self):
        self.add_article("Hello", user_id=42)

        result = self.resolve("query { articles { title user { username } } }")

        assert_that(result, has_attrs(
            data=None,
            errors=contains_exactly(
                has_attrs(path=equal_to(["articles", 0, "user"])),
            ),
        ))


class TestRelationshipChecks(object):
    def test_children_requires_one_to_many_relationship(self):
        with pytest.raises(graphroute.RelationshipError):
            graphroute.children(graph.User, database.Article.user)

    def test_children_rejects_one_to_one_relationship(self):
        with pytest.raises(graphroute.RelationshipError):
            graphroute.children(graph.Profile, database.User.profile)

    def test_siblings_requires_many_to_many_relationship(self):
        with pytest.raises(graphroute.RelationshipError):
            graphroute.siblings(graph.Article, database.User.articles)

    def test_parent_requires_many_to_one_relationship(self):
        with pytest.raises(graphroute.RelationshipError):
            graphroute.parent(graph.Article, database.User.articles)

    def test_optional_child_requires_one_to_one_relationship(self):
        with pytest.raises(graphroute.RelationshipError):
            graphroute.optional_child(graph.Article, database.User.articles)

    def test_column_attributes_are_rejected(self):
        with pytest.raises(graphroute.RelationshipError):
            graphroute.parent(graph.User, database.Article.title)

    def test_field_type_reflects_cardinality(self):
        Named = GraphQLObjectType("Named", fields={"name": GraphQLField(GraphQLString)})

        assert_that(str(graphroute.children(Named, database.User.articles).type), equal_to("[Named!]!"))
        assert_that(str(graphroute.siblings(Named, database.User.tags).type), equal_to("[Named!]!"))
        assert_that(str(graphroute.parent(GraphQLNonNull(Named), database.Article.user).type), equal_to("Named!"))
        assert_that(str(graphroute.optional_parent(Named, database.Article.editor).type), equal_to("Named"))
        assert_that(str(graphroute.optional_child(Named, database.User.profile).type), equal_to("Named"))

    def test_description_is_set_on_field(self):
        field = graphroute.children(graph.Article, database.User.articles, description="Written articles")

        assert_that(field.description, equal_to("Written articles"))
