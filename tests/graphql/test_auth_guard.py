"""
Operations that act on the current user must refuse anonymous requests
before touching the store.
"""

import pytest

from stackshop.graphql.schema import schema

from helpers import graphql_context, new_id

COLLECTIONS = ("users", "posts", "techs", "products")


def snapshot(db):
    return {name: list(db.sync[name].find({})) for name in COLLECTIONS}


PROTECTED_OPERATIONS = [
    ("updateUser", 'mutation { updateUser(username: "renamed") { _id } }'),
    ("order", "query { order(_id: \"%s\") { _id } }" % new_id()),
    ("addPost", 'mutation { addPost(title: "t", content: "c") { _id } }'),
    ("deletePost", 'mutation { deletePost(postId: "%s") { _id } }' % new_id()),
    ("addOrder", 'mutation { addOrder(products: ["%s"]) { _id } }' % new_id()),
    ("addTech", 'mutation { addTech(postId: "%s", name: "Rust") { _id } }' % new_id()),
    ("user", "query { user { _id } }"),
]


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize("field, query", PROTECTED_OPERATIONS, ids=[op for op, _ in PROTECTED_OPERATIONS])
async def test_anonymous_request_is_refused(db, make_user, make_product, make_post, field, query):
    make_user()
    make_product()
    make_post()
    before = snapshot(db)

    result = await schema.execute(query, context_value=graphql_context())

    assert result.errors is not None
    assert [error.message for error in result.errors] == ["Not logged in"]
    assert result.errors[0].path == [field]
    assert snapshot(db) == before


@pytest.mark.unit
@pytest.mark.asyncio
async def test_invalid_token_is_treated_as_anonymous(db, make_user):
    make_user()
    headers = {"authorization": "Bearer not-a-jwt"}

    result = await schema.execute(
        'mutation { addPost(title: "t", content: "c") { _id } }',
        context_value=graphql_context(headers),
    )

    assert [error.message for error in result.errors] == ["Not logged in"]
    assert db.sync["posts"].count_documents({}) == 0


@pytest.mark.unit
@pytest.mark.asyncio
async def test_public_reads_need_no_token(db, make_user, make_product, make_post):
    make_user()
    make_product()
    make_post()

    result = await schema.execute(
        "query { users { _id } posts { _id } techs { _id } products { _id } }",
        context_value=graphql_context(),
    )

    assert result.errors is None
    assert len(result.data["users"]) == 1
    assert len(result.data["posts"]) == 1
    assert result.data["techs"] == []
    assert len(result.data["products"]) == 1
