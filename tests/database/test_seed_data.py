"""
Tests for the sample data seed
"""

import random

import pytest

from stackshop.auth.passwords import is_password_hash, verify_password
from stackshop.database.seed_data import SeedData, load_sample_data, seed_database


@pytest.fixture
def small_data():
    return SeedData(
        users=[
            {"username": "amiko2k20", "email": "amiko2k20@example.com", "password": "password01"},
            {"username": "tamarmeyer", "email": "tamar@example.com", "password": "password02"},
        ],
        posts=[{"title": f"Post {i}", "content": f"Body {i}"} for i in range(6)],
        techs=[{"name": "Python"}, {"name": "MongoDB"}, {"name": "GraphQL"}],
        products=[
            {
                "name": "Sticker Pack",
                "description": "Stickers",
                "image": "stickers.jpg",
                "price": 4.0,
                "quantity": 100,
            }
        ],
    )


@pytest.mark.asyncio
async def test_seed_loads_every_collection(db, small_data):
    summary = await seed_database(db, rng=random.Random(7), data=small_data)

    assert (summary.users, summary.posts, summary.techs, summary.products) == (2, 6, 3, 1)
    assert db.sync["users"].count_documents({}) == 2
    assert db.sync["posts"].count_documents({}) == 6
    assert db.sync["techs"].count_documents({}) == 3
    assert db.sync["products"].count_documents({}) == 1


@pytest.mark.asyncio
async def test_every_post_has_one_author_and_one_tech(db, small_data):
    await seed_database(db, rng=random.Random(7), data=small_data)

    users = list(db.sync["users"].find())
    techs = list(db.sync["techs"].find())
    for post in db.sync["posts"].find():
        assert len(post["tech"]) == 1
        tech = next(t for t in techs if t["_id"] == post["tech"][0])
        assert post["_id"] in tech["posts"]

        authors = [u for u in users if post["_id"] in u["posts"]]
        assert len(authors) == 1
        assert post["author"] == authors[0]["username"]

    assert sum(len(u["posts"]) for u in users) == 6
    assert sum(len(t["posts"]) for t in techs) == 6


@pytest.mark.asyncio
async def test_seeded_passwords_are_hashed(db, small_data):
    await seed_database(db, rng=random.Random(1), data=small_data)

    user = db.sync["users"].find_one({"username": "amiko2k20"})
    assert is_password_hash(user["password"])
    assert verify_password("password01", user["password"])


@pytest.mark.asyncio
async def test_same_seed_gives_same_pairing(db, small_data):
    def pairing():
        techs = {t["_id"]: t["name"] for t in db.sync["techs"].find()}
        return sorted(
            (post["title"], post["author"], techs[post["tech"][0]])
            for post in db.sync["posts"].find()
        )

    await seed_database(db, rng=random.Random(42), data=small_data)
    first = pairing()
    await seed_database(db, rng=random.Random(42), data=small_data)

    assert pairing() == first


@pytest.mark.asyncio
async def test_rerun_replaces_previous_contents(db, small_data, make_user):
    make_user(username="stale", email="stale@example.com")

    await seed_database(db, rng=random.Random(3), data=small_data)
    await seed_database(db, rng=random.Random(3), data=small_data)

    assert db.sync["users"].find_one({"username": "stale"}) is None
    assert db.sync["users"].count_documents({}) == 2
    assert db.sync["techs"].count_documents({}) == 3


@pytest.mark.asyncio
async def test_seed_needs_users_and_techs(db, small_data):
    small_data.techs = []

    with pytest.raises(ValueError):
        await seed_database(db, data=small_data)


def test_bundled_sample_data():
    data = load_sample_data()

    assert data.users and data.posts and data.techs and data.products
    assert len({tech["name"] for tech in data.techs}) == len(data.techs)
    assert len({user["email"] for user in data.users}) == len(data.users)
    for product in data.products:
        assert {"name", "description", "image", "price", "quantity"} <= product.keys()
