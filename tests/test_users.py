"""
Profiles API
"""
import uuid

from tests.conftest import auth_headers, make_product, make_post, utc


async def test_register_profile(client):
    profile_id = uuid.uuid4()
    headers = auth_headers(profile_id)

    created = await client.post(
        "/api/users",
        json={"name": "Ana", "username": "ana", "role": "designer"},
        headers=headers,
    )
    assert created.status_code == 200
    assert created.json()["data"]["profileId"] == str(profile_id)

    me = await client.get("/api/users/me", headers=headers)
    assert me.json()["data"]["username"] == "ana"
    assert me.json()["data"]["role"] == "designer"

    again = await client.post("/api/users", json={"name": "Ana", "username": "ana2"}, headers=headers)
    assert again.status_code == 409


async def test_username_must_be_unique(client, author):
    response = await client.post(
        "/api/users",
        json={"name": "Other Nico", "username": "nico"},
        headers=auth_headers(uuid.uuid4()),
    )

    assert response.status_code == 409
    assert response.json()["data"]["errors"] == {"username": "already taken"}


async def test_me_without_profile(client):
    response = await client.get("/api/users/me", headers=auth_headers(uuid.uuid4()))

    assert response.status_code == 404


async def test_public_profile_and_content(client, db, author, topic):
    await make_post(db, author, topic, title="Hello makers")
    await make_product(db, author, "tool", utc(2024, 3, 10, 2))

    profile = await client.get("/api/users/nico")
    assert profile.json()["data"]["name"] == "Nico"

    posts = await client.get("/api/users/nico/posts")
    assert [p["title"] for p in posts.json()["data"]] == ["Hello makers"]

    products = await client.get("/api/users/nico/products")
    assert [p["name"] for p in products.json()["data"]] == ["tool"]


async def test_unknown_username(client):
    assert (await client.get("/api/users/ghost")).status_code == 404
    assert (await client.get("/api/users/ghost/posts")).status_code == 404
