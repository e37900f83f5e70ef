"""Post API tests."""

import pytest
from bson import ObjectId


async def _create_post(client, user, title="Hello", content="World"):
    r = await client.post(
        "/post", json={"title": title, "content": content}, headers=user["headers"]
    )
    assert r.status_code == 200
    return r.json()


@pytest.mark.asyncio
async def test_create_post(client, make_user):
    user = await make_user()
    post = await _create_post(client, user)
    assert post["title"] == "Hello"
    assert post["content"] == "World"
    assert post["sender"] == user["id"]
    assert "_id" in post


@pytest.mark.asyncio
async def test_create_post_sender_comes_from_token(client, make_user):
    user = await make_user()
    other = await make_user()
    r = await client.post(
        "/post",
        json={"title": "t", "content": "c", "sender": other["id"]},
        headers=user["headers"],
    )
    assert r.status_code == 200
    assert r.json()["sender"] == user["id"]


@pytest.mark.asyncio
async def test_create_post_missing_fields(client, make_user):
    user = await make_user()
    r = await client.post("/post", headers=user["headers"])
    assert r.status_code == 400

    r = await client.post("/post", json={"title": "no content"}, headers=user["headers"])
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_list_posts_by_sender(client, make_user):
    alice = await make_user()
    bob = await make_user()
    await _create_post(client, alice, title="a1")
    await _create_post(client, alice, title="a2")
    await _create_post(client, bob, title="b1")

    r = await client.get("/post", headers=alice["headers"])
    assert len(r.json()) == 3

    r = await client.get(f"/post?sender={alice['id']}", headers=alice["headers"])
    assert sorted(p["title"] for p in r.json()) == ["a1", "a2"]

    r = await client.get(f"/post?sender={ObjectId()}", headers=alice["headers"])
    assert r.json() == []


@pytest.mark.asyncio
async def test_list_posts_bad_sender(client, make_user):
    user = await make_user()
    r = await client.get("/post?sender=nope", headers=user["headers"])
    assert r.status_code == 400


@pytest.mark.asyncio
async def test_get_post(client, make_user):
    user = await make_user()
    post = await _create_post(client, user)

    r = await client.get(f"/post/{post['_id']}", headers=user["headers"])
    assert r.status_code == 200
    assert r.json() == post

    r = await client.get("/post/not-an-id", headers=user["headers"])
    assert r.status_code == 400
    assert r.json()["detail"] == "Invalid Post Id"

    r = await client.get(f"/post/{ObjectId()}", headers=user["headers"])
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_update_post(client, make_user):
    user = await make_user()
    post = await _create_post(client, user)

    r = await client.put(
        f"/post/{post['_id']}",
        json={"title": "New", "content": "Body"},
        headers=user["headers"],
    )
    assert r.status_code == 200
    assert r.json()["title"] == "New"
    assert r.json()["sender"] == user["id"]


@pytest.mark.asyncio
async def test_update_missing_post(client, make_user):
    user = await make_user()
    r = await client.put(
        f"/post/{ObjectId()}", json={"title": "t", "content": "c"}, headers=user["headers"]
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_block_editing_other_users_post(client, make_user):
    owner = await make_user()
    intruder = await make_user()
    post = await _create_post(client, owner)

    r = await client.put(
        f"/post/{post['_id']}",
        json={"title": "Hacked", "content": "Hacked"},
        headers=intruder["headers"],
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "Unauthorized"

    r = await client.get(f"/post/{post['_id']}", headers=owner["headers"])
    assert r.json()["title"] == "Hello"


@pytest.mark.asyncio
async def test_delete_post(client, make_user):
    owner = await make_user()
    intruder = await make_user()
    post = await _create_post(client, owner)

    r = await client.delete(f"/post/{post['_id']}", headers=intruder["headers"])
    assert r.status_code == 400

    r = await client.delete(f"/post/{post['_id']}", headers=owner["headers"])
    assert r.status_code == 200

    r = await client.get(f"/post/{post['_id']}", headers=owner["headers"])
    assert r.status_code == 404
