"""
Community API: posts, upvotes and threaded replies over HTTP
"""
from sqlalchemy import func, select

from app.models import PostReply, PostUpvote
from tests.conftest import auth_headers, make_post, make_profile, make_reply, make_topic, utc


async def test_topics(client, db, author):
    await make_topic(db, "design")

    created = await client.post(
        "/api/community/topics",
        json={"name": "Marketing", "slug": "marketing"},
        headers=auth_headers(author.profile_id),
    )
    assert created.status_code == 200

    duplicate = await client.post(
        "/api/community/topics",
        json={"name": "Marketing again", "slug": "marketing"},
        headers=auth_headers(author.profile_id),
    )
    assert duplicate.status_code == 409

    listed = await client.get("/api/community/topics")
    assert listed.json()["data"] == [
        {"name": "Design", "slug": "design"},
        {"name": "Marketing", "slug": "marketing"},
    ]


async def test_create_post_requires_login(client, topic):
    response = await client.post(
        "/api/community/posts",
        json={"title": "Hi", "category": "productivity", "content": "Hello"},
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/auth/login"


async def test_invalid_token_redirects_to_login(client, topic):
    response = await client.post(
        "/api/community/posts",
        json={"title": "Hi", "category": "productivity", "content": "Hello"},
        headers={"Authorization": "Bearer not-a-token"},
    )

    assert response.status_code == 303


async def test_create_and_read_post(client, author, topic):
    created = await client.post(
        "/api/community/posts",
        json={"title": "  Best tools?  ", "category": "productivity", "content": "Share yours"},
        headers=auth_headers(author.profile_id),
    )
    assert created.status_code == 200
    post_id = created.json()["data"]["id"]

    response = await client.get(f"/api/community/posts/{post_id}")
    data = response.json()["data"]
    assert data["title"] == "Best tools?"
    assert data["topicSlug"] == "productivity"
    assert data["author"]["username"] == "nico"
    assert data["upvotes"] == 0
    assert data["replies"] == 0


async def test_create_post_in_unknown_topic(client, author, topic):
    response = await client.post(
        "/api/community/posts",
        json={"title": "Hi", "category": "nope", "content": "Hello"},
        headers=auth_headers(author.profile_id),
    )

    assert response.status_code == 404
    assert response.json()["data"]["errors"] == {"category": "unknown topic"}


async def test_post_form_validation(client, author, topic):
    response = await client.post(
        "/api/community/posts",
        json={"title": "x" * 41, "category": "productivity", "content": ""},
        headers=auth_headers(author.profile_id),
    )

    assert response.status_code == 422
    fields = {error["loc"][-1] for error in response.json()["detail"]}
    assert fields == {"title", "content"}


async def test_post_counts_are_aggregated_on_read(client, db, author, post):
    lynn = await make_profile(db, "lynn")
    top = await make_reply(db, lynn, "top", post=post)
    await make_reply(db, author, "child", parent=top)
    await make_reply(db, author, "another top", post=post)
    db.add(PostUpvote(post_id=post.post_id, profile_id=lynn.profile_id))
    await db.commit()

    response = await client.get(f"/api/community/posts/{post.post_id}")

    data = response.json()["data"]
    assert data["replies"] == 3
    assert data["upvotes"] == 1


async def test_feed_sorting(client, db, author, topic):
    lynn = await make_profile(db, "lynn")
    old_popular = await make_post(db, author, topic, title="old", created_at=utc(2024, 1, 1))
    await make_post(db, author, topic, title="new", created_at=utc(2024, 2, 1))
    db.add_all([
        PostUpvote(post_id=old_popular.post_id, profile_id=author.profile_id),
        PostUpvote(post_id=old_popular.post_id, profile_id=lynn.profile_id),
    ])
    await db.commit()

    newest = await client.get("/api/community/posts")
    assert [p["title"] for p in newest.json()["data"]] == ["new", "old"]

    popular = await client.get("/api/community/posts", params={"sorting": "popular"})
    assert [p["title"] for p in popular.json()["data"]] == ["old", "new"]

    # both posts are far older than the current day
    today = await client.get("/api/community/posts", params={"sorting": "popular", "period": "today"})
    assert today.json()["data"] == []

    bad = await client.get("/api/community/posts", params={"sorting": "random"})
    assert bad.status_code == 422


async def test_feed_topic_filter(client, db, author, topic, post):
    design = await make_topic(db, "design")
    await make_post(db, author, design, title="Figma tips")

    response = await client.get("/api/community/posts", params={"topic": "design"})

    assert [p["title"] for p in response.json()["data"]] == ["Figma tips"]


async def test_post_upvote_toggle(client, author, post):
    headers = auth_headers(author.profile_id)

    first = await client.post(f"/api/community/posts/{post.post_id}/upvote", headers=headers)
    second = await client.post(f"/api/community/posts/{post.post_id}/upvote", headers=headers)

    assert first.json()["data"] == {"postId": post.post_id, "upvoted": True, "upvotes": 1}
    assert second.json()["data"] == {"postId": post.post_id, "upvoted": False, "upvotes": 0}


async def test_reply_thread_over_http(client, db, author, post):
    lynn = await make_profile(db, "lynn")

    top = await client.post(
        f"/api/community/posts/{post.post_id}/replies",
        json={"reply": "Try Notion"},
        headers=auth_headers(lynn.profile_id),
    )
    assert top.status_code == 201
    top_data = top.json()["data"]
    assert top_data["level"] == "top"
    assert top_data["postId"] == post.post_id
    assert top_data["parentId"] is None

    child = await client.post(
        f"/api/community/posts/{post.post_id}/replies",
        json={"reply": "Not for me", "topLevelId": top_data["id"]},
        headers=auth_headers(author.profile_id),
    )
    child_data = child.json()["data"]
    assert child_data["level"] == "second"
    assert child_data["postId"] is None
    assert child_data["parentId"] == top_data["id"]

    listed = await client.get(f"/api/community/posts/{post.post_id}/replies")
    replies = listed.json()["data"]
    assert len(replies) == 1
    assert replies[0]["text"] == "Try Notion"
    assert replies[0]["author"] == {"name": "Lynn", "username": "lynn", "avatar": "https://example.com/lynn.png"}
    assert [r["text"] for r in replies[0]["replies"]] == ["Not for me"]
    assert "replies" not in replies[0]["replies"][0]


async def test_reply_cannot_target_a_second_level_reply(client, db, author, post):
    top = await make_reply(db, author, "top", post=post)
    child = await make_reply(db, author, "child", parent=top)

    response = await client.post(
        f"/api/community/posts/{post.post_id}/replies",
        json={"reply": "deeper", "topLevelId": child.post_reply_id},
        headers=auth_headers(author.profile_id),
    )

    assert response.status_code == 404
    result = await db.execute(select(func.count()).select_from(PostReply))
    assert result.scalar_one() == 2


async def test_empty_reply_is_rejected(client, author, post):
    response = await client.post(
        f"/api/community/posts/{post.post_id}/replies",
        json={"reply": "   "},
        headers=auth_headers(author.profile_id),
    )

    assert response.status_code == 422
    assert response.json()["detail"][0]["loc"][-1] == "reply"


async def test_non_numeric_post_id_gives_field_error(client):
    response = await client.get("/api/community/posts/abc/replies")

    assert response.status_code == 400
    body = response.json()
    assert body["data"]["errorCode"] == "invalid_identifier"
    assert body["data"]["errors"] == {"post_id": "must be a positive integer"}


async def test_unknown_post(client, author):
    assert (await client.get("/api/community/posts/12345")).status_code == 404
    reply = await client.post(
        "/api/community/posts/12345/replies",
        json={"reply": "hello?"},
        headers=auth_headers(author.profile_id),
    )
    assert reply.status_code == 404


async def test_only_author_can_delete(client, db, author, post):
    lynn = await make_profile(db, "lynn")
    await make_reply(db, lynn, "reply", post=post)

    forbidden = await client.delete(f"/api/community/posts/{post.post_id}", headers=auth_headers(lynn.profile_id))
    assert forbidden.status_code == 403

    deleted = await client.delete(f"/api/community/posts/{post.post_id}", headers=auth_headers(author.profile_id))
    assert deleted.status_code == 200
    assert (await client.get(f"/api/community/posts/{post.post_id}")).status_code == 404

    result = await db.execute(select(func.count()).select_from(PostReply))
    assert result.scalar_one() == 0


async def test_oversized_ids_are_rejected_as_invalid(client, author, post):
    huge = "99999999999999999999999"

    for path in (f"/api/community/posts/{huge}", f"/api/community/posts/{huge}/replies"):
        response = await client.get(path)
        assert response.status_code == 400
        assert response.json()["data"]["errors"] == {"post_id": "must be a positive integer"}

    reply = await client.post(
        f"/api/community/posts/{post.post_id}/replies",
        json={"reply": "hi", "topLevelId": int(huge)},
        headers=auth_headers(author.profile_id),
    )
    assert reply.status_code == 422
    assert reply.json()["detail"][0]["loc"][-1] == "topLevelId"
