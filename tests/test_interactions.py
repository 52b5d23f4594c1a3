"""Comments, likes and saved articles."""

import pytest

from linguacontent.models.interaction_model import Comment


pytestmark = pytest.mark.usefixtures("seeded")


async def _article_id(client, slug="common-greetings"):
    response = await client.get(f"/api/articles/{slug}")
    return response.json()["id"]


async def test_comment_tree_nests_replies(client, register_user):
    alice = await register_user("alice")
    bob = await register_user("bob")
    slug = "common-greetings"

    root = await client.post(f"/api/articles/{slug}/comments", json={"content": "Very useful"},
                             headers=alice["headers"])
    assert root.status_code == 201
    root_id = root.json()["id"]

    reply = await client.post(f"/api/articles/{slug}/comments",
                              json={"content": "Agreed", "parent_id": root_id}, headers=bob["headers"])
    nested = await client.post("/api/comments", json={
        "article_id": await _article_id(client, slug),
        "content": "Me too",
        "parent_id": reply.json()["id"],
    }, headers=alice["headers"])
    assert nested.status_code == 201
    await client.post(f"/api/articles/{slug}/comments", json={"content": "Second thread"},
                      headers=bob["headers"])

    response = await client.get(f"/api/articles/{slug}/comments")

    assert response.status_code == 200
    tree = response.json()
    assert [c["content"] for c in tree] == ["Very useful", "Second thread"]
    assert tree[0]["user"]["username"] == "alice"
    assert tree[0]["replies"][0]["content"] == "Agreed"
    assert tree[0]["replies"][0]["user"]["username"] == "bob"
    assert tree[0]["replies"][0]["replies"][0]["content"] == "Me too"
    assert tree[1]["replies"] == []


async def test_comment_requires_authentication(client):
    response = await client.post("/api/articles/common-greetings/comments", json={"content": "Hello"})

    assert response.status_code == 401


async def test_comment_on_unknown_article(client, user_headers):
    response = await client.post("/api/comments", json={"article_id": 9999, "content": "Hello"},
                                 headers=user_headers)

    assert response.status_code == 404


async def test_reply_to_missing_parent(client, user_headers):
    response = await client.post("/api/articles/common-greetings/comments",
                                 json={"content": "Hello", "parent_id": 9999}, headers=user_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Parent comment not found"


async def test_reply_parent_must_belong_to_same_article(client, user_headers):
    parent = await client.post("/api/articles/common-greetings/comments", json={"content": "First"},
                               headers=user_headers)

    response = await client.post("/api/articles/global-holidays/comments",
                                 json={"content": "Wrong thread", "parent_id": parent.json()["id"]},
                                 headers=user_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Parent comment belongs to another article"


@pytest.mark.parametrize("content", ["", "x" * 1001])
async def test_comment_content_length(client, user_headers, content):
    response = await client.post("/api/articles/common-greetings/comments", json={"content": content},
                                 headers=user_headers)

    assert response.status_code == 422


async def test_comment_by_removed_user_shows_unknown(client, db):
    article_id = await _article_id(client)
    db.add(Comment(article_id=article_id, user_id=4242, content="Orphaned"))
    await db.commit()

    response = await client.get("/api/articles/common-greetings/comments")

    assert response.json()[0]["user"] == {"id": 0, "username": "Unknown"}


async def test_like_is_idempotent(client, register_user):
    reader = await register_user("reader")
    article_id = await _article_id(client)

    first = await client.post("/api/articles/like", json={"article_id": article_id}, headers=reader["headers"])
    second = await client.post("/api/articles/like", json={"article_id": article_id}, headers=reader["headers"])

    assert first.status_code == 201
    assert second.status_code == 201
    assert first.json()["id"] == second.json()["id"]

    status = await client.get("/api/articles/common-greetings/like", headers=reader["headers"])
    assert status.json() == {"liked": True, "like_count": 1}


async def test_like_counts_across_users(client, register_user):
    article_id = await _article_id(client)
    for name in ("one", "two", "three"):
        user = await register_user(name)
        await client.post("/api/articles/like", json={"article_id": article_id}, headers=user["headers"])

    article = await client.get("/api/articles/common-greetings")

    assert article.json()["like_count"] == 3


async def test_unlike(client, user_headers):
    article_id = await _article_id(client)
    await client.post("/api/articles/like", json={"article_id": article_id}, headers=user_headers)

    response = await client.delete(f"/api/articles/{article_id}/like", headers=user_headers)

    assert response.status_code == 204
    status = await client.get("/api/articles/common-greetings/like", headers=user_headers)
    assert status.json() == {"liked": False, "like_count": 0}


async def test_unlike_without_like_is_no_op(client, user_headers):
    article_id = await _article_id(client)

    response = await client.delete(f"/api/articles/{article_id}/like", headers=user_headers)

    assert response.status_code == 204


async def test_like_unknown_article(client, user_headers):
    response = await client.post("/api/articles/like", json={"article_id": 9999}, headers=user_headers)

    assert response.status_code == 404


async def test_anonymous_like_status(client, register_user):
    reader = await register_user("reader")
    article_id = await _article_id(client)
    await client.post("/api/articles/like", json={"article_id": article_id}, headers=reader["headers"])

    response = await client.get("/api/articles/common-greetings/like")

    assert response.status_code == 200
    assert response.json() == {"liked": False, "like_count": 1}


async def test_save_and_unsave(client, user_headers):
    article_id = await _article_id(client)

    saved = await client.post("/api/articles/save", json={"article_id": article_id}, headers=user_headers)
    again = await client.post("/api/articles/save", json={"article_id": article_id}, headers=user_headers)

    assert saved.status_code == 201
    assert saved.json()["id"] == again.json()["id"]
    status = await client.get("/api/articles/common-greetings/save", headers=user_headers)
    assert status.json() == {"saved": True}

    removed = await client.delete(f"/api/articles/{article_id}/save", headers=user_headers)

    assert removed.status_code == 204
    status = await client.get("/api/articles/common-greetings/save", headers=user_headers)
    assert status.json() == {"saved": False}


async def test_anonymous_save_status(client):
    response = await client.get("/api/articles/common-greetings/save")

    assert response.status_code == 200
    assert response.json() == {"saved": False}


async def test_saved_articles_in_save_order(client, user_headers):
    for slug in ("global-holidays", "common-greetings", "restaurant-phrases"):
        await client.post("/api/articles/save", json={"article_id": await _article_id(client, slug)},
                          headers=user_headers)

    response = await client.get("/api/user/saved-articles", params={"lang": "de"}, headers=user_headers)

    assert response.status_code == 200
    saved = response.json()
    assert [a["slug"] for a in saved] == ["global-holidays", "common-greetings", "restaurant-phrases"]
    assert saved[0]["subject"]["slug"] == "holidays-and-celebrations"


async def test_saved_articles_are_private(client, register_user, user_headers):
    other = await register_user("other")
    await client.post("/api/articles/save", json={"article_id": await _article_id(client)},
                      headers=user_headers)

    response = await client.get("/api/user/saved-articles", headers=other["headers"])

    assert response.json() == []


async def test_saved_articles_unknown_language(client, user_headers):
    response = await client.get("/api/user/saved-articles", params={"lang": "xx"}, headers=user_headers)

    assert response.status_code == 404


async def test_saved_articles_require_authentication(client):
    response = await client.get("/api/user/saved-articles")

    assert response.status_code == 401
