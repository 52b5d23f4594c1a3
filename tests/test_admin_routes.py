import pytest


pytestmark = pytest.mark.usefixtures("seeded")


def _submission(slug="travel-tips", subject_slug="at-the-airport", translations=None):
    return {
        "slug": slug,
        "subject_slug": subject_slug,
        "translations": translations or {
            "en": {"title": "Travel Tips", "content": "Pack light."},
            "fr": {"title": "Conseils de voyage", "content": "Voyagez léger.", "notes": "Court"},
        },
    }


async def _submit(client, headers, **kwargs):
    response = await client.post("/api/articles", json=_submission(**kwargs), headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_submitted_article_is_pending(client, user_headers):
    submitted = await _submit(client, user_headers)

    assert submitted["status"] == "pending"
    assert submitted["languages"] == ["en", "fr"]

    public = await client.get("/api/articles/travel-tips")
    assert public.status_code == 404
    listing = await client.get("/api/subjects/at-the-airport/articles")
    assert [a["slug"] for a in listing.json()] == ["airport-navigation"]


async def test_submit_requires_authentication(client):
    response = await client.post("/api/articles", json=_submission())

    assert response.status_code == 401


async def test_submit_duplicate_slug(client, user_headers):
    response = await client.post("/api/articles", json=_submission(slug="airport-navigation"),
                                 headers=user_headers)

    assert response.status_code == 409


async def test_submit_unknown_subject(client, user_headers):
    response = await client.post("/api/articles", json=_submission(subject_slug="nowhere"),
                                 headers=user_headers)

    assert response.status_code == 404
    assert response.json()["detail"] == "Subject not found"


async def test_submit_unknown_language(client, user_headers):
    translations = {
        "en": {"title": "Travel Tips", "content": "Pack light."},
        "xx": {"title": "???", "content": "???"},
    }
    response = await client.post("/api/articles", json=_submission(translations=translations),
                                 headers=user_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Unknown language code(s): xx"


async def test_submit_same_language_twice_in_different_case(client, user_headers):
    translations = {
        "en": {"title": "Travel Tips", "content": "Pack light."},
        "EN": {"title": "Travel Tips Again", "content": "Pack lighter."},
    }
    response = await client.post("/api/articles", json=_submission(translations=translations),
                                 headers=user_headers)

    assert response.status_code == 400
    assert response.json()["detail"] == "Duplicate language code(s): en"

    # nothing was stored under the slug
    retry = await client.post("/api/articles", json=_submission(), headers=user_headers)
    assert retry.status_code == 201


async def test_popular_slug_is_reserved(client, user_headers):
    response = await client.post("/api/articles", json=_submission(slug="popular"), headers=user_headers)

    assert response.status_code == 422

    feed = await client.get("/api/articles/popular")
    assert isinstance(feed.json(), list)


@pytest.mark.parametrize("payload", [
    _submission(slug="Not A Slug"),
    {"slug": "no-translations", "subject_slug": "at-the-airport", "translations": {}},
    _submission(translations={"en": {"title": "", "content": "Body"}}),
])
async def test_submit_invalid_payload(client, user_headers, payload):
    response = await client.post("/api/articles", json=payload, headers=user_headers)

    assert response.status_code == 422


@pytest.mark.parametrize("method, path", [
    ("get", "/api/admin/pending-articles"),
    ("post", "/api/admin/articles/1/approve"),
    ("post", "/api/admin/articles/1/reject"),
    ("get", "/api/admin/messages"),
    ("post", "/api/admin/seed"),
    ("get", "/api/admin/cleanup/status"),
    ("post", "/api/admin/cleanup/run-now"),
])
async def test_admin_routes_reject_regular_users(client, user_headers, method, path):
    response = await getattr(client, method)(path, headers=user_headers)

    assert response.status_code == 401


async def test_admin_routes_reject_anonymous(client):
    response = await client.get("/api/admin/pending-articles")

    assert response.status_code == 401


async def test_pending_articles_listed_with_author(client, user_headers, admin_headers):
    await _submit(client, user_headers)

    response = await client.get("/api/admin/pending-articles", headers=admin_headers)

    assert response.status_code == 200
    pending = response.json()
    assert len(pending) == 1
    assert pending[0]["slug"] == "travel-tips"
    assert pending[0]["title"] == "Travel Tips"
    assert pending[0]["author"]["username"] == "reader"
    assert pending[0]["available_languages"] == ["en", "fr"]


async def test_approve_publishes_article(client, user_headers, admin_headers):
    submitted = await _submit(client, user_headers)

    response = await client.post(f"/api/admin/articles/{submitted['id']}/approve", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"id": submitted["id"], "slug": "travel-tips", "status": "approved"}

    public = await client.get("/api/articles/travel-tips", params={"lang": "fr"})
    assert public.status_code == 200
    assert public.json()["title"] == "Conseils de voyage"
    assert public.json()["published_at"] is not None

    pending = await client.get("/api/admin/pending-articles", headers=admin_headers)
    assert pending.json() == []


async def test_reject_keeps_article_hidden(client, user_headers, admin_headers):
    submitted = await _submit(client, user_headers)

    response = await client.post(f"/api/admin/articles/{submitted['id']}/reject", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["status"] == "rejected"
    assert (await client.get("/api/articles/travel-tips")).status_code == 404
    assert (await client.get("/api/admin/pending-articles", headers=admin_headers)).json() == []


@pytest.mark.parametrize("action", ["approve", "reject"])
async def test_moderate_unknown_article(client, admin_headers, action):
    response = await client.post(f"/api/admin/articles/9999/{action}", headers=admin_headers)

    assert response.status_code == 404


async def test_messages_newest_first(client, user_headers, admin_headers):
    first = await client.post("/api/messages", json={"content": "Typo in the greetings article"},
                              headers=user_headers)
    await client.post("/api/messages", json={"content": "Please add Italian"}, headers=user_headers)

    assert first.status_code == 201
    assert first.json()["user"]["username"] == "reader"

    response = await client.get("/api/admin/messages", headers=admin_headers)

    assert response.status_code == 200
    assert [m["content"] for m in response.json()] == ["Please add Italian", "Typo in the greetings article"]


async def test_message_requires_content(client, user_headers):
    response = await client.post("/api/messages", json={"content": ""}, headers=user_headers)

    assert response.status_code == 422


async def test_seed_is_idempotent(client, admin_headers):
    response = await client.post("/api/admin/seed", headers=admin_headers)

    assert response.status_code == 200
    assert response.json() == {"inserted": {"languages": 0, "categories": 0, "subjects": 0, "articles": 0}}
    categories = await client.get("/api/categories")
    assert len(categories.json()) == 8


async def test_cleanup_status(client, admin_headers):
    response = await client.get("/api/admin/cleanup/status", headers=admin_headers)

    assert response.status_code == 200
    status = response.json()
    assert status["running"] is False
    assert status["interval_hours"] == 24
    assert "server_time_utc" in status


async def test_cleanup_run_now(client, admin_headers):
    before = (await client.get("/api/admin/cleanup/status", headers=admin_headers)).json()["run_count"]

    response = await client.post("/api/admin/cleanup/run-now", headers=admin_headers)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["deleted_count"] == 0
    assert body["total_runs"] == before + 1
