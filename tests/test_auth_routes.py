import pytest
from sqlalchemy import select, func

from linguacontent.models.user_model import TokenModel, UserModel
from linguacontent.repositories.user_repository import BootstrapAdminRepository


DEFAULT_PASSWORD = "s3cure-Passw0rd"


async def test_register_returns_user_and_sets_refresh_cookie(client):
    response = await client.post("/api/register", json={
        "username": "newcomer",
        "email": "NewComer@Example.com",
        "password": DEFAULT_PASSWORD,
    })

    assert response.status_code == 201
    body = response.json()
    assert body["access_token"]
    assert body["user"]["username"] == "newcomer"
    assert body["user"]["email"] == "newcomer@example.com"
    assert body["user"]["role"] == "user"
    assert body["user"]["is_admin"] is False
    assert "refresh_token" not in body
    assert response.cookies.get("refresh_token")
    assert response.headers["X-Frame-Options"] == "DENY"


@pytest.mark.parametrize("username, email", [
    ("reader", "someone-else@example.com"),
    ("someone-else", "reader@example.com"),
])
async def test_register_duplicate_username_or_email(client, register_user, username, email):
    await register_user("reader")

    response = await client.post("/api/register", json={
        "username": username, "email": email, "password": DEFAULT_PASSWORD,
    })

    assert response.status_code == 409


@pytest.mark.parametrize("payload", [
    {"username": "shorty", "email": "shorty@example.com", "password": "abc"},
    {"username": "common", "email": "common@example.com", "password": "password"},
    {"username": "bad", "email": "not-an-email", "password": DEFAULT_PASSWORD},
    {"username": "two words", "email": "two@example.com", "password": DEFAULT_PASSWORD},
])
async def test_register_rejects_invalid_payload(client, payload):
    response = await client.post("/api/register", json=payload)

    assert response.status_code == 422


async def test_login_with_username(client, register_user):
    await register_user("reader")

    response = await client.post("/api/login", json={"username": "reader", "password": DEFAULT_PASSWORD})

    assert response.status_code == 200
    assert response.json()["user"]["username"] == "reader"
    assert response.cookies.get("refresh_token")


@pytest.mark.parametrize("username, password", [
    ("reader", "wrong-password"),
    ("nobody", DEFAULT_PASSWORD),
])
async def test_login_with_bad_credentials(client, register_user, username, password):
    await register_user("reader")

    response = await client.post("/api/login", json={"username": username, "password": password})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid username or password"


async def test_login_replaces_previous_refresh_tokens(client, register_user, db):
    user = await register_user("reader")

    await client.post("/api/login", json={"username": "reader", "password": DEFAULT_PASSWORD})
    await client.post("/api/login", json={"username": "reader", "password": DEFAULT_PASSWORD})

    count = (await db.execute(
        select(func.count(TokenModel.id)).where(TokenModel.user_id == user["user"]["id"])
    )).scalar_one()
    assert count == 1


async def test_current_user(client, user_headers):
    response = await client.get("/api/user", headers=user_headers)

    assert response.status_code == 200
    assert response.json()["username"] == "reader"
    assert "password" not in response.json()


@pytest.mark.parametrize("headers", [
    {},
    {"Authorization": "Bearer not-a-token"},
    {"Authorization": "Token abc"},
])
async def test_current_user_requires_valid_token(client, headers):
    response = await client.get("/api/user", headers=headers)

    assert response.status_code == 401


async def test_refresh_rotates_the_token(client, register_user):
    await register_user("reader")
    old_token = client.cookies.get("refresh_token")

    response = await client.post("/api/refresh")

    assert response.status_code == 200
    assert response.json()["access_token"]
    assert response.json()["user"]["username"] == "reader"
    new_token = response.cookies.get("refresh_token")
    assert new_token and new_token != old_token

    # the rotated-out token is no longer accepted
    client.cookies.clear()
    replay = await client.post("/api/refresh", headers={"Cookie": f"refresh_token={old_token}"})
    assert replay.status_code == 401


async def test_refresh_without_cookie(client):
    response = await client.post("/api/refresh")

    assert response.status_code == 401


async def test_refresh_with_forged_cookie(client):
    response = await client.post("/api/refresh", headers={"Cookie": "refresh_token=forged"})

    assert response.status_code == 401


async def test_logout_revokes_refresh_token(client, register_user, db):
    user = await register_user("reader")
    token = client.cookies.get("refresh_token")

    response = await client.post("/api/logout", headers=user["headers"])

    assert response.status_code == 200
    assert response.json() == {"message": "Logout successful"}
    remaining = (await db.execute(select(func.count(TokenModel.id)))).scalar_one()
    assert remaining == 0

    client.cookies.clear()
    replay = await client.post("/api/refresh", headers={"Cookie": f"refresh_token={token}"})
    assert replay.status_code == 401


async def test_logout_requires_authentication(client):
    response = await client.post("/api/logout")

    assert response.status_code == 401


async def test_bootstrap_admin_creates_account(db, monkeypatch):
    monkeypatch.setenv("ADMIN_USERNAME", "root")
    monkeypatch.setenv("ADMIN_EMAIL", "Root@Example.com")
    monkeypatch.setenv("ADMIN_PASSWORD", DEFAULT_PASSWORD)

    admin = await BootstrapAdminRepository(db).ensure_admin()

    assert admin.username == "root"
    assert admin.email == "root@example.com"
    assert admin.is_admin


async def test_bootstrap_admin_promotes_existing_user(client, register_user, db, monkeypatch):
    await register_user("promoted")
    monkeypatch.setenv("ADMIN_USERNAME", "promoted")
    monkeypatch.setenv("ADMIN_EMAIL", "promoted@example.com")
    monkeypatch.setenv("ADMIN_PASSWORD", DEFAULT_PASSWORD)

    await BootstrapAdminRepository(db).ensure_admin()

    users = (await db.execute(select(UserModel).where(UserModel.username == "promoted"))).scalars().all()
    assert len(users) == 1
    assert users[0].role == "admin"


async def test_bootstrap_admin_needs_full_configuration(db, monkeypatch):
    monkeypatch.setenv("ADMIN_USERNAME", "root")
    monkeypatch.delenv("ADMIN_EMAIL", raising=False)
    monkeypatch.delenv("ADMIN_PASSWORD", raising=False)

    assert await BootstrapAdminRepository(db).ensure_admin() is None


async def test_admin_flag_reported_after_login(client, admin_headers):
    response = await client.get("/api/user", headers=admin_headers)

    assert response.json()["is_admin"] is True
    assert response.json()["role"] == "admin"
