# tests/test_auth_api.py
import pytest

from conftest import register_user


@pytest.mark.asyncio
async def test_register_returns_user_and_token(async_client):
    response = await async_client.post(
        "/api/auth/register",
        json={"email": "ada@example.com", "password": "secret123", "name": "Ada"},
    )
    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "ada@example.com"
    assert body["user"]["plan"] == "free"
    assert "passwordHash" not in body["user"]
    assert "password_hash" not in body["user"]
    assert body["token"]


@pytest.mark.asyncio
async def test_duplicate_email_is_rejected(async_client):
    await register_user(async_client, "ada@example.com")
    response = await async_client.post(
        "/api/auth/register",
        json={"email": "ADA@example.com", "password": "secret123", "name": "Ada 2"},
    )
    assert response.status_code == 400
    assert response.json()["message"] == "User already exists"


@pytest.mark.asyncio
@pytest.mark.parametrize("payload", [
    {"email": "not-an-email", "password": "secret123", "name": "Ada"},
    {"email": "ada@example.com", "password": "short", "name": "Ada"},
    {"email": "ada@example.com", "password": "secret123"},
])
async def test_invalid_registration_is_400(async_client, payload):
    response = await async_client.post("/api/auth/register", json=payload)
    assert response.status_code == 400
    assert response.json()["message"] == "Invalid input"


@pytest.mark.asyncio
async def test_login_and_me(async_client):
    user, _ = await register_user(async_client, "ada@example.com", "Ada")

    response = await async_client.post(
        "/api/auth/login", json={"email": "ada@example.com", "password": "secret123"}
    )
    assert response.status_code == 200
    token = response.json()["token"]

    me = await async_client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json() == user


@pytest.mark.asyncio
@pytest.mark.parametrize("email, password", [
    ("ada@example.com", "wrong-password"),
    ("nobody@example.com", "secret123"),
])
async def test_bad_login_is_indistinguishable(async_client, email, password):
    await register_user(async_client, "ada@example.com")
    response = await async_client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 401
    assert response.json()["message"] == "Invalid credentials"


@pytest.mark.asyncio
async def test_me_without_credential_is_401(async_client):
    response = await async_client.get("/api/auth/me")
    assert response.status_code == 401
    assert response.json()["error"] == "MissingCredentialError"


@pytest.mark.asyncio
async def test_me_with_garbage_credential_is_401(async_client):
    response = await async_client.get("/api/auth/me", headers={"Authorization": "Bearer garbage"})
    assert response.status_code == 401
    assert response.json()["error"] == "MalformedCredentialError"


@pytest.mark.asyncio
async def test_email_is_stored_lowercased(async_client, container):
    user, headers = await register_user(async_client, "Ada@Example.COM")
    assert user["email"] == "ada@example.com"

    me = await async_client.get("/api/auth/me", headers=headers)
    assert me.json()["email"] == "ada@example.com"

    stored = await container.users.get_by_email("ada@EXAMPLE.com")
    assert stored.email == "ada@example.com"
