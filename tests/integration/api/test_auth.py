from datetime import timedelta
from uuid import UUID

import pytest
from httpx import AsyncClient
from sqlmodel import select

from straysense.domain.base import utcnow
from straysense.domain.entities import Session
from tests.integration.conftest import API, signup_and_login


@pytest.mark.asyncio
async def test_signup_login_profile(client: AsyncClient):
    """Signup, login and read the profile with the issued credential"""
    data = await signup_and_login(client)

    assert isinstance(data["token"], str) and data["token"]
    assert data["user"]["email"] == "ana@straysense.org"
    assert data["user"]["first_name"] == "Ana"

    response = await client.get(
        f"{API}/user/profile", headers={"Authorization": f"Bearer {data['token']}"}
    )
    assert response.status_code == 200
    profile = response.json()
    assert profile["email"] == "ana@straysense.org"
    assert profile["role"] == "adopter"
    assert "password_hash" not in profile


@pytest.mark.asyncio
async def test_signup_duplicate_email(client: AsyncClient):
    await signup_and_login(client)

    response = await client.post(f"{API}/auth/signup", json={
        "email": "ana@straysense.org",
        "password": "secret1",
        "first_name": "Other",
        "last_name": "Person",
    })

    assert response.status_code == 409
    assert response.json()["error"]["code"] == "EMAIL_ALREADY_EXISTS"


@pytest.mark.asyncio
async def test_signup_missing_fields(client: AsyncClient):
    response = await client.post(f"{API}/auth/signup", json={"email": "ana@straysense.org"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient):
    await signup_and_login(client)

    response = await client.post(f"{API}/auth/login", json={
        "email": "ana@straysense.org",
        "password": "wrong-password",
    })

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_records_client_metadata(client: AsyncClient, db_session):
    data = await signup_and_login(client)

    result = await db_session.exec(select(Session).where(Session.id == UUID(data["session_id"])))
    session = result.one()
    assert session.user_agent is not None
    assert session.expires_at > utcnow()


@pytest.mark.asyncio
async def test_logout_twice_then_credential_rejected(client: AsyncClient):
    data = await signup_and_login(client)
    headers = {"Authorization": f"Bearer {data['token']}"}

    first = await client.post(f"{API}/auth/logout", headers=headers)
    assert first.status_code == 200

    second = await client.post(f"{API}/auth/logout", headers=headers)
    assert second.status_code == 200

    response = await client.get(f"{API}/user/profile", headers=headers)
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "SESSION_EXPIRED_OR_MISSING"


@pytest.mark.asyncio
async def test_expired_session_rejected(client: AsyncClient, db_session):
    data = await signup_and_login(client)

    result = await db_session.exec(select(Session).where(Session.id == UUID(data["session_id"])))
    session = result.one()
    session.expires_at = utcnow() - timedelta(seconds=1)
    db_session.add(session)
    await db_session.commit()

    response = await client.get(
        f"{API}/user/profile", headers={"Authorization": f"Bearer {data['token']}"}
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "SESSION_EXPIRED_OR_MISSING"


@pytest.mark.asyncio
async def test_missing_and_garbage_tokens(client: AsyncClient):
    response = await client.get(f"{API}/user/profile")
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "MISSING_TOKEN"

    response = await client.get(
        f"{API}/user/profile", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_update_profile(client: AsyncClient, user_headers: dict):
    response = await client.put(
        f"{API}/user/profile",
        headers=user_headers,
        json={"phone": "0917-555-0100", "city": "Davao"},
    )

    assert response.status_code == 200
    profile = response.json()
    assert profile["phone"] == "0917-555-0100"
    assert profile["city"] == "Davao"
    assert profile["first_name"] == "Ana"
