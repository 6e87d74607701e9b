import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from config import ApplicationConfig
from straysense.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from straysense.api.app import create_app
from straysense.depends import get_unit_of_work
from tests.integration.conftest import API


class BranchConfig(ApplicationConfig):
    JWT_SECRET = "branch-office-secret"
    ADMIN_PASSWORD = "branch-admin"
    SESSION_TTL_HOURS = 2


@pytest_asyncio.fixture
async def branch_client(db_session):
    app = create_app(BranchConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_app_uses_its_own_admin_password(branch_client: AsyncClient):
    response = await branch_client.post(
        f"{API}/admin/verify", json={"password": ApplicationConfig.ADMIN_PASSWORD}
    )
    assert response.status_code == 401

    response = await branch_client.post(f"{API}/admin/verify", json={"password": "branch-admin"})
    assert response.status_code == 200

    headers = {"Authorization": f"Bearer {response.json()['token']}"}
    response = await branch_client.get(f"{API}/admin/stats", headers=headers)
    assert response.status_code == 200


@pytest.mark.asyncio
async def test_credentials_do_not_cross_apps(
    client: AsyncClient, branch_client: AsyncClient, admin_headers: dict
):
    response = await branch_client.get(f"{API}/admin/stats", headers=admin_headers)
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"

    await branch_client.post(f"{API}/auth/signup", json={
        "email": "ana@straysense.org",
        "password": "secret1",
        "first_name": "Ana",
        "last_name": "Reyes",
    })
    response = await branch_client.post(f"{API}/auth/login", json={
        "email": "ana@straysense.org",
        "password": "secret1",
    })
    assert response.status_code == 200
    branch_headers = {"Authorization": f"Bearer {response.json()['token']}"}

    response = await branch_client.get(f"{API}/user/profile", headers=branch_headers)
    assert response.status_code == 200

    response = await client.get(f"{API}/user/profile", headers=branch_headers)
    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_TOKEN"
