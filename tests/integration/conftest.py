import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from straysense.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from straysense.api.app import create_app
from straysense.depends import get_unit_of_work

API = ApplicationConfig.API_PREFIX


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


async def signup_and_login(client: AsyncClient, email: str = "ana@straysense.org") -> dict:
    """Registers a user and returns its login response body"""
    response = await client.post(f"{API}/auth/signup", json={
        "email": email,
        "password": "secret1",
        "firstName": "Ana",
        "lastName": "Reyes",
    })
    assert response.status_code == 201

    response = await client.post(f"{API}/auth/login", json={
        "email": email,
        "password": "secret1",
    })
    assert response.status_code == 200
    return response.json()


@pytest_asyncio.fixture
async def user_headers(client: AsyncClient) -> dict:
    data = await signup_and_login(client)
    return {"Authorization": f"Bearer {data['token']}"}


@pytest_asyncio.fixture
async def admin_headers(client: AsyncClient) -> dict:
    response = await client.post(
        f"{API}/admin/verify", json={"password": ApplicationConfig.ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['token']}"}
