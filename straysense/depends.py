from typing import Optional

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from straysense.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from straysense.api.error import ClientError, raise_for_error
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.auth import CurrentUser, ValidateSessionUseCase
from straysense.libs.result import Error

security = HTTPBearer(auto_error=False)


def create_session_factory(config):
    """Engine and session factory for config.DB_URI, one pair per app"""
    engine = create_async_engine(config.DB_URI, echo=False, future=True)
    session_factory = sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )
    return engine, session_factory


def get_config(request: Request):
    """The config the running app was created with"""
    return request.app.state.config


async def get_unit_of_work(request: Request):
    async with request.app.state.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_bearer_token(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> str:
    """
    Extract the raw bearer credential from the Authorization header.

    Raises:
        ClientError: 401 if the header is missing
    """
    if credentials is None:
        raise ClientError(
            Error("MISSING_TOKEN", "No token provided"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )
    return credentials.credentials


async def get_current_user(
    token: str = Depends(get_bearer_token),
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
) -> CurrentUser:
    """
    Dependency to verify the bearer credential against its server-side session.

    Args:
        token: Bearer token from Authorization header
        uow: Unit of work for the session lookup
        config: App config holding the JWT secret

    Returns:
        CurrentUser with user_id, email and session_id

    Raises:
        ClientError: 401 if the token is invalid or its session expired or was deleted
    """
    use_case = ValidateSessionUseCase(uow, config)
    result = await use_case.execute(token)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


def get_client_info(request: Request) -> dict:
    """Client IP and user agent recorded on new sessions"""
    return {
        "ip_address": request.client.host if request.client else None,
        "user_agent": request.headers.get("user-agent"),
    }
