from datetime import timedelta
from uuid import uuid4

import pytest

from config import ApplicationConfig
from straysense.api.utils.jwt import generate_admin_jwt, generate_session_jwt
from straysense.app.use_cases.auth import LogoutUseCase, ValidateSessionUseCase
from straysense.domain.base import utcnow
from straysense.domain.entities import Session


def _session(expires_in: timedelta) -> Session:
    now = utcnow()
    return Session(
        id=uuid4(),
        user_id=3,
        session_token="a" * 64,
        created_at=now - timedelta(hours=1),
        last_active=now - timedelta(hours=1),
        expires_at=now + expires_in,
    )


@pytest.mark.asyncio
async def test_validate_live_session(mock_uow):
    session = _session(timedelta(hours=2))
    mock_uow.sessions.get_by_id.return_value = session
    token = generate_session_jwt(3, "ana@straysense.org", session.id, ApplicationConfig)

    use_case = ValidateSessionUseCase(mock_uow, ApplicationConfig)
    result = await use_case.execute(token)

    assert result.is_ok()
    assert result.value.user_id == 3
    assert result.value.email == "ana@straysense.org"
    assert result.value.session_id == str(session.id)
    mock_uow.sessions.get_by_id.assert_called_once_with(session.id)
    mock_uow.sessions.update.assert_called_once()
    assert session.last_active > session.created_at


@pytest.mark.asyncio
async def test_validate_expired_session(mock_uow):
    session = _session(timedelta(seconds=-1))
    mock_uow.sessions.get_by_id.return_value = session
    token = generate_session_jwt(3, "ana@straysense.org", session.id, ApplicationConfig)

    use_case = ValidateSessionUseCase(mock_uow, ApplicationConfig)
    result = await use_case.execute(token)

    assert result.is_err()
    assert result.error.code == "SESSION_EXPIRED_OR_MISSING"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_validate_deleted_session(mock_uow):
    mock_uow.sessions.get_by_id.return_value = None
    token = generate_session_jwt(3, "ana@straysense.org", uuid4(), ApplicationConfig)

    use_case = ValidateSessionUseCase(mock_uow, ApplicationConfig)
    result = await use_case.execute(token)

    assert result.is_err()
    assert result.error.code == "SESSION_EXPIRED_OR_MISSING"


@pytest.mark.asyncio
async def test_validate_garbage_token(mock_uow):
    use_case = ValidateSessionUseCase(mock_uow, ApplicationConfig)
    result = await use_case.execute("not-a-jwt")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.sessions.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_admin_token_is_not_a_user_session(mock_uow):
    use_case = ValidateSessionUseCase(mock_uow, ApplicationConfig)
    result = await use_case.execute(generate_admin_jwt(ApplicationConfig))

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_logout_deletes_session(mock_uow):
    session_id = uuid4()
    mock_uow.sessions.delete_by_id.return_value = True
    token = generate_session_jwt(3, "ana@straysense.org", session_id, ApplicationConfig)

    use_case = LogoutUseCase(mock_uow, ApplicationConfig)
    result = await use_case.execute(token)

    assert result.is_ok()
    assert result.value.message == "Logged out successfully"
    mock_uow.sessions.delete_by_id.assert_called_once_with(session_id)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_logout_twice_still_succeeds(mock_uow):
    mock_uow.sessions.delete_by_id.return_value = False
    token = generate_session_jwt(3, "ana@straysense.org", uuid4(), ApplicationConfig)

    use_case = LogoutUseCase(mock_uow, ApplicationConfig)
    result = await use_case.execute(token)

    assert result.is_ok()


@pytest.mark.asyncio
async def test_logout_invalid_token(mock_uow):
    use_case = LogoutUseCase(mock_uow, ApplicationConfig)
    result = await use_case.execute("not-a-jwt")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    mock_uow.sessions.delete_by_id.assert_not_called()
