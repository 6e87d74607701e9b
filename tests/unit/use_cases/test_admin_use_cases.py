from types import SimpleNamespace

import pytest

from config import ApplicationConfig
from straysense.api.utils.jwt import ADMIN_ROLE, verify_jwt
from straysense.app.use_cases.admin import AdminLoginUseCase, DashboardStatsUseCase
from straysense.domain.entities import AdoptionStatus, ReportStatus


@pytest.fixture
def admin_config():
    return SimpleNamespace(
        ADMIN_PASSWORD="hunter22",
        ADMIN_TOKEN_TTL_HOURS=1,
        JWT_SECRET="another-secret",
        JWT_ALGORITHM="HS256",
    )


@pytest.mark.asyncio
async def test_admin_login_issues_admin_token(admin_config):
    use_case = AdminLoginUseCase(admin_config)
    result = await use_case.execute("hunter22")

    assert result.is_ok()
    payload = verify_jwt(result.value.token, admin_config)
    assert payload["role"] == ADMIN_ROLE
    assert "session_id" not in payload


@pytest.mark.asyncio
async def test_admin_token_signed_with_the_given_config(admin_config):
    use_case = AdminLoginUseCase(admin_config)
    result = await use_case.execute("hunter22")

    assert verify_jwt(result.value.token, ApplicationConfig) is None


@pytest.mark.asyncio
async def test_admin_login_wrong_password(admin_config):
    use_case = AdminLoginUseCase(admin_config)
    result = await use_case.execute("hunter23")

    assert result.is_err()
    assert result.error.code == "INVALID_ADMIN_PASSWORD"


@pytest.mark.asyncio
async def test_dashboard_stats(mock_uow):
    mock_uow.users.count.return_value = 10
    mock_uow.animals.count.return_value = 7
    mock_uow.stray_reports.count_by_status.return_value = 2
    mock_uow.shelters.count.return_value = 3
    mock_uow.adoptions.count_by_status.return_value = 4
    mock_uow.vaccinations.count_pending.return_value = 5

    use_case = DashboardStatsUseCase(mock_uow)
    result = await use_case.execute()

    assert result.is_ok()
    assert result.value.model_dump() == {
        "totalUsers": 10,
        "totalAnimals": 7,
        "activeReports": 2,
        "totalShelters": 3,
        "activeAdoptionRequests": 4,
        "pendingVaccinations": 5,
    }
    mock_uow.stray_reports.count_by_status.assert_called_once_with(ReportStatus.pending)
    mock_uow.adoptions.count_by_status.assert_called_once_with(AdoptionStatus.pending)
