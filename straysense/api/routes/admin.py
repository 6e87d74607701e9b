"""
Admin API Routes

Admin credential exchange, dashboard counters, stray report review and
adoption decisions. Everything except /admin/verify requires an admin
bearer credential.
"""

from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from straysense.api.error import raise_for_error
from straysense.api.utils.admin_auth import require_admin
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.admin import (
    AdminLoginUseCase,
    AdminTokenResponse,
    DashboardStatsResponse,
    DashboardStatsUseCase,
)
from straysense.app.use_cases.adoptions import (
    AdminAdoptionInfo,
    ListAdoptionsUseCase,
    UpdateAdoptionStatusCommand,
    UpdateAdoptionStatusResponse,
    UpdateAdoptionStatusUseCase,
)
from straysense.app.use_cases.reports import (
    ReportResponse,
    StrayReportUseCase,
    UpdateReportStatusCommand,
)
from straysense.depends import get_config, get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


class AdminVerifyRequest(BaseModel):
    password: str = Field(..., min_length=1)


@router.post("/verify", status_code=status.HTTP_200_OK, response_model=AdminTokenResponse)
async def verify_admin(payload: AdminVerifyRequest, config=Depends(get_config)):
    """
    Admin Login

    Exchanges the shared admin password for an admin credential.

    Raises:
        - 401 Unauthorized: INVALID_ADMIN_PASSWORD
    """
    use_case = AdminLoginUseCase(config)
    result = await use_case.execute(payload.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/stats",
    status_code=status.HTTP_200_OK,
    response_model=DashboardStatsResponse,
    dependencies=[Depends(require_admin)],
)
async def get_stats(uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = DashboardStatsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/reports",
    status_code=status.HTTP_200_OK,
    response_model=List[ReportResponse],
    dependencies=[Depends(require_admin)],
)
async def list_reports(uow: UnitOfWork = Depends(get_unit_of_work)):
    """All stray reports with reporter names, newest first"""
    use_case = StrayReportUseCase(uow)
    result = await use_case.list_all()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/reports/{report_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=ReportResponse,
    dependencies=[Depends(require_admin)],
)
async def update_report_status(
    report_id: int,
    request: UpdateReportStatusCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept or Reject Stray Report

    Raises:
        - 400 Bad Request: Unknown status
        - 404 Not Found: REPORT_NOT_FOUND
    """
    use_case = StrayReportUseCase(uow)
    result = await use_case.update_status(report_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/adoptions",
    status_code=status.HTTP_200_OK,
    response_model=List[AdminAdoptionInfo],
    dependencies=[Depends(require_admin)],
)
async def list_adoptions(uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = ListAdoptionsUseCase(uow)
    result = await use_case.for_admin()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/adoptions/{adoption_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=UpdateAdoptionStatusResponse,
    dependencies=[Depends(require_admin)],
)
async def update_adoption_status(
    adoption_id: int,
    payload: UpdateAdoptionStatusCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
    config=Depends(get_config),
):
    """
    Approve or Reject Adoption

    Approval stamps approval_date and marks the animal adopted.

    Raises:
        - 400 Bad Request: INVALID_STATUS
        - 404 Not Found: ADOPTION_NOT_FOUND
    """
    use_case = UpdateAdoptionStatusUseCase(
        uow, revert_on_rejection=config.REVERT_ANIMAL_ON_REJECTION
    )
    result = await use_case.execute(adoption_id, payload)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
