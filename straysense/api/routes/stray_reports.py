from fastapi import APIRouter, Depends, status

from straysense.api.error import raise_for_error
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.auth import CurrentUser
from straysense.app.use_cases.reports import (
    StrayReportUseCase,
    SubmitReportCommand,
    SubmitReportResponse,
)
from straysense.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/stray-reports", tags=["Stray Reports"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SubmitReportResponse)
async def submit_report(
    request: SubmitReportCommand,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit Stray Report

    Only the description is required. image_path references an image that
    was stored beforehand.

    Raises:
        - 400 Bad Request: Missing description or malformed coordinates
        - 401 Unauthorized: Invalid credential or expired session
    """
    use_case = StrayReportUseCase(uow)
    result = await use_case.submit(current_user.user_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
