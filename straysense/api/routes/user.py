from typing import List

from fastapi import APIRouter, Depends, status

from straysense.api.error import raise_for_error
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.adoptions import AdoptionInfo, ListAdoptionsUseCase
from straysense.app.use_cases.auth import CurrentUser
from straysense.app.use_cases.users import ProfileResponse, ProfileUseCase, UpdateProfileCommand
from straysense.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/user", tags=["User"])


@router.get("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def get_profile(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Own Profile

    Raises:
        - 401 Unauthorized: Invalid credential or expired session
        - 404 Not Found: User no longer exists
    """
    use_case = ProfileUseCase(uow)
    result = await use_case.get(current_user.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/profile", status_code=status.HTTP_200_OK, response_model=ProfileResponse)
async def update_profile(
    request: UpdateProfileCommand,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ProfileUseCase(uow)
    result = await use_case.update(current_user.user_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/adoptions", status_code=status.HTTP_200_OK, response_model=List[AdoptionInfo])
async def list_own_adoptions(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Adoptions submitted by the signed-in user, newest first"""
    use_case = ListAdoptionsUseCase(uow)
    result = await use_case.for_user(current_user.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
