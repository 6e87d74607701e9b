from typing import List

from fastapi import APIRouter, Depends, status
from pydantic import AliasChoices, BaseModel, Field

from straysense.api.error import raise_for_error
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.adoptions import (
    AdoptionInfo,
    ListAdoptionsUseCase,
    SubmitAdoptionResponse,
    SubmitAdoptionUseCase,
)
from straysense.app.use_cases.auth import CurrentUser
from straysense.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["Adoptions"])


class AdoptionRequest(BaseModel):
    """Adoption request payload; the applicant comes from the session"""

    animal_id: int = Field(..., validation_alias=AliasChoices("animal_id", "animalId"))


async def _submit(request: AdoptionRequest, current_user: CurrentUser, uow: UnitOfWork):
    use_case = SubmitAdoptionUseCase(uow)
    result = await use_case.execute(current_user.user_id, request.animal_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/adoptions", status_code=status.HTTP_201_CREATED, response_model=SubmitAdoptionResponse
)
async def submit_adoption(
    request: AdoptionRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Submit Adoption Request

    Creates a pending adoption and moves the animal to pending_adoption
    in one transaction.

    Raises:
        - 401 Unauthorized: Invalid credential or expired session
        - 404 Not Found: USER_NOT_FOUND, ANIMAL_NOT_FOUND
        - 409 Conflict: ANIMAL_NOT_AVAILABLE, DUPLICATE_REQUEST
    """
    return await _submit(request, current_user, uow)


@router.post("/adopt", status_code=status.HTTP_201_CREATED, response_model=SubmitAdoptionResponse)
async def adopt(
    request: AdoptionRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Alias of POST /adoptions used by the web client"""
    return await _submit(request, current_user, uow)


@router.get("/adoptions", status_code=status.HTTP_200_OK, response_model=List[AdoptionInfo])
async def list_adoptions(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ListAdoptionsUseCase(uow)
    result = await use_case.for_user(current_user.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
