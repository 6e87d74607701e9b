from typing import List

from fastapi import APIRouter, Depends, Query, status

from straysense.api.error import raise_for_error
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.auth import CurrentUser
from straysense.app.use_cases.vaccinations import VaccinationScheduleEntry, VaccinationUseCase
from straysense.depends import get_current_user, get_unit_of_work
from straysense.libs.result import Error

router = APIRouter(prefix="/vaccinations", tags=["Vaccinations"])


@router.get(
    "/schedule", status_code=status.HTTP_200_OK, response_model=List[VaccinationScheduleEntry]
)
async def get_vaccination_schedule(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Vaccinations of the animals the signed-in user has adopted"""
    use_case = VaccinationUseCase(uow)
    result = await use_case.schedule_for_adopter(current_user.user_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/animals", status_code=status.HTTP_200_OK, response_model=List[VaccinationScheduleEntry]
)
async def get_animal_vaccinations(
    animal_ids: str = Query(..., description="Comma-separated animal IDs"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Vaccinations for a set of animals

    Raises:
        - 400 Bad Request: animal_ids missing or not integers
    """
    try:
        ids = [int(part) for part in animal_ids.split(",") if part.strip()]
    except ValueError:
        ids = []
    if not ids:
        raise_for_error(
            Error("VALIDATION_ERROR", "animal_ids must be a comma-separated list of integers")
        )

    use_case = VaccinationUseCase(uow)
    result = await use_case.list_all(ids)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
