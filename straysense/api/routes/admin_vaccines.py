"""
Admin Vaccine Routes

Vaccine type definitions (/admin/vaccines) and the vaccinations scheduled
with them (/admin/vaccinations).
"""

from typing import List

from fastapi import APIRouter, Depends, status

from straysense.api.error import raise_for_error
from straysense.api.utils.admin_auth import require_admin
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.vaccinations import (
    ScheduleVaccinationCommand,
    VaccinationResponse,
    VaccinationScheduleEntry,
    VaccinationUseCase,
    VaccineTypeCommand,
    VaccineTypeResponse,
    VaccineTypeUseCase,
)
from straysense.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"], dependencies=[Depends(require_admin)])


@router.get("/vaccines", status_code=status.HTTP_200_OK, response_model=List[VaccineTypeResponse])
async def list_vaccines(uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = VaccineTypeUseCase(uow)
    result = await use_case.list_all()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("/vaccines", status_code=status.HTTP_201_CREATED, response_model=VaccineTypeResponse)
async def create_vaccine(request: VaccineTypeCommand, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = VaccineTypeUseCase(uow)
    result = await use_case.create(request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/vaccines/{vaccine_id}", status_code=status.HTTP_200_OK, response_model=VaccineTypeResponse
)
async def update_vaccine(
    vaccine_id: int,
    request: VaccineTypeCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = VaccineTypeUseCase(uow)
    result = await use_case.update(vaccine_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/vaccines/{vaccine_id}", status_code=status.HTTP_200_OK)
async def delete_vaccine(vaccine_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Raises:
        - 400 Bad Request: VACCINE_TYPE_IN_USE
        - 404 Not Found: VACCINE_TYPE_NOT_FOUND
    """
    use_case = VaccineTypeUseCase(uow)
    result = await use_case.delete(vaccine_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post(
    "/vaccinations", status_code=status.HTTP_201_CREATED, response_model=VaccinationResponse
)
async def schedule_vaccination(
    request: ScheduleVaccinationCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Schedule Vaccination

    Raises:
        - 400 Bad Request: Missing animal_id, vaccine_id or scheduled_date
        - 404 Not Found: ANIMAL_NOT_FOUND, VACCINE_TYPE_NOT_FOUND
    """
    use_case = VaccinationUseCase(uow)
    result = await use_case.schedule(request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/vaccinations",
    status_code=status.HTTP_200_OK,
    response_model=List[VaccinationScheduleEntry],
)
async def list_vaccinations(uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = VaccinationUseCase(uow)
    result = await use_case.list_all()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put(
    "/vaccinations/{vaccination_id}/complete",
    status_code=status.HTTP_200_OK,
    response_model=VaccinationResponse,
)
async def complete_vaccination(vaccination_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """Marks a vaccination done as of today"""
    use_case = VaccinationUseCase(uow)
    result = await use_case.complete(vaccination_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
