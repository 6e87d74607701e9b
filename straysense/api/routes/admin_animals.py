from typing import List

from fastapi import APIRouter, Depends, status

from straysense.api.error import raise_for_error
from straysense.api.utils.admin_auth import require_admin
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.animals import (
    AnimalResponse,
    AnimalUseCase,
    CreateAnimalCommand,
    CreateAnimalResponse,
    UpdateAnimalCommand,
)
from straysense.depends import get_unit_of_work

router = APIRouter(
    prefix="/admin/animals", tags=["Admin"], dependencies=[Depends(require_admin)]
)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[AnimalResponse])
async def list_animals(uow: UnitOfWork = Depends(get_unit_of_work)):
    """Every animal regardless of status"""
    use_case = AnimalUseCase(uow)
    result = await use_case.list_all()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreateAnimalResponse)
async def create_animal(
    request: CreateAnimalCommand, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Create Animal

    With report_id, the stray report is linked to the new animal.

    Raises:
        - 400 Bad Request: Missing name/species
        - 404 Not Found: SHELTER_NOT_FOUND, REPORT_NOT_FOUND
    """
    use_case = AnimalUseCase(uow)
    result = await use_case.create(request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{animal_id}", status_code=status.HTTP_200_OK, response_model=AnimalResponse)
async def update_animal(
    animal_id: int,
    request: UpdateAnimalCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = AnimalUseCase(uow)
    result = await use_case.update(animal_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{animal_id}", status_code=status.HTTP_200_OK)
async def delete_animal(animal_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = AnimalUseCase(uow)
    result = await use_case.delete(animal_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
