from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from straysense.api.error import raise_for_error
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.animals import AnimalFilter, AnimalResponse, AnimalUseCase
from straysense.depends import get_unit_of_work

router = APIRouter(prefix="/animals", tags=["Animals"])


@router.get("", status_code=status.HTTP_200_OK, response_model=List[AnimalResponse])
async def list_animals(
    species: Optional[str] = None,
    breed: Optional[str] = None,
    age_min: Optional[int] = Query(default=None, ge=0),
    age_max: Optional[int] = Query(default=None, ge=0),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Browse Adoptable Animals

    Lists animals with status=available, optionally filtered by species,
    breed and an inclusive age range.
    """
    filters = AnimalFilter(species=species, breed=breed, age_min=age_min, age_max=age_max)

    use_case = AnimalUseCase(uow)
    result = await use_case.list_available(filters)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{animal_id}", status_code=status.HTTP_200_OK, response_model=AnimalResponse)
async def get_animal(animal_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = AnimalUseCase(uow)
    result = await use_case.get(animal_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
