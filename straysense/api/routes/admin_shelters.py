from typing import List

from fastapi import APIRouter, Depends, status

from straysense.api.error import raise_for_error
from straysense.api.utils.admin_auth import require_admin
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.app.use_cases.shelters import ShelterCommand, ShelterResponse, ShelterUseCase
from straysense.depends import get_unit_of_work

router = APIRouter(
    prefix="/admin/shelters", tags=["Admin"], dependencies=[Depends(require_admin)]
)


@router.get("", status_code=status.HTTP_200_OK, response_model=List[ShelterResponse])
async def list_shelters(uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = ShelterUseCase(uow)
    result = await use_case.list_all()

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ShelterResponse)
async def create_shelter(request: ShelterCommand, uow: UnitOfWork = Depends(get_unit_of_work)):
    use_case = ShelterUseCase(uow)
    result = await use_case.create(request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.put("/{shelter_id}", status_code=status.HTTP_200_OK, response_model=ShelterResponse)
async def update_shelter(
    shelter_id: int,
    request: ShelterCommand,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    use_case = ShelterUseCase(uow)
    result = await use_case.update(shelter_id, request)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.delete("/{shelter_id}", status_code=status.HTTP_200_OK)
async def delete_shelter(shelter_id: int, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Delete Shelter

    Raises:
        - 400 Bad Request: SHELTER_HAS_ANIMALS
        - 404 Not Found: SHELTER_NOT_FOUND
    """
    use_case = ShelterUseCase(uow)
    result = await use_case.delete(shelter_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
