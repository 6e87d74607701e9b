from typing import List

from straysense.libs.result import Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.entities import AdoptionStatus
from .dtos import AdminAdoptionInfo, AdoptionInfo


class ListAdoptionsUseCase:
    """Read-side listings of adoptions, newest first"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def for_user(self, user_id: int) -> Result[List[AdoptionInfo]]:
        async with self.uow:
            rows = await self.uow.adoptions.list_by_user_with_animals(user_id)
            return Return.ok(
                [
                    AdoptionInfo(
                        adoption_id=adoption.id,
                        animal_id=animal.id,
                        animal_name=animal.name,
                        species=animal.species,
                        breed=animal.breed,
                        image_path=animal.image_path,
                        status=AdoptionStatus(adoption.status).value,
                        application_date=adoption.application_date,
                        approval_date=adoption.approval_date,
                        home_check_passed=adoption.home_check_passed,
                        fee_paid=adoption.fee_paid,
                        contract_signed=adoption.contract_signed,
                    )
                    for adoption, animal in rows
                ]
            )

    async def for_admin(self) -> Result[List[AdminAdoptionInfo]]:
        async with self.uow:
            rows = await self.uow.adoptions.list_with_details()
            return Return.ok(
                [
                    AdminAdoptionInfo(
                        adoption_id=adoption.id,
                        user_id=adoption.user_id,
                        first_name=first_name,
                        last_name=last_name,
                        animal_id=adoption.animal_id,
                        animal_name=animal_name,
                        status=AdoptionStatus(adoption.status).value,
                        application_date=adoption.application_date,
                        approval_date=adoption.approval_date,
                        home_check_passed=adoption.home_check_passed,
                        fee_paid=adoption.fee_paid,
                        contract_signed=adoption.contract_signed,
                    )
                    for adoption, first_name, last_name, animal_name in rows
                ]
            )
