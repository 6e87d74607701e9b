"""
Shelter Use Case

Admin management of shelters.
"""

from typing import List

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.entities import Shelter
from .dtos import ShelterCommand, ShelterResponse


class ShelterUseCase:
    """
    Use case for shelters.

    Business Rules:
    - A shelter that still houses animals cannot be deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def list_all(self) -> Result[List[ShelterResponse]]:
        async with self.uow:
            shelters = await self.uow.shelters.list_all()
            return Return.ok([ShelterResponse.model_validate(s) for s in shelters])

    async def create(self, command: ShelterCommand) -> Result[ShelterResponse]:
        async with self.uow:
            shelter = await self.uow.shelters.create(Shelter(**command.model_dump()))
            await self.uow.commit()
            return Return.ok(ShelterResponse.model_validate(shelter))

    async def update(self, shelter_id: int, command: ShelterCommand) -> Result[ShelterResponse]:
        async with self.uow:
            shelter = await self.uow.shelters.get_by_id(shelter_id)
            if shelter is None:
                return Return.err(Error("SHELTER_NOT_FOUND", "Shelter not found"))

            for field, value in command.model_dump().items():
                setattr(shelter, field, value)
            shelter = await self.uow.shelters.update(shelter)

            await self.uow.commit()
            return Return.ok(ShelterResponse.model_validate(shelter))

    async def delete(self, shelter_id: int) -> Result[dict]:
        async with self.uow:
            shelter = await self.uow.shelters.get_by_id(shelter_id)
            if shelter is None:
                return Return.err(Error("SHELTER_NOT_FOUND", "Shelter not found"))

            housed = await self.uow.animals.count_by_shelter(shelter_id)
            if housed > 0:
                return Return.err(
                    Error("SHELTER_HAS_ANIMALS", "Cannot delete shelter with associated animals")
                )

            await self.uow.shelters.delete(shelter)
            await self.uow.commit()
            return Return.ok({"message": "Shelter deleted successfully", "shelter_id": shelter_id})
