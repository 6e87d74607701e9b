from typing import List

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.entities import VaccineType
from .dtos import VaccineTypeCommand, VaccineTypeResponse


class VaccineTypeUseCase:
    """
    Use case for vaccine type definitions.

    Business Rules:
    - A vaccine type referenced by any vaccination cannot be deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def list_all(self) -> Result[List[VaccineTypeResponse]]:
        async with self.uow:
            vaccine_types = await self.uow.vaccine_types.list_all()
            return Return.ok([VaccineTypeResponse.model_validate(v) for v in vaccine_types])

    async def create(self, command: VaccineTypeCommand) -> Result[VaccineTypeResponse]:
        async with self.uow:
            vaccine_type = await self.uow.vaccine_types.create(
                VaccineType(name=command.name, description=command.description)
            )
            await self.uow.commit()
            return Return.ok(VaccineTypeResponse.model_validate(vaccine_type))

    async def update(
        self, vaccine_id: int, command: VaccineTypeCommand
    ) -> Result[VaccineTypeResponse]:
        async with self.uow:
            vaccine_type = await self.uow.vaccine_types.get_by_id(vaccine_id)
            if vaccine_type is None:
                return Return.err(Error("VACCINE_TYPE_NOT_FOUND", "Vaccine type not found"))

            vaccine_type.name = command.name
            vaccine_type.description = command.description
            vaccine_type = await self.uow.vaccine_types.update(vaccine_type)

            await self.uow.commit()
            return Return.ok(VaccineTypeResponse.model_validate(vaccine_type))

    async def delete(self, vaccine_id: int) -> Result[dict]:
        async with self.uow:
            vaccine_type = await self.uow.vaccine_types.get_by_id(vaccine_id)
            if vaccine_type is None:
                return Return.err(Error("VACCINE_TYPE_NOT_FOUND", "Vaccine type not found"))

            if await self.uow.vaccinations.count_by_vaccine(vaccine_id) > 0:
                return Return.err(
                    Error("VACCINE_TYPE_IN_USE", "Cannot delete a vaccine with scheduled vaccinations")
                )

            await self.uow.vaccine_types.delete(vaccine_type)
            await self.uow.commit()
            return Return.ok({"message": "Vaccine deleted", "vaccine_id": vaccine_id})
