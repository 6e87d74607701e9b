"""
Vaccination Use Case

Scheduling and completion of vaccinations, plus schedule views.
"""

import logging
from typing import List, Optional

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.base import today
from straysense.domain.entities import Vaccination
from .dtos import ScheduleVaccinationCommand, VaccinationResponse, VaccinationScheduleEntry

logger = logging.getLogger(__name__)


def _entries(rows) -> List[VaccinationScheduleEntry]:
    return [
        VaccinationScheduleEntry(
            vaccination_id=vaccination.id,
            animal_id=vaccination.animal_id,
            animal_name=animal_name,
            vaccine_id=vaccination.vaccine_id,
            vaccine_name=vaccine_name,
            scheduled_date=vaccination.scheduled_date,
            completed_date=vaccination.completed_date,
        )
        for vaccination, animal_name, vaccine_name in rows
    ]


class VaccinationUseCase:
    """
    Use case for vaccinations.

    Business Rules:
    - Scheduling requires an existing animal and vaccine type
    - A vaccination is pending until completed_date is set
    - Completion stamps today's date
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def schedule(self, command: ScheduleVaccinationCommand) -> Result[VaccinationResponse]:
        async with self.uow:
            animal = await self.uow.animals.get_by_id(command.animal_id)
            if animal is None:
                return Return.err(Error("ANIMAL_NOT_FOUND", "Animal not found"))

            vaccine_type = await self.uow.vaccine_types.get_by_id(command.vaccine_id)
            if vaccine_type is None:
                return Return.err(Error("VACCINE_TYPE_NOT_FOUND", "Vaccine type not found"))

            vaccination = await self.uow.vaccinations.create(
                Vaccination(
                    animal_id=command.animal_id,
                    vaccine_id=command.vaccine_id,
                    scheduled_date=command.scheduled_date,
                )
            )
            await self.uow.commit()
            return Return.ok(VaccinationResponse.model_validate(vaccination))

    async def complete(self, vaccination_id: int) -> Result[VaccinationResponse]:
        async with self.uow:
            vaccination = await self.uow.vaccinations.get_by_id(vaccination_id)
            if vaccination is None:
                return Return.err(Error("VACCINATION_NOT_FOUND", "Vaccination not found"))

            vaccination.completed_date = today()
            vaccination = await self.uow.vaccinations.update(vaccination)
            await self.uow.commit()

            logger.info(f"Vaccination {vaccination_id} marked as done")
            return Return.ok(VaccinationResponse.model_validate(vaccination))

    async def list_all(
        self, animal_ids: Optional[List[int]] = None
    ) -> Result[List[VaccinationScheduleEntry]]:
        async with self.uow:
            rows = await self.uow.vaccinations.list_with_names(animal_ids)
            return Return.ok(_entries(rows))

    async def schedule_for_adopter(self, user_id: int) -> Result[List[VaccinationScheduleEntry]]:
        async with self.uow:
            rows = await self.uow.vaccinations.list_for_adopter(user_id)
            return Return.ok(_entries(rows))
