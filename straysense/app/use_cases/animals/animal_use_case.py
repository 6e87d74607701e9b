"""
Animal Use Case

Public browsing and admin management of animals.
"""

import logging
from typing import List

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.entities import Animal, AnimalStatus
from .dtos import (
    AnimalFilter,
    AnimalResponse,
    CreateAnimalCommand,
    CreateAnimalResponse,
    UpdateAnimalCommand,
)

logger = logging.getLogger(__name__)


class AnimalUseCase:
    """
    Use case for animals.

    Business Rules:
    - The public listing only shows available animals
    - A referenced shelter must exist
    - Creating from a stray report links the report in the same transaction;
      a report is promoted at most once
    - An animal referenced by an adoption or vaccination cannot be deleted;
      deleting one unlinks the report it was promoted from
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def list_available(self, filters: AnimalFilter) -> Result[List[AnimalResponse]]:
        async with self.uow:
            animals = await self.uow.animals.search(
                AnimalStatus.available,
                species=filters.species,
                breed=filters.breed,
                age_min=filters.age_min,
                age_max=filters.age_max,
            )
            return Return.ok([AnimalResponse.model_validate(a) for a in animals])

    async def list_all(self) -> Result[List[AnimalResponse]]:
        async with self.uow:
            animals = await self.uow.animals.list_all()
            return Return.ok([AnimalResponse.model_validate(a) for a in animals])

    async def get(self, animal_id: int) -> Result[AnimalResponse]:
        async with self.uow:
            animal = await self.uow.animals.get_by_id(animal_id)
            if animal is None:
                return Return.err(Error("ANIMAL_NOT_FOUND", "Animal not found"))
            return Return.ok(AnimalResponse.model_validate(animal))

    async def create(self, command: CreateAnimalCommand) -> Result[CreateAnimalResponse]:
        async with self.uow:
            if command.shelter_id is not None:
                shelter = await self.uow.shelters.get_by_id(command.shelter_id)
                if shelter is None:
                    return Return.err(Error("SHELTER_NOT_FOUND", "Shelter not found"))

            report = None
            if command.report_id is not None:
                report = await self.uow.stray_reports.get_by_id(command.report_id)
                if report is None:
                    return Return.err(Error("REPORT_NOT_FOUND", "Stray report not found"))
                if report.processed_animal_id is not None:
                    return Return.err(
                        Error(
                            "REPORT_ALREADY_PROCESSED",
                            f"Stray report already promoted to animal {report.processed_animal_id}",
                        )
                    )

            animal = Animal(**command.model_dump(exclude={"report_id"}))
            animal = await self.uow.animals.create(animal)

            if report is not None:
                report.processed_animal_id = animal.id
                await self.uow.stray_reports.update(report)

            await self.uow.commit()

            if report is not None:
                logger.info(f"Stray report {report.id} promoted to animal {animal.id}")
            return Return.ok(
                CreateAnimalResponse(animal_id=animal.id, report_id=command.report_id)
            )

    async def update(
        self, animal_id: int, command: UpdateAnimalCommand
    ) -> Result[AnimalResponse]:
        changes = command.model_dump(exclude_unset=True)

        async with self.uow:
            animal = await self.uow.animals.get_by_id(animal_id)
            if animal is None:
                return Return.err(Error("ANIMAL_NOT_FOUND", "Animal not found"))

            if changes.get("shelter_id") is not None:
                shelter = await self.uow.shelters.get_by_id(changes["shelter_id"])
                if shelter is None:
                    return Return.err(Error("SHELTER_NOT_FOUND", "Shelter not found"))

            for field, value in changes.items():
                if value is None and field in ("name", "species", "neutered", "status"):
                    continue
                setattr(animal, field, value)
            animal = await self.uow.animals.update(animal)

            await self.uow.commit()
            return Return.ok(AnimalResponse.model_validate(animal))

    async def delete(self, animal_id: int) -> Result[dict]:
        async with self.uow:
            animal = await self.uow.animals.get_by_id(animal_id)
            if animal is None:
                return Return.err(Error("ANIMAL_NOT_FOUND", "Animal not found"))

            referenced = await self.uow.adoptions.count_by_animal(animal_id)
            referenced += await self.uow.vaccinations.count_by_animal(animal_id)
            if referenced > 0:
                return Return.err(
                    Error("ANIMAL_IN_USE", "Cannot delete an animal with adoptions or vaccinations")
                )

            await self.uow.stray_reports.unlink_animal(animal_id)
            await self.uow.animals.delete(animal)
            await self.uow.commit()
            return Return.ok({"message": "Animal deleted", "animal_id": animal_id})
