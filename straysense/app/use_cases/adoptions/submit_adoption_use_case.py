"""
Submit Adoption Use Case

Opens an adoption request and reserves the animal for it.
"""

import logging

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.base import utcnow
from straysense.domain.entities import Adoption, AdoptionStatus, AnimalStatus
from .dtos import SubmitAdoptionResponse

logger = logging.getLogger(__name__)


class SubmitAdoptionUseCase:
    """
    Use case for submitting an adoption request.

    Business Rules:
    - User must exist
    - Animal must exist and be available
    - At most one pending adoption per (user, animal)
    - Adoption insert and animal transition to pending_adoption commit together

    All checks run inside the same transaction as the writes. The animal row
    is read FOR UPDATE, and the status transition is conditional on the
    animal still being available, so two concurrent requests cannot both
    claim it.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: int, animal_id: int) -> Result[SubmitAdoptionResponse]:
        """
        Execute submit adoption use case.

        Args:
            user_id: Applicant
            animal_id: Requested animal

        Returns:
            Result with the new adoption id, or Error
            (USER_NOT_FOUND, ANIMAL_NOT_FOUND, ANIMAL_NOT_AVAILABLE, DUPLICATE_REQUEST)
        """
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            animal = await self.uow.animals.get_for_update(animal_id)
            if animal is None:
                return Return.err(Error("ANIMAL_NOT_FOUND", "Animal not found"))

            existing = await self.uow.adoptions.find_pending(user_id, animal_id)
            if existing is not None:
                return Return.err(
                    Error(
                        "DUPLICATE_REQUEST",
                        "You already have a pending adoption request for this animal",
                    )
                )

            if animal.status != AnimalStatus.available:
                return Return.err(
                    Error("ANIMAL_NOT_AVAILABLE", "Animal is not available for adoption")
                )

            adoption = Adoption(
                user_id=user_id,
                animal_id=animal_id,
                status=AdoptionStatus.pending,
                application_date=utcnow(),
            )
            adoption = await self.uow.adoptions.create(adoption)

            claimed = await self.uow.animals.transition_status(
                animal_id, AnimalStatus.available, AnimalStatus.pending_adoption
            )
            if not claimed:
                # Lost the race to a concurrent request; the adoption insert is rolled back
                await self.uow.rollback()
                return Return.err(
                    Error("ANIMAL_NOT_AVAILABLE", "Animal is not available for adoption")
                )

            await self.uow.commit()

            logger.info(f"Adoption {adoption.id} submitted by user {user_id} for animal {animal_id}")
            return Return.ok(
                SubmitAdoptionResponse(
                    message="Adoption request submitted successfully",
                    adoption_id=adoption.id,
                )
            )
