"""
Update Adoption Status Use Case

Records an admin decision on an adoption request.
"""

import logging

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.base import utcnow
from straysense.domain.entities import AdoptionStatus, AnimalStatus
from .dtos import UpdateAdoptionStatusCommand, UpdateAdoptionStatusResponse

logger = logging.getLogger(__name__)


class UpdateAdoptionStatusUseCase:
    """
    Use case for admin adoption decisions.

    Business Rules:
    - Only the gates present in the command are written
    - approved stamps approval_date and marks the animal adopted
    - Gates are not required to be true before approval
    - rejected leaves the animal as-is unless revert_on_rejection is set,
      in which case a pending_adoption animal becomes available again
    - Adoption and animal changes commit together
    """

    def __init__(self, uow: UnitOfWork, revert_on_rejection: bool = False):
        self.uow = uow
        self.revert_on_rejection = revert_on_rejection

    async def execute(
        self, adoption_id: int, command: UpdateAdoptionStatusCommand
    ) -> Result[UpdateAdoptionStatusResponse]:
        try:
            new_status = AdoptionStatus(command.status)
        except ValueError:
            return Return.err(
                Error("INVALID_STATUS", f"Unknown adoption status: {command.status}")
            )

        async with self.uow:
            adoption = await self.uow.adoptions.get_by_id(adoption_id)
            if adoption is None:
                return Return.err(Error("ADOPTION_NOT_FOUND", "Adoption not found"))

            adoption.status = new_status
            if command.home_check_passed is not None:
                adoption.home_check_passed = command.home_check_passed
            if command.fee_paid is not None:
                adoption.fee_paid = command.fee_paid
            if command.contract_signed is not None:
                adoption.contract_signed = command.contract_signed

            animal_status = None
            if new_status == AdoptionStatus.approved:
                adoption.approval_date = utcnow()
                adopted = await self.uow.animals.set_status(
                    adoption.animal_id, AnimalStatus.adopted
                )
                if not adopted:
                    return Return.err(Error("ANIMAL_NOT_FOUND", "Animal not found"))
                animal_status = AnimalStatus.adopted
            elif new_status == AdoptionStatus.rejected and self.revert_on_rejection:
                reverted = await self.uow.animals.transition_status(
                    adoption.animal_id, AnimalStatus.pending_adoption, AnimalStatus.available
                )
                if reverted:
                    animal_status = AnimalStatus.available

            adoption = await self.uow.adoptions.update(adoption)
            await self.uow.commit()

            logger.info(f"Adoption {adoption_id} set to {new_status.value}")
            return Return.ok(
                UpdateAdoptionStatusResponse(
                    message="Adoption request updated",
                    adoption_id=adoption_id,
                    status=new_status.value,
                    animal_status=animal_status.value if animal_status else None,
                )
            )
