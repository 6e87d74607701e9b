from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from straysense.app.repositories.vaccination_repository import IVaccinationRepository
from straysense.domain.entities import (
    Adoption,
    AdoptionStatus,
    Animal,
    Vaccination,
    VaccineType,
)


class VaccinationRepository(IVaccinationRepository):
    """Vaccination repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _named(self):
        return (
            select(Vaccination, Animal.name, VaccineType.name)
            .join(Animal, Animal.id == Vaccination.animal_id)
            .join(VaccineType, VaccineType.id == Vaccination.vaccine_id)
        )

    async def get_by_id(self, vaccination_id: int) -> Optional[Vaccination]:
        stmt = select(Vaccination).where(Vaccination.id == vaccination_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, vaccination: Vaccination) -> Vaccination:
        self.session.add(vaccination)
        await self.session.flush()
        await self.session.refresh(vaccination)
        return vaccination

    async def update(self, vaccination: Vaccination) -> Vaccination:
        self.session.add(vaccination)
        await self.session.flush()
        await self.session.refresh(vaccination)
        return vaccination

    async def list_with_names(
        self, animal_ids: Optional[List[int]] = None
    ) -> List[Tuple[Vaccination, str, str]]:
        stmt = self._named()
        if animal_ids is not None:
            stmt = stmt.where(Vaccination.animal_id.in_(animal_ids))
        stmt = stmt.order_by(Vaccination.scheduled_date.desc(), Vaccination.id.desc())
        result = await self.session.execute(stmt)
        return [tuple(row) for row in result.all()]

    async def list_for_adopter(self, user_id: int) -> List[Tuple[Vaccination, str, str]]:
        adopted = select(Adoption.animal_id).where(
            Adoption.user_id == user_id,
            Adoption.status == AdoptionStatus.approved,
        )
        stmt = (
            self._named()
            .where(Vaccination.animal_id.in_(adopted))
            .order_by(Vaccination.scheduled_date, Vaccination.id)
        )
        result = await self.session.execute(stmt)
        return [tuple(row) for row in result.all()]

    async def count_pending(self) -> int:
        stmt = (
            select(func.count())
            .select_from(Vaccination)
            .where(Vaccination.completed_date.is_(None))
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_vaccine(self, vaccine_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(Vaccination)
            .where(Vaccination.vaccine_id == vaccine_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_animal(self, animal_id: int) -> int:
        stmt = (
            select(func.count())
            .select_from(Vaccination)
            .where(Vaccination.animal_id == animal_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()
