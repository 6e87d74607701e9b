from typing import List, Optional, Tuple

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from straysense.app.repositories.adoption_repository import IAdoptionRepository
from straysense.domain.entities import Adoption, AdoptionStatus, Animal, User


class AdoptionRepository(IAdoptionRepository):
    """Adoption repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, adoption_id: int) -> Optional[Adoption]:
        stmt = select(Adoption).where(Adoption.id == adoption_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def find_pending(self, user_id: int, animal_id: int) -> Optional[Adoption]:
        stmt = select(Adoption).where(
            Adoption.user_id == user_id,
            Adoption.animal_id == animal_id,
            Adoption.status == AdoptionStatus.pending,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, adoption: Adoption) -> Adoption:
        self.session.add(adoption)
        await self.session.flush()
        await self.session.refresh(adoption)
        return adoption

    async def update(self, adoption: Adoption) -> Adoption:
        self.session.add(adoption)
        await self.session.flush()
        await self.session.refresh(adoption)
        return adoption

    async def list_by_user_with_animals(
        self, user_id: int
    ) -> List[Tuple[Adoption, Animal]]:
        stmt = (
            select(Adoption, Animal)
            .join(Animal, Animal.id == Adoption.animal_id)
            .where(Adoption.user_id == user_id)
            .order_by(Adoption.application_date.desc(), Adoption.id.desc())
        )
        result = await self.session.execute(stmt)
        return [tuple(row) for row in result.all()]

    async def list_with_details(self) -> List[Tuple[Adoption, str, str, str]]:
        stmt = (
            select(Adoption, User.first_name, User.last_name, Animal.name)
            .join(User, User.id == Adoption.user_id)
            .join(Animal, Animal.id == Adoption.animal_id)
            .order_by(Adoption.application_date.desc(), Adoption.id.desc())
        )
        result = await self.session.execute(stmt)
        return [tuple(row) for row in result.all()]

    async def count_by_status(self, status: AdoptionStatus) -> int:
        stmt = select(func.count()).select_from(Adoption).where(Adoption.status == status)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def count_by_animal(self, animal_id: int) -> int:
        stmt = select(func.count()).select_from(Adoption).where(Adoption.animal_id == animal_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
