from typing import List, Optional

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from straysense.app.repositories.animal_repository import IAnimalRepository
from straysense.domain.entities import Animal, AnimalStatus


class AnimalRepository(IAnimalRepository):
    """Animal repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, animal_id: int) -> Optional[Animal]:
        stmt = select(Animal).where(Animal.id == animal_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_for_update(self, animal_id: int) -> Optional[Animal]:
        """
        SELECT ... FOR UPDATE on engines that support it.
        SQLite has no row locks and compiles the clause away.
        """
        stmt = select(Animal).where(Animal.id == animal_id).with_for_update()
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Animal]:
        stmt = select(Animal).order_by(Animal.id)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def search(
        self,
        status: AnimalStatus,
        species: Optional[str] = None,
        breed: Optional[str] = None,
        age_min: Optional[int] = None,
        age_max: Optional[int] = None,
    ) -> List[Animal]:
        stmt = select(Animal).where(Animal.status == status)
        if species:
            stmt = stmt.where(Animal.species == species)
        if breed:
            stmt = stmt.where(Animal.breed == breed)
        if age_min is not None:
            stmt = stmt.where(Animal.age >= age_min)
        if age_max is not None:
            stmt = stmt.where(Animal.age <= age_max)
        result = await self.session.exec(stmt.order_by(Animal.id))
        return list(result.all())

    async def create(self, animal: Animal) -> Animal:
        self.session.add(animal)
        await self.session.flush()
        await self.session.refresh(animal)
        return animal

    async def update(self, animal: Animal) -> Animal:
        self.session.add(animal)
        await self.session.flush()
        await self.session.refresh(animal)
        return animal

    async def delete(self, animal: Animal) -> None:
        await self.session.delete(animal)
        await self.session.flush()

    async def transition_status(
        self, animal_id: int, from_status: AnimalStatus, to_status: AnimalStatus
    ) -> bool:
        stmt = (
            update(Animal)
            .where(Animal.id == animal_id, Animal.status == from_status)
            .values(status=to_status)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def set_status(self, animal_id: int, status: AnimalStatus) -> bool:
        stmt = (
            update(Animal)
            .where(Animal.id == animal_id)
            .values(status=status)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Animal))
        return result.scalar_one()

    async def count_by_shelter(self, shelter_id: int) -> int:
        stmt = select(func.count()).select_from(Animal).where(Animal.shelter_id == shelter_id)
        result = await self.session.execute(stmt)
        return result.scalar_one()
