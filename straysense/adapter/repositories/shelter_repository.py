from typing import List, Optional

from sqlalchemy import func
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from straysense.app.repositories.shelter_repository import IShelterRepository
from straysense.domain.entities import Shelter


class ShelterRepository(IShelterRepository):
    """Shelter repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, shelter_id: int) -> Optional[Shelter]:
        stmt = select(Shelter).where(Shelter.id == shelter_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Shelter]:
        result = await self.session.exec(select(Shelter).order_by(Shelter.name))
        return list(result.all())

    async def create(self, shelter: Shelter) -> Shelter:
        self.session.add(shelter)
        await self.session.flush()
        await self.session.refresh(shelter)
        return shelter

    async def update(self, shelter: Shelter) -> Shelter:
        self.session.add(shelter)
        await self.session.flush()
        await self.session.refresh(shelter)
        return shelter

    async def delete(self, shelter: Shelter) -> None:
        await self.session.delete(shelter)
        await self.session.flush()

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(Shelter))
        return result.scalar_one()
