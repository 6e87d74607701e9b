from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from straysense.app.repositories.vaccine_type_repository import IVaccineTypeRepository
from straysense.domain.entities import VaccineType


class VaccineTypeRepository(IVaccineTypeRepository):
    """Vaccine type repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, vaccine_id: int) -> Optional[VaccineType]:
        stmt = select(VaccineType).where(VaccineType.id == vaccine_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[VaccineType]:
        result = await self.session.exec(select(VaccineType).order_by(VaccineType.name))
        return list(result.all())

    async def create(self, vaccine_type: VaccineType) -> VaccineType:
        self.session.add(vaccine_type)
        await self.session.flush()
        await self.session.refresh(vaccine_type)
        return vaccine_type

    async def update(self, vaccine_type: VaccineType) -> VaccineType:
        self.session.add(vaccine_type)
        await self.session.flush()
        await self.session.refresh(vaccine_type)
        return vaccine_type

    async def delete(self, vaccine_type: VaccineType) -> None:
        await self.session.delete(vaccine_type)
        await self.session.flush()
