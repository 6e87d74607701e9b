from abc import ABC, abstractmethod
from typing import List, Optional

from straysense.domain.entities import VaccineType


class IVaccineTypeRepository(ABC):
    """Vaccine type repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, vaccine_id: int) -> Optional[VaccineType]:
        pass

    @abstractmethod
    async def list_all(self) -> List[VaccineType]:
        """List vaccine types ordered by name"""
        pass

    @abstractmethod
    async def create(self, vaccine_type: VaccineType) -> VaccineType:
        pass

    @abstractmethod
    async def update(self, vaccine_type: VaccineType) -> VaccineType:
        pass

    @abstractmethod
    async def delete(self, vaccine_type: VaccineType) -> None:
        pass
