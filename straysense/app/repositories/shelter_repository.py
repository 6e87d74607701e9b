from abc import ABC, abstractmethod
from typing import List, Optional

from straysense.domain.entities import Shelter


class IShelterRepository(ABC):
    """Shelter repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, shelter_id: int) -> Optional[Shelter]:
        pass

    @abstractmethod
    async def list_all(self) -> List[Shelter]:
        """List shelters ordered by name"""
        pass

    @abstractmethod
    async def create(self, shelter: Shelter) -> Shelter:
        pass

    @abstractmethod
    async def update(self, shelter: Shelter) -> Shelter:
        pass

    @abstractmethod
    async def delete(self, shelter: Shelter) -> None:
        pass

    @abstractmethod
    async def count(self) -> int:
        pass
