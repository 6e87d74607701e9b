from abc import ABC, abstractmethod
from typing import List, Optional

from straysense.domain.entities import Animal, AnimalStatus


class IAnimalRepository(ABC):
    """Animal repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, animal_id: int) -> Optional[Animal]:
        """Get animal by ID"""
        pass

    @abstractmethod
    async def get_for_update(self, animal_id: int) -> Optional[Animal]:
        """Get animal by ID, locking the row for the current transaction"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Animal]:
        """List every animal"""
        pass

    @abstractmethod
    async def search(
        self,
        status: AnimalStatus,
        species: Optional[str] = None,
        breed: Optional[str] = None,
        age_min: Optional[int] = None,
        age_max: Optional[int] = None,
    ) -> List[Animal]:
        """List animals with the given status matching the optional filters"""
        pass

    @abstractmethod
    async def create(self, animal: Animal) -> Animal:
        """Create a new animal"""
        pass

    @abstractmethod
    async def update(self, animal: Animal) -> Animal:
        """Update existing animal"""
        pass

    @abstractmethod
    async def delete(self, animal: Animal) -> None:
        """Delete an animal"""
        pass

    @abstractmethod
    async def transition_status(
        self, animal_id: int, from_status: AnimalStatus, to_status: AnimalStatus
    ) -> bool:
        """
        Move an animal from one status to another.
        Returns False when the animal was not in from_status.
        """
        pass

    @abstractmethod
    async def set_status(self, animal_id: int, status: AnimalStatus) -> bool:
        """Set an animal's status unconditionally; False when the animal is gone"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all animals"""
        pass

    @abstractmethod
    async def count_by_shelter(self, shelter_id: int) -> int:
        """Count animals housed in a shelter"""
        pass
