from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from straysense.domain.entities import Vaccination


class IVaccinationRepository(ABC):
    """Vaccination repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, vaccination_id: int) -> Optional[Vaccination]:
        """Get vaccination by ID"""
        pass

    @abstractmethod
    async def create(self, vaccination: Vaccination) -> Vaccination:
        """Schedule a new vaccination"""
        pass

    @abstractmethod
    async def update(self, vaccination: Vaccination) -> Vaccination:
        """Update existing vaccination"""
        pass

    @abstractmethod
    async def list_with_names(
        self, animal_ids: Optional[List[int]] = None
    ) -> List[Tuple[Vaccination, str, str]]:
        """
        List vaccinations with animal name and vaccine name, latest scheduled
        first. Restricted to animal_ids when given.
        """
        pass

    @abstractmethod
    async def list_for_adopter(self, user_id: int) -> List[Tuple[Vaccination, str, str]]:
        """List vaccinations of animals the user has an approved adoption for"""
        pass

    @abstractmethod
    async def count_pending(self) -> int:
        """Count vaccinations without a completed date"""
        pass

    @abstractmethod
    async def count_by_vaccine(self, vaccine_id: int) -> int:
        """Count vaccinations that reference a vaccine type"""
        pass

    @abstractmethod
    async def count_by_animal(self, animal_id: int) -> int:
        """Count vaccinations scheduled for an animal"""
        pass
