from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from straysense.domain.entities import Adoption, AdoptionStatus, Animal


class IAdoptionRepository(ABC):
    """Adoption repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, adoption_id: int) -> Optional[Adoption]:
        """Get adoption by ID"""
        pass

    @abstractmethod
    async def find_pending(self, user_id: int, animal_id: int) -> Optional[Adoption]:
        """Find the pending adoption for a (user, animal) pair"""
        pass

    @abstractmethod
    async def create(self, adoption: Adoption) -> Adoption:
        """Create a new adoption"""
        pass

    @abstractmethod
    async def update(self, adoption: Adoption) -> Adoption:
        """Update existing adoption"""
        pass

    @abstractmethod
    async def list_by_user_with_animals(
        self, user_id: int
    ) -> List[Tuple[Adoption, Animal]]:
        """List a user's adoptions with their animals, newest first"""
        pass

    @abstractmethod
    async def list_with_details(self) -> List[Tuple[Adoption, str, str, str]]:
        """List all adoptions with user first/last name and animal name, newest first"""
        pass

    @abstractmethod
    async def count_by_status(self, status: AdoptionStatus) -> int:
        """Count adoptions in a given status"""
        pass

    @abstractmethod
    async def count_by_animal(self, animal_id: int) -> int:
        """Count adoptions of any status that reference an animal"""
        pass
