from abc import ABC, abstractmethod
from typing import Optional

from straysense.domain.entities import User, UserProfile


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Create a new user"""
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """Update existing user"""
        pass

    @abstractmethod
    async def get_profile(self, user_id: int) -> Optional[UserProfile]:
        """Get the contact profile of a user"""
        pass

    @abstractmethod
    async def save_profile(self, profile: UserProfile) -> UserProfile:
        """Create or update a user profile"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count registered users"""
        pass
