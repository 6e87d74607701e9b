from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from straysense.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID, expired or not"""
        pass

    @abstractmethod
    async def create(self, session: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session: Session) -> Session:
        """Update existing session"""
        pass

    @abstractmethod
    async def delete_by_id(self, session_id: UUID) -> bool:
        """Delete a session. Returns True if a row was removed."""
        pass
