"""
Session Entity

Server-side record of one successful login.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from straysense.domain.base import utcnow


class Session(SQLModel, table=True):
    """
    Session entity - proves a successful login until it expires.

    Business Rules:
    - Valid only while now < expires_at; an expired row counts as absent
    - Fixed TTL, no renewal
    - Deleted on logout
    """

    __tablename__ = "sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)

    session_token: str = Field(max_length=64)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    last_active: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    # Client metadata
    ip_address: Optional[str] = Field(default=None, max_length=45)
    user_agent: Optional[str] = Field(default=None, max_length=512)

    __table_args__ = (Index("idx_session_expires_at", "expires_at"),)

    def is_active(self, now: datetime) -> bool:
        return now < self.expires_at
