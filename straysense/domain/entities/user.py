"""
User Entity

Represents a registered person who can adopt animals and file stray reports.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from straysense.domain.base import utcnow
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash (cost factor 12)
    - Never hard-deleted
    """

    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    first_name: str = Field(max_length=100)
    last_name: str = Field(max_length=100)
    role: UserRole = Field(default=UserRole.adopter)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
