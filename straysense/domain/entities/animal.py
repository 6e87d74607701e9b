"""
Animal Entity

An adoptable animal, optionally housed in a shelter.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from straysense.domain.base import utcnow
from .enums import AnimalStatus


class Animal(SQLModel, table=True):
    """
    Animal entity.

    Business Rules:
    - Only animals with status=available accept adoption requests
    - Status moves to pending_adoption on request and adopted on approval
    """

    __tablename__ = "animals"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100)
    species: str = Field(max_length=50, index=True)
    breed: Optional[str] = Field(default=None, max_length=100)
    age: Optional[int] = None
    gender: Optional[str] = Field(default=None, max_length=20)
    health_status: Optional[str] = Field(default=None, max_length=255)
    neutered: bool = Field(default=False)

    shelter_id: Optional[int] = Field(default=None, foreign_key="shelters.id", index=True)
    status: AnimalStatus = Field(default=AnimalStatus.available)
    image_path: Optional[str] = Field(default=None, max_length=255)

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_animal_status", "status"),)
