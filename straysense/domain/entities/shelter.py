"""
Shelter Entity

A physical facility that houses animals.
"""

from typing import Optional

from sqlmodel import Field, SQLModel


class Shelter(SQLModel, table=True):
    """
    Shelter entity.

    Business Rules:
    - Cannot be deleted while any animal references it
    """

    __tablename__ = "shelters"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=255, index=True)
    address: str = Field(max_length=255)
    city: str = Field(max_length=100)
    country: str = Field(max_length=100)
    phone: Optional[str] = Field(default=None, max_length=30)
    email: Optional[str] = Field(default=None, max_length=255)
