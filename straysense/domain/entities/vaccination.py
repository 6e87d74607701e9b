"""
Vaccination Entity

A scheduled application of a vaccine type to an animal.
"""

from datetime import date
from typing import Optional

from sqlmodel import Field, SQLModel


class Vaccination(SQLModel, table=True):
    """
    Vaccination entity.

    Business Rules:
    - Pending while completed_date is NULL
    """

    __tablename__ = "vaccinations"

    id: Optional[int] = Field(default=None, primary_key=True)
    animal_id: int = Field(foreign_key="animals.id", index=True)
    vaccine_id: int = Field(foreign_key="vaccine_types.id", index=True)

    scheduled_date: date
    completed_date: Optional[date] = None
