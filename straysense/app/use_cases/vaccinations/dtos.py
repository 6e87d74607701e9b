"""
Vaccination Use Case DTOs (Data Transfer Objects)
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class VaccineTypeCommand(BaseModel):
    """Create/replace vaccine type command"""

    name: str = Field(..., min_length=1, max_length=100)
    description: Optional[str] = None


class VaccineTypeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None


class ScheduleVaccinationCommand(BaseModel):
    animal_id: int
    vaccine_id: int
    scheduled_date: date


class VaccinationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    animal_id: int
    vaccine_id: int
    scheduled_date: date
    completed_date: Optional[date] = None


class VaccinationScheduleEntry(BaseModel):
    """Vaccination joined with animal and vaccine names"""

    vaccination_id: int
    animal_id: int
    animal_name: str
    vaccine_id: int
    vaccine_name: str
    scheduled_date: date
    completed_date: Optional[date] = None
