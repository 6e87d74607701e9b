"""
Animal Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from straysense.domain.entities import AnimalStatus


class AnimalFilter(BaseModel):
    """Optional filters for the public animal listing"""

    species: Optional[str] = None
    breed: Optional[str] = None
    age_min: Optional[int] = Field(default=None, ge=0)
    age_max: Optional[int] = Field(default=None, ge=0)


class CreateAnimalCommand(BaseModel):
    """
    Create animal command.

    A report_id promotes that stray report: the report records the new
    animal's id as processed_animal_id.
    """

    name: str = Field(..., min_length=1, max_length=100)
    species: str = Field(..., min_length=1, max_length=50)
    breed: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    gender: Optional[str] = None
    health_status: Optional[str] = None
    neutered: bool = False
    shelter_id: Optional[int] = None
    status: AnimalStatus = AnimalStatus.available
    image_path: Optional[str] = None
    report_id: Optional[int] = None


class UpdateAnimalCommand(BaseModel):
    """Update animal command; only fields that are sent are changed"""

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    species: Optional[str] = Field(default=None, min_length=1, max_length=50)
    breed: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    gender: Optional[str] = None
    health_status: Optional[str] = None
    neutered: Optional[bool] = None
    shelter_id: Optional[int] = None
    status: Optional[AnimalStatus] = None
    image_path: Optional[str] = None


class AnimalResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    species: str
    breed: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    health_status: Optional[str] = None
    neutered: bool
    shelter_id: Optional[int] = None
    status: AnimalStatus
    image_path: Optional[str] = None
    created_at: Optional[datetime] = None


class CreateAnimalResponse(BaseModel):
    animal_id: int
    report_id: Optional[int] = None
