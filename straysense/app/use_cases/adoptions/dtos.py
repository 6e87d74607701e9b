"""
Adoption Use Case DTOs (Data Transfer Objects)
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel


class UpdateAdoptionStatusCommand(BaseModel):
    """Admin decision on an adoption; gates left as None are not touched"""

    status: str
    home_check_passed: Optional[bool] = None
    fee_paid: Optional[bool] = None
    contract_signed: Optional[bool] = None


class SubmitAdoptionResponse(BaseModel):
    """Response for submit adoption use case"""

    message: str
    adoption_id: int


class UpdateAdoptionStatusResponse(BaseModel):
    """Response for update adoption status use case"""

    message: str
    adoption_id: int
    status: str
    animal_status: Optional[str] = None


class AdoptionInfo(BaseModel):
    """Adoption row as shown to its applicant"""

    adoption_id: int
    animal_id: int
    animal_name: str
    species: str
    breed: Optional[str] = None
    image_path: Optional[str] = None
    status: str
    application_date: datetime
    approval_date: Optional[datetime] = None
    home_check_passed: bool
    fee_paid: bool
    contract_signed: bool


class AdminAdoptionInfo(BaseModel):
    """Adoption row as shown to administrators"""

    adoption_id: int
    user_id: int
    first_name: str
    last_name: str
    animal_id: int
    animal_name: str
    status: str
    application_date: datetime
    approval_date: Optional[datetime] = None
    home_check_passed: bool
    fee_paid: bool
    contract_signed: bool
