"""
Adoption Use Cases

Request submission, admin decisions and listings.
"""

from .submit_adoption_use_case import SubmitAdoptionUseCase
from .update_adoption_status_use_case import UpdateAdoptionStatusUseCase
from .list_adoptions_use_case import ListAdoptionsUseCase
from .dtos import (
    UpdateAdoptionStatusCommand,
    SubmitAdoptionResponse,
    UpdateAdoptionStatusResponse,
    AdoptionInfo,
    AdminAdoptionInfo,
)

__all__ = [
    # Use Cases
    "SubmitAdoptionUseCase",
    "UpdateAdoptionStatusUseCase",
    "ListAdoptionsUseCase",
    # DTOs
    "UpdateAdoptionStatusCommand",
    "SubmitAdoptionResponse",
    "UpdateAdoptionStatusResponse",
    "AdoptionInfo",
    "AdminAdoptionInfo",
]
