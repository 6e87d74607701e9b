"""
StraySense Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    UserRole,
    AnimalStatus,
    ReportStatus,
    AdoptionStatus,
)

# Export all entities
from .user import User
from .user_profile import UserProfile
from .session import Session
from .shelter import Shelter
from .animal import Animal
from .stray_report import StrayReport
from .adoption import Adoption
from .vaccine_type import VaccineType
from .vaccination import Vaccination

__all__ = [
    # Enums
    "UserRole",
    "AnimalStatus",
    "ReportStatus",
    "AdoptionStatus",
    # Entities
    "User",
    "UserProfile",
    "Session",
    "Shelter",
    "Animal",
    "StrayReport",
    "Adoption",
    "VaccineType",
    "Vaccination",
]
