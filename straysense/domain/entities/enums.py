"""
StraySense Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Role recorded for a registered user"""

    adopter = "adopter"
    volunteer = "volunteer"
    staff = "staff"


class AnimalStatus(str, Enum):
    """Animal availability status"""

    available = "available"
    pending_adoption = "pending_adoption"
    adopted = "adopted"
    pending_foster = "pending_foster"
    fostered = "fostered"
    medical_hold = "medical_hold"


class ReportStatus(str, Enum):
    """Stray report review status"""

    pending = "pending"
    accepted = "accepted"
    rejected = "rejected"


class AdoptionStatus(str, Enum):
    """Adoption request status"""

    pending = "pending"
    approved = "approved"
    rejected = "rejected"
    completed = "completed"
