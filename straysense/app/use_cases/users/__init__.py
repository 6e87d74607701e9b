"""
User Management Use Cases

Profile reads and edits for the signed-in user.
"""

from .profile_use_case import ProfileUseCase
from .dtos import ProfileResponse, UpdateProfileCommand

__all__ = [
    "ProfileUseCase",
    "ProfileResponse",
    "UpdateProfileCommand",
]
