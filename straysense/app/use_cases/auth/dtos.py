"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    """

    email: str
    password: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    role: Optional[str] = None


class LoginCommand(BaseModel):
    """Login command - credentials plus client metadata for the session row"""

    email: str
    password: str
    ip_address: Optional[str] = None
    user_agent: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class SignupResponse(BaseModel):
    """Response for signup use case"""

    message: str
    user_id: int


class UserSummary(BaseModel):
    """User information in login response"""

    user_id: int
    email: str
    first_name: str
    last_name: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    token: str
    session_id: str
    user: UserSummary


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    message: str


class CurrentUser(BaseModel):
    """Identity resolved from a valid credential"""

    user_id: int
    email: str
    session_id: str
