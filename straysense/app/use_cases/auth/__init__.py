"""
Authentication Use Cases

Signup, login, credential validation and logout.
"""

from .signup_use_case import SignupUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .validate_session_use_case import ValidateSessionUseCase
from .dtos import (
    SignupCommand,
    SignupResponse,
    LoginCommand,
    LoginResponse,
    LogoutResponse,
    UserSummary,
    CurrentUser,
)

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "ValidateSessionUseCase",
    # DTOs - Commands
    "SignupCommand",
    "LoginCommand",
    # DTOs - Responses
    "SignupResponse",
    "LoginResponse",
    "LogoutResponse",
    "UserSummary",
    "CurrentUser",
]
