"""
Admin Token Authentication

Validates admin bearer credentials for the /admin endpoints.
"""

from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from straysense.api.error import ClientError
from straysense.api.utils.jwt import ADMIN_ROLE, verify_jwt
from straysense.depends import get_config
from straysense.libs.result import Error

admin_security = HTTPBearer(auto_error=False)


async def require_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(admin_security),
    config=Depends(get_config),
) -> dict:
    """
    Verify an admin credential from the Authorization header.

    Admin credentials are minted by POST /admin/verify and carry role=admin.
    A valid user credential is rejected with 403, not 401.

    Raises:
        ClientError: 401 if the token is missing or invalid, 403 if not admin

    Returns:
        Decoded admin token payload
    """
    if credentials is None:
        raise ClientError(
            Error("MISSING_TOKEN", "No token provided"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials, config)
    if payload is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    if payload.get("role") != ADMIN_ROLE:
        raise ClientError(
            Error("FORBIDDEN", "Not authorized"),
            status_code=status.HTTP_403_FORBIDDEN,
        )

    return payload
