from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

ADMIN_ROLE = "admin"


def generate_session_jwt(user_id: int, email: str, session_id: UUID, config) -> str:
    """
    Generate the bearer credential handed out at login

    Args:
        user_id: User ID
        email: User email
        session_id: ID of the server-side Session row
        config: Application config (JWT_SECRET, JWT_ALGORITHM, SESSION_TTL_HOURS)

    Returns:
        JWT token string (expires with the session)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "email": email,
        "session_id": str(session_id),
        "exp": now + timedelta(hours=config.SESSION_TTL_HOURS),
        "iat": now,
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def generate_admin_jwt(config) -> str:
    """
    Generate an admin credential

    Returns:
        JWT token string carrying role=admin, valid for ADMIN_TOKEN_TTL_HOURS
    """
    now = datetime.now(UTC)
    payload = {
        "role": ADMIN_ROLE,
        "exp": now + timedelta(hours=config.ADMIN_TOKEN_TTL_HOURS),
        "iat": now,
    }
    return jwt.encode(payload, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def verify_jwt(token: str, config) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string
        config: Application config holding the signing secret

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
        return payload
    except JWTError:
        return None
