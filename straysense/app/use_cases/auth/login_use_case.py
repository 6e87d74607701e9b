"""
Login Use Case

Authenticates a user and opens a server-side session.
"""

import logging
import secrets
from datetime import timedelta

import bcrypt

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.base import utcnow
from straysense.domain.entities import Session
from straysense.api.utils.jwt import generate_session_jwt
from .dtos import LoginCommand, LoginResponse, UserSummary

logger = logging.getLogger(__name__)

# Checked against when the email is unknown so both failures cost one bcrypt round
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for user login.

    Business Rules:
    - Same error for unknown email and wrong password
    - Creates a Session with an opaque id, a random secondary token,
      expires_at = now + SESSION_TTL_HOURS and the client's IP/user agent
    - Returns a signed credential embedding user_id, email and session_id
    """

    def __init__(self, uow: UnitOfWork, config):
        self.uow = uow
        self.config = config

    async def execute(self, command: LoginCommand) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            command: LoginCommand with credentials and client metadata

        Returns:
            Result with LoginResponse containing the credential, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(command.email)

            if user is None:
                bcrypt.checkpw(command.password.encode(), _DUMMY_HASH)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            password_valid = bcrypt.checkpw(
                command.password.encode(), user.password_hash.encode()
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            now = utcnow()
            session = Session(
                user_id=user.id,
                session_token=secrets.token_hex(32),
                created_at=now,
                last_active=now,
                expires_at=now + timedelta(hours=self.config.SESSION_TTL_HOURS),
                ip_address=command.ip_address,
                user_agent=command.user_agent,
            )
            session = await self.uow.sessions.create(session)

            await self.uow.commit()

            token = generate_session_jwt(user.id, user.email, session.id, self.config)
            logger.info(f"User {user.id} logged in (session {session.id})")

            return Return.ok(
                LoginResponse(
                    token=token,
                    session_id=str(session.id),
                    user=UserSummary(
                        user_id=user.id,
                        email=user.email,
                        first_name=user.first_name,
                        last_name=user.last_name,
                    ),
                )
            )
