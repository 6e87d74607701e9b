"""
Validate Session Use Case

Resolves a bearer credential to the user behind a live session.
"""

from uuid import UUID

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.base import utcnow
from straysense.api.utils.jwt import verify_jwt
from .dtos import CurrentUser


class ValidateSessionUseCase:
    """
    Use case for credential validation.

    Business Rules:
    - The credential must decode and carry a session_id
    - The session row must exist and satisfy now < expires_at;
      an expired row is treated as absent
    - Successful validation stamps last_active
    """

    def __init__(self, uow: UnitOfWork, config):
        self.uow = uow
        self.config = config

    async def execute(self, token: str) -> Result[CurrentUser]:
        payload = verify_jwt(token, self.config)
        if payload is None or "session_id" not in payload or "user_id" not in payload:
            return Return.err(Error("INVALID_TOKEN", "Invalid token"))

        try:
            session_id = UUID(str(payload["session_id"]))
        except ValueError:
            return Return.err(Error("INVALID_TOKEN", "Invalid token"))

        async with self.uow:
            session = await self.uow.sessions.get_by_id(session_id)
            now = utcnow()

            if session is None or not session.is_active(now):
                return Return.err(
                    Error("SESSION_EXPIRED_OR_MISSING", "Invalid or expired session")
                )

            session.last_active = now
            await self.uow.sessions.update(session)
            await self.uow.commit()

            return Return.ok(
                CurrentUser(
                    user_id=session.user_id,
                    email=payload.get("email", ""),
                    session_id=str(session.id),
                )
            )
