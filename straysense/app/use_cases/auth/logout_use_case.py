"""
Logout Use Case

Deletes the session named by a credential.
"""

import logging
from uuid import UUID

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.api.utils.jwt import verify_jwt
from .dtos import LogoutResponse

logger = logging.getLogger(__name__)


class LogoutUseCase:
    """
    Use case for logout.

    Business Rules:
    - The credential must decode, but its session need not still exist
    - Deleting a missing session is a no-op success, so logout is idempotent
    """

    def __init__(self, uow: UnitOfWork, config):
        self.uow = uow
        self.config = config

    async def execute(self, token: str) -> Result[LogoutResponse]:
        payload = verify_jwt(token, self.config)
        if payload is None or "session_id" not in payload:
            return Return.err(Error("INVALID_TOKEN", "Invalid token"))

        try:
            session_id = UUID(str(payload["session_id"]))
        except ValueError:
            return Return.err(Error("INVALID_TOKEN", "Invalid token"))

        async with self.uow:
            deleted = await self.uow.sessions.delete_by_id(session_id)
            await self.uow.commit()

        if deleted:
            logger.info(f"Session {session_id} logged out")
        return Return.ok(LogoutResponse(message="Logged out successfully"))
