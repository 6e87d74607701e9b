import hmac
import logging

from straysense.libs.result import Error, Result, Return
from straysense.api.utils.jwt import generate_admin_jwt
from .dtos import AdminTokenResponse

logger = logging.getLogger(__name__)


class AdminLoginUseCase:
    """
    Exchange the shared admin password for an admin credential.

    Business Rules:
    - Constant-time password comparison
    - No server-side session; the credential expires on its own
    """

    def __init__(self, config):
        self.config = config

    async def execute(self, password: str) -> Result[AdminTokenResponse]:
        if not hmac.compare_digest(password.encode(), self.config.ADMIN_PASSWORD.encode()):
            logger.warning("Rejected admin login attempt")
            return Return.err(Error("INVALID_ADMIN_PASSWORD", "Invalid admin password"))

        return Return.ok(AdminTokenResponse(token=generate_admin_jwt(self.config)))
