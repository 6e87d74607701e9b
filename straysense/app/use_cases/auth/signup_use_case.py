import logging

import bcrypt
from straysense.libs.result import Error, Result, Return

from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.entities import User, UserProfile, UserRole
from .dtos import SignupCommand, SignupResponse

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Business Logic:
    1. Check if email already exists
    2. Hash password with bcrypt cost factor 12
    3. Create User and its UserProfile
    4. Commit transaction atomically
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with validated user data

        Returns:
            Result[SignupResponse] with the new user id
            or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        role = UserRole.adopter
        if command.role:
            try:
                role = UserRole(command.role)
            except ValueError:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Unknown role: {command.role}")
                )

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            user = User(
                email=command.email,
                password_hash=password_hash.decode("utf-8"),
                first_name=command.first_name,
                last_name=command.last_name,
                role=role,
            )
            user = await self.uow.users.create(user)

            profile = UserProfile(
                user_id=user.id,
                phone=command.phone,
                address_line1=command.address_line1,
                address_line2=command.address_line2,
                city=command.city,
                country=command.country,
            )
            await self.uow.users.save_profile(profile)

            await self.uow.commit()

            logger.info(f"User {user.id} signed up")
            return Return.ok(SignupResponse(message="Signup successful", user_id=user.id))
