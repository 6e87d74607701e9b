"""
Profile Use Case

Reads and edits the signed-in user's own profile.
"""

from typing import Optional

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.entities import User, UserProfile, UserRole
from .dtos import ProfileResponse, UpdateProfileCommand

USER_FIELDS = ("first_name", "last_name")
PROFILE_FIELDS = ("phone", "address_line1", "address_line2", "city", "country")


def _to_response(user: User, profile: Optional[UserProfile]) -> ProfileResponse:
    return ProfileResponse(
        user_id=user.id,
        email=user.email,
        first_name=user.first_name,
        last_name=user.last_name,
        role=UserRole(user.role).value,
        **{field: getattr(profile, field) if profile else None for field in PROFILE_FIELDS},
    )


class ProfileUseCase:
    """
    Use case for the signed-in user's profile.

    Business Rules:
    - Email and role are not editable here
    - Only fields present in the command are changed
    - A missing profile row is created on first edit
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get(self, user_id: int) -> Result[ProfileResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            profile = await self.uow.users.get_profile(user_id)
            return Return.ok(_to_response(user, profile))

    async def update(
        self, user_id: int, command: UpdateProfileCommand
    ) -> Result[ProfileResponse]:
        changes = command.model_dump(exclude_unset=True)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            for field in USER_FIELDS:
                if changes.get(field):
                    setattr(user, field, changes[field])
            user = await self.uow.users.update(user)

            profile = await self.uow.users.get_profile(user_id)
            if profile is None:
                profile = UserProfile(user_id=user_id)
            for field in PROFILE_FIELDS:
                if field in changes:
                    setattr(profile, field, changes[field])
            profile = await self.uow.users.save_profile(profile)

            await self.uow.commit()
            return Return.ok(_to_response(user, profile))
