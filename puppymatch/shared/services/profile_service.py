"""
Profile Service

Reads and updates the caller's public profile (display name, contact
handle, avatar reference). These are the fields other users see on a
match card. Avatar files themselves are not handled here; only a URL is
stored.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from puppymatch.shared.core.exceptions import InvalidTokenError
from puppymatch.shared.core.logging import get_logger
from puppymatch.shared.models.user import User
from puppymatch.shared.repositories.user_repository import UserRepository


logger = get_logger("puppymatch.profile")

PROFILE_FIELDS = ("username", "telegram_handle", "avatar_url")


class ProfileService:
    """Service for the authenticated user's own profile."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def get_profile(self, user_id: UUID) -> User:
        """
        Get the caller's user record.

        Raises:
            InvalidTokenError: If the user vanished after token verification
        """
        user = await self.repo.get(user_id)
        if not user:
            raise InvalidTokenError()
        return user

    async def update_profile(self, user_id: UUID, changes: dict[str, Optional[str]]) -> User:
        """
        Apply profile changes.

        Only keys present in `changes` are touched. Empty strings and None
        clear the field.

        Args:
            user_id: Verified user id
            changes: Subset of username, telegram_handle, avatar_url

        Returns:
            The updated user

        Raises:
            DuplicateIdentityError: If the username is taken
            InvalidTokenError: If the user no longer exists
        """
        fields: dict[str, Any] = {
            key: (value or None) for key, value in changes.items() if key in PROFILE_FIELDS
        }
        if not fields:
            return await self.get_profile(user_id)

        user = await self.repo.update_profile(user_id, **fields)
        if not user:
            raise InvalidTokenError()

        logger.info("Profile updated", user_id=str(user_id), fields=sorted(fields))
        return user
