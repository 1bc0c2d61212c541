"""
User Repository

The credential store: database operations specific to the User model.

Common Operations:
==================
- insert_user()    → Create a user, relying on the unique email constraint
- get_by_email()   → Find user by (already normalized) email address
- exists()         → Inherited; used to reject tokens of deleted users
- update_profile() → Change public profile fields

Duplicate Handling:
===================
There is no "does this email exist?" pre-check. Two concurrent sign-ups
would both pass such a check. Instead the INSERT is attempted and the
database's unique constraint decides; the IntegrityError is translated
to DuplicateIdentityError.
"""

from typing import Any, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from puppymatch.shared.core.exceptions import DuplicateIdentityError
from puppymatch.shared.repositories.base import BaseRepository
from puppymatch.shared.models.user import User


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Emails passed in are expected to be normalized (lowercased) by the
    caller; this layer compares them exactly.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by normalized email address.

        Args:
            email: Lowercased email address

        Returns:
            User if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE email = 'user@example.com'
        """
        result = await self._execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def insert_user(self, email: str, password_hash: str) -> User:
        """
        Insert a new user.

        Args:
            email: Lowercased email address
            password_hash: Bcrypt hash of the password

        Returns:
            The created User

        Raises:
            DuplicateIdentityError: If the email is already registered
            StoreUnavailableError: If the database cannot be reached
        """
        try:
            return await self.create(email=email, password_hash=password_hash)
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateIdentityError() from exc

    async def update_profile(self, user_id: UUID, **fields: Any) -> Optional[User]:
        """
        Update public profile fields.

        Args:
            user_id: User to update
            **fields: Any of username, telegram_handle, avatar_url

        Returns:
            Updated User, or None if the user does not exist

        Raises:
            DuplicateIdentityError: If the username belongs to someone else
        """
        try:
            return await self.update(user_id, **fields)
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateIdentityError("That username is already taken.") from exc
