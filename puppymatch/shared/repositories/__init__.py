"""
Repository Pattern Implementations

Repositories encapsulate database queries and provide a clean API for data access.

Repository Hierarchy:
=====================
    BaseRepository[ModelType]           ← Generic CRUD operations
         │
         ├── UserRepository             ← Credential store, profile fields
         └── UserInterestRepository     ← Interest sets, overlap query

Usage Example:
==============
    from puppymatch.shared.repositories import UserRepository, UserInterestRepository

    async def tags_of(db: AsyncSession, email: str) -> set[str]:
        user = await UserRepository(db).get_by_email(email)
        return await UserInterestRepository(db).read_tags(user.id)
"""

from puppymatch.shared.repositories.base import BaseRepository
from puppymatch.shared.repositories.user_repository import UserRepository
from puppymatch.shared.repositories.user_interest_repository import UserInterestRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "UserInterestRepository",
]
