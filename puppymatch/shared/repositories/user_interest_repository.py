"""
User Interest Repository

The interest store: reads and atomically replaces a user's tag set, and
runs the overlap query behind matching.

Common Operations:
==================
- read_tags()                → Current tag set of one user
- replace_tags()             → Delete + bulk insert inside the request transaction
- find_overlapping_users()   → Users sharing ≥1 tag, ranked, limited
- get_common_tags()          → Shared tags for a handful of candidates

Atomic Replace:
===============
┌─────────────────────────────────────────────────────────────────────────────┐
│  BEGIN (request transaction, opened by get_db)                              │
│    SELECT id FROM users WHERE id = :u FOR UPDATE   ← serialize same-user    │
│    DELETE FROM user_interests WHERE user_id = :u                            │
│    INSERT INTO user_interests (user_id, interest) VALUES (...), (...)       │
│  COMMIT                                                                     │
└─────────────────────────────────────────────────────────────────────────────┘
Other transactions keep seeing the old rows until COMMIT, so no reader
observes a half-cleared set. Two replaces for the same user queue on the
row lock and the later one wins. Replaces for different users lock
different rows and never wait on each other.

Overlap Query:
==============
    SELECT users.*, COUNT(user_interests.interest) AS overlap
    FROM users JOIN user_interests ON user_interests.user_id = users.id
    WHERE user_interests.interest IN (:requester_tags)
      AND users.id != :requester
    GROUP BY users.id
    ORDER BY overlap DESC, users.username IS NULL, users.username, users.id
    LIMIT :limit

Only rows carrying one of the requester's tags are touched, so users with
nothing in common are never loaded.
"""

from collections import defaultdict
from uuid import UUID

from sqlalchemy import delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from puppymatch.shared.models.user import User
from puppymatch.shared.models.user_interest import UserInterest
from puppymatch.shared.repositories.base import BaseRepository


class UserInterestRepository(BaseRepository[UserInterest]):
    """
    Repository for UserInterest database operations.

    Tags passed in must already be normalized; this layer stores and
    compares them verbatim.
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserInterestRepository.

        Args:
            session: Async database session
        """
        super().__init__(UserInterest, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # READ OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def read_tags(self, user_id: UUID) -> set[str]:
        """
        Get a user's current interest set.

        Args:
            user_id: Owner UUID

        Returns:
            Set of tags; empty if the user never saved any
        """
        result = await self._execute(
            select(UserInterest.interest).where(UserInterest.user_id == user_id)
        )
        return set(result.scalars().all())

    async def find_overlapping_users(
        self,
        user_id: UUID,
        tags: set[str],
        limit: int,
    ) -> list[tuple[User, int]]:
        """
        Rank other users by how many of `tags` they hold.

        Args:
            user_id: Requester, excluded from the result
            tags: Requester's (non-empty) tag set
            limit: Maximum number of rows

        Returns:
            List of (user, overlap) ordered by overlap desc, then users with
            a username first, username asc, id asc
        """
        overlap = func.count(UserInterest.interest).label("overlap")

        result = await self._execute(
            select(User, overlap)
            .join(UserInterest, UserInterest.user_id == User.id)
            .where(
                UserInterest.interest.in_(sorted(tags)),
                User.id != user_id,
            )
            .group_by(User.id)
            .order_by(
                overlap.desc(),
                User.username.is_(None),
                User.username.asc(),
                User.id.asc(),
            )
            .limit(limit)
        )

        return [(row.User, int(row.overlap)) for row in result.all()]

    async def get_common_tags(
        self,
        user_ids: list[UUID],
        tags: set[str],
    ) -> dict[UUID, list[str]]:
        """
        Get which of `tags` each of `user_ids` holds.

        Args:
            user_ids: Candidate UUIDs
            tags: Requester's tag set

        Returns:
            Mapping of user id to alphabetically sorted shared tags
        """
        if not user_ids or not tags:
            return {}

        result = await self._execute(
            select(UserInterest.user_id, UserInterest.interest).where(
                UserInterest.user_id.in_(user_ids),
                UserInterest.interest.in_(sorted(tags)),
            )
        )

        common: dict[UUID, list[str]] = defaultdict(list)
        for row in result.all():
            common[row.user_id].append(row.interest)

        return {uid: sorted(values) for uid, values in common.items()}

    # ═══════════════════════════════════════════════════════════════════════════
    # WRITE OPERATIONS
    # ═══════════════════════════════════════════════════════════════════════════

    async def replace_tags(self, user_id: UUID, tags: set[str]) -> None:
        """
        Replace a user's whole interest set.

        Args:
            user_id: Owner UUID (must exist)
            tags: New, already normalized tag set (may be empty)
        """
        # Row lock on the owner; SQLite ignores FOR UPDATE
        await self._execute(select(User.id).where(User.id == user_id).with_for_update())

        await self._execute(delete(UserInterest).where(UserInterest.user_id == user_id))

        if tags:
            await self._execute(
                insert(UserInterest),
                [{"user_id": user_id, "interest": tag} for tag in sorted(tags)],
            )

        await self._flush()
