"""
Match Service

Finds other users who share interests with the requester and ranks them
by overlap count.

Algorithm:
==========
    1. Load requester's tags R.
       R empty → return [] immediately (no other query runs).
    2. Overlap query: users holding at least one tag in R, excluding the
       requester, counted and ranked in SQL:
         overlap DESC, has-username first, username ASC, id ASC
       and truncated to the clamped limit.
    3. Fetch the shared tags for just those users; sort each list
       alphabetically.

Example:
========
    A = {chess, hiking}
    B = {hiking, baking}    → overlap 1, common [hiking]
    C = {chess, hiking}     → overlap 2, common [chess, hiking]

    find_matches(A) == [C, B]
"""

from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from puppymatch.config.settings import settings
from puppymatch.shared.core.logging import get_logger
from puppymatch.shared.repositories.user_interest_repository import UserInterestRepository
from puppymatch.shared.schemas.match import MatchResult


logger = get_logger("puppymatch.matching")


def clamp_limit(limit: Optional[int]) -> int:
    """
    Bound a requested result count.

    Args:
        limit: Requested count, or None for the default

    Returns:
        MATCH_DEFAULT_LIMIT when None, else limit clamped to [1, MATCH_MAX_LIMIT]
    """
    if limit is None:
        return settings.MATCH_DEFAULT_LIMIT
    return max(1, min(int(limit), settings.MATCH_MAX_LIMIT))


class MatchService:
    """Service computing ranked interest matches for a user."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.interest_repo = UserInterestRepository(session)

    async def find_matches(
        self,
        user_id: UUID,
        limit: Optional[int] = None,
    ) -> list[MatchResult]:
        """
        Rank other users by number of shared interests.

        Args:
            user_id: Verified requester id
            limit: Maximum number of results (clamped)

        Returns:
            Ordered list of MatchResult; empty if the requester has no
            interests or nobody shares any

        Raises:
            StoreUnavailableError: If the database is unreachable
        """
        tags = await self.interest_repo.read_tags(user_id)
        if not tags:
            return []

        ranked = await self.interest_repo.find_overlapping_users(
            user_id=user_id,
            tags=tags,
            limit=clamp_limit(limit),
        )
        if not ranked:
            return []

        common = await self.interest_repo.get_common_tags(
            [candidate.id for candidate, _ in ranked],
            tags,
        )

        matches = [
            MatchResult(
                user_id=candidate.id,
                username=candidate.username,
                avatar_url=candidate.avatar_url,
                telegram_handle=candidate.telegram_handle,
                overlap=overlap,
                common=common.get(candidate.id, []),
            )
            for candidate, overlap in ranked
        ]

        logger.info("Matches computed", user_id=str(user_id), count=len(matches))
        return matches
