"""
Interest Service

Validates, normalizes and atomically replaces a user's interest set.

Normalization:
==============
    "  Hiking "  →  "hiking"
    "HIKING"     →  "hiking"
    "   "        →  (dropped)

    normalize(["  Hiking ", "hiking", "HIKING", ""]) == {"hiking"}

Normalizing an already normalized set returns it unchanged.

Tags holding control characters (NUL, embedded newlines...) or lone
surrogates are rejected outright; PostgreSQL text cannot store them.

Replace Semantics:
==================
There is no add/remove. Callers send the complete desired set and it
replaces whatever was stored. Validation runs first and rejects the whole
request; nothing is written unless every tag passes.
"""

from typing import Iterable
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from puppymatch.config.settings import settings
from puppymatch.shared.core.exceptions import ValidationError
from puppymatch.shared.core.logging import get_logger
from puppymatch.shared.repositories.user_interest_repository import UserInterestRepository
from puppymatch.shared.utils.text import has_control_characters


logger = get_logger("puppymatch.interests")


def normalize_interests(raw_interests: Iterable[str]) -> set[str]:
    """
    Trim, lowercase, drop empties and dedupe a list of tags.

    Args:
        raw_interests: Tags as sent by the client

    Returns:
        Normalized tag set

    Raises:
        ValidationError: If a tag holds a control character or lone
            surrogate or is longer than INTEREST_MAX_LENGTH, or if the set
            is larger than INTEREST_MAX_COUNT
    """
    normalized: set[str] = set()

    for position, raw in enumerate(raw_interests):
        tag = raw.strip().lower()
        if not tag:
            continue
        if has_control_characters(tag):
            # details must stay JSON-encodable, so the tag is not echoed
            raise ValidationError(
                "Interest contains invalid characters",
                details={"position": position},
            )
        if len(tag) > settings.INTEREST_MAX_LENGTH:
            raise ValidationError(
                "Interest is too long",
                details={"interest": tag[:80], "max_length": settings.INTEREST_MAX_LENGTH},
            )
        normalized.add(tag)

    if len(normalized) > settings.INTEREST_MAX_COUNT:
        raise ValidationError(
            "Too many interests",
            details={"count": len(normalized), "max_count": settings.INTEREST_MAX_COUNT},
        )

    return normalized


class InterestService:
    """Service for reading and replacing interest sets."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserInterestRepository(session)

    async def get(self, user_id: UUID) -> set[str]:
        """
        Get a user's current interest set.

        Args:
            user_id: Verified user id

        Returns:
            Tag set, empty if the user has not saved any
        """
        return await self.repo.read_tags(user_id)

    async def replace(self, user_id: UUID, raw_interests: Iterable[str]) -> set[str]:
        """
        Replace a user's interest set with the normalized form of the input.

        Args:
            user_id: Verified user id
            raw_interests: Complete desired list of tags

        Returns:
            The final normalized set that was stored

        Raises:
            ValidationError: Before any write, if the input is invalid
            StoreUnavailableError: If the database is unreachable
        """
        final_set = normalize_interests(raw_interests)

        await self.repo.replace_tags(user_id, final_set)

        logger.info("Interests replaced", user_id=str(user_id), count=len(final_set))
        return final_set
