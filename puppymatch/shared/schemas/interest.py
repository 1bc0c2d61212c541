"""
Interest Schemas

Request/response models for the interest set endpoints.
"""

from pydantic import Field

from puppymatch.shared.schemas.common import BaseSchema


class InterestsRequest(BaseSchema):
    """Complete desired interest list. Replaces whatever is stored."""

    interests: list[str] = Field(default_factory=list)


class InterestsResponse(BaseSchema):
    """Stored interests, sorted alphabetically."""

    interests: list[str]


class InterestsSavedResponse(BaseSchema):
    """Result of a replace: number of distinct tags stored."""

    saved: int
