"""
Match Schemas

A MatchResult is both the service return type and the API item shape.
"""

from typing import Optional
from uuid import UUID

from pydantic import Field

from puppymatch.shared.schemas.common import BaseSchema


class MatchResult(BaseSchema):
    """Another user sharing at least one interest with the requester."""

    user_id: UUID
    overlap: int = Field(ge=1)
    common: list[str]
    username: Optional[str] = None
    avatar_url: Optional[str] = None
    telegram_handle: Optional[str] = None
