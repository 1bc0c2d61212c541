"""
UserInterest Entity Model

One row per (user, tag). The set of rows sharing a user_id is that user's
interest set.

SAMPLE USER_INTEREST RECORDS:
┌──────────────────────────────────────────────────────────────────────────────┐
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ interest         │ "hiking"                                                  │
├──────────────────┼───────────────────────────────────────────────────────────┤
│ user_id          │ 550e8400-e29b-41d4-a716-446655440000                      │
│ interest         │ "chess"                                                   │
└──────────────────────────────────────────────────────────────────────────────┘

The composite primary key forbids duplicate tags per user. The secondary
index on `interest` serves the overlap query, which starts from the
requester's tags and looks up who else holds them.
"""

from datetime import datetime
from typing import TYPE_CHECKING
import uuid

from sqlalchemy import DateTime, ForeignKey, String, text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from puppymatch.shared.models.base import Base


if TYPE_CHECKING:
    from puppymatch.shared.models.user import User


class UserInterest(Base):
    """
    UserInterest model - a single normalized tag held by a user.

    Attributes:
        user_id: Owner (part of composite PK)
        interest: Normalized tag (part of composite PK, indexed)
        created_at: When the row was written by the last replace
    """

    __tablename__ = "user_interests"

    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    )

    interest: Mapped[str] = mapped_column(
        String(64),
        primary_key=True,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=text("CURRENT_TIMESTAMP"),
        nullable=False,
    )

    user: Mapped["User"] = relationship(
        "User",
        back_populates="interests",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<UserInterest(user_id={self.user_id}, interest={self.interest})>"
