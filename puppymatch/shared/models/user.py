"""
User Entity Model

Represents a registered application user.

Model Hierarchy:
================
    User
       └── interests (UserInterest[]) - The user's current interest set

SAMPLE USER RECORD:
┌──────────────────────────────────────────────────────────────────────────────┐
│ id               │ 550e8400-e29b-41d4-a716-446655440000                      │
│ email            │ "user@example.com"  (always lowercase)                    │
│ password_hash    │ "$2b$12$..."                                              │
│ username         │ "rex_walker"        (optional, unique)                    │
│ telegram_handle  │ "@rexwalker"        (optional)                            │
│ avatar_url       │ "https://cdn.example.com/a/rex.png" (optional)            │
│ created_at       │ 2024-01-01T00:00:00Z                                      │
│ updated_at       │ 2024-01-15T10:30:00Z                                      │
└──────────────────────────────────────────────────────────────────────────────┘
"""

from typing import TYPE_CHECKING, Optional
import uuid

from sqlalchemy import String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from puppymatch.shared.models.base import Base, TimestampMixin


if TYPE_CHECKING:
    from puppymatch.shared.models.user_interest import UserInterest


class User(Base, TimestampMixin):
    """
    User model representing a registered application user.

    The id is generated once at insert and never changes. The email is
    unique at the database level; registration relies on that constraint
    rather than a lookup, so two concurrent sign-ups for one address
    cannot both succeed.

    Attributes:
        id: Unique identifier (UUID v4)
        email: Lowercased email address (unique, indexed)
        password_hash: Bcrypt hashed password, never serialized
        username: Optional public display name (unique)
        telegram_handle: Optional public contact handle
        avatar_url: Optional avatar reference

    Relationships:
        interests: Rows of the user's current interest set
    """

    __tablename__ = "users"

    # ═══════════════════════════════════════════════════════════════════════════
    # PRIMARY KEY
    # ═══════════════════════════════════════════════════════════════════════════

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # AUTHENTICATION
    # ═══════════════════════════════════════════════════════════════════════════

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )

    password_hash: Mapped[str] = mapped_column(
        Text,
        nullable=False,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # PUBLIC PROFILE
    # ═══════════════════════════════════════════════════════════════════════════

    username: Mapped[Optional[str]] = mapped_column(
        String(32),
        unique=True,
        nullable=True,
    )

    telegram_handle: Mapped[Optional[str]] = mapped_column(
        String(33),
        nullable=True,
    )

    avatar_url: Mapped[Optional[str]] = mapped_column(
        String(2048),
        nullable=True,
    )

    # ═══════════════════════════════════════════════════════════════════════════
    # RELATIONSHIPS
    # ═══════════════════════════════════════════════════════════════════════════

    # One-to-Many: deleting a user removes its interest rows
    interests: Mapped[list["UserInterest"]] = relationship(
        "UserInterest",
        back_populates="user",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"<User(id={self.id}, email={self.email})>"
