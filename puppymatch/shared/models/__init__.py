"""
PuppyMatch SQLAlchemy Models

Model Hierarchy:
================
    User
       └── interests (UserInterest[])

Usage:
======
    from puppymatch.shared.models import User, UserInterest
"""

from puppymatch.shared.models.base import Base, TimestampMixin
from puppymatch.shared.models.user import User
from puppymatch.shared.models.user_interest import UserInterest

__all__ = [
    "Base",
    "TimestampMixin",
    "User",
    "UserInterest",
]
