"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Take an already verified user id as an explicit argument
- Handle transactions (via session)
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- AuthService: Registration, login, token verification
- InterestService: Read and atomically replace interest sets
- MatchService: Ranked interest overlap
- ProfileService: Public profile fields

Usage:
======
    from puppymatch.shared.services import AuthService, MatchService

    user, token, expires = await AuthService(db).register_user(email, password)
    matches = await MatchService(db).find_matches(user.id, limit=10)
"""

from puppymatch.shared.services.auth_service import AuthService
from puppymatch.shared.services.interest_service import InterestService, normalize_interests
from puppymatch.shared.services.match_service import MatchService, clamp_limit
from puppymatch.shared.services.profile_service import ProfileService

__all__ = [
    "AuthService",
    "InterestService",
    "normalize_interests",
    "MatchService",
    "clamp_limit",
    "ProfileService",
]
