"""
Service Dependencies

FastAPI dependencies for service injection.

Services are created per-request, which is fine because:
- Services are stateless (only hold db session reference)
- Each request gets its own db session

Usage:
======
    from puppymatch.api.dependencies.services import get_match_service

    @router.get("/me/matches")
    async def matches(
        user_id: CurrentUserId,
        match_service: MatchService = Depends(get_match_service),
    ):
        return await match_service.find_matches(user_id)
"""

from puppymatch.api.dependencies.database import DbSession
from puppymatch.shared.services.auth_service import AuthService
from puppymatch.shared.services.interest_service import InterestService
from puppymatch.shared.services.match_service import MatchService
from puppymatch.shared.services.profile_service import ProfileService


async def get_auth_service(
    db: DbSession,
) -> AuthService:
    """
    Dependency to get AuthService instance.

    Creates a new service instance per request with the request's db session.
    """
    return AuthService(db)


async def get_interest_service(
    db: DbSession,
) -> InterestService:
    return InterestService(db)


async def get_match_service(
    db: DbSession,
) -> MatchService:
    return MatchService(db)


async def get_profile_service(
    db: DbSession,
) -> ProfileService:
    return ProfileService(db)
