"""
User Handler

Endpoints acting on the authenticated caller: profile, interest set and
matches. Every route is token-gated and the target user is always the
token's subject.

Routes:
=======
    GET    /users/me               → Profile
    PATCH  /users/me               → Update profile fields
    GET    /users/me/interests     → Stored interests (sorted)
    PUT    /users/me/interests     → Replace interest set
    GET    /users/me/matches       → Ranked matches
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from puppymatch.api.dependencies.auth import CurrentUserId
from puppymatch.api.dependencies.services import (
    get_interest_service,
    get_match_service,
    get_profile_service,
)
from puppymatch.shared.schemas.interest import (
    InterestsRequest,
    InterestsResponse,
    InterestsSavedResponse,
)
from puppymatch.shared.schemas.match import MatchResult
from puppymatch.shared.schemas.user import ProfileUpdate, UserResponse
from puppymatch.shared.services.interest_service import InterestService
from puppymatch.shared.services.match_service import MatchService
from puppymatch.shared.services.profile_service import ProfileService


router = APIRouter()


# ═══════════════════════════════════════════════════════════════════════════════
# PROFILE
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/me", response_model=UserResponse)
async def get_me(
    user_id: CurrentUserId,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """Get the caller's profile."""
    user = await profile_service.get_profile(user_id)
    return UserResponse.model_validate(user)


@router.patch("/me", response_model=UserResponse)
async def update_me(
    data: ProfileUpdate,
    user_id: CurrentUserId,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """
    Update profile fields.

    Only fields present in the body are changed. An empty string clears a
    field.

    Raises:
        400: Field fails its format check
        409: Username already taken
    """
    user = await profile_service.update_profile(
        user_id,
        data.model_dump(exclude_unset=True),
    )
    return UserResponse.model_validate(user)


# ═══════════════════════════════════════════════════════════════════════════════
# INTERESTS
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/me/interests", response_model=InterestsResponse)
async def get_interests(
    user_id: CurrentUserId,
    interest_service: InterestService = Depends(get_interest_service),
):
    """Get the caller's interests, sorted alphabetically."""
    tags = await interest_service.get(user_id)
    return InterestsResponse(interests=sorted(tags))


@router.put("/me/interests", response_model=InterestsSavedResponse)
async def replace_interests(
    data: InterestsRequest,
    user_id: CurrentUserId,
    interest_service: InterestService = Depends(get_interest_service),
):
    """
    Replace the caller's interest set.

    Tags are trimmed, lowercased and deduplicated; blanks are dropped.

    Raises:
        400: Tag too long or too many tags (nothing is written)
    """
    final_set = await interest_service.replace(user_id, data.interests)
    return InterestsSavedResponse(saved=len(final_set))


# ═══════════════════════════════════════════════════════════════════════════════
# MATCHES
# ═══════════════════════════════════════════════════════════════════════════════


@router.get("/me/matches", response_model=list[MatchResult])
async def get_matches(
    user_id: CurrentUserId,
    limit: Optional[int] = Query(None, description="Maximum results (clamped to 1..100)"),
    match_service: MatchService = Depends(get_match_service),
):
    """Other users ranked by number of shared interests."""
    return await match_service.find_matches(user_id, limit=limit)
