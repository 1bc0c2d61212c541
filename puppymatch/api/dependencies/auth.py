"""
Authentication Dependencies

FastAPI dependencies for token-gated routes.

Dependency Hierarchy:
=====================
    get_bearer_token()     ← Extract the raw token from the header
           │
           ▼
    get_current_user_id()  ← Verify signature/expiry, then check the user
                             still exists

The verified id is the only identity a protected handler ever sees. There
is no way for a caller to name a different user in the path or body.

Type Aliases:
=============
    CurrentUserId - UUID of the authenticated caller

Usage:
======
    from puppymatch.api.dependencies.auth import CurrentUserId

    @router.get("/me/interests")
    async def read_interests(user_id: CurrentUserId, db: DbSession):
        ...
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from puppymatch.api.dependencies.database import DbSession
from puppymatch.shared.core.exceptions import InvalidTokenError
from puppymatch.shared.core.logging import log_context
from puppymatch.shared.repositories.user_repository import UserRepository
from puppymatch.shared.services.auth_service import AuthService


# auto_error=False so a missing header surfaces as INVALID_TOKEN, not a bare 403
security = HTTPBearer(auto_error=False)


async def get_bearer_token(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)] = None,
) -> str:
    """
    Extract the bearer token from the Authorization header.

    Raises:
        InvalidTokenError: If the header is missing or not a bearer token
    """
    if not credentials or not credentials.credentials:
        raise InvalidTokenError()
    return credentials.credentials


async def get_current_user_id(
    token: Annotated[str, Depends(get_bearer_token)],
    db: DbSession,
) -> UUID:
    """
    Resolve the authenticated user id.

    A token whose user has since been deleted is rejected the same way as a
    forged or expired one.

    Raises:
        InvalidTokenError: Bad token or unknown user
        StoreUnavailableError: If the existence check cannot reach the database
    """
    user_id = AuthService.verify_token(token)

    if not await UserRepository(db).exists(user_id):
        raise InvalidTokenError()

    log_context(user_id=str(user_id))
    return user_id


# ═══════════════════════════════════════════════════════════════════════════════
# TYPE ALIASES
# ═══════════════════════════════════════════════════════════════════════════════

CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
