"""
API Dependencies

FastAPI dependencies for injection into route handlers.

Dependencies:
=============
- Database: get_db(), DbSession
- Authentication: get_current_user_id(), CurrentUserId
- Services: get_*_service() functions

Usage:
======
    from puppymatch.api.dependencies import DbSession, CurrentUserId

    @router.get("/me/interests")
    async def read_interests(user_id: CurrentUserId, db: DbSession):
        return await InterestService(db).get(user_id)
"""

from puppymatch.api.dependencies.database import (
    get_db,
    DbSession,
)
from puppymatch.api.dependencies.auth import (
    get_bearer_token,
    get_current_user_id,
    CurrentUserId,
)

__all__ = [
    # Database
    "get_db",
    "DbSession",
    # Authentication
    "get_bearer_token",
    "get_current_user_id",
    "CurrentUserId",
]
