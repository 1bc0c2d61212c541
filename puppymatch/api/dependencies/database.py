"""
Database Dependency

FastAPI dependency for database sessions.

One session per request. The session is committed when the handler
returns normally and rolled back if anything raises, so a request's
writes land all together or not at all.

The dependency is function-scoped: its exit code (the commit) runs after
the handler returns but before the response is sent. A commit that fails
therefore still reaches the client as 503 STORE_UNAVAILABLE instead of
being lost behind an already sent 200.

Usage:
======
    from puppymatch.api.dependencies.database import DbSession

    @router.put("/me/interests")
    async def replace_interests(db: DbSession, ...):
        ...
"""

from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from puppymatch.shared.db import session_scope


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for database sessions.

    Yields:
        AsyncSession: Database session for the current request
    """
    async with session_scope() as session:
        yield session


# Type alias for cleaner route signatures. Every use of get_db goes through
# this alias so all of them share one function scope and one cached session.
DbSession = Annotated[AsyncSession, Depends(get_db, scope="function")]
