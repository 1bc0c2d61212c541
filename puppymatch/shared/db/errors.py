"""
Store Fault Translation

Turns infrastructure failures raised by SQLAlchemy or the driver into the
application's single transient kind, StoreUnavailableError.

What counts as a store fault:
=============================
- OperationalError / InterfaceError: server down, connection dropped
- DisconnectionError: pooled connection found dead
- sqlalchemy.exc.TimeoutError: no pooled connection free within pool_timeout
- OSError: socket-level failures the driver did not wrap

IntegrityError is deliberately absent: a constraint violation is a
statement about the data, and callers (registration) turn it into a
conflict instead.

Usage:
======
    async with store_errors():
        result = await session.execute(query)
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy import exc as sa_exc

from puppymatch.shared.core.exceptions import StoreUnavailableError
from puppymatch.shared.core.logging import get_logger


logger = get_logger("puppymatch.db")

STORE_FAULTS: tuple[type[BaseException], ...] = (
    sa_exc.OperationalError,
    sa_exc.InterfaceError,
    sa_exc.DisconnectionError,
    sa_exc.TimeoutError,
    OSError,
)


@asynccontextmanager
async def store_errors() -> AsyncIterator[None]:
    """
    Re-raise store faults as StoreUnavailableError.

    No retry happens here; the fault surfaces immediately.

    Raises:
        StoreUnavailableError: If the wrapped block hit a store fault
    """
    try:
        yield
    except STORE_FAULTS as exc:
        logger.error(
            "Store unavailable",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        raise StoreUnavailableError() from exc
