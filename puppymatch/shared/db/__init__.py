"""
Database Module

This module provides database connectivity and session management.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                        DATABASE LAYER                                       │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   FastAPI Route                                                             │
│       │  Dependency Injection: get_db()                                     │
│       ▼                                                                     │
│   AsyncSession (one per request, one transaction)                           │
│       │  Passed to Service → Repository                                     │
│       ▼                                                                     │
│   UserRepository / UserInterestRepository                                   │
│       │  SQL (store faults → StoreUnavailableError)                         │
│       ▼                                                                     │
│   PostgreSQL Database                                                       │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘

Components:
===========
- session.py: Engine, session factory, and lifecycle functions
- errors.py: Store fault translation
"""

from puppymatch.shared.db.errors import store_errors, STORE_FAULTS
from puppymatch.shared.db.session import (
    get_db,
    session_scope,
    init_db,
    close_db,
    ping_db,
    build_engine,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "session_scope",
    "init_db",
    "close_db",
    "ping_db",
    "build_engine",
    "AsyncSessionLocal",
    "engine",
    "store_errors",
    "STORE_FAULTS",
]
