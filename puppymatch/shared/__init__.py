"""
Shared Module

Everything below the HTTP layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- DB: Engine, sessions, store fault translation

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── migrations/     ← Alembic environment and revisions
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    └── utils/          ← Password hashing, tokens

Usage:
======
    from puppymatch.shared.models import User, UserInterest
    from puppymatch.shared.repositories import UserRepository
    from puppymatch.shared.services import AuthService, MatchService
    from puppymatch.shared.schemas import RegisterRequest, AuthResponse
    from puppymatch.shared.core import logger, PuppyMatchException
"""
