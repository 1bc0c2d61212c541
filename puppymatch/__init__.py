"""
PuppyMatch Backend

Meet people who share your interests: accounts, interest sets and ranked
interest-overlap matching.

Package Structure:
==================
    puppymatch/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, repositories, services, schemas
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn puppymatch.api.main:app --reload

    # Migrations
    alembic upgrade head
"""
