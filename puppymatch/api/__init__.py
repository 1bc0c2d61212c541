"""
API Module

FastAPI application and route handlers.

Package Structure:
==================
    api/
    ├── main.py           ← Application entry point
    ├── routes.py         ← Route registration
    ├── dependencies/     ← FastAPI dependencies
    ├── handlers/         ← Route handlers
    └── middleware/       ← Error handlers, request log context

Usage:
======
    # Run the API
    uvicorn puppymatch.api.main:app --reload

    # Import the app
    from puppymatch.api.main import app, create_application
"""
