"""
Social Media API Backend: Application Package Initializer
==========================================================

What: Marks the `social_api` directory as a Python package.
Who:  Used by uvicorn (`uvicorn social_api.main:app`), Alembic, and pytest.

Architecture Note:
    The backend is split into four layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← status codes, request decoding
    ├─────────────────────────────────────┤
    │         Services (Domain Logic)     │  ← registration/login/message rules
    ├─────────────────────────────────────┤
    │     Repositories (Storage Adapters) │  ← CRUD + equality lookups
    ├─────────────────────────────────────┤
    │   Models, Schemas & Database        │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘

    Routes never touch SQL; services never build HTTP responses.
"""

__version__ = "1.0.0"
