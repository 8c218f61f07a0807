"""
BlogAPI Backend: Application Package Initializer
=================================================

What:  Marks the `blogapi` directory as a Python package.
Who:   Used implicitly by Python's import system and explicitly by Alembic, pytest, and uvicorn.

Architecture Note:
    The backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │      Routes (Post Resource Handler) │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Post Mapper, Post Store)│  ← Validation, shaping, persistence
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never see unvalidated request bodies: every body goes through the
    mapper first, and the store only accepts the typed structures it returns.
"""

__version__ = "1.0.0"
