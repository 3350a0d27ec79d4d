"""
ProjectBoard Backend: Application Package Initializer
=====================================================

What: Discussion-board backend (articles with hashtags, authored by user accounts).
Who:  Imported by uvicorn (`projectboard.main:app`), Alembic, and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Existence checks, DTO mapping
    ├─────────────────────────────────────┤
    │   Repositories (Persistence Port)   │  ← Queries, search bindings, paging
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic DTOs
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes never see ORM entities; services hand back immutable DTOs.
"""

__version__ = "1.0.0"
