"""
Notekeep Backend — Application Package
=======================================

What: A note-taking REST API (notes with content and an importance flag,
      plus user registration and login).
Who:  Imported by uvicorn (`notekeep.main:app`), Alembic and pytest.

Layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Repositories & Auth Service       │  ← Validation, persistence mapping
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
