"""
Grandma Recipes API: Application Package
=========================================

What: Backend for grandmothers' recipes, their contributors ("grandmas")
      and the user accounts that submit them.
Who:  Imported by uvicorn (grandma_recipes.main:app), Alembic and pytest.

Layout:

    ┌─────────────────────────────────────┐
    │      Routes (FastAPI routers)       │  ← HTTP envelopes, status codes
    ├─────────────────────────────────────┤
    │  Dependencies (authorization gate)  │  ← Bearer token verification
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← aggregation, write pipeline,
    │                                     │    credentials, contributor CRUD
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
