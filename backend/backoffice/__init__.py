"""
Back Office Backend — Application Package Initializer
=====================================================

What: Catalog, payment plan, prospect and unit measure API for the
      inventory/expense back office.
Who:  Imported by uvicorn (`backoffice.main:app`), Alembic and pytest.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns, outcome → status
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← return Ok / NotFound / Invalid / Unexpected
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
