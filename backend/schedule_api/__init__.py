"""
Schedule API — Application Package Initializer
===============================================

What: Marks the `schedule_api` directory as a Python package.
Who:  Imported by uvicorn (`schedule_api.main:app`), pytest, and the CLI entry point.

Architecture Note:
    The service follows the same thin layering for both resources:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← path/body extraction, status codes
    ├─────────────────────────────────────┤
    │     Services (Schedule, Feedback)   │  ← one parameterized statement each
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← injected engine + per-request sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
