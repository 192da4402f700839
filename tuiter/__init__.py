"""
Tuiter Backend — Application Package Initializer
================================================

What: Marks the `tuiter` directory as a Python package.
Who:  Imported by uvicorn (`uvicorn tuiter.main:app`) and by pytest.

Architecture Note:
    The backend is a thin layered CRUD service:

    ┌─────────────────────────────────────┐
    │       Routes (Controllers)          │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │     DAOs (Data-Access Objects)      │  ← One database call per method
    ├─────────────────────────────────────┤
    │   Models & Schemas (Documents)      │  ← Pydantic document shapes + API contracts
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← Async MongoDB client
    └─────────────────────────────────────┘

    Routes never touch the driver; DAOs never touch HTTP.
"""

__version__ = "1.0.0"
