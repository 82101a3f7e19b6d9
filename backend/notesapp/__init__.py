"""
Notes Backend — Application Package Initializer
================================================

What: Marks the `notesapp` directory as a Python package.
Who:  Imported by uvicorn (`notesapp.main:app`), pytest, and the client package.

Architecture Note:
    The server side is split into thin layers:

    ┌─────────────────────────────────────┐
    │        Routes (HTTP API Layer)      │  ← status codes, JSON bodies
    ├─────────────────────────────────────┤
    │     Services (Notes Service)        │  ← CRUD against the store
    ├─────────────────────────────────────┤
    │     Models & Schemas (Data)         │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │     Database (Note Store)           │  ← Async SQLAlchemy sessions
    └─────────────────────────────────────┘

    The `notesapp.client` subpackage holds the client side: an explicit
    state object, the controller that drives the HTTP API, and the
    HTML presentation derived from state.
"""

__version__ = "1.0.0"
