"""
NoteKeeper Backend: Application Package Initializer
====================================================

Architecture Note:
    This backend follows a layered architecture:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Security (Auth Gate, Tokens,      │  ← who is calling
    │             Password Hasher)        │
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← validation, ownership rules
    ├─────────────────────────────────────┤
    │   Repositories (owner-scoped SQL)   │  ← what each caller may touch
    ├─────────────────────────────────────┤
    │  Models & Schemas / Database        │  ← SQLAlchemy ORM + Pydantic
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
