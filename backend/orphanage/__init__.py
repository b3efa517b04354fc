"""
Orphanage API — Application Package
====================================

CRUD service for the employees and children of an orphanage.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Services (Outcome Classification) │  ← store result → response / exception
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy tables + Pydantic docs
    ├─────────────────────────────────────┤
    │          Store (Persistence)        │  ← one statement per operation
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
