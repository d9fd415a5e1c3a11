"""
RecipeHub Backend — Application Package Initializer
=====================================================

What: Marks the `recipehub` directory as a Python package.
Who:  Used by uvicorn (`recipehub.main:app`), pytest, and the service modules.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Storage Calls)    │  ← One MongoDB operation each
    ├─────────────────────────────────────┤
    │      Models & Schemas (Documents)   │  ← Field names + response shapes
    ├─────────────────────────────────────┤
    │        Database (Motor client)      │  ← Connection lifecycle
    └─────────────────────────────────────┘

    Routes translate request parameters into service calls; services turn
    each call into a single collection operation and shape the result.
"""

__version__ = "1.0.0"
