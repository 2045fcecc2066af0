"""
ActivityHive Backend — Application Package Initializer
======================================================

What: Marks the `activityhive` directory as a Python package.
Who:  Used by uvicorn (`activityhive.main:app`), pytest and the console script.

Architecture Note:
    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │   Dependencies (resolver, body)     │  ← Per-request bindings
    ├─────────────────────────────────────┤
    │   Services + Validators (Logic)     │  ← Shape checks, store calls
    ├─────────────────────────────────────┤
    │        Database (MongoStore)        │  ← One motor client per process
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
