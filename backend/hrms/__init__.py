"""
HRMS Employee API — Application Package Initializer
=====================================================

What: Marks the `hrms` directory as a Python package.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows the same thin layered shape for every request:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │      Services (Employee Handlers)   │  ← id parsing, logging, mapping
    ├─────────────────────────────────────┤
    │         Schemas & Models (Data)     │  ← Pydantic contracts + documents
    ├─────────────────────────────────────┤
    │     Repositories (Persistence)      │  ← MongoDB collection access
    └─────────────────────────────────────┘

    Routes never touch the driver; repositories never touch HTTP.
"""

__version__ = "1.0.0"
