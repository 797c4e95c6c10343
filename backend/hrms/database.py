"""
HRMS Employee API — MongoDB Client Management
===============================================

What:  Async MongoDB client factory and the FastAPI repository dependency.
How:   The lifespan handler (main.py) opens one AsyncMongoClient at startup,
       wraps its collection in a MongoEmployeeRepository and stores it on
       `app.state`. Route handlers receive it through `get_employee_repository`.
When:  Client is created once per process; the dependency runs per request.

Connection Pooling:
    pymongo's AsyncMongoClient owns its own pool and is safe to share across
    concurrent requests. No pool tuning is applied here; driver defaults hold.
"""

from typing import Optional

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from hrms.config import Settings, settings as default_settings
from hrms.repositories.base import EmployeeRepository


def create_mongo_client(config: Optional[Settings] = None) -> AsyncMongoClient:
    """
    Build the process-wide MongoDB client.

    The client connects lazily: construction never blocks and an unreachable
    server surfaces on the first operation instead.
    """
    config = config or default_settings
    return AsyncMongoClient(config.mongodb_url)


def get_employee_collection(
    client: AsyncMongoClient, config: Optional[Settings] = None
) -> AsyncCollection:
    """Resolve the configured database/collection pair on `client`."""
    config = config or default_settings
    return client[config.mongodb_database][config.mongodb_collection]


# ── Repository Dependency ─────────────────────────────────────────────────
def get_employee_repository(request: Request) -> EmployeeRepository:
    """
    FastAPI dependency that returns the repository bound to this app instance.

    Example usage in a route:
        @router.get("/employee")
        async def list_employees(
            repository: EmployeeRepository = Depends(get_employee_repository),
        ):
            ...
    """
    return request.app.state.employee_repository


async def close_mongo_client(client: Optional[AsyncMongoClient]) -> None:
    """Close every pooled connection; called from the lifespan shutdown path."""
    if client is not None:
        await client.close()
