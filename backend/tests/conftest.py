"""
HRMS Employee API — Test Configuration (conftest.py)
======================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_collection: MagicMock standing in for a pymongo AsyncCollection
    ├── memory_repository: In-memory EmployeeRepository (no MongoDB needed)
    ├── sample_employee: Valid create/update payload
    ├── test_client: HTTPX AsyncClient bound to an app serving memory_repository
    └── mongo_test_client: HTTPX AsyncClient bound to MongoEmployeeRepository(mock_collection)
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["MONGODB_URL"] = "mongodb://localhost:27017/"
os.environ["MONGODB_DATABASE"] = "hrms_test"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import Any, Dict, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from bson import ObjectId
from httpx import ASGITransport, AsyncClient

from hrms.exceptions import DatabaseError, InvalidIdentifierError, NotFoundError
from hrms.main import create_app
from hrms.repositories.base import EmployeeRepository
from hrms.repositories.mongo import MongoEmployeeRepository
from hrms.schemas.employee import EmployeeIn, EmployeeResponse


class InMemoryEmployeeRepository(EmployeeRepository):
    """
    EmployeeRepository keeping documents in a dict, keyed by ObjectId.

    Set `fail_with` to a message to make every storage call raise
    DatabaseError with that message.
    """

    def __init__(self):
        self.documents: Dict[ObjectId, Dict[str, Any]] = {}
        self.fail_with: Optional[str] = None
        self.healthy = True

    def parse_id(self, raw_id: str) -> ObjectId:
        if not isinstance(raw_id, str) or not ObjectId.is_valid(raw_id):
            raise InvalidIdentifierError(raw_id=raw_id)
        return ObjectId(raw_id)

    def _check(self) -> None:
        if self.fail_with:
            raise DatabaseError(message=self.fail_with)

    def _response(self, oid: ObjectId) -> EmployeeResponse:
        return EmployeeResponse(id=str(oid), **self.documents[oid])

    async def list_employees(self) -> List[EmployeeResponse]:
        self._check()
        return [self._response(oid) for oid in self.documents]

    async def create_employee(self, employee: EmployeeIn) -> EmployeeResponse:
        self._check()
        oid = ObjectId()
        self.documents[oid] = employee.model_dump()
        return self._response(oid)

    async def update_employee(self, employee_id: ObjectId, employee: EmployeeIn) -> EmployeeResponse:
        self._check()
        if employee_id not in self.documents:
            raise NotFoundError(resource="employee", resource_id=str(employee_id))
        self.documents[employee_id] = employee.model_dump()
        return self._response(employee_id)

    async def delete_employee(self, employee_id: ObjectId) -> bool:
        self._check()
        return self.documents.pop(employee_id, None) is not None

    async def ping(self) -> bool:
        return self.healthy


@pytest.fixture
def mock_collection():
    """
    Provides a mock pymongo AsyncCollection.

    Usage:
        async def test_list(mock_collection):
            mock_collection.find.return_value.to_list.return_value = [doc]
    """
    collection = MagicMock()
    cursor = MagicMock()
    cursor.to_list = AsyncMock(return_value=[])
    collection.find = MagicMock(return_value=cursor)
    collection.insert_one = AsyncMock()
    collection.find_one_and_update = AsyncMock()
    collection.delete_one = AsyncMock()
    collection.database.command = AsyncMock(return_value={"ok": 1.0})
    return collection


@pytest.fixture
def memory_repository():
    return InMemoryEmployeeRepository()


@pytest.fixture
def sample_employee():
    return {"name": "Ada", "salary": 1000, "age": 30}


@pytest_asyncio.fixture
async def test_client(memory_repository):
    """
    Provides an async HTTP test client for endpoint testing.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/employee")
            assert response.status_code == 200
    """
    app = create_app(repository=memory_repository)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest_asyncio.fixture
async def mongo_test_client(mock_collection):
    """
    HTTP client for an app serving MongoEmployeeRepository over mock_collection.

    Exercises the production id parsing and document mapping end to end.
    """
    app = create_app(repository=MongoEmployeeRepository(mock_collection))
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
