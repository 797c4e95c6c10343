"""
HRMS Employee API — Abstract Employee Repository
==================================================

What:  Abstract base class defining the storage contract the employee
       handlers depend on.
How:   Concrete implementations inherit from EmployeeRepository and implement
       every abstract method. MongoEmployeeRepository is the production one;
       tests supply in-memory doubles.
Who:   Called by EmployeeService; constructed once at startup.

Identifier contract:
    Identifiers are opaque to everything above this layer. `parse_id` turns the
    text from the URL into whatever the engine needs, and implementations
    render identifiers back to text in the EmployeeResponse they return. The
    HTTP contract therefore does not change if the engine does.
"""

from abc import ABC, abstractmethod
from typing import Any, List

from hrms.schemas.employee import EmployeeIn, EmployeeResponse


class EmployeeRepository(ABC):
    """
    Storage interface for the employee collection.

    Contract:
        - Every engine failure is raised as DatabaseError
        - Malformed identifiers are raised as InvalidIdentifierError
        - Returned employees always carry their engine-assigned id
    """

    @abstractmethod
    def parse_id(self, raw_id: str) -> Any:
        """
        Convert a textual identifier into the engine's identifier type.

        Raises:
            InvalidIdentifierError: `raw_id` is not a valid identifier for this engine.
        """
        ...

    @abstractmethod
    async def list_employees(self) -> List[EmployeeResponse]:
        """Return every stored employee, in engine order, with no filter or limit."""
        ...

    @abstractmethod
    async def create_employee(self, employee: EmployeeIn) -> EmployeeResponse:
        """
        Insert a new employee and return it as stored.

        The engine assigns the identifier. The returned value is produced from
        the inserted document itself, so a successful insert is never reported
        as a failure.
        """
        ...

    @abstractmethod
    async def update_employee(
        self, employee_id: Any, employee: EmployeeIn
    ) -> EmployeeResponse:
        """
        Overwrite name, salary and age of one employee and return it after the write.

        Args:
            employee_id: A value previously returned by `parse_id`.

        Raises:
            NotFoundError: No employee has this identifier.
        """
        ...

    @abstractmethod
    async def delete_employee(self, employee_id: Any) -> bool:
        """
        Delete one employee.

        Returns:
            True if a document was removed, False if none matched.
        """
        ...

    @abstractmethod
    async def ping(self) -> bool:
        """Lightweight connectivity probe used by the health endpoint."""
        ...
