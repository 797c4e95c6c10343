"""
HRMS Employee API — Employee Service (Request Handlers' Business Logic)
=========================================================================

What:  The four employee operations: list, create, update, delete.
How:   Each operation parses the path identifier (where there is one), makes
       exactly one repository call and returns the API representation.
Who:   Called by route handlers; calls the EmployeeRepository.

Design Decision:
    EmployeeService is stateless: it receives the repository on every call,
    the same way the routes receive it from FastAPI's dependency injection.
    Tests pass any EmployeeRepository implementation directly.

Error behaviour:
    - Malformed identifier  → InvalidIdentifierError (400), no storage call made
    - Update of unknown id  → NotFoundError (404)
    - Delete of unknown id  → success; no existence check is performed
    - Storage failures      → DatabaseError (500), propagated unchanged
"""

import logging
from typing import List

from hrms.repositories.base import EmployeeRepository
from hrms.schemas.employee import EmployeeIn, EmployeeResponse, MessageResponse

logger = logging.getLogger(__name__)

DELETED_MESSAGE = "Employee deleted successfully"


class EmployeeService:
    """Operations behind the /employee routes."""

    async def list_employees(
        self, repository: EmployeeRepository
    ) -> List[EmployeeResponse]:
        """
        Return every stored employee.

        No filter, ordering or limit is applied; order is whatever the engine
        returns and is not guaranteed stable between calls.
        """
        employees = await repository.list_employees()
        logger.debug("Listed %d employees", len(employees))
        return employees

    async def create_employee(
        self, repository: EmployeeRepository, employee: EmployeeIn
    ) -> EmployeeResponse:
        """
        Insert a new employee and return it with its engine-assigned id.

        Raises:
            DatabaseError: The insert failed; nothing was stored.
        """
        created = await repository.create_employee(employee)
        logger.info("Employee created: %s", created.id)
        return created

    async def update_employee(
        self, repository: EmployeeRepository, raw_id: str, employee: EmployeeIn
    ) -> EmployeeResponse:
        """
        Overwrite name, salary and age of an existing employee.

        All three fields are written even when the client omitted them
        (omitted fields arrive here as their zero value).

        Raises:
            InvalidIdentifierError: `raw_id` is malformed.
            NotFoundError: No employee has this id.
            DatabaseError: The update failed.
        """
        employee_id = repository.parse_id(raw_id)
        updated = await repository.update_employee(employee_id, employee)
        logger.info("Employee updated: %s", updated.id)
        return updated

    async def delete_employee(
        self, repository: EmployeeRepository, raw_id: str
    ) -> MessageResponse:
        """
        Delete an employee by id.

        Succeeds whether or not a document matched.

        Raises:
            InvalidIdentifierError: `raw_id` is malformed.
            DatabaseError: The delete failed.
        """
        employee_id = repository.parse_id(raw_id)
        deleted = await repository.delete_employee(employee_id)
        if not deleted:
            logger.info("Delete matched no employee: %s", raw_id)
        return MessageResponse(message=DELETED_MESSAGE)


# ── Singleton Instance ────────────────────────────────────────────────────
employee_service = EmployeeService()
