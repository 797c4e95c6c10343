"""
HRMS Employee API — Employee Route Handlers
=============================================

What:  GET/POST /employee and PUT/DELETE /employee/{id}.
How:   Extracts the body and path parameter, delegates to EmployeeService,
       returns JSON. Errors are formatted by the global exception handlers.

Body parsing:
    FastAPI validates the JSON body against EmployeeIn before the handler
    runs, so a malformed body is rejected (400) before the identifier is
    looked at.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from hrms.database import get_employee_repository
from hrms.repositories.base import EmployeeRepository
from hrms.schemas.employee import (
    EmployeeIn,
    EmployeeResponse,
    ErrorResponse,
    MessageResponse,
)
from hrms.services.employee_service import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Employees"])


@router.get(
    "/employee",
    response_model=List[EmployeeResponse],
    responses={500: {"description": "Storage error", "model": ErrorResponse}},
    summary="List all employees",
)
async def list_employees(
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> List[EmployeeResponse]:
    """Query parameters are ignored; there is no pagination or filtering."""
    return await employee_service.list_employees(repository)


@router.post(
    "/employee",
    response_model=EmployeeResponse,
    responses={
        400: {"description": "Malformed body", "model": ErrorResponse},
        500: {"description": "Storage error", "model": ErrorResponse},
    },
    summary="Create an employee",
)
async def create_employee(
    employee: EmployeeIn,
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeResponse:
    return await employee_service.create_employee(repository, employee)


@router.put(
    "/employee/{employee_id}",
    response_model=EmployeeResponse,
    responses={
        400: {"description": "Malformed body or invalid ID", "model": ErrorResponse},
        404: {"description": "Employee not found", "model": ErrorResponse},
        500: {"description": "Storage error", "model": ErrorResponse},
    },
    summary="Overwrite an employee",
)
async def update_employee(
    employee_id: str,
    employee: EmployeeIn,
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> EmployeeResponse:
    """name, salary and age are all overwritten; omitted fields become zero values."""
    return await employee_service.update_employee(repository, employee_id, employee)


@router.delete(
    "/employee/{employee_id}",
    response_model=MessageResponse,
    responses={
        400: {"description": "Invalid ID", "model": ErrorResponse},
        500: {"description": "Storage error", "model": ErrorResponse},
    },
    summary="Delete an employee",
)
async def delete_employee(
    employee_id: str,
    repository: EmployeeRepository = Depends(get_employee_repository),
) -> MessageResponse:
    """Returns 200 even when no employee had this id."""
    return await employee_service.delete_employee(repository, employee_id)
