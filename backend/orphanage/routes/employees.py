"""
Orphanage API — Employee Route Handlers
========================================

What:  CRUD endpoints for /employees.
How:   Each handler reads the path id and/or raw body, makes one call to
       employee_service, and returns the JSON body. Failures are raised as
       application exceptions and rendered by the global handlers.

Endpoints:
    GET    /employees                  → 200 {data: [...]}
    POST   /employees                  → 201 {id}
    GET    /employees/{employee_id}    → 200 {data: {...}}
    PUT    /employees/{employee_id}    → 200 {message}
    DELETE /employees/{employee_id}    → 200 {message}
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Path

from orphanage.database import Store, get_store
from orphanage.routes.payload import json_body_schema, read_fields
from orphanage.schemas.common import CreatedResponse, ErrorResponse, MessageResponse
from orphanage.schemas.employee import (
    EmployeeInput,
    EmployeeListResponse,
    EmployeeResponse,
)
from orphanage.services.resource_service import employee_service

router = APIRouter(prefix="/employees", tags=["Employees"])


@router.get(
    "",
    response_model=None,
    responses={
        200: {"description": "List of employees", "model": EmployeeListResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="List all employees",
)
async def list_employees(store: Store = Depends(get_store)) -> Dict[str, Any]:
    return {"data": await employee_service.list_all(store)}


@router.post(
    "",
    status_code=201,
    response_model=None,
    responses={
        201: {"description": "Employee created", "model": CreatedResponse},
        400: {"description": "Store rejected the employee", "model": ErrorResponse},
    },
    summary="Add a new employee",
    openapi_extra=json_body_schema(EmployeeInput),
)
async def create_employee(
    fields: Dict[str, Any] = Depends(read_fields),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """
    Create an employee from the request body.

    The body is not validated here. Missing fields reach the store as NULL
    and the NOT NULL constraints reject them with a 400.
    """
    return {"id": await employee_service.create(store, fields)}


@router.get(
    "/{employee_id}",
    response_model=None,
    responses={
        200: {"description": "Employee found", "model": EmployeeResponse},
        404: {"description": "Employee not found", "model": ErrorResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="Get an employee by ID",
)
async def get_employee(
    employee_id: str = Path(description="Employee ID, forwarded to the store unchanged"),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    return {"data": await employee_service.get(store, employee_id)}


@router.put(
    "/{employee_id}",
    response_model=None,
    responses={
        200: {"description": "Employee updated", "model": MessageResponse},
        400: {"description": "Store rejected the update", "model": ErrorResponse},
        404: {"description": "Employee not found", "model": ErrorResponse},
    },
    summary="Update an employee by ID",
    openapi_extra=json_body_schema(EmployeeInput),
)
async def update_employee(
    employee_id: str = Path(description="Employee ID, forwarded to the store unchanged"),
    fields: Dict[str, Any] = Depends(read_fields),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """Replace name, role and salary of one employee in a single statement."""
    return {"message": await employee_service.update(store, employee_id, fields)}


@router.delete(
    "/{employee_id}",
    response_model=None,
    responses={
        200: {"description": "Employee deleted", "model": MessageResponse},
        400: {"description": "Store fault", "model": ErrorResponse},
        404: {"description": "Employee not found", "model": ErrorResponse},
    },
    summary="Delete an employee by ID",
)
async def delete_employee(
    employee_id: str = Path(description="Employee ID, forwarded to the store unchanged"),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    return {"message": await employee_service.delete(store, employee_id)}
