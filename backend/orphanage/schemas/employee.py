"""
Orphanage API — Employee Schemas
=================================

What:  Pydantic models describing employee payloads in the OpenAPI document.
Why:   The API docs must show the request body and row shape for each endpoint.

Note:
    These models document the contract; they are not used to validate
    incoming bodies. Handlers forward the raw JSON fields to the store, and
    the store's NOT NULL constraints are the only validation.
"""

from typing import List

from pydantic import BaseModel, Field


class EmployeeInput(BaseModel):
    """Body of POST /employees and PUT /employees/{employee_id}."""
    name: str = Field(description="Full name", examples=["Ana"])
    role: str = Field(description="Job role", examples=["Cook"])
    salary: float = Field(description="Monthly salary", examples=[1500])


class Employee(EmployeeInput):
    """An employee row as stored."""
    id: int = Field(description="Identifier assigned by the store")


class EmployeeResponse(BaseModel):
    data: Employee


class EmployeeListResponse(BaseModel):
    data: List[Employee]
