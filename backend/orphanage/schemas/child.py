"""
Orphanage API — Child Schemas
==============================

What:  Pydantic models describing child payloads in the OpenAPI document.
Like the employee schemas, they document the contract without validating it.
"""

from typing import List

from pydantic import BaseModel, Field


class ChildInput(BaseModel):
    """Body of POST /children and PUT /children/{child_id}."""
    name: str = Field(description="Full name", examples=["Lucas"])
    age: int = Field(description="Age in years", examples=[7])
    history: str = Field(
        description="Free-text notes about the child",
        examples=["Arrived in 2023, enjoys drawing."],
    )


class Child(ChildInput):
    """A child row as stored."""
    id: int = Field(description="Identifier assigned by the store")


class ChildResponse(BaseModel):
    data: Child


class ChildListResponse(BaseModel):
    data: List[Child]
