"""
Orphanage API — Child Route Handlers
=====================================

What:  CRUD endpoints for /children.
How:   Each handler reads the path id and/or raw body, makes one call to
       child_service, and returns the JSON body. Failures are raised as
       application exceptions and rendered by the global handlers.

Endpoints:
    GET    /children              → 200 {data: [...]}
    POST   /children              → 201 {id}
    GET    /children/{child_id}   → 200 {data: {...}}
    PUT    /children/{child_id}   → 200 {message}
    DELETE /children/{child_id}   → 200 {message}
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Path

from orphanage.database import Store, get_store
from orphanage.routes.payload import json_body_schema, read_fields
from orphanage.schemas.common import CreatedResponse, ErrorResponse, MessageResponse
from orphanage.schemas.child import (
    ChildInput,
    ChildListResponse,
    ChildResponse,
)
from orphanage.services.resource_service import child_service

router = APIRouter(prefix="/children", tags=["Children"])


@router.get(
    "",
    response_model=None,
    responses={
        200: {"description": "List of children", "model": ChildListResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="List all children",
)
async def list_children(store: Store = Depends(get_store)) -> Dict[str, Any]:
    return {"data": await child_service.list_all(store)}


@router.post(
    "",
    status_code=201,
    response_model=None,
    responses={
        201: {"description": "Child created", "model": CreatedResponse},
        400: {"description": "Store rejected the child", "model": ErrorResponse},
    },
    summary="Add a new child",
    openapi_extra=json_body_schema(ChildInput),
)
async def create_child(
    fields: Dict[str, Any] = Depends(read_fields),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """Create a child from the request body; missing fields are left for the store to reject."""
    return {"id": await child_service.create(store, fields)}


@router.get(
    "/{child_id}",
    response_model=None,
    responses={
        200: {"description": "Child found", "model": ChildResponse},
        404: {"description": "Child not found", "model": ErrorResponse},
        500: {"description": "Store fault", "model": ErrorResponse},
    },
    summary="Get a child by ID",
)
async def get_child(
    child_id: str = Path(description="Child ID, forwarded to the store unchanged"),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    return {"data": await child_service.get(store, child_id)}


@router.put(
    "/{child_id}",
    response_model=None,
    responses={
        200: {"description": "Child updated", "model": MessageResponse},
        400: {"description": "Store rejected the update", "model": ErrorResponse},
        404: {"description": "Child not found", "model": ErrorResponse},
    },
    summary="Update a child by ID",
    openapi_extra=json_body_schema(ChildInput),
)
async def update_child(
    child_id: str = Path(description="Child ID, forwarded to the store unchanged"),
    fields: Dict[str, Any] = Depends(read_fields),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    """Replace name, age and history of one child in a single statement."""
    return {"message": await child_service.update(store, child_id, fields)}


@router.delete(
    "/{child_id}",
    response_model=None,
    responses={
        200: {"description": "Child deleted", "model": MessageResponse},
        400: {"description": "Store fault", "model": ErrorResponse},
        404: {"description": "Child not found", "model": ErrorResponse},
    },
    summary="Delete a child by ID",
)
async def delete_child(
    child_id: str = Path(description="Child ID, forwarded to the store unchanged"),
    store: Store = Depends(get_store),
) -> Dict[str, Any]:
    return {"message": await child_service.delete(store, child_id)}
