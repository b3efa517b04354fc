"""
Orphanage API — Custom Exception Hierarchy
===========================================

What:  Application-specific exceptions for the ways a request can fail.
Why:   Services classify store outcomes once; global handlers (registered in
       main.py) turn each class into its HTTP status and a `{"error": ...}` body.
How:   Each exception carries a message (returned to the client) and an
       optional context dict (logged only).

Exception Hierarchy:
    OrphanageError (base)
    ├── NotFoundError             → 404 Not Found
    ├── ConstraintViolationError  → 400 Bad Request (write rejected by the store)
    ├── MalformedBodyError        → 400 Bad Request (body is not valid JSON)
    └── StorageFaultError         → 500 Internal Server Error (read failed)

Classification is mechanical: the same engine error is a constraint
violation during create/update/delete and a storage fault during a read.
"""

from typing import Any, Dict, Optional


class OrphanageError(Exception):
    """
    Base exception for all Orphanage API errors.

    Attributes:
        message:  Error description returned in the response body
        context:  Additional debug info (logged but NOT returned to client)
    """

    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class NotFoundError(OrphanageError):
    """
    Raised when no row matches the requested id.

    When:    GET returned no row, or UPDATE/DELETE affected zero rows.
    HTTP:    404 Not Found

    Example response:
        {"error": "Employee not found"}
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource = resource
        self.resource_id = resource_id


class ConstraintViolationError(OrphanageError):
    """
    Raised when the store rejects a write.

    When:    A required field is missing (NOT NULL constraint), a value cannot
             be bound, or any other engine error during create/update/delete.
    HTTP:    400 Bad Request

    The engine's own message is passed through so the client can see which
    column was rejected, e.g. "NOT NULL constraint failed: employee.name".
    """

    status_code = 400

    def __init__(
        self,
        message: str = "The store rejected the write",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class MalformedBodyError(OrphanageError):
    """Raised when a request body is present but is not valid JSON."""

    status_code = 400

    def __init__(
        self,
        message: str = "Request body is not valid JSON",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class StorageFaultError(OrphanageError):
    """
    Raised when a read fails inside the store.

    When:    SELECT failed (connection lost, engine error).
    HTTP:    500 Internal Server Error
    """

    status_code = 500

    def __init__(
        self,
        message: str = "A storage error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
