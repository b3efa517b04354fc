"""
Orphanage API — Resource Service
=================================

What:  Translates store outcomes into results or application exceptions.
Why:   Route handlers stay thin; the mapping of engine errors and empty
       results onto NotFound / ConstraintViolation / StorageFault lives here.
How:   One ResourceService per table. Each method issues exactly one store
       operation and classifies what comes back.
Who:   Called by the employee and child route handlers.

Outcome Mapping:
    Operation   Store error              Nothing matched
    ─────────   ──────────────────────   ───────────────
    list_all    StorageFaultError (500)  (empty list)
    get         StorageFaultError (500)  NotFoundError (404)
    create      ConstraintViolation(400) -
    update      ConstraintViolation(400) NotFoundError (404)
    delete      ConstraintViolation(400) NotFoundError (404)

Design Decision:
    ResourceService is stateless: the store is passed into every call, the
    same way a request-scoped dependency would be. This keeps the service
    testable with a mock store and free of hidden globals.
"""

import logging
from typing import Any, Dict, List, Mapping, Type

from sqlalchemy.exc import SQLAlchemyError

from orphanage.database import Base, Store
from orphanage.exceptions import (
    ConstraintViolationError,
    NotFoundError,
    StorageFaultError,
)
from orphanage.models import Child, Employee

logger = logging.getLogger(__name__)


def engine_message(exc: SQLAlchemyError) -> str:
    """
    Extract the engine's own error text from a SQLAlchemy exception.

    SQLAlchemy wraps driver errors (DBAPIError) and keeps the original in
    `.orig`; its own str() adds the SQL and parameters, which we do not
    want in a response body.
    """
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig)
    return str(exc)


def present_row(row: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Shape a stored row for the response body.

    REAL columns come back as floats; whole values are rendered as integers
    so a salary stored as 1500 is answered as 1500, not 1500.0.
    """
    return {
        key: int(value) if isinstance(value, float) and value.is_integer() else value
        for key, value in row.items()
    }


class ResourceService:
    """
    CRUD operations for one table.

    Args:
        model: ORM model whose table this service addresses
        label: Human-readable resource name used in messages ("Employee")
    """

    def __init__(self, model: Type[Base], label: str) -> None:
        self.model = model
        self.label = label
        self.table = model.__tablename__

    async def list_all(self, store: Store) -> List[Dict[str, Any]]:
        try:
            rows = await store.list_all(self.table)
        except SQLAlchemyError as e:
            logger.error("Store fault listing %s: %s", self.table, e)
            raise StorageFaultError(
                message=engine_message(e),
                context={"table": self.table, "error_type": type(e).__name__},
            )
        return [present_row(row) for row in rows]

    async def get(self, store: Store, row_id: str) -> Dict[str, Any]:
        """
        Fetch one row by id.

        The id is passed to the store exactly as it arrived in the path;
        a value that is not a stored id simply matches nothing.

        Raises:
            NotFoundError: No row has this id (→ 404)
            StorageFaultError: The SELECT failed (→ 500)
        """
        try:
            row = await store.get_by_id(self.table, row_id)
        except SQLAlchemyError as e:
            logger.error("Store fault reading %s %s: %s", self.table, row_id, e)
            raise StorageFaultError(
                message=engine_message(e),
                context={"table": self.table, "id": row_id},
            )

        if row is None:
            raise NotFoundError(resource=self.label, resource_id=row_id)
        return present_row(row)

    async def create(self, store: Store, fields: Mapping[str, Any]) -> int:
        """
        Insert a row built from whatever fields the client sent.

        Returns:
            The id assigned by the store

        Raises:
            ConstraintViolationError: The store rejected the insert (→ 400)
        """
        try:
            new_id = await store.insert(self.table, fields)
        except SQLAlchemyError as e:
            logger.warning("Insert into %s rejected: %s", self.table, engine_message(e))
            raise ConstraintViolationError(
                message=engine_message(e),
                context={"table": self.table},
            )

        logger.info("%s created: id=%s", self.label, new_id)
        return new_id

    async def update(self, store: Store, row_id: str, fields: Mapping[str, Any]) -> str:
        """
        Replace every non-id field of one row in a single statement.

        Returns:
            Confirmation message for the response body

        Raises:
            ConstraintViolationError: The store rejected the update (→ 400)
            NotFoundError: Zero rows affected (→ 404)
        """
        try:
            affected = await store.update(self.table, row_id, fields)
        except SQLAlchemyError as e:
            logger.warning("Update of %s %s rejected: %s", self.table, row_id, engine_message(e))
            raise ConstraintViolationError(
                message=engine_message(e),
                context={"table": self.table, "id": row_id},
            )

        if affected == 0:
            raise NotFoundError(resource=self.label, resource_id=row_id)
        logger.info("%s updated: id=%s", self.label, row_id)
        return f"{self.label} updated"

    async def delete(self, store: Store, row_id: str) -> str:
        try:
            affected = await store.delete(self.table, row_id)
        except SQLAlchemyError as e:
            logger.warning("Delete of %s %s rejected: %s", self.table, row_id, engine_message(e))
            raise ConstraintViolationError(
                message=engine_message(e),
                context={"table": self.table, "id": row_id},
            )

        if affected == 0:
            raise NotFoundError(resource=self.label, resource_id=row_id)
        logger.info("%s deleted: id=%s", self.label, row_id)
        return f"{self.label} deleted"


# ── Singleton Instances ───────────────────────────────────────────────────
# Stateless; the store arrives with each call
employee_service = ResourceService(Employee, "Employee")
child_service = ResourceService(Child, "Child")
