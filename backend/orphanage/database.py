"""
Orphanage API — Relational Store
=================================

What:  Async SQLAlchemy engine wrapper owning the `employee` and `child` tables.
Why:   Centralizes all database access in one object with a clear lifecycle.
How:   `Store` owns an async engine; each public operation executes exactly one
       parameterized statement inside its own short transaction.
Who:   Created by the application factory, injected into route handlers via
       the `get_store` dependency, used by the resource services.
When:  Built with the app, schema created on startup, engine disposed on shutdown.

Volatile Storage:
    The default URL is `sqlite+aiosqlite:///:memory:`. An in-memory SQLite
    database exists per connection, so the engine is pinned to a single
    connection (StaticPool) and statements on it are serialized with an
    asyncio.Lock. Everything is lost when the process exits.

Error Contract:
    The store never interprets failures. SQLAlchemy exceptions propagate to
    the caller, which decides whether they mean 400 or 500. A missing row is
    not an error: `get_by_id` returns None and `update`/`delete` return 0.
"""

import asyncio
import logging
from typing import Any, Dict, List, Mapping, Optional

from fastapi import Request
from sqlalchemy import Table, delete, insert, select, text, update
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    All models share `Base.metadata`, which is the fixed schema the store
    creates at startup.
    """
    pass


def _is_memory_url(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


class Store:
    """
    Owner of the relational store for the lifetime of the process.

    Operations (one statement each):
        list_all(table)            → list of row dicts ordered by id
        get_by_id(table, id)       → row dict or None
        insert(table, fields)      → generated id
        update(table, id, fields)  → rows affected (0 or 1)
        delete(table, id)          → rows affected (0 or 1)

    `table` is the table name (`"employee"` or `"child"`). Write operations
    bind every non-primary-key column in declared order, taking values from
    `fields` and binding NULL for missing keys. Unknown keys are ignored.
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.database_url = database_url
        if _is_memory_url(database_url):
            # One shared connection, otherwise every checkout sees an empty database
            self.engine: AsyncEngine = create_async_engine(
                database_url,
                echo=echo,
                poolclass=StaticPool,
                connect_args={"check_same_thread": False},
            )
        else:
            self.engine = create_async_engine(database_url, echo=echo)
        self._lock = asyncio.Lock()

    # ── Lifecycle ─────────────────────────────────────────────────────────
    async def start(self) -> None:
        """Create the fixed schema. Called once from the application lifespan."""
        # Import registers the models with Base.metadata
        from orphanage.models import Child, Employee  # noqa: F401

        async with self._lock:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        logger.info("Store ready: tables %s", ", ".join(sorted(Base.metadata.tables)))

    async def close(self) -> None:
        """Close all pooled connections. Contents of an in-memory store are discarded."""
        await self.engine.dispose()

    async def ping(self) -> None:
        async with self._lock:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

    # ── Helpers ───────────────────────────────────────────────────────────
    def table(self, name: str) -> Table:
        try:
            return Base.metadata.tables[name]
        except KeyError:
            raise KeyError(f"Unknown table '{name}'") from None

    @staticmethod
    def _bind_values(table: Table, fields: Mapping[str, Any]) -> Dict[str, Any]:
        return {
            column.name: fields.get(column.name)
            for column in table.columns
            if not column.primary_key
        }

    # ── Operations ────────────────────────────────────────────────────────
    async def list_all(self, table: str) -> List[Dict[str, Any]]:
        t = self.table(table)
        async with self._lock:
            async with self.engine.connect() as conn:
                result = await conn.execute(select(t).order_by(t.c.id))
                return [dict(row) for row in result.mappings().all()]

    async def get_by_id(self, table: str, row_id: Any) -> Optional[Dict[str, Any]]:
        t = self.table(table)
        async with self._lock:
            async with self.engine.connect() as conn:
                result = await conn.execute(select(t).where(t.c.id == row_id))
                row = result.mappings().first()
                return dict(row) if row is not None else None

    async def insert(self, table: str, fields: Mapping[str, Any]) -> int:
        t = self.table(table)
        async with self._lock:
            async with self.engine.begin() as conn:
                result = await conn.execute(insert(t).values(self._bind_values(t, fields)))
                return result.inserted_primary_key[0]

    async def update(self, table: str, row_id: Any, fields: Mapping[str, Any]) -> int:
        t = self.table(table)
        async with self._lock:
            async with self.engine.begin() as conn:
                result = await conn.execute(
                    update(t).where(t.c.id == row_id).values(self._bind_values(t, fields))
                )
                return result.rowcount

    async def delete(self, table: str, row_id: Any) -> int:
        t = self.table(table)
        async with self._lock:
            async with self.engine.begin() as conn:
                result = await conn.execute(delete(t).where(t.c.id == row_id))
                return result.rowcount


# ── Store Dependency ──────────────────────────────────────────────────────
def get_store(request: Request) -> Store:
    """
    FastAPI dependency returning the store owned by the running application.

    Example usage in a route:
        @router.get("/employees")
        async def list_employees(store: Store = Depends(get_store)):
            ...
    """
    return request.app.state.store
