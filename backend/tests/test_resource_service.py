"""
Orphanage API — Resource Service Unit Tests
============================================

What:  Tests for how ResourceService classifies store outcomes.
How:   Uses a mock store (no real database); engine errors are simulated
       with SQLAlchemy exception instances.

What we test:
    ✅ Engine errors on reads → StorageFaultError
    ✅ Engine errors on writes → ConstraintViolationError with the engine text
    ✅ None / zero rows affected → NotFoundError
    ✅ Successful outcomes return rows, ids and messages
"""

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from orphanage.exceptions import (
    ConstraintViolationError,
    NotFoundError,
    StorageFaultError,
)
from orphanage.models import Employee
from orphanage.services.resource_service import (
    ResourceService,
    child_service,
    employee_service,
    engine_message,
    present_row,
)


def _integrity_error(text: str) -> IntegrityError:
    return IntegrityError("INSERT INTO employee ...", {}, Exception(text))


def _operational_error(text: str) -> OperationalError:
    return OperationalError("SELECT ...", {}, Exception(text))


class TestEngineMessage:

    def test_uses_driver_error_text(self):
        exc = _integrity_error("NOT NULL constraint failed: employee.name")
        assert engine_message(exc) == "NOT NULL constraint failed: employee.name"


class TestPresentRow:

    def test_whole_floats_become_ints(self):
        row = present_row({"id": 1, "name": "Ana", "salary": 1500.0})

        assert row == {"id": 1, "name": "Ana", "salary": 1500}
        assert isinstance(row["salary"], int)

    def test_fractional_floats_unchanged(self):
        assert present_row({"salary": 1500.25})["salary"] == 1500.25


class TestResourceServiceReads:

    def setup_method(self):
        self.service = ResourceService(Employee, "Employee")

    @pytest.mark.asyncio
    async def test_list_all_returns_rows(self, mock_store):
        rows = [{"id": 1, "name": "Ana", "role": "Cook", "salary": 1500.0}]
        mock_store.list_all.return_value = rows

        result = await self.service.list_all(mock_store)

        assert result == rows
        mock_store.list_all.assert_awaited_once_with("employee")

    @pytest.mark.asyncio
    async def test_list_all_store_fault(self, mock_store):
        mock_store.list_all.side_effect = _operational_error("disk I/O error")

        with pytest.raises(StorageFaultError) as exc_info:
            await self.service.list_all(mock_store)

        assert exc_info.value.message == "disk I/O error"

    @pytest.mark.asyncio
    async def test_get_found(self, mock_store):
        mock_store.get_by_id.return_value = {"id": 1, "name": "Ana"}

        assert await self.service.get(mock_store, "1") == {"id": 1, "name": "Ana"}
        mock_store.get_by_id.assert_awaited_once_with("employee", "1")

    @pytest.mark.asyncio
    async def test_get_not_found(self, mock_store):
        mock_store.get_by_id.return_value = None

        with pytest.raises(NotFoundError) as exc_info:
            await self.service.get(mock_store, "7")

        assert exc_info.value.message == "Employee not found"

    @pytest.mark.asyncio
    async def test_get_store_fault(self, mock_store):
        mock_store.get_by_id.side_effect = _operational_error("database is locked")

        with pytest.raises(StorageFaultError):
            await self.service.get(mock_store, "1")


class TestResourceServiceWrites:

    @pytest.mark.asyncio
    async def test_create_returns_new_id(self, mock_store):
        mock_store.insert.return_value = 5

        new_id = await child_service.create(mock_store, {"name": "Lucas"})

        assert new_id == 5
        mock_store.insert.assert_awaited_once_with("child", {"name": "Lucas"})

    @pytest.mark.asyncio
    async def test_create_constraint_violation(self, mock_store):
        mock_store.insert.side_effect = _integrity_error(
            "NOT NULL constraint failed: employee.salary"
        )

        with pytest.raises(ConstraintViolationError) as exc_info:
            await employee_service.create(mock_store, {"name": "Ana", "role": "Cook"})

        assert exc_info.value.message == "NOT NULL constraint failed: employee.salary"

    @pytest.mark.asyncio
    async def test_update_success_message(self, mock_store):
        mock_store.update.return_value = 1

        assert await child_service.update(mock_store, "1", {}) == "Child updated"

    @pytest.mark.asyncio
    async def test_update_zero_rows_is_not_found(self, mock_store):
        mock_store.update.return_value = 0

        with pytest.raises(NotFoundError):
            await child_service.update(mock_store, "99", {"name": "X"})

    @pytest.mark.asyncio
    async def test_update_engine_error_is_constraint_violation(self, mock_store):
        mock_store.update.side_effect = _operational_error("database is locked")

        with pytest.raises(ConstraintViolationError):
            await employee_service.update(mock_store, "1", {})

    @pytest.mark.asyncio
    async def test_delete_success_message(self, mock_store):
        mock_store.delete.return_value = 1

        assert await employee_service.delete(mock_store, "1") == "Employee deleted"

    @pytest.mark.asyncio
    async def test_delete_zero_rows_is_not_found(self, mock_store):
        mock_store.delete.return_value = 0

        with pytest.raises(NotFoundError) as exc_info:
            await employee_service.delete(mock_store, "3")

        assert exc_info.value.context["resource_id"] == "3"

    @pytest.mark.asyncio
    async def test_delete_engine_error_is_bad_request(self, mock_store):
        """Delete failures are classified like any other write (400), not as faults."""
        mock_store.delete.side_effect = _operational_error("disk I/O error")

        with pytest.raises(ConstraintViolationError):
            await employee_service.delete(mock_store, "1")
