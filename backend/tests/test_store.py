"""
Orphanage API — Store Tests
============================

What:  Tests for the Store operations against a real in-memory SQLite database.

What we test:
    ✅ Insert assigns sequential ids; get returns exactly the stored fields
    ✅ list_all is ordered by id
    ✅ Update/delete return rows affected (0 for a missing id)
    ✅ Missing required fields violate NOT NULL
    ✅ Path-style string ids match integer primary keys
"""

import pytest
from sqlalchemy.exc import IntegrityError

from orphanage.database import Store


class TestStoreInsertAndRead:

    @pytest.mark.asyncio
    async def test_insert_returns_generated_ids(self, store, employee_payload):
        first = await store.insert("employee", employee_payload)
        second = await store.insert("employee", employee_payload)

        assert first == 1
        assert second == 2

    @pytest.mark.asyncio
    async def test_get_by_id_returns_row(self, store, child_payload):
        new_id = await store.insert("child", child_payload)

        row = await store.get_by_id("child", new_id)

        assert row == {"id": new_id, **child_payload}

    @pytest.mark.asyncio
    async def test_get_by_id_missing_returns_none(self, store):
        assert await store.get_by_id("employee", 42) is None

    @pytest.mark.asyncio
    async def test_string_id_matches_integer_key(self, store, employee_payload):
        await store.insert("employee", employee_payload)

        assert (await store.get_by_id("employee", "1"))["id"] == 1
        assert await store.get_by_id("employee", "abc") is None

    @pytest.mark.asyncio
    async def test_list_all_ordered_by_id(self, store):
        for name in ("Ana", "Bruno", "Carla"):
            await store.insert("employee", {"name": name, "role": "Teacher", "salary": 2000})

        rows = await store.list_all("employee")

        assert [r["id"] for r in rows] == [1, 2, 3]
        assert [r["name"] for r in rows] == ["Ana", "Bruno", "Carla"]

    @pytest.mark.asyncio
    async def test_tables_are_independent(self, store, employee_payload):
        await store.insert("employee", employee_payload)

        assert await store.list_all("child") == []


class TestStoreConstraints:

    @pytest.mark.asyncio
    async def test_missing_field_violates_not_null(self, store):
        with pytest.raises(IntegrityError) as exc_info:
            await store.insert("employee", {"name": "Ana", "role": "Cook"})

        assert "employee.salary" in str(exc_info.value.orig)
        assert await store.list_all("employee") == []

    @pytest.mark.asyncio
    async def test_unknown_keys_and_id_are_ignored(self, store, child_payload):
        new_id = await store.insert("child", {**child_payload, "id": 99, "nickname": "Lu"})

        assert new_id == 1
        row = await store.get_by_id("child", 1)
        assert "nickname" not in row

    @pytest.mark.asyncio
    async def test_unknown_table_raises_key_error(self, store):
        with pytest.raises(KeyError):
            await store.list_all("volunteer")


class TestStoreUpdateAndDelete:

    @pytest.mark.asyncio
    async def test_update_replaces_all_fields(self, store, employee_payload):
        await store.insert("employee", employee_payload)

        affected = await store.update(
            "employee", 1, {"name": "Ana Souza", "role": "Head Cook", "salary": 1800}
        )

        assert affected == 1
        assert await store.get_by_id("employee", 1) == {
            "id": 1, "name": "Ana Souza", "role": "Head Cook", "salary": 1800,
        }

    @pytest.mark.asyncio
    async def test_update_missing_id_affects_nothing(self, store, child_payload):
        assert await store.update("child", 99, child_payload) == 0

    @pytest.mark.asyncio
    async def test_update_missing_id_with_empty_fields_is_not_an_error(self, store):
        # No row matches, so no NOT NULL check ever runs
        assert await store.update("child", 99, {}) == 0

    @pytest.mark.asyncio
    async def test_update_with_missing_field_violates_not_null(self, store, employee_payload):
        await store.insert("employee", employee_payload)

        with pytest.raises(IntegrityError):
            await store.update("employee", 1, {"name": "Ana"})

        assert await store.get_by_id("employee", 1) == {"id": 1, **employee_payload}

    @pytest.mark.asyncio
    async def test_delete_returns_rows_affected(self, store, employee_payload):
        await store.insert("employee", employee_payload)

        assert await store.delete("employee", 1) == 1
        assert await store.delete("employee", 1) == 0
        assert await store.get_by_id("employee", 1) is None


class TestStoreLifecycle:

    @pytest.mark.asyncio
    async def test_ping(self, store):
        await store.ping()

    @pytest.mark.asyncio
    async def test_new_store_is_empty(self, employee_payload):
        """Contents live only as long as the store's engine."""
        first = Store("sqlite+aiosqlite:///:memory:")
        await first.start()
        await first.insert("employee", employee_payload)
        await first.close()

        second = Store("sqlite+aiosqlite:///:memory:")
        await second.start()
        try:
            assert await second.list_all("employee") == []
        finally:
            await second.close()
