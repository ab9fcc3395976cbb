"""
UsersService behaviour below the HTTP layer
"""

import pytest

from services.base_service import BaseService
from services.users_service import UsersService, UPDATE_USER_SQL


@pytest.fixture
def service(fake_pool):
    return UsersService()


@pytest.mark.asyncio
async def test_create_returns_generated_id(service, fake_pool):
    result = await service.create_user(name="Alice", age=30, location="NY")

    assert result.success
    assert result.count == 1
    assert result.data == [{"id": 1, "name": "Alice", "age": 30, "location": "NY"}]
    assert fake_pool.rows[1] == {"userid": 1, "name": "Alice", "location": "NY", "age": 30}


@pytest.mark.asyncio
async def test_get_missing_user_is_not_found(service):
    result = await service.get_user_by_id(5)

    assert not result.success
    assert result.error_type == "RESOURCE_NOT_FOUND"


@pytest.mark.asyncio
async def test_update_merges_with_existing_row(service, fake_pool):
    await service.create_user(name="Alice", age=30, location="NY")

    result = await service.update_user(1, location="Boston")

    assert result.success
    assert result.count == 1
    assert result.data == [{"id": 1, "name": "Alice", "age": 30, "location": "Boston"}]
    assert UPDATE_USER_SQL in fake_pool.executed


@pytest.mark.asyncio
async def test_update_missing_user_skips_write(service, fake_pool):
    result = await service.update_user(3, name="Nobody")

    assert result.error_type == "RESOURCE_NOT_FOUND"
    assert UPDATE_USER_SQL not in fake_pool.executed


@pytest.mark.asyncio
async def test_delete_counts_affected_rows(service):
    await service.create_user(name="Alice", age=30, location="NY")

    first = await service.delete_user(1)
    second = await service.delete_user(1)

    assert (first.success, first.count) == (True, 1)
    assert (second.success, second.count) == (True, 0)


@pytest.mark.asyncio
async def test_storage_error_becomes_database_error(service, fake_pool):
    fake_pool.fail_with = ConnectionRefusedError("connection refused")

    result = await service.list_users()

    assert not result.success
    assert result.error_type == "DATABASE_ERROR"
    assert "connection refused" in result.error


@pytest.mark.parametrize("status,expected", [
    ("UPDATE 1", 1),
    ("DELETE 0", 0),
    ("DELETE 12", 12),
    ("", 0),
    (None, 0),
    ("UNEXPECTED", 0),
])
def test_parse_affected_rows(status, expected):
    assert BaseService._parse_affected_rows(status) == expected
