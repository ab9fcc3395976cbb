"""
Core testing infrastructure for the users API suite
In-memory stand-in for the asyncpg pool so the suite runs without PostgreSQL
"""

from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional

from services.users_service import (
    INSERT_USER_SQL,
    SELECT_USER_SQL,
    SELECT_ALL_USERS_SQL,
    UPDATE_USER_SQL,
    DELETE_USER_SQL,
)


class FakeTransaction:
    """No-op transaction context"""

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        return False


class FakeConnection:
    """Answers the fixed users statements against the pool's in-memory table"""

    def __init__(self, pool: "FakePool"):
        self.pool = pool

    def transaction(self):
        return FakeTransaction()

    async def fetchval(self, query: str, *args) -> Any:
        self.pool.executed.append(query)
        if query == "SELECT 1":
            return 1
        if query == INSERT_USER_SQL:
            name, location, age = args
            return self.pool.insert(name=name, location=location, age=age)
        raise AssertionError(f"Unexpected fetchval query: {query}")

    async def fetchrow(self, query: str, *args) -> Optional[Dict[str, Any]]:
        self.pool.executed.append(query)
        if query.startswith(SELECT_USER_SQL):
            row = self.pool.rows.get(args[0])
            return dict(row) if row else None
        raise AssertionError(f"Unexpected fetchrow query: {query}")

    async def fetch(self, query: str, *args) -> List[Dict[str, Any]]:
        self.pool.executed.append(query)
        if query == SELECT_ALL_USERS_SQL:
            return [dict(row) for row in self.pool.rows.values()]
        raise AssertionError(f"Unexpected fetch query: {query}")

    async def execute(self, query: str, *args) -> str:
        self.pool.executed.append(query)
        if query == UPDATE_USER_SQL:
            user_id, name, location, age = args
            if user_id not in self.pool.rows:
                return "UPDATE 0"
            self.pool.rows[user_id].update(name=name, location=location, age=age)
            return "UPDATE 1"
        if query == DELETE_USER_SQL:
            removed = self.pool.rows.pop(args[0], None)
            return f"DELETE {1 if removed else 0}"
        raise AssertionError(f"Unexpected execute query: {query}")


class FakePool:
    """Mimics asyncpg.Pool.acquire(); set fail_with to simulate a storage outage"""

    def __init__(self):
        self.rows: Dict[int, Dict[str, Any]] = {}
        self.executed: List[str] = []
        self.fail_with: Optional[Exception] = None
        self._next_id = 1

    def insert(self, name: str, location: str, age: int) -> int:
        user_id = self._next_id
        self._next_id += 1
        self.rows[user_id] = {"userid": user_id, "name": name, "location": location, "age": age}
        return user_id

    @asynccontextmanager
    async def acquire(self):
        if self.fail_with is not None:
            raise self.fail_with
        yield FakeConnection(self)


def user_payload(name: str = "Alice", age: int = 30, location: str = "NY") -> Dict[str, Any]:
    """Build a create-user request body"""
    return {"name": name, "age": age, "location": location}
