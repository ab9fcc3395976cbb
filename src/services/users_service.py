"""
Users service - business logic for user management
"""

import logging
from typing import Dict, Any, Optional
from services.base_service import BaseService, ServiceResult

logger = logging.getLogger(__name__)

INSERT_USER_SQL = "INSERT INTO users (name, location, age) VALUES ($1, $2, $3) RETURNING userid"
SELECT_USER_SQL = "SELECT userid, name, age, location FROM users WHERE userid=$1"
SELECT_ALL_USERS_SQL = "SELECT userid, name, age, location FROM users"
UPDATE_USER_SQL = "UPDATE users SET name=$2, location=$3, age=$4 WHERE userid=$1"
DELETE_USER_SQL = "DELETE FROM users WHERE userid=$1"

def _row_to_user(row) -> Dict[str, Any]:
    """Map a users row onto the public user shape, NULL columns become zero values"""
    return {
        "id": row["userid"],
        "name": row["name"] or "",
        "age": row["age"] or 0,
        "location": row["location"] or "",
    }

class UsersService(BaseService):
    """Service for user management operations"""

    def __init__(self):
        super().__init__("users")

    async def create_user(self, name: str, age: int, location: str) -> ServiceResult:
        """
        Create a new user

        Args:
            name: Name of the user
            age: Age of the user
            location: Location of the user

        Returns:
            ServiceResult whose data holds the created user with its generated id
        """
        try:
            db_pool = self._get_pool()
            async with db_pool.acquire() as conn:
                logger.info(f"Executing INSERT: {INSERT_USER_SQL}")
                logger.info(f"Parameters: {[name, location, age]}")

                user_id = await conn.fetchval(INSERT_USER_SQL, name, location, age)

            if user_id is None:
                raise RuntimeError("Insert operation failed - no id returned")

            logger.info(f"Inserted a single record {user_id}")
            return ServiceResult(
                success=True,
                data=[{"id": user_id, "name": name, "age": age, "location": location}],
                count=1
            )

        except Exception as e:
            return self._failure("Insert", e)

    async def get_user_by_id(self, user_id: int) -> ServiceResult:
        """
        Get a user by its ID

        Args:
            user_id: Primary key of the user

        Returns:
            ServiceResult with the user, or RESOURCE_NOT_FOUND
        """
        try:
            db_pool = self._get_pool()
            async with db_pool.acquire() as conn:
                logger.info(f"Executing READ query: {SELECT_USER_SQL}")
                logger.info(f"Parameters: {[user_id]}")

                row = await conn.fetchrow(SELECT_USER_SQL, user_id)

        except Exception as e:
            return self._failure("Read", e)

        if row is None:
            logger.info(f"No user found with id {user_id}")
            return self._not_found(user_id)

        return ServiceResult(success=True, data=[_row_to_user(row)], count=1)

    async def list_users(self) -> ServiceResult:
        """Get all users in storage order"""
        try:
            db_pool = self._get_pool()
            async with db_pool.acquire() as conn:
                logger.info(f"Executing READ query: {SELECT_ALL_USERS_SQL}")
                rows = await conn.fetch(SELECT_ALL_USERS_SQL)

            users = [_row_to_user(row) for row in rows]
            return ServiceResult(success=True, data=users, count=len(users))

        except Exception as e:
            return self._failure("Read", e)

    async def update_user(
        self,
        user_id: int,
        name: Optional[str] = None,
        age: Optional[int] = None,
        location: Optional[str] = None
    ) -> ServiceResult:
        """
        Update a user, keeping stored values for fields that are missing, empty or zero

        The existing row is locked, read and rewritten inside one transaction.

        Args:
            user_id: Primary key of the user
            name: New name (optional)
            age: New age (optional)
            location: New location (optional)

        Returns:
            ServiceResult with the merged user and the affected-row count,
            or RESOURCE_NOT_FOUND
        """
        try:
            db_pool = self._get_pool()
            async with db_pool.acquire() as conn:
                async with conn.transaction():
                    existing = await conn.fetchrow(SELECT_USER_SQL + " FOR UPDATE", user_id)
                    if existing is None:
                        logger.info(f"No user found with id {user_id} for update")
                        return self._not_found(user_id)

                    current = _row_to_user(existing)
                    merged = {
                        "id": user_id,
                        "name": name or current["name"],
                        "age": age or current["age"],
                        "location": location or current["location"],
                    }

                    logger.info(f"Executing UPDATE: {UPDATE_USER_SQL}")
                    logger.info(f"Parameters: {[user_id, merged['name'], merged['location'], merged['age']]}")

                    status = await conn.execute(
                        UPDATE_USER_SQL, user_id, merged["name"], merged["location"], merged["age"]
                    )

            rows_affected = self._parse_affected_rows(status)
            logger.info(f"Total rows/record affected {rows_affected}")
            return ServiceResult(success=True, data=[merged], count=rows_affected)

        except Exception as e:
            return self._failure("Update", e)

    async def delete_user(self, user_id: int) -> ServiceResult:
        """
        Delete a user by ID

        Deleting an unknown id is not an error, the result count is then 0.
        """
        try:
            db_pool = self._get_pool()
            async with db_pool.acquire() as conn:
                logger.info(f"Executing DELETE: {DELETE_USER_SQL}")
                logger.info(f"Parameters: [{user_id}]")

                status = await conn.execute(DELETE_USER_SQL, user_id)

            rows_affected = self._parse_affected_rows(status)
            logger.info(f"Total rows/record affected {rows_affected}")
            return ServiceResult(success=True, data=[], count=rows_affected)

        except Exception as e:
            return self._failure("Delete", e)

# Global service instance
_users_service: Optional[UsersService] = None

def get_users_service() -> UsersService:
    """Get the global users service instance"""
    global _users_service
    if _users_service is None:
        _users_service = UsersService()
    return _users_service
