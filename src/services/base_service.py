"""
Base service layer for database operations over a single table
"""

import logging
from typing import Dict, Any, List, Optional
from dataclasses import dataclass

from database.connection import get_db_pool
import asyncpg

logger = logging.getLogger(__name__)

@dataclass
class ServiceResult:
    """Result from service operation"""
    success: bool
    data: Optional[List[Dict[str, Any]]] = None
    count: int = 0
    error: Optional[str] = None
    error_type: Optional[str] = None

class BaseService:
    """Base service holding pool access and result mapping shared by resources"""

    def __init__(self, resource_name: str):
        self.resource_name = resource_name
        logger.info(f"BaseService initialized for resource: {resource_name}")

    def _get_pool(self):
        """Get the pool or fail if the application has not started it"""
        db_pool = get_db_pool()
        if not db_pool:
            raise RuntimeError("Database pool not initialized")
        return db_pool

    @staticmethod
    def _parse_affected_rows(status: Optional[str]) -> int:
        """
        Parse the row count from a command status tag

        asyncpg returns "UPDATE N" / "DELETE N" where N is the number of rows
        """
        if not status:
            return 0
        try:
            return int(status.split()[-1])
        except ValueError:
            logger.warning(f"Unexpected command status: {status}")
            return 0

    def _not_found(self, record_id: Any) -> ServiceResult:
        return ServiceResult(
            success=False,
            error=f"Record not found with ID: {record_id}",
            error_type="RESOURCE_NOT_FOUND"
        )

    def _failure(self, operation: str, e: Exception) -> ServiceResult:
        """Translate an exception raised during an operation into a failed result"""
        logger.error(f"{operation} operation failed for {self.resource_name}: {e}", exc_info=True)
        if isinstance(e, RuntimeError) or _is_database_error(e):
            error_type = "DATABASE_ERROR"
        else:
            error_type = "EXECUTION_ERROR"
        return ServiceResult(
            success=False,
            error=f"Database {operation.upper()} failed: {e}",
            error_type=error_type
        )

def _is_database_error(e: Exception) -> bool:
    return isinstance(e, (asyncpg.PostgresError, asyncpg.InterfaceError, OSError))
