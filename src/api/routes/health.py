"""
Health check API route
"""

from datetime import datetime
from fastapi import APIRouter, HTTPException
from database.connection import get_db_pool

router = APIRouter()

@router.get("/")
async def health_check():
    """Health check - reports healthy only when the database answers"""
    db_pool = get_db_pool()
    if not db_pool:
        raise HTTPException(status_code=503, detail="Health check failed: database pool not initialized")

    try:
        async with db_pool.acquire() as conn:
            await conn.fetchval("SELECT 1")

        return {
            "status": "healthy",
            "timestamp": datetime.utcnow().isoformat(),
            "database": "connected"
        }

    except Exception as e:
        raise HTTPException(status_code=503, detail=f"Health check failed: {str(e)}")
