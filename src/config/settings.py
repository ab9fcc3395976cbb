"""
Configuration settings for the Users Backend
"""

import os
import logging

# Configure logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Environment configuration
DATABASE_URL = os.getenv("POSTGRES_URL") or os.getenv("DATABASE_URL")
PORT = int(os.getenv("PORT", 8080))

# Pool configuration
DB_POOL_MIN_SIZE = int(os.getenv("DB_POOL_MIN_SIZE", 2))
DB_POOL_MAX_SIZE = int(os.getenv("DB_POOL_MAX_SIZE", 10))
DB_COMMAND_TIMEOUT = float(os.getenv("DB_COMMAND_TIMEOUT", 60))

# Validate required environment variables
if not DATABASE_URL:
    raise ValueError("POSTGRES_URL environment variable is required")
if DB_POOL_MIN_SIZE > DB_POOL_MAX_SIZE:
    raise ValueError("DB_POOL_MIN_SIZE must not exceed DB_POOL_MAX_SIZE")

logger.info(f"Database pool size: {DB_POOL_MIN_SIZE}-{DB_POOL_MAX_SIZE}")

# CORS settings
ALLOWED_ORIGINS = [origin.strip() for origin in os.getenv("ALLOWED_ORIGINS", "*").split(",") if origin.strip()]
