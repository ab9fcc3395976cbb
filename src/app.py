"""
Users Backend API Server
Core functionality: create, read, update and delete users stored in PostgreSQL
"""

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import ALLOWED_ORIGINS
from database.connection import init_database, close_database
from api.routes import health, users
from utils.error_handling import setup_error_handling

logger = logging.getLogger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager"""
    await init_database()
    yield
    await close_database()

# FastAPI app initialization
app = FastAPI(
    title="Users Backend",
    description="Backend API for user management backed by PostgreSQL",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)

# Setup centralized error handling
setup_error_handling(app)

# Include API routes
app.include_router(health.router, tags=["Health"])
app.include_router(users.router, tags=["Users"])

# FastAPI app instance is exported for use by uvicorn
# Server startup is handled by main.py at the project root
