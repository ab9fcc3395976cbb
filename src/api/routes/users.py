"""
User management API routes
All database operations go through the users service layer.
"""

import logging
from typing import List
from fastapi import APIRouter, HTTPException, Path

from models.user import INT32_MIN, INT32_MAX, UserCreateRequest, UserUpdateRequest, UserResponse, UserMutationResponse
from services.base_service import ServiceResult
from services.users_service import get_users_service
from utils.error_handling import set_endpoint_context

router = APIRouter()
logger = logging.getLogger(__name__)

def _raise_for_result(result: ServiceResult, not_found_detail: str = "User not found"):
    """Translate a failed service result into an HTTP error"""
    if result.success:
        return
    if result.error_type == "RESOURCE_NOT_FOUND":
        raise HTTPException(status_code=404, detail=not_found_detail)
    logger.error(f"User operation failed ({result.error_type}): {result.error}")
    raise HTTPException(status_code=500, detail="Database operation failed")

@router.post("/user", response_model=UserMutationResponse)
async def create_user(request: UserCreateRequest):
    """Create a new user"""
    set_endpoint_context("create_user")
    users_service = get_users_service()

    result = await users_service.create_user(
        name=request.name,
        age=request.age,
        location=request.location
    )
    _raise_for_result(result)

    user = result.data[0]
    logger.info(f"Created user {user['id']}")
    return UserMutationResponse(id=user["id"], message="User created successfully")

@router.get("/user/{user_id}", response_model=UserResponse)
async def get_user(user_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX)):
    """Get a user by ID"""
    set_endpoint_context("get_user")
    users_service = get_users_service()

    result = await users_service.get_user_by_id(user_id)
    _raise_for_result(result)

    return UserResponse(**result.data[0])

@router.get("/users", response_model=List[UserResponse])
async def get_all_users():
    """Get all users"""
    set_endpoint_context("get_all_users")
    users_service = get_users_service()

    result = await users_service.list_users()
    _raise_for_result(result)

    return [UserResponse(**user) for user in result.data]

@router.put("/user/{user_id}", response_model=UserMutationResponse)
async def update_user(
    request: UserUpdateRequest,
    user_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX)
):
    """Update a user; missing, empty or zero fields keep their stored value"""
    set_endpoint_context("update_user")
    users_service = get_users_service()

    result = await users_service.update_user(
        user_id,
        name=request.name,
        age=request.age,
        location=request.location
    )
    _raise_for_result(result)

    return UserMutationResponse(
        id=user_id,
        message=f"User updated successfully. Total rows/record affected {result.count}"
    )

@router.delete("/user/{user_id}", response_model=UserMutationResponse)
async def delete_user(user_id: int = Path(..., ge=INT32_MIN, le=INT32_MAX)):
    """Delete a user; an unknown ID reports zero affected rows"""
    set_endpoint_context("delete_user")
    users_service = get_users_service()

    result = await users_service.delete_user(user_id)
    _raise_for_result(result)

    return UserMutationResponse(
        id=user_id,
        message=f"User deleted successfully. Total rows/record affected {result.count}"
    )
