"""
User-related Pydantic models
"""

from typing import Optional
from pydantic import BaseModel, Field

# users.userid and users.age are INT columns
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1

class UserCreateRequest(BaseModel):
    name: str = ""
    age: int = Field(0, ge=INT32_MIN, le=INT32_MAX)
    location: str = ""

class UserUpdateRequest(BaseModel):
    """Fields left out, empty or zero keep their stored value"""
    name: Optional[str] = None
    age: Optional[int] = Field(None, ge=INT32_MIN, le=INT32_MAX)
    location: Optional[str] = None

class UserResponse(BaseModel):
    id: int = Field(..., description="Storage-assigned user id (column userid)")
    name: str
    age: int
    location: str

class UserMutationResponse(BaseModel):
    """Response for create, update and delete"""
    id: int
    message: str
