"""
Pydantic schemas for User entities.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

USER_NAME_PATTERN = r"^[A-Za-z0-9_.\-]+$"


class UserBase(BaseModel):
    """Base schema for user with common fields"""
    user_name: str = Field(..., min_length=1, max_length=50, pattern=USER_NAME_PATTERN)
    name: Optional[str] = Field(None, max_length=100)


class UserCreate(UserBase):
    """Schema for creating a new user"""
    pass


class UserUpdate(BaseModel):
    """Schema for updating a user. Omitted fields keep their value."""
    user_name: Optional[str] = Field(None, min_length=1, max_length=50, pattern=USER_NAME_PATTERN)
    name: Optional[str] = Field(None, max_length=100)


class UserOut(UserBase):
    """Schema for user output"""
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
