"""
Pydantic schemas for Team entities.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class TeamBase(BaseModel):
    """Base schema for team with common fields"""
    name: str = Field(..., min_length=1, max_length=255)


class TeamCreate(TeamBase):
    """Schema for creating a new team"""
    pass


class TeamUpdate(BaseModel):
    """Schema for updating a team"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)


class TeamOut(TeamBase):
    """Schema for team output"""
    id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
