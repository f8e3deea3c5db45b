"""
Pydantic schemas for Project entities.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ProjectBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class ProjectCreate(ProjectBase):
    """Schema for creating a project inside an existing team"""
    team_id: int = Field(..., gt=0)


class ProjectUpdate(BaseModel):
    """Schema for updating a project. `team_id` moves it to another team."""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    team_id: Optional[int] = Field(None, gt=0)


class ProjectOut(ProjectBase):
    id: int
    team_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
