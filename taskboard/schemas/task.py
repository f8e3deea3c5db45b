"""
Pydantic schemas for Task entities and task list filters.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from taskboard.models.task import TaskStatus
from taskboard.schemas.user import USER_NAME_PATTERN


class TaskBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None


class TaskCreate(TaskBase):
    """
    Schema for creating a task.

    Users are referenced by username and resolved by the service.
    """
    project_id: int = Field(..., gt=0)
    creator_user: str = Field(..., min_length=1, max_length=50, pattern=USER_NAME_PATTERN)
    responsible_user: Optional[str] = Field(None, min_length=1, max_length=50, pattern=USER_NAME_PATTERN)
    status: TaskStatus = TaskStatus.PENDING


class TaskUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    responsible_user: Optional[str] = Field(None, min_length=1, max_length=50, pattern=USER_NAME_PATTERN)


class TaskFilters(BaseModel):
    """Optional list filters. Supplied filters are combined with AND."""
    filter_name: Optional[str] = Field(None, max_length=255)  # case-insensitive substring
    filter_responsible: Optional[str] = Field(None, max_length=50)  # exact username
    filter_status: Optional[TaskStatus] = None
    filter_project: Optional[int] = Field(None, gt=0)
    filter_deleted: Optional[bool] = None


class TaskOut(TaskBase):
    id: int
    status: TaskStatus
    deleted: bool
    project_id: int
    creator_id: int
    responsible_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
