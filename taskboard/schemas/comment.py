"""
Pydantic schemas for Comment entities.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from taskboard.schemas.user import USER_NAME_PATTERN


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1)
    user_name: str = Field(..., min_length=1, max_length=50, pattern=USER_NAME_PATTERN)
    task_id: int = Field(..., gt=0)


class CommentUpdate(BaseModel):
    content: Optional[str] = Field(None, min_length=1)
    user_name: Optional[str] = Field(None, min_length=1, max_length=50, pattern=USER_NAME_PATTERN)
    task_id: Optional[int] = Field(None, gt=0)


class CommentOut(BaseModel):
    id: int
    content: str
    author_id: int
    task_id: int
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
