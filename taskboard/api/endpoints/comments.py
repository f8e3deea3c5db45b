"""
Comments API Endpoints
"""

from typing import List
from fastapi import APIRouter, Depends, status

from taskboard.api.dependencies import get_comment_service
from taskboard.schemas.comment import CommentCreate, CommentOut, CommentUpdate
from taskboard.schemas.relations import CommentDetail
from taskboard.services.comment_service import CommentService

router = APIRouter()


@router.get("/", response_model=List[CommentDetail])
async def list_comments(comments: CommentService = Depends(get_comment_service)):
    return await comments.find_all()


@router.post("/", response_model=CommentOut, status_code=status.HTTP_201_CREATED)
async def create_comment(payload: CommentCreate, comments: CommentService = Depends(get_comment_service)):
    """Comment on a task (404 if the author or the task does not exist)."""
    return await comments.create(payload)


@router.get("/{comment_id}", response_model=CommentDetail)
async def get_comment(comment_id: int, comments: CommentService = Depends(get_comment_service)):
    return await comments.find_one(comment_id)


@router.patch("/{comment_id}", response_model=CommentOut)
async def update_comment(
    comment_id: int,
    payload: CommentUpdate,
    comments: CommentService = Depends(get_comment_service)
):
    return await comments.update(comment_id, payload)


@router.delete("/{comment_id}", response_model=CommentOut)
async def delete_comment(comment_id: int, comments: CommentService = Depends(get_comment_service)):
    return await comments.delete(comment_id)
