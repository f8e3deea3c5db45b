"""
Tasks API Endpoints

Listing accepts optional filters as query parameters; supplied filters
are combined with AND.
"""

from typing import Annotated, List
from fastapi import APIRouter, Depends, HTTPException, Query, status

from taskboard.api.dependencies import get_task_service
from taskboard.schemas.relations import TaskDetail
from taskboard.schemas.task import TaskCreate, TaskFilters, TaskOut, TaskUpdate
from taskboard.services.task_service import TaskService

router = APIRouter()


@router.get("/", response_model=List[TaskDetail])
async def list_tasks(
    filters: Annotated[TaskFilters, Query()],
    tasks: TaskService = Depends(get_task_service)
):
    """
    List tasks.

    Query parameters:
    - filter_name: case-insensitive substring of the task name
    - filter_responsible: username of the responsible user
    - filter_status: PENDING, IN_PROGRESS or COMPLETED
    - filter_project: project id
    - filter_deleted: soft-delete flag
    """
    return await tasks.find_all(filters)


@router.post("/", response_model=TaskOut, status_code=status.HTTP_201_CREATED)
async def create_task(payload: TaskCreate, tasks: TaskService = Depends(get_task_service)):
    """
    Create a task.

    404 if the project, the creator or the responsible user does not exist.
    """
    return await tasks.create(payload)


@router.get("/by-name/{name}", response_model=TaskDetail)
async def get_task_by_name(name: str, tasks: TaskService = Depends(get_task_service)):
    task = await tasks.find_by_name(name)
    if not task:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Task {name} not found"
        )
    return task


@router.get("/{task_id}", response_model=TaskDetail)
async def get_task(task_id: int, tasks: TaskService = Depends(get_task_service)):
    return await tasks.find_one(task_id)


@router.patch("/{task_id}", response_model=TaskOut)
async def update_task(
    task_id: int,
    payload: TaskUpdate,
    tasks: TaskService = Depends(get_task_service)
):
    return await tasks.update(task_id, payload)


@router.delete("/{task_id}", response_model=TaskOut)
async def delete_task(task_id: int, tasks: TaskService = Depends(get_task_service)):
    """Soft delete: the task is flagged as deleted and stays readable."""
    return await tasks.delete(task_id)
