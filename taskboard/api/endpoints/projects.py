"""
Projects API Endpoints
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from taskboard.api.dependencies import get_project_service
from taskboard.schemas.project import ProjectCreate, ProjectOut, ProjectUpdate
from taskboard.schemas.relations import ProjectDetail
from taskboard.services.project_service import ProjectService

router = APIRouter()


@router.get("/", response_model=List[ProjectDetail])
async def list_projects(projects: ProjectService = Depends(get_project_service)):
    return await projects.find_all()


@router.post("/", response_model=ProjectOut, status_code=status.HTTP_201_CREATED)
async def create_project(payload: ProjectCreate, projects: ProjectService = Depends(get_project_service)):
    """Create a project in an existing team (404 if the team does not exist)."""
    return await projects.create(payload)


@router.get("/by-name/{name}", response_model=ProjectDetail)
async def get_project_by_name(name: str, projects: ProjectService = Depends(get_project_service)):
    project = await projects.find_by_name(name)
    if not project:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Project {name} not found"
        )
    return project


@router.get("/{project_id}", response_model=ProjectDetail)
async def get_project(project_id: int, projects: ProjectService = Depends(get_project_service)):
    return await projects.find_one(project_id)


@router.patch("/{project_id}", response_model=ProjectOut)
async def update_project(
    project_id: int,
    payload: ProjectUpdate,
    projects: ProjectService = Depends(get_project_service)
):
    """Update a project. Supplying `team_id` moves it to that team."""
    return await projects.update(project_id, payload)


@router.delete("/{project_id}", response_model=ProjectOut)
async def delete_project(project_id: int, projects: ProjectService = Depends(get_project_service)):
    return await projects.delete(project_id)
