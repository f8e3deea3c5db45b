"""
Teams API Endpoints

CRUD operations for teams and team membership.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from taskboard.api.dependencies import get_team_service
from taskboard.schemas.relations import TeamDetail
from taskboard.schemas.team import TeamCreate, TeamOut, TeamUpdate
from taskboard.schemas.user import UserOut
from taskboard.services.team_service import TeamService

router = APIRouter()


# ==================== Team CRUD ====================

@router.get("/", response_model=List[TeamDetail])
async def list_teams(teams: TeamService = Depends(get_team_service)):
    """List all teams with members and projects."""
    return await teams.find_all()


@router.post("/", response_model=TeamOut, status_code=status.HTTP_201_CREATED)
async def create_team(payload: TeamCreate, teams: TeamService = Depends(get_team_service)):
    """
    Create a new team.

    Team names are unique; a duplicate name returns 409.
    """
    return await teams.create(payload)


@router.get("/by-name/{name}", response_model=TeamDetail)
async def get_team_by_name(name: str, teams: TeamService = Depends(get_team_service)):
    team = await teams.find_by_name(name)
    if not team:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Team {name} not found"
        )
    return team


@router.get("/{team_id}", response_model=TeamDetail)
async def get_team(team_id: int, teams: TeamService = Depends(get_team_service)):
    return await teams.find_one(team_id)


@router.patch("/{team_id}", response_model=TeamOut)
async def update_team(
    team_id: int,
    payload: TeamUpdate,
    teams: TeamService = Depends(get_team_service)
):
    return await teams.update(team_id, payload)


@router.delete("/{team_id}", response_model=TeamOut)
async def delete_team(team_id: int, teams: TeamService = Depends(get_team_service)):
    """
    Delete a team and return the deleted record.

    A team that still owns projects cannot be deleted (409).
    """
    return await teams.delete(team_id)


# ==================== Team Member Management ====================

@router.post("/{team_id}/members/{user_name}", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def add_user_to_team(
    team_id: int,
    user_name: str,
    teams: TeamService = Depends(get_team_service)
):
    """
    Add an existing user to the team.

    404 if the team or user does not exist, 409 if already a member.
    """
    return await teams.add_user(team_id, user_name)


@router.delete("/{team_id}/members/{user_name}", response_model=UserOut)
async def remove_user_from_team(
    team_id: int,
    user_name: str,
    teams: TeamService = Depends(get_team_service)
):
    """
    Remove a member from the team.

    404 if the team or user does not exist, or the user is not a member.
    """
    return await teams.remove_user(team_id, user_name)
