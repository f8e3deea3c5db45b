"""
Users API Endpoints

User directory operations. Users are addressed by id for reads and by
username for writes.
"""

from typing import List
from fastapi import APIRouter, Depends, HTTPException, status

from taskboard.api.dependencies import get_user_service
from taskboard.schemas.relations import UserDetail
from taskboard.schemas.user import UserCreate, UserOut, UserUpdate
from taskboard.services.user_service import UserService

router = APIRouter()


@router.get("/", response_model=List[UserDetail])
async def list_users(users: UserService = Depends(get_user_service)):
    """List all users with their teams and tasks."""
    return await users.find_all()


@router.post("/", response_model=UserOut, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, users: UserService = Depends(get_user_service)):
    """
    Create a user.

    Returns 409 if the username is already taken.
    """
    return await users.create(payload)


@router.get("/by-username/{user_name}", response_model=UserDetail)
async def get_user_by_username(user_name: str, users: UserService = Depends(get_user_service)):
    user = await users.find_by_user_name(user_name)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"User {user_name} not found"
        )
    return user


@router.get("/{user_id}", response_model=UserDetail)
async def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    return await users.find_one(user_id)


@router.patch("/{user_name}", response_model=UserOut)
async def update_user(
    user_name: str,
    payload: UserUpdate,
    users: UserService = Depends(get_user_service)
):
    """Update a user. Omitted fields keep their value."""
    return await users.update(user_name, payload)


@router.delete("/{user_name}", response_model=UserOut)
async def delete_user(user_name: str, users: UserService = Depends(get_user_service)):
    """Delete a user and return the deleted record."""
    return await users.delete(user_name)
