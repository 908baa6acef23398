# =============================================================================
# app/routers/users.py - User Endpoints
# =============================================================================
# Handles user creation, lookup and pro plan activation.
#
# Endpoints:
# - POST /users: Create a user
# - GET /users/{user_id}: Get a user with their todos
# - PATCH /users/{user_id}/pro: Activate the pro plan
# =============================================================================

from fastapi import APIRouter, status

from app.dependencies import StoreDep, UserByIdDep
from core.models.user import User, UserCreate
from core.services.user_service import UserService

router = APIRouter()


@router.post("", response_model=User, status_code=status.HTTP_201_CREATED)
async def create_user(request: UserCreate, store: StoreDep):
    """
    Create a new user.

    Users start on the free plan with no todos.
    Fails with 400 if the username is already taken.
    """
    return UserService.create_user(store, name=request.name, username=request.username)


@router.get("/{user_id}", response_model=User)
async def get_user(user: UserByIdDep):
    """Get a user and their todos."""
    return user


@router.patch("/{user_id}/pro", response_model=User)
async def activate_pro(user: UserByIdDep):
    """
    Activate the pro plan.

    Pro users can create any number of todos. The plan can only be
    activated once; a second call returns 400.
    """
    return UserService.activate_pro(user)
