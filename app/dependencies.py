# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources and request checks.
# These are injected into route handlers using Depends().
#
# The checks run in the order a route declares them. Each one either
# returns validated context (a User, or a TodoContext) or raises a
# TodoApiException, which stops the chain before the handler runs.
#
# Usage:
#   @router.get("/todos")
#   async def list_todos(user: ExistingUserDep):
#       ...
# =============================================================================

import logging
from dataclasses import dataclass
from typing import Annotated

from fastapi import Depends, Header, Path, Request

from app.config import Settings, get_settings
from app.exceptions import InvalidTodoIdError, TodoLimitReachedError, TodoNotOwnedError
from core.models.todo import Todo
from core.models.user import User
from core.services.todo_service import TodoService
from lib.store import UserStore
from lib.utils import is_valid_uuid

logger = logging.getLogger(__name__)


# =============================================================================
# Resources
# =============================================================================

def get_store(request: Request) -> UserStore:
    """
    Get the application's user store.

    The store is created in create_app() and lives on app.state.
    """
    return request.app.state.store


async def lock_store(store: Annotated[UserStore, Depends(get_store)]):
    """
    Hold the store lock for the rest of the request.

    Every route depends on this (directly or through a check), so a
    request's checks and its mutation run without interleaving.
    """
    async with store.lock:
        yield store


# Type aliases for dependency injection
StoreDep = Annotated[UserStore, Depends(lock_store)]
SettingsDep = Annotated[Settings, Depends(get_settings)]


# =============================================================================
# Request Context
# =============================================================================

@dataclass(frozen=True)
class TodoContext:
    """A todo together with the user that owns it."""
    user: User
    todo: Todo


# =============================================================================
# Checks
# =============================================================================

async def require_existing_user(
    store: StoreDep,
    username: Annotated[str | None, Header()] = None,
) -> User:
    """
    Resolve the user named in the `username` header.

    Raises:
        UsernameNotFoundError: 404 if the header is missing or unknown
    """
    return store.find_by_username(username)


async def require_user_by_id(
    store: StoreDep,
    user_id: Annotated[str, Path(description="User UUID")],
) -> User:
    """
    Resolve the user from the path id.

    Raises:
        UserIdNotFoundError: 404 if no user has this id
    """
    return store.find_by_id(user_id)


ExistingUserDep = Annotated[User, Depends(require_existing_user)]
UserByIdDep = Annotated[User, Depends(require_user_by_id)]


async def require_todo_capacity(
    user: ExistingUserDep,
    settings: SettingsDep,
) -> User:
    """
    Make sure the user may create another todo.

    Raises:
        TodoLimitReachedError: 403 if the user is not pro and is at the limit
    """
    limit = settings.FREE_PLAN_TODO_LIMIT

    if not TodoService.has_capacity(user, limit):
        raise TodoLimitReachedError(user.username, limit)

    return user


async def require_owned_todo(
    user: ExistingUserDep,
    todo_id: Annotated[str, Path(description="Todo UUID")],
) -> TodoContext:
    """
    Resolve a todo owned by the user named in the `username` header.

    Checks, in order: the user exists, the id is a valid UUID,
    the id belongs to one of the user's todos.

    Raises:
        UsernameNotFoundError: 404 if the user doesn't exist
        InvalidTodoIdError: 400 if the id is not a UUID
        TodoNotOwnedError: 404 if the user has no todo with this id
    """
    if not is_valid_uuid(todo_id):
        raise InvalidTodoIdError(todo_id)

    todo = TodoService.find_todo(user, todo_id)
    if todo is None:
        raise TodoNotOwnedError(todo_id, user.username)

    logger.debug(f"Resolved todo {todo.id} for user: {user.username}")
    return TodoContext(user=user, todo=todo)


CapacityCheckedUserDep = Annotated[User, Depends(require_todo_capacity)]
TodoContextDep = Annotated[TodoContext, Depends(require_owned_todo)]
