# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - UserCreate: Body of POST /users
# - User: A stored user, also returned to clients
#
# A user owns its todo list. Users are never deleted, and the pro plan can
# be activated once but never revoked.
# =============================================================================

from uuid import UUID

from pydantic import BaseModel, Field

from .todo import Todo


class UserCreate(BaseModel):
    """
    Schema for creating a user.

    Example:
        {
            "name": "Ana",
            "username": "ana"
        }
    """

    name: str = Field(
        ...,
        description="Display name"
    )

    # Compared case-sensitively: "ana" and "Ana" are different users
    username: str = Field(
        ...,
        description="Unique username, sent back in the `username` header"
    )

    model_config = {
        "json_schema_extra": {
            "example": {"name": "Ana", "username": "ana"}
        }
    }


class User(BaseModel):
    """
    A registered user with their todos.

    Returned by:
    - POST /users
    - GET /users/{id}
    - PATCH /users/{id}/pro
    """

    id: UUID = Field(
        ...,
        description="Unique user identifier"
    )

    name: str = Field(
        ...,
        description="Display name"
    )

    username: str = Field(
        ...,
        description="Unique username"
    )

    # Non-pro users are limited to FREE_PLAN_TODO_LIMIT todos
    pro: bool = Field(
        default=False,
        description="Whether the pro plan is active"
    )

    todos: list[Todo] = Field(
        default_factory=list,
        description="Todos in creation order"
    )
