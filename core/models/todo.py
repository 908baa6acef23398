# =============================================================================
# core/models/todo.py - Todo Schemas
# =============================================================================
# These models define the API contract for todo operations:
# - TodoCreate: Body of POST /todos
# - TodoUpdate: Body of PUT /todos/{id}
# - Todo: A stored todo item, also returned to clients
#
# Todos are always scoped to the user named in the `username` header.
# =============================================================================

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


def ensure_utc(value: datetime) -> datetime:
    """
    Normalize a datetime to UTC.

    Naive values are taken as UTC: "2025-01-01" parses to a naive
    midnight and clients sending date-only deadlines mean UTC midnight.
    Values with an offset are converted.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class TodoCreate(BaseModel):
    """
    Schema for creating a todo.

    Example:
        {
            "title": "buy milk",
            "deadline": "2025-01-01"
        }
    """

    title: str = Field(
        ...,
        description="What needs to be done"
    )

    # Accepts ISO-8601 dates or datetimes
    deadline: datetime = Field(
        ...,
        description="When the todo is due"
    )

    model_config = {
        "json_schema_extra": {
            "example": {"title": "buy milk", "deadline": "2025-01-01"}
        }
    }

    @field_validator("deadline")
    @classmethod
    def deadline_as_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class TodoUpdate(TodoCreate):
    """
    Schema for updating a todo.

    Both fields are overwritten; partial updates are not supported.
    """


class Todo(BaseModel):
    """
    A todo item owned by a single user.

    Returned by:
    - GET /todos (as a list)
    - POST /todos, PUT /todos/{id}, PATCH /todos/{id}/done

    Example:
        {
            "id": "660e8400-e29b-41d4-a716-446655440001",
            "title": "buy milk",
            "deadline": "2025-01-01T00:00:00Z",
            "done": false,
            "created_at": "2024-12-20T10:30:00Z"
        }
    """

    id: UUID = Field(
        ...,
        description="Unique todo identifier"
    )

    title: str = Field(
        ...,
        description="What needs to be done"
    )

    deadline: datetime = Field(
        ...,
        description="When the todo is due"
    )

    done: bool = Field(
        default=False,
        description="Whether the todo has been completed"
    )

    created_at: datetime = Field(
        default_factory=utc_now,
        description="Timestamp when the todo was created"
    )
