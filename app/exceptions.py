# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error response has the same shape: {"error": "<message>"}.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class TodoApiException(Exception):
    """
    Base exception for the TodoList API.

    All custom exceptions inherit from this class.
    The message is returned to clients verbatim, so subclasses
    keep the exact wording clients match on.
    """

    def __init__(
        self,
        message: str,
        code: str = "TODO_API_ERROR",
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        return {"error": self.message}


# =============================================================================
# User Exceptions
# =============================================================================

class UsernameNotFoundError(TodoApiException):
    """Raised when the `username` header doesn't match any user."""

    def __init__(self, username: str | None):
        super().__init__(
            message="Username does not exist!",
            code="USERNAME_NOT_FOUND",
            status_code=404,
            details={"username": username}
        )


class UserIdNotFoundError(TodoApiException):
    """Raised when a user ID doesn't exist."""

    def __init__(self, user_id: str):
        super().__init__(
            message="User id not found!",
            code="USER_ID_NOT_FOUND",
            status_code=404,
            details={"user_id": user_id}
        )


class DuplicateUsernameError(TodoApiException):
    """Raised when creating a user with a username that is already taken."""

    def __init__(self, username: str):
        super().__init__(
            message="Username already exists",
            code="USERNAME_TAKEN",
            status_code=400,
            details={"username": username}
        )


class ProAlreadyActivatedError(TodoApiException):
    """Raised when activating the pro plan twice."""

    def __init__(self, user_id: str):
        super().__init__(
            message="Pro plan is already activated.",
            code="PRO_ALREADY_ACTIVE",
            status_code=400,
            details={"user_id": user_id}
        )


# =============================================================================
# Todo Exceptions
# =============================================================================

class TodoLimitReachedError(TodoApiException):
    """Raised when a free-plan user already holds the maximum number of todos."""

    def __init__(self, username: str, limit: int):
        super().__init__(
            message=f"User is not Pro and has already created {limit} todos!",
            code="TODO_LIMIT_REACHED",
            status_code=403,
            details={"username": username, "limit": limit}
        )


class InvalidTodoIdError(TodoApiException):
    """Raised when a todo ID is not a well-formed UUID."""

    def __init__(self, todo_id: str):
        super().__init__(
            message="Id is not a valid uuid!",
            code="INVALID_TODO_ID",
            status_code=400,
            details={"todo_id": todo_id}
        )


class TodoNotOwnedError(TodoApiException):
    """Raised when a todo ID is not among the user's todos."""

    def __init__(self, todo_id: str, username: str):
        super().__init__(
            message="Id does not belong to a todo of this user!",
            code="TODO_NOT_OWNED",
            status_code=404,
            details={"todo_id": todo_id, "username": username}
        )


class TodoNotFoundError(TodoApiException):
    """Raised when a todo disappears from its owner's list before removal."""

    def __init__(self, todo_id: str):
        super().__init__(
            message="Todo not found",
            code="TODO_NOT_FOUND",
            status_code=404,
            details={"todo_id": todo_id}
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def todo_api_exception_handler(
    request: Request,
    exc: TodoApiException
) -> JSONResponse:
    """
    Convert TodoApiException to JSON response.

    The body is always {"error": message}; the code and details
    only go to the log.
    """
    logger.warning(
        f"{request.method} {request.url.path} -> {exc.status_code} "
        f"[{exc.code}] {exc.details}"
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle Pydantic validation errors.

    Missing or mistyped body fields (and malformed JSON) end up here.
    """
    logger.warning(f"{request.method} {request.url.path} -> 422 validation error")
    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation error",
            "details": jsonable_encoder(exc.errors()),
        }
    )
