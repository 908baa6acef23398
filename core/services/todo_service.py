# =============================================================================
# core/services/todo_service.py - Todo Business Logic
# =============================================================================
# Handles todo CRUD for a single user.
#
# Callers are expected to have resolved the owning user (and, for per-todo
# operations, the todo itself) before calling in. Nothing here checks the
# `username` header or the id syntax.
# =============================================================================

import logging
from datetime import datetime
from uuid import uuid4

from core.models.todo import Todo, ensure_utc, utc_now
from core.models.user import User
from app.exceptions import TodoNotFoundError
from lib.utils import normalize_uuid

logger = logging.getLogger(__name__)


class TodoService:
    """
    Service for todo operations.

    All methods act on in-memory objects owned by a User.
    """

    @staticmethod
    def has_capacity(user: User, limit: int) -> bool:
        """
        Check whether a user may create another todo.

        Pro users have no limit. Free-plan users may hold up to `limit`
        todos; the check only runs at creation time.
        """
        return user.pro or len(user.todos) < limit

    @staticmethod
    def list_todos(user: User) -> list[Todo]:
        """Get a user's todos in creation order."""
        return user.todos

    @staticmethod
    def find_todo(user: User, todo_id: str) -> Todo | None:
        """
        Find one of the user's todos by id.

        Args:
            user: The owning user
            todo_id: Todo UUID as a string, compared exactly

        Returns:
            The Todo, or None if the user has no todo with this id
        """
        for todo in user.todos:
            if normalize_uuid(todo.id) == todo_id:
                return todo
        return None

    @staticmethod
    def create_todo(user: User, title: str, deadline: datetime) -> Todo:
        """
        Append a new, not-done todo to the user's list.

        Args:
            user: The owning user
            title: What needs to be done
            deadline: When it is due (naive values are taken as UTC)

        Returns:
            The created Todo
        """
        todo = Todo(
            id=uuid4(),
            title=title,
            deadline=ensure_utc(deadline),
            done=False,
            created_at=utc_now(),
        )

        user.todos.append(todo)

        logger.info(f"Created todo: {todo.id} for user: {user.username} ({len(user.todos)} total)")
        return todo

    @staticmethod
    def update_todo(todo: Todo, title: str, deadline: datetime) -> Todo:
        """Overwrite a todo's title and deadline."""
        todo.title = title
        todo.deadline = ensure_utc(deadline)

        logger.info(f"Updated todo: {todo.id}")
        return todo

    @staticmethod
    def mark_done(todo: Todo) -> Todo:
        """Mark a todo as done. Marking it again is a no-op."""
        todo.done = True

        logger.info(f"Marked todo done: {todo.id}")
        return todo

    @staticmethod
    def delete_todo(user: User, todo: Todo) -> None:
        """
        Remove a todo from its owner's list.

        Raises:
            TodoNotFoundError: If the todo is no longer in the list
        """
        for index, existing in enumerate(user.todos):
            if existing is todo:
                del user.todos[index]
                logger.info(f"Deleted todo: {todo.id} for user: {user.username}")
                return

        raise TodoNotFoundError(str(todo.id))
