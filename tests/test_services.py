# =============================================================================
# tests/test_services.py - Service Layer Tests
# =============================================================================
# Tests for UserService and TodoService acting directly on store objects.
# =============================================================================

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from app.exceptions import ProAlreadyActivatedError, TodoNotFoundError
from core.models import Todo
from core.services import TodoService, UserService


@pytest.fixture
def user(store):
    """A free-plan user."""
    return UserService.create_user(store, name="Ana", username="ana")


DEADLINE = datetime(2025, 1, 1, tzinfo=timezone.utc)


# =============================================================================
# UserService Tests
# =============================================================================

class TestUserService:
    """Tests for UserService."""

    def test_create_user(self, store):
        """Users are stored and returned."""
        user = UserService.create_user(store, name="Ana", username="ana")

        assert store.find_by_username("ana") is user

    def test_activate_pro(self, user):
        """First activation flips pro to True."""
        UserService.activate_pro(user)

        assert user.pro is True

    def test_activate_pro_twice(self, user):
        """Second activation is rejected and pro stays True."""
        UserService.activate_pro(user)

        with pytest.raises(ProAlreadyActivatedError) as exc_info:
            UserService.activate_pro(user)

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == "Pro plan is already activated."
        assert user.pro is True


# =============================================================================
# TodoService Tests
# =============================================================================

class TestHasCapacity:
    """Tests for the free plan limit."""

    def test_free_user_below_limit(self, user):
        for i in range(9):
            TodoService.create_todo(user, title=f"todo {i}", deadline=DEADLINE)

        assert TodoService.has_capacity(user, 10)

    def test_free_user_at_limit(self, user):
        for i in range(10):
            TodoService.create_todo(user, title=f"todo {i}", deadline=DEADLINE)

        assert not TodoService.has_capacity(user, 10)

    def test_pro_user_ignores_limit(self, user):
        UserService.activate_pro(user)
        for i in range(10):
            TodoService.create_todo(user, title=f"todo {i}", deadline=DEADLINE)

        assert TodoService.has_capacity(user, 10)


class TestTodoService:
    """Tests for todo CRUD on a user."""

    def test_create_todo(self, user):
        """New todos are appended, not done, with created_at set."""
        todo = TodoService.create_todo(user, title="buy milk", deadline=DEADLINE)

        assert todo.done is False
        assert todo.created_at is not None
        assert user.todos == [todo]

    def test_create_todo_naive_deadline(self, user):
        """Naive deadlines are stored as UTC."""
        todo = TodoService.create_todo(user, title="buy milk", deadline=datetime(2025, 1, 1))

        assert todo.deadline == DEADLINE

    def test_list_keeps_creation_order(self, user):
        first = TodoService.create_todo(user, title="first", deadline=DEADLINE)
        second = TodoService.create_todo(user, title="second", deadline=DEADLINE)

        assert TodoService.list_todos(user) == [first, second]

    def test_find_todo(self, user):
        """Todos are found by their exact id string."""
        todo = TodoService.create_todo(user, title="buy milk", deadline=DEADLINE)

        assert TodoService.find_todo(user, str(todo.id)) is todo
        assert TodoService.find_todo(user, str(todo.id).upper()) is None
        assert TodoService.find_todo(user, str(uuid4())) is None

    def test_update_todo(self, user):
        """Title and deadline are overwritten; done is untouched."""
        todo = TodoService.create_todo(user, title="buy milk", deadline=DEADLINE)
        TodoService.mark_done(todo)

        new_deadline = datetime(2025, 2, 1, tzinfo=timezone.utc)
        TodoService.update_todo(todo, title="buy bread", deadline=new_deadline)

        assert todo.title == "buy bread"
        assert todo.deadline == new_deadline
        assert todo.done is True

    def test_mark_done(self, user):
        todo = TodoService.create_todo(user, title="buy milk", deadline=DEADLINE)

        TodoService.mark_done(todo)

        assert todo.done is True

    def test_delete_todo(self, user):
        """Deleting removes exactly that todo."""
        keep = TodoService.create_todo(user, title="keep", deadline=DEADLINE)
        drop = TodoService.create_todo(user, title="drop", deadline=DEADLINE)

        TodoService.delete_todo(user, drop)

        assert user.todos == [keep]

    def test_delete_missing_todo(self, user):
        """Deleting a todo that isn't in the list raises 404."""
        stray = Todo(id=uuid4(), title="stray", deadline=DEADLINE)

        with pytest.raises(TodoNotFoundError) as exc_info:
            TodoService.delete_todo(user, stray)

        assert exc_info.value.status_code == 404
        assert exc_info.value.message == "Todo not found"
