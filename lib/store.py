# =============================================================================
# lib/store.py - In-Memory User Store
# =============================================================================
# Process-lifetime storage for users and their todos.
#
# The store owns every User record. Each User owns its own todo list, so the
# store only indexes users: once by username and once by id. Both indexes
# point at the same User objects.
#
# Usage:
#   store = UserStore()
#   user = store.create_user(name="Ana", username="ana")
#   store.find_by_username("ana") is user  # True
#
# Nothing is persisted - all data is lost when the process exits.
# =============================================================================

import asyncio
import logging
from uuid import uuid4

from core.models.user import User
from app.exceptions import (
    DuplicateUsernameError,
    UserIdNotFoundError,
    UsernameNotFoundError,
)

logger = logging.getLogger(__name__)


class UserStore:
    """
    In-memory collection of users.

    Lookups are dict-based rather than linear scans. There is no removal
    operation: users live as long as the store does.

    The `lock` serializes request handling. Routes hold it from the first
    check until the handler returns, so check-then-mutate sequences
    (duplicate username, todo quota) cannot interleave.
    """

    def __init__(self):
        self._by_username: dict[str, User] = {}
        self._by_id: dict[str, User] = {}
        self.lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._by_id)

    def username_exists(self, username: str | None) -> bool:
        """Check whether a username is already taken (case-sensitive)."""
        return username in self._by_username

    def create_user(self, name: str, username: str) -> User:
        """
        Create and store a new user.

        Args:
            name: Display name
            username: Unique, case-sensitive username

        Returns:
            The stored User (pro=False, no todos)

        Raises:
            DuplicateUsernameError: If the username is already taken
        """
        if self.username_exists(username):
            raise DuplicateUsernameError(username)

        user = User(id=uuid4(), name=name, username=username)

        self._by_username[user.username] = user
        self._by_id[str(user.id)] = user

        logger.debug(f"Stored user {user.id} ({len(self)} total)")
        return user

    def find_by_username(self, username: str | None) -> User:
        """
        Get a user by username.

        Raises:
            UsernameNotFoundError: If no user has this username
        """
        user = self._by_username.get(username) if username is not None else None

        if user is None:
            raise UsernameNotFoundError(username)

        return user

    def find_by_id(self, user_id: str) -> User:
        """
        Get a user by id.

        The id is matched as a string, so a malformed id is simply not found.

        Raises:
            UserIdNotFoundError: If no user has this id
        """
        user = self._by_id.get(user_id)

        if user is None:
            raise UserIdNotFoundError(user_id)

        return user

    def list_users(self) -> list[User]:
        """All users, in creation order."""
        return list(self._by_id.values())
