# =============================================================================
# core/services/user_service.py - User Business Logic
# =============================================================================
# Handles user creation and plan upgrades.
# Separates HTTP concerns from storage/business logic.
# =============================================================================

import logging

from lib.store import UserStore
from core.models.user import User
from app.exceptions import ProAlreadyActivatedError

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user management operations.

    Provides a clean interface between API routes and the store.
    """

    @staticmethod
    def create_user(store: UserStore, name: str, username: str) -> User:
        """
        Create a new user on the free plan.

        Args:
            store: The user store
            name: Display name
            username: Unique, case-sensitive username

        Returns:
            The created User

        Raises:
            DuplicateUsernameError: If the username is already taken
        """
        user = store.create_user(name=name, username=username)
        logger.info(f"Created user: {user.id} ({user.username})")
        return user

    @staticmethod
    def activate_pro(user: User) -> User:
        """
        Activate the pro plan for a user.

        There is no downgrade, so this succeeds at most once per user.

        Raises:
            ProAlreadyActivatedError: If the user is already pro
        """
        if user.pro:
            raise ProAlreadyActivatedError(str(user.id))

        user.pro = True
        logger.info(f"Activated pro plan for user: {user.id}")
        return user
