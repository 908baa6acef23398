# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_service import UserService
from .todo_service import TodoService

__all__ = [
    "UserService",
    "TodoService",
]
