# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: User schemas (create body, stored/returned user)
# - todo.py: Todo schemas (create/update bodies, stored/returned todo)
#
# These models define the "contract" between API and clients.
# =============================================================================

# -----------------------------------------------------------------------------
# Todo Models - Items owned by a user
# -----------------------------------------------------------------------------
from .todo import (
    Todo,
    TodoCreate,
    TodoUpdate,
)

# -----------------------------------------------------------------------------
# User Models - Accounts and plans
# -----------------------------------------------------------------------------
from .user import (
    User,
    UserCreate,
)

__all__ = [
    # Todo
    "Todo",
    "TodoCreate",
    "TodoUpdate",
    # User
    "User",
    "UserCreate",
]
