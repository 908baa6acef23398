# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - users.py: User creation, lookup and pro plan activation
# - todos.py: Todo CRUD scoped to the `username` header
#
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import users
from . import todos

__all__ = [
    "health",
    "users",
    "todos",
]
