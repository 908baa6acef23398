# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - store.py: In-memory user store (users indexed by username and id)
# - utils.py: Shared utilities (UUID validation and normalization)
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.store import UserStore
from lib.utils import is_valid_uuid, normalize_uuid

__all__ = [
    # Store
    "UserStore",
    # Utils
    "is_valid_uuid",
    "normalize_uuid",
]
