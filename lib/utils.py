# =============================================================================
# lib/utils.py - Shared Utilities
# =============================================================================
# Common utilities used across the application.
# =============================================================================

import re
from uuid import UUID


# =============================================================================
# UUID Utilities
# =============================================================================

# Canonical 8-4-4-4-12 form, version 1-8, RFC 4122 variant
_UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-8][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

NIL_UUID = "00000000-0000-0000-0000-000000000000"
MAX_UUID = "ffffffff-ffff-ffff-ffff-ffffffffffff"


def normalize_uuid(value: str | UUID) -> str:
    """
    Normalize a UUID to string format.

    Handles both string and UUID objects, ensuring consistent string output.

    Args:
        value: UUID as string or UUID object

    Returns:
        String representation of the UUID

    Example:
        todo_id = normalize_uuid(uuid_obj)  # "550e8400-..."
        todo_id = normalize_uuid("550e8400-...")  # "550e8400-..."
    """
    return str(value) if isinstance(value, UUID) else value


def is_valid_uuid(value: str | None) -> bool:
    """
    Check that a value is a UUID in canonical hyphenated form.

    Stricter than uuid.UUID(), which also accepts braces, "urn:uuid:"
    prefixes and un-hyphenated hex. The nil and max UUIDs are accepted.

    Example:
        is_valid_uuid("550e8400-e29b-41d4-a716-446655440000")  # True
        is_valid_uuid("not-a-uuid")  # False
    """
    if not isinstance(value, str):
        return False

    lowered = value.lower()
    if lowered in (NIL_UUID, MAX_UUID):
        return True

    return _UUID_PATTERN.match(value) is not None
