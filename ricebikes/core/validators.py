"""
Shared input validators.
"""

import re
from uuid import UUID

# RFC 4122 UUID, versions 1 through 5.
UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_valid_uuid(value: str | None) -> bool:
    """Check a string against the UUID v1-v5 pattern."""
    if not value:
        return False
    return bool(UUID_PATTERN.fullmatch(value))


def parse_uuid(value: str, field_name: str = "UUID") -> UUID:
    """
    Parse a UUID string, rejecting anything outside versions 1-5.

    Raises:
        ValueError: If the value is not a valid UUID.
    """
    if not is_valid_uuid(value):
        raise ValueError(f"Invalid {field_name} format")
    return UUID(value)
