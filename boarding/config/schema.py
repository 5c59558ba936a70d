"""Configuration schema registry.

Defines the seat-map keys with their types, defaults and validation rules.
This is the single source of truth for the bus layout.
"""

from __future__ import annotations

from typing import Any

from .errors import UnknownKeyError
from .types import ConfigKey, ConfigType


def _is_column_set(value: str) -> bool:
    """Columns are distinct uppercase letters, e.g. "ABCD"."""
    return value.isalpha() and value.isupper() and len(set(value)) == len(value)


# =============================================================================
# SEAT MAP
# One bus, one deck: lettered columns, numbered rows starting at the entry.
# =============================================================================

CONFIG_SCHEMA: dict[str, ConfigKey] = {
    "seat_map.columns": ConfigKey(
        key="seat_map.columns",
        config_type=ConfigType.STRING,
        default="ABCD",
        description="Column letters across the bus, left to right",
        validator=_is_column_set,
    ),
    "seat_map.rows": ConfigKey(
        key="seat_map.rows",
        config_type=ConfigType.INT,
        default=20,
        description="Number of seat rows; row 1 is nearest the entry",
        min_value=1,
        # Row numbers are matched with at most two digits
        max_value=99,
    ),
    "seat_map.capacity": ConfigKey(
        key="seat_map.capacity",
        config_type=ConfigType.INT,
        default=80,
        description="Maximum number of seats that may be booked on one trip",
        min_value=0,
    ),
}


def get_schema_key(key: str) -> ConfigKey:
    """
    Get schema definition for a key.

    Raises:
        UnknownKeyError: if the key is not registered
    """
    try:
        return CONFIG_SCHEMA[key]
    except KeyError:
        raise UnknownKeyError(f"Unknown config key: {key}") from None


def get_default(key: str) -> Any:
    """Get the built-in default value for a key."""
    return get_schema_key(key).default


def validate_key(key: str, value: Any) -> str | None:
    """
    Validate a value against its schema definition.

    Returns:
        None if valid, error message if invalid
    """
    return get_schema_key(key).validate(value)
