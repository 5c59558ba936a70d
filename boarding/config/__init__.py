"""
Seat-map configuration for the boarding planner.

Usage:
    from boarding.config import DEFAULT_SEAT_MAP, SeatMap

    DEFAULT_SEAT_MAP.is_valid_label("A1")   # True
    DEFAULT_SEAT_MAP.capacity               # 80

    # Alternative layouts are validated against the schema
    minibus = SeatMap.from_values(columns="AB", rows=10)
"""

from __future__ import annotations

from .errors import ConfigError, UnknownKeyError, ValidationError
from .schema import CONFIG_SCHEMA, get_default, get_schema_key, validate_key
from .seat_map import DEFAULT_SEAT_MAP, MAX_ROWS, MAX_SEATS, SEAT_COLUMNS, SeatMap
from .types import ConfigKey, ConfigType

__all__ = [
    # Seat map
    "DEFAULT_SEAT_MAP",
    "MAX_ROWS",
    "MAX_SEATS",
    "SEAT_COLUMNS",
    "SeatMap",
    # Error classes
    "ConfigError",
    "UnknownKeyError",
    "ValidationError",
    # Schema
    "CONFIG_SCHEMA",
    "ConfigKey",
    "ConfigType",
    "get_default",
    "get_schema_key",
    "validate_key",
]
