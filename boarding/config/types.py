"""Configuration type definitions.

Defines the schema for configuration keys including types and validation rules.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ConfigType(Enum):
    """Supported configuration value types."""

    INT = "int"
    STRING = "string"


@dataclass(frozen=True)
class ConfigKey:
    """
    Definition of a configuration key with validation rules.

    Attributes:
        key: The dot-notation config key (e.g., "seat_map.rows")
        config_type: The expected type of the value
        default: Value used by the built-in seat map
        description: Human-readable description
        min_value: Minimum allowed value (for numeric types)
        max_value: Maximum allowed value (for numeric types)
        validator: Custom validation function returning True if valid
    """

    key: str
    config_type: ConfigType
    default: Any
    description: str = ""
    min_value: int | None = None
    max_value: int | None = None
    validator: Callable[[Any], bool] | None = None

    def validate(self, value: Any) -> str | None:
        """
        Validate a value against this key's rules.

        Args:
            value: The value to validate

        Returns:
            None if valid, error message string if invalid
        """
        expected = int if self.config_type is ConfigType.INT else str
        # bool is an int subclass but never a sensible row count
        if not isinstance(value, expected) or isinstance(value, bool):
            return f"Value {value!r} is not of type {self.config_type.value}"

        if self.config_type is ConfigType.INT:
            if self.min_value is not None and value < self.min_value:
                return f"Value {value} below minimum {self.min_value}"
            if self.max_value is not None and value > self.max_value:
                return f"Value {value} above maximum {self.max_value}"

        if self.validator is not None and not self.validator(value):
            return f"Value {value!r} failed custom validation"

        return None
