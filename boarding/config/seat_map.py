"""Seat-map shape for the bus.

The layout is fixed at import time: ``DEFAULT_SEAT_MAP`` is built from the
schema defaults and is what every pipeline stage uses unless a caller hands
in another ``SeatMap``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property

from .errors import ValidationError
from .schema import get_default, validate_key

SEAT_COLUMNS: tuple[str, ...] = tuple(get_default("seat_map.columns"))
MAX_ROWS: int = get_default("seat_map.rows")
MAX_SEATS: int = get_default("seat_map.capacity")


@dataclass(frozen=True)
class SeatMap:
    """Immutable bus layout: column letters, row count and booking capacity."""

    columns: tuple[str, ...] = SEAT_COLUMNS
    rows: int = MAX_ROWS
    capacity: int = MAX_SEATS

    @classmethod
    def from_values(
        cls,
        columns: str | None = None,
        rows: int | None = None,
        capacity: int | None = None,
    ) -> SeatMap:
        """Build a validated seat map.

        Missing values fall back to the schema defaults, except capacity which
        defaults to columns x rows when columns or rows were given.

        Raises:
            ValidationError: if any value is rejected by the schema
        """
        columns = columns if columns is not None else get_default("seat_map.columns")
        rows = rows if rows is not None else get_default("seat_map.rows")
        if capacity is None:
            capacity = len(columns) * rows

        for key, value in (
            ("seat_map.columns", columns),
            ("seat_map.rows", rows),
            ("seat_map.capacity", capacity),
        ):
            error = validate_key(key, value)
            if error:
                raise ValidationError(f"{key}: {error}")

        return cls(columns=tuple(columns), rows=rows, capacity=capacity)

    @cached_property
    def _label_pattern(self) -> re.Pattern[str]:
        # ASCII digits only, no zero padding: "A1" is a label, "A01" is not
        return re.compile(rf"^([{''.join(self.columns)}])([1-9][0-9]?)$")

    @cached_property
    def _shape_pattern(self) -> re.Pattern[str]:
        return re.compile(rf"^([{''.join(self.columns)}])([0-9]{{1,2}})$")

    def is_valid_label(self, label: str) -> bool:
        """True when ``label`` names a real seat on this bus."""
        match = self._label_pattern.fullmatch(label)
        return match is not None and int(match.group(2)) <= self.rows

    def row_of(self, label: str) -> int | None:
        """Row number of a label that has the column+digits shape, else None.

        This is a shape check only: "A0" and "A99" yield 0 and 99 even though
        neither is a valid seat.
        """
        match = self._shape_pattern.fullmatch(label)
        if not match:
            return None
        return int(match.group(2))


DEFAULT_SEAT_MAP = SeatMap()
