"""
Booking and boarding models shared by the parser, validator and sequencer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Booking(BaseModel):
    """One reservation: an identifier and the seat labels it requested.

    Seat labels are kept exactly as parsed; checking them is the validator's job.
    """

    model_config = ConfigDict(frozen=True)

    booking_id: str = Field(min_length=1)
    seats: tuple[str, ...] = ()

    @property
    def seat_count(self) -> int:
        """Number of seat labels requested (malformed ones included)."""
        return len(self.seats)


class BoardingSequenceEntry(BaseModel):
    """Position of one booking in the boarding order."""

    model_config = ConfigDict(frozen=True)

    seq: int = Field(ge=1)  # 1-based
    booking_id: str
