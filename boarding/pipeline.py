"""Boarding pipeline orchestration.

Stages:

1. Parse the booking text into Booking records.
2. Validate the batch against the seat map.
3. Generate the boarding sequence.

The stages themselves are independent; this module is where the caller-level
policy lives: in strict mode a batch with diagnostics gets no sequence.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from boarding.booking_validator import BookingValidator, ValidationIssue
from boarding.config import DEFAULT_SEAT_MAP, SeatMap
from boarding.errors import BookingValidationError
from boarding.models import BoardingSequenceEntry, Booking
from boarding.parser import parse_booking_file
from boarding.sequencer import generate_boarding_sequence

logger = logging.getLogger(__name__)


class BoardingPlan(BaseModel):
    """Result of running the whole pipeline on one booking file."""

    bookings: list[Booking]
    diagnostics: list[str] = Field(default_factory=list)
    warnings: list[ValidationIssue] = Field(default_factory=list)
    sequence: list[BoardingSequenceEntry] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.diagnostics

    def raise_for_diagnostics(self) -> None:
        """Raise BookingValidationError if validation reported anything."""
        if self.diagnostics:
            raise BookingValidationError(self.diagnostics)


def plan_boarding(
    text: str,
    *,
    strict: bool = True,
    seat_map: SeatMap = DEFAULT_SEAT_MAP,
) -> BoardingPlan:
    """Parse, validate and sequence a booking file.

    Args:
        text: Full content of the booking file
        strict: If True, no sequence is generated when diagnostics exist
        seat_map: Bus layout to validate and sequence against

    Returns:
        BoardingPlan; ``sequence`` is empty when strict mode refused it
    """
    bookings = parse_booking_file(text)
    result = BookingValidator(seat_map).validate_batch(bookings)
    diagnostics = result.error_messages()

    plan = BoardingPlan(bookings=bookings, diagnostics=diagnostics, warnings=result.warnings)

    if diagnostics and strict:
        logger.info(f"Refusing to sequence {len(bookings)} bookings: {len(diagnostics)} diagnostics")
        return plan

    plan.sequence = generate_boarding_sequence(bookings, seat_map)
    logger.info(f"Planned boarding for {len(bookings)} bookings")
    return plan
