"""
Boarding - seat-based boarding order for a single bus trip.

This package contains:
- parser: booking file text -> Booking records
- booking_validator: seat label, duplicate seat and capacity checks
- sequencer: furthest-row-first boarding sequence
- pipeline: parse, validate and sequence in one call
"""

from boarding.booking_validator import (
    BookingValidationResult,
    BookingValidator,
    ValidationIssue,
    ValidationSeverity,
    validate_bookings,
)
from boarding.models import BoardingSequenceEntry, Booking
from boarding.parser import parse_booking_file
from boarding.pipeline import BoardingPlan, plan_boarding
from boarding.sequencer import generate_boarding_sequence

__all__ = [
    "BoardingPlan",
    "BoardingSequenceEntry",
    "Booking",
    "BookingValidationResult",
    "BookingValidator",
    "ValidationIssue",
    "ValidationSeverity",
    "generate_boarding_sequence",
    "parse_booking_file",
    "plan_boarding",
    "validate_bookings",
]
