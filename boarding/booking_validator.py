"""
Booking validation: seat labels, double-booked seats and bus capacity.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field

from boarding.config import DEFAULT_SEAT_MAP, SeatMap
from boarding.models import Booking

logger = logging.getLogger(__name__)


class ValidationSeverity(str, Enum):
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class ValidationIssue(BaseModel):
    """Single validation issue found during analysis."""

    severity: ValidationSeverity
    type: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
    affected_ids: list[str] = Field(default_factory=list)


class ValidationStatistics(BaseModel):
    """Overall statistics from validation."""

    total_bookings: int = 0
    total_seats: int = 0
    capacity: int = 0
    capacity_utilization_rate: float = 0.0
    invalid_seat_labels: int = 0
    duplicate_seats: int = 0
    empty_bookings: int = 0
    duplicate_booking_ids: int = 0


class BookingValidationResult(BaseModel):
    """Complete validation result with statistics and issues."""

    statistics: ValidationStatistics
    issues: list[ValidationIssue]
    validated_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @property
    def errors(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [issue for issue in self.issues if issue.severity == ValidationSeverity.WARNING]

    @property
    def is_valid(self) -> bool:
        """True when no error-severity issue was found. Warnings do not count."""
        return not self.errors

    def error_messages(self) -> list[str]:
        """Error diagnostics in discovery order, capacity last."""
        return [issue.message for issue in self.errors]


class BookingValidator:
    """Validates a batch of bookings against a seat map and reports issues."""

    def __init__(self, seat_map: SeatMap = DEFAULT_SEAT_MAP) -> None:
        self.seat_map = seat_map

    def validate_batch(self, bookings: Sequence[Booking]) -> BookingValidationResult:
        """
        Validate every booking of one trip in a single pass.

        Seats are checked in booking order, then in the order each booking
        lists them. Issues are recorded in the order they are discovered; the
        capacity issue, if any, is always last. Input is not modified and
        nothing is raised for bad data.

        Args:
            bookings: All bookings for the trip

        Returns:
            BookingValidationResult with statistics and issues
        """
        issues: list[ValidationIssue] = []
        stats = ValidationStatistics(total_bookings=len(bookings), capacity=self.seat_map.capacity)

        seen_seats: set[str] = set()
        id_counts: Counter[str] = Counter()
        total_seats = 0

        for booking in bookings:
            id_counts[booking.booking_id] += 1
            if id_counts[booking.booking_id] == 2:
                stats.duplicate_booking_ids += 1
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.WARNING,
                        type="duplicate_booking_id",
                        message=f"Booking ID {booking.booking_id} appears more than once",
                        details={"booking_id": booking.booking_id},
                        affected_ids=[booking.booking_id],
                    )
                )

            if booking.seat_count == 0:
                stats.empty_bookings += 1
                issues.append(
                    ValidationIssue(
                        severity=ValidationSeverity.WARNING,
                        type="empty_booking",
                        message=f"Booking {booking.booking_id} has no seats",
                        affected_ids=[booking.booking_id],
                    )
                )
                continue

            for seat in booking.seats:
                # A label can be both invalid and a duplicate; report each
                if not self.seat_map.is_valid_label(seat):
                    stats.invalid_seat_labels += 1
                    issues.append(
                        ValidationIssue(
                            severity=ValidationSeverity.ERROR,
                            type="invalid_seat_label",
                            message=f"Invalid seat label: {seat} in Booking {booking.booking_id}",
                            details={"seat": seat, "booking_id": booking.booking_id},
                            affected_ids=[booking.booking_id],
                        )
                    )

                if seat in seen_seats:
                    stats.duplicate_seats += 1
                    issues.append(
                        ValidationIssue(
                            severity=ValidationSeverity.ERROR,
                            type="duplicate_seat",
                            message=f"Duplicate seat: {seat} in Booking {booking.booking_id}",
                            details={"seat": seat, "booking_id": booking.booking_id},
                            affected_ids=[booking.booking_id],
                        )
                    )

                # Malformed labels are tracked too so repeats are still flagged
                seen_seats.add(seat)
                total_seats += 1

        stats.total_seats = total_seats
        if self.seat_map.capacity > 0:
            stats.capacity_utilization_rate = total_seats / self.seat_map.capacity

        if total_seats > self.seat_map.capacity:
            issues.append(
                ValidationIssue(
                    severity=ValidationSeverity.ERROR,
                    type="capacity_exceeded",
                    message=(
                        f"Total seats booked ({total_seats}) exceeds bus capacity ({self.seat_map.capacity})"
                    ),
                    details={"total_seats": total_seats, "capacity": self.seat_map.capacity},
                )
            )

        logger.debug(
            f"Validated {stats.total_bookings} bookings / {total_seats} seats: "
            f"{len([i for i in issues if i.severity == ValidationSeverity.ERROR])} errors, "
            f"{len([i for i in issues if i.severity == ValidationSeverity.WARNING])} warnings"
        )

        return BookingValidationResult(statistics=stats, issues=issues)


def validate_bookings(bookings: Sequence[Booking], seat_map: SeatMap = DEFAULT_SEAT_MAP) -> list[str]:
    """Return the diagnostics for a batch; an empty list means it is valid."""
    return BookingValidator(seat_map).validate_batch(bookings).error_messages()
