"""Booking file parsing.

A booking file holds one booking per line:

    <booking id><whitespace><seat>,<seat>,...

Example:
    B1 A1, A2
    B2 C10

Lines without both an identifier and a seat list are skipped, never rejected.
Seat labels are not checked here.
"""

from __future__ import annotations

import logging

from boarding.models import Booking

logger = logging.getLogger(__name__)


def parse_seat_list(raw: str) -> tuple[str, ...]:
    """Split a comma-separated seat list, dropping blank entries."""
    return tuple(piece.strip() for piece in raw.split(",") if piece.strip())


def parse_booking_line(line: str) -> Booking | None:
    """Parse one line into a Booking, or None if it lacks two tokens.

    Only the first two whitespace-separated tokens are used; anything after
    the seat list is ignored.
    """
    tokens = line.split()
    if len(tokens) < 2:
        return None

    booking_id, seat_list = tokens[0], tokens[1]
    return Booking(booking_id=booking_id, seats=parse_seat_list(seat_list))


def parse_booking_file(text: str) -> list[Booking]:
    """Parse the full content of a booking file.

    Never raises: malformed lines are dropped and produce fewer records.
    """
    lines = text.strip().split("\n")
    bookings: list[Booking] = []
    skipped = 0

    for line in lines:
        booking = parse_booking_line(line)
        if booking is None:
            skipped += 1
            continue
        bookings.append(booking)

    logger.debug(f"Parsed {len(bookings)} bookings from {len(lines)} lines ({skipped} skipped)")
    return bookings
