"""Boarding order generation.

Passengers seated furthest from the entry board first so nobody has to squeeze
past people already sitting near the door. A booking's distance is the highest
row among its seats; columns are ignored.

Ties are broken by booking id (plain string order), so the output never
depends on the order bookings arrive in:

    [B2: A5, B1: B5]  ->  1. B1, 2. B2   (both distance 5)
    [B1: A5, B2: A10] ->  1. B2, 2. B1

Seat labels are not validated here. A label without the column+row shape
counts as distance 0, so a booking made only of bad labels boards last.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from functools import lru_cache

from boarding.config import DEFAULT_SEAT_MAP, SeatMap
from boarding.models import BoardingSequenceEntry, Booking

logger = logging.getLogger(__name__)


@lru_cache(maxsize=512)
def seat_distance(seat: str, seat_map: SeatMap = DEFAULT_SEAT_MAP) -> int:
    """Distance of one seat from the entry (its row number).

    Examples:
        seat_distance("A10") -> 10
        seat_distance("D1")  -> 1
        seat_distance("E1")  -> 0   (unknown column)
        seat_distance("A99") -> 99  (shape only, not a real row)
    """
    row = seat_map.row_of(seat)
    return row if row is not None else 0


def booking_distance(booking: Booking, seat_map: SeatMap = DEFAULT_SEAT_MAP) -> int:
    """Furthest row among the booking's seats; 0 for a booking with no seats."""
    return max((seat_distance(seat, seat_map) for seat in booking.seats), default=0)


def boarding_sort_key(booking: Booking, seat_map: SeatMap = DEFAULT_SEAT_MAP) -> tuple[int, str]:
    """Sort key: furthest first, then booking id ascending."""
    return (-booking_distance(booking, seat_map), booking.booking_id)


def generate_boarding_sequence(
    bookings: Sequence[Booking],
    seat_map: SeatMap = DEFAULT_SEAT_MAP,
) -> list[BoardingSequenceEntry]:
    """Order bookings for boarding and number them from 1.

    Every input booking appears exactly once. Never raises.
    """
    ordered = sorted(bookings, key=lambda booking: boarding_sort_key(booking, seat_map))

    sequence = [
        BoardingSequenceEntry(seq=index, booking_id=booking.booking_id)
        for index, booking in enumerate(ordered, start=1)
    ]

    logger.debug(f"Generated boarding sequence for {len(sequence)} bookings")
    return sequence
