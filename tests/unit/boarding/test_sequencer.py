"""Tests for boarding sequence generation.

Furthest row boards first; ties go to the lower booking id.
"""

from __future__ import annotations

from collections import Counter

from boarding.config import SeatMap
from boarding.models import BoardingSequenceEntry, Booking
from boarding.sequencer import (
    boarding_sort_key,
    booking_distance,
    generate_boarding_sequence,
    seat_distance,
)


def booking(booking_id: str, *seats: str) -> Booking:
    return Booking(booking_id=booking_id, seats=seats)


def ids(sequence: list[BoardingSequenceEntry]) -> list[str]:
    return [entry.booking_id for entry in sequence]


class TestSeatDistance:
    """Tests for seat_distance."""

    def test_row_is_distance(self):
        assert seat_distance("A1") == 1
        assert seat_distance("C10") == 10
        assert seat_distance("D20") == 20

    def test_column_is_ignored(self):
        assert seat_distance("A7") == seat_distance("D7")

    def test_unknown_shape_is_zero(self):
        assert seat_distance("E1") == 0
        assert seat_distance("a5") == 0
        assert seat_distance("A") == 0
        assert seat_distance("A100") == 0
        assert seat_distance("") == 0

    def test_shape_only_not_validity(self):
        """Out-of-range and zero-padded rows still yield their number."""
        assert seat_distance("A99") == 99
        assert seat_distance("A05") == 5
        assert seat_distance("A0") == 0

    def test_non_ascii_digits_are_zero(self):
        assert seat_distance("A٩") == 0
        assert seat_distance("A1０") == 0
        assert booking_distance(booking("B1", "D١٩", "A2")) == 2

    def test_respects_seat_map_columns(self):
        wide = SeatMap.from_values(columns="ABCDEF", rows=20)
        assert seat_distance("E3", wide) == 3
        assert seat_distance("E3") == 0


class TestBookingDistance:
    """Tests for booking_distance."""

    def test_max_row(self):
        assert booking_distance(booking("B1", "A2", "C14", "B9")) == 14

    def test_empty_booking_is_zero(self):
        assert booking_distance(booking("B1")) == 0

    def test_malformed_seats_do_not_increase_distance(self):
        assert booking_distance(booking("B1", "E19", "A3")) == 3
        assert booking_distance(booking("B1", "E19", "zz")) == 0

    def test_sort_key(self):
        assert boarding_sort_key(booking("B7", "A5")) == (-5, "B7")


class TestGenerateBoardingSequence:
    """Tests for generate_boarding_sequence."""

    def test_further_back_boards_first(self):
        sequence = generate_boarding_sequence([booking("B1", "A5"), booking("B2", "A10")])
        assert sequence == [
            BoardingSequenceEntry(seq=1, booking_id="B2"),
            BoardingSequenceEntry(seq=2, booking_id="B1"),
        ]

    def test_tie_broken_by_booking_id(self):
        sequence = generate_boarding_sequence([booking("B2", "A5"), booking("B1", "B5")])
        assert sequence == [
            BoardingSequenceEntry(seq=1, booking_id="B1"),
            BoardingSequenceEntry(seq=2, booking_id="B2"),
        ]

    def test_tie_break_is_plain_string_order(self):
        """"B10" sorts before "B2" as a string."""
        sequence = generate_boarding_sequence([booking("B2", "A5"), booking("B10", "C5")])
        assert ids(sequence) == ["B10", "B2"]

    def test_independent_of_input_order(self):
        bookings = [
            booking("B3", "A1"),
            booking("B1", "D20"),
            booking("B4", "B12", "C3"),
            booking("B2", "A12"),
        ]
        expected = ["B1", "B2", "B4", "B3"]
        assert ids(generate_boarding_sequence(bookings)) == expected
        assert ids(generate_boarding_sequence(list(reversed(bookings)))) == expected

    def test_ranks_are_one_based_and_contiguous(self):
        bookings = [booking(f"B{i}", f"A{i}") for i in range(1, 8)]
        sequence = generate_boarding_sequence(bookings)
        assert [entry.seq for entry in sequence] == list(range(1, 8))

    def test_every_booking_appears_once(self):
        bookings = [
            booking("B1", "A3"),
            booking("B2"),
            booking("B3", "nonsense"),
            booking("B1", "C9"),
        ]
        sequence = generate_boarding_sequence(bookings)
        assert len(sequence) == len(bookings)
        assert Counter(ids(sequence)) == Counter(b.booking_id for b in bookings)

    def test_empty_and_malformed_bookings_board_last(self):
        bookings = [booking("B9", "E1"), booking("B1"), booking("B5", "A2")]
        assert ids(generate_boarding_sequence(bookings)) == ["B5", "B1", "B9"]

    def test_empty_input(self):
        assert generate_boarding_sequence([]) == []

    def test_does_not_mutate_input(self):
        bookings = [booking("B1", "A1"), booking("B2", "A2")]
        generate_boarding_sequence(bookings)
        assert [b.booking_id for b in bookings] == ["B1", "B2"]
