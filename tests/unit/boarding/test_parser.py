"""Tests for the booking file parser."""

from __future__ import annotations

from boarding.models import Booking
from boarding.parser import parse_booking_file, parse_booking_line, parse_seat_list


class TestParseSeatList:
    """Tests for parse_seat_list."""

    def test_splits_on_commas(self):
        assert parse_seat_list("A1,A2,B3") == ("A1", "A2", "B3")

    def test_trims_and_drops_blank_pieces(self):
        assert parse_seat_list(" A1 ,,A2,") == ("A1", "A2")

    def test_all_blank_gives_empty(self):
        assert parse_seat_list(",,,") == ()


class TestParseBookingLine:
    """Tests for parse_booking_line."""

    def test_basic_line(self):
        booking = parse_booking_line("B1 A1,A2")
        assert booking == Booking(booking_id="B1", seats=("A1", "A2"))

    def test_tab_separator(self):
        booking = parse_booking_line("B7\tC4")
        assert booking is not None
        assert booking.booking_id == "B7"
        assert booking.seats == ("C4",)

    def test_line_without_separator_is_skipped(self):
        assert parse_booking_line("B1") is None

    def test_blank_line_is_skipped(self):
        assert parse_booking_line("   ") is None

    def test_tokens_after_seat_list_are_ignored(self):
        """Only the second token is the seat list; "A2" after a space is dropped."""
        booking = parse_booking_line("B1 A1, A2")
        assert booking is not None
        assert booking.seats == ("A1",)

    def test_malformed_labels_are_kept(self):
        """The parser does not judge seat labels."""
        booking = parse_booking_line("B1 E1,A0,zz")
        assert booking is not None
        assert booking.seats == ("E1", "A0", "zz")

    def test_seat_list_of_only_commas_gives_empty_booking(self):
        booking = parse_booking_line("B1 ,,")
        assert booking is not None
        assert booking.seats == ()


class TestParseBookingFile:
    """Tests for parse_booking_file."""

    def test_round_trip_example(self):
        bookings = parse_booking_file("B1 A1,A2")
        assert bookings == [Booking(booking_id="B1", seats=("A1", "A2"))]

    def test_preserves_line_order(self, sample_booking_text):
        bookings = parse_booking_file(sample_booking_text)
        assert [b.booking_id for b in bookings] == ["B1", "B2", "B3"]
        assert bookings[1].seats == ("C10", "D10")

    def test_outer_whitespace_is_trimmed(self):
        bookings = parse_booking_file("\n\n  B1 A1\nB2 A2\n\n")
        assert [b.booking_id for b in bookings] == ["B1", "B2"]

    def test_blank_and_malformed_lines_skipped(self):
        text = "B1 A1\n\nnoseats\nB2 A2\n"
        bookings = parse_booking_file(text)
        assert [b.booking_id for b in bookings] == ["B1", "B2"]

    def test_windows_line_endings(self):
        bookings = parse_booking_file("B1 A1,A2\r\nB2 B3\r\n")
        assert bookings[0].seats == ("A1", "A2")
        assert bookings[1].seats == ("B3",)

    def test_empty_input(self):
        assert parse_booking_file("") == []
        assert parse_booking_file("   \n\t\n") == []

    def test_never_more_records_than_lines(self):
        text = "B1 A1\nB2\n\nB3 C3,C4\nB4 ,\nx"
        bookings = parse_booking_file(text)
        assert len(bookings) <= len(text.split("\n"))
        assert [b.booking_id for b in bookings] == ["B1", "B3", "B4"]

    def test_duplicate_ids_are_not_rejected(self):
        bookings = parse_booking_file("B1 A1\nB1 A2")
        assert len(bookings) == 2
