"""Errors raised around the boarding pipeline.

Parsing, validation and sequencing never raise; these are for callers that
read input from disk or prefer an exception over inspecting diagnostics.
"""

from __future__ import annotations


class BoardingError(Exception):
    """Base error for this package."""

    def __init__(self, message: str, cause: Exception | None = None):
        super().__init__(message)
        self.message = message
        self.cause = cause

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message


class InputReadError(BoardingError):
    """Raised when the booking file cannot be read."""


class BookingValidationError(BoardingError):
    """Raised on request when a batch has validation diagnostics."""

    def __init__(self, diagnostics: list[str]):
        super().__init__(f"{len(diagnostics)} booking validation error(s)")
        self.diagnostics = list(diagnostics)
