"""Validation errors raised by the domain layer.

Every error is a ``ValueError`` carrying a stable ``code`` so the service
layer can translate it into a ``ServiceError`` without string matching.
DST gaps and overlaps are deliberately absent: they never raise.
"""

from __future__ import annotations


class CivilTimeError(ValueError):
    """Base class for all validation-kind failures in the core."""

    code = "INVALID_INPUT"

    def __init__(self, message: str, *, value: object = None) -> None:
        super().__init__(message)
        self.value = value


class InvalidZoneError(CivilTimeError):
    """Zone name is empty or unknown to the timezone database."""

    code = "INVALID_ZONE"


class InvalidDateError(CivilTimeError):
    """Malformed or out-of-range ``YYYY-MM-DD`` value."""

    code = "INVALID_DATE"


class InvalidTimeError(CivilTimeError):
    """Malformed or out-of-range ``HH:MM`` value."""

    code = "INVALID_TIME"


class InvalidInstantError(CivilTimeError):
    """Malformed timestamp, or one without an explicit UTC offset."""

    code = "INVALID_INSTANT"


class InvalidRangeError(CivilTimeError):
    """Unknown reporting window, or a begin date after the end date."""

    code = "INVALID_RANGE"
