"""Where: src/discident/domain/errors.py
What: Exception hierarchy shared by native and local TOC failures.
Why: Callers handle engine errors and TOC validation errors through one root type.
"""

from __future__ import annotations


class DiscError(Exception):
    """Base class for every failure reported while building or reading a disc."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason: str = reason

    def __str__(self) -> str:
        return f"DiscError: {self.reason}"


class AllocationError(DiscError):
    """The native engine could not allocate a disc resource."""


class NativeError(DiscError):
    """A read or put call was rejected by the native engine.

    ``reason`` carries the engine's own diagnostic, e.g. device-open errors.
    """


class TocError(DiscError):
    """A TOC failed local validation before reaching the engine."""


class InvalidTrackRangeError(TocError):
    """Track numbers fall outside 1..99 or exceed the 100-slot table."""

    def __init__(self, first: int, last: int) -> None:
        super().__init__(f"Illegal track limits: first {first}, last {last}")
        self.first: int = first
        self.last: int = last


class InvalidOffsetError(TocError):
    """Sector offsets are negative, unordered, or beyond the lead-out."""


class NotANumberError(TocError):
    """A TOC string token is not a decimal integer."""

    def __init__(self, token: str) -> None:
        super().__init__(f"not a number: {token!r}")
        self.token: str = token


class TooFewFieldsError(TocError):
    """A TOC string lacks the first, last and lead-out fields."""

    def __init__(self, count: int) -> None:
        super().__init__(f"TOC string needs at least 3 fields, got {count}")
        self.count: int = count


class TooManyOffsetsError(TocError):
    """A TOC string holds more offsets than its track range or the slot table allows."""

    def __init__(self) -> None:
        super().__init__("TOC string contains too many offsets")


class OffsetCountMismatchError(TocError):
    """The number of track offsets does not match first..last."""

    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected {expected} track offsets, got {actual}")
        self.expected: int = expected
        self.actual: int = actual


class TrackOutOfRangeError(DiscError, IndexError):
    """A track number outside first..last was requested directly.

    This signals a caller bug: the valid bounds are available from the disc.
    """

    def __init__(self, given: int, first: int, last: int) -> None:
        super().__init__(
            f"track number out of bounds: given {given}, expected between {first} and {last}"
        )
        self.given: int = given
        self.first: int = first
        self.last: int = last


__all__ = [
    "AllocationError",
    "DiscError",
    "InvalidOffsetError",
    "InvalidTrackRangeError",
    "NativeError",
    "NotANumberError",
    "OffsetCountMismatchError",
    "TocError",
    "TooFewFieldsError",
    "TooManyOffsetsError",
    "TrackOutOfRangeError",
]
