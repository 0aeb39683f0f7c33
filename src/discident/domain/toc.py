"""Where: src/discident/domain/toc.py
What: Validated table of contents built from an offsets array or a TOC string.
Why: Only internally consistent TOCs may be handed to the native engine.

The offsets layout mirrors libdiscid: slot 0 holds the lead-out (total
sectors), slots ``first_track..last_track`` hold the track start offsets.
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from .errors import (
    InvalidOffsetError,
    InvalidTrackRangeError,
    NotANumberError,
    OffsetCountMismatchError,
    TooFewFieldsError,
    TooManyOffsetsError,
)

MIN_TRACK: Final[int] = 1
MAX_TRACK: Final[int] = 99
SLOT_COUNT: Final[int] = MAX_TRACK + 1

# Sector values are handed to libdiscid as C ints.
MAX_SECTORS: Final[int] = 2**31 - 1
MIN_SECTORS: Final[int] = -(2**31)

_DECIMAL_TOKEN: Final = re.compile(r"[+-]?[0-9]+")

# Token positions in a TOC string.
_FIRST_FIELD: Final[int] = 0
_LAST_FIELD: Final[int] = 1
_LEADOUT_FIELD: Final[int] = 2
_HEADER_FIELDS: Final[int] = 3


@dataclass(slots=True, frozen=True)
class OffsetTable:
    """Immutable TOC: track range, lead-out and per-track start sectors."""

    first_track: int
    last_track: int
    total_sectors: int
    track_offsets: tuple[int, ...]

    @classmethod
    def from_offsets(cls, first_track: int, offsets: Sequence[int]) -> OffsetTable:
        """Build a table from ``[total_sectors, offset_first, ..., offset_last]``.

        Args:
            first_track: Number of the first track (1-99).
            offsets: Lead-out followed by the start offset of every track.

        Raises:
            InvalidTrackRangeError: If the track span does not fit 1..99 or the
                100-slot table.
            InvalidOffsetError: If the sector values are inconsistent.
        """

        last_track = first_track + len(offsets) - 2
        if (
            first_track < MIN_TRACK
            or last_track < first_track
            or last_track > MAX_TRACK
            or len(offsets) > SLOT_COUNT
        ):
            raise InvalidTrackRangeError(first_track, last_track)

        total_sectors = int(offsets[0])
        track_offsets = tuple(int(value) for value in offsets[1:])
        _validate_offsets(total_sectors, track_offsets)

        return cls(
            first_track=first_track,
            last_track=last_track,
            total_sectors=total_sectors,
            track_offsets=track_offsets,
        )

    @classmethod
    def parse(cls, toc: str) -> OffsetTable:
        """Parse ``"first last leadout offset_first ... offset_last"``.

        Every track offset, the first track's included, is an explicit token.

        Raises:
            NotANumberError: On the first token that is not a plain ASCII
                decimal integer within the C ``int`` range.
            TooManyOffsetsError: If more offsets follow than the range allows.
            TooFewFieldsError: If first, last and lead-out are not all present.
            OffsetCountMismatchError: If the offset count differs from the range.
        """

        first_track = 0
        last_track = 0
        offsets: list[int] = []
        count = 0

        for index, token in enumerate(toc.split(" ")):
            if _DECIMAL_TOKEN.fullmatch(token) is None:
                raise NotANumberError(token)
            value = int(token)
            if not MIN_SECTORS <= value <= MAX_SECTORS:
                raise NotANumberError(token)

            if index == _FIRST_FIELD:
                first_track = value
            elif index == _LAST_FIELD:
                last_track = value
            elif index == _LEADOUT_FIELD:
                offsets.append(value)
            else:
                if index > last_track + 2 or index > SLOT_COUNT + 1:
                    raise TooManyOffsetsError()
                # Slot index is ``index - 2``: lead-out at 0, tracks from 1.
                offsets.append(value)
            count = index + 1

        if count < _HEADER_FIELDS:
            raise TooFewFieldsError(count)

        expected = last_track - first_track + 1
        actual = len(offsets) - 1
        if actual != expected:
            raise OffsetCountMismatchError(expected, actual)

        return cls.from_offsets(first_track, offsets)

    @property
    def track_count(self) -> int:
        return self.last_track - self.first_track + 1

    def offsets(self) -> list[int]:
        """Return ``[total_sectors, *track_offsets]`` as accepted by ``from_offsets``."""

        return [self.total_sectors, *self.track_offsets]

    def native_slots(self) -> list[int]:
        """Return the offsets array expected by ``discid_put``.

        Tracks starting at 1 already line up with their slots, so the dense
        array is used as is. Otherwise a zero-filled 100-slot table is built
        with the track offsets placed at ``first_track..last_track``.
        """

        if self.first_track == MIN_TRACK:
            return self.offsets()

        slots = [0] * SLOT_COUNT
        slots[0] = self.total_sectors
        slots[self.first_track : self.last_track + 1] = self.track_offsets
        return slots

    def to_toc_string(self) -> str:
        """Serialize in libdiscid's TOC string format."""

        fields = [self.first_track, self.last_track, self.total_sectors, *self.track_offsets]
        return " ".join(str(value) for value in fields)

    def __str__(self) -> str:
        return self.to_toc_string()


def _validate_offsets(total_sectors: int, track_offsets: tuple[int, ...]) -> None:
    """Check the lead-out and the ordering of track offsets."""

    if total_sectors <= 0:
        raise InvalidOffsetError(f"Illegal leadout offset: {total_sectors}")
    if total_sectors > MAX_SECTORS:
        raise InvalidOffsetError(
            f"Leadout offset {total_sectors} exceeds the maximum of {MAX_SECTORS}"
        )

    previous = -1
    for position, offset in enumerate(track_offsets):
        if offset < 0:
            raise InvalidOffsetError(f"Illegal track offset at position {position}: {offset}")
        if offset <= previous:
            raise InvalidOffsetError(
                f"Track offsets must be strictly increasing: {offset} follows {previous}"
            )
        if offset >= total_sectors:
            raise InvalidOffsetError(
                f"Track offset {offset} is not below the leadout offset {total_sectors}"
            )
        previous = offset


__all__ = ["MAX_SECTORS", "MAX_TRACK", "MIN_TRACK", "OffsetTable", "SLOT_COUNT"]
