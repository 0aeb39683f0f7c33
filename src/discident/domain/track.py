"""Where: src/discident/domain/track.py
What: Track values plus the lazy view and cursor that produce them.
Why: Per-track data is queried on demand from live disc state, never snapshotted.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Final, Protocol, final

from .errors import TrackOutOfRangeError

SECTORS_PER_SECOND: Final[int] = 75


def sectors_to_seconds(sectors: int) -> int:
    """Convert a sector count to whole seconds (75 sectors per second)."""

    return int(round(sectors / SECTORS_PER_SECOND))


@dataclass(slots=True, frozen=True)
class Track:
    """A single track of a disc."""

    number: int
    offset: int
    sectors: int
    isrc: str = ""

    @property
    def length(self) -> int:
        return self.sectors

    @property
    def seconds(self) -> int:
        return sectors_to_seconds(self.sectors)


class TrackReader(Protocol):
    """Source of live per-track data, keyed by 1-based track number."""

    def first_track_num(self) -> int: ...

    def last_track_num(self) -> int: ...

    def read_track(self, number: int) -> Track: ...


@final
class TrackIterator(Iterator[Track]):
    """Cursor over ``current..last`` that queries each track when reached."""

    def __init__(self, reader: TrackReader) -> None:
        self._reader: TrackReader = reader
        self._current: int = reader.first_track_num()
        self._last: int = reader.last_track_num()

    def __iter__(self) -> TrackIterator:
        return self

    def __next__(self) -> Track:
        number = self._current
        if number > self._last:
            raise StopIteration
        self._current += 1
        return self._reader.read_track(number)

    def __repr__(self) -> str:
        return f"TrackIterator(current={self._current}, last={self._last})"


@final
class TrackView:
    """Restartable view over all tracks of a disc.

    Every ``iter()`` starts a fresh :class:`TrackIterator`. The view keeps
    the underlying disc resource alive for as long as it exists.
    """

    def __init__(self, reader: TrackReader) -> None:
        self._reader: TrackReader = reader

    def __iter__(self) -> TrackIterator:
        return TrackIterator(self._reader)

    def __len__(self) -> int:
        count = self._reader.last_track_num() - self._reader.first_track_num() + 1
        return max(count, 0)

    def nth(self, number: int) -> Track:
        """Return the track with the given number.

        Raises:
            TrackOutOfRangeError: If ``number`` lies outside first..last.
        """

        first = self._reader.first_track_num()
        last = self._reader.last_track_num()
        if number < first or number > last:
            raise TrackOutOfRangeError(number, first, last)
        return self._reader.read_track(number)


__all__ = [
    "SECTORS_PER_SECOND",
    "Track",
    "TrackIterator",
    "TrackReader",
    "TrackView",
    "sectors_to_seconds",
]
