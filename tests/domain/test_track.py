"""Tests for ``Track``, ``TrackView`` and ``TrackIterator``."""

from __future__ import annotations

import pytest

from discident.domain.errors import TrackOutOfRangeError
from discident.domain.track import Track, TrackIterator, TrackView, sectors_to_seconds


class _TableReader:
    """Track reader over a fixed offsets table that records every lookup."""

    def __init__(self, first: int, offsets: list[int]) -> None:
        self.first = first
        self.offsets = offsets
        self.reads: list[int] = []

    def first_track_num(self) -> int:
        return self.first

    def last_track_num(self) -> int:
        return self.first + len(self.offsets) - 2

    def read_track(self, number: int) -> Track:
        self.reads.append(number)
        index = number - self.first + 1
        offset = self.offsets[index]
        end = self.offsets[index + 1] if index + 1 < len(self.offsets) else self.offsets[0]
        return Track(number=number, offset=offset, sectors=end - offset)


@pytest.mark.parametrize(
    ("sectors", "seconds"),
    [(0, 0), (75, 1), (112, 1), (113, 2), (206385, 2752)],
)
def test_sectors_to_seconds_rounds_to_nearest(sectors: int, seconds: int) -> None:
    assert sectors_to_seconds(sectors) == seconds


def test_track_length_and_seconds() -> None:
    track = Track(number=1, offset=150, sectors=18751, isrc="USRC17607839")

    assert track.length == 18751
    assert track.seconds == 250
    assert track.isrc == "USRC17607839"


def test_view_length_counts_tracks() -> None:
    view = TrackView(_TableReader(3, [5000, 150, 1000, 2500]))

    assert len(view) == 3


def test_view_is_restartable() -> None:
    view = TrackView(_TableReader(1, [5000, 150, 1000, 2500]))

    first_pass = [track.number for track in view]
    second_pass = [track.number for track in view]

    assert first_pass == [1, 2, 3]
    assert second_pass == first_pass


def test_iterator_queries_tracks_lazily() -> None:
    """A track is only read once the cursor reaches it."""

    reader = _TableReader(1, [5000, 150, 1000, 2500])
    iterator = iter(TrackView(reader))

    assert isinstance(iterator, TrackIterator)
    assert reader.reads == []

    track = next(iterator)

    assert track == Track(number=1, offset=150, sectors=850)
    assert reader.reads == [1]


def test_iterator_yields_lengths_up_to_leadout() -> None:
    tracks = list(TrackView(_TableReader(1, [5000, 150, 1000, 2500])))

    assert [track.sectors for track in tracks] == [850, 1500, 2500]


def test_exhausted_iterator_stays_exhausted() -> None:
    iterator = iter(TrackView(_TableReader(1, [5000, 150])))

    _ = next(iterator)

    with pytest.raises(StopIteration):
        _ = next(iterator)
    with pytest.raises(StopIteration):
        _ = next(iterator)


def test_nth_returns_requested_track() -> None:
    view = TrackView(_TableReader(3, [5000, 150, 1000, 2500]))

    assert view.nth(4).offset == 1000


@pytest.mark.parametrize("number", [0, 2, 6, 100])
def test_nth_rejects_numbers_outside_range(number: int) -> None:
    reader = _TableReader(3, [5000, 150, 1000, 2500])

    with pytest.raises(TrackOutOfRangeError) as excinfo:
        _ = TrackView(reader).nth(number)

    assert (excinfo.value.first, excinfo.value.last) == (3, 5)
    assert reader.reads == []
