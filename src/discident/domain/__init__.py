"""Disc domain model: features, TOC tables, tracks and errors."""

from __future__ import annotations

from .errors import (
    AllocationError,
    DiscError,
    InvalidOffsetError,
    InvalidTrackRangeError,
    NativeError,
    NotANumberError,
    OffsetCountMismatchError,
    TocError,
    TooFewFieldsError,
    TooManyOffsetsError,
    TrackOutOfRangeError,
)
from .features import FeatureSet
from .toc import OffsetTable
from .track import Track, TrackIterator, TrackReader, TrackView

__all__ = [
    "AllocationError",
    "DiscError",
    "FeatureSet",
    "InvalidOffsetError",
    "InvalidTrackRangeError",
    "NativeError",
    "NotANumberError",
    "OffsetCountMismatchError",
    "OffsetTable",
    "TocError",
    "TooFewFieldsError",
    "TooManyOffsetsError",
    "Track",
    "TrackIterator",
    "TrackReader",
    "TrackOutOfRangeError",
    "TrackView",
]
