"""Compute MusicBrainz and FreeDB disc IDs for audio CDs.

The disc ID is calculated by libdiscid from the table of contents (TOC),
which may come from a drive (:func:`read`, :func:`read_features`), from an
offsets array (:func:`put`) or from a TOC string (:func:`parse`).

Importing this package does not load libdiscid; the library is opened on
first use and :exc:`LibraryNotFoundError` is raised if it is missing.
"""

from __future__ import annotations

from discident.domain import (
    AllocationError,
    DiscError,
    FeatureSet,
    InvalidOffsetError,
    InvalidTrackRangeError,
    NativeError,
    NotANumberError,
    OffsetCountMismatchError,
    OffsetTable,
    TocError,
    TooFewFieldsError,
    TooManyOffsetsError,
    Track,
    TrackIterator,
    TrackOutOfRangeError,
    TrackView,
)
from discident.features.disc import (
    Disc,
    NativeEngine,
    from_offset_table,
    parse,
    put,
    read,
    read_features,
)
from discident.platform.libdiscid import LibraryNotFoundError, configure_engine, get_engine

__version__ = "0.1.0"

__all__ = [
    "AllocationError",
    "Disc",
    "DiscError",
    "FeatureSet",
    "InvalidOffsetError",
    "InvalidTrackRangeError",
    "LibraryNotFoundError",
    "NativeEngine",
    "NativeError",
    "NotANumberError",
    "OffsetCountMismatchError",
    "OffsetTable",
    "TocError",
    "TooFewFieldsError",
    "TooManyOffsetsError",
    "Track",
    "TrackIterator",
    "TrackOutOfRangeError",
    "TrackView",
    "configure_engine",
    "from_offset_table",
    "get_engine",
    "parse",
    "put",
    "read",
    "read_features",
]
