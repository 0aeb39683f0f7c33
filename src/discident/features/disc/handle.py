"""Where: src/discident/features/disc/handle.py
What: Disc objects owning one native engine resource and exposing its data.
Why: Tie the lifetime of the native handle to Python references so it is freed exactly once.

A :class:`Disc` is created by reading a drive (``read``/``read_features``)
or from a known TOC (``put``/``parse``/``from_offset_table``). All
attributes are queried from the engine on access; nothing is cached.
"""

from __future__ import annotations

import weakref
from collections.abc import Sequence
from typing import final

from discident.config.settings import DEFAULT_DEVICE
from discident.domain.errors import AllocationError, NativeError
from discident.domain.features import FeatureSet
from discident.domain.toc import OffsetTable
from discident.domain.track import Track, TrackView, sectors_to_seconds
from discident.platform.libdiscid import get_engine
from discident.platform.logging import logger

from .ports import EngineHandle, NativeEngine


def _resolve_engine(engine: NativeEngine | None) -> NativeEngine:
    return engine if engine is not None else get_engine()


@final
class _NativeResource:
    """Owner of a single engine handle shared by a disc and its track views.

    The handle is released through ``weakref.finalize`` once the last
    reference to this object disappears.
    """

    def __init__(self, engine: NativeEngine) -> None:
        handle = engine.new()
        if not handle:
            raise AllocationError("discid_new() failed, could not allocate memory")
        self.engine: NativeEngine = engine
        self.handle: EngineHandle = handle
        self._finalizer: weakref.finalize = weakref.finalize(self, engine.free, handle)

    @property
    def released(self) -> bool:
        return not self._finalizer.alive

    def error(self) -> NativeError:
        return NativeError(self.engine.get_error_msg(self.handle))

    def first_track_num(self) -> int:
        return self.engine.get_first_track_num(self.handle)

    def last_track_num(self) -> int:
        return self.engine.get_last_track_num(self.handle)

    def read_track(self, number: int) -> Track:
        return Track(
            number=number,
            offset=self.engine.get_track_offset(self.handle, number),
            sectors=self.engine.get_track_length(self.handle, number),
            isrc=self.engine.get_track_isrc(self.handle, number),
        )


@final
class Disc:
    """Information about a disc: identifiers, TOC, MCN and ISRCs.

    Use :meth:`read`, :meth:`read_features`, :meth:`put`, :meth:`parse` or
    :meth:`from_offset_table` to obtain an instance.
    """

    def __init__(self, resource: _NativeResource, features: FeatureSet) -> None:
        self._resource: _NativeResource = resource
        self._features: FeatureSet = features

    # Construction --------------------------------------------------------

    @classmethod
    def read(cls, device: str | None = None, *, engine: NativeEngine | None = None) -> Disc:
        """Read only the TOC from ``device`` (``None`` selects the default drive).

        Raises:
            NativeError: If the disc could not be read.
        """

        return cls.read_features(device, FeatureSet.READ, engine=engine)

    @classmethod
    def read_features(
        cls,
        device: str | None = None,
        features: FeatureSet = FeatureSet.READ,
        *,
        engine: NativeEngine | None = None,
    ) -> Disc:
        """Read the TOC plus any requested MCN/ISRC data from ``device``.

        ``READ`` is always implied. Features the platform does not support are
        ignored; only a failure to read the disc at all raises.

        Raises:
            AllocationError: If the engine could not allocate a handle.
            NativeError: If the disc could not be read.
        """

        native = _resolve_engine(engine)
        requested = features | FeatureSet.READ
        target = device if device is not None else DEFAULT_DEVICE
        supported = FeatureSet(0)
        for feature in requested:
            if native.has_feature(feature.value):
                supported |= feature

        logger.debug(
            "Reading disc from %s (features=%s)",
            target or "default device",
            ",".join(requested.names()),
            extra={"disc_event": "disc.read.start", "device": target},
        )

        resource = _NativeResource(native)
        if not native.read_sparse(resource.handle, target, requested.value):
            error = resource.error()
            logger.warning(
                "Reading disc failed: %s",
                error.reason,
                extra={
                    "disc_event": "disc.read.error",
                    "device": target,
                    "error_message": error.reason,
                },
            )
            raise error

        disc = cls(resource, supported | FeatureSet.READ)
        logger.info(
            "Read disc %s",
            disc.id,
            extra={
                "disc_event": "disc.read.success",
                "device": target,
                "disc_id": disc.id,
                "tracks": len(disc.tracks()),
            },
        )
        return disc

    @classmethod
    def from_offset_table(cls, table: OffsetTable, *, engine: NativeEngine | None = None) -> Disc:
        """Submit a validated TOC to the engine without touching any drive.

        Raises:
            AllocationError: If the engine could not allocate a handle.
            NativeError: If the engine rejected the TOC.
        """

        native = _resolve_engine(engine)
        resource = _NativeResource(native)
        if not native.put(resource.handle, table.first_track, table.last_track, table.native_slots()):
            error = resource.error()
            logger.warning(
                "Setting TOC %s failed: %s",
                table,
                error.reason,
                extra={"disc_event": "disc.put.error", "error_message": error.reason},
            )
            raise error

        disc = cls(resource, FeatureSet.READ)
        logger.debug(
            "Computed disc %s from TOC %s",
            disc.id,
            table,
            extra={
                "disc_event": "disc.put.success",
                "disc_id": disc.id,
                "tracks": table.track_count,
            },
        )
        return disc

    @classmethod
    def put(cls, first: int, offsets: Sequence[int], *, engine: NativeEngine | None = None) -> Disc:
        """Create a disc from ``first`` and ``[total_sectors, offset_first, ...]``.

        Raises:
            TocError: If the offsets do not form a valid TOC.
            NativeError: If the engine rejected the TOC.
        """

        return cls.from_offset_table(OffsetTable.from_offsets(first, offsets), engine=engine)

    @classmethod
    def parse(cls, toc: str, *, engine: NativeEngine | None = None) -> Disc:
        """Create a disc from a TOC string such as ``"1 1 44942 150"``.

        Raises:
            TocError: If the string is not a valid TOC.
            NativeError: If the engine rejected the TOC.
        """

        return cls.from_offset_table(OffsetTable.parse(toc), engine=engine)

    # Library-level queries -----------------------------------------------

    @staticmethod
    def has_feature(feature: FeatureSet, *, engine: NativeEngine | None = None) -> bool:
        """Return whether every feature in ``feature`` is available on this platform.

        An empty set names no feature and is never available.
        """

        if not feature:
            return False
        native = _resolve_engine(engine)
        return all(native.has_feature(member.value) for member in feature)

    @staticmethod
    def version_string(*, engine: NativeEngine | None = None) -> str:
        """Version of the loaded engine, e.g. ``"libdiscid 0.6.4"``."""

        return _resolve_engine(engine).get_version_string()

    @staticmethod
    def default_device(*, engine: NativeEngine | None = None) -> str:
        """Platform default drive, e.g. ``/dev/cdrom`` on Linux."""

        return _resolve_engine(engine).get_default_device()

    # Disc-level accessors ------------------------------------------------

    @property
    def id(self) -> str:
        """The MusicBrainz disc ID."""
        return self._resource.engine.get_id(self._resource.handle)

    @property
    def freedb_id(self) -> str:
        """The FreeDB disc ID (without category)."""
        return self._resource.engine.get_freedb_id(self._resource.handle)

    @property
    def toc_string(self) -> str:
        """TOC as ``"first last leadout offset..."``, suitable for web service lookups."""
        return self._resource.engine.get_toc_string(self._resource.handle)

    @property
    def submission_url(self) -> str:
        """URL for submitting this disc ID to MusicBrainz."""
        return self._resource.engine.get_submission_url(self._resource.handle)

    @property
    def first_track_num(self) -> int:
        return self._resource.first_track_num()

    @property
    def last_track_num(self) -> int:
        return self._resource.last_track_num()

    @property
    def sectors(self) -> int:
        """Total length in sectors (the lead-out offset)."""
        return self._resource.engine.get_sectors(self._resource.handle)

    @property
    def seconds(self) -> int:
        return sectors_to_seconds(self.sectors)

    @property
    def mcn(self) -> str:
        """Media Catalogue Number, empty unless read with ``FeatureSet.MCN``."""
        return self._resource.engine.get_mcn(self._resource.handle)

    @property
    def features(self) -> FeatureSet:
        """Features requested for this disc that the platform supports."""
        return self._features

    # Per-track accessors -------------------------------------------------

    def track_offset(self, number: int) -> int:
        return self._resource.engine.get_track_offset(self._resource.handle, number)

    def track_length(self, number: int) -> int:
        return self._resource.engine.get_track_length(self._resource.handle, number)

    def track_isrc(self, number: int) -> str:
        return self._resource.engine.get_track_isrc(self._resource.handle, number)

    def tracks(self) -> TrackView:
        """Return a lazy, restartable view over every track of this disc."""

        return TrackView(self._resource)

    def nth_track(self, number: int) -> Track:
        """Return the track ``number``, which must lie in first..last.

        Raises:
            TrackOutOfRangeError: If ``number`` is out of bounds.
        """

        return self.tracks().nth(number)

    def __repr__(self) -> str:
        return f"Disc {self.toc_string}"

    def __str__(self) -> str:
        return self.id


read = Disc.read
read_features = Disc.read_features
put = Disc.put
parse = Disc.parse
from_offset_table = Disc.from_offset_table


__all__ = ["Disc", "from_offset_table", "parse", "put", "read", "read_features"]
