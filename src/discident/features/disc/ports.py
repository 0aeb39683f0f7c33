"""Where: src/discident/features/disc/ports.py
What: Protocol describing the native disc-ID engine consumed by ``Disc``.
Why: Keep the ctypes binding swappable so the disc layer can be exercised without hardware.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

# Opaque handle returned by ``new``; libdiscid hands out a pointer value.
EngineHandle = int


class NativeEngine(Protocol):
    """Handle-based API mirroring libdiscid.

    String getters return already-decoded ``str`` values; an absent value is
    the empty string.
    """

    def new(self) -> EngineHandle | None: ...

    def free(self, handle: EngineHandle) -> None: ...

    def read_sparse(self, handle: EngineHandle, device: str | None, features: int) -> bool: ...

    def put(self, handle: EngineHandle, first: int, last: int, offsets: Sequence[int]) -> bool: ...

    def get_error_msg(self, handle: EngineHandle) -> str: ...

    def get_id(self, handle: EngineHandle) -> str: ...

    def get_freedb_id(self, handle: EngineHandle) -> str: ...

    def get_toc_string(self, handle: EngineHandle) -> str: ...

    def get_submission_url(self, handle: EngineHandle) -> str: ...

    def get_first_track_num(self, handle: EngineHandle) -> int: ...

    def get_last_track_num(self, handle: EngineHandle) -> int: ...

    def get_sectors(self, handle: EngineHandle) -> int: ...

    def get_mcn(self, handle: EngineHandle) -> str: ...

    def get_track_offset(self, handle: EngineHandle, number: int) -> int: ...

    def get_track_length(self, handle: EngineHandle, number: int) -> int: ...

    def get_track_isrc(self, handle: EngineHandle, number: int) -> str: ...

    def get_version_string(self) -> str: ...

    def get_default_device(self) -> str: ...

    def has_feature(self, feature: int) -> bool: ...


__all__ = ["EngineHandle", "NativeEngine"]
