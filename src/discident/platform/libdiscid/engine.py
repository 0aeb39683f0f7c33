"""Where: src/discident/platform/libdiscid/engine.py
What: ctypes implementation of the native engine protocol on top of libdiscid.
Why: Isolate C signatures, optional symbols and string decoding from the disc model.
"""

from __future__ import annotations

import ctypes
from collections.abc import Sequence
from ctypes import c_char_p, c_int, c_uint, c_void_p
from typing import Any, Final, final

from discident.domain.features import FeatureSet
from discident.features.disc.ports import EngineHandle

_LEGACY_VERSION_STRING: Final[str] = "libdiscid < 0.4.0"

# Symbols added after the first libdiscid releases.
_OPTIONAL_SIGNATURES: Final[dict[str, tuple[tuple[Any, ...], Any]]] = {
    "discid_read_sparse": ((c_void_p, c_char_p, c_uint), c_int),
    "discid_get_toc_string": ((c_void_p,), c_char_p),
    "discid_get_mcn": ((c_void_p,), c_char_p),
    "discid_get_track_isrc": ((c_void_p, c_int), c_char_p),
    "discid_has_feature": ((c_uint,), c_int),
    "discid_get_version_string": ((), c_char_p),
}

_REQUIRED_SIGNATURES: Final[dict[str, tuple[tuple[Any, ...], Any]]] = {
    "discid_new": ((), c_void_p),
    "discid_free": ((c_void_p,), None),
    "discid_read": ((c_void_p, c_char_p), c_int),
    "discid_put": ((c_void_p, c_int, c_int, c_void_p), c_int),
    "discid_get_error_msg": ((c_void_p,), c_char_p),
    "discid_get_id": ((c_void_p,), c_char_p),
    "discid_get_freedb_id": ((c_void_p,), c_char_p),
    "discid_get_submission_url": ((c_void_p,), c_char_p),
    "discid_get_default_device": ((), c_char_p),
    "discid_get_first_track_num": ((c_void_p,), c_int),
    "discid_get_last_track_num": ((c_void_p,), c_int),
    "discid_get_sectors": ((c_void_p,), c_int),
    "discid_get_track_offset": ((c_void_p, c_int), c_int),
    "discid_get_track_length": ((c_void_p, c_int), c_int),
}


def _decode(value: bytes | None) -> str:
    """Copy an engine-owned C string into a Python ``str``."""

    if value is None:
        return ""
    return value.decode("utf-8", errors="replace")


def _encode(value: str | None) -> bytes | None:
    if value is None:
        return None
    return value.encode("utf-8")


@final
class LibDiscIdEngine:
    """Bind libdiscid functions with explicit argument and result types."""

    def __init__(self, library: ctypes.CDLL) -> None:
        self._lib: ctypes.CDLL = library
        self._optional: dict[str, Any] = {}

        for name, (argtypes, restype) in _REQUIRED_SIGNATURES.items():
            function = getattr(library, name)
            function.argtypes = argtypes
            function.restype = restype

        for name, (argtypes, restype) in _OPTIONAL_SIGNATURES.items():
            try:
                function = getattr(library, name)
            except AttributeError:
                continue
            function.argtypes = argtypes
            function.restype = restype
            self._optional[name] = function

    def supports(self, symbol: str) -> bool:
        """Return whether an optional libdiscid symbol is present."""

        return symbol in self._optional

    def new(self) -> EngineHandle | None:
        return self._lib.discid_new()

    def free(self, handle: EngineHandle) -> None:
        self._lib.discid_free(handle)

    def read_sparse(self, handle: EngineHandle, device: str | None, features: int) -> bool:
        read_sparse = self._optional.get("discid_read_sparse")
        if read_sparse is None:
            return self._lib.discid_read(handle, _encode(device)) == 1
        return read_sparse(handle, _encode(device), features) == 1

    def put(self, handle: EngineHandle, first: int, last: int, offsets: Sequence[int]) -> bool:
        c_offsets = (c_int * len(offsets))(*offsets)
        return self._lib.discid_put(handle, first, last, c_offsets) == 1

    def get_error_msg(self, handle: EngineHandle) -> str:
        return _decode(self._lib.discid_get_error_msg(handle))

    def get_id(self, handle: EngineHandle) -> str:
        return _decode(self._lib.discid_get_id(handle))

    def get_freedb_id(self, handle: EngineHandle) -> str:
        return _decode(self._lib.discid_get_freedb_id(handle))

    def get_toc_string(self, handle: EngineHandle) -> str:
        function = self._optional.get("discid_get_toc_string")
        if function is None:
            return ""
        return _decode(function(handle))

    def get_submission_url(self, handle: EngineHandle) -> str:
        return _decode(self._lib.discid_get_submission_url(handle))

    def get_first_track_num(self, handle: EngineHandle) -> int:
        return int(self._lib.discid_get_first_track_num(handle))

    def get_last_track_num(self, handle: EngineHandle) -> int:
        return int(self._lib.discid_get_last_track_num(handle))

    def get_sectors(self, handle: EngineHandle) -> int:
        return int(self._lib.discid_get_sectors(handle))

    def get_mcn(self, handle: EngineHandle) -> str:
        function = self._optional.get("discid_get_mcn")
        if function is None:
            return ""
        return _decode(function(handle))

    def get_track_offset(self, handle: EngineHandle, number: int) -> int:
        return int(self._lib.discid_get_track_offset(handle, number))

    def get_track_length(self, handle: EngineHandle, number: int) -> int:
        return int(self._lib.discid_get_track_length(handle, number))

    def get_track_isrc(self, handle: EngineHandle, number: int) -> str:
        function = self._optional.get("discid_get_track_isrc")
        if function is None:
            return ""
        return _decode(function(handle, number))

    def get_version_string(self) -> str:
        function = self._optional.get("discid_get_version_string")
        if function is None:
            return _LEGACY_VERSION_STRING
        return _decode(function())

    def get_default_device(self) -> str:
        return _decode(self._lib.discid_get_default_device())

    def has_feature(self, feature: int) -> bool:
        function = self._optional.get("discid_has_feature")
        if function is None:
            # Libraries without the probe only know how to read the TOC.
            return feature == FeatureSet.READ.value
        return function(feature) == 1


__all__ = ["LibDiscIdEngine"]
