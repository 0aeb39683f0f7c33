"""libdiscid platform package.

Where: platform/libdiscid/__init__.py
What: Provide the process-wide native engine, loading libdiscid on first use.
Why: Importing the package must not fail on hosts without libdiscid.
"""

from __future__ import annotations

from discident.features.disc.ports import NativeEngine

from .engine import LibDiscIdEngine
from .loader import ENV_LIBRARY_PATH, LibraryNotFoundError, load_library

_engine: NativeEngine | None = None


def configure_engine(engine: NativeEngine | None) -> None:
    """Install ``engine`` as the process-wide default (``None`` resets it)."""

    global _engine
    _engine = engine


def get_engine() -> NativeEngine:
    """Return the default engine, opening libdiscid when none is configured.

    Raises:
        LibraryNotFoundError: If libdiscid cannot be loaded.
    """

    global _engine
    if _engine is None:
        from discident.config.settings import LIBDISCID_PATH

        _engine = LibDiscIdEngine(load_library(LIBDISCID_PATH))
    return _engine


__all__ = [
    "ENV_LIBRARY_PATH",
    "LibDiscIdEngine",
    "LibraryNotFoundError",
    "configure_engine",
    "get_engine",
    "load_library",
]
