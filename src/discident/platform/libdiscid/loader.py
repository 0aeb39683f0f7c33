"""Where: src/discident/platform/libdiscid/loader.py
What: Locate and open the libdiscid shared library.
Why: Library discovery differs per platform and may be overridden by the user.
"""

from __future__ import annotations

import ctypes
import ctypes.util
import os
import sys
from collections.abc import Mapping
from pathlib import Path
from typing import Final

from discident.platform.logging import logger

ENV_LIBRARY_PATH: Final[str] = "DISCIDENT_LIBDISCID"
_LIBRARY_NAME: Final[str] = "discid"
_LIBRARY_VERSION: Final[int] = 0


class LibraryNotFoundError(OSError):
    """Raised when no candidate for libdiscid could be loaded."""

    def __init__(self, attempts: list[tuple[str, str]]) -> None:
        tried = "; ".join(f"{name} ({reason})" for name, reason in attempts)
        super().__init__(f"libdiscid could not be loaded, tried: {tried or 'nothing'}")
        self.attempts: list[tuple[str, str]] = attempts


def platform_library_names(platform: str | None = None) -> list[str]:
    """Return the conventional file names of libdiscid for ``platform``."""

    current = platform or sys.platform
    if current == "darwin":
        return [f"lib{_LIBRARY_NAME}.{_LIBRARY_VERSION}.dylib"]
    if current in {"win32", "cygwin"}:
        return [f"{_LIBRARY_NAME}.dll", f"lib{_LIBRARY_NAME}-{_LIBRARY_VERSION}.dll"]
    return [f"lib{_LIBRARY_NAME}.so.{_LIBRARY_VERSION}"]


def candidate_names(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> list[str]:
    """List library names to try, most specific first.

    Order: explicit path, ``DISCIDENT_LIBDISCID``, ``find_library`` result,
    then the platform's conventional names.
    """

    mapping = env if env is not None else os.environ
    candidates: list[str] = []

    if explicit_path is not None and str(explicit_path).strip():
        candidates.append(str(Path(explicit_path).expanduser()))

    env_path = (mapping.get(ENV_LIBRARY_PATH) or "").strip()
    if env_path:
        candidates.append(str(Path(env_path).expanduser()))

    found = ctypes.util.find_library(_LIBRARY_NAME)
    if found:
        candidates.append(found)

    candidates.extend(platform_library_names())

    unique: list[str] = []
    for name in candidates:
        if name not in unique:
            unique.append(name)
    return unique


def load_library(
    explicit_path: Path | str | None = None,
    env: Mapping[str, str] | None = None,
) -> ctypes.CDLL:
    """Open the first loadable libdiscid candidate.

    Raises:
        LibraryNotFoundError: If every candidate fails to load.
    """

    attempts: list[tuple[str, str]] = []
    for name in candidate_names(explicit_path, env):
        try:
            library = ctypes.CDLL(name)
        except OSError as exc:
            attempts.append((name, str(exc)))
            continue
        logger.debug("Loaded libdiscid from %s", name)
        return library

    error = LibraryNotFoundError(attempts)
    logger.warning("%s", error)
    raise error


__all__ = [
    "ENV_LIBRARY_PATH",
    "LibraryNotFoundError",
    "candidate_names",
    "load_library",
    "platform_library_names",
]
