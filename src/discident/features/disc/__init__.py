"""Disc feature package.

Where: features/disc/__init__.py
What: Re-export the disc handle, its constructors and the engine protocol.
Why: Offer one import path for callers that compute disc IDs.
"""

from __future__ import annotations

from .handle import Disc, from_offset_table, parse, put, read, read_features
from .ports import EngineHandle, NativeEngine

__all__ = [
    "Disc",
    "EngineHandle",
    "NativeEngine",
    "from_offset_table",
    "parse",
    "put",
    "read",
    "read_features",
]
