"""Where: src/discident/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose validated constants to the disc and platform layers without file I/O.
Trade-offs: - Invalid feature names fall back to reading the TOC only.
"""

from __future__ import annotations

from pathlib import Path

from discident.config.config import config as app_config
from discident.domain.features import FeatureSet
from discident.platform.logging import logger

# libdiscid location ----------------------------------------------------------

LIBDISCID_PATH: Path | None = app_config.libdiscid_path


# Drive defaults --------------------------------------------------------------

# ``None`` lets libdiscid pick the platform default drive.
DEFAULT_DEVICE: str | None = app_config.default_device


def _default_features(names: list[str]) -> FeatureSet:
    try:
        return FeatureSet.from_names(names) | FeatureSet.READ
    except ValueError as exc:
        logger.warning("Invalid default_features in configuration: %s", exc)
        return FeatureSet.READ


DEFAULT_FEATURES: FeatureSet = _default_features(list(app_config.default_features or []))


__all__ = [
    "DEFAULT_DEVICE",
    "DEFAULT_FEATURES",
    "LIBDISCID_PATH",
]
