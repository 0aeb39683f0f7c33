"""Tests for settings module behavior."""

from __future__ import annotations

import importlib
from collections.abc import Iterator
from pathlib import Path
from types import ModuleType

import pytest

from discident.domain.features import FeatureSet


@pytest.fixture
def reload_settings(config_runtime_env: Path) -> Iterator[ModuleType]:
    """Yield the settings module and restore its original values afterwards."""

    _ = config_runtime_env
    import discident.config.settings as settings

    names = ("LIBDISCID_PATH", "DEFAULT_DEVICE", "DEFAULT_FEATURES")
    original = {name: getattr(settings, name) for name in names}
    try:
        yield settings
    finally:
        for name, value in original.items():
            setattr(settings, name, value)


def test_defaults_read_toc_only(reload_settings: ModuleType) -> None:
    """Default configuration leaves the device to libdiscid and reads the TOC."""

    reloaded = importlib.reload(reload_settings)

    assert reloaded.LIBDISCID_PATH is None
    assert reloaded.DEFAULT_DEVICE is None
    assert reloaded.DEFAULT_FEATURES == FeatureSet.READ


def test_settings_use_config_values(reload_settings: ModuleType) -> None:
    """Settings derive from the loaded configuration."""

    from discident.config import config as config_module

    config_module.config.libdiscid_path = Path("/opt/lib/libdiscid.so.0")
    config_module.config.default_device = "/dev/sr1"
    config_module.config.default_features = ["isrc"]

    reloaded = importlib.reload(reload_settings)

    assert reloaded.LIBDISCID_PATH == Path("/opt/lib/libdiscid.so.0")
    assert reloaded.DEFAULT_DEVICE == "/dev/sr1"
    assert reloaded.DEFAULT_FEATURES == FeatureSet.READ | FeatureSet.ISRC


def test_invalid_default_features_fall_back_to_read(reload_settings: ModuleType) -> None:
    from discident.config import config as config_module

    config_module.config.default_features = ["read", "cdtext"]

    reloaded = importlib.reload(reload_settings)

    assert reloaded.DEFAULT_FEATURES == FeatureSet.READ
