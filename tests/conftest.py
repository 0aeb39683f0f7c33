"""Shared pytest fixtures: engines and configuration isolation."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from discident.features.disc.ports import NativeEngine
from discident.platform.libdiscid import (
    LibDiscIdEngine,
    LibraryNotFoundError,
    configure_engine,
    load_library,
)
from fakes import FakeEngine


@pytest.fixture
def fake_engine() -> Iterator[FakeEngine]:
    """Install a ``FakeEngine`` as the process-wide default engine."""

    engine = FakeEngine()
    configure_engine(engine)
    try:
        yield engine
    finally:
        configure_engine(None)


@pytest.fixture
def libdiscid_engine() -> NativeEngine:
    """Return an engine backed by the real libdiscid, skipping when unavailable."""

    try:
        library = load_library()
    except LibraryNotFoundError as exc:
        pytest.skip(f"libdiscid not available: {exc}")
    return LibDiscIdEngine(library)


@pytest.fixture
def portable_repo_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Provide a temporary repository root for portable path detection."""

    _ = (tmp_path / "pyproject.toml").write_text("[project]\nname='tmp'\n")

    import discident.config.paths as paths

    def _fake_detect_repo_root(_start: Path | None = None) -> Path:
        return tmp_path

    monkeypatch.setattr(paths, "_detect_repo_root", _fake_detect_repo_root, raising=True)
    monkeypatch.delenv(paths.ENV_CONFIG_FILE, raising=False)
    return tmp_path


@pytest.fixture
def config_runtime_env(portable_repo_root: Path) -> Iterator[Path]:
    """Reset configuration singletons around a test run."""

    import discident.config.config as config_module

    original_instance = config_module.Config._instance  # pyright: ignore[reportPrivateUsage]
    original_loaded_from = config_module.Config._loaded_from  # pyright: ignore[reportPrivateUsage]
    original_config = config_module.config

    config_module.Config._instance = None  # pyright: ignore[reportPrivateUsage]
    config_module.Config._loaded_from = None  # pyright: ignore[reportPrivateUsage]
    config_module.config = config_module.Config.load()

    try:
        yield portable_repo_root
    finally:
        config_module.Config._instance = original_instance  # pyright: ignore[reportPrivateUsage]
        config_module.Config._loaded_from = original_loaded_from  # pyright: ignore[reportPrivateUsage]
        config_module.config = original_config
