"""Checks against the real libdiscid; skipped when the library is not installed."""

from __future__ import annotations

import pytest

from discident.domain.errors import NativeError
from discident.domain.features import FeatureSet
from discident.features.disc.handle import Disc
from discident.features.disc.ports import NativeEngine
from fakes import TEN_TRACK_OFFSETS

pytestmark = pytest.mark.libdiscid


def test_put(libdiscid_engine: NativeEngine) -> None:
    disc = Disc.put(1, TEN_TRACK_OFFSETS, engine=libdiscid_engine)

    assert disc.id == "Wn8eRBtfLDfM0qjYPdxrz.Zjs_U-"
    assert disc.freedb_id == "830abf0a"
    assert disc.first_track_num == 1
    assert disc.last_track_num == 10
    assert disc.sectors == 206535
    assert disc.submission_url.startswith(
        "http://musicbrainz.org/cdtoc/attach?id=Wn8eRBtfLDfM0qjYPdxrz.Zjs_U-&tracks=10"
    )
    assert [track.offset for track in disc.tracks()] == TEN_TRACK_OFFSETS[1:]


def test_put_first_track_not_one(libdiscid_engine: NativeEngine) -> None:
    disc = Disc.put(3, TEN_TRACK_OFFSETS, engine=libdiscid_engine)

    assert disc.first_track_num == 3
    assert disc.last_track_num == 12
    assert disc.sectors == 206535


def test_read_invalid_device(libdiscid_engine: NativeEngine) -> None:
    with pytest.raises(NativeError):
        _ = Disc.read("notadevice", engine=libdiscid_engine)


def test_library_queries(libdiscid_engine: NativeEngine) -> None:
    assert Disc.has_feature(FeatureSet.READ, engine=libdiscid_engine)
    assert Disc.version_string(engine=libdiscid_engine).startswith("libdiscid")
    assert Disc.default_device(engine=libdiscid_engine)
