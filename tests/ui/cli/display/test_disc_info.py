"""Tests for disc information display."""

from io import StringIO

import pytest
from pytest_mock import MockerFixture
from rich.console import Console
from rich.table import Table

from discident.domain.features import FeatureSet
from discident.features.disc import Disc
from discident.ui.cli.display import DiscInfoDisplay, format_duration
from fakes import TEN_TRACK_OFFSETS, FakeDiscContents, FakeEngine


@pytest.fixture
def recorded_display() -> tuple[DiscInfoDisplay, StringIO]:
    """Create a display writing to an in-memory buffer."""

    buffer = StringIO()
    display = DiscInfoDisplay()
    display.console = Console(file=buffer, width=200)
    return display, buffer


@pytest.mark.parametrize(
    ("sectors", "expected"),
    [(0, "0:00"), (75 * 59, "0:59"), (206535, "45:54"), (18751, "4:10")],
)
def test_format_duration(sectors: int, expected: str) -> None:
    assert format_duration(sectors) == expected


def test_show_disc_prints_identifiers_and_tracks(
    fake_engine: FakeEngine, recorded_display: tuple[DiscInfoDisplay, StringIO]
) -> None:
    _ = fake_engine
    display, buffer = recorded_display
    disc = Disc.put(1, TEN_TRACK_OFFSETS)

    display.show_disc(disc)

    output = buffer.getvalue()
    assert f"DiscID      : {disc.id}" in output
    assert "FreeDB ID   : 830abf0a" in output
    assert "Sectors     : 206535 (45:54)" in output
    assert "MCN" not in output
    assert "ISRC" not in output
    assert "182560" in output
    assert f"Submit via {disc.submission_url}" in output


def test_show_disc_quiet_prints_only_id(
    fake_engine: FakeEngine, recorded_display: tuple[DiscInfoDisplay, StringIO]
) -> None:
    _ = fake_engine
    display, buffer = recorded_display
    disc = Disc.put(1, TEN_TRACK_OFFSETS)

    display.show_disc(disc, quiet=True)

    assert buffer.getvalue() == f"{disc.id}\n"


def test_show_disc_includes_mcn_and_isrc_columns(mocker: MockerFixture) -> None:
    """MCN and ISRC appear only when the disc was read with those features."""

    contents = FakeDiscContents(
        1, TEN_TRACK_OFFSETS, mcn="0602498183893", isrcs={1: "GBUM70704101"}
    )
    engine = FakeEngine(supported=FeatureSet.ALL, drives={"/dev/sr0": contents})
    disc = Disc.read_features("/dev/sr0", FeatureSet.ALL, engine=engine)

    display = DiscInfoDisplay()
    mock_console = mocker.MagicMock(spec=Console)
    display.console = mock_console

    display.show_disc(disc)

    printed = [call.args[0] for call in mock_console.print.call_args_list]
    assert "[bold]MCN[/bold]         : 0602498183893" in printed
    tables = [item for item in printed if isinstance(item, Table)]
    assert len(tables) == 1
    assert [column.header for column in tables[0].columns] == [
        "#",
        "Offset",
        "Sectors",
        "Length",
        "ISRC",
    ]
    assert tables[0].row_count == 10


def test_show_features(recorded_display: tuple[DiscInfoDisplay, StringIO]) -> None:
    display, buffer = recorded_display

    display.show_features(
        "libdiscid 0.6.4",
        "/dev/cdrom",
        {"read": True, "mcn": True, "isrc": False},
    )

    output = buffer.getvalue()
    assert "Version        : libdiscid 0.6.4" in output
    assert "Default device : /dev/cdrom" in output
    assert "isrc" in output and "no" in output


def test_show_features_quiet(recorded_display: tuple[DiscInfoDisplay, StringIO]) -> None:
    display, buffer = recorded_display

    display.show_features("libdiscid 0.6.4", "/dev/cdrom", {"read": True}, quiet=True)

    assert buffer.getvalue() == ""
