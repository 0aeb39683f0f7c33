"""src/discident/ui/cli/display/disc_info.py
What: Render disc identifiers, TOC and per-track tables for the CLI.
Why: Keep console output formatting consistent across subcommands.
"""

from __future__ import annotations

from typing import final

from rich.console import Console
from rich.table import Table

from discident.domain.features import FeatureSet
from discident.domain.track import sectors_to_seconds
from discident.features.disc import Disc


def format_duration(sectors: int) -> str:
    """Render a sector count as ``m:ss``."""

    minutes, seconds = divmod(sectors_to_seconds(sectors), 60)
    return f"{minutes}:{seconds:02d}"


@final
class DiscInfoDisplay:
    """Handles disc and feature display in the CLI."""

    console: Console

    def __init__(self) -> None:
        self.console = Console()

    def show_disc(self, disc: Disc, *, quiet: bool = False) -> None:
        """Display identifiers, TOC and the track table of ``disc``.

        In quiet mode only the MusicBrainz disc ID is printed.
        """
        if quiet:
            self.console.print(disc.id)
            return

        show_mcn = FeatureSet.MCN in disc.features
        show_isrc = FeatureSet.ISRC in disc.features

        self.console.print(f"[bold]DiscID[/bold]      : {disc.id}")
        self.console.print(f"[bold]FreeDB ID[/bold]   : {disc.freedb_id}")
        self.console.print(f"[bold]TOC[/bold]         : {disc.toc_string}")
        if show_mcn:
            self.console.print(f"[bold]MCN[/bold]         : {disc.mcn}")
        self.console.print(f"[bold]First track[/bold] : {disc.first_track_num}")
        self.console.print(f"[bold]Last track[/bold]  : {disc.last_track_num}")
        self.console.print(
            f"[bold]Sectors[/bold]     : {disc.sectors} ({format_duration(disc.sectors)})"
        )

        table = Table(title="Tracks", show_lines=False)
        table.add_column("#", justify="right", style="cyan")
        table.add_column("Offset", justify="right")
        table.add_column("Sectors", justify="right")
        table.add_column("Length", justify="right", style="green")
        if show_isrc:
            table.add_column("ISRC")

        for track in disc.tracks():
            row = [
                str(track.number),
                str(track.offset),
                str(track.sectors),
                format_duration(track.sectors),
            ]
            if show_isrc:
                row.append(track.isrc)
            table.add_row(*row)

        self.console.print(table)
        self.console.print(f"\nSubmit via {disc.submission_url}")

    def show_features(
        self,
        version: str,
        default_device: str,
        support: dict[str, bool],
        *,
        quiet: bool = False,
    ) -> None:
        """Display the engine version, default drive and feature support."""
        if quiet:
            return

        self.console.print(f"[bold]Version[/bold]        : {version}")
        self.console.print(f"[bold]Default device[/bold] : {default_device}")

        table = Table(title="Features")
        table.add_column("Feature", style="cyan")
        table.add_column("Supported")
        for name, supported in support.items():
            table.add_row(name, "[green]yes[/green]" if supported else "[red]no[/red]")
        self.console.print(table)


__all__ = ["DiscInfoDisplay", "format_duration"]
