"""Where: src/discident/platform/logging/handlers.py
What: Rich console handler that renders structured disc events.
Why: Keep console formatting of read/put outcomes out of the disc layer.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.style import Style
from rich.text import Text


class DiscEventRichHandler(RichHandler):
    """Rich handler with dedicated styling for ``disc_event`` records."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "disc.read.start": ("💿", "blue"),
        "disc.read.success": ("✅", "green"),
        "disc.read.error": ("❌", "red"),
        "disc.put.success": ("🧮", "cyan"),
        "disc.put.error": ("⛔", "red"),
    }
    _EVENT_LABELS: ClassVar[dict[str, str]] = {
        "disc.read.start": "Reading disc",
        "disc.read.success": "Read disc",
        "disc.read.error": "Read failed",
        "disc.put.success": "Computed disc",
        "disc.put.error": "TOC rejected",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        kwargs["omit_repeated_times"] = False
        super().__init__(*args, **kwargs)

    def _render_disc_event(self, record: logging.LogRecord) -> Text | None:
        """Render a disc event record, or return ``None`` for plain records."""

        event = getattr(record, "disc_event", None)
        if not isinstance(event, str):
            return None

        icon, color = self._EVENT_STYLES.get(event, ("ℹ️", "blue"))
        text = Text()
        _ = text.append(f"{icon} ", style=Style(color=color, bold=True))

        body = Text(style=Style(color=color))
        _ = body.append(self._EVENT_LABELS.get(event, event))

        disc_id = getattr(record, "disc_id", None)
        if disc_id:
            _ = body.append(" ")
            _ = body.append(str(disc_id), style=Style(color="white", bold=True))

        device = getattr(record, "device", None)
        if event.startswith("disc.read"):
            _ = body.append(" @ ")
            _ = body.append(str(device) if device else "default device", style=Style(color="white"))

        details: list[str] = []
        tracks = getattr(record, "tracks", None)
        if isinstance(tracks, int):
            details.append(f"tracks={tracks}")
        error_message = getattr(record, "error_message", None)
        if error_message:
            details.append(str(error_message))
        if details:
            _ = body.append(" (" + ", ".join(details) + ")")

        _ = text.append_text(body)
        return text

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        """Render disc events with icons, falling back to Rich defaults."""

        event_text = self._render_disc_event(record)
        if event_text is not None:
            return event_text
        return super().render_message(record, message)


__all__ = ["DiscEventRichHandler"]
