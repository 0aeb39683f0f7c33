"""Console display helpers for the CLI."""

from .disc_info import DiscInfoDisplay, format_duration

__all__ = ["DiscInfoDisplay", "format_duration"]
