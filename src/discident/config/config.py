"""Configuration management for discident."""

from __future__ import annotations

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from discident.config.paths import default_config_path
from discident.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a dataclass field whose string values are converted to ``Path``."""
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Log file used by the command line (optional)
    log_file: Path | None = _path_field()

    # Explicit location of the libdiscid shared library (optional)
    libdiscid_path: Path | None = _path_field()

    # Drive read when no device is given (optional, engine default otherwise)
    default_device: str | None = None

    # Features requested by ``discident read`` when no flag is given
    default_features: list[str] = field(default_factory=lambda: ["read"])

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""
        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)
        if isinstance(self.default_device, str) and not self.default_device.strip():
            self.default_device = None

    def save(self, path: Path | None = None) -> Path:
        """Save configuration as commented TOML and return the written path."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        target = path or default_config_path()
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            _ = target.write_text(self._render_toml(config_dict), encoding="utf-8")
        except OSError as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        logger.info("Configuration saved to %s", target)
        return target

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = ["# discident configuration file", ""]

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/discident.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Location of the libdiscid shared library (optional)")
        lines.append("# Overridden by the DISCIDENT_LIBDISCID environment variable")
        if config["libdiscid_path"] is not None:
            lines.append(f"libdiscid_path = {self._format_toml_value(config['libdiscid_path'])}")
        lines.append("")

        lines.append("# Drive to read when none is given (optional)")
        lines.append('# Example: default_device = "/dev/sr0"')
        if config["default_device"] is not None:
            lines.append(f"default_device = {self._format_toml_value(config['default_device'])}")
        lines.append("")

        lines.append("# Features to read by default: read, mcn, isrc")
        lines.append(f"default_features = {self._format_toml_value(config['default_features'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
            return f'"{escaped}"'
        if isinstance(value, list):
            return "[" + ", ".join(self._format_toml_value(item) for item in value) + "]"
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file, returning defaults when it is absent.

        The result is cached; pass ``path`` to bypass the cache.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()

        if config_file.exists():
            try:
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.error("Failed to load configuration from %s: %s", config_file, e)
                raise

            known = {f.name for f in fields(cls)}
            unknown = sorted(set(config_dict) - known)
            if unknown:
                logger.warning("Ignoring unknown configuration keys: %s", ", ".join(unknown))
            instance = cls(**{k: v for k, v in config_dict.items() if k in known})
            logger.debug("Configuration loaded from %s", config_file)
        else:
            instance = cls()
            logger.debug("No configuration at %s, using defaults", config_file)

        if path is None:
            cls._instance = instance
            cls._loaded_from = config_file
        return instance


# Global configuration instance
config = Config.load()
