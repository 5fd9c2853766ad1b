"""Public logging API."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

RUNTIME_LOGGER_NAMES: tuple[str, ...] = ("guikit.animation", "guikit.modal", "guikit.navigation")


@dataclass(frozen=True, slots=True)
class EngineLoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json
    logger_levels: Mapping[str, str] = field(default_factory=dict)


def parse_logger_levels(raw: str | None) -> dict[str, str]:
    """Parse ``name=LEVEL,name=LEVEL`` into a mapping; malformed items are skipped."""
    levels: dict[str, str] = {}
    if not raw:
        return levels
    for item in raw.split(","):
        name, sep, level = item.partition("=")
        name = name.strip()
        level = level.strip().upper()
        if sep and name and level:
            levels[name] = level
    return levels


def configure_logging(config: EngineLoggingConfig) -> None:
    """Configure root logging pipeline."""
    from guikit.runtime.logging import configure_engine_logging

    configure_engine_logging(config)


def shutdown_logging() -> None:
    """Flush and stop background log streaming."""
    from guikit.runtime.logging import stop_engine_logging

    stop_engine_logging()
