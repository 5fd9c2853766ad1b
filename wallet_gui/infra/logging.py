"""App-level logging policy over the runtime logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from guikit.api.logging import (
    RUNTIME_LOGGER_NAMES,
    EngineLoggingConfig,
    configure_logging,
    parse_logger_levels,
)

DEFAULT_LOGS_DIR = Path("appdata") / "logs"


def build_logging_config() -> EngineLoggingConfig:
    """Build logging config from WALLET_* / LOG_* env vars."""
    level_name = os.getenv("WALLET_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
    console_format = os.getenv("LOG_FORMAT", "text").lower()
    logger_levels = parse_logger_levels(os.getenv("WALLET_LOG_LEVELS"))
    if os.getenv("WALLET_DEBUG_UI") == "1":
        for name in RUNTIME_LOGGER_NAMES:
            logger_levels.setdefault(name, "DEBUG")
    return EngineLoggingConfig(
        level_name=level_name,
        console_format=console_format,
        file_path=_resolve_run_log_file_path(),
        file_format="json",
        logger_levels=logger_levels,
    )


def setup_logging() -> None:
    """Configure application logging."""
    config = build_logging_config()
    configure_logging(config)
    logger = logging.getLogger(__name__)
    logger.info("logging_file=%s", config.file_path)
    if config.logger_levels:
        logger.info("logger_levels", extra={"logger_levels": dict(config.logger_levels)})


def _resolve_run_log_file_path() -> str:
    configured = os.getenv("WALLET_LOG_DIR", "").strip()
    base_dir = Path(configured) if configured else DEFAULT_LOGS_DIR
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"wallet_run_{stamp}.jsonl")
