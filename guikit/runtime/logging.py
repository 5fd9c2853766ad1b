"""Logging pipeline implementation."""

from __future__ import annotations

import json
import logging
import queue
from collections.abc import Mapping
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from guikit.api.logging import EngineLoggingConfig
from guikit.runtime.debug_config import resolve_log_level_name

_QUEUE_LISTENER: QueueListener | None = None
_CONFIGURED_LOGGERS: set[str] = set()

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.NOTSET, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per record, keeping ``extra=`` fields under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        extras = {k: v for k, v in record.__dict__.items() if k not in _RECORD_ATTRIBUTES}
        if extras:
            payload["fields"] = extras
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def configure_engine_logging(config: EngineLoggingConfig) -> None:
    """Install console (and optional file) handlers on the root logger.

    With a file configured both handlers sit behind a queue so file writes
    never block the frame loop.
    """
    global _QUEUE_LISTENER

    stop_engine_logging()

    handlers: list[logging.Handler] = [_console_handler(config.console_format)]
    if config.file_path:
        handlers.append(_file_handler(Path(config.file_path), config.file_format))

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(_level(config.level_name))
    _apply_logger_levels(config.logger_levels)

    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    log_queue: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(log_queue))
    _QUEUE_LISTENER = QueueListener(log_queue, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def stop_engine_logging() -> None:
    """Drain and stop the background listener if one is running."""
    global _QUEUE_LISTENER

    listener = _QUEUE_LISTENER
    _QUEUE_LISTENER = None
    if listener is None:
        return
    listener.stop()
    for handler in listener.handlers:
        handler.close()


def setup_engine_logging() -> None:
    """Configure console-only logging unless the host already did."""
    if logging.getLogger().handlers:
        return
    configure_engine_logging(
        EngineLoggingConfig(level_name=resolve_log_level_name(default="INFO"))
    )


def _apply_logger_levels(levels: Mapping[str, str]) -> None:
    for name in _CONFIGURED_LOGGERS - set(levels):
        logging.getLogger(name).setLevel(logging.NOTSET)
    for name, level_name in levels.items():
        logging.getLogger(name).setLevel(_level(level_name))
    _CONFIGURED_LOGGERS.clear()
    _CONFIGURED_LOGGERS.update(levels)


def _level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def _console_handler(kind: str) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setFormatter(_resolve_formatter(kind))
    return handler


def _file_handler(path: Path, kind: str) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    handler.setFormatter(_resolve_formatter(kind))
    return handler


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
