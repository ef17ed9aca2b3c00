"""Logging pipeline: text/json console output plus a per-run JSON-lines file."""

from __future__ import annotations

import json
import logging
import queue
from dataclasses import dataclass
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from battlegrid.game.infra.app_data import resolve_logs_dir
from battlegrid.game.infra.config import AppSettings, load_settings

__all__ = [
    "JsonFormatter",
    "LoggingConfig",
    "build_logging_config",
    "configure_logging",
    "setup_logging",
    "shutdown_logging",
]

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_QUEUE_LISTENER: QueueListener | None = None

# Attributes every LogRecord carries; anything else arrived through ``extra=``.
_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration."""

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    file_path: str | None = None
    file_format: str = "json"  # text|json

    @property
    def level(self) -> int:
        return logging.getLevelNamesMapping().get(self.level_name.strip().upper(), logging.INFO)


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``extra=`` values are nested under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        fields = _extra_fields(record)
        if fields:
            entry["fields"] = fields
        if record.exc_info:
            entry["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(entry, ensure_ascii=True, default=str)


def configure_logging(config: LoggingConfig) -> None:
    """Install handlers for ``config`` on the root logger.

    With a run file configured, the root logger only enqueues records and a
    ``QueueListener`` thread fans them out to the console and the file.
    """
    global _QUEUE_LISTENER

    shutdown_logging()
    handlers = _build_handlers(config)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(config.level)
    if len(handlers) == 1:
        root.addHandler(handlers[0])
        return

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    root.addHandler(QueueHandler(records))
    _QUEUE_LISTENER = QueueListener(records, *handlers, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Flush and stop the queue listener if one is running."""
    global _QUEUE_LISTENER

    if _QUEUE_LISTENER is not None:
        _QUEUE_LISTENER.stop()
        for handler in _QUEUE_LISTENER.handlers:
            handler.close()
        _QUEUE_LISTENER = None


def build_logging_config(settings: AppSettings | None = None) -> LoggingConfig:
    """Derive the logging configuration from settings and app-data paths."""
    resolved = settings if settings is not None else load_settings()
    return LoggingConfig(
        level_name=resolved.log_level,
        console_format=resolved.log_format,
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def setup_logging(settings: AppSettings | None = None) -> None:
    """Configure application logging from environment."""
    config = build_logging_config(settings)
    configure_logging(config)
    logging.getLogger(__name__).debug("logging_file=%s", config.file_path)


def _build_handlers(config: LoggingConfig) -> list[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(_resolve_formatter(config.console_format))
    if not config.file_path:
        return [console]

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    run_file = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    run_file.setFormatter(_resolve_formatter(config.file_format))
    return [console, run_file]


def _extra_fields(record: logging.LogRecord) -> dict[str, object]:
    return {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}


def _resolve_run_log_file_path() -> str:
    base_dir = resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"battlegrid_run_{stamp}.jsonl")


def _resolve_formatter(kind: str) -> logging.Formatter:
    if kind.strip().lower() == "json":
        return JsonFormatter()
    return logging.Formatter(TEXT_FORMAT)
