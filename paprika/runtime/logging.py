"""Logging pipeline for navigator and host events.

Navigator and host loggers attach their state as ``extra`` fields (``page``,
``depth``, ``frames``...). The text formatter appends them as ``key=value``
pairs after the event name; the JSON formatter nests them under ``fields``.
"""

from __future__ import annotations

import json
import logging
import queue
from datetime import UTC, datetime
from logging.handlers import QueueHandler, QueueListener
from pathlib import Path

from paprika.api.logging import PaprikaLoggingConfig
from paprika.runtime.config import resolve_log_level_name

EVENT_FIELDS: tuple[str, ...] = (
    "page",
    "depth",
    "frames",
    "history_limit",
    "backend",
    "width",
    "height",
    "vsync",
)

_QUEUE_LISTENER: QueueListener | None = None
_QUEUE_HANDLER: QueueHandler | None = None


def event_fields(record: logging.LogRecord) -> dict[str, object]:
    """Return the navigator/host fields attached to ``record``, in fixed order."""
    return {name: getattr(record, name) for name in EVENT_FIELDS if hasattr(record, name)}


class KeyValueFormatter(logging.Formatter):
    """``asctime level logger: event key=value ...`` lines."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        fields = event_fields(record)
        if not fields:
            return line
        head, sep, tail = line.partition("\n")
        pairs = " ".join(f"{name}={value}" for name, value in fields.items())
        return f"{head} {pairs}{sep}{tail}"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, event fields under ``fields``."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, object] = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "event": record.getMessage(),
        }
        fields = event_fields(record)
        if fields:
            payload["fields"] = fields
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=repr)


def _formatter_for(kind: str) -> logging.Formatter:
    return JsonFormatter() if kind.strip().lower() == "json" else KeyValueFormatter()


def configure_logging(config: PaprikaLoggingConfig) -> None:
    """Install console logging, streaming to ``config.file_path`` off-thread."""
    global _QUEUE_LISTENER, _QUEUE_HANDLER

    shutdown_logging()
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(getattr(logging, config.level_name.upper(), logging.INFO))

    console = logging.StreamHandler()
    console.setFormatter(_formatter_for(config.console_format))
    if not config.file_path:
        root.addHandler(console)
        return

    path = Path(config.file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    log_file = logging.FileHandler(path, mode="a", encoding="utf-8", delay=True)
    log_file.setFormatter(_formatter_for(config.file_format))

    records: queue.SimpleQueue[logging.LogRecord] = queue.SimpleQueue()
    _QUEUE_HANDLER = QueueHandler(records)
    root.addHandler(_QUEUE_HANDLER)
    _QUEUE_LISTENER = QueueListener(records, console, log_file, respect_handler_level=True)
    _QUEUE_LISTENER.start()


def shutdown_logging() -> None:
    """Drain queued records, close the log file and detach the queue handler."""
    global _QUEUE_LISTENER, _QUEUE_HANDLER

    listener, handler = _QUEUE_LISTENER, _QUEUE_HANDLER
    _QUEUE_LISTENER = None
    _QUEUE_HANDLER = None
    if handler is not None:
        logging.getLogger().removeHandler(handler)
    if listener is None:
        return
    listener.stop()
    for target in listener.handlers:
        target.close()


def setup_logging() -> None:
    """Configure console logging unless the root logger already has handlers."""
    if logging.getLogger().handlers:
        return
    configure_logging(PaprikaLoggingConfig(level_name=resolve_log_level_name(default="INFO")))
