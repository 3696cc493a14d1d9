"""Structured JSON logging helpers for detid."""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from logging import Logger
from typing import Dict

_LOGGER_NAME = "detid"


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        payload = {
            "ts": ts,
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if hasattr(record, "event"):
            payload["event"] = getattr(record, "event")
        if hasattr(record, "payload"):
            payload["payload"] = getattr(record, "payload")
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _configure_root() -> Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(_JsonFormatter())
        logger.addHandler(handler)
        # Honor DETID_LOG_LEVEL env, default INFO
        level = os.environ.get("DETID_LOG_LEVEL", "INFO").upper()
        logger.setLevel(getattr(logging, level, logging.INFO))
    return logger


def get_logger(name: str | None = None) -> Logger:
    """Return a package logger emitting one JSON object per record."""
    root = _configure_root()
    if not name:
        return root
    return root.getChild(name)


def log_event(
    logger: Logger,
    event: str,
    payload: Dict[str, object] | None = None,
    level: int = logging.INFO,
) -> None:
    """Log an event payload in a consistent JSON format."""
    extra = {"event": event, "payload": payload or {}}
    logger.log(level, f"event={event}", extra=extra)
