"""
JSON-lines logging for compiler runs.

Console diagnostics for the user are printed by the CLI; these logs carry
the run details (paths, row and failure counts) for whoever collects stderr.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict

RUN_ATTRIBUTES = ("input_path", "output_path", "line_no", "rows", "failures")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload: Dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attr in RUN_ATTRIBUTES:
            value = getattr(record, attr, None)
            if value is not None:
                payload[attr] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True)


def resolve_level(raw_value: str | None, default_level: str | int) -> str | int:
    """Level name from LOG_LEVEL, or `default_level` when blank or not a known level."""
    if raw_value is None:
        return default_level
    name = raw_value.strip().upper()
    if not isinstance(logging.getLevelName(name), int):
        return default_level
    return name


def setup_logging(default_level: str | int = logging.WARNING) -> None:
    """Send JSON logs to stderr at LOG_LEVEL (default WARNING); safe to call repeatedly."""
    root = logging.getLogger()
    root.setLevel(resolve_level(os.environ.get("LOG_LEVEL"), default_level))

    # Reformat handlers already installed (e.g. by pytest) instead of adding another
    if any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        for handler in root.handlers:
            handler.setFormatter(JsonFormatter())
        return

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
