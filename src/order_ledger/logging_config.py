"""JSON log output for the service and the CLI."""

from __future__ import annotations

import json
import logging
from typing import Optional

from .core.config import get_settings


class JsonFormatter(logging.Formatter):
    """One JSON object per record; ``exc_info`` carries the formatted traceback."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data)


def configure_logging(level: Optional[str] = None) -> None:
    """Route all records through a single JSON stream handler.

    ``level`` falls back to ``Settings.log_level`` so the CLI and the
    ``.env`` file agree on verbosity.
    """

    name = (level or get_settings().log_level).upper()
    root = logging.getLogger()
    root.handlers = [h for h in root.handlers if not isinstance(h.formatter, JsonFormatter)]
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    lvl = getattr(logging, name, None)
    root.setLevel(lvl if isinstance(lvl, int) else logging.INFO)
