from __future__ import annotations

import json
import logging
from typing import Any, Optional

from .settings import get_settings

_EXTRA_KEYS = ("locale", "strategy", "reason")


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        data: dict[str, Any] = {
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)  # type: ignore[arg-type]
        for key in _EXTRA_KEYS:
            if hasattr(record, key):
                data[key] = str(getattr(record, key))
        return json.dumps(data, ensure_ascii=False)


def configure_json_logging(level: int | str = logging.INFO, stream: Optional[Any] = None) -> None:
    root = logging.getLogger()
    root.setLevel(level)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    # Remove other handlers to avoid duplicate logs
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)


def maybe_enable_json_logging() -> bool:
    settings = get_settings()
    if not settings.json_logs:
        return False
    configure_json_logging(settings.log_level)
    return True
