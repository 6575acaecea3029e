from __future__ import annotations

import json
import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from .config import ObservabilityConfig, get_config

logger = logging.getLogger("city_search")

# Attributes every LogRecord has; anything else came in through ``extra=``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", 0, "", 0, "", None, None)).keys()
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """One JSON object per line, ``extra`` fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Handler:
    """Install a single stderr handler on the ``city_search`` logger.

    Calling it again replaces the previous handler instead of stacking
    a new one.
    """
    config = config or get_config().observability

    handler = logging.StreamHandler(sys.stderr)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    handler.set_name("city_search")

    for existing in list(logger.handlers):
        if existing.get_name() == "city_search":
            logger.removeHandler(existing)

    logger.addHandler(handler)
    logger.setLevel(config.level.upper())
    return handler


@contextmanager
def log_timing(
    log: logging.Logger, event: str, **fields: Any
) -> Iterator[dict[str, Any]]:
    """Log how long the wrapped block took.

    The yielded dict can be filled with more fields (e.g. a result count)
    before the block exits. Failures are logged at WARNING and re-raised.
    """
    extra: dict[str, Any] = dict(fields)
    started = time.perf_counter()
    try:
        yield extra
    except Exception as e:
        extra["elapsed_ms"] = round((time.perf_counter() - started) * 1000, 1)
        extra["error"] = str(e)
        log.warning(f"{event} failed", extra=extra)
        raise
    extra["elapsed_ms"] = round((time.perf_counter() - started) * 1000, 1)
    log.debug(f"{event} done", extra=extra)
