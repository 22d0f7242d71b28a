from __future__ import annotations

import json
import logging
import sys
from typing import Any, Optional, TextIO

from .config import ObservabilityConfig
from .domain.errors import ConfigurationError

# Attributes every LogRecord has; anything else came in through ``extra``
_RECORD_FIELDS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Formats records as one JSON object per line, ``extra`` fields included."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": self.formatTime(record),
            "logger": record.name,
            "level": record.levelname,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RECORD_FIELDS:
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(
    config: ObservabilityConfig, stream: Optional[TextIO] = None
) -> logging.Handler:
    """Install a single stderr handler on the ``minpath`` logger.

    Calling it again replaces the previous handler instead of stacking.
    """
    logger = logging.getLogger("minpath")
    for handler in list(logger.handlers):
        if getattr(handler, "_minpath_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))
    handler._minpath_handler = True  # type: ignore[attr-defined]

    try:
        logger.setLevel(config.level.upper())
    except ValueError as e:
        raise ConfigurationError(
            f"Unknown log level: {config.level!r}",
            setting_name="observability.level",
            expected_type="logging level name",
            cause=e,
        ) from e

    logger.addHandler(handler)
    return handler
