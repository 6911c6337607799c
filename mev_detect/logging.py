"""Logging setup and the error channel for mev-detect.

Diagnostics for rejected input go to the ``mev_detect.errors`` logger so a
host can route them separately from detector debug output. Everything is
written to stderr by default; stdout is reserved for verdicts.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

ERROR_CHANNEL = "mev_detect.errors"

STANDARD_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

error_channel = logging.getLogger(ERROR_CHANNEL)


def setup_logging(
    level: str = "INFO",
    format_type: str = "standard",
    stream: TextIO | None = None,
) -> None:
    """Configure logging for mev-detect.

    Parameters
    ----------
    level : str
        Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_type : str
        Format type: "standard" or "json".
    stream : TextIO | None
        Destination stream, stderr when omitted.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if format_type == "json":
        formatter: logging.Formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(fmt=STANDARD_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    logging.getLogger("mev_detect").setLevel(log_level)
    # Parse failures are reported even when the detector runs quietly
    error_channel.setLevel(min(log_level, logging.ERROR))

    for name in ("confluent_kafka", "redis", "faker"):
        logging.getLogger(name).setLevel(logging.WARNING)


def report_parse_failure(error: Exception, document: str | bytes) -> None:
    """Log a rejected transaction document on the error channel."""
    error_channel.error(
        "Error deserializing transactions: %s",
        error,
        extra={"extra": {"error_type": type(error).__name__, "document_size": len(document)}},
    )


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with fields from ``extra={"extra": {...}}``."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if hasattr(record, "extra"):
            log_data.update(record.extra)

        return json.dumps(log_data, default=str)
