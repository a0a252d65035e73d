"""
Structured Logging Configuration

Setup for structured logging with run IDs and JSON formatting.
The library itself only creates loggers; applications and the benchmark
call setup_logging().
"""

import logging
import sys
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger.json import JsonFormatter

from .config import Settings, get_settings

SERVICE_NAME = "rsa-accumulator"


class RunIDFilter(logging.Filter):
    """Add a run ID to log records."""

    def __init__(self, run_id: Optional[str] = None):
        super().__init__()
        self.run_id = run_id or str(uuid.uuid4())[:8]

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "run_id"):
            record.run_id = self.run_id
        return True


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with additional fields."""

    def __init__(self, *args: Any, version: str = "", **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.version = version

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["service"] = SERVICE_NAME
        log_record["version"] = self.version

        if "level" not in log_record:
            log_record["level"] = record.levelname


def setup_logging(settings: Optional[Settings] = None) -> None:
    """Configure root logging from settings."""
    settings = settings or get_settings()

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.addFilter(RunIDFilter())

    if settings.log_format == "json":
        formatter = CustomJsonFormatter(
            fmt="%(timestamp)s %(level)s %(name)s %(run_id)s %(message)s",
            version=settings.app_version,
        )
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(run_id)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured - level: {settings.log_level}, format: {settings.log_format}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name."""
    return logging.getLogger(name)
