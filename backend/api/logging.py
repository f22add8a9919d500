"""Structured logging infrastructure for the API layer.

Provides JSON-formatted logging for production and human-readable
logging for development, plus a GenerationLogger helper for plan
generation events.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Optional

# Extra fields copied from a LogRecord into the JSON payload when present
_EXTRA_FIELDS = ("model", "temperature", "stage", "status_code", "duration", "error_type")


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Add extra fields if present
        for field_name in _EXTRA_FIELDS:
            if hasattr(record, field_name):
                log_data[field_name] = getattr(record, field_name)

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def configure_logging(json_format: bool = True, level: int = logging.INFO) -> None:
    """Configure structured logging for the application."""
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Create console handler
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    root_logger.addHandler(handler)


class GenerationLogger:
    """Logger for plan generation events with structured fields."""

    def __init__(self):
        self.logger = logging.getLogger("plan_generation")

    def generation_started(self, model: str, temperature: float) -> None:
        self.logger.info(
            "Plan generation started",
            extra={"stage": "started", "model": model, "temperature": temperature},
        )

    def credential_missing(self) -> None:
        self.logger.error(
            "Provider API key not configured",
            extra={"stage": "failed", "error_type": "MissingCredentialError"},
        )

    def provider_failed(self, status_code: Optional[int], body: Optional[str]) -> None:
        extra = {"stage": "failed", "error_type": "ProviderError"}
        if status_code is not None:
            extra["status_code"] = status_code
        self.logger.error(f"Provider error: {body}", extra=extra)

    def format_failed(self, error: Exception, content: str) -> None:
        self.logger.error(
            f"JSON parse failed: {error}. Content: {content}",
            extra={"stage": "failed", "error_type": type(error).__name__},
        )

    def generation_completed(self, duration: float) -> None:
        self.logger.info(
            "Plan generation completed",
            extra={"stage": "completed", "duration": round(duration, 2)},
        )


# Global generation logger instance
generation_logger = GenerationLogger()
