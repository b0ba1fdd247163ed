"""Structured JSON logging for the pricing service."""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict

from pythonjsonlogger import jsonlogger

from autovinci_pricing.settings import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that stamps every record with timestamp, level and service."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", json_output: bool = True) -> None:
    """Configure the root logger with a single stdout handler."""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    if json_output:
        formatter: logging.Formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    else:
        formatter = logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_quote(kind: str, amount: float, duration_ms: float, **fields: Any) -> None:
    """Log one computed quote (EMI, on-road, eligibility) for analysis."""
    logging.getLogger("autovinci_pricing.quotes").info(
        "Quote computed",
        extra={"quote_kind": kind, "amount": amount, "duration_ms": round(duration_ms, 3), **fields},
    )
