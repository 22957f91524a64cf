"""Structured JSON logging for barcode generation"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from virtual_barcode.config import settings

logger = logging.getLogger("virtual_barcode")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str | None = None) -> None:
    """Configure structured JSON logging on the root logger"""
    root = logging.getLogger()
    root.setLevel(level or settings.log_level)

    # Remove existing handlers
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s")
    handler.setFormatter(formatter)
    root.addHandler(handler)


def mask_iban(iban: str) -> str:
    """Keep only the last four characters of an account number"""
    compact = "".join(iban.split())
    if len(compact) <= 4:
        return "*" * len(compact)
    return "*" * (len(compact) - 4) + compact[-4:]


def log_barcode_result(
    step: str,
    succeeded: bool,
    duration_ms: float,
    iban: Optional[str] = None,
    failed_field: Optional[str] = None,
    failure_reason: Optional[str] = None,
) -> None:
    """Log structured encode/decode outcome"""
    extra = {
        "step": step,
        "outcome": "success" if succeeded else "rejected",
        "duration_ms": duration_ms,
    }
    if iban:
        extra["iban"] = mask_iban(iban)
    if failed_field:
        extra["failed_field"] = failed_field
        extra["failure_reason"] = failure_reason

    if succeeded:
        logger.info("Barcode %s completed", step, extra=extra)
    else:
        logger.warning("Barcode %s rejected", step, extra=extra)
