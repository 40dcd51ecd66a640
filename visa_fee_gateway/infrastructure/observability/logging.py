"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from visa_fee_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_calculation(
    request_id: str,
    subclass_code: str,
    record_found: bool,
    total: str,
    duration_ms: float,
) -> None:
    """Log structured calculation outcome for analysis"""
    logging.info(
        "Fee calculation completed",
        extra={
            "request_id": request_id,
            "subclass_code": subclass_code,
            "step": "calculation_complete",
            "record_found": record_found,
            "total": total,
            "duration_ms": duration_ms,
        },
    )


def log_unparsable_charge(visa_name: str, field_name: str, raw_value: Any) -> None:
    """Data-quality warning for a charge that defaulted to 0"""
    logging.warning(
        "Unparsable rate field defaulted to 0",
        extra={
            "visa_name": visa_name,
            "field": field_name,
            "raw_value": str(raw_value),
            "step": "schedule_parse",
        },
    )
