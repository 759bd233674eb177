"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from finance_tracker.config import settings


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
    mode: str,
    monthly_income: float,
    savings_percentage: float,
    duration_ms: float,
) -> None:
    """Log one completed computation for analysis"""
    logging.info(
        "Calculation completed",
        extra={
            "request_id": request_id,
            "step": "calculation_complete",
            "mode": mode,
            "monthly_income": monthly_income,
            "savings_percentage": savings_percentage,
            "duration_ms": duration_ms,
        },
    )


def log_request_step(
    request_id: str,
    step: str,
    duration_ms: float,
    item_count: int,
) -> None:
    """Log a completed scenario, goal, savings or materialization request"""
    logging.info(
        "Request step completed",
        extra={
            "request_id": request_id,
            "step": step,
            "item_count": item_count,
            "duration_ms": duration_ms,
        },
    )
