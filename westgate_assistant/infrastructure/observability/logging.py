"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from westgate_assistant.config import settings


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


def log_quote(request_id: str, outcome: str, term_years: int, duration_ms: float) -> None:
    """Log mortgage quote outcome"""
    logging.info(
        "Mortgage quote computed",
        extra={
            "request_id": request_id,
            "step": "mortgage_quote",
            "quote_outcome": outcome,
            "term_years": term_years,
            "duration_ms": duration_ms,
        },
    )


def log_chat_reply(request_id: str, session_id: str | None, intent: str, message_id: int | None) -> None:
    """Log which intent answered a chat message"""
    logging.info(
        "Chat reply sent",
        extra={
            "request_id": request_id,
            "session_id": session_id,
            "step": "chat_reply",
            "intent": intent,
            "message_id": message_id,
        },
    )
