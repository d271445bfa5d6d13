"""
Logging Setup
=============
Structured logging configuration for services that sign or validate
requests.

Usage:
    from signed_request.logging_config import setup_logging

    setup_logging(service_name="billing-api")
"""

import logging
import re
import sys
from typing import Any, Dict, FrozenSet

import structlog

REDACTED = "[REDACTED]"

REDACT_KEYS: FrozenSet[str] = frozenset({
    "secret",
    "signature",
    "password",
    "token",
    "authorization",
    "api_key",
    "private_key",
})

_NORMALIZED_REDACT_KEYS = {re.sub(r"[-_\s]", "", key) for key in REDACT_KEYS}


def _is_sensitive(key: Any) -> bool:
    return (
        isinstance(key, str)
        and re.sub(r"[-_\s]", "", key.lower()) in _NORMALIZED_REDACT_KEYS
    )


def _redact(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: REDACTED if _is_sensitive(k) else _redact(v)
            for k, v in value.items()
        }
    return value


def redact_sensitive(
    logger: Any, method_name: str, event_dict: Dict[str, Any]
) -> Dict[str, Any]:
    """structlog processor replacing secret-bearing values with [REDACTED]."""
    return {
        key: REDACTED if _is_sensitive(key) else _redact(value)
        for key, value in event_dict.items()
    }


def setup_logging(
    service_name: str,
    level: str = "INFO",
    json_output: bool = True,
) -> None:
    """
    Configure structlog for a service.

    Args:
        service_name: Name bound to every event
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_output: JSON lines for production, console output otherwise
    """
    level_no = getattr(logging, level.upper(), logging.INFO)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            redact_sensitive,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_no),
        logger_factory=structlog.PrintLoggerFactory(sys.stdout),
        cache_logger_on_first_use=False,
    )
    structlog.contextvars.bind_contextvars(service=service_name)

    structlog.get_logger(__name__).info(
        "logging_configured", service=service_name, level=level.upper()
    )
