"""
Structured logging for Wallet Core.

Every record carries timestamp, level, logger name and event_type. Recipient
fields are shortened before rendering so full addresses and paymails never
reach the log sink.

LOG_LEVEL (default INFO) and LOG_FORMAT (json | console, default json) are read
at import. No wallet_core imports here; config and services import this module.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

RECIPIENT_KEYS = ("recipient", "to")
RECIPIENT_VISIBLE_CHARS = 8


def mask_recipient(recipient: str | None) -> str:
    """Keep a short prefix of a recipient; short handles pass through."""
    value = (recipient or "").strip()
    if len(value) <= RECIPIENT_VISIBLE_CHARS:
        return value
    return value[:RECIPIENT_VISIBLE_CHARS] + "..."


def _add_timestamp(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    event_dict.setdefault("timestamp", datetime.now(timezone.utc).isoformat())
    return event_dict


def _normalize_event(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """structlog 'event' -> event_type; message mirrors it unless given."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "event_type" in event_dict:
        event_dict.setdefault("message", str(event_dict["event_type"]))
    return event_dict


def _mask_recipients(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for key in RECIPIENT_KEYS:
        if isinstance(event_dict.get(key), str):
            event_dict[key] = mask_recipient(event_dict[key])
    return event_dict


def configure_structlog(level: str | None = None, fmt: str | None = None) -> None:
    """(Re)configure structlog. Called once at import with the env defaults."""
    level_value = getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO)
    renderer: Any
    if (fmt or LOG_FORMAT) == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _add_timestamp,
            _mask_recipients,
            _normalize_event,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger bound to the module name.

        logger = get_logger(__name__)
        logger.info("route_rejected", recipient=to, rejection="not_connected")
    """
    return structlog.get_logger(name).bind(logger=name)
