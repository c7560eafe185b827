"""
Centralized logging configuration using structlog

Every log line written while a request is being served carries the request
ID, the caller's user ID (when the bearer token verifies) and the GraphQL
operation name.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog
from fastapi import Request

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
user_id_ctx: ContextVar[str | None] = ContextVar("user_id", default=None)
graphql_operation_ctx: ContextVar[str | None] = ContextVar("graphql_operation", default=None)

_CONTEXT_VARS = (
    ("request_id", request_id_ctx),
    ("user_id", user_id_ctx),
    ("graphql_operation", graphql_operation_ctx),
)


class RequestContextFilter:
    """Copy the current request context into each event dict."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        # structlog processor signature; only the event dict is used
        _ = logger, method_name

        for key, var in _CONTEXT_VARS:
            value = var.get()
            if value and key not in event_dict:
                event_dict[key] = value
        return event_dict


def configure_logging(debug: bool = False, level: str | None = None) -> None:
    """Configure structlog and the stdlib root logger.

    Args:
        debug: Log at DEBUG with coloured console output instead of JSON lines
        level: Level name (``"info"``, ``"WARNING"``...) used when not in debug mode
    """
    if debug:
        log_level = logging.DEBUG
    else:
        log_level = logging.getLevelName((level or "INFO").upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    # uvicorn and pymongo log through the stdlib; route them to stdout too
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        # Drop events below the configured level before doing any work
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        # request_id / user_id / graphql_operation
        RequestContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        # %-style formatting for messages from stdlib-style call sites
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        # Development: human-readable console output
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        # Production: one JSON object per line
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)
    """
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a 14-character urlsafe request ID (e.g. ``'AAYFnDkW3xQp8A'``).

    Eight bytes of microsecond timestamp followed by two random bytes, so IDs
    sort roughly by time but cannot be enumerated.
    """
    timestamp_us = int(time.time() * 1_000_000)
    random_bytes = secrets.token_bytes(2)

    combined_bytes = timestamp_us.to_bytes(8, byteorder="big") + random_bytes
    return base64.urlsafe_b64encode(combined_bytes).decode("ascii").rstrip("=")


def set_request_context(
    request_id: str | None = None,
    user_id: str | None = None,
    graphql_operation: str | None = None,
) -> str:
    """Set the logging context for the current request.

    Returns:
        The request ID in effect (generated when not given)
    """
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    if user_id is not None:
        user_id_ctx.set(user_id)
    if graphql_operation is not None:
        graphql_operation_ctx.set(graphql_operation)
    return request_id


def clear_request_context() -> None:
    for _, var in _CONTEXT_VARS:
        var.set(None)


def extract_user_id_from_request(request: Request) -> str | None:
    """Extract the user ID from a bearer token on the request, if it verifies.

    Only used to tag log lines; authorization decisions are made by the
    GraphQL guard, never from this value.
    """
    from .auth.middleware import get_bearer_token
    from .auth.tokens import get_token_adapter

    token = get_bearer_token(request.headers.get("authorization"))
    if not token:
        return None

    claims = get_token_adapter().decode_claims(token)
    subject = claims.get("sub")
    return subject if isinstance(subject, str) else None
