"""Structured JSON logging configuration."""

import contextvars
import logging
import uuid

from pythonjsonlogger.json import JsonFormatter

request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="")


class ContextFilter(logging.Filter):
    """Stamp every record with the current request id and the service name."""

    def __init__(self, service: str) -> None:
        super().__init__()
        self.service = service

    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_var.get("")  # type: ignore[attr-defined]
        record.service = self.service  # type: ignore[attr-defined]
        return True


def setup_logging(*, service: str, debug: bool = False) -> None:
    """Route all logging through a single JSON handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(
        JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s %(service)s %(request_id)s",
            rename_fields={"asctime": "timestamp", "levelname": "level"},
        )
    )
    handler.addFilter(ContextFilter(service))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else logging.INFO)

    # httpx logs every request at INFO; the upstream client does its own logging
    logging.getLogger("httpx").setLevel(logging.WARNING)


def resolve_request_id(incoming: str | None) -> str:
    """Reuse a caller-supplied request id or mint a short new one."""
    if incoming and incoming.strip():
        return incoming.strip()[:64]
    return uuid.uuid4().hex[:16]
