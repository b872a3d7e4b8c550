"""Parsing helpers for caller-supplied query and path parameters.

Parameters are taken as raw strings and checked here so that a bad value is
answered with our own error envelope before anything is sent upstream.
"""

import re

from app.core.errors import APIError

DEFAULT_PAGE_SIZE = 20

# Optional sign and ASCII digits only: no padding, underscores or other scripts
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str | None, name: str) -> int | None:
    """Parse an optional integer parameter; ``None`` stays ``None``."""
    if value is None:
        return None
    if not _INT_PATTERN.fullmatch(value):
        raise APIError.invalid_parameter(name)
    return int(value)


def require_id(value: str, label: str) -> str:
    """Reject blank path identifiers."""
    value = value.strip()
    if not value:
        raise APIError.missing_parameter(f"{label} ID is required")
    return value
