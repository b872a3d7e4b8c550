"""Errors raised by the Squarespace Commerce client."""

from typing import Any


class SquarespaceError(Exception):
    """Base class for every failure talking to the commerce API."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SquarespaceTransportError(SquarespaceError):
    """The request never produced a response (connect failure, timeout)."""


class SquarespaceDecodeError(SquarespaceError):
    """A successful response whose body is not the JSON we expected."""


class SquarespaceAPIError(SquarespaceError):
    """The commerce API answered with a status >= 400."""

    def __init__(
        self,
        status_code: int,
        message: str,
        *,
        error_type: str | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error_type = error_type
        self.details = details


class SquarespaceNotFoundError(SquarespaceAPIError):
    """A 4xx answer: the resource is missing or not visible to our credential."""
