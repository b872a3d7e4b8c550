"""Dependency injection for FastAPI routes."""

from typing import Annotated

from fastapi import Depends

from app.core.config import Settings, get_settings
from app.integrations.squarespace.client import SquarespaceClient


def get_squarespace_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> SquarespaceClient:
    """Build the upstream client from the current settings.

    The client carries no per-request state, so building it is cheap and the
    same configuration always yields an equivalent client.
    """
    return SquarespaceClient.from_settings(settings)


# Type aliases for route signatures
AppSettings = Annotated[Settings, Depends(get_settings)]
Squarespace = Annotated[SquarespaceClient, Depends(get_squarespace_client)]


__all__ = [
    "AppSettings",
    "Squarespace",
    "get_settings",
    "get_squarespace_client",
]
