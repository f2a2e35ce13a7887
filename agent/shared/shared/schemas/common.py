"""Common schemas used across services."""

from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Standard health check response.

    ``backend_configured`` reports whether the credentials needed to reach
    the media backend are present; it never triggers a network call.
    """

    status: str = "ok"
    backend_configured: bool = False
