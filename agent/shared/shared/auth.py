"""Bearer-token guard for the HTTP tool service.

The ImageKit module can run as an HTTP service next to other agent modules.
In that mode ``/manifest`` and ``/execute`` expect
``Authorization: Bearer <SERVICE_AUTH_TOKEN>``::

    from shared.auth import require_service_auth

    @app.post("/execute")
    async def execute(call: ToolCall, _=Depends(require_service_auth)):
        ...

The stdio entry point does not use this; the host owns that channel.
"""

from __future__ import annotations

import secrets

import structlog
from fastapi import HTTPException, Request

from shared.config import get_settings

logger = structlog.get_logger()

_BEARER_PREFIX = "Bearer "


async def require_service_auth(request: Request) -> None:
    """FastAPI dependency validating the service token.

    Raises 401 on a missing or wrong token. Skipped entirely when
    ``service_auth_token`` is empty.
    """
    expected = get_settings().service_auth_token
    if not expected:
        logger.warning("service_auth_disabled", path=request.url.path)
        return

    header = request.headers.get("authorization", "")
    if not header.startswith(_BEARER_PREFIX):
        raise HTTPException(status_code=401, detail="Missing service auth token")

    supplied = header[len(_BEARER_PREFIX):]
    if not secrets.compare_digest(supplied, expected):
        logger.warning(
            "service_auth_failed",
            path=request.url.path,
            remote=request.client.host if request.client else "unknown",
        )
        raise HTTPException(status_code=401, detail="Invalid service auth token")
