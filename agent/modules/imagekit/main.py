"""ImageKit module: FastAPI service."""

from __future__ import annotations

import logging

import structlog
from fastapi import Depends, FastAPI

from modules.imagekit.client import close_client
from modules.imagekit.dispatcher import dispatch
from modules.imagekit.formatting import format_error
from modules.imagekit.manifest import MANIFEST
from modules.imagekit.tools import ImageKitTools
from shared.auth import require_service_auth
from shared.config import get_settings
from shared.schemas.common import HealthResponse
from shared.schemas.tools import ModuleManifest, ToolCall, ToolResult

settings = get_settings()

structlog.configure(
    processors=[
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.JSONRenderer(),
    ],
    wrapper_class=structlog.make_filtering_bound_logger(
        logging.getLevelName(settings.log_level.upper())
    ),
)

logger = structlog.get_logger()
app = FastAPI(title="ImageKit Module", version=MANIFEST.version)

tools: ImageKitTools | None = None


@app.on_event("startup")
async def startup():
    global tools
    tools = ImageKitTools()
    logger.info("imagekit_module_ready", tools=len(MANIFEST.tools))


@app.on_event("shutdown")
async def shutdown():
    await close_client()


@app.get("/manifest", response_model=ModuleManifest)
async def manifest(_=Depends(require_service_auth)):
    """Return the module manifest."""
    return MANIFEST


@app.post("/execute", response_model=ToolResult)
async def execute(call: ToolCall, _=Depends(require_service_auth)):
    """Execute a tool call."""
    if tools is None:
        return format_error("Module not ready")
    return await dispatch(tools, call.tool_name, call.arguments)


@app.get("/health", response_model=HealthResponse)
async def health():
    current = get_settings()
    configured = all(
        [
            current.imagekit_public_key,
            current.imagekit_private_key,
            current.imagekit_url_endpoint,
        ]
    )
    return HealthResponse(status="ok", backend_configured=configured)
