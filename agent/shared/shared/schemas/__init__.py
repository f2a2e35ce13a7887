"""Pydantic schemas shared by the tool services."""

from shared.schemas.common import HealthResponse
from shared.schemas.tools import (
    ModuleManifest,
    TextContent,
    ToolCall,
    ToolDefinition,
    ToolParameter,
    ToolResult,
)

__all__ = [
    "HealthResponse",
    "ModuleManifest",
    "TextContent",
    "ToolCall",
    "ToolDefinition",
    "ToolParameter",
    "ToolResult",
]
