"""Tool and module manifest schemas."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ToolParameter(BaseModel):
    """Parameter definition for a tool."""

    name: str
    type: str  # string, integer, boolean, number, array, object
    description: str
    required: bool = True
    enum: list[str] | None = None
    default: Any = None
    minimum: float | None = None
    maximum: float | None = None
    items_type: str | None = None  # element type for arrays
    format: str | None = None  # e.g. "uri"

    def to_json_schema(self) -> dict[str, Any]:
        """Render this parameter as a JSON Schema property."""
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        if self.default is not None:
            schema["default"] = self.default
        if self.minimum is not None:
            schema["minimum"] = self.minimum
        if self.maximum is not None:
            schema["maximum"] = self.maximum
        if self.type == "array" and self.items_type:
            schema["items"] = {"type": self.items_type}
        if self.format:
            schema["format"] = self.format
        return schema


class ToolDefinition(BaseModel):
    """Definition of a single tool exposed by a module."""

    name: str  # e.g. "imagekit.list_files"
    description: str
    parameters: list[ToolParameter]
    required_permission: str = "guest"  # minimum permission level

    @property
    def short_name(self) -> str:
        """Tool name without the module prefix."""
        return self.name.split(".")[-1]

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema object describing the tool's arguments."""
        return {
            "type": "object",
            "properties": {p.name: p.to_json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }


class ModuleManifest(BaseModel):
    """Manifest describing a module and its tools."""

    module_name: str
    description: str
    version: str = "1.0.0"
    tools: list[ToolDefinition]

    def get_tool(self, name: str) -> ToolDefinition | None:
        """Look up a tool by bare or module-prefixed name."""
        short = name.split(".")[-1]
        for tool in self.tools:
            if tool.short_name == short:
                return tool
        return None


class ToolCall(BaseModel):
    """A tool call request."""

    tool_name: str
    arguments: dict = Field(default_factory=dict)


class TextContent(BaseModel):
    """A single text part of a tool result."""

    type: Literal["text"] = "text"
    text: str


class ToolResult(BaseModel):
    """Result from a tool execution.

    Serialized with ``isError`` as the wire name so the same envelope can be
    handed to protocol hosts unchanged.
    """

    model_config = ConfigDict(populate_by_name=True)

    content: list[TextContent]
    is_error: bool = Field(default=False, alias="isError")

    @property
    def text(self) -> str:
        """All text parts joined together."""
        return "\n".join(part.text for part in self.content)
