"""Tool call dispatch.

Every call goes through ``dispatch``: the arguments are validated against
the tool's input model, the matching handler runs, and whatever happens the
caller gets back exactly one ``ToolResult``.
"""

from __future__ import annotations

from enum import Enum

import structlog
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from modules.imagekit.errors import ImageKitError
from modules.imagekit.formatting import format_error
from modules.imagekit.manifest import MANIFEST
from modules.imagekit.models import (
    CreateFolderInput,
    DeleteFolderInput,
    FileIdInput,
    GenerateUrlInput,
    ListFilesInput,
    ListFoldersInput,
    MoveFileInput,
    UploadBase64Input,
    UploadFileInput,
    UploadFromUrlInput,
)
from modules.imagekit.tools import ImageKitTools
from shared.schemas.tools import ToolResult

logger = structlog.get_logger()


class ToolName(str, Enum):
    LIST_FILES = "list_files"
    LIST_FOLDERS = "list_folders"
    GET_FILE_DETAILS = "get_file_details"
    UPLOAD_FILE = "upload_file"
    UPLOAD_FILE_FROM_URL = "upload_file_from_url"
    UPLOAD_BASE64_FILE = "upload_base64_file"
    DELETE_FILE = "delete_file"
    CREATE_FOLDER = "create_folder"
    DELETE_FOLDER = "delete_folder"
    MOVE_FILE = "move_file"
    GENERATE_URL = "generate_url"


TOOL_INPUTS: dict[ToolName, type[BaseModel]] = {
    ToolName.LIST_FILES: ListFilesInput,
    ToolName.LIST_FOLDERS: ListFoldersInput,
    ToolName.GET_FILE_DETAILS: FileIdInput,
    ToolName.UPLOAD_FILE: UploadFileInput,
    ToolName.UPLOAD_FILE_FROM_URL: UploadFromUrlInput,
    ToolName.UPLOAD_BASE64_FILE: UploadBase64Input,
    ToolName.DELETE_FILE: FileIdInput,
    ToolName.CREATE_FOLDER: CreateFolderInput,
    ToolName.DELETE_FOLDER: DeleteFolderInput,
    ToolName.MOVE_FILE: MoveFileInput,
    ToolName.GENERATE_URL: GenerateUrlInput,
}


def resolve_tool(tool_name: str) -> ToolName | None:
    """Map a bare or module-prefixed tool name to its identifier."""
    definition = MANIFEST.get_tool(tool_name)
    if definition is None:
        return None
    return ToolName(definition.short_name)


def describe_validation_error(tool: ToolName, exc: PydanticValidationError) -> str:
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        problems.append(f"{location}: {error['msg']}" if location else error["msg"])
    return f"Invalid arguments for {tool.value}: " + "; ".join(problems)


async def _invoke(tools: ImageKitTools, tool: ToolName, args: BaseModel) -> ToolResult:
    if tool is ToolName.LIST_FILES:
        return await tools.list_files(args)
    elif tool is ToolName.LIST_FOLDERS:
        return await tools.list_folders(args)
    elif tool is ToolName.GET_FILE_DETAILS:
        return await tools.get_file_details(args)
    elif tool is ToolName.UPLOAD_FILE:
        return await tools.upload_file(args)
    elif tool is ToolName.UPLOAD_FILE_FROM_URL:
        return await tools.upload_file_from_url(args)
    elif tool is ToolName.UPLOAD_BASE64_FILE:
        return await tools.upload_base64_file(args)
    elif tool is ToolName.DELETE_FILE:
        return await tools.delete_file(args)
    elif tool is ToolName.CREATE_FOLDER:
        return await tools.create_folder(args)
    elif tool is ToolName.DELETE_FOLDER:
        return await tools.delete_folder(args)
    elif tool is ToolName.MOVE_FILE:
        return await tools.move_file(args)
    elif tool is ToolName.GENERATE_URL:
        return await tools.generate_url(args)
    raise AssertionError(f"No handler for {tool}")


async def dispatch(tools: ImageKitTools, tool_name: str, arguments: dict | None) -> ToolResult:
    """Validate arguments, run the handler and return its envelope."""
    tool = resolve_tool(tool_name)
    if tool is None:
        return format_error(f"Unknown tool: {tool_name}")

    try:
        args = TOOL_INPUTS[tool].model_validate(arguments or {})
    except PydanticValidationError as e:
        message = describe_validation_error(tool, e)
        logger.warning("tool_validation_error", tool=tool.value, error=message)
        return format_error(message)

    try:
        result = await _invoke(tools, tool, args)
    except ImageKitError as e:
        logger.warning(
            "tool_execution_failed",
            tool=tool.value,
            error=str(e),
            error_type=type(e).__name__,
        )
        return format_error(str(e))
    except Exception as e:
        logger.error("tool_execution_error", tool=tool.value, error=str(e), exc_info=True)
        return format_error(str(e) or type(e).__name__)

    logger.info("tool_executed", tool=tool.value, is_error=result.is_error)
    return result
