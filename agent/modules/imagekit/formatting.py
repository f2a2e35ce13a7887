"""Text rendering for ImageKit tool results.

Pure functions only. Records are read through their attributes so this
module stays free of imports from the rest of the package.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from shared.schemas.tools import TextContent, ToolResult

if TYPE_CHECKING:
    from modules.imagekit.models import FileRecord, FolderRecord


def format_result(text: str) -> ToolResult:
    return ToolResult(content=[TextContent(text=text)], is_error=False)


def format_error(message: str) -> ToolResult:
    return ToolResult(content=[TextContent(text=message)], is_error=True)


def format_size_kb(size: int | None) -> str:
    """Render a byte count in kilobytes with one decimal place."""
    if size is None:
        return "N/A"
    return f"{size / 1024:.1f} KB"


def _dimensions(record: FileRecord) -> str:
    if record.width and record.height:
        return f"{record.width}x{record.height}"
    return ""


def format_file_info(record: FileRecord) -> str:
    """One summary line for a file, followed by its tags, ID and URL."""
    dims = _dimensions(record)
    summary = f"{record.file_type or 'file'}, {format_size_kb(record.size)}"
    if dims:
        summary += f", {dims}"
    tags = f"\n   Tags: {', '.join(record.tags)}" if record.tags else ""
    return f"{record.name} ({summary}){tags}\n   ID: {record.file_id}\n   URL: {record.url}"


def format_folder_info(record: FolderRecord) -> str:
    return f"{record.name}\n   ID: {record.folder_id}\n   Path: {record.folder_path}"


def _format_entry(entry: FileRecord | FolderRecord) -> str:
    if entry.type == "folder":
        return format_folder_info(entry)
    return format_file_info(entry)


def format_file_list(
    entries: Sequence[FileRecord | FolderRecord],
    path: str,
    search_query: str | None = None,
) -> str:
    """Render a listing, or a distinct message when nothing matched."""
    matching = f' matching "{search_query}"' if search_query else ""
    if not entries:
        return f'No files found in "{path}"{matching}.'

    header = f'Found {len(entries)} file(s){matching} in "{path}":'
    body = "\n\n".join(_format_entry(entry) for entry in entries)
    return f"{header}\n\n{body}"


def format_folder_list(folders: Sequence[FolderRecord], path: str) -> str:
    if not folders:
        return f'No folders found in "{path}".'

    body = "\n\n".join(format_folder_info(folder) for folder in folders)
    return f'Found {len(folders)} folder(s) in "{path}":\n\n{body}'


def format_file_details(record: FileRecord) -> str:
    """Full detail view of a single file, timestamps included."""
    dims = _dimensions(record)
    lines = [
        "File details:",
        "",
        f"   Name: {record.name}",
        f"   ID: {record.file_id}",
        f"   Type: {record.file_type or 'file'}",
        f"   Size: {format_size_kb(record.size)}",
    ]
    if dims:
        lines.append(f"   Dimensions: {dims}")
    lines.append(f"   URL: {record.url}")
    lines.append(f"   Path: {record.file_path}")
    if record.tags:
        lines.append(f"   Tags: {', '.join(record.tags)}")
    lines.append(f"   Created: {record.created_at}")
    lines.append(f"   Updated: {record.updated_at}")
    return "\n".join(lines)


def format_upload_result(record: FileRecord) -> str:
    return (
        "File uploaded successfully.\n\n"
        f"   Name: {record.name}\n"
        f"   ID: {record.file_id}\n"
        f"   URL: {record.url}\n"
        f"   Size: {format_size_kb(record.size)}\n"
        f"   Path: {record.file_path}\n"
        f"   Type: {record.file_type or 'file'}"
    )


def format_generated_url(url: str, signed: bool, expire_seconds: int | None = None) -> str:
    text = f"Generated URL:\n\n   {url}"
    if signed:
        text += f"\n\n   Signed: yes, expires in {expire_seconds}s"
    return text
