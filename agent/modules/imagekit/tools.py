"""ImageKit tool implementations."""

from __future__ import annotations

import os
from typing import Callable

import structlog

from modules.imagekit.client import ImageKitClient, get_client
from modules.imagekit.errors import LocalResourceError
from modules.imagekit.formatting import (
    format_error,
    format_file_details,
    format_file_list,
    format_folder_list,
    format_generated_url,
    format_result,
)
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
from modules.imagekit.uploads import (
    Base64Blob,
    RemoteUrl,
    normalize_and_upload,
    read_local_file,
)
from modules.imagekit.urls import generate_url
from shared.schemas.tools import ToolResult

logger = structlog.get_logger()


class ImageKitTools:
    """Tool implementations backed by the ImageKit client gateway.

    The client is resolved through ``client_provider`` on each call, so
    credentials are only required once a tool actually needs the backend.
    """

    def __init__(self, client_provider: Callable[[], ImageKitClient] = get_client):
        self._client_provider = client_provider

    @property
    def client(self) -> ImageKitClient:
        return self._client_provider()

    # ------------------------------------------------------------------
    # Listing and lookup
    # ------------------------------------------------------------------

    async def list_files(self, args: ListFilesInput) -> ToolResult:
        params: dict = {
            "path": args.path,
            "limit": args.limit,
            "skip": args.skip,
            "sort": args.sort,
            "includeFolder": True,
        }
        if args.search_query:
            params["searchQuery"] = args.search_query
        if args.file_type != "all":
            params["fileType"] = args.file_type

        entries = await self.client.list_files(params)
        return format_result(format_file_list(entries, args.path, args.search_query))

    async def list_folders(self, args: ListFoldersInput) -> ToolResult:
        entries = await self.client.list_files(
            {"path": args.path, "includeFolder": True, "type": "folder"}
        )
        # The listing may still contain files; only folders are reported.
        folders = [entry for entry in entries if entry.type == "folder"]
        return format_result(format_folder_list(folders, args.path))

    async def get_file_details(self, args: FileIdInput) -> ToolResult:
        record = await self.client.get_file_details(args.file_id)
        return format_result(format_file_details(record))

    # ------------------------------------------------------------------
    # Uploads
    # ------------------------------------------------------------------

    async def upload_file(self, args: UploadFileInput) -> ToolResult:
        try:
            payload = await read_local_file(args.file_path)
        except LocalResourceError as e:
            logger.warning("imagekit_local_file_missing", path=e.path)
            return format_error(str(e))

        name = args.file_name or os.path.basename(args.file_path)
        return await normalize_and_upload(self.client, payload, name, args.upload_options())

    async def upload_file_from_url(self, args: UploadFromUrlInput) -> ToolResult:
        return await normalize_and_upload(
            self.client, RemoteUrl(args.url), args.file_name, args.upload_options()
        )

    async def upload_base64_file(self, args: UploadBase64Input) -> ToolResult:
        return await normalize_and_upload(
            self.client, Base64Blob(args.base64_data), args.file_name, args.upload_options()
        )

    # ------------------------------------------------------------------
    # File and folder management
    # ------------------------------------------------------------------

    async def delete_file(self, args: FileIdInput) -> ToolResult:
        await self.client.delete_file(args.file_id)
        logger.info("imagekit_file_deleted", file_id=args.file_id)
        return format_result(f"File deleted successfully. ID: {args.file_id}")

    async def create_folder(self, args: CreateFolderInput) -> ToolResult:
        await self.client.create_folder(args.folder_name, args.parent_folder_path)
        logger.info(
            "imagekit_folder_created",
            folder_name=args.folder_name,
            parent=args.parent_folder_path,
        )
        return format_result(
            f'Folder "{args.folder_name}" created in "{args.parent_folder_path}".'
        )

    async def delete_folder(self, args: DeleteFolderInput) -> ToolResult:
        await self.client.delete_folder(args.folder_path)
        logger.info("imagekit_folder_deleted", folder_path=args.folder_path)
        return format_result(f"Folder deleted: {args.folder_path}")

    async def move_file(self, args: MoveFileInput) -> ToolResult:
        await self.client.move_file(args.source_file_path, args.destination_path)
        logger.info(
            "imagekit_file_moved",
            source=args.source_file_path,
            destination=args.destination_path,
        )
        return format_result(
            f'File moved from "{args.source_file_path}" to "{args.destination_path}".'
        )

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------

    async def generate_url(self, args: GenerateUrlInput) -> ToolResult:
        url = generate_url(
            self._client_provider,
            path=args.path,
            src=args.src,
            transformations=args.transformation,
            position=args.transformation_position,
            signed=args.signed,
            expire_seconds=args.expire_seconds,
        )
        return format_result(format_generated_url(url, args.signed, args.expire_seconds))
