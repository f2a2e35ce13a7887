"""Pydantic models for ImageKit tool inputs and backend records.

Tool inputs accept the camelCase argument names hosts send (``searchQuery``,
``fileType``...) as well as the snake_case field names.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, TypeAdapter, field_validator, model_validator
from pydantic_core import PydanticCustomError

from modules.imagekit.uploads import DATA_URI_MARKER, UploadOptions

_URL_ADAPTER = TypeAdapter(AnyUrl)


class ToolInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


# ---------------------------------------------------------------------------
# Listing and lookup
# ---------------------------------------------------------------------------


class ListFilesInput(ToolInput):
    path: str = "/"
    search_query: str | None = Field(default=None, alias="searchQuery")
    limit: int = Field(default=20, ge=1, le=1000)
    skip: int = Field(default=0, ge=0)
    file_type: Literal["image", "non-image", "all"] = Field(default="all", alias="fileType")
    sort: str = "DESC_CREATED"


class ListFoldersInput(ToolInput):
    path: str = "/"


class FileIdInput(ToolInput):
    file_id: str = Field(alias="fileId")


# ---------------------------------------------------------------------------
# Uploads
# ---------------------------------------------------------------------------


class UploadFileInput(UploadOptions):
    file_path: str = Field(alias="filePath")
    file_name: str | None = Field(default=None, alias="fileName")


class UploadFromUrlInput(UploadOptions):
    url: str
    file_name: str = Field(alias="fileName")

    @field_validator("url")
    @classmethod
    def _well_formed_url(cls, value: str) -> str:
        # Validate only; the caller's exact string is what gets uploaded.
        _URL_ADAPTER.validate_python(value)
        return value


class UploadBase64Input(UploadOptions):
    base64_data: str = Field(alias="base64Data")
    file_name: str = Field(alias="fileName")

    @field_validator("base64_data")
    @classmethod
    def _complete_data_uri(cls, value: str) -> str:
        if value.startswith(DATA_URI_MARKER) and "," not in value:
            raise PydanticCustomError(
                "data_uri_separator",
                "Data URI has no ',' separating the header from the payload",
            )
        return value


# ---------------------------------------------------------------------------
# Folder and file management
# ---------------------------------------------------------------------------


class CreateFolderInput(ToolInput):
    folder_name: str = Field(alias="folderName")
    parent_folder_path: str = Field(default="/", alias="parentFolderPath")


class DeleteFolderInput(ToolInput):
    folder_path: str = Field(alias="folderPath")


class MoveFileInput(ToolInput):
    source_file_path: str = Field(alias="sourceFilePath")
    destination_path: str = Field(alias="destinationPath")


# ---------------------------------------------------------------------------
# URL generation
# ---------------------------------------------------------------------------


class GenerateUrlInput(ToolInput):
    path: str | None = None
    src: str | None = None
    transformation: list[dict[str, Any]] | None = None
    transformation_position: Literal["path", "query"] = Field(
        default="path", alias="transformationPosition"
    )
    signed: bool = False
    expire_seconds: int = Field(default=300, alias="expireSeconds")

    @model_validator(mode="after")
    def _source_present(self) -> GenerateUrlInput:
        if not self.path and not self.src:
            raise PydanticCustomError("missing_source", "Either 'path' or 'src' is required.")
        return self

    @model_validator(mode="after")
    def _signed_expiry_positive(self) -> GenerateUrlInput:
        # Unsigned URLs carry no expiry, so the value is only checked when signing.
        if self.signed and self.expire_seconds <= 0:
            raise PydanticCustomError(
                "expiry_not_positive",
                "expireSeconds must be greater than 0 for signed URLs.",
            )
        return self


# ---------------------------------------------------------------------------
# Backend records
# ---------------------------------------------------------------------------


class FileRecord(BaseModel):
    """A file as returned by the ImageKit API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    file_id: str = Field(alias="fileId")
    name: str
    type: str = "file"
    file_type: str | None = Field(default=None, alias="fileType")
    size: int | None = None
    width: int | None = None
    height: int | None = None
    url: str | None = None
    file_path: str | None = Field(default=None, alias="filePath")
    tags: list[str] | None = None
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")


class FolderRecord(BaseModel):
    """A folder entry from an ImageKit listing."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    folder_id: str | None = Field(default=None, alias="folderId")
    name: str
    type: Literal["folder"] = "folder"
    folder_path: str | None = Field(default=None, alias="folderPath")


def parse_listing(items: list[dict]) -> list[FileRecord | FolderRecord]:
    """Turn raw listing items into typed records, keeping backend order."""
    records: list[FileRecord | FolderRecord] = []
    for item in items:
        if item.get("type") == "folder":
            records.append(FolderRecord.model_validate(item))
        else:
            records.append(FileRecord.model_validate(item))
    return records
