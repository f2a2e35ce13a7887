"""Upload normalization.

The three upload tools hand in the file in different shapes (bytes read from
disk, a remote URL, a base64 string). Everything funnels through
``build_upload_request`` so the backend always receives the same canonical
``UploadRequest`` with the same defaults applied.
"""

from __future__ import annotations

import asyncio
import base64
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from modules.imagekit.errors import LocalResourceError, ValidationError
from modules.imagekit.formatting import format_result, format_upload_result
from shared.schemas.tools import ToolResult

if TYPE_CHECKING:
    from modules.imagekit.client import ImageKitClient

logger = structlog.get_logger()

DATA_URI_MARKER = "data:"


# ---------------------------------------------------------------------------
# Payload variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class LocalBytes:
    """File content read from the local filesystem."""

    data: bytes


@dataclass(frozen=True)
class RemoteUrl:
    """A URL ImageKit fetches the file from."""

    url: str


@dataclass(frozen=True)
class Base64Blob:
    """Base64 content, possibly wrapped in a data URI."""

    data: str


UploadPayload = LocalBytes | RemoteUrl | Base64Blob


# ---------------------------------------------------------------------------
# Options and canonical request
# ---------------------------------------------------------------------------


class UploadOptions(BaseModel):
    """Options shared by every upload tool."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    folder: str = "/"
    use_unique_file_name: bool = Field(default=True, alias="useUniqueFileName")
    is_private_file: bool = Field(default=False, alias="isPrivateFile")
    overwrite_file: bool = Field(default=False, alias="overwriteFile")
    tags: list[str] | None = None
    custom_coordinates: str | None = Field(default=None, alias="customCoordinates")
    custom_metadata: dict[str, Any] | None = Field(default=None, alias="customMetadata")

    def upload_options(self) -> UploadOptions:
        """Project a tool input down to just its shared upload options."""
        return UploadOptions(
            **{name: getattr(self, name) for name in UploadOptions.model_fields}
        )


class UploadRequest(BaseModel):
    """The one upload shape handed to the client gateway.

    ``file`` is either a URL or base64 text. Optional fields left as None
    are not sent to the backend at all.
    """

    file: str
    file_name: str
    folder: str = "/"
    use_unique_file_name: bool = True
    is_private_file: bool = False
    overwrite_file: bool = False
    tags: list[str] | None = None
    custom_coordinates: str | None = None
    custom_metadata: dict[str, Any] | None = None


# ---------------------------------------------------------------------------
# Normalization helpers
# ---------------------------------------------------------------------------


def trim_folder(folder: str | None) -> str:
    """Drop trailing slashes from a folder path; empty means root."""
    if not folder:
        return "/"
    trimmed = folder.rstrip("/")
    return trimmed or "/"


def strip_data_uri(value: str) -> str:
    """Return the payload part of a ``data:<mime>;base64,<payload>`` string.

    Strings without the ``data:`` marker are returned unchanged. Only the
    first comma separates header from payload.
    """
    if not value.startswith(DATA_URI_MARKER):
        return value
    _, sep, payload = value.partition(",")
    if not sep:
        raise ValidationError("Data URI has no ',' separating the header from the payload")
    return payload


def encode_payload(payload: UploadPayload) -> str:
    """Render any payload variant as the string the upload API accepts."""
    if isinstance(payload, LocalBytes):
        return base64.b64encode(payload.data).decode("ascii")
    if isinstance(payload, RemoteUrl):
        return payload.url
    if isinstance(payload, Base64Blob):
        return strip_data_uri(payload.data)
    raise TypeError(f"Unsupported upload payload: {type(payload).__name__}")


def build_upload_request(
    payload: UploadPayload, file_name: str, options: UploadOptions | None = None
) -> UploadRequest:
    """Apply defaults and assemble the canonical upload request."""
    options = options or UploadOptions()
    request = UploadRequest(
        file=encode_payload(payload),
        file_name=file_name,
        folder=trim_folder(options.folder),
        use_unique_file_name=options.use_unique_file_name,
        is_private_file=options.is_private_file,
        overwrite_file=options.overwrite_file,
    )
    # Optional fields are forwarded only when given.
    if options.tags:
        request.tags = list(options.tags)
    if options.custom_coordinates:
        request.custom_coordinates = options.custom_coordinates
    if options.custom_metadata is not None:
        request.custom_metadata = dict(options.custom_metadata)
    return request


async def read_local_file(file_path: str) -> LocalBytes:
    """Read a local file, failing before any I/O if it does not exist."""
    path = Path(file_path).expanduser()
    if not path.is_file():
        raise LocalResourceError(file_path)
    data = await asyncio.to_thread(path.read_bytes)
    return LocalBytes(data)


async def normalize_and_upload(
    client: ImageKitClient,
    payload: UploadPayload,
    file_name: str,
    options: UploadOptions | None = None,
) -> ToolResult:
    """Upload any payload variant and render the success envelope."""
    request = build_upload_request(payload, file_name, options)
    record = await client.upload(request)
    logger.info(
        "imagekit_upload_complete",
        file_id=record.file_id,
        name=record.name,
        folder=request.folder,
        source=type(payload).__name__,
    )
    return format_result(format_upload_result(record))
