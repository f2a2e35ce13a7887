"""ImageKit API client gateway.

One ``ImageKitClient`` per process, built lazily by ``get_client()`` from
the configured credentials. Every REST call is a single round trip; HTTP
failures surface as ``BackendError`` carrying ImageKit's own message.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import threading
import time
from dataclasses import dataclass, field
from typing import Any, Literal
from urllib.parse import quote, urlencode

import httpx
import structlog

from modules.imagekit.errors import BackendError, ConfigurationError
from modules.imagekit.models import FileRecord, FolderRecord, parse_listing
from modules.imagekit.uploads import UploadRequest
from shared.config import Settings, get_settings

logger = structlog.get_logger()

REQUEST_TIMEOUT = 60.0

TRANSFORMATION_PARAMETER = "tr"
CHAIN_DELIMITER = ":"
STEP_DELIMITER = ","
KEY_VALUE_DELIMITER = "-"

# Option names ImageKit shortens in URLs. Anything else is passed as given.
TRANSFORM_KEYS: dict[str, str] = {
    "height": "h",
    "width": "w",
    "aspectRatio": "ar",
    "aspect_ratio": "ar",
    "quality": "q",
    "crop": "c",
    "cropMode": "cm",
    "crop_mode": "cm",
    "x": "x",
    "y": "y",
    "xc": "xc",
    "yc": "yc",
    "focus": "fo",
    "format": "f",
    "radius": "r",
    "background": "bg",
    "border": "b",
    "rotation": "rt",
    "rotate": "rt",
    "blur": "bl",
    "named": "n",
    "progressive": "pr",
    "lossless": "lo",
    "trim": "t",
    "metadata": "md",
    "colorProfile": "cp",
    "color_profile": "cp",
    "defaultImage": "di",
    "default_image": "di",
    "dpr": "dpr",
    "zoom": "z",
    "page": "pg",
    "original": "orig",
    "effectSharpen": "e-sharpen",
    "effect_sharpen": "e-sharpen",
    "effectUSM": "e-usm",
    "effect_usm": "e-usm",
    "effectContrast": "e-contrast",
    "effect_contrast": "e-contrast",
    "effectGray": "e-grayscale",
    "effect_gray": "e-grayscale",
}


@dataclass(frozen=True)
class Credentials:
    public_key: str
    private_key: str
    url_endpoint: str

    @classmethod
    def from_settings(cls, settings: Settings) -> Credentials:
        """Build credentials, refusing to continue if any value is empty."""
        values = {
            "IMAGEKIT_PUBLIC_KEY": settings.imagekit_public_key,
            "IMAGEKIT_PRIVATE_KEY": settings.imagekit_private_key,
            "IMAGEKIT_URL_ENDPOINT": settings.imagekit_url_endpoint,
        }
        missing = [name for name, value in values.items() if not value]
        if missing:
            raise ConfigurationError(
                f"Missing credentials: {', '.join(missing)}. Set IMAGEKIT_PUBLIC_KEY, "
                "IMAGEKIT_PRIVATE_KEY, and IMAGEKIT_URL_ENDPOINT."
            )
        return cls(
            public_key=settings.imagekit_public_key,
            private_key=settings.imagekit_private_key,
            url_endpoint=settings.imagekit_url_endpoint,
        )


@dataclass
class UrlOptions:
    """Inputs for ``ImageKitClient.build_url``."""

    path: str | None = None
    src: str | None = None
    transformation: list[dict[str, Any]] = field(default_factory=list)
    transformation_position: Literal["path", "query"] = "path"
    signed: bool = False
    expire_seconds: int | None = None


# ---------------------------------------------------------------------------
# URL helpers
# ---------------------------------------------------------------------------


def _transform_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def transformation_string(transformation: list[dict[str, Any]] | None) -> str:
    """Render ordered transformation steps, e.g. ``w-300,h-200:rt-90``."""
    steps: list[str] = []
    for step in transformation or []:
        parts: list[str] = []
        for key, value in step.items():
            if key == "raw":
                parts.append(_transform_value(value))
                continue
            short = TRANSFORM_KEYS.get(key, key)
            if value == "-":
                parts.append(short)
                continue
            rendered = _transform_value(value)
            if short == "di":
                rendered = rendered.strip("/").replace("/", "@@")
            parts.append(f"{short}{KEY_VALUE_DELIMITER}{rendered}")
        if parts:
            steps.append(STEP_DELIMITER.join(parts))
    return CHAIN_DELIMITER.join(steps)


def _append_query(url: str, params: list[tuple[str, str]]) -> str:
    if not params:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{urlencode(params, safe=',:')}"


def sign_url(private_key: str, url: str, url_endpoint: str, expiry: int) -> str:
    """HMAC-SHA1 over the endpoint-relative URL plus the expiry timestamp."""
    endpoint = url_endpoint.rstrip("/") + "/"
    to_sign = url.replace(endpoint, "", 1) + str(expiry)
    return hmac.new(private_key.encode(), to_sign.encode(), hashlib.sha1).hexdigest()


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        body = None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or f"ImageKit API error: {response.status_code}"


# ---------------------------------------------------------------------------
# Client
# ---------------------------------------------------------------------------


class ImageKitClient:
    """Async gateway to the ImageKit REST API."""

    def __init__(
        self,
        credentials: Credentials,
        api_base_url: str = "https://api.imagekit.io",
        upload_url: str = "https://upload.imagekit.io/api/v1/files/upload",
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.credentials = credentials
        self.api_base_url = api_base_url.rstrip("/")
        self.upload_url = upload_url
        self._http = httpx.AsyncClient(
            auth=(credentials.private_key, ""),
            timeout=REQUEST_TIMEOUT,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    # ------------------------------------------------------------------
    # Files
    # ------------------------------------------------------------------

    async def list_files(self, params: dict[str, Any]) -> list[FileRecord | FolderRecord]:
        """List or search the media library."""
        data = await self._request("GET", f"{self.api_base_url}/v1/files", params=params)
        return parse_listing(data or [])

    async def get_file_details(self, file_id: str) -> FileRecord:
        data = await self._request(
            "GET", f"{self.api_base_url}/v1/files/{quote(file_id, safe='')}/details"
        )
        return FileRecord.model_validate(data)

    async def upload(self, request: UploadRequest) -> FileRecord:
        """Send an upload as multipart form data."""
        form = {
            "fileName": request.file_name,
            "folder": request.folder,
            "useUniqueFileName": _transform_value(request.use_unique_file_name),
            "isPrivateFile": _transform_value(request.is_private_file),
            "overwriteFile": _transform_value(request.overwrite_file),
        }
        if request.tags is not None:
            form["tags"] = ",".join(request.tags)
        if request.custom_coordinates is not None:
            form["customCoordinates"] = request.custom_coordinates
        if request.custom_metadata is not None:
            form["customMetadata"] = json.dumps(request.custom_metadata)

        data = await self._request(
            "POST",
            self.upload_url,
            data=form,
            files={"file": (None, request.file)},
        )
        return FileRecord.model_validate(data)

    async def delete_file(self, file_id: str) -> None:
        await self._request("DELETE", f"{self.api_base_url}/v1/files/{quote(file_id, safe='')}")

    async def move_file(self, source_file_path: str, destination_path: str) -> None:
        await self._request(
            "POST",
            f"{self.api_base_url}/v1/files/move",
            json={"sourceFilePath": source_file_path, "destinationPath": destination_path},
        )

    # ------------------------------------------------------------------
    # Folders
    # ------------------------------------------------------------------

    async def create_folder(self, folder_name: str, parent_folder_path: str) -> None:
        await self._request(
            "POST",
            f"{self.api_base_url}/v1/folder",
            json={"folderName": folder_name, "parentFolderPath": parent_folder_path},
        )

    async def delete_folder(self, folder_path: str) -> None:
        await self._request(
            "DELETE",
            f"{self.api_base_url}/v1/folder",
            json={"folderPath": folder_path},
        )

    # ------------------------------------------------------------------
    # URLs
    # ------------------------------------------------------------------

    def build_url(self, options: UrlOptions) -> str:
        """Build a delivery URL, optionally signed.

        Absolute ``src`` URLs always carry transformations as a query
        parameter. An expiry is only added to signed URLs.
        """
        endpoint = self.credentials.url_endpoint.rstrip("/")
        transform = transformation_string(options.transformation)
        query: list[tuple[str, str]] = []

        if options.path:
            path = options.path.lstrip("/")
            if transform and options.transformation_position == "path":
                url = f"{endpoint}/{TRANSFORMATION_PARAMETER}{CHAIN_DELIMITER}{transform}/{path}"
            else:
                url = f"{endpoint}/{path}"
                if transform:
                    query.append((TRANSFORMATION_PARAMETER, transform))
        elif options.src:
            url = options.src
            if transform:
                query.append((TRANSFORMATION_PARAMETER, transform))
        else:
            raise ValueError("build_url needs a path or a src")

        url = _append_query(url, query)

        if options.signed:
            expiry = int(time.time()) + int(options.expire_seconds or 0)
            signature = sign_url(self.credentials.private_key, url, endpoint, expiry)
            url = _append_query(url, [("ik-t", str(expiry)), ("ik-s", signature)])

        return url

    # ------------------------------------------------------------------
    # Transport
    # ------------------------------------------------------------------

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        """Make a request to the ImageKit API."""
        try:
            resp = await self._http.request(method, url, **kwargs)
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            message = _error_message(e.response)
            logger.error(
                "imagekit_http_error",
                method=method,
                url=url,
                status=e.response.status_code,
                message=message,
            )
            raise BackendError(message, status=e.response.status_code) from e
        except httpx.RequestError as e:
            logger.error("imagekit_request_error", method=method, url=url, error=str(e))
            raise BackendError(f"Failed to connect to ImageKit API: {e}") from e

        if not resp.content:
            return None
        return resp.json()


# ---------------------------------------------------------------------------
# Process-wide instance
# ---------------------------------------------------------------------------

_client: ImageKitClient | None = None
_client_lock = threading.Lock()


def get_client() -> ImageKitClient:
    """Return the shared client, creating it on first use.

    Raises ConfigurationError before any network activity when credentials
    are incomplete. A failed attempt is not cached.
    """
    global _client
    if _client is not None:
        return _client

    with _client_lock:
        if _client is None:
            settings = get_settings()
            credentials = Credentials.from_settings(settings)
            _client = ImageKitClient(
                credentials,
                api_base_url=settings.imagekit_api_base_url,
                upload_url=settings.imagekit_upload_url,
            )
            logger.info("imagekit_client_initialized", url_endpoint=credentials.url_endpoint)
    return _client


async def close_client() -> None:
    """Close and forget the shared client."""
    global _client
    with _client_lock:
        client, _client = _client, None
    if client is not None:
        await client.aclose()
