"""Delivery URL generation with optional signing."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Literal

from modules.imagekit.client import UrlOptions
from modules.imagekit.errors import ValidationError

if TYPE_CHECKING:
    from modules.imagekit.client import ImageKitClient

DEFAULT_EXPIRE_SECONDS = 300


def build_url_options(
    path: str | None = None,
    src: str | None = None,
    transformations: list[dict[str, Any]] | None = None,
    position: Literal["path", "query"] = "path",
    signed: bool = False,
    expire_seconds: int = DEFAULT_EXPIRE_SECONDS,
) -> UrlOptions:
    """Assemble builder options.

    ``path`` takes precedence when both sources are given. Transformation
    steps keep their order and keys exactly as supplied.
    """
    if not path and not src:
        raise ValidationError("Either 'path' or 'src' is required.")

    options = UrlOptions(
        path=path or None,
        src=None if path else src,
        transformation=[dict(step) for step in transformations or []],
        transformation_position=position,
    )
    if signed:
        options.signed = True
        options.expire_seconds = expire_seconds
    return options


def generate_url(
    client_provider: Callable[[], ImageKitClient],
    path: str | None = None,
    src: str | None = None,
    transformations: list[dict[str, Any]] | None = None,
    position: Literal["path", "query"] = "path",
    signed: bool = False,
    expire_seconds: int = DEFAULT_EXPIRE_SECONDS,
) -> str:
    """Build a delivery URL.

    Inputs are checked before ``client_provider`` is called, so a missing
    source never reaches the backend client.
    """
    options = build_url_options(path, src, transformations, position, signed, expire_seconds)
    return client_provider().build_url(options)
