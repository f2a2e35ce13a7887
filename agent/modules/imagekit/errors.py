"""Exception types raised by the ImageKit module."""

from __future__ import annotations


class ImageKitError(Exception):
    """Base class for every error the tool layer knows how to render."""


class ConfigurationError(ImageKitError):
    """Credentials are missing or invalid."""


class ValidationError(ImageKitError):
    """Caller input violates a tool's contract."""


class LocalResourceError(ImageKitError):
    """A referenced local file does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class BackendError(ImageKitError):
    """A call to the ImageKit API failed.

    ``message`` is the backend's own text, passed through untouched.
    ``status`` is the HTTP status, or None when no response was received.
    """

    def __init__(self, message: str, status: int | None = None):
        self.message = message
        self.status = status
        super().__init__(message)
