"""Shared fixtures for ImageKit module tests.

The backend is never contacted: gateway tests run against
``httpx.MockTransport`` and tool tests against a mock client.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest

from modules.imagekit import client as client_module
from modules.imagekit.client import Credentials, ImageKitClient
from modules.imagekit.tests.fixtures import CREDENTIALS_ENV
from modules.imagekit.tools import ImageKitTools
from shared.config import get_settings


@pytest.fixture(autouse=True)
def reset_singletons():
    """Start every test without cached settings or a shared client."""
    get_settings.cache_clear()
    client_module._client = None
    yield
    get_settings.cache_clear()
    client_module._client = None


@pytest.fixture
def imagekit_env(monkeypatch):
    for key, value in CREDENTIALS_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    return CREDENTIALS_ENV


@pytest.fixture
def no_imagekit_env(monkeypatch):
    for key in CREDENTIALS_ENV:
        monkeypatch.setenv(key, "")
    get_settings.cache_clear()


@pytest.fixture
def credentials():
    return Credentials(
        public_key=CREDENTIALS_ENV["IMAGEKIT_PUBLIC_KEY"],
        private_key=CREDENTIALS_ENV["IMAGEKIT_PRIVATE_KEY"],
        url_endpoint=CREDENTIALS_ENV["IMAGEKIT_URL_ENDPOINT"],
    )


@pytest.fixture
def make_client(credentials):
    """Factory for a real client wired to a request handler.

    Every request the client sends is appended to the returned list.
    """

    def _make(handler):
        requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return handler(request)

        ik = ImageKitClient(credentials, transport=httpx.MockTransport(_record))
        return ik, requests

    return _make


@pytest.fixture
def mock_client():
    """Mock gateway exposing the same operations as ImageKitClient."""
    ik = MagicMock(spec=ImageKitClient)
    ik.list_files = AsyncMock(return_value=[])
    ik.get_file_details = AsyncMock()
    ik.upload = AsyncMock()
    ik.delete_file = AsyncMock(return_value=None)
    ik.create_folder = AsyncMock(return_value=None)
    ik.delete_folder = AsyncMock(return_value=None)
    ik.move_file = AsyncMock(return_value=None)
    ik.build_url = MagicMock(return_value="https://ik.imagekit.io/demo/image.jpg")
    return ik


@pytest.fixture
def client_provider(mock_client):
    return MagicMock(return_value=mock_client)


@pytest.fixture
def tools(client_provider):
    return ImageKitTools(client_provider=client_provider)
