"""Pytest configuration and fixtures."""

import os

import httpx
import pytest
import pytest_asyncio

# Keep a developer's shell or .env from leaking into tests
for _var in [v for v in os.environ if v.startswith("CROSSERA_")]:
    del os.environ[_var]

from crossera.config import SDKConfig, get_settings
from crossera.sdk import CrossEraSDK

ADDRESS = "0x46992B61b7A1d2e4F59Cd881B74A96a549EF49BF"
TX_HASH = "0xede6251cb0667ac7a2b51bbb9308c5b244321fe4dbb9145e1a084e6bc84053de"


class RecordingHandler:
    """MockTransport handler that records requests and replays canned responses.

    ``routes`` maps (method, path) to an httpx.Response, or to an exception
    instance which is raised with the request attached.
    """

    def __init__(self, routes=None, default=None):
        self.routes = routes or {}
        self.default = default
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        result = self.routes.get((request.method, request.url.path), self.default)
        if result is None:
            return httpx.Response(404, json={"error": "no route"})
        if isinstance(result, Exception):
            raise result
        # Fresh copy so one canned response can serve several requests
        return httpx.Response(result.status_code, headers=result.headers, content=result.content)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Reload settings for every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def handler() -> RecordingHandler:
    return RecordingHandler()


@pytest_asyncio.fixture
async def sdk(handler):
    """SDK wired to the recording handler."""
    client = CrossEraSDK(SDKConfig(), transport=httpx.MockTransport(handler))
    yield client
    await client.aclose()
