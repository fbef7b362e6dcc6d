"""Shared test fixtures."""

import json
from typing import Any, Iterator

import httpx
import pytest

from authapi.conf import Settings

BASE_URL = "https://tenant.example.com"


class RecordingTransport(httpx.MockTransport):
    """Records every request and answers with canned responses."""

    def __init__(self) -> None:
        super().__init__(self._handle)
        self.requests: list[httpx.Request] = []
        self.responses: dict[tuple[str, str], dict[str, Any]] = {}

    def respond(self, method: str, path: str, status_code: int = 200, **kwargs: Any) -> None:
        self.responses[(method, path)] = {"status_code": status_code, **kwargs}

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.get((request.method, request.url.path), {"status_code": 200, "json": {}})
        return httpx.Response(**response)

    def bodies(self) -> list[dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests if request.content]


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture(autouse=True)
def settings_dir(tmp_path: Any, monkeypatch: pytest.MonkeyPatch) -> Iterator[Any]:
    monkeypatch.setenv("AUTHAPI_CONFIG_DIR", str(tmp_path / "config"))
    monkeypatch.delenv("AUTHAPI_BASE_URL", raising=False)
    monkeypatch.delenv("AUTHAPI_CLIENT_ID", raising=False)
    monkeypatch.delenv("AUTHAPI_VERBOSE_ERROR", raising=False)
    Settings.load.cache_clear()
    yield tmp_path / "config"
    Settings.load.cache_clear()
