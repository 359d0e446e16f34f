import json
from typing import Any, Callable

import pytest


class DummyResponse:
    def __init__(self, status_code: int, payload: object = None, text: str | None = None):
        self.status_code = status_code
        if text is None:
            text = "" if payload is None else json.dumps(payload)
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class DummyHttpClient:
    def __init__(self, response: DummyResponse):
        self.response = response
        self.requested_urls: list[str] = []
        self.timeouts: list[float | None] = []

    def get(self, url: str, timeout: float | None = None) -> DummyResponse:
        self.requested_urls.append(url)
        self.timeouts.append(timeout)
        return self.response


class RecordingClient:
    """Stands in for ``HttpClient``; answers every URL from canned payloads."""

    def __init__(self, payloads: dict[str, Any] | None = None, default: Any = None):
        self.payloads = payloads or {}
        self.default = default
        self.requested_urls: list[str] = []

    def _lookup(self, url: str) -> Any:
        self.requested_urls.append(url)
        for fragment, payload in self.payloads.items():
            if fragment in url:
                return payload
        return self.default

    def from_json(self, url: str, parse: Callable[[Any], Any]) -> Any:
        payload = self._lookup(url)
        return None if payload is None else parse(payload)

    def from_csv(self, url: str) -> list[list[str]] | None:
        return self._lookup(url)


@pytest.fixture
def recording_client() -> RecordingClient:
    return RecordingClient()
