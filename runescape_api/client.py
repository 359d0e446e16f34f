"""Web-services client: fetch a URL and map the body to a typed value."""

from __future__ import annotations

import csv
import io
import logging
from typing import Any, Callable, Protocol, TypeVar

import requests

from runescape_api.config import config

logger = logging.getLogger(__name__)

HTTP_OK = 200
HTTP_MULTIPLE_CHOICES = 300
HTTP_NOT_FOUND = 404

T = TypeVar("T")


class PayloadError(ValueError):
    """Raised when a response body does not have the expected shape."""


class HttpResponseProtocol(Protocol):
    status_code: int
    text: str

    def json(self) -> Any:  # pragma: no cover - protocol definition
        ...


class HttpClientProtocol(Protocol):
    def get(
        self, url: str, timeout: float | None = None
    ) -> HttpResponseProtocol:  # pragma: no cover - protocol definition
        ...


class Client(Protocol):
    """What the Grand Exchange, Bestiary and Hiscores clients need from the web."""

    def from_json(
        self, url: str, parse: Callable[[Any], T]
    ) -> T | None:  # pragma: no cover - protocol definition
        ...

    def from_csv(self, url: str) -> list[list[str]] | None:  # pragma: no cover - protocol definition
        ...


class RequestsHttpClient:
    """Small adapter over ``requests`` so we can mock in tests."""

    def __init__(self, user_agent: str | None = None) -> None:
        self.headers = {"User-Agent": user_agent or config.user_agent}

    def get(self, url: str, timeout: float | None = None) -> requests.Response:
        return requests.get(url, timeout=timeout, headers=self.headers)


class HttpClient:
    """Client for the RuneScape web services, designed for easy mocking in tests.

    A 404 or an empty body means the service has no data for the request and
    maps to ``None``. Any other non-2xx status raises ``requests.HTTPError``;
    transport and JSON decoding errors propagate unchanged.
    """

    def __init__(
        self,
        http_client: HttpClientProtocol | None = None,
        timeout: float | None = None,
    ) -> None:
        self.http_client = http_client or RequestsHttpClient()
        self.timeout = timeout if timeout is not None else config.timeout

    def _fetch(self, url: str) -> HttpResponseProtocol | None:
        logger.debug(f"GET {url}")
        response = self.http_client.get(url, timeout=self.timeout)

        if response.status_code == HTTP_NOT_FOUND:
            logger.debug(f"No data at {url} (404)")
            return None
        if not HTTP_OK <= response.status_code < HTTP_MULTIPLE_CHOICES:
            logger.warning(f"Request to {url} failed with status {response.status_code}")
            raise requests.HTTPError(
                f"RuneScape request failed with status {response.status_code}",
                response=response,
            )
        if not response.text or not response.text.strip():
            logger.debug(f"No data at {url} (empty body)")
            return None
        return response

    def from_json(self, url: str, parse: Callable[[Any], T]) -> T | None:
        """Fetch ``url`` and map its JSON body through ``parse``."""
        response = self._fetch(url)
        if response is None:
            return None
        return parse(response.json())

    def from_csv(self, url: str) -> list[list[str]] | None:
        """Fetch ``url`` and split its body into CSV rows, dropping blank lines."""
        response = self._fetch(url)
        if response is None:
            return None
        return [row for row in csv.reader(io.StringIO(response.text)) if row]
