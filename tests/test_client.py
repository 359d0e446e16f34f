import pytest
import requests

from runescape_api.client import HttpClient

from conftest import DummyHttpClient, DummyResponse


def test_from_json_parses_body() -> None:
    transport = DummyHttpClient(DummyResponse(200, {"total": 3}))
    client = HttpClient(http_client=transport, timeout=2.5)

    result = client.from_json("https://example.com/a.json", lambda data: data["total"])

    assert result == 3
    assert transport.requested_urls == ["https://example.com/a.json"]
    assert transport.timeouts == [2.5]


def test_from_json_404_is_absent() -> None:
    client = HttpClient(http_client=DummyHttpClient(DummyResponse(404, text="Not found")))
    assert client.from_json("https://example.com/a.json", lambda data: data) is None


@pytest.mark.parametrize("status, body", [(200, ""), (200, "   \n"), (204, "")])
def test_from_json_empty_body_is_absent(status: int, body: str) -> None:
    client = HttpClient(http_client=DummyHttpClient(DummyResponse(status, text=body)))
    parse_calls = []

    assert client.from_json("https://example.com/a.json", parse_calls.append) is None
    assert parse_calls == []


@pytest.mark.parametrize("status", [301, 500, 503])
def test_error_status_raises(status: int) -> None:
    client = HttpClient(http_client=DummyHttpClient(DummyResponse(status, {})))
    with pytest.raises(requests.HTTPError):
        client.from_json("https://example.com/a.json", lambda data: data)


def test_invalid_json_propagates() -> None:
    client = HttpClient(http_client=DummyHttpClient(DummyResponse(200, text="<html>")))
    with pytest.raises(ValueError):
        client.from_json("https://example.com/a.json", lambda data: data)


def test_from_csv_splits_rows_and_skips_blank_lines() -> None:
    body = "1,99,200000000\n-1,1,0\n\n5,10\n"
    client = HttpClient(http_client=DummyHttpClient(DummyResponse(200, text=body)))

    rows = client.from_csv("https://example.com/index_lite.ws")

    assert rows == [["1", "99", "200000000"], ["-1", "1", "0"], ["5", "10"]]


def test_from_csv_404_is_absent() -> None:
    client = HttpClient(http_client=DummyHttpClient(DummyResponse(404)))
    assert client.from_csv("https://example.com/index_lite.ws") is None


class UnreachableHttpClient:
    def __init__(self, error: Exception):
        self.error = error

    def get(self, url: str, timeout: float | None = None) -> DummyResponse:
        raise self.error


def test_transport_errors_propagate_unchanged() -> None:
    error = requests.ConnectionError("connection refused")
    client = HttpClient(http_client=UnreachableHttpClient(error))

    with pytest.raises(requests.ConnectionError) as from_json:
        client.from_json("https://example.com/a.json", lambda data: data)
    with pytest.raises(requests.ConnectionError) as from_csv:
        client.from_csv("https://example.com/index_lite.ws")

    assert from_json.value is error
    assert from_csv.value is error


def test_other_2xx_with_body_is_parsed() -> None:
    client = HttpClient(http_client=DummyHttpClient(DummyResponse(203, {"total": 1})))
    assert client.from_json("https://example.com/a.json", lambda data: data["total"]) == 1
