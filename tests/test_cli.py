import json

import pytest
import requests

from runescape_api import RuneScapeAPI
from runescape_api.__main__ import EXIT_NOT_FOUND, EXIT_USAGE, main

from conftest import RecordingClient


class FailingClient(RecordingClient):
    def from_json(self, url, parse):
        raise requests.ConnectionError("unreachable")


def test_item_prints_json(capsys) -> None:
    payload = {"daily": {"1": 5}, "average": {"1": 4}}
    api = RuneScapeAPI(RecordingClient(default=payload))

    assert main(["graph", "4151"], api=api) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["daily"] == {"1": 5}


def test_category_by_name(capsys) -> None:
    client = RecordingClient(default={"alpha": [{"letter": "a", "items": 2}]})

    assert main(["category", "Ammo"], api=RuneScapeAPI(client)) == 0
    assert client.requested_urls[0].endswith("category.json?category=1")


def test_not_found(capsys) -> None:
    assert main(["item", "1"], api=RuneScapeAPI(RecordingClient())) == EXIT_NOT_FOUND
    assert capsys.readouterr().out.strip() == "not found"


@pytest.mark.parametrize("argv", [["category", "99"], ["prices", "0", ""]])
def test_validation_errors(argv) -> None:
    assert main(argv, api=RuneScapeAPI(RecordingClient())) == EXIT_USAGE


def test_transport_errors() -> None:
    assert main(["graph", "1"], api=RuneScapeAPI(FailingClient())) == EXIT_NOT_FOUND


def test_negative_category_is_an_id(caplog) -> None:
    client = RecordingClient()

    assert main(["category", "-1"], api=RuneScapeAPI(client)) == EXIT_USAGE
    assert "between 0 and 39" in caplog.text
    assert client.requested_urls == []


def test_player_prints_skills(capsys) -> None:
    rows = [["1", "2000", "500"]] + [["2", "99", "13034431"]] * 29 + [["-1", "-1"]]
    api = RuneScapeAPI(RecordingClient(default=rows))

    assert main(["player", "Zezima"], api=api) == 0

    out = json.loads(capsys.readouterr().out)
    assert out["skills"]["Necromancy"]["level"] == 99
    assert out["activities"] == [{"rank": -1, "score": -1}]
