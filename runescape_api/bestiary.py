"""Bestiary endpoints: beast details and the various beast searches."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import quote, quote_plus

from runescape_api.client import Client, PayloadError
from runescape_api.config import config
from runescape_api.ge import as_bool

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Beast:
    id: int
    name: str
    description: str = ""
    members: bool = False
    level: int = 0
    lifepoints: int = 0
    xp: str = ""
    weakness: str = ""
    slayer_level: int = 0
    slayer_category: str = ""
    size: int = 1
    attackable: bool = False
    aggressive: bool = False
    poisonous: bool = False
    attack: int = 0
    defence: int = 0
    magic: int = 0
    ranged: int = 0
    areas: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_json(cls, data: Any) -> "Beast":
        try:
            return cls(
                id=int(data["id"]),
                name=str(data["name"]),
                description=str(data.get("description", "")),
                members=as_bool(data.get("members", False)),
                level=int(data.get("level", 0)),
                lifepoints=int(data.get("lifepoints", 0)),
                xp=str(data.get("xp", "")),
                weakness=str(data.get("weakness", "")),
                slayer_level=int(data.get("slayerlevel", 0)),
                slayer_category=str(data.get("slayercat", "")),
                size=int(data.get("size", 1)),
                attackable=bool(data.get("attackable", False)),
                aggressive=bool(data.get("aggressive", False)),
                poisonous=bool(data.get("poisonous", False)),
                attack=int(data.get("attack", 0)),
                defence=int(data.get("defence", 0)),
                magic=int(data.get("magic", 0)),
                ranged=int(data.get("ranged", 0)),
                areas=tuple(str(area) for area in data.get("areas", ())),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise PayloadError("Beast payload missing required fields") from exc


def parse_search_results(data: Any) -> dict[int, str]:
    """Map ``[{"label": ..., "value": ...}]`` to ``{value: label}``.

    The service answers ``"none"`` when nothing matched.
    """

    if data is None or data == "none":
        return {}
    if not isinstance(data, list):
        raise PayloadError("Bestiary search returned unexpected payload")
    try:
        return {int(entry["value"]): str(entry["label"]) for entry in data}
    except (KeyError, TypeError, ValueError) as exc:
        raise PayloadError("Bestiary search result missing required fields") from exc


def parse_names(data: Any) -> dict[str, int]:
    if not isinstance(data, dict):
        raise PayloadError("Bestiary names returned unexpected payload")
    try:
        return {str(name): int(identifier) for name, identifier in data.items()}
    except (TypeError, ValueError) as exc:
        raise PayloadError("Bestiary names contain a non-integer id") from exc


def parse_area_names(data: Any) -> tuple[str, ...]:
    if not isinstance(data, list):
        raise PayloadError("Area names returned unexpected payload")
    return tuple(str(name) for name in data)


class Bestiary:
    """Client for the Bestiary API.

    See https://runescape.wiki/w/Application_programming_interface#Bestiary
    """

    def __init__(self, client: Client, web_services_url: str | None = None) -> None:
        if client is None:
            raise ValueError("client is required")
        self.client = client
        base = (web_services_url or config.web_services_url).rstrip("/")
        self.base_url = f"{base}/m=itemdb_rs/bestiary"

    def _search(self, url: str) -> dict[int, str]:
        return self.client.from_json(url, parse_search_results) or {}

    def _names(self, endpoint: str) -> dict[str, int]:
        return self.client.from_json(f"{self.base_url}/{endpoint}", parse_names) or {}

    def _resolve(self, identifier: int | str, endpoint: str, kind: str) -> int:
        if not isinstance(identifier, str):
            return identifier
        names = self._names(endpoint)
        if identifier not in names:
            raise ValueError(f"Unknown {kind}: {identifier!r}")
        return names[identifier]

    def beast_data(self, beast_id: int) -> Beast | None:
        return self.client.from_json(
            f"{self.base_url}/beastData.json?beastid={beast_id}", Beast.from_json
        )

    def search_by_terms(self, *terms: str) -> dict[int, str]:
        """Search beasts whose names contain all of ``terms``."""
        words = [term for term in terms if term and term.strip()]
        if not words:
            raise ValueError("At least one search term is required.")
        query = "+".join(quote_plus(word.strip()) for word in words)
        return self._search(f"{self.base_url}/beastSearch.json?term={query}")

    def search_by_first_letter(self, letter: str) -> dict[int, str]:
        if len(letter) != 1:
            raise ValueError("Letter must be a single character.")
        return self._search(f"{self.base_url}/bestiaryNames.json?letter={letter.upper()}")

    def area_names(self) -> tuple[str, ...]:
        return self.client.from_json(f"{self.base_url}/areaNames.json", parse_area_names) or ()

    def beasts_in_area(self, area: str) -> dict[int, str]:
        if not area:
            raise ValueError("Area must not be empty.")
        return self._search(f"{self.base_url}/areaBeasts.json?identifier={quote(area)}")

    def slayer_categories(self) -> dict[str, int]:
        return self._names("slayerCatNames.json")

    def beasts_in_slayer_category(self, category: int | str) -> dict[int, str]:
        """Beasts assigned by slayer masters under ``category`` (id or name)."""
        cid = self._resolve(category, "slayerCatNames.json", "slayer category")
        return self._search(f"{self.base_url}/slayerBeasts.json?identifier={cid}")

    def weaknesses(self) -> dict[str, int]:
        return self._names("weaknessNames.json")

    def beasts_weak_to(self, weakness: int | str) -> dict[int, str]:
        wid = self._resolve(weakness, "weaknessNames.json", "weakness")
        return self._search(f"{self.base_url}/weaknessBeasts.json?identifier={wid}")

    def beasts_in_level_group(self, lower: int, upper: int) -> dict[int, str]:
        if lower < 0 or upper < lower:
            raise ValueError("Level group must satisfy 0 <= lower <= upper.")
        return self._search(f"{self.base_url}/levelGroup.json?identifier={lower}-{upper}")
