"""Player and clan hiscores, served as CSV rather than JSON."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Sequence
from urllib.parse import quote

from runescape_api.client import Client, PayloadError
from runescape_api.config import config

logger = logging.getLogger(__name__)

# Row order of the index_lite.ws skill rows.
SKILLS: tuple[str, ...] = (
    "Overall",
    "Attack",
    "Defence",
    "Strength",
    "Constitution",
    "Ranged",
    "Prayer",
    "Magic",
    "Cooking",
    "Woodcutting",
    "Fletching",
    "Fishing",
    "Firemaking",
    "Crafting",
    "Smithing",
    "Mining",
    "Herblore",
    "Agility",
    "Thieving",
    "Slayer",
    "Farming",
    "Runecrafting",
    "Hunter",
    "Construction",
    "Summoning",
    "Dungeoneering",
    "Divination",
    "Invention",
    "Archaeology",
    "Necromancy",
)

UNRANKED = -1


class HiscoreTable(Enum):
    """Hiscore tables, valued by their web-service path segment."""

    DEFAULT = "hiscore"
    IRONMAN = "hiscore_ironman"
    HARDCORE_IRONMAN = "hiscore_hardcore_ironman"


@dataclass(frozen=True)
class Skill:
    rank: int
    level: int
    experience: int

    @property
    def ranked(self) -> bool:
        return self.rank != UNRANKED


@dataclass(frozen=True)
class Activity:
    rank: int
    score: int

    @property
    def ranked(self) -> bool:
        return self.rank != UNRANKED


@dataclass(frozen=True)
class Player:
    name: str
    skills: Mapping[str, Skill] = field(hash=False)
    activities: tuple[Activity, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "skills", MappingProxyType(dict(self.skills)))

    @classmethod
    def from_csv(cls, name: str, rows: Sequence[Sequence[str]]) -> "Player":
        if len(rows) < len(SKILLS):
            raise PayloadError(
                f"Expected at least {len(SKILLS)} hiscore rows, got {len(rows)}"
            )
        try:
            skills = {
                skill: Skill(rank=int(row[0]), level=int(row[1]), experience=int(row[2]))
                for skill, row in zip(SKILLS, rows)
            }
            activities = tuple(
                Activity(rank=int(row[0]), score=int(row[1])) for row in rows[len(SKILLS):]
            )
        except (IndexError, ValueError) as exc:
            raise PayloadError("Malformed hiscore row") from exc
        return cls(name=name, skills=skills, activities=activities)

    @property
    def total_level(self) -> int:
        return self.skills["Overall"].level


@dataclass(frozen=True)
class ClanMate:
    name: str
    rank: str
    experience: int
    kills: int

    @classmethod
    def from_row(cls, row: Sequence[str]) -> "ClanMate":
        try:
            return cls(
                name=row[0].replace("\xa0", " ").strip(),
                rank=row[1].strip(),
                experience=int(row[2]),
                kills=int(row[3]),
            )
        except (IndexError, ValueError) as exc:
            raise PayloadError("Malformed clan member row") from exc


class Hiscores:
    """Client for the Hiscores API.

    See https://runescape.wiki/w/Application_programming_interface#Hiscores_Lite
    """

    def __init__(self, client: Client, web_services_url: str | None = None) -> None:
        if client is None:
            raise ValueError("client is required")
        self.client = client
        self.base_url = (web_services_url or config.web_services_url).rstrip("/")

    def player_url(self, name: str, table: HiscoreTable = HiscoreTable.DEFAULT) -> str:
        if not name:
            raise ValueError("Player name must not be empty.")
        return f"{self.base_url}/m={table.value}/index_lite.ws?player={quote(name)}"

    def clan_url(self, clan: str) -> str:
        if not clan:
            raise ValueError("Clan name must not be empty.")
        return f"{self.base_url}/m=clan-hiscores/members_lite.ws?clanName={quote(clan)}"

    def player_information(
        self, name: str, table: HiscoreTable = HiscoreTable.DEFAULT
    ) -> Player | None:
        """Get a player's skills and activity scores, or ``None`` if not ranked."""
        rows = self.client.from_csv(self.player_url(name, table))
        if rows is None:
            return None
        return Player.from_csv(name, rows)

    def clan_information(self, clan: str) -> tuple[ClanMate, ...]:
        """Get the members of a clan. The first CSV row is a header."""
        rows = self.client.from_csv(self.clan_url(clan))
        if not rows:
            return ()
        members = tuple(ClanMate.from_row(row) for row in rows[1:])
        logger.debug(f"Clan {clan!r} has {len(members)} members")
        return members
