"""Entry point aggregating the Grand Exchange, Bestiary and Hiscores clients."""

from __future__ import annotations

from runescape_api.bestiary import Bestiary
from runescape_api.client import Client, HttpClient
from runescape_api.ge import GrandExchange
from runescape_api.hiscores import Hiscores


class RuneScapeAPI:
    """An instance of the RuneScape web-services API backed by one ``Client``."""

    def __init__(self, client: Client) -> None:
        self._bestiary = Bestiary(client)
        self._grand_exchange = GrandExchange(client)
        self._hiscores = Hiscores(client)

    @classmethod
    def create(cls, client: Client) -> "RuneScapeAPI":
        return cls(client)

    @classmethod
    def create_http(cls) -> "RuneScapeAPI":
        """Create an API backed by ``requests`` with the configured timeout."""
        return cls(HttpClient())

    @property
    def bestiary(self) -> Bestiary:
        return self._bestiary

    @property
    def grand_exchange(self) -> GrandExchange:
        return self._grand_exchange

    @property
    def hiscores(self) -> Hiscores:
        return self._hiscores
