"""Client for the RuneScape Grand Exchange, Bestiary and Hiscores web services."""

__all__ = [
    "Bestiary",
    "CATEGORIES",
    "Client",
    "GrandExchange",
    "HiscoreTable",
    "Hiscores",
    "HttpClient",
    "PayloadError",
    "RuneScapeAPI",
]

from .api import RuneScapeAPI
from .bestiary import Bestiary
from .client import Client, HttpClient, PayloadError
from .ge import CATEGORIES, GrandExchange
from .hiscores import HiscoreTable, Hiscores
