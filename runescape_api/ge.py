"""Grand Exchange catalogue, price and graph endpoints."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from runescape_api.client import Client, PayloadError
from runescape_api.config import config

logger = logging.getLogger(__name__)

# Index in this tuple is the category id used by the web service.
CATEGORIES: tuple[str, ...] = (
    "Miscellaneous",
    "Ammo",
    "Arrows",
    "Bolts",
    "Construction materials",
    "Construction projects",
    "Cooking ingredients",
    "Costumes",
    "Crafting materials",
    "Familiars",
    "Farming produce",  # 10
    "Fletching materials",
    "Food and drink",
    "Herblore materials",
    "Hunting equipment",
    "Hunting produce",
    "Jewellery",
    "Mage armour",
    "Mage weapons",
    "Melee armour - low level",
    "Melee armour - mid level",  # 20
    "Melee armour - high level",
    "Melee weapons - low level",
    "Melee weapons - mid level",
    "Melee weapons - high level",
    "Mining and smithing",
    "Potions",
    "Prayer armour",
    "Prayer materials",
    "Range armour",
    "Range weapons",  # 30
    "Runecrafting",
    "Runes, Spells and Teleports",
    "Seeds",
    "Summoning scrolls",
    "Tools and containers",
    "Woodcutting product",
    "Pocket items",
    "Stone spirits",
    "Salvage",
)

_INTEGER_PATTERN = re.compile(r"-?\d+")

# Integer prefixes outside the 32-bit range are sent as plain text.
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def as_bool(value: Any) -> bool:
    """Coerce a flag the service may send as ``"true"``/``"false"``."""
    if isinstance(value, str):
        return value.lower() == "true"
    return bool(value)


@dataclass(frozen=True)
class CategoryAlpha:
    """Number of items in a category whose name starts with ``letter``."""

    letter: str
    items: int


@dataclass(frozen=True)
class Category:
    alpha: tuple[CategoryAlpha, ...]

    @classmethod
    def from_json(cls, data: Any) -> "Category":
        try:
            alpha = tuple(
                CategoryAlpha(letter=str(entry["letter"]), items=int(entry["items"]))
                for entry in data["alpha"]
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise PayloadError("Category payload missing required fields") from exc
        return cls(alpha=alpha)

    def items_starting_with(self, letter: str) -> int:
        for entry in self.alpha:
            if entry.letter == letter:
                return entry.items
        return 0


@dataclass(frozen=True)
class PriceTrend:
    """A price with its trend. Prices may be abbreviated strings such as ``"1.2k"``."""

    trend: str
    price: int | str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "PriceTrend":
        return cls(trend=str(data["trend"]), price=data["price"])


@dataclass(frozen=True)
class PriceChange:
    trend: str
    change: str

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "PriceChange":
        return cls(trend=str(data["trend"]), change=str(data["change"]))


@dataclass(frozen=True)
class Item:
    id: int
    name: str
    description: str
    type: str
    icon: str
    icon_large: str
    type_icon: str
    members: bool
    current: PriceTrend
    today: PriceTrend

    @staticmethod
    def _fields(data: Mapping[str, Any]) -> dict[str, Any]:
        return {
            "id": int(data["id"]),
            "name": str(data["name"]),
            "description": str(data.get("description", "")),
            "type": str(data.get("type", "")),
            "icon": str(data.get("icon", "")),
            "icon_large": str(data.get("icon_large", "")),
            "type_icon": str(data.get("typeIcon", "")),
            "members": as_bool(data.get("members", False)),
            "current": PriceTrend.from_json(data["current"]),
            "today": PriceTrend.from_json(data["today"]),
        }

    @classmethod
    def from_json(cls, data: Any) -> "Item":
        try:
            return cls(**cls._fields(data))
        except (KeyError, TypeError, ValueError) as exc:
            raise PayloadError("Item payload missing required fields") from exc


@dataclass(frozen=True)
class CategoryPrices:
    """One page of items in a category, filtered by prefix or price bucket."""

    total: int
    items: tuple[Item, ...]

    @classmethod
    def from_json(cls, data: Any) -> "CategoryPrices":
        try:
            total = int(data["total"])
            items = tuple(Item.from_json(entry) for entry in data["items"])
        except (KeyError, TypeError, ValueError) as exc:
            raise PayloadError("Category prices payload missing required fields") from exc
        return cls(total=total, items=items)


@dataclass(frozen=True)
class GraphingData:
    """Historical prices keyed by epoch milliseconds."""

    daily: Mapping[int, int] = field(hash=False)
    average: Mapping[int, int] = field(hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "daily", MappingProxyType(dict(self.daily)))
        object.__setattr__(self, "average", MappingProxyType(dict(self.average)))

    @classmethod
    def from_json(cls, data: Any) -> "GraphingData":
        try:
            daily = {int(k): int(v) for k, v in data["daily"].items()}
            average = {int(k): int(v) for k, v in data["average"].items()}
        except (KeyError, TypeError, ValueError, AttributeError) as exc:
            raise PayloadError("Graph payload missing required fields") from exc
        return cls(daily=daily, average=average)

    def latest_price(self) -> int | None:
        if not self.daily:
            return None
        return self.daily[max(self.daily)]


@dataclass(frozen=True)
class ItemDetail(Item):
    day30: PriceChange
    day90: PriceChange
    day180: PriceChange

    @classmethod
    def from_json(cls, data: Any) -> "ItemDetail":
        try:
            return cls(
                **cls._fields(data),
                day30=PriceChange.from_json(data["day30"]),
                day90=PriceChange.from_json(data["day90"]),
                day180=PriceChange.from_json(data["day180"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise PayloadError("Item detail payload missing required fields") from exc


@dataclass(frozen=True)
class ItemPriceInformation:
    item: ItemDetail

    @classmethod
    def from_json(cls, data: Any) -> "ItemPriceInformation":
        try:
            item = data["item"]
        except (KeyError, TypeError) as exc:
            raise PayloadError("Item price payload missing 'item'") from exc
        return cls(item=ItemDetail.from_json(item))


def category_id(category: int | str) -> int:
    """Resolve a category id or name to a validated id.

    Raises:
        ValueError: if the id is out of range or the name is unknown.
    """

    if isinstance(category, bool) or not isinstance(category, (int, str)):
        raise ValueError(f"Category must be an id or a name, not {category!r}")
    if isinstance(category, str):
        try:
            return CATEGORIES.index(category)
        except ValueError:
            raise ValueError(f"Unknown category name: {category!r}") from None

    if not 0 <= category < len(CATEGORIES):
        raise ValueError(
            f"Category id must be between 0 and {len(CATEGORIES) - 1} inclusive."
        )
    return category


def alpha_token(prefix: str) -> str:
    """Map an item prefix to the ``alpha`` query value.

    Integer prefixes within 32-bit range select a price percentage bucket
    and become ``%N``; anything else is sent as is.
    """

    if not prefix:
        raise ValueError("Prefix must be at least 1 character long.")
    if _INTEGER_PATTERN.fullmatch(prefix):
        bucket = int(prefix)
        if INT_MIN <= bucket <= INT_MAX:
            return f"%{bucket}"
    return prefix


class GrandExchange:
    """Client for the Grand Exchange API.

    See https://runescape.wiki/w/Application_programming_interface#Grand_Exchange_Database_API
    """

    def __init__(self, client: Client, web_services_url: str | None = None) -> None:
        if client is None:
            raise ValueError("client is required")
        self.client = client
        base = (web_services_url or config.web_services_url).rstrip("/")
        self.base_url = f"{base}/m=itemdb_rs/api"

    def category_url(self, category: int | str) -> str:
        return f"{self.base_url}/catalogue/category.json?category={category_id(category)}"

    def category_prices_url(self, category: int | str, prefix: str, page: int) -> str:
        cid = category_id(category)
        alpha = alpha_token(prefix)
        return f"{self.base_url}/catalogue/items.json?category={cid}&alpha={alpha}&page={page}"

    def graph_url(self, item_id: int) -> str:
        return f"{self.base_url}/graph/{item_id}.json"

    def detail_url(self, item_id: int) -> str:
        return f"{self.base_url}/catalogue/detail.json?item={item_id}"

    def category(self, category: int | str) -> Category | None:
        """Get a category by its id or name.

        Returns:
            The category, or ``None`` if the service has no data for it.

        Raises:
            ValueError: if the id is out of range or the name is unknown.
        """
        return self.client.from_json(self.category_url(category), Category.from_json)

    def category_prices(
        self, category: int | str, prefix: str, page: int = 1
    ) -> CategoryPrices | None:
        """Get a page of items in a category starting with ``prefix``.

        A numeric ``prefix`` selects a price percentage bucket instead.

        Raises:
            ValueError: on a bad category or an empty prefix.
        """
        url = self.category_prices_url(category, prefix, page)
        return self.client.from_json(url, CategoryPrices.from_json)

    def graphing_data(self, item_id: int) -> GraphingData | None:
        return self.client.from_json(self.graph_url(item_id), GraphingData.from_json)

    def item_price_information(self, item_id: int) -> ItemPriceInformation | None:
        return self.client.from_json(self.detail_url(item_id), ItemPriceInformation.from_json)
