"""Command line entry point: ``python -m runescape_api``."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import re
import sys
from typing import Any, Mapping, Sequence

import requests

from runescape_api.api import RuneScapeAPI
from runescape_api.client import PayloadError
from runescape_api.config import config
from runescape_api.hiscores import HiscoreTable

logger = logging.getLogger("runescape_api")

EXIT_NOT_FOUND = 1
EXIT_USAGE = 2

_ID_PATTERN = re.compile(r"-?\d+")


def _category(value: str) -> int | str:
    return int(value) if _ID_PATTERN.fullmatch(value) else value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="runescape_api", description="Query the RuneScape web services."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    category = commands.add_parser("category", help="item counts per letter in a category")
    category.add_argument("category", type=_category, help="category id or name")

    prices = commands.add_parser("prices", help="one page of item prices in a category")
    prices.add_argument("category", type=_category, help="category id or name")
    prices.add_argument("prefix", help="first letter, or a number for a price bucket")
    prices.add_argument("--page", type=int, default=1)

    graph = commands.add_parser("graph", help="180 days of prices for an item")
    graph.add_argument("item_id", type=int)

    item = commands.add_parser("item", help="current price detail for an item")
    item.add_argument("item_id", type=int)

    beast = commands.add_parser("beast", help="bestiary entry for a beast")
    beast.add_argument("beast_id", type=int)

    player = commands.add_parser("player", help="hiscores for a player")
    player.add_argument("name")
    player.add_argument(
        "--table",
        choices=[table.name.lower() for table in HiscoreTable],
        default=HiscoreTable.DEFAULT.name.lower(),
    )

    clan = commands.add_parser("clan", help="members of a clan")
    clan.add_argument("name")

    return parser


def run_command(api: RuneScapeAPI, args: argparse.Namespace) -> Any:
    ge = api.grand_exchange
    if args.command == "category":
        return ge.category(args.category)
    if args.command == "prices":
        return ge.category_prices(args.category, args.prefix, args.page)
    if args.command == "graph":
        return ge.graphing_data(args.item_id)
    if args.command == "item":
        return ge.item_price_information(args.item_id)
    if args.command == "beast":
        return api.bestiary.beast_data(args.beast_id)
    if args.command == "player":
        return api.hiscores.player_information(args.name, HiscoreTable[args.table.upper()])
    if args.command == "clan":
        return api.hiscores.clan_information(args.name) or None
    raise ValueError(f"Unknown command: {args.command}")


def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value):
        return {f.name: _plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (tuple, list)):
        return [_plain(item) for item in value]
    return value


def to_json(result: Any) -> str:
    return json.dumps(_plain(result), indent=2, default=str)


def main(argv: Sequence[str] | None = None, api: RuneScapeAPI | None = None) -> int:
    """Main entry point."""
    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    errors = config.validate()
    if errors:
        for error in errors:
            logger.error(f"Config error: {error}")
        return EXIT_USAGE

    args = build_parser().parse_args(argv)
    api = api or RuneScapeAPI.create_http()

    try:
        result = run_command(api, args)
    except requests.RequestException as e:
        logger.error(f"Request failed: {e}")
        return EXIT_NOT_FOUND
    except PayloadError as e:
        logger.error(f"Unexpected response: {e}")
        return EXIT_NOT_FOUND
    except ValueError as e:
        logger.error(str(e))
        return EXIT_USAGE

    if result is None:
        print("not found")
        return EXIT_NOT_FOUND

    print(to_json(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
