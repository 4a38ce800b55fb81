"""
Command-line interface for the card collection.

Usage:
    cardledger init
    cardledger add json --filename lob.json
    cardledger add rarity "Prismatic Secret Rare"
    cardledger add card-type "Flip Monster"
    cardledger list serie --name "Legend of Blue Eyes White Dragon" --hide-collected
    cardledger collect --id LOB-001 LOB-005-010 --count 2
    cardledger sell --id LOB-001
    cardledger find cards --query dragon
    cardledger find serie --query "legend of blue eyes white dragon"
"""

import argparse
import asyncio
import logging
import sys
import webbrowser
from collections.abc import Awaitable, Callable
from pathlib import Path

from cardledger.config import LOG_FORMAT, settings, sqlite_url
from cardledger.db.store import CardStore
from cardledger.models.card import Card, CardDetails, Series
from cardledger.models.commands import AddKind, FindKind, ListKind
from cardledger.models.errors import StoreError
from cardledger.parsers.card_number import is_card_range, split_card_number
from cardledger.parsers.series_file import SeriesFileError, load_series_file
from cardledger.services.formatting import format_card, format_series, series_wiki_url

logger = logging.getLogger(__name__)

Handler = Callable[[CardStore, argparse.Namespace], Awaitable[None]]


class CommandError(Exception):
    """Raised when a command is missing an argument it needs."""

    pass


def _ask(prompt: str) -> str:
    return input(prompt).strip()


def _ask_int(prompt: str) -> int:
    value = _ask(prompt)
    try:
        return int(value)
    except ValueError:
        return 0


def _print_cards(cards: list[CardDetails], template: str, *, hide_collected: bool = False) -> None:
    shown = 0
    for details in cards:
        if hide_collected and details.card.in_collection > 0:
            continue
        print(format_card(details, template))
        shown += 1
    if shown == 0:
        print("No cards found")


# --- add ---


async def _add_series(store: CardStore, _args: argparse.Namespace) -> None:
    series = Series(
        name=_ask("Enter series name: "),
        release_date=_ask("Enter release date (e.g. September 5, 2025): "),
        n_cards=_ask_int("Enter number of cards: "),
        prefix=_ask("Enter series prefix (e.g. LOB, optional): ") or None,
    )
    series_id = await store.insert_series(series)
    print(f"Inserted series with ID {series_id}")


async def _add_card(store: CardStore, _args: argparse.Namespace) -> None:
    name = _ask("Enter card name: ")
    number = _ask("Enter card number (e.g. LOB-EN000): ")
    series = await store.get_series_by_name(_ask("Enter series name: "))
    rarity_id = await store.get_rarity_id(_ask("Enter rarity (e.g. Ultra Rare): "))
    card_type_id = await store.get_card_type_id(_ask("Enter card type (e.g. Effect Monster): "))

    _, collection_number = split_card_number(number)
    card_id = await store.insert_card(
        Card(
            name=name,
            number=number,
            series_id=series.id or 0,
            rarity_id=rarity_id,
            card_type_id=card_type_id,
            collection_number=collection_number,
        )
    )
    if card_id:
        print(f"Inserted card with ID {card_id}")
    else:
        print(f"Card '{number}' already exists, nothing inserted")


async def _add_json(store: CardStore, args: argparse.Namespace) -> None:
    if args.filename is None:
        raise CommandError("--filename is required for add json")

    series_file = load_series_file(args.filename)
    result = await store.import_series(series_file)
    print(f"Inserted {result.inserted} of {result.total} cards")


async def _add_rarity(store: CardStore, args: argparse.Namespace) -> None:
    if not args.name:
        raise CommandError("a rarity name is required for add rarity")

    await store.insert_rarity(args.name)
    print(f"Inserted rarity '{args.name}'")


async def _add_card_type(store: CardStore, args: argparse.Namespace) -> None:
    if not args.name:
        raise CommandError("a label like 'Effect Monster' is required for add card-type")

    try:
        card_type = await store.insert_card_type_label(args.name)
    except ValueError as e:
        raise CommandError(str(e)) from e
    print(f"Inserted card type '{card_type.display()}'")


ADD_HANDLERS: dict[AddKind, Handler] = {
    AddKind.SERIES: _add_series,
    AddKind.CARD: _add_card,
    AddKind.JSON: _add_json,
    AddKind.RARITY: _add_rarity,
    AddKind.CARD_TYPE: _add_card_type,
}


# --- list ---


async def _list_cards(store: CardStore, args: argparse.Namespace) -> None:
    cards = await store.get_cards()
    _print_cards(cards, args.formatter, hide_collected=args.hide_collected)


async def _list_serie(store: CardStore, args: argparse.Namespace) -> None:
    if not args.name:
        raise CommandError("--name is required for list serie")

    cards = await store.get_cards_by_series_name(args.name)
    _print_cards(cards, args.formatter, hide_collected=args.hide_collected)


async def _list_series(store: CardStore, _args: argparse.Namespace) -> None:
    series_list = await store.get_unique_series()
    if not series_list:
        print("No series in current database")
    for position, series in enumerate(series_list, start=1):
        print(format_series(series, position))


async def _list_rarities(store: CardStore, _args: argparse.Namespace) -> None:
    for rarity in await store.get_rarities():
        print(f"{rarity.id}. {rarity.name}")


async def _list_card_types(store: CardStore, _args: argparse.Namespace) -> None:
    for card_type in await store.get_card_types():
        print(f"{card_type.id}. {card_type.display()}")


LIST_HANDLERS: dict[ListKind, Handler] = {
    ListKind.CARDS: _list_cards,
    ListKind.SERIE: _list_serie,
    ListKind.SERIES: _list_series,
    ListKind.RARITIES: _list_rarities,
    ListKind.CARD_TYPES: _list_card_types,
}


# --- find ---


async def _find_cards(store: CardStore, args: argparse.Namespace) -> None:
    cards = await store.get_cards(args.query)
    _print_cards(cards, args.formatter)


async def _find_serie(_store: CardStore, args: argparse.Namespace) -> None:
    if not args.query:
        raise CommandError("--query is required for find serie")

    url = series_wiki_url(args.query, settings.wiki_base_url)
    print(f"Opening {url}")
    webbrowser.open(url)


FIND_HANDLERS: dict[FindKind, Handler] = {
    FindKind.CARDS: _find_cards,
    FindKind.SERIE: _find_serie,
}


# --- commands ---


async def _init(_store: CardStore, _args: argparse.Namespace) -> None:
    # Opening the store already created the tables and reference data
    print("Initialized tables in database")


async def _add(store: CardStore, args: argparse.Namespace) -> None:
    await ADD_HANDLERS[AddKind(args.kind)](store, args)


async def _list(store: CardStore, args: argparse.Namespace) -> None:
    await LIST_HANDLERS[ListKind(args.kind)](store, args)


async def _find(store: CardStore, args: argparse.Namespace) -> None:
    await FIND_HANDLERS[FindKind(args.kind)](store, args)


def _describe(identifier: str, count: int) -> str:
    if is_card_range(identifier):
        return f"Cards in range '{identifier}' now have {count} copies in collection."
    return f"Card '{identifier}' now has {count} copies in collection."


async def _collect(store: CardStore, args: argparse.Namespace) -> None:
    for identifier in args.id:
        count = await store.collect_card(identifier, args.count)
        print(_describe(identifier, count))


async def _sell(store: CardStore, args: argparse.Namespace) -> None:
    for identifier in args.id:
        count = await store.sell_card(identifier, args.count)
        print(_describe(identifier, count))


COMMAND_HANDLERS: dict[str, Handler] = {
    "init": _init,
    "add": _add,
    "list": _list,
    "collect": _collect,
    "sell": _sell,
    "find": _find,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all commands."""
    parser = argparse.ArgumentParser(prog="cardledger", description="Card collection database")
    parser.add_argument(
        "--database",
        type=Path,
        default=None,
        help="SQLite database file (default: DATABASE_URL setting)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("init", help="Create tables and standard rarities/card types")

    add = commands.add_parser("add", help="Add series, cards, rarities or card types")
    add.add_argument("kind", choices=[kind.value for kind in AddKind])
    add.add_argument("name", nargs="?", help="Name for add rarity, label for add card-type")
    add.add_argument("-f", "--filename", type=Path, help="Series file for add json")

    list_ = commands.add_parser("list", help="List cards, series, rarities or card types")
    list_.add_argument("kind", choices=[kind.value for kind in ListKind])
    list_.add_argument("--name", help="Series name for list serie")
    list_.add_argument(
        "--hide-collected",
        action="store_true",
        help="Hide cards that are already in the collection",
    )
    list_.add_argument(
        "--formatter",
        default=settings.default_formatter,
        help=(
            "Card output template. Placeholders: {name} {number} {collection_number} "
            "{rarity} {series} {card_type} {in_collection}"
        ),
    )

    for command, verb in (("collect", "Add"), ("sell", "Remove")):
        sub = commands.add_parser(command, help=f"{verb} owned copies of cards")
        sub.add_argument(
            "--id",
            nargs="+",
            required=True,
            help="Card numbers or ranges (e.g. LOB-001 LOB-005-010)",
        )
        sub.add_argument("--count", type=int, default=None, help="Copies per card (default: 1)")

    find = commands.add_parser("find", help="Search cards or open a series wiki page")
    find.add_argument("kind", choices=[kind.value for kind in FindKind])
    find.add_argument("--query", help="Card name substring or series name")
    find.add_argument("--formatter", default=settings.default_formatter, help="Card template")

    return parser


async def run(args: argparse.Namespace) -> None:
    """Open the store and run the parsed command."""
    database_url = sqlite_url(args.database) if args.database else settings.database_url
    async with CardStore(database_url, echo=settings.debug) as store:
        await COMMAND_HANDLERS[args.command](store, args)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    try:
        asyncio.run(run(args))
    except StoreError as e:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error [{e.kind.value}]: {e.message}", file=sys.stderr)
        return 1
    except (SeriesFileError, CommandError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
