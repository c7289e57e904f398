#!/usr/bin/env python3
"""Command-line interface for browsing card classes and picking one."""

import json
import logging
import os
from pathlib import Path
from typing import List, Optional

import typer

from cardsource.extractor import Extractor
from cardsource.repository import DEFAULT_CARDS_ROOT, CardRepository, RepositoryConfig, ScanResult
from cardsource.utils import ExtractionError, RepositoryError

from .query import SearchError, cards_for_class, filter_collectible, find_classes, search_cards, sort_cards
from .session import SelectionSession, SessionError
from .terminal import ConsoleTerminal

ROOT_ENV_VAR = "DECKPICKER_CARDS_ROOT"

app = typer.Typer(help="Pick a class from the card definition files.", no_args_is_help=True)


def resolve_cards_root(root: Optional[Path]) -> Path:
    """Use ``--root``, then ``$DECKPICKER_CARDS_ROOT``, then ``../cards``."""
    if root is not None:
        return root.expanduser()
    env_root = os.environ.get(ROOT_ENV_VAR)
    if env_root:
        return Path(env_root).expanduser()
    return DEFAULT_CARDS_ROOT


def _set_verbose(verbose: bool) -> None:
    if verbose:
        for name in ("cardsource.repository", "deckpicker.session", "deckpicker.query"):
            logging.getLogger(name).setLevel(logging.DEBUG)


def _load_catalog(root: Optional[Path], strict: bool, workers: int) -> ScanResult:
    cards_root = resolve_cards_root(root)
    if not cards_root.is_dir():
        typer.echo(f"Cards directory not found: {cards_root}")
        raise typer.Exit(code=1)

    config = RepositoryConfig(cards_root=cards_root, strict=strict, workers=max(1, workers))
    try:
        result = CardRepository(config).load_all()
    except RepositoryError as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(code=1)

    for failure in result.failures:
        typer.echo(f"  Skipped {failure.path} [{failure.stage}]: {failure.message}")
    return result


def _root_option():
    return typer.Option(None, "--root", help="Directory containing the card definition files.")


def _strict_option():
    return typer.Option(
        False, "--strict", help="Abort on the first card file that cannot be read.", show_default=False
    )


def _workers_option():
    return typer.Option(1, "--workers", help="Number of threads used to read card files.")


def _verbose_option():
    return typer.Option(False, "--verbose", help="Enable debug logging.", show_default=False)


@app.command()
def classes(
    root: Optional[Path] = _root_option(),
    strict: bool = _strict_option(),
    workers: int = _workers_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """List the classes that have a starting hero."""
    _set_verbose(verbose)
    result = _load_catalog(root, strict, workers)
    for name in find_classes(result.cards):
        typer.echo(name)


@app.command()
def pick(
    root: Optional[Path] = _root_option(),
    strict: bool = _strict_option(),
    workers: int = _workers_option(),
    reprompt: bool = typer.Option(
        False, "--reprompt", help="Ask again instead of stopping on an invalid answer.", show_default=False
    ),
    strict_runes: bool = typer.Option(
        False, "--strict-runes", help="Only accept Blood, Frost or Unholy runes.", show_default=False
    ),
    verbose: bool = _verbose_option(),
) -> None:
    """Choose a class and, for Death Knights, three runes."""
    _set_verbose(verbose)
    result = _load_catalog(root, strict, workers)
    known = find_classes(result.cards)
    if not known:
        typer.echo("No starting heroes found; there is no class to choose.")
        raise typer.Exit(code=1)

    session = SelectionSession(known, ConsoleTerminal(), reprompt=reprompt, strict_runes=strict_runes)
    try:
        selection = session.run()
    except SessionError as exc:
        typer.echo(f"Invalid choice: {exc}")
        raise typer.Exit(code=1)
    except EOFError:
        typer.echo("\nNo answer given.")
        raise typer.Exit(code=1)

    typer.echo(f"Class: {selection.player_class}")
    if selection.has_runes:
        typer.echo(f"Runes: {selection.runes}")
    typer.echo(f"Selected: {selection.describe()}")


@app.command()
def cards(
    player_class: str = typer.Argument(..., help="Class whose cards to list."),
    runes: str = typer.Option("", "--runes", help="Runes chosen for the deck, e.g. BFU."),
    search: Optional[List[str]] = typer.Option(
        None, "--search", "-s", help="Search query such as 'mana:1-3' or 'fire'. Repeatable."
    ),
    sort: str = typer.Option("rarity", "--sort", help="rarity, name, type, mana or id."),
    order: str = typer.Option("asc", "--order", help="asc or desc."),
    include_uncollectible: bool = typer.Option(
        False, "--include-uncollectible", help="Also list uncollectible cards.", show_default=False
    ),
    root: Optional[Path] = _root_option(),
    strict: bool = _strict_option(),
    workers: int = _workers_option(),
    verbose: bool = _verbose_option(),
) -> None:
    """List the cards available to a class."""
    _set_verbose(verbose)
    result = _load_catalog(root, strict, workers)

    pool = result.cards if include_uncollectible else filter_collectible(result.cards)
    selected = cards_for_class(pool, player_class, runes)
    for query in search or []:
        try:
            selected = search_cards(selected, query)
        except SearchError as exc:
            typer.echo(f"Search failed at '{query}': {exc}")
            raise typer.Exit(code=1)

    if not selected:
        typer.echo("No cards match search.")
        return

    for card in sort_cards(selected, sort, order):
        typer.echo(f"{{{card.cost}}} {card.display_name} ({card.card_type}) - {card.get('id', '?')}")


@app.command()
def extract(
    path: Path = typer.Argument(..., help="Card definition file to normalize."),
    decode: bool = typer.Option(
        False, "--decode", help="Decode the record and pretty-print it.", show_default=False
    ),
) -> None:
    """Print the JSON record extracted from one card file."""
    target = path.expanduser()
    if not target.is_file():
        raise typer.BadParameter(f"Path not found: {target}", param_name="path")

    try:
        raw = target.read_text(encoding="utf8")
    except UnicodeDecodeError as exc:
        typer.echo(f"ERROR: {target} [read] not valid UTF-8: {exc}")
        raise typer.Exit(code=1)

    try:
        record = Extractor().extract(raw, source=target)
    except ExtractionError as exc:
        typer.echo(f"ERROR: {exc}")
        raise typer.Exit(code=1)

    if not decode:
        typer.echo(record)
        return

    try:
        payload = json.loads(record)
    except json.JSONDecodeError as exc:
        typer.echo(f"ERROR: {target} [decode] {exc}")
        raise typer.Exit(code=1)
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def main() -> None:
    app()


if __name__ == "__main__":
    main()
