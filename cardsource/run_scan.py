"""Command line entry point for the card catalog scanner."""
from __future__ import annotations

import argparse
import pathlib
from typing import Iterable, Optional

from .json_writer import JsonWriter
from .repository import DEFAULT_CARDS_ROOT, CardRepository, RepositoryConfig, ScanResult
from .utils import get_logger

LOGGER = get_logger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--root",
        default=str(DEFAULT_CARDS_ROOT),
        help="Directory containing the card definition files",
    )
    parser.add_argument(
        "--output",
        help="Optional directory for one JSON file per card plus a failure report",
    )
    parser.add_argument(
        "--strict", action="store_true", help="Abort on the first card file that cannot be read"
    )
    parser.add_argument(
        "--workers", type=int, default=1, help="Number of threads used to read card files"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def export_catalog(result: ScanResult, output_dir: str | pathlib.Path) -> JsonWriter:
    writer = JsonWriter(output_dir)
    for card in result.cards:
        writer.write(card)
    writer.write_failures(result.failures)
    return writer


def run_cli(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        for name in ("cardsource.repository", "cardsource.json_writer", __name__):
            get_logger(name).setLevel("DEBUG")

    config = RepositoryConfig(
        cards_root=pathlib.Path(args.root),
        strict=args.strict,
        workers=max(1, args.workers),
    )
    result = CardRepository(config).load_all()

    for failure in result.failures:
        LOGGER.info("  %s [%s] %s", failure.path, failure.stage, failure.message)

    if args.output:
        export_catalog(result, args.output)
        LOGGER.info("Wrote %d cards to %s", len(result.cards), args.output)


if __name__ == "__main__":  # pragma: no cover
    run_cli()
