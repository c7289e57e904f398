"""Load every card definition below a cards directory.

Per-file problems (undecodable text, no export, no blank line, invalid JSON after
normalization, missing name) are logged and collected as
:class:`~cardsource.utils.ScanFailure` entries so a single malformed file does
not hide the rest of the catalog. ``strict`` turns the first such problem
into a :class:`~cardsource.utils.RepositoryError`. I/O errors are never
collected: they abort the scan as raised.
"""
from __future__ import annotations

import json
import os
import pathlib
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

from pydantic import ValidationError

from .extractor import Extractor
from .models import Card
from .utils import (
    ExtractionError,
    MalformedAfterNormalization,
    MissingCardName,
    RepositoryError,
    ScanFailure,
    UnreadableCardFile,
    get_logger,
)

LOGGER = get_logger(__name__)

DEFAULT_CARDS_ROOT = pathlib.Path("..") / "cards"


@dataclass
class RepositoryConfig:
    """Configuration values for :class:`CardRepository`."""

    cards_root: pathlib.Path = DEFAULT_CARDS_ROOT
    extensions: Tuple[str, ...] = (".js",)
    excluded_dirs: Tuple[str, ...] = ("Tests", "Examples")
    strict: bool = False
    workers: int = 1


@dataclass
class ScanResult:
    """Cards loaded by a scan, in traversal order, plus the skipped files."""

    cards: List[Card] = field(default_factory=list)
    failures: List[ScanFailure] = field(default_factory=list)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __len__(self) -> int:
        return len(self.cards)


class CardRepository:
    def __init__(
        self,
        config: Optional[RepositoryConfig] = None,
        extractor: Optional[Extractor] = None,
    ) -> None:
        self.config = config or RepositoryConfig()
        self.extractor = extractor or Extractor()

    # ------------------------------------------------------------------
    def iter_source_files(self) -> Iterator[pathlib.Path]:
        root = pathlib.Path(self.config.cards_root)
        if not root.is_dir():
            raise FileNotFoundError(root)

        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            if path.suffix not in self.config.extensions:
                continue
            parents = path.relative_to(root).parts[:-1]
            if any(part in self.config.excluded_dirs for part in parents):
                continue
            yield path

    # ------------------------------------------------------------------
    def load_card(self, path: pathlib.Path) -> Card:
        """Read, normalize and decode a single card file."""
        LOGGER.debug("Reading %s", path)
        try:
            raw = path.read_text(encoding="utf8")
        except UnicodeDecodeError as error:
            raise UnreadableCardFile(f"not valid UTF-8: {error}", path) from error
        record = self.extractor.extract(raw, source=path)

        try:
            decoded = json.loads(record)
        except json.JSONDecodeError as error:
            raise MalformedAfterNormalization(f"invalid JSON after normalization: {error}", path) from error
        if not isinstance(decoded, dict):
            raise MalformedAfterNormalization(
                f"expected an object, got {type(decoded).__name__}", path
            )

        try:
            return Card.from_mapping(decoded, source=path)
        except ValidationError as error:
            raise MissingCardName("card has no string 'name' field", path) from error

    # ------------------------------------------------------------------
    def load_all(self) -> ScanResult:
        paths = list(self.iter_source_files())

        if self.config.workers > 1:
            with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
                outcomes = list(executor.map(self._load_outcome, paths))
        else:
            outcomes = [self._load_outcome(path) for path in paths]

        result = ScanResult()
        for path, outcome in zip(paths, outcomes):
            if isinstance(outcome, Card):
                result.cards.append(outcome)
                continue
            if self.config.strict:
                raise RepositoryError(f"Scan aborted: {outcome}") from outcome
            LOGGER.warning("Skipping %s: %s", path, outcome)
            result.failures.append(ScanFailure.from_error(path, outcome))

        LOGGER.info(
            "Loaded %d cards from %s (%d skipped)",
            len(result.cards),
            self.config.cards_root,
            len(result.failures),
        )
        return result

    def _load_outcome(self, path: pathlib.Path) -> Union[Card, ExtractionError]:
        try:
            return self.load_card(path)
        except ExtractionError as error:
            return error


def load_all(
    root: str | os.PathLike[str],
    *,
    strict: bool = False,
    workers: int = 1,
) -> ScanResult:
    """Scan ``root`` with the default extensions and exclusions."""
    config = RepositoryConfig(cards_root=pathlib.Path(root), strict=strict, workers=workers)
    return CardRepository(config).load_all()
