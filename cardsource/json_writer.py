"""Persist decoded cards and skipped files as JSON files."""
from __future__ import annotations

import json
import pathlib
from typing import Iterable

from .models import Card
from .utils import ScanFailure, ensure_directory, get_logger, slugify

LOGGER = get_logger(__name__)

FAILURE_REPORT = "failures.json"


class JsonWriter:
    def __init__(self, output_dir: str | pathlib.Path) -> None:
        self.output_dir = ensure_directory(output_dir)

    def write(self, card: Card) -> pathlib.Path:
        filename = slugify(card.name)
        if not filename:
            filename = "card"
        output_path = self.output_dir / f"{filename}.json"
        self._dump(output_path, card.data)
        LOGGER.debug("Wrote %s", output_path)
        return output_path

    def write_failures(self, failures: Iterable[ScanFailure]) -> pathlib.Path:
        output_path = self.output_dir / FAILURE_REPORT
        self._dump(output_path, [failure.to_dict() for failure in failures])
        LOGGER.info("Wrote %s", output_path)
        return output_path

    def _dump(self, output_path: pathlib.Path, payload: object) -> None:
        with output_path.open("w", encoding="utf8") as handle:
            json.dump(payload, handle, indent=2, ensure_ascii=False)
            handle.write("\n")
