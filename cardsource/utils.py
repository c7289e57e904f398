"""Logging, filesystem helpers and the error types shared by the card scan."""
from __future__ import annotations

import logging
import os
import pathlib
import re
from dataclasses import dataclass
from typing import Optional

LOGGER_NAME = "cardsource"

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return ``name``'s logger, giving it a stderr handler at INFO on first use."""
    logger = logging.getLogger(name or LOGGER_NAME)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    return logger


def ensure_directory(path: str | os.PathLike[str]) -> pathlib.Path:
    """Make sure the export directory exists."""
    directory = pathlib.Path(path)
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def slugify(value: str) -> str:
    """``"Mage Starting Hero"`` -> ``"Mage_Starting_Hero"``, usable as a file name."""
    slug = re.sub(r"\s+", "_", value.strip())
    slug = re.sub(r"[^0-9A-Za-z_\-]", "", slug)
    return re.sub(r"_+", "_", slug)


class PipelineError(RuntimeError):
    """Raised when the pipeline encounters an unrecoverable error."""


class ExtractionError(PipelineError):
    """A single card file could not be turned into a card.

    ``stage`` names the step that failed so a bad file can be diagnosed
    without re-reading it.
    """

    stage = "extract"

    def __init__(self, message: str, path: Optional[pathlib.Path] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return f"[{self.stage}] {self.message}"
        return f"{self.path} [{self.stage}] {self.message}"


class UnreadableCardFile(ExtractionError):
    stage = "read"


class NoExportFound(ExtractionError):
    stage = "export"


class NoBlankLineFound(ExtractionError):
    stage = "truncate"


class MalformedAfterNormalization(ExtractionError):
    stage = "decode"


class MissingCardName(ExtractionError):
    stage = "validate"


class RepositoryError(PipelineError):
    """Raised when a strict scan stops at the first bad card file."""


@dataclass
class ScanFailure:
    """A card file that was skipped during a scan."""

    path: pathlib.Path
    stage: str
    message: str

    @classmethod
    def from_error(cls, path: pathlib.Path, error: ExtractionError) -> "ScanFailure":
        return cls(path=path, stage=error.stage, message=error.message)

    def to_dict(self) -> dict:
        return {"path": str(self.path), "stage": self.stage, "message": self.message}
