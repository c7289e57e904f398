"""Card definition extraction package."""

from .extractor import EXPORT_MARKER, Extractor, ExtractorPatterns
from .json_writer import JsonWriter
from .models import Card
from .repository import CardRepository, RepositoryConfig, ScanResult, load_all
from .run_scan import run_cli
from .utils import (
    ExtractionError,
    MalformedAfterNormalization,
    MissingCardName,
    NoBlankLineFound,
    NoExportFound,
    PipelineError,
    RepositoryError,
    ScanFailure,
    UnreadableCardFile,
)

__all__ = [
    "EXPORT_MARKER",
    "Extractor",
    "ExtractorPatterns",
    "JsonWriter",
    "Card",
    "CardRepository",
    "RepositoryConfig",
    "ScanResult",
    "load_all",
    "run_cli",
    "ExtractionError",
    "MalformedAfterNormalization",
    "MissingCardName",
    "NoBlankLineFound",
    "NoExportFound",
    "PipelineError",
    "RepositoryError",
    "ScanFailure",
    "UnreadableCardFile",
]
