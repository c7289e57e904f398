"""Turn a card definition file into strict JSON text.

Card files are executable modules, not data: a single object literal is
exported with ``module.exports = { ... }`` and followed by the card's
functions. There is no parser for the surrounding language here, so the
literal is recovered with a fixed sequence of lexical rewrites:

1. strip ``//`` and ``/* */`` comments
2. trim the text
3. drop everything up to the first ``module.exports = ``
4. keep only what comes before the first blank line (the functions follow it)
5. close the literal after its trailing comma
6. double-quote the bare keys

Each stage assumes the previous ones already ran.
"""
from __future__ import annotations

import pathlib
import re
from dataclasses import dataclass, field
from typing import Optional

from .utils import NoBlankLineFound, NoExportFound

EXPORT_MARKER = "module.exports = "


@dataclass(frozen=True)
class ExtractorPatterns:
    """Compiled expressions used by :class:`Extractor`."""

    comment: re.Pattern[str] = field(
        default_factory=lambda: re.compile(r"//.*?$|/\*.*?\*/", re.MULTILINE | re.DOTALL)
    )
    blank_line: re.Pattern[str] = field(
        default_factory=lambda: re.compile(r"\r?\n\s*?\r?\n\s*?")
    )
    last_field: re.Pattern[str] = field(
        default_factory=lambda: re.compile(r",\r?\n\}$")
    )
    bare_key: re.Pattern[str] = field(
        default_factory=lambda: re.compile(r"^([ \t{]*)(\w+)(: .*)$", re.MULTILINE)
    )


class Extractor:
    """Normalize the exported object literal of a card file into JSON text."""

    def __init__(self, patterns: Optional[ExtractorPatterns] = None) -> None:
        self.patterns = patterns or ExtractorPatterns()

    def extract(self, raw: str, source: Optional[pathlib.Path] = None) -> str:
        """Return the normalized record for ``raw``.

        ``source`` is only used to tag errors with the offending file.
        """
        text = self.strip_comments(raw).strip()
        text = self.locate_export(text, source)
        text = self.truncate_at_blank_line(text, source)
        text = self.close_trailing_comma(text)
        return self.quote_keys(text)

    # ------------------------------------------------------------------
    def strip_comments(self, text: str) -> str:
        return self.patterns.comment.sub("", text)

    # ------------------------------------------------------------------
    def locate_export(self, text: str, source: Optional[pathlib.Path] = None) -> str:
        _, marker, remainder = text.partition(EXPORT_MARKER)
        if not marker:
            raise NoExportFound(f"'{EXPORT_MARKER.strip()}' not found", source)
        return remainder.replace(EXPORT_MARKER, "")

    # ------------------------------------------------------------------
    def truncate_at_blank_line(self, text: str, source: Optional[pathlib.Path] = None) -> str:
        parts = self.patterns.blank_line.split(text, maxsplit=1)
        if len(parts) < 2:
            raise NoBlankLineFound("no blank line after the exported object", source)
        return parts[0].strip()

    # ------------------------------------------------------------------
    def close_trailing_comma(self, text: str) -> str:
        if text.endswith(","):
            return text[:-1] + "\n}"
        return self.patterns.last_field.sub("\n}", text)

    # ------------------------------------------------------------------
    def quote_keys(self, text: str) -> str:
        return self.patterns.bare_key.sub(r'\1"\2"\3', text)
