"""Class picker built on the card definition catalog."""

from .models import RUNE_CLASSES, RUNE_COUNT, RUNE_NAMES, Selection, format_runes
from .query import (
    STARTING_HERO_SUFFIX,
    SearchError,
    cards_for_class,
    filter_cards,
    filter_collectible,
    filter_uncollectible,
    find_classes,
    runes_satisfied,
    search_cards,
    sort_cards,
)
from .session import (
    SelectionSession,
    SessionError,
    SessionErrorKind,
    SessionState,
    capitalize_words,
    pick_class,
)
from .terminal import ConsoleTerminal
from .cli import main

__all__ = [
    "RUNE_CLASSES",
    "RUNE_COUNT",
    "RUNE_NAMES",
    "Selection",
    "format_runes",
    "STARTING_HERO_SUFFIX",
    "SearchError",
    "cards_for_class",
    "filter_cards",
    "filter_collectible",
    "filter_uncollectible",
    "find_classes",
    "runes_satisfied",
    "search_cards",
    "sort_cards",
    "SelectionSession",
    "SessionError",
    "SessionErrorKind",
    "SessionState",
    "capitalize_words",
    "pick_class",
    "ConsoleTerminal",
    "main",
]
