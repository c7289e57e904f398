import re
from collections import Counter
from typing import Callable, Iterable, List, Sequence

from cardsource.models import Card
from cardsource.utils import get_logger

LOGGER = get_logger(__name__)

STARTING_HERO_SUFFIX = " Starting Hero"

NEUTRAL_CLASS = "Neutral"

RARITY_ORDER = ["Free", "Common", "Rare", "Epic", "Legendary"]

SORT_TYPES = ("rarity", "name", "type", "mana", "cost", "id")
SORT_ORDERS = ("asc", "desc")

COST_KEYS = ("mana", "cost")

_RANGE_RE = re.compile(r"^(\d+)-(\d+)$")


class SearchError(ValueError):
    """Raised when a search query names an unknown field or an unusable value."""


def filter_cards(cards: Sequence[Card], predicate: Callable[[Card], bool]) -> List[Card]:
    """Return the cards matching ``predicate`` as a new list, in input order."""
    return [card for card in cards if predicate(card)]


def filter_uncollectible(cards: Sequence[Card]) -> List[Card]:
    """Keep only the cards explicitly marked ``uncollectible: true``."""
    return filter_cards(cards, lambda card: card.get("uncollectible") is True)


def filter_collectible(cards: Sequence[Card]) -> List[Card]:
    return filter_cards(cards, lambda card: card.get("uncollectible") is not True)


def find_classes(cards: Sequence[Card]) -> List[str]:
    """Return the class of every starting hero card.

    Duplicates are kept: two hero files for the same class yield the class twice.
    A hero whose name leaves no class in front of the suffix is skipped.
    """
    classes = []
    for card in filter_cards(cards, lambda card: card.name.endswith(STARTING_HERO_SUFFIX)):
        name = card.name[: -len(STARTING_HERO_SUFFIX)]
        if not name.strip():
            LOGGER.warning("Starting hero %r (%s) names no class; skipping it", card.name, card.source)
            continue
        classes.append(name)
    return classes


def runes_satisfied(required: str, runes: str) -> bool:
    """Return True if ``runes`` holds at least as many of each rune as ``required``."""
    if not required:
        return True
    available = Counter(runes.upper())
    needed = Counter(required.upper())
    return all(available[rune] >= amount for rune, amount in needed.items())


def cards_for_class(cards: Sequence[Card], player_class: str, runes: str = "") -> List[Card]:
    """Cards a ``player_class`` deck may contain: its own and the neutral ones."""
    allowed = {player_class.lower(), NEUTRAL_CLASS.lower()}

    def _playable(card: Card) -> bool:
        if not any(cls.lower() in allowed for cls in card.classes):
            return False
        return runes_satisfied(card.rune_requirement, runes)

    return filter_cards(cards, _playable)


def _match_cost(value: object, query: str) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False

    match = _RANGE_RE.match(query)
    if match:
        low, high = int(match.group(1)), int(match.group(2))
        return low <= value <= high
    if query == "even":
        return value % 2 == 0
    if query == "odd":
        return value % 2 == 1
    if query.isdigit():
        return value == int(query)
    raise SearchError(f"Value '{query}' not valid!")


def _match_field(value: object, query: str) -> bool:
    if isinstance(value, bool):
        return str(value).lower() == query
    if isinstance(value, str):
        return query in value.lower()
    if isinstance(value, (int, float)):
        try:
            return value == float(query)
        except ValueError:
            return False
    return False


def search_cards(cards: Sequence[Card], query: str) -> List[Card]:
    """Filter ``cards`` with a deck creator search query.

    ``fire`` looks for the text in the display name and description.
    ``key:value`` compares a single field; ``mana`` (or ``cost``) also
    accepts ranges like ``1-3`` as well as ``even`` and ``odd``.
    """
    query = query.strip()
    if not query:
        return list(cards)

    key, sep, value = query.partition(":")
    if not sep:
        needle = query.lower()
        return filter_cards(
            cards,
            lambda card: needle in card.display_name.lower() or needle in card.description.lower(),
        )

    key = key.strip()
    value = value.strip().lower()
    result: List[Card] = []
    for card in cards:
        field_value = card.get(key)
        if field_value is None:
            raise SearchError(f"Key '{key}' not valid!")
        if key in COST_KEYS:
            matched = _match_cost(field_value, value)
        else:
            matched = _match_field(field_value, value)
        if matched:
            result.append(card)
    return result


def _sort_key(sort_type: str) -> Callable[[Card], object]:
    if sort_type == "rarity":
        return lambda card: RARITY_ORDER.index(card.get_str("rarity")) if card.get_str("rarity") in RARITY_ORDER else -1
    if sort_type == "name":
        return lambda card: card.display_name.lower()
    if sort_type == "type":
        return lambda card: card.card_type.lower()
    if sort_type in COST_KEYS:
        return lambda card: card.cost
    return lambda card: card.get_number("id")


def sort_cards(cards: Iterable[Card], sort_type: str = "rarity", order: str = "asc") -> List[Card]:
    """Return ``cards`` sorted by ``sort_type``; unknown settings fall back to rarity / asc."""
    sort_type = sort_type.lower()
    order = order.lower()

    if order not in SORT_ORDERS:
        LOGGER.warning("Ordering by '%s' failed! Falling back to asc.", order)
        order = "asc"
    if sort_type not in SORT_TYPES:
        LOGGER.warning("Sorting by '%s' failed! Falling back to rarity.", sort_type.upper())
        sort_type = "rarity"

    return sorted(cards, key=_sort_key(sort_type), reverse=order == "desc")
