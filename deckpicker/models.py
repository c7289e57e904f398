from pydantic import BaseModel, Field, field_validator

RUNE_NAMES = ("Blood", "Frost", "Unholy")
RUNE_LETTERS = tuple(name[0] for name in RUNE_NAMES)
RUNE_COUNT = 3

# Classes whose deck needs runes (compared lowercased).
RUNE_CLASSES = ("death knight",)


def upper_rune(rune: str) -> str:
    """Uppercase a single rune, keeping it as is when that would not stay one character."""
    upper = rune.upper()
    return upper if len(upper) == 1 else rune


def format_runes(runes: str) -> str:
    """Return the deck code rune marker, e.g. ``[BFU]`` or ``[3B]``."""
    if not runes:
        return ""
    if len(set(runes)) == 1:
        return f"[{len(runes)}{runes[0]}]"
    return f"[{runes}]"


class Selection(BaseModel):
    """Outcome of the class selection session.

    - player_class: one of the known class names.
    - runes: empty, or exactly three uppercase characters in the order entered.
    """

    player_class: str = Field(..., min_length=1)
    runes: str = ""

    @field_validator("runes")
    @classmethod
    def _validate_runes(cls, value: str) -> str:
        if value and len(value) != RUNE_COUNT:
            raise ValueError(f"runes must be empty or exactly {RUNE_COUNT} characters")
        return "".join(upper_rune(rune) for rune in value)

    @property
    def has_runes(self) -> bool:
        return bool(self.runes)

    def describe(self) -> str:
        marker = format_runes(self.runes)
        return f"{self.player_class} {marker}" if marker else self.player_class
