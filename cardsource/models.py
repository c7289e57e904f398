from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

Number = Union[int, float]

CLASS_SEPARATOR = " / "


class Card(BaseModel):
    """A decoded card definition.

    - name: required, every card file must define one.
    - data: the full decoded mapping, in file order.
    - source: file the card was read from, when known.

    Field access is lenient: the ``get_*`` helpers return the given default
    when a field is absent or holds a value of another type.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    data: Dict[str, Any] = Field(default_factory=dict)
    source: Optional[Path] = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], source: Optional[Path] = None) -> "Card":
        return cls.model_validate({"name": mapping.get("name"), "data": dict(mapping), "source": source})

    def get(self, key: str, default: Any = None) -> Any:
        return self.data.get(key, default)

    def get_str(self, key: str, default: str = "") -> str:
        value = self.data.get(key)
        return value if isinstance(value, str) else default

    def get_bool(self, key: str, default: bool = False) -> bool:
        value = self.data.get(key)
        return value if isinstance(value, bool) else default

    def get_number(self, key: str, default: Number = 0) -> Number:
        value = self.data.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return default
        return value

    def get_list(self, key: str) -> List[Any]:
        value = self.data.get(key)
        return list(value) if isinstance(value, list) else []

    @property
    def display_name(self) -> str:
        return self.get_str("displayName") or self.name

    @property
    def description(self) -> str:
        return self.get_str("desc") or self.get_str("text")

    @property
    def cost(self) -> Number:
        if "mana" in self.data:
            return self.get_number("mana")
        return self.get_number("cost")

    @property
    def classes(self) -> List[str]:
        single = self.get_str("class")
        if single:
            return [part.strip() for part in single.split(CLASS_SEPARATOR) if part.strip()]
        return [str(value) for value in self.get_list("classes") if isinstance(value, str)]

    @property
    def card_type(self) -> str:
        declared = self.get_str("type")
        if declared:
            return declared
        # Older card files leave the type implicit.
        if "cooldown" in self.data:
            return "Location"
        if "tribe" in self.data:
            return "Minion"
        if "stats" in self.data:
            return "Weapon"
        return "Spell"

    @property
    def rune_requirement(self) -> str:
        return self.get_str("runes")
