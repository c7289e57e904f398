import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))
sys.path.append(str(Path(__file__).resolve().parent))

import card_sources  # noqa: E402

CARD_TREE = {
    "StartingHeroes/mage.js": card_sources.MAGE_HERO,
    "StartingHeroes/rogue.js": card_sources.ROGUE_HERO,
    "StartingHeroes/death_knight.js": card_sources.DEATH_KNIGHT_HERO,
    "Classes/Death Knight/Spells/2 Cost/defrost.js": card_sources.DEFROST,
    "Classes/Death Knight/Minions/8 Cost/soulstealer.js": card_sources.SOULSTEALER,
    "Classes/Mage/Spells/4 Cost/fireball.js": card_sources.FIREBALL,
    "Classes/Neutral/Minions/1 Cost/peasant.js": card_sources.PEASANT,
    "Classes/Priest/Warlock/Spells/0 Cost/raise_dead.js": card_sources.RAISE_DEAD,
    "Classes/Neutral/Uncollectible/99-onyxian-whelp.ts": card_sources.TYPESCRIPT_CARD,
    "Tests/infmana.js": card_sources.INF_MANA,
    "Examples/1/last_combined.js": card_sources.INF_MANA,
    "README.md": "# Cards\n",
}

BROKEN_TREE = {
    "Broken/no_export.js": card_sources.NO_EXPORT,
    "Broken/single_quoted.js": card_sources.SINGLE_QUOTED,
    "Broken/nameless.js": card_sources.NAMELESS,
}


def write_tree(root: Path, files: dict) -> Path:
    for relative, text in files.items():
        path = root / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf8")
    return root


@pytest.fixture
def card_tree(tmp_path: Path) -> Path:
    return write_tree(tmp_path / "cards", CARD_TREE)


@pytest.fixture
def mixed_tree(tmp_path: Path) -> Path:
    return write_tree(tmp_path / "cards", {**CARD_TREE, **BROKEN_TREE})
