import json
from pathlib import Path

import pytest

import card_sources
from cardsource.extractor import Extractor, ExtractorPatterns
from cardsource.utils import NoBlankLineFound, NoExportFound


@pytest.fixture
def extractor() -> Extractor:
    return Extractor()


def test_extract_starting_hero_yields_json_without_functions(extractor):
    record = extractor.extract(card_sources.MAGE_HERO)
    card = json.loads(record)

    assert card["name"] == "Mage Starting Hero"
    assert card["uncollectible"] is True
    assert card["id"] == 97
    assert "heropower" not in record
    assert record.endswith("\n}")


def test_extract_keeps_every_top_level_key_in_order(extractor):
    source = (
        "module.exports = {\n"
        "    name: \"Nested\",\n"
        "    stats: [2, 1],\n"
        "    settings: {\n"
        "        maxDeckSize: 40\n"
        "    },\n"
        "    keywords: [\"Taunt\", \"Rush\"],\n"
        "    uncollectible: false,\n"
        "\n"
        "    battlecry(plr, game, self) {}\n"
        "}\n"
    )

    card = json.loads(extractor.extract(source))

    assert list(card) == ["name", "stats", "settings", "keywords", "uncollectible"]
    assert card["settings"] == {"maxDeckSize": 40}
    assert card["keywords"] == ["Taunt", "Rush"]


def test_extract_handles_closing_brace_after_trailing_comma(extractor):
    record = extractor.extract(card_sources.FIREBALL)

    assert record.endswith("\"id\": 40\n}")
    assert json.loads(record)["name"] == "Fireball"


def test_extract_blank_line_may_contain_whitespace(extractor):
    source = "module.exports = {\n    name: \"Spaces\",\n            \n    cast() {}\n}"

    assert json.loads(extractor.extract(source)) == {"name": "Spaces"}


def test_extract_handles_windows_line_endings(extractor):
    source = "module.exports = {\r\n    name: \"Crlf\",\r\n    mana: 2,\r\n\r\n    cast() {}\r\n}\r\n"

    assert json.loads(extractor.extract(source)) == {"name": "Crlf", "mana": 2}


def test_extract_without_export_marker_fails(extractor):
    with pytest.raises(NoExportFound) as excinfo:
        extractor.extract(card_sources.NO_EXPORT, source=Path("cards/lost.js"))

    assert excinfo.value.stage == "export"
    assert "cards/lost.js" in str(excinfo.value)


def test_extract_without_blank_line_fails(extractor):
    source = "module.exports = {\n    name: \"Compact\",\n    mana: 1,\n}\n"

    with pytest.raises(NoBlankLineFound) as excinfo:
        extractor.extract(source)

    assert excinfo.value.stage == "truncate"
    assert excinfo.value.path is None


def test_marker_inside_comment_is_ignored(extractor):
    source = "// module.exports = nothing\n" + card_sources.PEASANT

    assert json.loads(extractor.extract(source))["name"] == "Peasant"


def test_repeated_marker_is_removed(extractor):
    source = "module.exports = module.exports = {\n    name: \"Twice\",\n\n    cast() {}\n}"

    assert json.loads(extractor.extract(source)) == {"name": "Twice"}


def test_strip_comments_removes_line_and_block_comments(extractor):
    text = "a: 1, // trailing\n/* block\n spanning */b: 2,\n/** doc */\nc: 3"

    assert extractor.strip_comments(text) == "a: 1, \nb: 2,\n\nc: 3"


def test_strip_comments_is_idempotent(extractor):
    once = extractor.strip_comments(card_sources.MAGE_HERO)

    assert extractor.strip_comments(once) == once
    assert "/*" not in once and "//" not in once


def test_quote_keys_wraps_bare_keys_only(extractor):
    assert extractor.quote_keys('  foo: "bar",') == '  "foo": "bar",'
    assert extractor.quote_keys('  "foo": "bar",') == '  "foo": "bar",'


def test_quote_keys_leaves_colons_inside_values_alone(extractor):
    text = '    desc: "Battlecry: Deal 2 damage.",\n    "Deathrattle: Draw",'

    assert extractor.quote_keys(text) == '    "desc": "Battlecry: Deal 2 damage.",\n    "Deathrattle: Draw",'


def test_close_trailing_comma_on_last_field(extractor):
    assert extractor.close_trailing_comma('{\n    "a": 1,') == '{\n    "a": 1\n}'


def test_close_trailing_comma_before_closing_brace(extractor):
    assert extractor.close_trailing_comma('{\n    "a": 1,\n}') == '{\n    "a": 1\n}'


def test_close_trailing_comma_leaves_clean_text_untouched(extractor):
    assert extractor.close_trailing_comma('{\n    "a": 1\n}') == '{\n    "a": 1\n}'


def test_extractor_patterns_can_be_injected():
    patterns = ExtractorPatterns()
    first = Extractor(patterns)
    second = Extractor(patterns)

    assert first.patterns is second.patterns
    assert json.loads(first.extract(card_sources.DEFROST))["runes"] == "F"
