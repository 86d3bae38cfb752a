import string

import pytest

from morse_converter.domain.symbols import (
    INVERSE_SYMBOL_MAP,
    SYMBOL_MAP,
    SYMBOL_PAIRS,
    WORD_SEPARATOR,
    build_symbol_map,
    find_collisions,
    invert_symbol_map,
)

PUNCTUATION = ".,?'!/()&:;=+-_\"$@#%^*{}[]|~`"


def test_symbol_map_covers_letters_digits_punctuation_and_space():
    expected = set(string.ascii_uppercase) | set(string.digits) | set(PUNCTUATION) | {" "}
    assert set(SYMBOL_MAP) == expected
    assert SYMBOL_MAP[" "] == WORD_SEPARATOR == "/"


def test_symbol_map_entries_are_single_chars_and_morse_tokens():
    for char, token in SYMBOL_MAP.items():
        assert len(char) == 1
        assert token
        assert set(token) <= {".", "-", "/"}


def test_reference_tokens_for_spot_checked_symbols():
    assert SYMBOL_MAP["A"] == ".-"
    assert SYMBOL_MAP["0"] == "-----"
    assert SYMBOL_MAP["9"] == "----."
    assert SYMBOL_MAP["?"] == "..--.."
    assert SYMBOL_MAP["@"] == ".--.-."
    assert SYMBOL_MAP["`"] == "--..-."


def test_symbol_tables_are_read_only():
    with pytest.raises(TypeError):
        SYMBOL_MAP["A"] = "..."  # type: ignore[index]
    with pytest.raises(TypeError):
        INVERSE_SYMBOL_MAP[".-"] = "B"  # type: ignore[index]


def test_pairs_repeat_four_characters_with_identical_tokens():
    chars = [char for char, _ in SYMBOL_PAIRS]
    repeated = sorted({char for char in chars if chars.count(char) > 1})
    assert repeated == ["(", ")", "=", "_"]
    assert len(SYMBOL_MAP) == len(SYMBOL_PAIRS) - 4


def test_build_symbol_map_keeps_last_definition():
    table = build_symbol_map([("A", ".-"), ("B", "-..."), ("A", "..")])
    assert table == {"A": "..", "B": "-..."}
    assert list(table) == ["A", "B"]


def test_invert_symbol_map_last_character_wins_on_shared_token():
    assert invert_symbol_map({"X": "..", "Y": ".."}) == {"..": "Y"}
    assert INVERSE_SYMBOL_MAP[".-..-."] == "}"
    assert INVERSE_SYMBOL_MAP["-.-.-."] == "|"
    assert INVERSE_SYMBOL_MAP["/"] == " "


def test_find_collisions_reports_reference_ambiguities_in_order():
    assert find_collisions(SYMBOL_PAIRS) == {
        "-.-.-.": [";", "|"],
        ".-..-.": ['"', "}"],
    }
    assert len(INVERSE_SYMBOL_MAP) == len(SYMBOL_MAP) - 2


def test_find_collisions_ignores_repeated_identical_definitions():
    assert find_collisions([("(", "-.--."), ("(", "-.--.")]) == {}
