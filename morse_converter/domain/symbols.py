"""Character to Morse token tables."""
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

WORD_SEPARATOR = "/"

# Later entries override earlier ones, so the repeated "(", ")", "_" and "="
# lines are harmless. Token collisions are not: see INVERSE_SYMBOL_MAP.
SYMBOL_PAIRS: tuple[tuple[str, str], ...] = (
    ("A", ".-"),
    ("B", "-..."),
    ("C", "-.-."),
    ("D", "-.."),
    ("E", "."),
    ("F", "..-."),
    ("G", "--."),
    ("H", "...."),
    ("I", ".."),
    ("J", ".---"),
    ("K", "-.-"),
    ("L", ".-.."),
    ("M", "--"),
    ("N", "-."),
    ("O", "---"),
    ("P", ".--."),
    ("Q", "--.-"),
    ("R", ".-."),
    ("S", "..."),
    ("T", "-"),
    ("U", "..-"),
    ("V", "...-"),
    ("W", ".--"),
    ("X", "-..-"),
    ("Y", "-.--"),
    ("Z", "--.."),
    ("0", "-----"),
    ("1", ".----"),
    ("2", "..---"),
    ("3", "...--"),
    ("4", "....-"),
    ("5", "....."),
    ("6", "-...."),
    ("7", "--..."),
    ("8", "---.."),
    ("9", "----."),
    (".", ".-.-.-"),
    (",", "--..--"),
    ("?", "..--.."),
    ("'", ".----."),
    ("!", "-.-.--"),
    ("/", "-..-."),
    ("(", "-.--."),
    (")", "-.--.-"),
    ("&", ".-..."),
    (":", "---..."),
    (";", "-.-.-."),
    ("=", "-...-"),
    ("+", ".-.-."),
    ("-", "-....-"),
    ("_", "..--.-"),
    ('"', ".-..-."),
    ("$", "...-..-"),
    ("@", ".--.-."),
    ("#", "...--.-"),
    ("%", ".....-"),
    ("^", "..-..-"),
    ("*", "---.-."),
    ("(", "-.--."),
    (")", "-.--.-"),
    ("_", "..--.-"),
    ("=", "-...-"),
    ("{", ".--..-"),
    ("}", ".-..-."),
    ("[", "-..--."),
    ("]", "-.-..-"),
    ("|", "-.-.-."),
    ("~", "--...-"),
    ("`", "--..-."),
    (" ", WORD_SEPARATOR),
)


def build_symbol_map(pairs: Iterable[tuple[str, str]]) -> dict[str, str]:
    """Build a character -> token dict; a repeated character keeps its last token."""
    symbol_map: dict[str, str] = {}
    for char, token in pairs:
        symbol_map[char] = token
    return symbol_map


def invert_symbol_map(symbol_map: Mapping[str, str]) -> dict[str, str]:
    """Invert a symbol map in enumeration order.

    The table is not injective: when two characters share a token the one
    enumerated last wins.
    """
    return {token: char for char, token in symbol_map.items()}


def find_collisions(pairs: Iterable[tuple[str, str]]) -> dict[str, list[str]]:
    """Return tokens claimed by more than one distinct character.

    Characters are listed in enumeration order, so the last one is the
    character the inverse table decodes to.
    """
    claims: dict[str, list[str]] = {}
    for char, token in build_symbol_map(pairs).items():
        claims.setdefault(token, []).append(char)
    return {token: chars for token, chars in claims.items() if len(chars) > 1}


SYMBOL_MAP: Mapping[str, str] = MappingProxyType(build_symbol_map(SYMBOL_PAIRS))
INVERSE_SYMBOL_MAP: Mapping[str, str] = MappingProxyType(invert_symbol_map(SYMBOL_MAP))
