"""Domain logic for Morse transliteration."""

from .codec import TOKEN_SEPARATOR, decode, encode
from .symbols import (
    INVERSE_SYMBOL_MAP,
    SYMBOL_MAP,
    SYMBOL_PAIRS,
    WORD_SEPARATOR,
    build_symbol_map,
    find_collisions,
    invert_symbol_map,
)

__all__ = [
    "INVERSE_SYMBOL_MAP",
    "SYMBOL_MAP",
    "SYMBOL_PAIRS",
    "TOKEN_SEPARATOR",
    "WORD_SEPARATOR",
    "build_symbol_map",
    "decode",
    "encode",
    "find_collisions",
    "invert_symbol_map",
]
