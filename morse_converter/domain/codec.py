"""Text <-> Morse transliteration."""
from __future__ import annotations

from typing import Mapping

from .symbols import INVERSE_SYMBOL_MAP, SYMBOL_MAP

TOKEN_SEPARATOR = " "


def encode(text: str, symbol_map: Mapping[str, str] = SYMBOL_MAP) -> str:
    """Encode text as space separated Morse tokens.

    Input is uppercased first. Characters without a token are passed through
    unchanged, and a space becomes the "/" word separator token.
    """
    return TOKEN_SEPARATOR.join(symbol_map.get(char, char) for char in text.upper())


def decode(morse: str, inverse_map: Mapping[str, str] = INVERSE_SYMBOL_MAP) -> str:
    """Decode space separated Morse tokens back to text.

    Tokens are split on single spaces and joined without a separator. Unknown
    tokens are passed through unchanged; the empty tokens produced by runs of
    spaces therefore decode to nothing.
    """
    return "".join(inverse_map.get(token, token) for token in morse.split(TOKEN_SEPARATOR))
