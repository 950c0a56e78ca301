"""Locale-aware collation for section and page names."""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from pypinyin import Style, pinyin

# CJK Unified Ideographs, Extension A and Compatibility Ideographs
_HAN_CHAR = re.compile("[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]")

_GROUP_OTHER = 0
_GROUP_DIGIT = 1
_GROUP_HAN = 2
_GROUP_LETTER = 3

# Polyphones whose collation position differs from pypinyin's primary reading
_COLLATION_READINGS = {
    "长": "zhang3",
    "重": "chong2",
}


@lru_cache(maxsize=4096)
def _han_reading(char: str) -> str:
    """Fixed tone-numbered reading of one Han character.

    Each character has a single position in the order, whatever the words
    around it, so readings are looked up one character at a time.
    """
    if char in _COLLATION_READINGS:
        return _COLLATION_READINGS[char]
    readings = pinyin(
        char, style=Style.TONE3, heteronym=False, neutral_tone_with_five=True
    )
    return readings[0][0].casefold()


def _char_key(char: str) -> tuple[int, str]:
    if _HAN_CHAR.match(char):
        return (_GROUP_HAN, _han_reading(char))
    if char.isdigit():
        return (_GROUP_DIGIT, char)
    if char.isalpha():
        return (_GROUP_LETTER, char.casefold())
    return (_GROUP_OTHER, char)


def collation_key(text: str) -> tuple[tuple[tuple[int, str], ...], str]:
    """Build a sort key approximating the ``zh-Hans-CN-u-co-pinyin`` collation.

    Script groups order punctuation, then digits, then Han characters by
    their Pinyin reading, then other letters compared case-insensitively.
    Ties fall back to lowercase-first, then code point order, so the key is
    total.

    Args:
        text: The string to build a key for.

    Returns:
        A tuple usable as a ``sorted`` key.
    """
    return tuple(_char_key(char) for char in text), text.swapcase()


def sort_names(names: Iterable[str]) -> list[str]:
    """Return names sorted by :func:`collation_key`."""
    return sorted(names, key=collation_key)
