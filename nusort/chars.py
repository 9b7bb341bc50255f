"""Character classification helpers for kana and UTF-8 byte sequences."""

from __future__ import annotations

from enum import IntEnum

_HIRAGANA_FIRST = "ぁ"
_HIRAGANA_LAST = "ゖ"
_KATAKANA_FIRST = "ァ"
_KATAKANA_LAST = "ヶ"
_KATAKANA_SPECIAL_LAST = "ー"

_HIRAGANA_TO_KATAKANA_OFFSET = ord(_KATAKANA_FIRST) - ord(_HIRAGANA_FIRST)

_HIRAGANA_TABLE = {
    cp: cp + _HIRAGANA_TO_KATAKANA_OFFSET
    for cp in range(ord(_HIRAGANA_FIRST), ord(_HIRAGANA_LAST) + 1)
}


class CodepointRange(IntEnum):
    """Which kana block a character belongs to.

    Every code point in the hiragana range corresponds one-to-one to a code
    point in the katakana range. KATAKANA_SPECIAL holds katakana-block
    characters that have no hiragana counterpart.
    """

    HIRAGANA = 0
    KATAKANA = 1
    KATAKANA_SPECIAL = 2
    OTHER = 3


def codepoint_range(c: str) -> CodepointRange:
    """Classify ``c`` by comparing it, as a whole string, to the kana ranges."""
    if c < _HIRAGANA_FIRST:
        return CodepointRange.OTHER
    if c <= _HIRAGANA_LAST:
        return CodepointRange.HIRAGANA
    if c < _KATAKANA_FIRST:
        return CodepointRange.OTHER
    if c <= _KATAKANA_LAST:
        return CodepointRange.KATAKANA
    if c <= _KATAKANA_SPECIAL_LAST:
        return CodepointRange.KATAKANA_SPECIAL
    return CodepointRange.OTHER


def is_complete_utf8(first_byte: int, size: int) -> bool:
    """Return whether ``size`` bytes starting with ``first_byte`` form a whole
    UTF-8 sequence."""
    first_byte &= 0xFF
    if size == 1:
        return not first_byte & 0x80
    if size == 2:
        return first_byte & 0xE0 == 0xC0
    if size == 3:
        return first_byte & 0xF0 == 0xE0
    if size == 4:
        return True
    raise ValueError(f"invalid UTF-8 sequence size: {size}")


def hiragana_to_katakana(text: str) -> str:
    """Replace every hiragana character in ``text`` with its katakana form."""
    return text.translate(_HIRAGANA_TABLE)