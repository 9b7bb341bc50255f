"""Right-aligned, line-wrapped guide showing kanji and their input keys.

Elements are laid out from the last one to the first, so each output line
reads right to left in the order the elements were added. A second line can
show the key that inputs each kanji directly beneath it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator

WRAP_WIDTH = 60

_ANSI_RESET = "0"
_ANSI_BOLD = "1"
_ANSI_REVERSE_VIDEO = "7"
_ANSI_BRIGHT_YELLOW_FG = "93"
_ANSI_BRIGHT_MAGENTA_FG = "95"


def _sgr(*codes: str) -> str:
    return "\x1b[" + ";".join(codes) + "m"


_RESET = _sgr(_ANSI_RESET)
_BUSHU_STYLE = _sgr(_ANSI_BRIGHT_MAGENTA_FG, _ANSI_BOLD)
_STROKE_STYLE = _sgr(_ANSI_BRIGHT_YELLOW_FG)
_KUGIRI_STYLE = _sgr(_ANSI_REVERSE_VIDEO)


class GuideElementType(IntEnum):
    """The kinds of element a guide can hold."""

    RSC_LIST_BUSHU = 0
    STROKE_COUNT = 1
    KANJI = 2
    ELLIPSIS = 3
    BUSHU_STROKE_COUNT = 4
    KUGIRI_INPUT_KEY = 5
    SPACE = 6
    LINE_WRAPPABLE_POINT = 7


@dataclass
class GuideElement:
    """One element of the guide.

    ``text`` is the character shown for KANJI and RSC_LIST_BUSHU elements,
    ``stroke_count`` is used by the stroke-count elements and ``input_key``
    is the key shown for KANJI (second line) and KUGIRI_INPUT_KEY elements.
    """

    type: GuideElementType
    text: str = ""
    stroke_count: int = 0
    input_key: str = ""


_FIXED_WIDTHS = {
    GuideElementType.RSC_LIST_BUSHU: 2,
    GuideElementType.KANJI: 2,
    GuideElementType.STROKE_COUNT: 1,
    GuideElementType.ELLIPSIS: 1,
    GuideElementType.BUSHU_STROKE_COUNT: 5,
    GuideElementType.KUGIRI_INPUT_KEY: 3,
    GuideElementType.SPACE: 1,
    GuideElementType.LINE_WRAPPABLE_POINT: 0,
}

_COUNTED_TYPES = (GuideElementType.STROKE_COUNT, GuideElementType.BUSHU_STROKE_COUNT)


def _width(element: GuideElement) -> int:
    width = _FIXED_WIDTHS[element.type]
    if element.type in _COUNTED_TYPES and element.stroke_count >= 10:
        width += 1
    return width


def _stroke_digits(element: GuideElement) -> str:
    if not 0 <= element.stroke_count <= 99:
        raise ValueError(f"invalid stroke count: {element.stroke_count}")
    return str(element.stroke_count)


def _kanji_cell(element: GuideElement) -> str:
    kind = element.type
    if kind is GuideElementType.RSC_LIST_BUSHU:
        return f"{_BUSHU_STYLE}{element.text}{_RESET}"
    if kind is GuideElementType.STROKE_COUNT:
        return f"{_STROKE_STYLE}{_stroke_digits(element)}{_RESET}"
    if kind is GuideElementType.KANJI:
        return element.text
    if kind is GuideElementType.ELLIPSIS:
        return "⋯"
    if kind is GuideElementType.BUSHU_STROKE_COUNT:
        return f"{_BUSHU_STYLE} {_stroke_digits(element)}画 {_RESET}"
    if kind is GuideElementType.KUGIRI_INPUT_KEY:
        return f"{_KUGIRI_STYLE} {element.input_key} {_RESET}"
    if kind is GuideElementType.SPACE:
        return " "
    return ""


def _key_cell(element: GuideElement) -> str:
    kind = element.type
    if kind is GuideElementType.RSC_LIST_BUSHU:
        return f"{_BUSHU_STYLE}部{_RESET}"
    if kind is GuideElementType.STROKE_COUNT:
        return " " * (2 if element.stroke_count >= 10 else 1)
    if kind is GuideElementType.KANJI:
        return element.input_key + " "
    if kind is GuideElementType.SPACE:
        return " "
    if kind is GuideElementType.LINE_WRAPPABLE_POINT:
        return ""
    raise ValueError(f"element cannot appear on the key line: {kind.name}")


class DictGuide:
    """An ordered collection of guide elements that renders as wrapped text."""

    def __init__(self) -> None:
        self._elements: list[GuideElement] = []

    def __len__(self) -> int:
        return len(self._elements)

    def __iter__(self) -> Iterator[GuideElement]:
        return iter(self._elements)

    def clear(self) -> None:
        """Remove every element."""
        self._elements.clear()

    def add(self, element: GuideElement) -> GuideElement:
        """Append ``element`` and return it."""
        self._elements.append(element)
        return element

    def _fit_line(self, start: int) -> tuple[int, int]:
        """Return the last element index of the line starting at ``start``
        and the padding that right-aligns it."""
        elements = self._elements
        last = len(elements) - 1
        remaining = WRAP_WIDTH
        last_fitting_chunk = 0
        padding = 0
        cursor = start
        while cursor <= last and (remaining >= 0 or not last_fitting_chunk):
            element = elements[cursor]
            remaining -= _width(element)
            can_wrap = (
                cursor == last
                or element.type is GuideElementType.LINE_WRAPPABLE_POINT
            )
            if can_wrap and (remaining >= 0 or not last_fitting_chunk):
                last_fitting_chunk = cursor
                padding = remaining
            cursor += 1
        return last_fitting_chunk, padding

    def render(self, include_second_line: bool = False) -> str:
        """Return the guide as text, one or two output lines per wrapped line."""
        lines = []
        start = 0
        while start < len(self._elements):
            end, padding = self._fit_line(start)
            chunk = self._elements[start : end + 1][::-1]
            indent = " " * max(0, padding)
            lines.append(indent + "".join(map(_kanji_cell, chunk)) + "\n")
            if include_second_line:
                lines.append(indent + "".join(map(_key_cell, chunk)) + "\n")
            start = end + 1
        return "".join(lines)