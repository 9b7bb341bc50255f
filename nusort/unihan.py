"""Radical/stroke sort keys read from the Unihan radical-stroke data.

Each kanji gets one or more sort keys, each a radical number and a residual
stroke count. The radical numbers are normalized so that they follow the
ordering used by the kanji database.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

logger = logging.getLogger(__name__)

MAX_KEYS = 15

ADOBE_JAPAN = "\tkRSAdobe_Japan1_6"

_PREFIX_RE = re.compile(r"U\+([0-9A-F]{1,5})")
_KEY_RE = re.compile(r"\s*[CV]\+[-+]?\d+\+([-+]?\d+)\.[-+]?\d+\.([-+]?\d+)")


class UnihanFormatError(ValueError):
    """Raised when radical-stroke data cannot be understood."""


@dataclass(frozen=True, order=True)
class SortKey:
    """A radical number followed by a residual stroke count."""

    rad: int
    strokes: int


@dataclass
class SortInfo:
    """A character together with all of its sort keys."""

    char: str
    keys: list[SortKey] = field(default_factory=list)

    def add_key(self, rad: int, strokes: int) -> None:
        """Append a key, raising UnihanFormatError if there are too many."""
        if len(self.keys) >= MAX_KEYS:
            raise UnihanFormatError(f"too many sort keys for {self.char!r}")
        self.keys.append(SortKey(rad, strokes))

    def sort_and_dedup(self) -> None:
        """Sort the keys, dropping empty (radical 0) and duplicate keys."""
        self.keys = sorted({key for key in self.keys if key.rad})


_SUPPLEMENTAL_KEYS = {
    "屠": SortKey(0x2D, 0x09),
    "斎": SortKey(0x44, 0x07),
    "蒸": SortKey(0x57, 0x09),
    "萬": SortKey(0x73, 0x07),
    "采": SortKey(0xA6, 0x00),
    "舎": SortKey(0x88, 0x02),
    "舗": SortKey(0x88, 0x09),
    "菐": SortKey(0x8D, 0x08),
    "鼡": SortKey(0x1E, 0x05),
    "単": SortKey(0x1E, 0x06),
    "巣": SortKey(0x1E, 0x08),
    "営": SortKey(0x1E, 0x09),
    "厳": SortKey(0x1E, 0x0E),
    "柴": SortKey(0x4C, 0x05),
}

# Characters absent from the kRSAdobe_Japan1_6 data, grouped by their key.
_MANUAL_KEYS: tuple[tuple[int, int, str], ...] = (
    (0x09, 0x08, "值倕倠俷俴倷"),
    (0x12, 0x05, "刜刞"),
    (0x1B, 0x0C, "厬"),
    (0x1E, 0x00, "⺍"),
    (0x1F, 0x04, "吷呔吰"),
    (0x1F, 0x08, "唬啃啪啕唷唴啒啵啶啢啥唰啎"),
    (0x1F, 0x09, "啷"),
    (0x21, 0x0C, "墣墬墯"),
    (0x25, 0x08, "夠"),
    (0x28, 0x00, "孓"),
    (0x3E, 0x05, "怋怬怮怴怷怲怹怞"),
    (0x3E, 0x09, "惾愅愣"),
    (0x41, 0x05, "拋抪抭抮抴"),
    (0x41, 0x09, "揍"),
    (0x41, 0x0A, "搌搕搚搟搣搧搫搳搷搹摀摁摃搋"),
    (0x43, 0x07, "啟"),
    (0x4C, 0x05, "查"),
    (0x4C, 0x08, "棳棸椔"),
    (0x4C, 0x0B, "槬槷槸樆槤樧"),
    (0x56, 0x04, "汦汩汱沋沏"),
    (0x56, 0x08, "涳涾淔淜淭湴渃"),
    (0x56, 0x09, "渜渱渳渽渿湀湁湆湇湠湡湩溈湱渨渰"),
    (0x71, 0x08, "碄碅碉"),
    (0x8D, 0x08, "萐菆菂菈菋菕菙菞菤菧菳菵菺菿萉萒萣"),
    (0x8D, 0x09, "萭萷萺萿葀葂葃葋葌葝葞蒆蒍蒏蒏蒏蒏萴萰萲"),
    (0x8D, 0x0B, "蓨蓩蓳蓶蓹蓾蔈蔍蔏蔒蔖蔝蔠蔨蔩蔮蔰蔉蔊蔻蓫"),
    (0x8D, 0x10, "藸蘉蘁"),
    (0x8F, 0x08, "蜠蜤蜦蜧蜪蜬蜭蜰蜳蝁蝂蜛"),
    (0x8F, 0x09, "蜸蜵"),
    (0x8F, 0x0F, "蠫"),
    (0x8F, 0x10, "蠩蠪蠬蠥蠦"),
    (0x92, 0x08, "裮裶裺裻"),
    (0x94, 0x08, "覢覣覤"),
    (0x95, 0x10, "觾"),
    (0x96, 0x10, "讆"),
    (0x9B, 0x09, "賮"),
    (0x9E, 0x06, "跺"),
    (0xAD, 0x0A, "雗"),
)


def decode_codepoint(codepoint_str: str) -> str:
    """Return the character for a hexadecimal code point string."""
    try:
        codepoint = int(codepoint_str, 16)
    except ValueError as exc:
        raise UnihanFormatError(f"invalid code point: {codepoint_str!r}") from exc
    if codepoint < 0x0800 or codepoint > 0x10FFFF:
        raise UnihanFormatError(f"code point out of range: {codepoint}")
    return chr(codepoint)


def normalize_radical(rad: int) -> int:
    """Map a Kangxi radical number onto the numbering used for sorting."""
    # All one-stroke radicals count as the same radical.
    if rad <= 6:
        rad = 1
    # 匚 and 匸 are treated as one radical.
    if rad == 23:
        rad = 22
    # 夊 and 夂 are treated as one radical.
    if rad == 35:
        rad = 34
    # 日 and 曰 are treated as one radical.
    if rad == 73:
        rad = 72
    # Shift radicals from 口 onwards so that ツかんむり takes 口's number.
    if rad >= 30:
        rad += 1
    return rad


def parse_rsc_line(line: str) -> SortInfo | None:
    """Parse one line of Unihan radical-stroke data.

    Returns None for comments, blank lines, malformed prefixes and lines of
    other fields. Raises UnihanFormatError for a malformed key list.
    """
    if not line or line[0] in "#\n":
        return None
    prefix = _PREFIX_RE.match(line)
    if prefix is None:
        logger.warning("malformed line: %s", line.rstrip("\n"))
        return None

    pos = prefix.end()
    if not line.startswith(ADOBE_JAPAN, pos):
        return None
    pos += len(ADOBE_JAPAN)

    info = SortInfo(decode_codepoint(prefix.group(1)))
    while pos < len(line) and line[pos] != "\n":
        match = _KEY_RE.match(line, pos)
        if match is None:
            raise UnihanFormatError(f"malformed line (column {pos}): {line!r}")
        info.add_key(normalize_radical(int(match.group(1))), int(match.group(2)))
        pos = match.end()

    supplemental = _SUPPLEMENTAL_KEYS.get(info.char)
    if supplemental is not None:
        info.add_key(supplemental.rad, supplemental.strokes)
    info.sort_and_dedup()
    return info


def load_sort_infos(lines: Iterable[str]) -> list[SortInfo]:
    """Read every sort key from ``lines`` plus the manually defined ones.

    The result is sorted by character.
    """
    infos = [info for info in map(parse_rsc_line, lines) if info is not None]
    for rad, strokes, chars in _MANUAL_KEYS:
        for char in chars:
            info = SortInfo(char)
            info.add_key(rad, strokes)
            infos.append(info)
    infos.sort(key=lambda info: info.char)
    return infos


def figure_cutoff_type(prev_info: SortInfo | None, info: SortInfo) -> int:
    """Choose a cutoff type from whether two neighbours share a sort key."""
    if prev_info is None:
        return 3
    if any(key.rad and key in info.keys for key in prev_info.keys):
        return 0
    return 1


def format_char_line(kanji: str, info: SortInfo) -> str:
    """Return the character followed by its keys as hex pairs."""
    keys = "".join(f"{key.rad:02x}{key.strokes:02x} " for key in info.keys if key.rad)
    return f"{kanji}\t{keys}\n"


def format_db_line(
    kanji: str,
    ranking: int,
    cutoff_type: int,
    prev_info: SortInfo | None,
    info: SortInfo,
) -> str:
    """Return a kanji database entry line, figuring the cutoff type if 0."""
    if not cutoff_type:
        cutoff_type = figure_cutoff_type(prev_info, info)
    return f'\t{{"{kanji}", {ranking:5d}, {cutoff_type}}},\n'