"""Formatting of kana frequency statistics tables."""

from __future__ import annotations

LEFT_COLUMN_WIDTH = 7


def format_header() -> str:
    """Return the header line of the statistics table."""
    return (
        " " * LEFT_COLUMN_WIDTH
        + "    平仮名数 (  割合  )"
        + "    片仮名数 (  割合  )"
        + "  全文字中の割合\n"
    )


def _whole_part(default: int, numer: int, denom: int) -> int:
    if not denom:
        return default
    return numer // denom


def _fractional_part(decimal_scale: int, numer: int, denom: int) -> int:
    if not denom:
        return 0
    return (decimal_scale * numer + denom // 2) // denom % decimal_scale


def format_line(
    left_column: str,
    left_column_width: int,
    hira_count: int,
    kata_count: int,
    all_kana_count: int,
) -> str:
    """Return one row of the statistics table.

    ``left_column_width`` is the display width of ``left_column``; the column
    is padded to a fixed width. Raises ValueError if the hiragana and
    katakana counts together exceed ``all_kana_count``.
    """
    hira_kata_count = hira_count + kata_count
    if hira_kata_count > all_kana_count:
        raise ValueError(f"all_kana_count is too low: {all_kana_count}")

    padding = " " * max(0, LEFT_COLUMN_WIDTH - left_column_width)
    hira_pct = (
        _whole_part(0, hira_count * 100, all_kana_count),
        _fractional_part(10000, hira_count * 100, all_kana_count),
    )
    kata_pct = (
        _whole_part(0, kata_count * 100, all_kana_count),
        _fractional_part(10000, kata_count * 100, all_kana_count),
    )
    share = (
        _whole_part(75, hira_kata_count * 75, all_kana_count),
        _fractional_part(100000, hira_kata_count * 75, all_kana_count),
    )
    return (
        f"{left_column}{padding}"
        f"{hira_count:12d} ({hira_pct[0]:3d}.{hira_pct[1]:04d})"
        f"{kata_count:12d} ({kata_pct[0]:3d}.{kata_pct[1]:04d})    "
        f"   {share[0]:3d}.{share[1]:05d}\n"
    )