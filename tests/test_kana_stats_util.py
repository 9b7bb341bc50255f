import pytest

from nusort.kana_stats_util import format_header, format_line

HEADER = (
    "       "
    "    平仮名数 (  割合  )"
    "    片仮名数 (  割合  )"
    "  全文字中の割合\n"
)
GAP = "       "


def test_header():
    assert format_header() == HEADER


def test_8_digit_hira_count():
    line = format_line("foo", 3, 42111111, 0, 42111111)
    assert line == (
        "foo    "
        "    42111111 (100.0000)"
        "           0 (  0.0000)"
        + GAP
        + " 75.00000\n"
    )


def test_hira_count_fraction():
    line = format_line("bar", 3, 42, 0, 85)
    assert line == (
        "bar    "
        "          42 ( 49.4118)"
        "           0 (  0.0000)"
        + GAP
        + " 37.05882\n"
    )


def test_round_up_right_column():
    line = format_line("bar", 3, 42, 0, 87)
    assert line == (
        "bar    "
        "          42 ( 48.2759)"
        "           0 (  0.0000)"
        + GAP
        + " 36.20690\n"
    )


def test_8_digit_kata_count():
    line = format_line("foo", 3, 0, 42111111, 52111111)
    assert line == (
        "foo    "
        "           0 (  0.0000)"
        "    42111111 ( 80.8102)"
        + GAP
        + " 60.60768\n"
    )


def test_12_digit_kata_count():
    line = format_line("lots", 4, 0, 421198760099, 521111110099)
    assert line == (
        "lots   "
        "           0 (  0.0000)"
        "421198760099 ( 80.8271)"
        + GAP
        + " 60.62029\n"
    )


def test_12_digit_hira_count():
    line = format_line("lots", 4, 421198760099, 0, 521111110099)
    assert line == (
        "lots   "
        "421198760099 ( 80.8271)"
        "           0 (  0.0000)"
        + GAP
        + " 60.62029\n"
    )


def test_12_digit_hira_and_kata_count():
    line = format_line("lots", 4, 421198760099, 100009777700, 531111110099)
    assert line == (
        "lots   "
        "421198760099 ( 79.3052)"
        "100009777700 ( 18.8303)"
        + GAP
        + " 73.60162\n"
    )


def test_zero_total_uses_defaults():
    line = format_line("<合計>", 6, 0, 0, 0)
    assert line == (
        "<合計> "
        "           0 (  0.0000)"
        "           0 (  0.0000)"
        + GAP
        + " 75.00000\n"
    )


def test_counts_exceeding_total_raise():
    with pytest.raises(ValueError):
        format_line("foo", 3, 10, 5, 14)