import io

import pytest

from nusort.input_engine import InputFlags, InputSession, encode_osc52, run_input


def _run(mapping, data, **flags):
    out = io.BytesIO()
    run_input(mapping, InputFlags(**flags), io.BytesIO(data.encode("utf-8")), out)
    return out.getvalue()


PENDING_CASES = [
    ("show_pending_conversion", {"mo": "も"}, "m", "<m>\n"),
    ("show_already_converted", {"ki": "き"}, "ki", "<k>\nき\n"),
    (
        "accumulates_multiple_converted",
        {"ro": "ろ", "pa": "ぱ"},
        "ropa",
        "<r>\nろ\nろ<p>\nろぱ\n",
    ),
    ("backspace_on_empty_line_does_nothing", {"ro": "ろ"}, "\b\b\b\b", ""),
    ("ascii_del_on_empty_line_does_nothing", {"ro": "ろ"}, "\x7f\x7f\x7f\x7f", ""),
    (
        "ascii_del_to_remove_pending_conversion",
        {"ro": "ろ", "ba": "ば"},
        "r\x7fb",
        "<r>\n<>\n<b>\n",
    ),
    (
        "backspace_to_remove_pending_conversion",
        {"ro": "ろ", "ba": "ば"},
        "r\bb",
        "<r>\n<>\n<b>\n",
    ),
    (
        "backspace_to_remove_pending_conv_one_char_at_a_time",
        {"ro": "ろ", "ryo": "りょ", "sya": "しゃ"},
        "ry\b\bsya",
        "<r>\n<ry>\n<r>\n<>\n<s>\n<sy>\nしゃ\n",
    ),
    ("backspace_to_remove_converted_char", {"wa": "わ"}, "wa\b", "<w>\nわ\n\n"),
    (
        "backspace_to_remove_converted_char_one_at_a_time",
        {"wa": "わ", "ha": "は"},
        "wahaha\b\bwawa",
        "<w>\nわ\nわ<h>\nわは\nわは<h>\nわはは\nわは\nわ\nわ<w>\nわわ\nわわ<w>\nわわわ\n",
    ),
    ("invalid_prefix_leaks_out_of_pending_conv", {"ma": "ま"}, "x", "x\n"),
    (
        "invalid_prefix_leaks_one_char_at_a_time",
        {"ma": "ま", "xa": "ぁ"},
        "mx",
        "<m>\nm<x>\n",
    ),
    (
        "invalid_prefix_leaks_two_chars_at_a_time",
        {"ma": "ま", "xa": "ぁ"},
        "x?",
        "<x>\nx?\n",
    ),
    (
        "leak_invalid_prefix_then_immediately_convert",
        {"ka": "か", "J": "ッ"},
        "kJ",
        "<k>\nkッ\n",
    ),
    ("delete_converted_ascii_char", {"ka": "か"}, "kr\b", "<k>\nkr\nk\n"),
    (
        "delete_converted_ascii_char_with_prior_kana_char",
        {"ka": "か"},
        "kakr\b",
        "<k>\nか\nか<k>\nかkr\nかk\n",
    ),
    (
        "delete_converted_ascii_char_with_prior_kana_char_2",
        {"ka": "か"},
        "kakb\b",
        "<k>\nか\nか<k>\nかkb\nかk\n",
    ),
    ("delete_converted_2_byte_char", {"dmf": "é"}, "dmf\b", "<d>\n<dm>\né\n\n"),
    ("enter_clears_input_line", {"ro": "ろ", "ba": "ば"}, "ro\n", "<r>\nろ\n"),
    (
        "does_not_remember_trailing_characters_after_enter",
        {"ro": "ろ", "ba": "ば"},
        "ba\nj",
        "<b>\nば\nj\n",
    ),
    ("enter_before_typing_anything_does_not_crash", {"ro": "ろ", "ba": "ば"}, "\n", ""),
]


@pytest.mark.parametrize(
    "mapping,data,expected",
    [case[1:] for case in PENDING_CASES],
    ids=[case[0] for case in PENDING_CASES],
)
def test_show_pending_and_converted(mapping, data, expected):
    assert _run(mapping, data, show_pending_and_converted=True) == expected.encode(
        "utf-8"
    )


KANA = {"a": "あ", "i": "い", "ro": "ろ", "ha": "は"}

OSC52_CASES = [
    (
        "use_osc52_to_save_include_kanji",
        {"a": "て", "b": "す", "c": "と", "d": "成", "e": "功"},
        "abcde\n",
        "\x1b]52;c;44Gm44GZ44Go5oiQ5Yqf\a",
    ),
    (
        "use_osc52_to_save_with_padding",
        KANA,
        "ai\naiu\nAiroN\naroha\n",
        "\x1b]52;c;44GC44GE\a"
        "\x1b]52;c;44GC44GEdQ==\a"
        "\x1b]52;c;QeOBhOOCjU4=\a"
        "\x1b]52;c;44GC44KN44Gv\a",
    ),
    (
        "use_osc52_to_save_use_plus_and_slash_in_output",
        {**KANA, "#1": "\u039f"},
        "xy>\njk?\n#1#1\n3ro\n",
        "\x1b]52;c;eHk+\a"
        "\x1b]52;c;ams/\a"
        "\x1b]52;c;zp/Onw==\a"
        "\x1b]52;c;M+OCjQ==\a",
    ),
]


@pytest.mark.parametrize(
    "mapping,data,expected",
    [case[1:] for case in OSC52_CASES],
    ids=[case[0] for case in OSC52_CASES],
)
def test_save_with_osc52(mapping, data, expected):
    assert _run(mapping, data, save_with_osc52=True) == expected.encode("utf-8")


def test_encode_osc52_matches_source_example():
    assert encode_osc52("あい".encode("utf-8")) == b"\x1b]52;c;44GC44GE\a"


RPC_CASES = [
    ("await_input", {"xyz": "あ"}, "", False, "\x01"),
    ("wrap_output", {"xyz": "あ"}, "x", True, "\x01\x04\x04<x>\n\x01"),
    (
        "wrap_output_longer_orig",
        {"xyz.": "あ"},
        "xyz.",
        True,
        "\x01\x04\x04<x>\n\x01\x04\x05<xy>\n\x01\x04\x06<xyz>\n\x01\x02\x03あ\x01",
    ),
    ("unrecognized_orig_pref", {"a": "あ"}, "u", True, "\x01\x02\x01u\x01"),
    (
        "propagate_newline",
        {"a": "あ"},
        "a\n",
        False,
        "\x01\x02\x03あ\x01\x02\x01\n\x01",
    ),
    (
        "process_or_propagate_backspace",
        {"xa": "あ"},
        "x\b\b",
        True,
        "\x01\x04\x04<x>\n\x01\x04\x03<>\n\x01\x02\x01\b\x01",
    ),
    (
        "propagate_arrow_keys_1",
        {"xa": "あ"},
        "\x1b[A\x1b[B\x1ba",
        True,
        "\x01\x02\x03\x1b[A\x01\x02\x03\x1b[B\x01\x02\x02\x1ba\x01",
    ),
    ("no_extra_output_after_esc_eof", {"xa": "あ"}, "\x1b", True, "\x01"),
]


@pytest.mark.parametrize(
    "mapping,data,show_pending,expected",
    [case[1:] for case in RPC_CASES],
    ids=[case[0] for case in RPC_CASES],
)
def test_rpc_mode(mapping, data, show_pending, expected):
    out = _run(mapping, data, rpc_mode=True, show_pending_and_converted=show_pending)
    assert out == expected.encode("utf-8")


def test_control_d_ends_input():
    assert _run({"ka": "か"}, "k\x04a", show_pending_and_converted=True) == b"<k>\n"


def test_session_feed_and_render():
    session = InputSession({"ka": "か"}, InputFlags(show_pending_and_converted=True))
    assert session.feed(ord("k")) is True
    assert session.pending == "k"
    assert session.render() == b"<k>\n"
    assert session.feed(ord("a")) is True
    assert session.pending == ""
    assert session.converted == "か".encode("utf-8")
    assert session.feed(None) is False


def test_session_escape_state_in_rpc_mode():
    out = io.BytesIO()
    session = InputSession({"xa": "あ"}, InputFlags(rpc_mode=True), out)
    session.feed(0x1B)
    assert session.in_escape
    session.feed(ord("["))
    assert session.in_escape
    session.feed(ord("C"))
    assert not session.in_escape
    assert out.getvalue() == b"\x02\x03\x1b[C"


def test_session_accepts_pairs():
    session = InputSession([("a", "あ")], InputFlags(show_pending_and_converted=True))
    session.feed(ord("a"))
    assert session.render() == "あ\n".encode("utf-8")