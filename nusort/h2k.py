"""Convert hiragana in a byte stream to katakana."""

from __future__ import annotations

import sys
from typing import BinaryIO, Sequence

from .chars import CodepointRange, codepoint_range, hiragana_to_katakana, is_complete_utf8

_BLOCK_SIZE = 4096


def h2k_text(text: str) -> str:
    """Return ``text`` with hiragana replaced by katakana."""
    return hiragana_to_katakana(text)


def _convert_sequence(seq: bytes) -> bytes:
    try:
        char = seq.decode("utf-8")
    except UnicodeDecodeError:
        return seq
    if codepoint_range(char) is CodepointRange.HIRAGANA:
        return hiragana_to_katakana(char).encode("utf-8")
    return seq


def h2k(instream: BinaryIO, outstream: BinaryIO) -> None:
    """Copy UTF-8 bytes from ``instream`` to ``outstream``, turning hiragana
    into katakana.

    A trailing incomplete UTF-8 sequence is dropped.
    """
    pending = bytearray()
    while block := instream.read(_BLOCK_SIZE):
        for byte in block:
            pending.append(byte)
            if is_complete_utf8(pending[0], len(pending)):
                outstream.write(_convert_sequence(bytes(pending)))
                pending.clear()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the converter over standard input and output."""
    if argv is None:
        argv = sys.argv[1:]
    if argv:
        sys.stderr.write("引数を渡さないでください。\n")
        return 92
    h2k(sys.stdin.buffer, sys.stdout.buffer)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())