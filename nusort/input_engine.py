"""Interactive kana/kanji input: turns typed keys into converted text.

In RPC mode all output is framed in packets:

* ``\\x01`` -- waiting for the next input byte.
* ``\\x02`` + size byte + data -- converted data; backspace and newline are
  passed on as ``\\b`` and ``\\n``.
* ``\\x04`` + size byte + data -- UTF-8 text to display to the user.
"""

from __future__ import annotations

import base64
import io
import sys
from bisect import bisect_left
from dataclasses import dataclass
from typing import BinaryIO, Iterable, Mapping, Union

from .chars import is_complete_utf8

RPC_AWAIT_INPUT = b"\x01"
RPC_CONVERTED = b"\x02"
RPC_DISPLAY = b"\x04"

_MAX_PACKET = 255
_EOT = 0x04
_ESC = 0x1B
_NEWLINE = 0x0A
_BACKSPACES = (0x08, 0x7F)

MappingSource = Union[Mapping[str, str], Iterable[tuple[str, str]]]


@dataclass
class InputFlags:
    """Options controlling what an input session shows and sends."""

    show_pending_and_converted: bool = False
    save_with_osc52: bool = False
    rpc_mode: bool = False


def encode_osc52(data: bytes) -> bytes:
    """Return the OSC 52 sequence that copies ``data`` to the clipboard."""
    return b"\x1b]52;c;" + base64.b64encode(data) + b"\a"


def _packets(kind: bytes, data: bytes) -> bytes:
    chunks = (data[i : i + _MAX_PACKET] for i in range(0, len(data), _MAX_PACKET))
    return b"".join(kind + bytes([len(chunk)]) + chunk for chunk in chunks)


class InputSession:
    """State of one input session: pending keys and converted text."""

    def __init__(
        self,
        mapping: MappingSource,
        flags: InputFlags | None = None,
        outstream: BinaryIO | None = None,
    ) -> None:
        self._codes: dict[str, str] = dict(mapping)
        self._sorted_codes = sorted(self._codes)
        self.flags = flags if flags is not None else InputFlags()
        self.outstream = outstream if outstream is not None else io.BytesIO()
        self._converted = bytearray()
        self._converted_used = False
        self._pending = ""
        self._deleted_pending = False
        self._deleted_converted = False
        self._escape = bytearray()

    @property
    def pending(self) -> str:
        """Keys typed so far that are not yet converted."""
        return self._pending

    @property
    def converted(self) -> bytes:
        """Converted text held for display (empty in RPC mode)."""
        return bytes(self._converted)

    @property
    def in_escape(self) -> bool:
        """Whether an escape sequence is partly read."""
        return bool(self._escape)

    def _write(self, data: bytes) -> None:
        self.outstream.write(data)
        self.outstream.flush()

    def _propagate(self, data: bytes) -> None:
        self._write(_packets(RPC_CONVERTED, data))

    def _append_converted(self, data: bytes) -> None:
        if self.flags.rpc_mode:
            self._propagate(data)
        else:
            self._converted += data
            self._converted_used = True

    def _is_prefix(self, code: str) -> bool:
        if not code:
            return True
        index = bisect_left(self._sorted_codes, code)
        return index < len(self._sorted_codes) and self._sorted_codes[
            index
        ].startswith(code)

    def _resolve(self) -> None:
        while True:
            conv = self._codes.get(self._pending)
            if conv is not None:
                self._append_converted(conv.encode("utf-8"))
                self._pending = ""
                return
            if self._is_prefix(self._pending):
                return
            self._append_converted(self._pending[0].encode("latin-1"))
            self._pending = self._pending[1:]

    def _delete_last_converted_char(self) -> None:
        conv = self._converted
        if is_complete_utf8(conv[-1], 1):
            size = 1
        elif len(conv) >= 2 and is_complete_utf8(conv[-2], 2):
            size = 2
        else:
            size = 3
        del conv[-size:]

    def _backspace(self) -> None:
        if self._pending:
            self._deleted_pending = True
            self._pending = self._pending[:-1]
        elif self._converted:
            self._delete_last_converted_char()
            self._deleted_converted = True
        elif self.flags.rpc_mode:
            self._propagate(b"\b")

    def _enter(self) -> None:
        if self._converted_used:
            if self.flags.save_with_osc52:
                self._write(encode_osc52(bytes(self._converted)))
            self._converted.clear()
        elif self.flags.rpc_mode:
            self._propagate(b"\n")

    def _finish_escape(self) -> None:
        if self.flags.rpc_mode:
            self._propagate(bytes(self._escape))
        self._escape.clear()

    def _continue_escape(self, ch: int | None) -> bool:
        if len(self._escape) == 1:
            if ch is None:
                self._escape.clear()
                return False
            self._escape.append(ch)
            if ch != ord("["):
                self._finish_escape()
            return True
        # Arrow keys and the like: one more byte follows "\x1b[".
        self._escape.append(0xFF if ch is None else ch)
        self._finish_escape()
        return True

    def feed(self, ch: int | None) -> bool:
        """Process one input byte, or None at end of input.

        Returns False when the session ends (end of input or ^D).
        """
        self._deleted_pending = False
        self._deleted_converted = False

        if self._escape:
            return self._continue_escape(ch)
        if ch is None or ch == _EOT:
            return False
        if ch == _ESC:
            self._escape = bytearray([_ESC])
            return True
        if ch == _NEWLINE:
            self._enter()
            return True

        if ch in _BACKSPACES:
            self._backspace()
        else:
            self._pending += chr(ch)
        self._resolve()
        return True

    def render(self) -> bytes:
        """Return the text to display for the current state."""
        if not self.flags.show_pending_and_converted:
            return b""
        parts = [bytes(self._converted)]
        show_pending = bool(self._pending) or self._deleted_pending
        if show_pending:
            parts.append(b"<" + self._pending.encode("latin-1") + b">")
        if show_pending or self._converted or self._deleted_converted:
            parts.append(b"\n")
        return b"".join(parts)


def run_input(
    mapping: MappingSource,
    flags: InputFlags | None = None,
    instream: BinaryIO | None = None,
    outstream: BinaryIO | None = None,
) -> None:
    """Read keys from ``instream`` until end of input or ^D, writing display
    text and converted data to ``outstream``."""
    flags = flags if flags is not None else InputFlags()
    instream = instream if instream is not None else sys.stdin.buffer
    outstream = outstream if outstream is not None else sys.stdout.buffer
    session = InputSession(mapping, flags, outstream)

    while True:
        if not session.in_escape:
            display = session.render()
            if flags.rpc_mode:
                outstream.write(_packets(RPC_DISPLAY, display))
                outstream.write(RPC_AWAIT_INPUT)
            else:
                outstream.write(display)
            outstream.flush()
        byte = instream.read(1)
        if not session.feed(byte[0] if byte else None):
            break
    outstream.flush()