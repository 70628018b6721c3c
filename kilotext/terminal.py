"""Raw-mode terminal access: key input, output and window size."""

from __future__ import annotations

import os
import re
import termios
from typing import Optional

from kilotext.keys import decode_key

_CURSOR_REPORT = re.compile(rb"\s*([+-]?\d+);\s*([+-]?\d+)")


def parse_cursor_report(data: bytes) -> tuple[int, int]:
    """Parse a ``ESC [ rows ; cols R`` cursor report into (rows, cols)."""
    if data.endswith(b"R"):
        data = data[:-1]
    if not data.startswith(b"\x1b["):
        raise ValueError(f"not a cursor position report: {data!r}")
    match = _CURSOR_REPORT.match(data, 2)
    if match is None:
        raise ValueError(f"malformed cursor position report: {data!r}")
    return int(match.group(1)), int(match.group(2))


class Terminal:
    """A terminal attached to an input and an output file descriptor."""

    def __init__(self, fd_in: int = 0, fd_out: int = 1) -> None:
        self.fd_in = fd_in
        self.fd_out = fd_out
        self._original: Optional[list] = None

    def enable_raw_mode(self) -> None:
        """Switch the input to raw mode, remembering the previous settings."""
        try:
            attrs = termios.tcgetattr(self.fd_in)
        except termios.error as exc:
            raise OSError(f"tcgetattr: {exc}") from exc
        self._original = attrs
        raw = list(attrs)
        raw[6] = list(attrs[6])
        raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK
                    | termios.ISTRIP | termios.IXON)
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, raw)
        except termios.error as exc:
            raise OSError(f"tcsetattr: {exc}") from exc

    def disable_raw_mode(self) -> None:
        """Restore the settings saved by :meth:`enable_raw_mode`."""
        if self._original is None:
            return
        try:
            termios.tcsetattr(self.fd_in, termios.TCSAFLUSH, self._original)
        except termios.error as exc:
            raise OSError(f"tcsetattr: {exc}") from exc
        self._original = None

    def __enter__(self) -> "Terminal":
        self.enable_raw_mode()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.disable_raw_mode()

    def _read_byte(self) -> Optional[int]:
        try:
            data = os.read(self.fd_in, 1)
        except BlockingIOError:
            return None
        return data[0] if data else None

    def read_key(self) -> int:
        """Wait for and return one keypress."""
        return decode_key(self._read_byte)

    def write(self, data: bytes | str) -> None:
        """Write all of ``data`` to the output."""
        if isinstance(data, str):
            data = data.encode("utf-8", "surrogateescape")
        view = memoryview(data)
        while view:
            written = os.write(self.fd_out, view)
            view = view[written:]

    def _cursor_position(self) -> tuple[int, int]:
        self.write(b"\x1b[6n")
        buf = bytearray()
        while len(buf) < 31:
            byte = self._read_byte()
            if byte is None or byte == ord("R"):
                break
            buf.append(byte)
        try:
            return parse_cursor_report(bytes(buf))
        except ValueError as exc:
            raise OSError(f"getWindowSize: {exc}") from exc

    def window_size(self) -> tuple[int, int]:
        """Return the window size as (rows, cols)."""
        try:
            size = os.get_terminal_size(self.fd_out)
        except OSError:
            size = None
        if size is None or size.columns == 0:
            self.write(b"\x1b[999C\x1b[999B")
            return self._cursor_position()
        return size.lines, size.columns

    def clear(self) -> None:
        """Clear the screen and move the cursor home."""
        self.write(b"\x1b[2J\x1b[H")