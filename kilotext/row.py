"""A single line of text together with its tab-expanded rendering."""

from __future__ import annotations

TAB_STOP = 8


def _expand_tabs(chars: str) -> str:
    """Replace each tab with spaces up to the next tab stop."""
    parts: list[str] = []
    width = 0
    for ch in chars:
        if ch == "\t":
            pad = TAB_STOP - width % TAB_STOP
            parts.append(" " * pad)
            width += pad
        else:
            parts.append(ch)
            width += 1
    return "".join(parts)


class Row:
    """A line of the document; ``render`` always mirrors ``chars``."""

    def __init__(self, chars: str = "") -> None:
        self.chars = chars

    @property
    def chars(self) -> str:
        return self._chars

    @chars.setter
    def chars(self, value: str) -> None:
        self._chars = value
        self.render = _expand_tabs(value)

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"Row({self._chars!r})"

    def cx_to_rx(self, cx: int) -> int:
        """Convert a character index into a rendered column."""
        rx = 0
        for ch in self._chars[:cx]:
            if ch == "\t":
                rx += (TAB_STOP - 1) - (rx % TAB_STOP)
            rx += 1
        return rx

    def rx_to_cx(self, rx: int) -> int:
        """Convert a rendered column into a character index."""
        cur_rx = 0
        for cx, ch in enumerate(self._chars):
            if ch == "\t":
                cur_rx += (TAB_STOP - 1) - (cur_rx % TAB_STOP)
            cur_rx += 1
            if cur_rx > rx:
                return cx
        return len(self._chars)

    def insert_char(self, at: int, c: str | int) -> None:
        """Insert one character; an out-of-range position appends."""
        if isinstance(c, int):
            c = chr(c)
        if at < 0 or at > len(self._chars):
            at = len(self._chars)
        self.chars = self._chars[:at] + c + self._chars[at:]

    def append(self, s: str) -> None:
        """Append a string to the end of the line."""
        self.chars = self._chars + s

    def delete_char(self, at: int) -> bool:
        """Remove the character at ``at``; return whether anything changed."""
        if at < 0 or at >= len(self._chars):
            return False
        self.chars = self._chars[:at] + self._chars[at + 1:]
        return True

    def truncate(self, length: int) -> None:
        """Cut the line down to ``length`` characters."""
        self.chars = self._chars[:length]