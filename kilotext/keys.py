"""Key codes and decoding of terminal escape sequences."""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, Optional

ENTER = ord("\r")
ESCAPE = 0x1B


class Key(IntEnum):
    """Codes for keys that are not plain characters."""

    BACKSPACE = 127
    ARROW_LEFT = 1000
    ARROW_RIGHT = 1001
    ARROW_UP = 1002
    ARROW_DOWN = 1003
    DEL_KEY = 1004
    HOME_KEY = 1005
    END_KEY = 1006
    PAGE_UP = 1007
    PAGE_DOWN = 1008


def ctrl_key(k: str | int) -> int:
    """Return the code produced by pressing Ctrl together with ``k``."""
    if isinstance(k, str):
        k = ord(k)
    return k & 0x1F


_TILDE_KEYS = {
    ord("1"): Key.HOME_KEY,
    ord("3"): Key.DEL_KEY,
    ord("4"): Key.END_KEY,
    ord("5"): Key.PAGE_UP,
    ord("6"): Key.PAGE_DOWN,
    ord("7"): Key.HOME_KEY,
    ord("8"): Key.END_KEY,
}

_CSI_KEYS = {
    ord("A"): Key.ARROW_UP,
    ord("B"): Key.ARROW_DOWN,
    ord("C"): Key.ARROW_RIGHT,
    ord("D"): Key.ARROW_LEFT,
    ord("H"): Key.HOME_KEY,
    ord("F"): Key.END_KEY,
}

_SS3_KEYS = {
    ord("H"): Key.HOME_KEY,
    ord("F"): Key.END_KEY,
}


def decode_key(read_byte: Callable[[], Optional[int]]) -> int:
    """Read one keypress.

    ``read_byte`` returns the next input byte, or ``None`` when nothing
    arrived in time.  The first byte is waited for; inside an escape
    sequence a missing byte yields a bare escape.
    """
    c = read_byte()
    while c is None:
        c = read_byte()
    if c != ESCAPE:
        return c

    first = read_byte()
    if first is None:
        return ESCAPE
    second = read_byte()
    if second is None:
        return ESCAPE

    if first == ord("["):
        if ord("0") <= second <= ord("9"):
            third = read_byte()
            if third is None:
                return ESCAPE
            if third == ord("~"):
                return _TILDE_KEYS.get(second, ESCAPE)
            return ESCAPE
        return _CSI_KEYS.get(second, ESCAPE)
    if first == ord("O"):
        return _SS3_KEYS.get(second, ESCAPE)
    return ESCAPE