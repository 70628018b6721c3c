"""Editor state: cursor movement, editing commands, prompts and search."""

from __future__ import annotations

import os
import time
from typing import Callable, Optional

from kilotext.document import Document
from kilotext.keys import ENTER, ESCAPE, Key, ctrl_key
from kilotext.render import render_screen

QUIT_TIMES = 3
_STATUS_LIMIT = 79

PromptCallback = Callable[[str, int], None]


class Editor:
    """An editing session over one document.

    ``screen_rows`` is the height of the text area, without the two bars.
    ``read_key`` returns the next keypress; ``write`` sends screen output.
    """

    def __init__(
        self,
        screen_rows: int,
        screen_cols: int,
        read_key: Callable[[], int],
        write: Callable[[str], object],
    ) -> None:
        self.screen_rows = screen_rows
        self.screen_cols = screen_cols
        self._read_key = read_key
        self._write = write
        self.document = Document()
        self.cx = 0
        self.cy = 0
        self.rx = 0
        self.rowoff = 0
        self.coloff = 0
        self.filename: Optional[str] = None
        self.status_message = ""
        self.status_time = 0.0
        self._quit_times = QUIT_TIMES
        self._last_match = -1
        self._direction = 1

    @property
    def dirty(self) -> int:
        return self.document.dirty

    # files

    def open(self, path: str | os.PathLike) -> None:
        """Load a file into the document and remember its name."""
        self.filename = os.fspath(path)
        self.document.load(path)

    def save(self) -> None:
        """Write the document, asking for a file name if there is none."""
        if self.filename is None:
            self.filename = self.prompt("Save as: {} (ESC to cancel)", None)
            if self.filename is None:
                self.set_status_message("Save aborted")
                return
        try:
            written = self.document.save(self.filename)
        except OSError as exc:
            self.set_status_message(f"Can't save! I/O error: {exc.strerror or exc}")
            return
        self.set_status_message(f"{written} bytes written to disk")

    # editing

    def insert_char(self, c: str | int) -> None:
        """Insert a character at the cursor and advance past it."""
        if self.cy == len(self.document):
            self.document.insert_row(len(self.document), "")
        self.document.insert_char(self.cy, self.cx, c)
        self.cx += 1

    def insert_newline(self) -> None:
        """Break the current line at the cursor."""
        self.document.split_row(self.cy, self.cx)
        self.cy += 1
        self.cx = 0

    def delete_char(self) -> None:
        """Delete the character left of the cursor, joining lines at column 0."""
        if self.cy == len(self.document):
            return
        if self.cx == 0 and self.cy == 0:
            return
        if self.cx > 0:
            self.document.delete_char(self.cy, self.cx - 1)
            self.cx -= 1
        else:
            previous = self.cy - 1
            self.cx = len(self.document[previous])
            self.document.append_to_row(previous, self.document[self.cy].chars)
            self.document.delete_row(self.cy)
            self.cy -= 1

    def _current_row_length(self) -> Optional[int]:
        if self.cy >= len(self.document):
            return None
        return len(self.document[self.cy])

    def move_cursor(self, key: int) -> None:
        """Move the cursor one step in the direction of an arrow key."""
        row_len = self._current_row_length()
        if key == Key.ARROW_LEFT:
            if self.cx != 0:
                self.cx -= 1
            elif self.cy > 0:
                self.cy -= 1
                self.cx = len(self.document[self.cy])
        elif key == Key.ARROW_RIGHT:
            if row_len is not None and self.cx < row_len:
                self.cx += 1
            elif row_len is not None and self.cx == row_len:
                self.cy += 1
                self.cx = 0
        elif key == Key.ARROW_UP:
            if self.cy != 0:
                self.cy -= 1
        elif key == Key.ARROW_DOWN:
            if self.cy < len(self.document):
                self.cy += 1
        row_len = self._current_row_length() or 0
        if self.cx > row_len:
            self.cx = row_len

    def process_keypress(self) -> bool:
        """Handle one keypress; return False when the editor should quit."""
        c = self._read_key()
        if c == ENTER:
            self.insert_newline()
        elif c == ctrl_key("q"):
            if self.document.dirty and self._quit_times > 0:
                self.set_status_message(
                    "WARNING!!! File has unsaved changes. "
                    f"Press Ctrl-Q {self._quit_times} more times to quit."
                )
                self._quit_times -= 1
                return True
            self._write("\x1b[2J\x1b[H")
            return False
        elif c == ctrl_key("s"):
            self.save()
        elif c == Key.HOME_KEY:
            self.cx = 0
        elif c == Key.END_KEY:
            if self.cy < len(self.document):
                self.cx = len(self.document[self.cy])
        elif c == ctrl_key("f"):
            self.find()
        elif c in (Key.BACKSPACE, ctrl_key("h"), Key.DEL_KEY):
            if c == Key.DEL_KEY:
                self.move_cursor(Key.ARROW_RIGHT)
            self.delete_char()
        elif c in (Key.PAGE_UP, Key.PAGE_DOWN):
            if c == Key.PAGE_UP:
                self.cy = self.rowoff
                step = Key.ARROW_UP
            else:
                self.cy = min(self.rowoff + self.screen_rows - 1, len(self.document))
                step = Key.ARROW_DOWN
            for _ in range(self.screen_rows):
                self.move_cursor(step)
        elif c in (Key.ARROW_UP, Key.ARROW_DOWN, Key.ARROW_LEFT, Key.ARROW_RIGHT):
            self.move_cursor(c)
        elif c in (ctrl_key("l"), ESCAPE):
            pass
        else:
            self.insert_char(c)
        self._quit_times = QUIT_TIMES
        return True

    # messages and prompts

    def set_status_message(self, message: str) -> None:
        """Show a message in the message bar for a few seconds."""
        self.status_message = message[:_STATUS_LIMIT]
        self.status_time = time.time()

    def prompt(self, template: str, callback: Optional[PromptCallback] = None) -> Optional[str]:
        """Read a line in the message bar; ``{}`` in ``template`` shows the input.

        Returns the text on Enter, or None when cancelled with Escape.
        """
        buf = ""
        while True:
            self.set_status_message(template.format(buf))
            self.refresh_screen()
            c = self._read_key()
            if c in (Key.DEL_KEY, ctrl_key("h"), Key.BACKSPACE):
                buf = buf[:-1]
            elif c == ESCAPE:
                self.set_status_message("")
                if callback:
                    callback(buf, c)
                return None
            elif c == ENTER:
                if buf:
                    self.set_status_message("")
                    if callback:
                        callback(buf, c)
                    return buf
            elif 32 <= c < 127:
                buf += chr(c)
            if callback:
                callback(buf, c)

    # search

    def _find_callback(self, query: str, key: int) -> None:
        if key in (ENTER, ESCAPE):
            self._last_match = -1
            self._direction = 1
            return
        if key in (Key.ARROW_RIGHT, Key.ARROW_DOWN):
            self._direction = 1
        elif key in (Key.ARROW_LEFT, Key.ARROW_UP):
            self._direction = -1
        else:
            self._last_match = -1
            self._direction = 1
        if self._last_match == -1:
            self._direction = 1

        count = len(self.document)
        current = self._last_match
        for _ in range(count):
            current += self._direction
            if current == -1:
                current = count - 1
            elif current == count:
                current = 0
            row = self.document[current]
            found = row.render.find(query)
            if found != -1:
                self._last_match = current
                self.cy = current
                self.cx = row.rx_to_cx(found)
                self.rowoff = count
                break

    def find(self) -> None:
        """Search interactively; Escape puts the cursor back where it was."""
        saved = (self.cx, self.cy, self.coloff, self.rowoff)
        query = self.prompt("Search: {} (Use ESC/Arrows/Enter)", self._find_callback)
        if query is None:
            self.cx, self.cy, self.coloff, self.rowoff = saved

    # screen

    def scroll(self) -> None:
        """Adjust the offsets so the cursor is inside the visible area."""
        self.rx = 0
        if self.cy < len(self.document):
            self.rx = self.document[self.cy].cx_to_rx(self.cx)
        if self.cy < self.rowoff:
            self.rowoff = self.cy
        if self.cy >= self.rowoff + self.screen_rows:
            self.rowoff = self.cy - self.screen_rows + 1
        if self.rx < self.coloff:
            self.coloff = self.rx
        if self.rx >= self.coloff + self.screen_cols:
            self.coloff = self.rx - self.screen_cols + 1

    def refresh_screen(self) -> None:
        """Redraw the whole screen."""
        self._write(render_screen(self, time.time()))