"""The text buffer: a list of rows with change tracking and file I/O."""

from __future__ import annotations

import os

from kilotext.row import Row

_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class Document:
    """An ordered collection of rows; ``dirty`` counts unsaved edits."""

    def __init__(self) -> None:
        self.rows: list[Row] = []
        self.dirty = 0

    def __len__(self) -> int:
        return len(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    def __iter__(self):
        return iter(self.rows)

    def insert_row(self, at: int, s: str) -> None:
        """Insert a new row before index ``at``; out-of-range is ignored."""
        if at < 0 or at > len(self.rows):
            return
        self.rows.insert(at, Row(s))
        self.dirty += 1

    def delete_row(self, at: int) -> None:
        """Remove the row at ``at``; out-of-range is ignored."""
        if at < 0 or at >= len(self.rows):
            return
        del self.rows[at]
        self.dirty += 1

    def insert_char(self, row: int, at: int, c: str | int) -> None:
        """Insert a character into row ``row`` at position ``at``."""
        self.rows[row].insert_char(at, c)
        self.dirty += 1

    def append_to_row(self, row: int, s: str) -> None:
        """Append a string to row ``row``."""
        self.rows[row].append(s)
        self.dirty += 1

    def delete_char(self, row: int, at: int) -> None:
        """Delete a character from row ``row``; out-of-range is ignored."""
        if self.rows[row].delete_char(at):
            self.dirty += 1

    def split_row(self, row: int, at: int) -> None:
        """Break row ``row`` at position ``at`` into two rows."""
        if at == 0:
            self.insert_row(row, "")
            return
        current = self.rows[row]
        self.insert_row(row + 1, current.chars[at:])
        current.truncate(at)

    def to_string(self) -> str:
        """Join all rows, each followed by a newline."""
        return "".join(row.chars + "\n" for row in self.rows)

    def load(self, path: str | os.PathLike) -> None:
        """Append the lines of a file, dropping line terminators."""
        with open(path, encoding=_ENCODING, errors=_ERRORS, newline="\n") as fh:
            for line in fh:
                self.insert_row(len(self.rows), line.rstrip("\r\n"))
        self.dirty = 0

    def save(self, path: str | os.PathLike) -> int:
        """Write the buffer to ``path`` and return the number of bytes written."""
        data = self.to_string().encode(_ENCODING, _ERRORS)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
        with os.fdopen(fd, "wb") as fh:
            fh.write(data)
        self.dirty = 0
        return len(data)