"""Command-line entry point for the editor."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from kilotext.editor import Editor
from kilotext.terminal import Terminal

HELP = "HELP: Ctrl-S = save | Ctrl-Q = quit | Ctrl-F = find"


def _run(terminal: Terminal, args: Sequence[str]) -> int:
    rows, cols = terminal.window_size()
    editor = Editor(rows - 2, cols, terminal.read_key, terminal.write)
    if args:
        editor.open(args[0])
    editor.set_status_message(HELP)
    while True:
        editor.refresh_screen()
        if not editor.process_keypress():
            return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the editor on the terminal, optionally opening a file."""
    args = list(sys.argv[1:] if argv is None else argv)
    terminal = Terminal()
    try:
        with terminal:
            return _run(terminal, args)
    except OSError as exc:
        terminal.clear()
        print(exc, file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())