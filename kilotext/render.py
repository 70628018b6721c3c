"""Building the screen contents from the editor state."""

from __future__ import annotations

WELCOME = "Hello World!"
MESSAGE_TIMEOUT = 5
CLEAR_LINE = "\x1b[K"
_STATUS_LIMIT = 79


def draw_rows(editor) -> str:
    """Return the text area: one line per screen row."""
    document = editor.document
    lines = []
    for y in range(editor.screen_rows):
        filerow = y + editor.rowoff
        if filerow >= len(document):
            if len(document) == 0 and y == editor.screen_rows // 3:
                welcome = WELCOME[: max(editor.screen_cols, 0)]
                padding = (editor.screen_cols - len(welcome)) // 2
                line = ("~" + " " * (padding - 1) if padding > 0 else "") + welcome
            else:
                line = "~"
        else:
            start = editor.coloff
            line = document[filerow].render[start : start + max(editor.screen_cols, 0)]
        lines.append(line + CLEAR_LINE + "\r\n")
    return "".join(lines)


def draw_status_bar(editor) -> str:
    """Return the inverted status bar with file name, size and position."""
    name = editor.filename if editor.filename is not None else "[No Name]"
    count = len(editor.document)
    modified = "(modified)" if editor.document.dirty else ""
    status = f"{name[:20]} - {count} lines {modified}"[:_STATUS_LIMIT]
    rstatus = f"{editor.cy + 1}/{count}"[:_STATUS_LIMIT]
    cols = editor.screen_cols
    status = status[: max(cols, 0)]
    parts = [status]
    length = len(status)
    while length < cols:
        if cols - length == len(rstatus):
            parts.append(rstatus)
            break
        parts.append(" ")
        length += 1
    return "\x1b[7m" + "".join(parts) + "\x1b[m\r\n"


def draw_message_bar(editor, now: float) -> str:
    """Return the message line; messages older than five seconds are hidden."""
    message = editor.status_message[: max(editor.screen_cols, 0)]
    if message and now - editor.status_time < MESSAGE_TIMEOUT:
        return CLEAR_LINE + message
    return CLEAR_LINE


def render_screen(editor, now: float) -> str:
    """Scroll the view and return the full escape sequence for one frame."""
    editor.scroll()
    cursor = f"\x1b[{editor.cy - editor.rowoff + 1};{editor.rx - editor.coloff + 1}H"
    return "".join(
        (
            "\x1b[?25l",
            "\x1b[H",
            draw_rows(editor),
            draw_status_bar(editor),
            draw_message_bar(editor, now),
            cursor,
            "\x1b[?25h",
        )
    )