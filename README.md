# kilotext

kilotext is a small text editor for a POSIX terminal. It uses only the Python
standard library. The terminal is put into raw mode through `termios`.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

Open a file:

```
kilotext notes.txt
```

Or start with an empty buffer:

```
kilotext
```

An empty buffer shows a welcome line. The first time you save it, the editor
asks for a file name. If you press Escape at that prompt, the save is aborted.

## Keys

| Key                 | Action                                                               |
|---------------------|----------------------------------------------------------------------|
| Ctrl-S              | Save. Asks "Save as:" if the buffer has no file name.                |
| Ctrl-Q              | Quit. With unsaved changes, it warns three times, then quits on the next press. |
| Ctrl-F              | Incremental search.                                                  |
| Arrow keys          | Move the cursor. Left and right wrap across line ends.               |
| Home / End          | Go to the start or end of the line.                                  |
| Page Up / Page Down | Move up or down by one screen.                                       |
| Backspace / Ctrl-H  | Delete the character before the cursor. At column 0 it joins the line to the one above. |
| Delete              | Delete the character under the cursor.                               |
| Enter               | Split the line at the cursor.                                        |
| Ctrl-L / Escape     | Ignored.                                                             |

### Search

While you type a search query, the cursor jumps to the first matching line.
The arrow keys go to the next or previous match, and the search wraps around
the ends of the file. Enter leaves the cursor at the match. Escape puts the
cursor back where it was before the search.

### Display

Tabs are shown as spaces up to the next multiple of eight columns. The
inverted status bar shows the file name (at most 20 characters), the number of
lines, "(modified)" when there are unsaved edits, and the current line number.
Messages on the line below it disappear after five seconds.

When a file is saved, each line is written followed by a newline. When a file
is opened, line endings (`\n` or `\r\n`) are removed.

## Using it as a library

You can also use the parts of the editor directly:

- `kilotext.row.Row` holds one line of text in `chars`. `render` is the same
  line with tabs expanded. `cx_to_rx` and `rx_to_cx` convert between character
  positions and screen columns.
- `kilotext.document.Document` is the list of rows. `dirty` counts the edits
  made since the last load or save. `load(path)` and `save(path)` read and write
  files, and `save` returns the number of bytes written.
- `kilotext.editor.Editor(screen_rows, screen_cols, read_key, write)` holds the
  cursor, scrolling, prompts and search. It takes a key-reading function and an
  output function, so it can run without a real terminal.
  `process_keypress()` handles one key and returns `False` when the editor
  should quit.
- `kilotext.render.render_screen(editor, now)` returns the escape sequences
  for one frame.
- `kilotext.keys.decode_key(read_byte)` turns terminal input bytes into key
  codes. The codes are listed in `kilotext.keys.Key`.
- `kilotext.terminal.Terminal` is a context manager that enables raw mode and
  restores the terminal afterwards. It also reads keys, writes output and
  reports the window size.
- `kilotext.main.main(argv=None)` is the command-line entry point.

## What it does not do

kilotext has no undo and no syntax highlighting. It does not watch for window
resizes: the screen size is read once, at start-up. Keyboard input is handled
byte by byte, so each byte of a non-ASCII character you type is inserted as a
separate character. Only printable ASCII can be typed into the search and
"Save as" prompts. It runs only on systems that have `termios`.