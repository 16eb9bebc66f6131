# tinyvi

A small modal text editor for the terminal, with vi-style keys. It runs on
POSIX systems, since it uses `termios` to put the terminal into raw mode.

## Install

    pip install .

## Usage

    tinyvi [FILE]

If `FILE` exists, it is loaded. If it does not exist, the editor starts with an
empty buffer and saves to that name. Without a file name, you are asked for one
on the first save. The editor draws on the terminal's alternate screen and
returns to the normal screen when it quits.

## Keys

Normal mode:

- `h` `j` `k` `l` or the arrow keys move the cursor
- `i` enters insert mode
- `:` starts a command
- `q` on its own does nothing; use `:q`

Insert mode:

- printable ASCII characters are inserted at the cursor
- Enter splits the line at the cursor
- Backspace deletes the character before the cursor, or joins the line onto
  the one above when the cursor is at the start of a line
- left and right arrows wrap across line ends; up and down keep the column
  where the new line allows it
- Esc returns to normal mode

Commands, typed after `:` and run with Enter:

- `:w` saves, asking for a file name if there is none
- `:wq` saves and quits; if it has to ask for a file name, it quits once
  the save succeeds
- `:q` quits, but is refused while there are unsaved changes
- `:q!` quits without saving

An unknown command is reported on the status line. Backspace edits the
command line, and Esc leaves it. In the file-name prompt, Esc or an empty name
cancels the save.

## Status line

The bottom line shows the mode, the file name (`[No Name]` if there is none,
followed by `+` when there are unsaved changes, shortened to 20 characters),
and the current line out of the total. Messages such as "saved" or errors
replace it for five seconds.

## Files

Files are read as UTF-8, with CRLF line endings read as LF and a single
trailing newline dropped. Saved files are written as UTF-8 with LF line
endings and always end with a newline.

## Using it as a library

The editor state is a plain `tinyvi.editor.Editor` dataclass, and
`tinyvi.keyhandling.process_input` feeds it one key code at a time, so the
editor can be driven without a terminal:

    from tinyvi.editor import Editor
    from tinyvi.keyhandling import process_input

    ed = Editor(80, 24)
    for key in b"ihello":
        process_input(ed, key)
    print(ed.content_as_string())

`tinyvi.screen.render_screen(editor)` returns the text and escape sequences
that would draw the editor, and `tinyvi.terminal.decode_key` turns the bytes of
one key press into a key code (arrow keys map to the values in
`tinyvi.terminal.Key`).

## Limitations

- No undo, search, copy or paste.
- No horizontal scrolling: lines longer than the terminal are cut off on
  screen, and the cursor is kept within the terminal width.
- Only the four arrow keys are recognised among escape sequences; Home, End,
  Page Up, Page Down and Delete are not.
- Only printable ASCII can be typed.

## Tests

    pip install .[test]
    pytest