"""Drawing the editor state onto the terminal."""

from __future__ import annotations

import logging
import sys
import time
from collections.abc import Iterator
from typing import TextIO

from .editor import Editor, Mode
from .terminal import get_size

log = logging.getLogger(__name__)

_HIDE_CURSOR = "\x1b[?25l"
_SHOW_CURSOR = "\x1b[?25h"
_HOME = "\x1b[H"
_CLEAR_LINE = "\x1b[K"
_INVERT = "\x1b[7m"
_RESET = "\x1b[m"

_MESSAGE_SECONDS = 5.0
_MAX_FILENAME_LEN = 20


def _move_to(row: int, col: int) -> str:
    return f"\x1b[{row};{col}H"


def _text_rows(editor: Editor) -> Iterator[str]:
    rows = editor.term_height - 1
    for y in range(rows):
        file_row = editor.row_offset + y
        if 0 <= file_row < len(editor.content):
            yield editor.content[file_row][: editor.term_width]
        else:
            yield "~"
        yield _CLEAR_LINE
        if y < rows - 1:
            yield "\r\n"


def _default_status(editor: Editor) -> str:
    mode_name = "INSERT" if editor.mode == Mode.INSERT else "NORMAL"
    name = editor.filename or "[No Name]"
    if editor.is_dirty:
        name += " +"
    if len(name) > _MAX_FILENAME_LEN:
        name = name[: _MAX_FILENAME_LEN - 3] + "..."
    left = f" {mode_name} | {name} "
    right = f" {editor.cursor_y + 1}/{len(editor.content)} "
    spaces = max(editor.term_width - len(left) - len(right), 0)
    return left + " " * spaces + right


def _status_bar(editor: Editor) -> str:
    if editor.mode == Mode.COMMAND:
        msg = ":" + editor.command_buffer
    elif editor.mode == Mode.FILENAME_PROMPT:
        msg = editor.status_message
    elif time.time() - editor.status_message_time < _MESSAGE_SECONDS:
        msg = editor.status_message
    else:
        editor.status_message = ""
        msg = _default_status(editor)

    msg = msg[: editor.term_width]
    padding = " " * (editor.term_width - len(msg))
    return _move_to(editor.term_height, 1) + _INVERT + msg + padding + _RESET


def _cursor_position(editor: Editor) -> str:
    row = editor.cursor_y - editor.row_offset + 1
    col = editor.cursor_x - editor.col_offset + 1
    row = max(row, 1)
    if row >= editor.term_height:
        row = editor.term_height - 1
    col = min(max(col, 1), editor.term_width)
    return _move_to(row, col)


def render_screen(editor: Editor) -> str:
    """The escape sequences and text that redraw the whole screen.

    An expired status message is cleared from the editor as a side effect.
    """
    parts = [_HIDE_CURSOR, _HOME]
    parts.extend(_text_rows(editor))
    parts.append(_status_bar(editor))
    parts.append(_cursor_position(editor))
    parts.append(_SHOW_CURSOR)
    return "".join(parts)


def refresh_screen(editor: Editor, out: TextIO | None = None) -> None:
    """Update the editor's terminal size and redraw the screen to ``out``."""
    try:
        editor.term_width, editor.term_height = get_size()
    except (OSError, ValueError) as exc:
        log.error("Error getting terminal size: %s", exc)

    stream = sys.stdout if out is None else out
    try:
        stream.write(render_screen(editor))
        stream.flush()
    except OSError as exc:
        log.error("Error writing to stdout: %s", exc)