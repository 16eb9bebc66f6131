"""Routing of key presses to the handler for the editor's current mode."""

from __future__ import annotations

from collections.abc import Callable

from .commands import handle_command_key, quit_editor, save_file
from .editor import Editor, Mode
from .terminal import Key

_ENTER = 13
_BACKSPACES = (127, 8)
_SAVE_PROMPT = "Save file as: "


def _is_printable(key: int) -> bool:
    return 32 <= key <= 126


def _normal_mode(editor: Editor, key: int) -> None:
    if key == ord("i"):
        editor.mode = Mode.INSERT
    elif key in (ord("h"), Key.ARROW_LEFT):
        if editor.cursor_x > 0:
            editor.cursor_x -= 1
    elif key in (ord("j"), Key.ARROW_DOWN):
        if editor.cursor_y < len(editor.content) - 1:
            editor.cursor_y += 1
            if editor.cursor_y >= editor.row_offset + editor.term_height - 1:
                editor.row_offset += 1
            editor.ensure_cursor_bounds()
    elif key in (ord("k"), Key.ARROW_UP):
        if editor.cursor_y > 0:
            editor.cursor_y -= 1
            if editor.cursor_y < editor.row_offset:
                editor.row_offset -= 1
            editor.ensure_cursor_bounds()
    elif key in (ord("l"), Key.ARROW_RIGHT):
        if editor.cursor_y < len(editor.content):
            if editor.cursor_x < len(editor.content[editor.cursor_y]):
                editor.cursor_x += 1
    elif key == ord(":"):
        editor.mode = Mode.COMMAND
        editor.command_buffer = ""
        editor.set_status_message("")
    # 'q' and every other key do nothing here; quitting needs ':q'.


def _insert_mode(editor: Editor, key: int) -> None:
    if key == Key.ESC:
        editor.mode = Mode.NORMAL
        editor.status_message_time = 0.0
    elif key == _ENTER:
        editor.insert_newline()
    elif key in _BACKSPACES:
        editor.delete_char()
    elif key == Key.ARROW_UP:
        if editor.cursor_y > 0:
            editor.cursor_y -= 1
            editor.ensure_cursor_bounds()
    elif key == Key.ARROW_DOWN:
        if editor.cursor_y < len(editor.content) - 1:
            editor.cursor_y += 1
            editor.ensure_cursor_bounds()
    elif key == Key.ARROW_LEFT:
        if editor.cursor_x > 0:
            editor.cursor_x -= 1
        elif editor.cursor_y > 0:
            editor.cursor_y -= 1
            if editor.cursor_y < len(editor.content):
                editor.cursor_x = len(editor.content[editor.cursor_y])
            else:
                editor.cursor_x = 0
    elif key == Key.ARROW_RIGHT:
        if editor.cursor_y < len(editor.content):
            if editor.cursor_x < len(editor.content[editor.cursor_y]):
                editor.cursor_x += 1
            elif editor.cursor_y < len(editor.content) - 1:
                editor.cursor_y += 1
                editor.cursor_x = 0
    elif _is_printable(key):
        editor.insert_char(key)


def _filename_prompt(editor: Editor, key: int) -> None:
    if key == Key.ESC:
        editor.set_status_message("Save aborted.")
        editor.mode = Mode.NORMAL
        editor.command_buffer = ""
    elif key == _ENTER:
        filename = editor.command_buffer
        if not filename:
            editor.set_status_message("Save aborted.")
            editor.mode = Mode.NORMAL
        else:
            editor.filename = filename
            editor.set_status_message("")
            if save_file(editor) and editor.prompt_origin_command == "wq":
                # A failed save leaves the buffer dirty, so the quit is refused.
                quit_editor(editor)
            editor.mode = Mode.NORMAL
            editor.prompt_origin_command = ""
        editor.command_buffer = ""
    elif key in _BACKSPACES:
        if editor.command_buffer:
            editor.command_buffer = editor.command_buffer[:-1]
            editor.set_status_message(_SAVE_PROMPT + editor.command_buffer)
    elif _is_printable(key):
        editor.command_buffer += chr(key)
        editor.set_status_message(_SAVE_PROMPT + editor.command_buffer)


_HANDLERS: dict[Mode, Callable[[Editor, int], None]] = {
    Mode.NORMAL: _normal_mode,
    Mode.INSERT: _insert_mode,
    Mode.COMMAND: handle_command_key,
    Mode.FILENAME_PROMPT: _filename_prompt,
}


def process_input(editor: Editor, key: int) -> None:
    """Handle one key press according to the editor's current mode."""
    _HANDLERS[editor.mode](editor, key)