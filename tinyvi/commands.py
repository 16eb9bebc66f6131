"""Ex-style commands typed after ':' and the save/quit actions behind them."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from .editor import Editor, Mode
from .terminal import Key

_ENTER = 13
_BACKSPACES = (127, 8)


def save_file(editor: Editor) -> bool:
    """Write the buffer to the editor's file.

    Returns True if a write was attempted (whether or not it worked) and
    False if there was no filename and a filename prompt was started.
    """
    if not editor.filename:
        editor.mode = Mode.FILENAME_PROMPT
        editor.command_buffer = ""
        editor.set_status_message("Save file as: ")
        editor.prompt_origin_command = "w"
        return False

    try:
        Path(editor.filename).write_bytes(editor.content_as_string().encode("utf-8"))
    except OSError as exc:
        editor.set_status_message(f"Error saving file: {exc}")
    else:
        editor.set_status_message(f"File '{editor.filename}' saved successfully.")
        editor.is_dirty = False
    return True


def quit_editor(editor: Editor) -> None:
    """Ask the editor to quit unless there are unsaved changes."""
    if editor.is_dirty:
        editor.set_status_message("Unsaved changes! Use :q! or :wq to save and quit.")
        return
    editor.should_quit = True


def quit_without_saving(editor: Editor) -> None:
    """Ask the editor to quit, discarding unsaved changes."""
    editor.should_quit = True


def save_and_quit(editor: Editor) -> None:
    """Save, then quit; if a filename prompt starts instead, remember to quit after it."""
    if save_file(editor):
        quit_editor(editor)
    else:
        editor.prompt_origin_command = "wq"


COMMANDS: dict[str, Callable[[Editor], object]] = {
    "w": save_file,
    "wq": save_and_quit,
    "q": quit_editor,
    "q!": quit_without_saving,
}


def execute_command(editor: Editor) -> None:
    """Run the command held in the command buffer and clear the buffer."""
    command = editor.command_buffer
    editor.command_buffer = ""
    action = COMMANDS.get(command)
    if action is None:
        editor.set_status_message(f"Unknown command: {command}")
        editor.mode = Mode.NORMAL
    else:
        action(editor)


def handle_command_key(editor: Editor, key: int) -> None:
    """Handle one key typed while in command mode."""
    if key == Key.ESC:
        editor.mode = Mode.NORMAL
        editor.command_buffer = ""
    elif key == _ENTER:
        original_mode = editor.mode
        execute_command(editor)
        if editor.mode == original_mode:
            editor.mode = Mode.NORMAL
    elif key in _BACKSPACES:
        editor.command_buffer = editor.command_buffer[:-1]
    elif 32 <= key <= 126:
        editor.command_buffer += chr(key)