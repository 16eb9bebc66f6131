"""Command-line entry point: open a file and run the editor loop."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from .editor import Editor
from .keyhandling import process_input
from .screen import refresh_screen
from .terminal import RawMode, TerminalError, get_size, read_key

log = logging.getLogger(__name__)

_DEFAULT_WIDTH = 80
_DEFAULT_HEIGHT = 24


def load_editor(filename: str | None, width: int, height: int) -> Editor:
    """A new editor of the given size, holding ``filename`` if it can be read.

    A missing file gives an empty buffer that will be saved under that name.
    """
    editor = Editor(term_width=width, term_height=height)
    if not filename:
        return editor
    editor.filename = str(filename)
    try:
        data = Path(filename).read_bytes()
    except FileNotFoundError:
        pass
    except OSError as exc:
        log.error("Error opening file '%s': %s", filename, exc)
    else:
        editor.load_file(data)
    return editor


def _run(editor: Editor, fd: int) -> None:
    refresh_screen(editor)
    while not editor.should_quit:
        process_input(editor, read_key(fd))
        refresh_screen(editor)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the editor on the file named by the first argument, if any."""
    args = list(sys.argv[1:] if argv is None else argv)

    try:
        width, height = get_size()
    except (OSError, ValueError) as exc:
        log.warning("Error getting terminal size on init: %s. Using defaults.", exc)
        width, height = _DEFAULT_WIDTH, _DEFAULT_HEIGHT

    editor = load_editor(args[0] if args else None, width, height)

    try:
        fd = sys.stdin.fileno()
    except (OSError, ValueError) as exc:
        log.error("Failed to enable raw mode: %s", exc)
        return 1

    try:
        with RawMode(fd):
            _run(editor, fd)
    except TerminalError as exc:
        log.error("Failed to enable raw mode: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())