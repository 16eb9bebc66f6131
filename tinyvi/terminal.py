"""Raw terminal mode, key reading and terminal size."""

from __future__ import annotations

import enum
import logging
import os
import sys
import termios
import tty
from typing import Any

log = logging.getLogger(__name__)

_ENTER_ALT_SCREEN = "\x1b[?1049h"
_LEAVE_ALT_SCREEN = "\x1b[?1049l"
_CLEAR_AND_HOME = "\x1b[2J\x1b[H"

_ARROWS = {
    ord("A"): 250,
    ord("B"): 251,
    ord("C"): 253,
    ord("D"): 252,
}


class Key(enum.IntEnum):
    """Key codes for keys that are not plain ASCII characters."""

    NULL = 0
    ESC = 27
    ARROW_UP = 250
    ARROW_DOWN = 251
    ARROW_LEFT = 252
    ARROW_RIGHT = 253


class TerminalError(OSError):
    """The terminal could not be switched into or out of raw mode."""


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def enable_raw_mode(fd: int) -> list[Any]:
    """Put ``fd`` into raw mode with a 100 ms read timeout.

    Returns the original attributes so they can be restored later.
    """
    try:
        original = termios.tcgetattr(fd)
    except termios.error as exc:
        raise TerminalError(f"error getting initial termios: {exc}") from exc

    try:
        tty.setraw(fd)
        current = termios.tcgetattr(fd)
        current[6][termios.VMIN] = 0
        current[6][termios.VTIME] = 1
        termios.tcsetattr(fd, termios.TCSANOW, current)
    except termios.error as exc:
        try:
            termios.tcsetattr(fd, termios.TCSANOW, original)
        except termios.error:
            pass
        raise TerminalError(f"error setting terminal to raw mode: {exc}") from exc

    _write(_ENTER_ALT_SCREEN)
    return original


def disable_raw_mode(fd: int, original: list[Any] | None) -> None:
    """Leave the alternate screen and restore the attributes saved earlier."""
    _write(_LEAVE_ALT_SCREEN + _CLEAR_AND_HOME)
    if original is not None:
        try:
            termios.tcsetattr(fd, termios.TCSANOW, original)
        except termios.error as exc:
            log.error("Error restoring terminal state: %s", exc)


class RawMode:
    """Context manager holding a terminal in raw mode for its duration."""

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self.original: list[Any] | None = None

    def __enter__(self) -> RawMode:
        self.original = enable_raw_mode(self.fd)
        return self

    def __exit__(self, *args: object) -> None:
        disable_raw_mode(self.fd, self.original)
        self.original = None


def decode_key(data: bytes) -> int:
    """Turn the bytes of one key press into a key code."""
    if not data:
        return Key.NULL
    first = data[0]
    if first != Key.ESC:
        return first
    sequence = data[1:3]
    if len(sequence) >= 2 and sequence[0] == ord("["):
        arrow = _ARROWS.get(sequence[1])
        if arrow is not None:
            return Key(arrow)
    return Key.ESC


def read_key(fd: int) -> int:
    """Read one key press from ``fd``, decoding arrow-key escape sequences."""
    try:
        first = os.read(fd, 1)
    except OSError:
        return Key.NULL
    if not first:
        return Key.NULL
    if first[0] != Key.ESC:
        return first[0]
    try:
        rest = os.read(fd, 2)
    except OSError:
        return Key.ESC
    return decode_key(first + rest)


def get_size() -> tuple[int, int]:
    """Width and height of the terminal attached to standard output."""
    size = os.get_terminal_size(sys.stdout.fileno())
    return size.columns, size.lines