"""Editor state and the text-buffer operations on it."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field


class Mode(enum.Enum):
    """The mode the editor is in, which decides how keys are handled."""

    NORMAL = enum.auto()
    INSERT = enum.auto()
    COMMAND = enum.auto()
    FILENAME_PROMPT = enum.auto()


@dataclass
class Editor:
    """Everything the editor knows: buffer, cursor, viewport and status."""

    term_width: int = 80
    term_height: int = 24
    cursor_x: int = 0
    cursor_y: int = 0
    row_offset: int = 0
    col_offset: int = 0
    content: list[str] = field(default_factory=lambda: [""])
    mode: Mode = Mode.NORMAL
    filename: str = ""
    command_buffer: str = ""
    status_message: str = ""
    status_message_time: float = 0.0
    should_quit: bool = False
    is_dirty: bool = False
    prompt_origin_command: str = ""

    def set_status_message(self, msg: str) -> None:
        """Show ``msg`` in the status bar, stamped with the current time."""
        self.status_message = msg
        self.status_message_time = time.time()

    def _ensure_line_exists(self, y: int) -> None:
        while len(self.content) <= y:
            self.content.append("")

    def insert_char(self, char: str | int) -> None:
        """Insert one character at the cursor and move the cursor past it."""
        if isinstance(char, int):
            char = chr(char)
        self._ensure_line_exists(self.cursor_y)
        line = self.content[self.cursor_y]
        if self.cursor_x >= len(line):
            line += char
        else:
            line = line[: self.cursor_x] + char + line[self.cursor_x :]
        self.content[self.cursor_y] = line
        self.cursor_x += 1
        self.is_dirty = True

    def insert_newline(self) -> None:
        """Split the current line at the cursor."""
        self._ensure_line_exists(self.cursor_y)
        line = self.content[self.cursor_y]
        before, after = line[: self.cursor_x], line[self.cursor_x :]
        self.content[self.cursor_y] = before
        self.content.insert(self.cursor_y + 1, after)
        self.cursor_y += 1
        self.cursor_x = 0
        self.is_dirty = True

    def delete_char(self) -> None:
        """Delete the character before the cursor, joining lines at a line start."""
        if self.cursor_x == 0 and self.cursor_y == 0:
            return

        original_count = len(self.content)
        original_line_len = (
            len(self.content[self.cursor_y]) if self.cursor_y < len(self.content) else 0
        )

        if self.cursor_x == 0:
            previous = self.content[self.cursor_y - 1]
            current = self.content[self.cursor_y]
            self.content[self.cursor_y - 1] = previous + current
            del self.content[self.cursor_y]
            self.cursor_y -= 1
            self.cursor_x = len(previous)
        else:
            self._ensure_line_exists(self.cursor_y)
            line = self.content[self.cursor_y]
            if 0 < self.cursor_x <= len(line):
                self.content[self.cursor_y] = line[: self.cursor_x - 1] + line[self.cursor_x :]
                self.cursor_x -= 1
            elif self.cursor_x > 0:
                self.cursor_x -= 1

        if len(self.content) != original_count or (
            self.cursor_y < len(self.content)
            and len(self.content[self.cursor_y]) != original_line_len
        ):
            self.is_dirty = True

    def ensure_cursor_bounds(self) -> None:
        """Pull the cursor back inside the current line and the terminal width."""
        if self.cursor_y >= len(self.content):
            self.cursor_x = 0
        else:
            self.cursor_x = min(self.cursor_x, len(self.content[self.cursor_y]))
        if self.cursor_x >= self.term_width:
            self.cursor_x = self.term_width - 1
        if self.cursor_x < 0:
            self.cursor_x = 0

    def load_file(self, content: bytes) -> None:
        """Replace the buffer with the lines of ``content``."""
        text = content.decode("utf-8", errors="replace").replace("\r\n", "\n")
        lines = text.split("\n")
        if len(lines) > 1 and lines[-1] == "":
            lines.pop()
        self.content = lines if lines != [""] else [""]
        self.is_dirty = False

    def content_as_string(self) -> str:
        """The buffer as text, always ending in a newline."""
        return "\n".join(self.content) + "\n"