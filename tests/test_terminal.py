import os
from unittest import mock

import pytest

from tinyvi.terminal import (
    Key,
    RawMode,
    TerminalError,
    decode_key,
    disable_raw_mode,
    enable_raw_mode,
    get_size,
    read_key,
)


@pytest.fixture
def pipe():
    read_fd, write_fd = os.pipe()
    yield read_fd, write_fd
    for fd in (read_fd, write_fd):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.mark.parametrize(
    "data, code",
    [
        (b"", 0),
        (b"\x1b", 27),
        (b"\x1b[A", 250),
        (b"\x1b[B", 251),
        (b"\x1b[D", 252),
        (b"\x1b[C", 253),
    ],
)
def test_decoded_key_codes_are_fixed(data, code):
    assert decode_key(data) == code


@pytest.mark.parametrize(
    "data, expected",
    [
        (b"\x1b[A", Key.ARROW_UP),
        (b"\x1b[B", Key.ARROW_DOWN),
        (b"\x1b[C", Key.ARROW_RIGHT),
        (b"\x1b[D", Key.ARROW_LEFT),
        (b"\x1b[Z", Key.ESC),
        (b"\x1bx", Key.ESC),
        (b"\x1b", Key.ESC),
        (b"", Key.NULL),
    ],
)
def test_decode_key(data, expected):
    assert decode_key(data) == expected


@pytest.mark.parametrize("char", [b"a", b":", b"\r", b"\x7f"])
def test_decode_plain_byte(char):
    assert decode_key(char) == char[0]


def test_read_key_plain(pipe):
    read_fd, write_fd = pipe
    os.write(write_fd, b"ab")
    assert read_key(read_fd) == ord("a")
    assert read_key(read_fd) == ord("b")


def test_read_key_arrow(pipe):
    read_fd, write_fd = pipe
    os.write(write_fd, b"\x1b[A")
    assert read_key(read_fd) == Key.ARROW_UP


def test_read_key_lone_escape(pipe):
    read_fd, write_fd = pipe
    os.write(write_fd, b"\x1b")
    os.close(write_fd)
    assert read_key(read_fd) == Key.ESC


def test_read_key_eof(pipe):
    read_fd, write_fd = pipe
    os.close(write_fd)
    assert read_key(read_fd) == Key.NULL


def test_enable_raw_mode_on_non_tty_raises(pipe):
    read_fd, _ = pipe
    with pytest.raises(TerminalError):
        enable_raw_mode(read_fd)


def test_raw_mode_context_on_non_tty_raises(pipe):
    read_fd, _ = pipe
    with pytest.raises(TerminalError):
        with RawMode(read_fd):
            pass


def test_disable_raw_mode_leaves_alternate_screen(pipe, capsys):
    read_fd, _ = pipe
    disable_raw_mode(read_fd, None)
    out = capsys.readouterr().out
    assert out.startswith("\x1b[?1049l")
    assert "\x1b[2J\x1b[H" in out


def test_get_size():
    with mock.patch("os.get_terminal_size", return_value=os.terminal_size((132, 50))), \
            mock.patch("sys.stdout") as stdout:
        stdout.fileno.return_value = 1
        assert get_size() == (132, 50)


def test_get_size_error_propagates():
    with mock.patch("os.get_terminal_size", side_effect=OSError("not a tty")), \
            mock.patch("sys.stdout") as stdout:
        stdout.fileno.return_value = 1
        with pytest.raises(OSError):
            get_size()