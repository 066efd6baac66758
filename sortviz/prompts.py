"""Reading and validating lines typed by the user."""

from __future__ import annotations

import string
import sys
from typing import TextIO

from . import ansi

_ALLOWED_TEXT = frozenset(string.ascii_letters + " ;*")
_DIGITS = frozenset(string.digits)


def is_valid_text(text: str) -> bool:
    """True if ``text`` is non-empty and holds only letters, spaces, ';' or '*'."""
    return bool(text) and all(ch in _ALLOWED_TEXT for ch in text)


def read_line(stream: TextIO | None = None) -> str:
    """Read one line without its newline; raise EOFError at end of input."""
    line = (stream or sys.stdin).readline()
    if line == "":
        raise EOFError("no more input")
    return line[:-1] if line.endswith("\n") else line


def input_characters(stream: TextIO | None = None, out: TextIO | None = None) -> str:
    """Read lines until one passes :func:`is_valid_text` and return it."""
    out = out or sys.stdout
    while True:
        text = read_line(stream)
        if is_valid_text(text):
            return text
        if text:
            out.write(
                f"{ansi.YELLOW}\n{text} is not a valid set of characters! "
                f"Please try again: {ansi.WHITE}"
            )


def input_integer(stream: TextIO | None = None, out: TextIO | None = None) -> int | None:
    """Read lines until a whole number above 0 is entered.

    Returns None when the user enters ';' alone, which ends the input.
    """
    out = out or sys.stdout
    while True:
        text = read_line(stream)
        if text == ";":
            return None
        if text and all(ch in _DIGITS for ch in text) and int(text) > 0:
            return int(text)
        out.write(
            f"{ansi.YELLOW}{text} is not a valid whole number greater than 0 "
            f"(try again):{ansi.WHITE}"
        )