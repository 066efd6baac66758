"""Filling a list with random data or with data typed by the user."""

from __future__ import annotations

import random
import string
import sys
from typing import TextIO

from . import ansi
from .dlist import DataType, DoublyList
from .prompts import input_characters, input_integer

RAND_MAX = 32767
"""Largest random integer produced for integer data sets."""

_PLEASE_ENTER = f"{ansi.CYAN}\nPlease enter "


def _choose_mode(stream: TextIO | None, out: TextIO) -> str:
    """Ask whether data is generated randomly ('R') or typed manually ('M')."""
    while True:
        out.write(
            f"{ansi.CYAN}\nPlease select wheter you would like to generate a random "
            'array("R") of data or input it manually("M"): '
            f"{ansi.WHITE}"
        )
        text = input_characters(stream, out)
        if len(text) > 1:
            out.write(
                f"{ansi.YELLOW}\nYou have entered too many characters, please try again!"
                f"{ansi.RESET}"
            )
            continue
        letter = text.upper()
        if letter == "R":
            out.write(
                f"{ansi.GREEN}\nYou have chosen to have the program generate a "
                f"{ansi.BLUE}{ansi.UNDERLINE}random{ansi.RESET}{ansi.GREEN} array of data"
            )
            return letter
        if letter == "M":
            out.write(
                f"{ansi.GREEN}\nYou have chosen to input an array of data "
                f"{ansi.BLUE}{ansi.UNDERLINE}manually{ansi.RESET}{ansi.GREEN}."
            )
            return letter
        out.write(
            f"{ansi.YELLOW}\n{letter} is not recognized as an option, "
            f"please try again: {ansi.RESET}"
        )


def generate(
    data_type: DataType | str,
    dlist: DoublyList,
    stream: TextIO | None = None,
    out: TextIO | None = None,
    rng: random.Random | None = None,
) -> int:
    """Fill ``dlist`` randomly or from user input, as the user chooses.

    Returns the number of items added.
    """
    out = out or sys.stdout
    kind = DataType(data_type)
    dlist.data_type = kind
    before = len(dlist)

    if _choose_mode(stream, out) == "M":
        insert_items(kind, dlist, stream, out)
    else:
        out.write(
            f"{ansi.CYAN}\nPlease determine the size of the data set you would like "
            f"to have sorted: {ansi.WHITE}"
        )
        size = input_integer(stream, out)
        generate_items(kind, size or 0, dlist, rng)
    return len(dlist) - before


def generate_items(
    data_type: DataType | str,
    size: int,
    dlist: DoublyList,
    rng: random.Random | None = None,
) -> None:
    """Append ``size`` random values of ``data_type`` to ``dlist``.

    Characters are upper-case letters, integers lie in 0..RAND_MAX and
    asterisk bars are 1 to ``size`` asterisks long.
    """
    kind = DataType(data_type)
    rng = rng or random.Random()
    for _ in range(max(size, 0)):
        if kind is DataType.CHAR:
            dlist.append(rng.choice(string.ascii_uppercase))
        elif kind is DataType.ASTERISK:
            dlist.append("*" * rng.randint(1, size))
        else:
            dlist.append(rng.randint(0, RAND_MAX))


def _read_char(stream: TextIO | None, out: TextIO) -> str | None:
    out.write(f"a character: {ansi.WHITE}")
    while True:
        text = input_characters(stream, out)
        if len(text) <= 1:
            return None if text == ";" else text.upper()
        out.write(f"{ansi.YELLOW}\nYou have entered too many characters, please try again!")
        out.write(_PLEASE_ENTER)
        out.write(f"a character: {ansi.WHITE}")


def _read_bar(stream: TextIO | None, out: TextIO) -> str | None:
    out.write(f"a set of asterisks: {ansi.WHITE}")
    while True:
        text = input_characters(stream, out)
        if text == ";":
            return None
        if set(text) == {"*"}:
            return text
        out.write(
            f"{ansi.YELLOW}\n{text} is not a valid asterisks bar, it must contain "
            f"{ansi.ITALIC}only{ansi.RESET}{ansi.WHITE}{ansi.BOLD} \"*\"{ansi.RESET}"
            f"{ansi.YELLOW}. Please try again.{ansi.RESET}"
        )
        out.write(_PLEASE_ENTER)
        out.write(f"a set of asterisks: {ansi.WHITE}")


def _read_int(stream: TextIO | None, out: TextIO) -> int | None:
    out.write(f"a positive, whole integer: {ansi.WHITE}")
    return input_integer(stream, out)


_READERS = {
    DataType.CHAR: _read_char,
    DataType.ASTERISK: _read_bar,
    DataType.INTEGER: _read_int,
}


def insert_items(
    data_type: DataType | str,
    dlist: DoublyList,
    stream: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    """Append values typed by the user until ';' is entered; return how many."""
    out = out or sys.stdout
    reader = _READERS[DataType(data_type)]
    out.write(
        f"{ansi.CLEAR_SCREEN}{ansi.CYAN}"
        "\nYou are now manually entering in your data, you may add as many items "
        "a you would like."
        f"\nOnce you are satisfied, simply input {ansi.BOLD}{ansi.RED}\";\""
        f"{ansi.RESET}{ansi.CYAN} to terminate the insertion process.{ansi.RESET}"
    )
    added = 0
    while True:
        out.write(_PLEASE_ENTER)
        value = reader(stream, out)
        if value is None:
            return added
        dlist.append(value)
        added += 1