"""Sorting algorithms that redraw the list after every swap, and their menus."""

from __future__ import annotations

import sys
import time
from typing import Any, Callable, TextIO

from . import ansi
from .dlist import DataType, DoublyList
from .prompts import input_characters, input_integer

BUBBLE_TITLE = "BUBBLE SORT!!!!"
COCKTAIL_TITLE = "COCKTAIL SORT!!!!"
COCKTAIL_BACKWARD_TITLE = "COCKTAIL SORT"
SELECTION_TITLE = "SELECTION SORT!!!!"
INSERT_TITLE = "INSERT SORT!!!"

_MENU = (
    f"{ansi.CYAN}{ansi.UNDERLINE}{ansi.BOLD}"
    "\nPlease select which sorting algorithm you would like to use:"
    f"{ansi.RESET}{ansi.CYAN}"
    "\nBubble Sort\t\t(1)"
    "\nCocktail Sort\t\t(2)"
    "\nSelection Sort\t\t(3)"
    "\nInsert Sort\t\t(4)"
    f"{ansi.RED}"
    '\nTerminate program\t(";")\n'
    f"{ansi.RESET}{ansi.WHITE}"
)

_TYPE_LABELS = {
    DataType.CHAR: "char (C)",
    DataType.INTEGER: "Integer (I)",
}


class Visualizer:
    """Clears the screen and redraws a list, then pauses for ``delay`` seconds."""

    def __init__(self, out: TextIO | None = None, delay: float = 0.5) -> None:
        self.out = out or sys.stdout
        self.delay = delay
        self.frames = 0

    def show(self, title: str, dlist: DoublyList) -> None:
        """Draw one frame: a banner with ``title`` followed by the list."""
        self.out.write(
            f"{ansi.CLEAR_SCREEN}{ansi.BOLD}{ansi.UNDERLINE}{ansi.BG_GREEN}"
            f"{ansi.WHITE}\n{title}\n{ansi.RESET}"
        )
        dlist.print(self.out)
        self.frames += 1
        if self.delay > 0:
            time.sleep(self.delay)


def _show(visualizer: Visualizer | None, title: str, dlist: DoublyList) -> None:
    if visualizer is not None:
        visualizer.show(title, dlist)


def _kind(data_type: Any) -> DataType | None:
    try:
        return DataType(data_type)
    except ValueError:
        return None


def _key(value: Any, kind: DataType) -> int:
    if kind is DataType.INTEGER:
        return value
    if kind is DataType.CHAR:
        return ord(value[0])
    return len(value)


def _compare(a: Any, b: Any, data_type: Any, op: Callable[[int, int], bool]) -> bool:
    kind = _kind(data_type)
    if kind is None:
        return False
    return op(_key(a, kind), _key(b, kind))


def greater_than(a: Any, b: Any, data_type: DataType | str) -> bool:
    """True if ``a`` sorts after ``b``; asterisk bars compare by length."""
    return _compare(a, b, data_type, lambda x, y: x > y)


def less_than(a: Any, b: Any, data_type: DataType | str) -> bool:
    """True if ``a`` sorts before ``b``; asterisk bars compare by length."""
    return _compare(a, b, data_type, lambda x, y: x < y)


def equal(a: Any, b: Any, data_type: DataType | str) -> bool:
    """True if ``a`` and ``b`` sort equal; asterisk bars compare by length."""
    return _compare(a, b, data_type, lambda x, y: x == y)


def choose_algorithm(stream: TextIO | None = None, out: TextIO | None = None) -> int | None:
    """Ask for an algorithm number 1-4; return None if the user enters ';'."""
    out = out or sys.stdout
    while True:
        out.write(_MENU)
        choice = input_integer(stream, out)
        if choice is None or 1 <= choice <= 4:
            return choice
        out.write(
            f"{ansi.YELLOW}\n{choice} is not a valid selection, please try again!"
            f"{ansi.RESET}"
        )


def choose_data_type(stream: TextIO | None = None, out: TextIO | None = None) -> DataType:
    """Ask for a data type letter (C, I or A, any case) until one is given."""
    out = out or sys.stdout
    while True:
        out.write(ansi.WHITE)
        text = input_characters(stream, out)
        if len(text) > 1:
            out.write(
                f"{ansi.BOLD}{ansi.RED}"
                f"\nYou have entered too many characters, please try again!{ansi.RESET}"
            )
            continue
        letter = text.upper()
        kind = _kind(letter)
        if kind is None:
            out.write(
                f"{ansi.YELLOW}\n{letter} is not recognized as an option, "
                f"please try again: {ansi.RESET}"
            )
            continue
        if kind is DataType.ASTERISK:
            described = f"{ansi.BLUE}{ansi.UNDERLINE}Asterisk (*){ansi.RESET} bars as data types."
        else:
            described = f"{ansi.BLUE}{ansi.UNDERLINE}{_TYPE_LABELS[kind]}{ansi.RESET} data types."
        out.write(
            f"{ansi.GREEN}\nYou have chosen to demonstrate the sorting algorithms "
            f"using {described}"
        )
        return kind


def print_formatted(dlist: DoublyList, out: TextIO | None = None) -> None:
    """Write the list's listing to ``out``."""
    dlist.print(out)


def bubble_sort(dlist: DoublyList, visualizer: Visualizer | None = None) -> bool:
    """Bubble sort in place; return False if there was nothing to sort."""
    if len(dlist) <= 1:
        return False
    _show(visualizer, BUBBLE_TITLE, dlist)
    swapped = True
    while swapped:
        swapped = False
        curr = dlist.front
        while curr.next is not None:
            if greater_than(curr.value, curr.next.value, dlist.data_type):
                dlist.swap(curr, curr.next)
                swapped = True
                _show(visualizer, BUBBLE_TITLE, dlist)
                if curr.previous is not None:
                    curr = curr.previous
            else:
                curr = curr.next
    return True


def cocktail_sort(dlist: DoublyList, visualizer: Visualizer | None = None) -> bool:
    """Cocktail shaker sort in place; return False if there was nothing to sort."""
    if len(dlist) <= 1:
        return False
    _show(visualizer, COCKTAIL_TITLE, dlist)
    swapped = True
    while swapped:
        swapped = False
        curr = dlist.front
        while curr.next is not None:
            if greater_than(curr.value, curr.next.value, dlist.data_type):
                dlist.swap(curr, curr.next)
                swapped = True
                _show(visualizer, COCKTAIL_TITLE, dlist)
                if curr.previous is not None:
                    curr = curr.previous
            else:
                curr = curr.next
        if not swapped:
            break
        swapped = False
        curr = dlist.rear
        while curr.previous is not None:
            if less_than(curr.value, curr.previous.value, dlist.data_type):
                dlist.swap(curr.previous, curr)
                swapped = True
                _show(visualizer, COCKTAIL_BACKWARD_TITLE, dlist)
                if curr.next is not None:
                    curr = curr.next
            else:
                curr = curr.previous
    return True


def selection_sort(dlist: DoublyList, visualizer: Visualizer | None = None) -> bool:
    """Selection sort in place, resuming just before the swapped node's new place."""
    _show(visualizer, SELECTION_TITLE, dlist)
    curr = dlist.front
    while curr is not None:
        smallest = curr
        candidate = curr.next
        while candidate is not None:
            if less_than(candidate.value, smallest.value, dlist.data_type):
                smallest = candidate
            candidate = candidate.next
        if not equal(smallest.value, curr.value, dlist.data_type):
            dlist.swap(smallest, curr)
            _show(visualizer, SELECTION_TITLE, dlist)
            if curr.previous is not None:
                curr = curr.previous
        else:
            curr = curr.next
    return True


def insert_sort(dlist: DoublyList, visualizer: Visualizer | None = None) -> bool:
    """Insertion sort in place by moving each node back past larger ones."""
    _show(visualizer, INSERT_TITLE, dlist)
    curr = dlist.front.next if dlist.front is not None else None
    while curr is not None:
        prev = curr.previous
        while prev is not None and greater_than(prev.value, curr.value, dlist.data_type):
            dlist.swap(prev, curr)
            prev = curr.previous
            _show(visualizer, INSERT_TITLE, dlist)
        curr = curr.next
    return True


_ALGORITHMS = {
    1: bubble_sort,
    2: cocktail_sort,
    3: selection_sort,
    4: insert_sort,
}


def sort(
    dlist: DoublyList,
    stream: TextIO | None = None,
    out: TextIO | None = None,
    visualizer: Visualizer | None = None,
) -> int | None:
    """Ask which algorithm to use and run it; return its number, or None if cancelled."""
    choice = choose_algorithm(stream, out)
    if choice is None:
        return None
    if visualizer is None:
        visualizer = Visualizer(out)
    _ALGORITHMS[choice](dlist, visualizer)
    return choice