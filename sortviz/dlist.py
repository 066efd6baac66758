"""A doubly linked list whose nodes are relinked, not copied, when swapped."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, TextIO

from . import ansi


class DataType(str, Enum):
    """Kind of data held in a list."""

    CHAR = "C"
    INTEGER = "I"
    ASTERISK = "A"


@dataclass(eq=False)
class Node:
    """A list node; ``index`` is its insertion position and never changes."""

    value: Any
    index: int
    next: Node | None = field(default=None, repr=False)
    previous: Node | None = field(default=None, repr=False)


class DoublyList:
    """Doubly linked list of values of one :class:`DataType`."""

    def __init__(self, data_type: DataType | str) -> None:
        self.data_type = DataType(data_type)
        self.front: Node | None = None
        self.rear: Node | None = None
        self._count = 0
        self._next_index = 0

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[Node]:
        node = self.front
        while node is not None:
            yield node
            node = node.next

    def __reversed__(self) -> Iterator[Node]:
        node = self.rear
        while node is not None:
            yield node
            node = node.previous

    def values(self) -> list[Any]:
        """Return the stored values from front to rear."""
        return [node.value for node in self]

    def append(self, value: Any) -> Node:
        """Add a value at the rear and return its node."""
        node = Node(value, self._next_index, previous=self.rear)
        if self.rear is None:
            self.front = node
        else:
            self.rear.next = node
        self.rear = node
        self._next_index += 1
        self._count += 1
        return node

    def find(self, value: Any) -> Node | None:
        """Return the first node holding ``value``, or None."""
        return next((node for node in self if node.value == value), None)

    def remove(self, value: Any) -> None:
        """Unlink the first node holding ``value``; raise ValueError if absent."""
        node = self.find(value)
        if node is None:
            raise ValueError(f"{value!r} is not in the list")
        if node.previous is None:
            self.front = node.next
        else:
            node.previous.next = node.next
        if node.next is None:
            self.rear = node.previous
        else:
            node.next.previous = node.previous
        node.next = node.previous = None
        self._count -= 1

    def swap(self, node_a: Node, node_b: Node) -> None:
        """Exchange the positions of two nodes by relinking them."""
        if node_a is None or node_b is None:
            raise ValueError("cannot swap a missing node")
        if node_a is node_b:
            raise ValueError("cannot swap a node with itself")
        if node_a.next is node_b:
            self._swap_adjacent(node_a, node_b)
        elif node_b.next is node_a:
            self._swap_adjacent(node_b, node_a)
        else:
            self._swap_apart(node_a, node_b)

    def _swap_adjacent(self, first: Node, second: Node) -> None:
        before, after = first.previous, second.next
        if before is None:
            self.front = second
        else:
            before.next = second
        if after is None:
            self.rear = first
        else:
            after.previous = first
        first.next, first.previous = after, second
        second.next, second.previous = first, before

    def _swap_apart(self, node_a: Node, node_b: Node) -> None:
        a_prev, a_next = node_a.previous, node_a.next
        b_prev, b_next = node_b.previous, node_b.next

        if a_prev is None:
            self.front = node_b
        else:
            a_prev.next = node_b
        if a_next is None:
            self.rear = node_b
        else:
            a_next.previous = node_b

        if b_prev is None:
            self.front = node_a
        else:
            b_prev.next = node_a
        if b_next is None:
            self.rear = node_a
        else:
            b_next.previous = node_a

        node_a.previous, node_a.next = b_prev, b_next
        node_b.previous, node_b.next = a_prev, a_next

    def render(self) -> str:
        """Return the coloured listing of the list, one node per line."""
        parts = [
            f"{ansi.CYAN}{ansi.UNDERLINE}\n\t\tthe dLL stores "
            f"{self.data_type.value} datatype\n{ansi.RESET}{ansi.CYAN}"
        ]
        parts.extend(
            f"{node.value}\t\t{ansi.BOLD}{ansi.BG_WHITE}({node.index})"
            f"{ansi.RESET}{ansi.CYAN}\n"
            for node in self
        )
        return "".join(parts)

    def print(self, out: TextIO | None = None) -> None:
        """Write :meth:`render` to ``out`` (standard output by default)."""
        (out or sys.stdout).write(self.render())