import io
import random
import string

import pytest

from sortviz.dlist import DataType, DoublyList
from sortviz.generate import RAND_MAX, generate, generate_items, insert_items


def _io(text):
    return io.StringIO(text), io.StringIO()


@pytest.mark.parametrize("size", [1, 5, 20])
def test_generate_chars_are_upper_case_letters(size):
    dlist = DoublyList(DataType.CHAR)
    generate_items(DataType.CHAR, size, dlist, random.Random(1))
    values = dlist.values()
    assert len(values) == size
    assert all(v in string.ascii_uppercase and len(v) == 1 for v in values)


@pytest.mark.parametrize("size", [1, 4, 15])
def test_generate_bars_have_bounded_length(size):
    dlist = DoublyList(DataType.ASTERISK)
    generate_items("A", size, dlist, random.Random(2))
    values = dlist.values()
    assert len(values) == size
    assert all(set(v) == {"*"} for v in values)
    assert all(1 <= len(v) <= size for v in values)


def test_generate_integers_in_range():
    dlist = DoublyList(DataType.INTEGER)
    generate_items(DataType.INTEGER, 50, dlist, random.Random(3))
    values = dlist.values()
    assert len(values) == 50
    assert all(0 <= v <= RAND_MAX for v in values)


def test_generate_items_assigns_sequential_indices():
    dlist = DoublyList(DataType.INTEGER)
    generate_items(DataType.INTEGER, 6, dlist, random.Random(4))
    assert [node.index for node in dlist] == list(range(6))


def test_generate_items_is_reproducible_with_seed():
    first = DoublyList(DataType.CHAR)
    second = DoublyList(DataType.CHAR)
    generate_items(DataType.CHAR, 10, first, random.Random(9))
    generate_items(DataType.CHAR, 10, second, random.Random(9))
    assert first.values() == second.values()


@pytest.mark.parametrize("size", [0, -3])
def test_generate_items_non_positive_size_adds_nothing(size):
    dlist = DoublyList(DataType.INTEGER)
    generate_items(DataType.INTEGER, size, dlist, random.Random(0))
    assert len(dlist) == 0


def test_insert_chars_uppercases_and_rejects_long_input():
    stream, out = _io("a\nbc\nZ\n;\n")
    dlist = DoublyList(DataType.CHAR)
    added = insert_items(DataType.CHAR, dlist, stream, out)
    assert dlist.values() == ["A", "Z"]
    assert added == 2
    assert "too many characters" in out.getvalue()


def test_insert_bars_rejects_non_asterisks():
    stream, out = _io("**\nab\n*\n;\n")
    dlist = DoublyList(DataType.ASTERISK)
    insert_items("A", dlist, stream, out)
    assert dlist.values() == ["**", "*"]
    assert "ab is not a valid asterisks bar" in out.getvalue()


def test_insert_integers_skips_invalid_numbers():
    stream, out = _io("5\n0\n12\n;\n")
    dlist = DoublyList(DataType.INTEGER)
    insert_items(DataType.INTEGER, dlist, stream, out)
    assert dlist.values() == [5, 12]
    assert "0 is not a valid whole number greater than 0" in out.getvalue()


def test_insert_items_stops_immediately_on_semicolon():
    stream, out = _io(";\n")
    dlist = DoublyList(DataType.INTEGER)
    assert insert_items(DataType.INTEGER, dlist, stream, out) == 0
    assert len(dlist) == 0


def test_insert_items_raises_at_end_of_input():
    stream, out = _io("7\n")
    dlist = DoublyList(DataType.INTEGER)
    with pytest.raises(EOFError):
        insert_items(DataType.INTEGER, dlist, stream, out)
    assert dlist.values() == [7]


def test_generate_manual_mode():
    stream, out = _io("m\n3\n9\n;\n")
    dlist = DoublyList(DataType.CHAR)
    added = generate("I", dlist, stream, out)
    assert dlist.data_type is DataType.INTEGER
    assert dlist.values() == [3, 9]
    assert added == 2
    assert "manually" in out.getvalue()


def test_generate_random_mode_after_bad_choice():
    stream, out = _io("x\nrr\nr\n4\n")
    dlist = DoublyList(DataType.CHAR)
    added = generate(DataType.CHAR, dlist, stream, out, random.Random(5))
    text = out.getvalue()
    assert added == 4
    assert len(dlist) == 4
    assert "X is not recognized as an option" in text
    assert "too many characters" in text


def test_generate_random_mode_cancelled_size_adds_nothing():
    stream, out = _io("R\n;\n")
    dlist = DoublyList(DataType.ASTERISK)
    assert generate(DataType.ASTERISK, dlist, stream, out) == 0
    assert len(dlist) == 0


def test_generate_rejects_unknown_data_type():
    stream, out = _io("r\n3\n")
    with pytest.raises(ValueError):
        generate("Q", DoublyList(DataType.CHAR), stream, out)