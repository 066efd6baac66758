import io

import pytest

from sortviz.prompts import input_characters, input_integer, is_valid_text, read_line


@pytest.mark.parametrize("text", ["Hello World", ";", "***", "c", "Z z"])
def test_valid_text(text):
    assert is_valid_text(text) is True


@pytest.mark.parametrize("text", ["", "abc1", "a-b", "\u00e9", "x\t"])
def test_invalid_text(text):
    assert is_valid_text(text) is False


def test_read_line_strips_newline_and_hits_eof():
    stream = io.StringIO("abc\ndef")
    assert read_line(stream) == "abc"
    assert read_line(stream) == "def"
    with pytest.raises(EOFError):
        read_line(stream)


def test_read_line_empty_line():
    assert read_line(io.StringIO("\nrest\n")) == ""


def test_input_characters_retries_until_valid():
    out = io.StringIO()
    result = input_characters(io.StringIO("ab1\n\nHi\n"), out)
    assert result == "Hi"
    assert "ab1 is not a valid set of characters!" in out.getvalue()
    assert out.getvalue().count("not a valid") == 1


def test_input_characters_accepts_terminator():
    assert input_characters(io.StringIO(";\n"), io.StringIO()) == ";"


def test_input_characters_eof():
    with pytest.raises(EOFError):
        input_characters(io.StringIO("12\n"), io.StringIO())


def test_input_integer_simple():
    out = io.StringIO()
    assert input_integer(io.StringIO("42\n"), out) == 42
    assert out.getvalue() == ""


def test_input_integer_terminator():
    assert input_integer(io.StringIO(";\n"), io.StringIO()) is None


def test_input_integer_rejects_bad_values():
    out = io.StringIO()
    result = input_integer(io.StringIO("abc\n0\n-5\n\n7\n"), out)
    assert result == 7
    text = out.getvalue()
    assert text.count("is not a valid whole number greater than 0") == 4
    assert "abc is not a valid" in text
    assert "-5 is not a valid" in text


def test_input_integer_eof():
    with pytest.raises(EOFError):
        input_integer(io.StringIO("x\n"), io.StringIO())