import io

import pytest

from labprojects.console import Console, EndOfInput


def make(text):
    out = io.StringIO()
    return Console(io.StringIO(text), out), out


def test_write_passes_text_through():
    console, out = make("")
    console.write("Escolha: ")
    assert out.getvalue() == "Escolha: "


def test_read_line_strips_newline():
    console, _ = make("hello\nworld")
    assert console.read_line() == "hello"
    assert console.read_line() == "world"


def test_read_line_at_end_raises():
    console, _ = make("")
    with pytest.raises(EndOfInput):
        console.read_line()


def test_read_limited_keeps_short_line():
    console, _ = make("1234567890123\n")
    assert console.read_limited(15) == "1234567890123"


def test_read_limited_truncates_and_discards_rest():
    console, _ = make("abcdefgh\nnext\n")
    assert console.read_limited(5) == "abcd"
    assert console.read_line() == "next"


def test_read_limited_rejects_tiny_limit():
    console, _ = make("x\n")
    with pytest.raises(ValueError):
        console.read_limited(1)


def test_read_int_parses_leading_number():
    console, _ = make("  42 extra\n-7\n")
    assert console.read_int() == 42
    assert console.read_int() == -7


def test_read_int_skips_blank_lines():
    console, _ = make("\n   \n3\n")
    assert console.read_int() == 3


def test_read_int_invalid_returns_none_and_consumes_line():
    console, _ = make("abc\n5\n")
    assert console.read_int() is None
    assert console.read_int() == 5


def test_read_int_at_end_raises():
    console, _ = make("\n")
    with pytest.raises(EndOfInput):
        console.read_int()