import io

import pytest

from pushswap.lines import LineReader, read_lines


def test_read_lines_splits_on_newlines():
    assert list(read_lines(io.StringIO("sa\npb\nrra"))) == ["sa", "pb", "rra"]


def test_trailing_newline_gives_no_extra_line():
    assert list(read_lines(io.StringIO("ra\nrb\n"))) == ["ra", "rb"]


def test_empty_lines_are_kept():
    assert list(read_lines(io.StringIO("\n\nx\n"))) == ["", "", "x"]


def test_empty_stream_returns_none():
    reader = LineReader(io.StringIO(""))
    assert reader.read_line() is None
    assert reader.read_line() is None


@pytest.mark.parametrize("size", [1, 2, 3, 100])
def test_buffer_size_does_not_change_result(size):
    text = "pa\nrrr\nss\nrb"
    reader = LineReader(io.StringIO(text), size)
    assert list(reader) == text.split("\n")


def test_join_round_trip_on_long_text():
    text = "\n".join(str(i) * (i % 7 + 1) for i in range(300))
    assert "\n".join(read_lines(io.StringIO(text))) == text


def test_read_line_then_iterate_rest():
    reader = LineReader(io.StringIO("first\nsecond\nthird"), 4)
    assert reader.read_line() == "first"
    assert list(reader) == ["second", "third"]
    assert reader.read_line() is None


def test_readers_keep_separate_state():
    one = LineReader(io.StringIO("a\nb"))
    two = LineReader(io.StringIO("c\nd"))
    assert one.read_line() == "a"
    assert two.read_line() == "c"
    assert one.read_line() == "b"
    assert two.read_line() == "d"


@pytest.mark.parametrize("size", [0, -1])
def test_invalid_buffer_size(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("x"), size)