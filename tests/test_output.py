import io

import pytest

from pushswap.output import (
    putchar,
    putchar_fd,
    putendl,
    putendl_fd,
    putnbr,
    putnbr_fd,
    putstr,
    putstr_fd,
)


def test_putchar_writes_to_stdout(capsys):
    putchar("x")
    assert capsys.readouterr().out == "x"


def test_putchar_rejects_longer_text():
    with pytest.raises(ValueError):
        putchar_fd("ab", io.StringIO())


def test_putstr_fd_writes_text():
    stream = io.StringIO()
    putstr_fd("hello", stream)
    assert stream.getvalue() == "hello"


def test_putstr_fd_none_writes_nothing():
    stream = io.StringIO()
    putstr_fd(None, stream)
    assert stream.getvalue() == ""


def test_putstr_stops_at_nul(capsys):
    putstr("ab\0cd")
    assert capsys.readouterr().out == "ab"


def test_putendl_adds_newline(capsys):
    putendl("Error")
    assert capsys.readouterr().out == "Error\n"


def test_putendl_fd_of_empty_string():
    stream = io.StringIO()
    putendl_fd("", stream)
    assert stream.getvalue() == "\n"


@pytest.mark.parametrize("n", [0, 7, -5, 42, 2147483647, -2147483648])
def test_putnbr_fd_round_trips(n):
    stream = io.StringIO()
    putnbr_fd(n, stream)
    assert int(stream.getvalue()) == n


def test_putnbr_int_min(capsys):
    putnbr(-2147483648)
    assert capsys.readouterr().out == "-2147483648"


@pytest.mark.parametrize("n", [2147483648, -2147483649])
def test_putnbr_fd_out_of_range(n):
    with pytest.raises(OverflowError):
        putnbr_fd(n, io.StringIO())