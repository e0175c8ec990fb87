import pytest

from pushswap.strings import (
    strcat,
    strclr,
    strcpy,
    strdup,
    strlcat,
    strlen,
    strncat,
    strncpy,
    strndup,
    strnew,
)


def test_strlen_stops_at_nul():
    assert strlen(b"hello\0world") == len(b"hello")


def test_strlen_without_nul_is_full_length():
    assert strlen(b"hello") == len(b"hello")


def test_strnew_has_room_for_terminator():
    buf = strnew(5)
    assert buf == bytearray(6)
    assert strlen(buf) == 0


def test_strnew_rejects_negative():
    with pytest.raises(ValueError):
        strnew(-1)


def test_strclr_zeros_string_part():
    buf = bytearray(b"abc\0xy")
    strclr(buf)
    assert buf == bytearray(b"\0\0\0\0xy")


def test_strcpy_copies_with_terminator():
    dst = bytearray(b"zzzzzzzz")
    result = strcpy(dst, b"hello")
    assert result is dst
    assert dst[:6] == b"hello\0"
    assert dst[6:] == b"zz"


def test_strcpy_rejects_small_destination():
    with pytest.raises(ValueError):
        strcpy(bytearray(5), b"hello")


def test_strncpy_pads_with_nul():
    dst = bytearray(b"zzzzzzzz")
    strncpy(dst, b"hi", 6)
    assert dst[:6] == b"hi" + bytes(4)
    assert dst[6:] == b"zz"


def test_strncpy_truncates_without_terminator():
    dst = bytearray(b"zzzzzz")
    strncpy(dst, b"hello", 3)
    assert dst[:3] == b"hello"[:3]
    assert dst[3:] == b"zzz"


def test_strdup_round_trip():
    copy = strdup(b"push_swap")
    assert bytes(copy) == b"push_swap\0"
    assert strlen(copy) == strlen(b"push_swap")


def test_strdup_returns_independent_buffer():
    source = bytearray(b"abc\0")
    copy = strdup(source)
    source[0] = ord("x")
    assert copy[:3] == b"abc"


def test_strndup_truncates():
    buf = strndup(b"abcdef", 3)
    assert len(buf) == 4
    assert bytes(buf) == b"abc\0"


def test_strndup_pads_short_source():
    buf = strndup(b"ab", 5)
    assert len(buf) == 6
    assert buf[:2] == b"ab"
    assert buf[2:] == bytes(4)


def test_strcat_appends():
    dst = bytearray(b"foo\0" + bytes(8))
    strcat(dst, b"bar")
    assert _string(dst) == b"foobar"


def test_strcat_rejects_overflow():
    with pytest.raises(ValueError):
        strcat(bytearray(b"foo\0\0"), b"bar")


def test_strncat_limits_appended_bytes():
    dst = bytearray(b"foo\0" + bytes(8))
    strncat(dst, b"barbaz", 3)
    assert _string(dst) == b"foo" + b"barbaz"[:3]


def test_strlcat_full_append_returns_total_length():
    dst = bytearray(b"ab\0" + bytes(10))
    result = strlcat(dst, b"cdef", len(dst))
    assert result == len(b"ab") + len(b"cdef")
    assert _string(dst) == b"abcdef"


def test_strlcat_truncates_to_size():
    dst = bytearray(b"ab\0" + bytes(10))
    result = strlcat(dst, b"cdef", 4)
    assert result == len(b"ab") + len(b"cdef")
    assert _string(dst) == b"abc"
    assert strlen(dst) == 4 - 1


def test_strlcat_size_smaller_than_destination():
    dst = bytearray(b"abcdef\0\0")
    result = strlcat(dst, b"xyz", 3)
    assert result == 3 + len(b"xyz")
    assert _string(dst) == b"abcdef"


def _string(buf):
    return bytes(buf[:strlen(buf)])