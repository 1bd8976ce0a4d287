import pytest

from sigtalk.memory import bzero, calloc, memchr, memcmp, memcpy, memmove, memset


def test_memset_fills_prefix_only():
    buf = bytearray(b"abcdef")
    result = memset(buf, ord("x"), 3)
    assert result is buf
    assert buf == bytearray(b"xxxdef")


def test_memset_takes_value_modulo_256():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytearray(b"AAAA")


def test_memset_out_of_range():
    with pytest.raises(IndexError):
        memset(bytearray(2), 0, 3)


def test_bzero_clears_prefix():
    buf = bytearray(b"hello")
    bzero(buf, 2)
    assert buf == bytearray(b"\x00\x00llo")


def test_bzero_zero_length_is_noop():
    buf = bytearray(b"hello")
    bzero(buf, 0)
    assert buf == bytearray(b"hello")


def test_calloc_size_and_zeroed():
    buf = calloc(3, 4)
    assert len(buf) == 3 * 4
    assert all(b == 0 for b in buf)


def test_calloc_rejects_negative():
    with pytest.raises(ValueError):
        calloc(-1, 4)


def test_memcpy_copies_prefix():
    dest = bytearray(b"......")
    result = memcpy(dest, b"abc", 3)
    assert result is dest
    assert dest == bytearray(b"abc...")


def test_memcpy_both_missing_returns_none():
    assert memcpy(None, None, 5) is None


def test_memcpy_one_missing_raises():
    with pytest.raises(TypeError):
        memcpy(bytearray(3), None, 1)


def test_memcpy_source_too_short():
    with pytest.raises(IndexError):
        memcpy(bytearray(10), b"ab", 3)


def test_memmove_forward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 2, 0, 4)
    assert buf == bytearray(b"ababcd")


def test_memmove_backward_overlap():
    buf = bytearray(b"abcdef")
    memmove(buf, 0, 2, 4)
    assert buf == bytearray(b"cdefef")


def test_memmove_same_offset_unchanged():
    buf = bytearray(b"abcdef")
    assert memmove(buf, 1, 1, 3) == bytearray(b"abcdef")


def test_memmove_out_of_range():
    with pytest.raises(IndexError):
        memmove(bytearray(4), 2, 0, 3)


def test_memchr_finds_first():
    data = b"hello"
    assert memchr(data, ord("l"), len(data)) == data.index(b"l")


def test_memchr_respects_limit():
    assert memchr(b"hello", ord("o"), 4) is None


def test_memchr_value_modulo_256():
    data = b"\x00\x01\xff"
    assert memchr(data, -1, 3) == data.index(b"\xff")


def test_memcmp_equal_prefix():
    assert memcmp(b"abcX", b"abcY", 3) == 0


def test_memcmp_sign():
    assert memcmp(b"abc", b"abd", 3) < 0
    assert memcmp(b"abd", b"abc", 3) > 0


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"zeta", b"zebra"
    assert memcmp(a, b, 4) == -memcmp(b, a, 4)


def test_memcmp_zero_length():
    assert memcmp(b"a", b"b", 0) == 0


def test_memcmp_too_long():
    with pytest.raises(IndexError):
        memcmp(b"ab", b"abc", 3)