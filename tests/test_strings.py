import pytest

from sigtalk.ascii import toupper
from sigtalk.strings import (
    atoi,
    itoa,
    split,
    striteri,
    strjoin,
    strchr,
    strlcat,
    strlcpy,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_atoi_skips_whitespace_and_reads_sign():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+17") == 17


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("--5") == 0
    assert atoi("") == 0


@pytest.mark.parametrize("n", [0, 7, -7, 2147483647, -2147483648, 1000])
def test_itoa_round_trips_through_atoi(n):
    assert atoi(itoa(n)) == n
    assert itoa(n).startswith("-") == (n < 0)


def test_strchr_finds_first_occurrence():
    s = "hello"
    idx = strchr(s, "l")
    assert s[idx] == "l"
    assert "l" not in s[:idx]
    assert strchr(s, ord("e")) == s.index("e")


def test_strchr_nul_and_missing():
    assert strchr("hello", "\0") == len("hello")
    assert strchr("hello", 0) == len("hello")
    assert strchr("hello", "z") is None


def test_strrchr_finds_last_occurrence():
    s = "hello"
    idx = strrchr(s, "l")
    assert s[idx] == "l"
    assert "l" not in s[idx + 1:]
    assert strrchr(s, "\0") == len(s)
    assert strrchr(s, "q") is None


def test_strchr_rejects_long_argument():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strncmp_equal_and_bounded():
    assert strncmp("abc", "abc", 10) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign_and_end_of_string():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0
    assert strncmp("ab", "abc", 5) == -ord("c")
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strnstr_respects_limit():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", len(big)) == big.index("Bar")
    assert strnstr(big, "Bar", big.index("Bar") + 2) is None
    assert strnstr(big, "", 0) == 0
    assert strnstr(big, "Qux", len(big)) is None


def test_substr_slices_and_clips():
    s = "hello"
    assert substr(s, 1, 3) == s[1:4]
    assert substr(s, 2, 100) == s[2:]
    assert substr(s, len(s) + 1, 3) == ""
    with pytest.raises(ValueError):
        substr(s, -1, 2)


def test_strjoin_concatenates():
    joined = strjoin("foo", "bar")
    assert joined == "foobar"
    assert strjoin("", "") == ""


def test_strtrim():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xyxy", "xy") == ""
    assert strtrim(" a ", "") == " a "


def test_split_drops_empty_words():
    s = "  a b  c "
    words = split(s, " ")
    assert words == ["a", "b", "c"]
    assert all(" " not in w and w for w in words)
    assert split("", " ") == []
    assert split(",,,", ",") == []


def test_strmapi_applies_function_with_index():
    assert strmapi("hello", lambda i, ch: toupper(ch)) == "HELLO"
    assert strmapi("abc", lambda i, ch: str(i)) == "012"


def test_striteri_modifies_in_place():
    chars = list("abc")
    seen = []

    def visit(i, ch):
        seen.append(i)
        return toupper(ch) if i % 2 == 0 else None

    striteri(chars, visit)
    assert chars == ["A", "b", "C"]
    assert seen == [0, 1, 2]


def test_strlcpy_copies_and_terminates():
    dest = bytearray(b"\xff" * 10)
    assert strlcpy(dest, b"hello", 10) == len(b"hello")
    assert dest[:6] == b"hello\0"


def test_strlcpy_truncates_and_zero_size():
    dest = bytearray(b"\xff" * 10)
    assert strlcpy(dest, b"hello", 3) == len(b"hello")
    assert dest[:3] == b"he\0"
    untouched = bytearray(b"\xff" * 4)
    assert strlcpy(untouched, b"hello", 0) == len(b"hello")
    assert untouched == bytearray(b"\xff" * 4)
    with pytest.raises(IndexError):
        strlcpy(bytearray(2), b"hello", 5)


def test_strlcat_appends():
    dest = bytearray(b"ab" + b"\0" * 8)
    assert strlcat(dest, b"cd", 10) == len(b"abcd")
    assert dest[:5] == b"abcd\0"


def test_strlcat_truncates_and_small_size():
    dest = bytearray(b"ab" + b"\0" * 8)
    assert strlcat(dest, b"cd", 4) == len(b"abcd")
    assert dest[:4] == b"abc\0"
    small = bytearray(b"ab" + b"\0" * 8)
    assert strlcat(small, b"cd", 1) == 1 + len(b"cd")
    assert small[:3] == b"ab\0"
    with pytest.raises(IndexError):
        strlcat(bytearray(3), b"x", 4)