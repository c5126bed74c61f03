import pytest

from cubcaster.strutil import (
    atoi,
    count_char,
    is_space,
    itoa,
    split,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("n", [0, 7, -7, 1920, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(n):
    assert atoi(itoa(n)) == n


def test_itoa_values_from_input():
    assert itoa(0) == "0"
    assert itoa(-7) == "-7"


def test_atoi_skips_leading_whitespace():
    assert atoi(" \t\n\v\f\r42") == atoi("42")


def test_atoi_stops_at_non_digit():
    assert atoi("12abc") == atoi("12")
    assert atoi("  -12 34") == atoi("-12")


@pytest.mark.parametrize("text", ["", "abc", "+-5", "--5", "-", "+"])
def test_atoi_without_digits_is_zero(text):
    assert atoi(text) == 0


def test_atoi_plus_sign():
    assert atoi("+15") == atoi("15")


def test_split_drops_empty_pieces():
    assert split("R 1920  1080", " ") == ["R", "1920", "1080"]


@pytest.mark.parametrize("text", ["", ",,,", ","])
def test_split_only_separators(text):
    assert split(text, ",") == []


def test_split_pieces_never_contain_separator():
    pieces = split(",a,,bc,d,", ",")
    assert all(pieces)
    assert all("," not in piece for piece in pieces)
    assert "".join(pieces) == ",a,,bc,d,".replace(",", "")


def test_strtrim():
    assert strtrim("  xx  ", " ") == "xx"
    assert strtrim("aaa", "a") == ""
    assert strtrim("abc", "") == "abc"
    assert strtrim("-+a+b-+", "+-") == "a+b"


def test_substr():
    assert substr("hello", 1, 3) == "ell"
    assert substr("hi", 5, 2) == ""
    assert substr("hi", 0, 10) == "hi"
    assert substr("hi", 2, 1) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_found_slice_matches():
    hay = "hello world"
    idx = strnstr(hay, "world", len(hay))
    assert idx is not None
    assert hay[idx:idx + len("world")] == "world"


def test_strnstr_limit_and_empty_needle():
    assert strnstr("hello world", "world", 8) is None
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "x", 3) is None


def test_strncmp_equal_and_prefix():
    assert strncmp("abc", "abc", 3) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("a", "b", 0) == 0
    assert strncmp("--save", "--save", 100) == 0


def test_strncmp_sign_and_antisymmetry():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("b", "a", 1) > 0
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abd", "abc", 3) == -strncmp("abc", "abd", 3)


@pytest.mark.parametrize("ch", [" ", "\t", "\n", "\v", "\f", "\r"])
def test_is_space_true(ch):
    assert is_space(ch) is True


@pytest.mark.parametrize("ch", ["a", "1", "", "  "])
def test_is_space_false(ch):
    assert is_space(ch) is False


def test_count_char():
    assert count_char("a\tb\t", "\t") == 2
    assert count_char("", "x") == 0