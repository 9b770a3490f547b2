import pytest

from minitable.strings import (
    atoi,
    itoa,
    split,
    strlcat,
    strlcpy,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("number", [-2147483648, -1, 0, 7, 548, 2147483647])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_pins_extremes():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(0) == "0"


@pytest.mark.parametrize("number", [2**31, -(2**31) - 1])
def test_itoa_rejects_out_of_range(number):
    with pytest.raises(OverflowError):
        itoa(number)


@pytest.mark.parametrize("text", ["548", "-12", "+9"])
def test_atoi_skips_leading_blanks(text):
    assert atoi(" \t\n\v\f\r" + text) == atoi(text)


def test_atoi_stops_at_non_digit():
    assert atoi("+548xyz") == atoi("548")
    assert atoi("-" + "12" + "a34") == -atoi("12")


def test_atoi_without_digits():
    assert atoi("abc") == 0


def test_split_source_example():
    parts = split("      split       this for   me  !", " ")
    assert parts == ["split", "this", "for", "me", "!"]


@pytest.mark.parametrize("text", ["", "    ", "a  b", ",x,,y,"])
def test_split_invariants(text):
    for sep in " ,":
        parts = split(text, sep)
        assert all(parts)
        assert all(sep not in part for part in parts)


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strtrim_source_example_unchanged():
    text = "lorem \n ipsum \t dolor \n sit \t amet"
    assert strtrim(text, " ") == text


def test_strtrim_both_ends():
    assert strtrim("xyhixy", "xy") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  a  ", "") == "  a  "


def test_substr_source_example():
    assert substr("hola", 0, 4444) == "hola"


def test_substr_cases():
    assert substr("hello", 1, 3) == "hello"[1:4]
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 99, 2) == ""
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


@pytest.mark.parametrize("first,second", [("abc", "abd"), ("test", "tes"), ("", "a")])
def test_strncmp_antisymmetric(first, second):
    forward = strncmp(first, second, 10)
    backward = strncmp(second, first, 10)
    assert forward == -backward
    assert forward != 0


def test_strncmp_limits():
    assert strncmp("abc", "abd", 0) == 0
    assert strncmp("abc", "abd", 2) == 0
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("same", "same", 100) == 0


def test_strncmp_stops_at_nul():
    assert strncmp("ab\0x", "ab\0y", 10) == 0


def test_strnstr_source_example():
    assert strnstr("abcdefgh", "abc", 2) is None
    assert strnstr("abcdefgh", "abc", 3) == "abcdefgh"


def test_strnstr_cases():
    haystack = "lorem ipsum"
    assert strnstr(haystack, "ipsum", len(haystack)) == "ipsum"
    assert strnstr(haystack, "ipsum", len(haystack) - 1) is None
    assert strnstr(haystack, "", 0) == haystack
    assert strnstr(haystack, "zzz", 100) is None


def test_strlcpy_source_example():
    source = "lorem ipsum dolor sit amet"
    assert strlcpy(source, 0) == ("", len(source))
    assert strlcpy(source, 5) == ("lore", len(source))


@pytest.mark.parametrize("size", [1, 2, 10, 30, 100])
def test_strlcpy_invariants(size):
    source = "lorem ipsum dolor sit amet"
    copied, total = strlcpy(source, size)
    assert total == len(source)
    assert len(copied) == min(len(source), size - 1)
    assert source.startswith(copied)


def test_strlcat_source_example_full_buffer():
    destination = "rrrrrrrrrrrrrrrr"
    source = "lorem ipsum dolor sit amet"
    assert strlcat(destination, source, 5) == (destination, 5 + len(source))


def test_strlcat_fits():
    result, total = strlcat("ab", "cd", 10)
    assert result == "ab" + "cd"
    assert total == len("abcd")


@pytest.mark.parametrize("size", [3, 4, 5, 6])
def test_strlcat_truncates(size):
    result, total = strlcat("ab", "cdefgh", size)
    assert total == len("ab") + len("cdefgh")
    assert len(result) == size - 1
    assert ("ab" + "cdefgh").startswith(result)


def test_strlcat_rejects_negative_size():
    with pytest.raises(ValueError):
        strlcat("a", "b", -1)