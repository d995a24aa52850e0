import string

import pytest

from minishellkit.textutils import (
    atoi,
    compare,
    compare_prefix,
    find_within,
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    itoa,
    split,
    substring,
    to_lower,
    to_upper,
    trim,
)


@pytest.mark.parametrize("number", [0, 1, -1, 123, -123, 2147483647, -2147483648])
def test_atoi_itoa_round_trip(number):
    assert atoi(itoa(number)) == number


def test_itoa_fixed_values():
    assert itoa(-2147483648) == "-2147483648"
    assert itoa(-123) == "-123"
    assert itoa(0) == "0"


def test_itoa_rejects_non_integer():
    with pytest.raises(TypeError):
        itoa(1.5)


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\r\v\f-42abc") == atoi("-42")
    assert atoi("+17xyz") == atoi("17")


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == atoi("0")
    assert atoi("--5") == atoi("")
    assert atoi("+-5") == atoi("0")


def test_atoi_wraps_to_32_bits():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648


def test_split_example():
    assert split("hello    hi    hello", " ") == ["hello", "hi", "hello"]


def test_split_edges():
    assert split("", " ") == []
    assert split("   ", " ") == []
    assert split("  a  ", " ") == ["a"]
    assert split("abc", "") == ["abc"]


def test_split_pieces_never_contain_separator():
    text = ",,a,bb,,ccc,"
    pieces = split(text, ",")
    assert all(piece and "," not in piece for piece in pieces)
    assert "".join(pieces) == text.replace(",", "")


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_trim_examples():
    assert trim("   xxx   xxx", " x") == ""
    assert trim("  hi there  ", " ") == "hi there"
    assert trim("abc", "") == "abc"
    assert trim("", "x") == ""


def test_find_within_limited_length():
    assert find_within("128493280", "280", 5) is None


def test_find_within_whole_haystack():
    haystack, needle = "128493280", "280"
    index = find_within(haystack, needle)
    assert haystack[index:index + len(needle)] == needle
    assert find_within(haystack, needle, -1) == index
    assert find_within(haystack, needle, len(haystack)) == index
    assert find_within(haystack, needle, len(haystack) - 1) is None


def test_find_within_empty_inputs():
    assert find_within("", "a") is None
    assert find_within("abc", "") == 0
    assert find_within("", "") == 0


def test_substring_example():
    assert substring("hellohowareyou", 5, 9) == "howareyou"


def test_substring_past_end():
    assert substring("abc", 10, 2) == ""
    assert substring("abc", 3, 5) == ""
    assert substring("abc", 1, 100) == "bc"


def test_substring_negative_rejected():
    with pytest.raises(ValueError):
        substring("abc", -1, 2)


def test_compare():
    assert compare("same", "same") == 0
    assert compare("a", "b") < 0
    assert compare("b", "a") > 0
    assert compare("abc", "ab") > 0
    assert compare("ab", "abc") < 0
    assert compare(None, "x") == -1
    assert compare("x", None) == -1


def test_compare_antisymmetric():
    for first, second in [("PATH", "HOME"), ("a", "aa"), ("", "z")]:
        assert compare(first, second) == -compare(second, first)


def test_compare_prefix():
    assert compare_prefix("hello you", "hello world", 8) > 0
    assert compare_prefix("hello you", "hello world", 6) == 0
    assert compare_prefix("abc", "xyz", 0) == 0
    assert compare_prefix("abc", "abd", 3) < 0
    assert compare_prefix("cd", "cd", 3) == 0
    assert compare_prefix("cdx", "cd", 3) > 0


@pytest.mark.parametrize("char", list(string.ascii_letters))
def test_letters(char):
    assert is_alpha(char) and is_alnum(char) and not is_digit(char)


@pytest.mark.parametrize("char", list(string.digits))
def test_digits(char):
    assert is_digit(char) and is_alnum(char) and not is_alpha(char)


@pytest.mark.parametrize("char", ["_", " ", "-", "$", "é"])
def test_non_alnum(char):
    assert not is_alnum(char)


def test_is_ascii_and_print():
    assert is_ascii(0) and is_ascii(127)
    assert not is_ascii(128) and not is_ascii(-1)
    assert is_print(" ") and is_print("~")
    assert not is_print(127) and not is_print("\n")


def test_case_conversion_round_trip():
    for char in string.ascii_uppercase:
        assert to_upper(to_lower(char)) == char
        assert to_lower(char) == char.lower()
    for char in "1_ {":
        assert to_lower(char) == char
        assert to_upper(char) == char


def test_case_conversion_on_codes():
    assert to_lower(ord("A")) == ord("a")
    assert to_upper(ord("z")) == ord("Z")


def test_multi_char_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")