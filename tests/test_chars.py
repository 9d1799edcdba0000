import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)


@pytest.mark.parametrize("code", range(128))
def test_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", range(128))
def test_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@given(st.integers(min_value=-1000, max_value=1000))
def test_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


def test_accepts_single_character_strings():
    assert is_alpha("q") is True
    assert is_digit("7") is True
    assert is_alnum("!") is False


def test_rejects_multi_character_strings():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


@pytest.mark.parametrize(
    "code, expected", [(0, True), (127, True), (128, False), (-1, False)]
)
def test_ascii_bounds(code, expected):
    assert is_ascii(code) is expected


@pytest.mark.parametrize(
    "code, expected", [(32, True), (126, True), (31, False), (127, False)]
)
def test_print_bounds(code, expected):
    assert is_print(code) is expected


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_to_lower_matches_str_lower(letter):
    assert to_lower(letter) == letter.lower()
    assert to_lower(ord(letter)) == ord(letter.lower())


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_to_upper_matches_str_upper(letter):
    assert to_upper(letter) == letter.upper()
    assert to_upper(ord(letter)) == ord(letter.upper())


@given(st.integers(min_value=-500, max_value=500))
def test_non_letters_unchanged(code):
    if not is_alpha(code):
        assert to_lower(code) == code
        assert to_upper(code) == code


@given(st.sampled_from(string.ascii_letters))
def test_case_round_trip(letter):
    assert to_upper(to_lower(letter)) == letter.upper()
    assert to_lower(to_upper(letter)) == letter.lower()


def test_result_type_follows_argument():
    assert to_upper("a") == "A"
    assert to_lower(ord("Z")) == ord("z")