import string

import pytest

from ftkit.chars import isalnum, isalpha, isascii, isdigit, isprint, tolower, toupper


def test_isalpha_matches_ascii_letters():
    for code in range(-5, 300):
        assert isalpha(code) == (chr(code) in string.ascii_letters if code >= 0 else False)


def test_isdigit_matches_ascii_digits():
    for code in range(0, 300):
        assert isdigit(code) == (chr(code) in string.digits)


def test_isalnum_is_union_of_alpha_and_digit():
    for code in range(-5, 300):
        assert isalnum(code) == (isalpha(code) or isdigit(code))


def test_isascii_bounds():
    assert isascii(0)
    assert isascii(127)
    assert not isascii(128)
    assert not isascii(-1)


def test_isprint_bounds():
    assert isprint(" ")
    assert isprint("~")
    assert not isprint(31)
    assert not isprint(127)


def test_non_ascii_letter_is_not_alpha():
    assert not isalpha("\u00e9")
    assert not isalnum("\u00e9")


def test_tolower_converts_uppercase_strings():
    for letter in string.ascii_uppercase:
        assert tolower(letter) == letter.lower()


def test_toupper_converts_lowercase_strings():
    for letter in string.ascii_lowercase:
        assert toupper(letter) == letter.upper()


def test_case_round_trip_on_codes():
    for code in range(ord("a"), ord("z") + 1):
        assert tolower(toupper(code)) == code
        assert isinstance(toupper(code), int)


def test_case_functions_leave_other_characters_alone():
    for ch in string.digits + string.punctuation + " \u00e9":
        assert tolower(ch) == ch
        assert toupper(ch) == ch
    assert tolower(-1) == -1
    assert toupper(200) == 200


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        isalpha("ab")
    with pytest.raises(ValueError):
        tolower("")