import string

import pytest

from katabox.bitset_cipher import decrypt, encrypt, find_char, find_int

ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + " ."


def test_find_int_fixed_codes():
    assert find_int("A") == 0
    assert find_int("a") == 26
    assert find_int("0") == 52
    assert find_int(".") == 63


def test_find_char_fixed_codes():
    assert find_char(25) == "Z"
    assert find_char(62) == " "


@pytest.mark.parametrize("char", list(ALPHABET))
def test_find_int_and_find_char_are_inverse(char):
    assert find_char(find_int(char)) == char


@pytest.mark.parametrize("char", ["!", "-", "é", "\n"])
def test_find_int_rejects_unknown(char):
    with pytest.raises(ValueError):
        find_int(char)


@pytest.mark.parametrize("value", [-1, 64, 1000])
def test_find_char_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        find_char(value)


@pytest.mark.parametrize(
    "text",
    ["Hello this is a test.", "", "A", "zz", ALPHABET, ALPHABET[::-1], "....    9999"],
)
def test_round_trip(text):
    assert decrypt(encrypt(text)) == text


def test_encrypt_keeps_length_and_alphabet():
    result = encrypt("Hello this is a test.")
    assert len(result) == len("Hello this is a test.")
    assert set(result) <= set(ALPHABET)


def test_single_character_encryption_is_a_bijection():
    assert len({encrypt(char) for char in ALPHABET}) == 64


def test_encrypt_rejects_invalid_text():
    with pytest.raises(ValueError):
        encrypt("Hello, world")