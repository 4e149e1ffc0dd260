import math

import pytest

from katabox.numerals import (
    big_factorial,
    dec_to_fact_string,
    fact_string_to_dec,
    factorial,
    last_digit,
    multiply_strings,
    to_roman,
)


@pytest.mark.parametrize(
    "number, numeral", [(4, "IV"), (10, "X"), (3000, "MMM"), (0, ""), (4000, "")]
)
def test_roman_table_values(number, numeral):
    assert to_roman(number) == numeral


def test_roman_concatenates_digits():
    assert to_roman(2008) == "MM" + "VIII"


@pytest.mark.parametrize("number", range(11, 4000, 37))
def test_roman_ends_with_units(number):
    assert to_roman(number).endswith(to_roman(number % 10))


@pytest.mark.parametrize("n", [0, 1, 5, 12, 20])
def test_factorial(n):
    assert factorial(n) == math.factorial(n)


def test_factorial_negative():
    with pytest.raises(ValueError):
        factorial(-1)


def test_fact_string_example():
    assert dec_to_fact_string(463) == "341010"


def test_fact_string_zero_is_empty():
    assert dec_to_fact_string(0) == ""


@pytest.mark.parametrize("number", list(range(1, 2000, 7)) + [math.factorial(11) * 10])
def test_fact_string_round_trip(number):
    text = dec_to_fact_string(number)
    assert text.endswith("0")
    assert fact_string_to_dec(text) == number


def test_fact_string_letter_digit():
    text = dec_to_fact_string(math.factorial(11) * 10)
    assert text[0] == "A"


def test_fact_string_invalid_digit():
    with pytest.raises(ValueError):
        fact_string_to_dec("3a0")


@pytest.mark.parametrize("a, b", [("123", "456"), ("0", "999"), ("007", "2"), ("99999999999", "88888888888")])
def test_multiply_strings(a, b):
    assert multiply_strings(a, b) == str(int(a) * int(b))


def test_multiply_empty():
    assert multiply_strings("", "5") == "0"


def test_multiply_invalid():
    with pytest.raises(ValueError):
        multiply_strings("12x", "3")


@pytest.mark.parametrize("n", [0, 1, 15, 40])
def test_big_factorial(n):
    assert big_factorial(n) == str(math.factorial(n))


def test_big_factorial_negative():
    with pytest.raises(ValueError):
        big_factorial(-3)


def test_last_digit_example():
    assert last_digit("7", "59") == 3


@pytest.mark.parametrize("base", ["2", "3", "4", "7", "8", "9", "12", "1234", "15", "10"])
@pytest.mark.parametrize("exponent", ["0", "1", "7", "10", "59", "100", "1000003"])
def test_last_digit_matches_pow(base, exponent):
    assert last_digit(base, exponent) == pow(int(base), int(exponent), 10)


def test_last_digit_invalid():
    with pytest.raises(ValueError):
        last_digit("", "3")