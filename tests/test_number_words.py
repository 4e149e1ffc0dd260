import pytest

from katabox.number_words import int_to_words, parse_int, sort_by_name


def test_parse_example():
    assert parse_int("three hundred seventy seven") == 377


@pytest.mark.parametrize("number", range(1000))
def test_round_trip(number):
    assert parse_int(int_to_words(number)) == number


@pytest.mark.parametrize(
    "number, name",
    [(0, "zero"), (13, "thirteen"), (90, "ninety"), (100, "one hundred")],
)
def test_names_from_table(number, name):
    assert int_to_words(number) == name


def test_compound_name_joins_with_space():
    assert int_to_words(21) == "twenty one"


def test_million():
    assert parse_int("one million") == 1000000


def test_larger_multiplier_scales_previous_group():
    assert parse_int("two hundred thousand") == parse_int("two hundred") * parse_int(
        "one thousand"
    )


def test_smaller_multiplier_starts_new_group():
    assert parse_int("one thousand two hundred") == parse_int("one thousand") + parse_int(
        "two hundred"
    )


def test_hyphen_and_unknown_words():
    assert parse_int("forty-two") == parse_int("forty two")
    assert parse_int("one hundred and five") == parse_int("one hundred five")


def test_sort_example():
    assert sort_by_name([1, 2, 3, 4]) == [4, 1, 3, 2]


def test_sort_orders_names_and_keeps_items():
    numbers = [8, 8, 9, 99, 999, 10, 10, 11, 0, 250]
    result = sort_by_name(numbers)
    names = [int_to_words(n) for n in result]
    assert names == sorted(names)
    assert sorted(result) == sorted(numbers)


@pytest.mark.parametrize("number", [-1, 1000])
def test_out_of_range(number):
    with pytest.raises(ValueError):
        int_to_words(number)