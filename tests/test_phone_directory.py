import pytest

from katabox.phone_directory import phone

DIRECTORY = "\n".join([
    "/+1-2-3-4 156 Alphand_St. <J Steeve>",
    " 133, Green, Rd. <E Kustur> NY-56423 ;+5-6-7-8",
    "<P Dup> +3-3-3-3 Oak",
    "<Q Dup> +3-3-3-3 Elm",
    "<Solo> +6-6-6-6",
    "+4-4-4-4 Nowhere",
])


def test_entry_with_name_at_end():
    assert phone(DIRECTORY, "1-2-3-4") == (
        "Phone => 1-2-3-4, Name => J Steeve, Address => 156 Alphand St."
    )


def test_entry_with_phone_at_end():
    assert phone(DIRECTORY, "5-6-7-8") == (
        "Phone => 5-6-7-8, Name => E Kustur, Address => 133 Green Rd. NY-56423"
    )


def test_not_found():
    assert phone(DIRECTORY, "9-9-9-9") == "Error => Not found: 9-9-9-9"


def test_too_many_people():
    assert phone(DIRECTORY, "3-3-3-3") == "Error => Too many people: 3-3-3-3"


def test_entry_without_address():
    result = phone(DIRECTORY, "6-6-6-6")
    assert result.startswith("Phone => 6-6-6-6, Name => Solo, ")
    assert result.endswith("Address =>")


def test_entry_without_name():
    with pytest.raises(ValueError):
        phone(DIRECTORY, "4-4-4-4")


def test_address_has_no_separators():
    result = phone(DIRECTORY, "1-2-3-4")
    address = result.split("Address => ", 1)[1]
    assert not any(char in address for char in "*/_;$?,:")
    assert "  " not in address
    assert "+" not in address