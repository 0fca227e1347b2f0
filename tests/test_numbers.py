import pytest

from wireframe.numbers import atoi, atoi_base, count_words


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1 2 3\n", 3),
        ("  4   5 ", 2),
        ("", 0),
        ("\n", 0),
        ("7 \n", 1),
        ("\n8", 1),
    ],
)
def test_count_words(text, expected):
    assert count_words(text, " ") == expected


def test_count_words_other_separator():
    assert count_words("a,b,,c", ",") == 3


def test_count_words_rejects_long_separator():
    with pytest.raises(ValueError):
        count_words("a b", "ab")


@pytest.mark.parametrize("text, expected", [("42", 42), (" -17x", -17), ("+5", 5), ("abc", 0)])
def test_atoi(text, expected):
    assert atoi(text) == expected


@pytest.mark.parametrize("value", [0, 1, 255, 0xFF0000, 123456])
def test_atoi_base_hex_round_trip(value):
    assert atoi_base(hex(value), 16) == value
    assert atoi_base(hex(value).upper(), 16) == value


@pytest.mark.parametrize("value", [0, 5, 1023])
def test_atoi_base_binary_and_octal_round_trip(value):
    assert atoi_base(bin(value), 2) == value
    assert atoi_base("0" + oct(value)[2:], 8) == value


@pytest.mark.parametrize("value", [-300, 0, 99])
def test_atoi_base_decimal(value):
    assert atoi_base(f"  {value}", 10) == value


def test_atoi_base_requires_prefix():
    assert atoi_base("FF", 16) == 0
    assert atoi_base("101", 2) == 0


def test_atoi_base_unsupported_base():
    assert atoi_base("0x12", 3) == 0


def test_atoi_base_stops_at_newline():
    assert atoi_base("0xff\n", 16) == atoi_base("0xFF", 16)


def test_atoi_base_wraps_to_int32():
    assert atoi_base("0xFFFFFFFF", 16) == -1