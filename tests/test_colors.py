import pytest

from wireframe.colors import color_by_name


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray50", 0x7F7F7F),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert color_by_name(name) == expected


def test_lookup_ignores_case():
    assert color_by_name("SNOW") == color_by_name("snow")
    assert color_by_name("Ghost White") == color_by_name("ghost white")


def test_first_duplicate_wins():
    assert color_by_name("dark slate") == 0x2F4F4F
    assert color_by_name("light slate") == 0x778899
    assert color_by_name("light goldenrod") == 0xFAFAD2


def test_none_is_transparent():
    assert color_by_name("none") == -1


def test_spaced_and_joined_names_agree():
    assert color_by_name("ghost white") == color_by_name("ghostwhite")
    assert color_by_name("dark orange") == color_by_name("darkorange")


@pytest.mark.parametrize("level", range(0, 101))
def test_gray_and_grey_spellings_agree(level):
    assert color_by_name(f"gray{level}") == color_by_name(f"grey{level}")


def test_gray_ramp_is_increasing_and_neutral():
    values = [color_by_name(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    for value in values:
        red, green, blue = (value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF
        assert red == green == blue


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        color_by_name("not a colour")


def test_empty_name_raises():
    with pytest.raises(KeyError):
        color_by_name("")