import pytest

from ftkit.colornames import lookup_color


@pytest.mark.parametrize(
    ("name", "value"),
    [
        ("snow", 0xFFFAFA),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("black", 0x0),
        ("gray100", 0xFFFFFF),
    ],
)
def test_known_values(name, value):
    assert lookup_color(name) == value


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_duplicate_names_take_first_entry():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_case_insensitive():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NoNe") == -1


def test_spaced_and_joined_names_agree():
    pairs = [
        ("ghost white", "ghostwhite"),
        ("misty rose", "mistyrose"),
        ("medium sea", "mediumseagreen"),
        ("light green", "lightgreen"),
    ]
    for spaced, joined in pairs:
        assert lookup_color(spaced) == lookup_color(joined)


def test_gray_and_grey_spellings_agree_and_increase():
    previous = -1
    for level in range(101):
        gray = lookup_color(f"gray{level}")
        assert gray == lookup_color(f"grey{level}")
        assert 0 <= gray <= 0xFFFFFF
        assert gray >= previous
        red, green, blue = gray >> 16, (gray >> 8) & 0xFF, gray & 0xFF
        assert red == green == blue
        previous = gray


def test_numbered_variant_one_matches_base_where_source_says_so():
    assert lookup_color("snow1") == lookup_color("snow")
    assert lookup_color("red1") == lookup_color("red")
    assert lookup_color("blue1") == lookup_color("blue")


@pytest.mark.parametrize("name", ["", "not a colour", "gray101", "snow5", " red"])
def test_unknown_name_raises(name):
    with pytest.raises(KeyError):
        lookup_color(name)