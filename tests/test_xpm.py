import pytest

from ftkit.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    color_from_text,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    split_words,
    strip_comments,
)

SAMPLE = [
    "2 2 3 1",
    ". c #ff0000",
    "x c blue",
    "  c None",
    ".x",
    "x ",
]

SAMPLE_FILE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 3 1",
". c #ff0000",
"x c blue",  // blue pixels
"  c None",
/* pixels */
".x",
"x "
};
"""


def test_strip_comments_keeps_length_and_removes_block():
    text = 'a /* gone */ b'
    result = strip_comments(text)
    assert len(result) == len(text)
    assert "gone" not in result
    assert result.startswith("a ") and result.endswith(" b")


def test_strip_comments_line_comment_includes_newline():
    result = strip_comments("x // note\ny")
    assert "note" not in result
    assert "\n" not in result
    assert result.endswith("y")


def test_strip_comments_ignores_markers_inside_quotes():
    text = '"/* kept */" "// kept"'
    assert strip_comments(text) == text


def test_strip_comments_unterminated_block_blanks_to_end():
    assert strip_comments("ab/* open").strip() == "ab"


def test_split_words_on_spaces_and_tabs_only():
    assert split_words("  a \tb  c\t") == ["a", "b", "c"]
    assert split_words("a\nb") == ["a\nb"]
    assert split_words("") == []


def test_color_from_hex():
    assert color_from_text("#ff0000") == 0xFF0000
    assert color_from_text("#00FF00zz") == 0x00FF00
    assert color_from_text("#") == 0


def test_color_from_name_and_suffix():
    assert color_from_text("red") == 0xFF0000
    assert color_from_text("light", "blue") == 0xADD8E6
    assert color_from_text("None") == -1


def test_color_unknown_name_is_zero():
    assert color_from_text("nosuchcolour") == 0
    assert color_from_text("red", "m") == 0


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 0) == 0x0000FF
    assert image.pixel(0, 1) == 0x0000FF
    assert image.pixel(1, 1) == TRANSPARENT


def test_image_geometry_and_bounds():
    image = parse_xpm(SAMPLE)
    assert image.bits_per_pixel == 32
    assert image.size_line == image.width * 4
    assert len(image.pixels) == image.height
    assert all(len(row) == image.width for row in image.pixels)
    with pytest.raises(IndexError):
        image.pixel(2, 0)
    with pytest.raises(IndexError):
        image.pixel(0, -1)


def test_short_codes_last_definition_wins():
    image = parse_xpm(["1 1 2 1", "a c red", "a c blue", "a"])
    assert image.pixel(0, 0) == 0x0000FF


def test_long_codes_first_definition_wins():
    image = parse_xpm(["1 1 2 3", "abc c red", "abc c blue", "abc"])
    assert image.pixel(0, 0) == 0xFF0000


def test_undefined_code_gives_zero():
    image = parse_xpm(["2 1 1 1", "a c white", "ab"])
    assert image.pixels == ((0xFFFFFF, 0),)


def test_parse_xpm_text_matches_string_list():
    assert parse_xpm_text(SAMPLE_FILE) == parse_xpm(SAMPLE)


def test_load_xpm(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE)
    assert load_xpm(path) == parse_xpm(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "absent.xpm")


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c red", "a"],
        ["1 1 1", "a c red", "a"],
        ["1 1 1 1", "a s red", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c red", "a"],
        ["2 1 1 1", "a c red", "a"],
        [],
    ],
)
def test_parse_xpm_errors(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_xpm_error_is_value_error():
    with pytest.raises(ValueError):
        parse_xpm_text("no quoted strings here")


def test_image_is_immutable():
    image = parse_xpm(SAMPLE)
    with pytest.raises(AttributeError):
        image.width = 5
    assert isinstance(image, XpmImage) and image.width == 2