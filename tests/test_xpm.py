import pytest

from cubray.colornames import color_by_name
from cubray.xpm import (
    TRANSPARENT,
    XpmError,
    XpmImage,
    extract_lines,
    find_outside_quotes,
    load_xpm,
    parse_xpm,
    parse_xpm_text,
    split_words,
    strip_comments,
    text_to_rgb,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 3 1",
"a c #FF0000",
"b c blue",
". c None",
/* pixels */
"ab",
"b."
};
"""


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a\tb   c ") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_find_outside_quotes_skips_quoted():
    assert find_outside_quotes('"//" //', "//") == 5


def test_find_outside_quotes_missing():
    assert find_outside_quotes("abc", "x") == -1


def test_find_outside_quotes_empty_needle():
    with pytest.raises(ValueError):
        find_outside_quotes("abc", "")


def test_strip_comments_keeps_length_and_strings():
    text = '"a" /* x */ "b"'
    stripped = strip_comments(text)
    assert len(stripped) == len(text)
    assert "x" not in stripped
    assert extract_lines(stripped) == ["a", "b"]


def test_strip_comments_line_comment_outside_quotes():
    text = '"a//b" // tail\n"y"'
    stripped = strip_comments(text)
    assert "tail" not in stripped
    assert extract_lines(stripped) == ["a//b", "y"]


def test_extract_lines_of_sample():
    assert extract_lines(strip_comments(SAMPLE)) == [
        "2 2 3 1",
        "a c #FF0000",
        "b c blue",
        ". c None",
        "ab",
        "b.",
    ]


def test_text_to_rgb_hex():
    assert text_to_rgb("#00ff80", None) == 0x00FF80


def test_text_to_rgb_two_word_name():
    assert text_to_rgb("dark", "red") == color_by_name("dark red")


def test_text_to_rgb_unknown_and_bad_hex():
    assert text_to_rgb("nosuchcolour", None) == 0
    assert text_to_rgb("#zz", None) == 0


def test_parse_sample_text():
    image = parse_xpm_text(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.pixels == (0xFF0000, color_by_name("blue"), color_by_name("blue"), TRANSPARENT)
    assert TRANSPARENT == 0xFF000000


def test_pixel_access():
    image = parse_xpm_text(SAMPLE)
    assert image.pixel(0, 0) == 0xFF0000
    assert image.pixel(1, 1) == TRANSPARENT
    with pytest.raises(IndexError):
        image.pixel(2, 0)


def test_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c #010203", "bb c black", "aabb"])
    assert image == XpmImage(2, 1, (0x010203, color_by_name("black")))


def test_duplicate_keys_short_codes_later_wins():
    image = parse_xpm(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.pixels == (0x000002,)


def test_duplicate_keys_long_codes_first_wins():
    image = parse_xpm(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.pixels == (0x000001,)


def test_unknown_pixel_key_is_zero():
    image = parse_xpm(["1 1 1 1", "a c #ABCDEF", "z"])
    assert image.pixels == (0,)


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["2 2 1"],
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a s thing", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        ["2 1 1 1", "a c #000000", "a"],
    ],
)
def test_malformed_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm(lines)


def test_load_xpm_from_file(tmp_path):
    path = tmp_path / "wall.xpm"
    path.write_text(SAMPLE, encoding="latin-1")
    assert load_xpm(path) == parse_xpm_text(SAMPLE)


def test_load_xpm_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_xpm(tmp_path / "absent.xpm")