import pytest
from relaisdev.text import fill, wrap


@pytest.mark.parametrize(
    "text,width,expected",
    [
        ("aaaa bbbb cccc", 4, "aaaa\nbbbb\ncccc\n"),
        ("aaaaaaaa", 4, "aaaa\naaaa\n"),
        ("aaaaa bb", 4, "aaaa\na bb\n"),
        ("aa bb cc", 5, "aa bb\ncc\n"),
        ("aa   bb", 3, "aa\nbb\n"),
        ("aa  \nbb", 10, "aa\nbb\n"),
        ("aa\n\nbb", 10, "aa\n\nbb\n"),
        ("short", 60, "short\n"),
        ("", 4, ""),
        ("    ", 4, ""),
        ("  aaaa", 4, "aaaa\n"),
        ("xx\n  bbbb cc", 4, "xx\nbbbb\ncc\n"),
        ("  aa bb", 10, "aa bb\n"),
        ("aaaa\n   ", 4, "aaaa\n"),
        ("aa\n   \nbb", 4, "aa\n\nbb\n"),
    ],
)
def test_fill(text, width, expected):
    assert fill(text, width=width) == expected


def test_fill_default_width():
    text = " ".join(["word"] * 30)
    lines = fill(text).splitlines()
    assert all(len(line) <= 60 for line in lines)
    assert lines[0] == " ".join(["word"] * 12)


def test_fill_counts_characters():
    assert fill("ééé ééé", width=3) == "ééé\nééé\n"


@pytest.mark.parametrize("width", [0, -1])
def test_fill_bad_width(width):
    with pytest.raises(ValueError):
        fill("abc", width=width)


def test_wrap():
    assert wrap("aaaa bbbb cccc", width=4) == ["aaaa", "bbbb", "cccc"]
    assert wrap("aaaaaaaa", width=4) == ["aaaa", "aaaa"]
    assert wrap("") == []


def test_wrap_matches_fill():
    text = "the quick brown fox jumps over the lazy dog " * 5
    assert wrap(text, 17) == fill(text, 17).split("\n")[:-1]


def test_wrap_drops_trailing_blank_line():
    assert wrap("aaaa\n   ", width=4) == ["aaaa"]
