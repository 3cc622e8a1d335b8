"""
Assorted text manipulation functions.

The wrapping functions are named after their textwrap equivalents but
follow a simpler greedy rule and end every line with a newline.
"""
import re
from functools import lru_cache

_INDENT = re.compile(r"^[^\S\n]+", re.MULTILINE)


@lru_cache(maxsize=32)
def _line_pattern(width: int) -> re.Pattern:
    # a line ending in non-space, then its breaking whitespace or end of line,
    # else a hard break of exactly width characters
    return re.compile(
        rf"(.{{0,{width - 1}}}\S)([^\S\n]+|$)\n?|(.{{{width}}})", re.MULTILINE
    )


def fill(text: str, width: int = 60) -> str:
    """
    Wrap a length of text to fit within a given width.

    Args:
        text: The text to be wrapped.
        width: The maximum line length in characters, 60 by default.

    Returns:
        The text with linebreaks inserted, each line ending in "\\n".

    Whitespace used as a break point is dropped, including indentation at
    the start of a line. Words longer than the width are split every width
    characters.

        >>> fill("aaaa bbbb cccc", width=4)
        'aaaa\\nbbbb\\ncccc\\n'
    """
    if width < 1:
        raise ValueError(f"width must be at least 1, not {width}")
    if not text.strip():
        return ""
    return _line_pattern(width).sub(r"\1\3\n", _INDENT.sub("", text))


def wrap(text: str, width: int = 60) -> list[str]:
    """
    Wrap a length of text to fit within a given width.

    This works like fill but returns a list of lines instead of a string.
    """
    return fill(text, width).splitlines()
