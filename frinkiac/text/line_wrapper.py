"""Greedy line wrapping for meme captions.

Words are packed left to right into lines of at most ``max_line_length``
characters. A line is closed as soon as the next word does not fit; there is
no lookahead or rebalancing. Words are never split, so a single word longer
than the limit still gets a line of its own.
"""

from collections.abc import Iterable
from functools import reduce
from typing import Protocol

DEFAULT_MAX_LINE_LENGTH = 25

Line = tuple[str, ...]


class HasContent(Protocol):
    content: str


def _pack_word(lines: tuple[Line, ...], word: str, max_line_length: int) -> tuple[Line, ...]:
    """Return ``lines`` with ``word`` appended to the last line or opening a new one."""
    line = lines[-1] if lines else ()

    current_line_length = len(" ".join(line))
    word_length = len(word) + 1  # joining space

    if current_line_length + word_length <= max_line_length and current_line_length > 0:
        return lines[:-1] + (line + (word,),)
    return lines + ((word,),)


def wrap(text: str, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> list[str]:
    """Wrap ``text`` into lines of at most ``max_line_length`` characters.

    Tokenizes on single spaces without collapsing runs, so empty words
    produced by consecutive spaces still occupy a slot.

    Args:
        text: Caption text to wrap
        max_line_length: Target line width (default 25)

    Returns:
        Lines in original word order; ``[""]`` for an empty string

    Example:
        >>> wrap("a b c")
        ['a b c']
    """
    lines: tuple[Line, ...] = reduce(
        lambda acc, word: _pack_word(acc, word, max_line_length),
        text.split(" "),
        (),
    )
    return [" ".join(line) for line in lines]


def line_split(text: str, max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> str:
    """Wrap ``text`` and join the resulting lines with newlines."""
    return "\n".join(wrap(text, max_line_length))


def caption_text(subtitles: Iterable[HasContent], max_line_length: int = DEFAULT_MAX_LINE_LENGTH) -> str:
    """Compose a meme caption from subtitle contents.

    Contents are joined with a single space before wrapping.
    """
    return line_split(" ".join(subtitle.content for subtitle in subtitles), max_line_length)
