"""
Character-level stages of the lexer pipeline.

- iter_chars: read a string or text stream one character at a time
- normalize_continuations: drop carriage returns and backslash-newline pairs
- annotate_lines: tag every unit with its 1-based source line

Each stage is a generator over the previous one, so a whole file never has to
be held in memory.
"""

from collections.abc import Iterable, Iterator
from typing import NamedTuple, TextIO

from ..const import DEFAULT_CHUNK_SIZE


class AnnotatedChar(NamedTuple):
    """A lexical unit and the line it was read from."""

    char: str  # one character, or a backslash pair such as "\\{"
    line: int


def iter_chars(source: str | TextIO, chunk_size: int = DEFAULT_CHUNK_SIZE) -> Iterator[str]:
    """
    Yield the characters of a string or readable text stream.

    Streams are read in chunks of chunk_size characters.
    """
    if isinstance(source, str):
        yield from source
        return

    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        yield from chunk


def normalize_continuations(chars: Iterable[str]) -> Iterator[str]:
    """
    Collapse line continuations and group backslash pairs.

    - "\\r" is dropped wherever it appears
    - "\\" followed by "\\n" is dropped entirely
    - "\\" followed by anything else is yielded as one two-character unit
    - a trailing lone "\\" is yielded as-is
    """
    it = iter(chars)

    for char in it:
        if char == "\r":
            continue

        if char != "\\":
            yield char
            continue

        escaped = next(it, None)
        while escaped == "\r":
            escaped = next(it, None)

        if escaped is None:
            yield char
            return

        if escaped == "\n":
            continue

        yield char + escaped


def annotate_lines(units: Iterable[str]) -> Iterator[AnnotatedChar]:
    """
    Attach a line number to each unit.

    A newline belongs to the line it ends; the counter moves on afterwards.
    """
    line = 1
    for unit in units:
        yield AnnotatedChar(unit, line)
        if unit == "\n":
            line += 1
