"""
Lexer options.
"""

from dataclasses import dataclass

from ..const import DEFAULT_CHUNK_SIZE, DEFAULT_ENCODING


@dataclass
class LexerOptions:
    """Options controlling a single lex run."""

    # Reject a quoted string left open at end of input
    strict_strings: bool = False

    # Characters read per call when the source is a stream
    chunk_size: int = DEFAULT_CHUNK_SIZE

    # Used by lex_file() when opening the source
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if self.chunk_size < 1:
            raise ValueError(f"chunk_size must be positive, got {self.chunk_size}")
