"""
File loading for the lexer.
"""

from pathlib import Path

from ..logging import get_logger
from .lexer import lex
from .options import LexerOptions
from .tokens import LexResult


logger = get_logger("lexer")


class SourceError(Exception):
    """Exception raised when a source file cannot be read."""

    pass


def lex_file(path: str | Path, options: LexerOptions | None = None) -> LexResult:
    """
    Lex a configuration file.

    The file is streamed through the lexer in chunks rather than read whole.

    Args:
        path: Path to the configuration file
        options: Lexer options (defaults if None)

    Returns:
        LexResult for the file contents

    Raises:
        SourceError: If the file is missing, not a file, or cannot be decoded
    """
    if options is None:
        options = LexerOptions()

    path = Path(path)

    if not path.exists():
        raise SourceError(f"File not found: {path}")

    if not path.is_file():
        raise SourceError(f"Not a file: {path}")

    logger.debug(f"Lexing {path}")

    try:
        with path.open(encoding=options.encoding, newline="") as stream:
            return lex(stream, options)
    except UnicodeDecodeError as e:
        raise SourceError(f"Cannot decode {path} as {options.encoding}: {e}") from e
    except OSError as e:
        raise SourceError(f"Failed to read {path}: {e}") from e
