"""
Lexer entry points for nginx-style configuration text.

The pipeline is a chain of generators:

    iter_chars -> normalize_continuations -> annotate_lines -> Tokenizer
        -> balance_braces

iter_tokens() stops before brace validation and stays lazy; lex() runs the
whole chain and returns a LexResult.
"""

from collections.abc import Iterator
from typing import TextIO

from ..logging import get_logger
from .balance import balance_braces
from .chars import annotate_lines, iter_chars, normalize_continuations
from .options import LexerOptions
from .tokenizer import Tokenizer
from .tokens import ErrorKind, LexError, LexResult, Token


logger = get_logger("lexer")


def _tokenizer(source: str | TextIO, options: LexerOptions) -> Tokenizer:
    chars = iter_chars(source, options.chunk_size)
    return Tokenizer(annotate_lines(normalize_continuations(chars)))


def iter_tokens(source: str | TextIO, options: LexerOptions | None = None) -> Iterator[Token]:
    """
    Lazily tokenize a source without validating brace nesting.

    Args:
        source: Configuration text or a readable text stream
        options: Lexer options (defaults if None)

    Returns:
        Iterator over tokens in source order
    """
    if options is None:
        options = LexerOptions()
    return _tokenizer(source, options).tokenize()


def lex(source: str | TextIO, options: LexerOptions | None = None) -> LexResult:
    """
    Tokenize a source and validate brace nesting.

    Structural faults are reported on LexResult.error, never raised.

    Args:
        source: Configuration text or a readable text stream
        options: Lexer options (defaults if None)

    Returns:
        LexResult with the tokens and an optional error
    """
    if options is None:
        options = LexerOptions()

    tokenizer = _tokenizer(source, options)
    result = balance_braces(tokenizer)

    # balance_braces stops early on a stray '}', before any open string is seen
    if tokenizer.unterminated is not None:
        opened = tokenizer.unterminated
        if options.strict_strings:
            # An open string swallows the rest of the input, so it is always last
            result = LexResult(
                tokens=result.tokens[:-1],
                error=LexError(
                    ErrorKind.UNTERMINATED_STRING,
                    f"unexpected end of file, expecting '{tokenizer.unterminated_quote}'",
                    opened.line,
                ),
            )
        else:
            logger.warning(f"Line {opened.line}: quoted string is not terminated before end of file")

    if result.error is not None:
        logger.debug(f"Lex failed: {result.error}")
    else:
        logger.debug(f"Lexed {len(result.tokens)} tokens")

    return result


def tokenize(source: str, options: LexerOptions | None = None) -> list[Token]:
    """Convenience function to tokenize a source string without validation."""
    return list(iter_tokens(source, options))
