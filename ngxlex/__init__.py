"""
ngxlex - lexical scanner for nginx-style configuration files.
"""

from .const import APP_VERSION
from .lexer import (
    ErrorKind,
    LexError,
    LexerError,
    LexerOptions,
    LexResult,
    SourceError,
    Token,
    TokenType,
    iter_tokens,
    lex,
    lex_file,
)

__version__ = APP_VERSION

__all__ = [
    "ErrorKind",
    "LexError",
    "LexerError",
    "LexerOptions",
    "LexResult",
    "SourceError",
    "Token",
    "TokenType",
    "__version__",
    "iter_tokens",
    "lex",
    "lex_file",
]
