"""
Lexer for nginx-style configuration syntax.
"""

from .balance import balance_braces
from .chars import AnnotatedChar, annotate_lines, iter_chars, normalize_continuations
from .lexer import iter_tokens, lex, tokenize
from .loader import SourceError, lex_file
from .options import LexerOptions
from .tokenizer import Tokenizer
from .tokens import ErrorKind, LexError, LexerError, LexResult, Token, TokenType

__all__ = [
    "AnnotatedChar",
    "ErrorKind",
    "LexError",
    "LexerError",
    "LexerOptions",
    "LexResult",
    "SourceError",
    "Token",
    "TokenType",
    "Tokenizer",
    "annotate_lines",
    "balance_braces",
    "iter_chars",
    "iter_tokens",
    "lex",
    "lex_file",
    "normalize_continuations",
    "tokenize",
]
