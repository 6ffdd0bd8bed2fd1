"""
Token and error types produced by the lexer pipeline.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum, auto


class TokenType(Enum):
    """Token types for nginx-style config text."""

    # Content
    WORD = auto()          # unquoted word, e.g. listen, 127.0.0.1:8080
    STRING = auto()        # "quoted" or 'quoted' content
    COMMENT = auto()       # # to end of line

    # Structural
    LBRACE = auto()        # {
    RBRACE = auto()        # }
    SEMICOLON = auto()     # ;


STRUCTURAL_TYPES = {
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
    ";": TokenType.SEMICOLON,
}


@dataclass
class Token:
    """A single token from the lexer."""

    value: str
    line: int
    is_quoted: bool = False
    type: TokenType = TokenType.WORD

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, line={self.line})"


class ErrorKind(Enum):
    """Structural faults reported alongside the token list."""

    UNEXPECTED_CLOSING_BRACE = auto()
    UNTERMINATED_BLOCK = auto()
    UNTERMINATED_STRING = auto()


@dataclass(frozen=True)
class LexError:
    """A structural fault: what went wrong and where."""

    kind: ErrorKind
    message: str
    line: int

    def __str__(self) -> str:
        return f"Line {self.line}: {self.message}"


class LexerError(Exception):
    """Exception raised by LexResult.raise_for_error()."""

    def __init__(self, message: str, line: int, kind: ErrorKind):
        self.line = line
        self.kind = kind
        super().__init__(f"Line {line}: {message}")


@dataclass
class LexResult:
    """
    Outcome of a full lex: the tokens plus an optional structural error.

    On UNEXPECTED_CLOSING_BRACE the token list is empty. On UNTERMINATED_BLOCK
    and UNTERMINATED_STRING the tokens preceding the fault are kept.
    """

    tokens: list[Token] = field(default_factory=list)
    error: LexError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        """Raise LexerError if the lex found a structural fault."""
        if self.error is not None:
            raise LexerError(self.error.message, self.error.line, self.error.kind)

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)
