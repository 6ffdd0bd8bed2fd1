"""
Tokenizer (core state machine) for nginx-style configuration syntax.

Turns line-annotated units into tokens:
- Words separated by whitespace
- Quoted strings ("..." or '...'), where only the delimiter can be escaped
- Comments from # to end of line
- Structural tokens {, } and ;
- ${...} parameter expansions kept intact inside a word
"""

from collections.abc import Iterable, Iterator

from .chars import AnnotatedChar
from .tokens import STRUCTURAL_TYPES, Token, TokenType


# str.isspace() accepts these, Unicode White_Space does not
INFORMATION_SEPARATORS = "\x1c\x1d\x1e\x1f"


def _is_space(char: str) -> bool:
    return char.isspace() and char not in INFORMATION_SEPARATORS


class Tokenizer:
    """
    Single-pass tokenizer over annotated units.

    Example input:
        http {
            server {
                listen 127.0.0.1:8080;
                return 200 "foo bar baz";  # reply
            }
        }

    The tokenizer never fails. A quoted string still open at end of input is
    emitted as-is and also stored in `unterminated` so callers can reject it.
    """

    QUOTES = ('"', "'")

    def __init__(self, chars: Iterable[AnnotatedChar]):
        self._chars = iter(chars)
        self._pending: list[str] = []
        self._pending_line = 0
        self.unterminated: Token | None = None
        self.unterminated_quote: str | None = None

    def _flush(self) -> Token | None:
        """Return the pending word as a token and reset the buffer."""
        if not self._pending:
            return None

        token = Token(value="".join(self._pending), line=self._pending_line)
        self._pending.clear()
        return token

    def _read_comment(self, start: AnnotatedChar) -> Token:
        """Read a comment up to, not including, the next newline."""
        parts = [start.char]
        for unit in self._chars:
            if unit.char == "\n":
                break
            parts.append(unit.char)

        return Token(
            value="".join(parts),
            line=start.line,
            type=TokenType.COMMENT,
        )

    def _read_expansion(self) -> None:
        """Append a ${...} body to the pending word, up to and including the first unit ending in '}'."""
        self._pending.append("{")
        for unit in self._chars:
            self._pending.append(unit.char)
            if unit.char.endswith("}"):
                break

    def _read_string(self, start: AnnotatedChar) -> Token:
        """Read a quoted string; the opening quote is start."""
        quote = start.char
        escaped_quote = "\\" + quote
        parts: list[str] = []
        terminated = False

        for unit in self._chars:
            if unit.char == quote:
                terminated = True
                break

            if unit.char == escaped_quote:
                parts.append(quote)
            else:
                parts.append(unit.char)

        token = Token(
            value="".join(parts),
            line=start.line,
            is_quoted=True,
            type=TokenType.STRING,
        )
        if not terminated:
            self.unterminated = token
            self.unterminated_quote = quote
        return token

    def tokenize(self) -> Iterator[Token]:
        """Generate all tokens from the annotated units."""
        for unit in self._chars:
            char = unit.char

            # Runs of whitespace end the pending word and produce nothing else
            if _is_space(char):
                token = self._flush()
                if token:
                    yield token
                continue

            if not self._pending and char == "#":
                yield self._read_comment(unit)
                continue

            # A buffer ending in the escaped pair \$ counts too
            if self._pending and self._pending[-1].endswith("$") and char == "{":
                self._read_expansion()
                continue

            # Quotes only open a string at a token boundary
            if not self._pending and char in self.QUOTES:
                yield self._read_string(unit)
                continue

            if char in STRUCTURAL_TYPES:
                token = self._flush()
                if token:
                    yield token
                yield Token(value=char, line=unit.line, type=STRUCTURAL_TYPES[char])
                continue

            if not self._pending:
                self._pending_line = unit.line
            self._pending.append(char)

        token = self._flush()
        if token:
            yield token

    def __iter__(self) -> Iterator[Token]:
        """Allow iteration over tokens."""
        return self.tokenize()
