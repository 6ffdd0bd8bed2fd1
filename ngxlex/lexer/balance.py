"""
Brace balance validation over a token stream.
"""

from collections.abc import Iterable

from .tokens import ErrorKind, LexError, LexResult, Token


UNEXPECTED_CLOSING_BRACE = "unexpected '}'"
UNTERMINATED_BLOCK = "unexpected end of file, expecting '}'"


def balance_braces(tokens: Iterable[Token]) -> LexResult:
    """
    Check that unquoted braces nest properly.

    Returns:
        LexResult with all tokens and no error when balanced.
        An empty LexResult with UNEXPECTED_CLOSING_BRACE at the first '}'
        that has no matching '{'.
        All tokens plus UNTERMINATED_BLOCK, at the line of the last token,
        when input ends with blocks still open.
    """
    balanced: list[Token] = []
    depth = 0
    line = 0

    for token in tokens:
        line = token.line

        if not token.is_quoted:
            if token.value == "}":
                depth -= 1
            elif token.value == "{":
                depth += 1

        if depth < 0:
            return LexResult(
                error=LexError(ErrorKind.UNEXPECTED_CLOSING_BRACE, UNEXPECTED_CLOSING_BRACE, line),
            )

        balanced.append(token)

    if depth > 0:
        return LexResult(
            tokens=balanced,
            error=LexError(ErrorKind.UNTERMINATED_BLOCK, UNTERMINATED_BLOCK, line),
        )

    return LexResult(tokens=balanced)
