"""
Entry point for ngxlex.

Usage:
    python -m ngxlex /etc/nginx/nginx.conf
    cat nginx.conf | python -m ngxlex --json
    python -m ngxlex --help
"""

import argparse
import json
import sys

from . import __version__
from .const import APP_NAME
from .lexer import LexerOptions, LexResult, SourceError, Token, TokenType, lex, lex_file
from .logging import LogConfig, get_logger, setup_logging


logger = get_logger("cli")


def token_to_dict(token: Token) -> dict:
    """Convert a token to a JSON-friendly dict."""
    return {
        "value": token.value,
        "line": token.line,
        "is_quoted": token.is_quoted,
        "type": token.type.name,
    }


def format_token(token: Token) -> str:
    """Format a token as a single tab-separated output line."""
    return f"{token.line}\t{token.type.name}\t{token.value!r}"


def print_result(result: LexResult, source_name: str, as_json: bool, comments: bool) -> int:
    """Print tokens (and any error) and return the exit status."""
    tokens = [t for t in result.tokens if comments or t.type != TokenType.COMMENT]

    if as_json:
        output: dict = {"tokens": [token_to_dict(t) for t in tokens]}
        if result.error is not None:
            output["error"] = {
                "kind": result.error.kind.name,
                "message": result.error.message,
                "line": result.error.line,
            }
        print(json.dumps(output, indent=2, ensure_ascii=False))
    else:
        for token in tokens:
            print(format_token(token))

    if result.error is not None:
        print(f"{source_name}:{result.error.line}: {result.error.message}", file=sys.stderr)
        return 1

    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Tokenize nginx-style configuration files",
    )

    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Path to configuration file, or '-' for stdin (default: -)",
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print tokens as JSON",
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Treat an unterminated quoted string as an error",
    )

    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Omit comment tokens from the output",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    log_config = LogConfig()

    if args.debug:
        log_config.console_level = "debug"
    elif args.verbose:
        log_config.console_level = "info"
    elif args.quiet:
        log_config.console_level = "error"
    else:
        log_config.console_level = "warning"

    if args.no_color:
        log_config.console_colors = False

    if args.log_file:
        log_config.log_file = args.log_file

    setup_logging(log_config)

    options = LexerOptions(strict_strings=args.strict)

    if args.file == "-":
        source_name = "<stdin>"
        result = lex(sys.stdin, options)
    else:
        source_name = args.file
        try:
            result = lex_file(args.file, options)
        except SourceError as e:
            logger.error(str(e))
            return 1

    logger.info(f"{source_name}: {len(result.tokens)} tokens")

    return print_result(result, source_name, args.json, not args.no_comments)


if __name__ == "__main__":
    sys.exit(main())
