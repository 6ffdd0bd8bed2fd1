"""
Tests for the character-level pipeline stages.
"""

import io

from ngxlex.lexer.chars import AnnotatedChar, annotate_lines, iter_chars, normalize_continuations


def _normalize(text: str) -> list[str]:
    return list(normalize_continuations(text))


class TestIterChars:
    def test_string_source(self) -> None:
        assert list(iter_chars("ab\n")) == ["a", "b", "\n"]

    def test_stream_is_read_in_chunks(self) -> None:
        stream = io.StringIO("listen 80;")
        assert "".join(iter_chars(stream, chunk_size=3)) == "listen 80;"

    def test_empty_stream(self) -> None:
        assert list(iter_chars(io.StringIO(""))) == []


class TestNormalizeContinuations:
    def test_plain_characters_pass_through(self) -> None:
        assert _normalize("a b;") == ["a", " ", "b", ";"]

    def test_carriage_returns_are_dropped(self) -> None:
        assert _normalize("a\r\nb\r") == ["a", "\n", "b"]

    def test_backslash_newline_is_removed(self) -> None:
        assert _normalize("ab\\\ncd") == ["a", "b", "c", "d"]

    def test_backslash_crlf_is_a_continuation(self) -> None:
        assert _normalize("ab\\\r\ncd") == ["a", "b", "c", "d"]

    def test_backslash_pair_is_one_unit(self) -> None:
        assert _normalize("\\{x") == ["\\{", "x"]

    def test_double_backslash_is_one_unit(self) -> None:
        # The second backslash is consumed, so the newline survives
        assert _normalize("\\\\\n") == ["\\\\", "\n"]

    def test_escaped_quote_is_not_decoded(self) -> None:
        assert _normalize('\\"') == ['\\"']

    def test_trailing_backslash_is_kept(self) -> None:
        assert _normalize("a\\") == ["a", "\\"]

    def test_trailing_backslash_after_carriage_return(self) -> None:
        assert _normalize("a\\\r") == ["a", "\\"]

    def test_restartable_on_same_source(self) -> None:
        source = "x\\\ny"
        assert _normalize(source) == _normalize(source)


class TestAnnotateLines:
    def test_first_line_is_one(self) -> None:
        assert list(annotate_lines("ab")) == [AnnotatedChar("a", 1), AnnotatedChar("b", 1)]

    def test_newline_belongs_to_the_line_it_ends(self) -> None:
        assert list(annotate_lines("a\nb")) == [
            AnnotatedChar("a", 1),
            AnnotatedChar("\n", 1),
            AnnotatedChar("b", 2),
        ]

    def test_blank_lines_are_counted(self) -> None:
        annotated = list(annotate_lines("\n\n\nx"))
        assert annotated[-1] == AnnotatedChar("x", 4)

    def test_continued_lines_share_a_number(self) -> None:
        annotated = list(annotate_lines(normalize_continuations("a\\\nb\nc")))
        assert annotated == [
            AnnotatedChar("a", 1),
            AnnotatedChar("b", 1),
            AnnotatedChar("\n", 1),
            AnnotatedChar("c", 2),
        ]

    def test_pair_units_are_annotated_whole(self) -> None:
        annotated = list(annotate_lines(["\\n", "\n", "x"]))
        assert annotated == [
            AnnotatedChar("\\n", 1),
            AnnotatedChar("\n", 1),
            AnnotatedChar("x", 2),
        ]
