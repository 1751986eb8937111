"""Tests for line classification in the Lexer."""

import pytest

from md0.lexer import Lexer, LexerMode
from md0.lines import Line, LineType


def _types(source: str) -> list[LineType]:
    return [line.type for line in Lexer(source).tokenize()]


class TestClassification:
    """One line at a time."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("", LineType.BLANK),
            ("   ", LineType.BLANK),
            ("\t", LineType.BLANK),
            ("# Heading", LineType.ATX_HEADING),
            ("###### Six", LineType.ATX_HEADING),
            ("####### Seven", LineType.TEXT),
            ("#Tight", LineType.TEXT),
            ("---", LineType.DASH_LINE),
            ("-----", LineType.DASH_LINE),
            ("--", LineType.TEXT),
            ("--- ", LineType.TEXT),
            (" ---", LineType.TEXT),
            ("```", LineType.FENCE_START),
            ("```python", LineType.FENCE_START),
            ("```c++  ", LineType.FENCE_START),
            ("```py thon", LineType.TEXT),
            ("````", LineType.TEXT),
            ("plain", LineType.TEXT),
        ],
    )
    def test_first_line(self, source: str, expected: LineType) -> None:
        assert _types(source)[0] == expected

    def test_heading_fields(self) -> None:
        (line, _eof) = Lexer("### Title  ").tokenize()
        assert line.level == 3
        assert line.text == "Title"
        assert line.value == "### Title  "

    def test_fence_language(self) -> None:
        (start, _eof) = Lexer("```rust").tokenize()
        assert start.type == LineType.FENCE_START
        assert start.text == "rust"


class TestStream:
    """Whole-source behavior."""

    def test_ends_with_single_eof(self) -> None:
        lines = list(Lexer("a\nb").tokenize())
        assert lines[-1].type == LineType.EOF
        assert sum(1 for line in lines if line.type == LineType.EOF) == 1

    def test_line_numbers(self) -> None:
        lines = list(Lexer("a\n\nb").tokenize())
        assert [line.lineno for line in lines] == [1, 2, 3, 3]

    def test_fence_mode_passes_lines_through(self) -> None:
        assert _types("```\n# not heading\n---\n\n```\n# heading") == [
            LineType.FENCE_START,
            LineType.FENCE_CONTENT,
            LineType.FENCE_CONTENT,
            LineType.FENCE_CONTENT,
            LineType.FENCE_END,
            LineType.ATX_HEADING,
            LineType.EOF,
        ]

    def test_fence_content_keeps_newline(self) -> None:
        lines = list(Lexer("```\n  x  \n```").tokenize())
        assert lines[1] == Line(LineType.FENCE_CONTENT, "  x  \n", 2)

    def test_unterminated_fence_stays_in_fence_mode(self) -> None:
        lexer = Lexer("```\n# a")
        types = [line.type for line in lexer.tokenize()]
        assert types == [LineType.FENCE_START, LineType.FENCE_CONTENT, LineType.EOF]
        assert lexer._mode == LexerMode.CODE_FENCE

    def test_closing_fence_returns_to_block_mode(self) -> None:
        lexer = Lexer("```\n```")
        list(lexer.tokenize())
        assert lexer._mode == LexerMode.BLOCK

    def test_repr_is_compact(self) -> None:
        (line, _eof) = Lexer("x" * 40).tokenize()
        assert repr(line) == f"Line(TEXT, '{'x' * 17}...', 1)"
