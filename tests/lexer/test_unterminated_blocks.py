"""Test unterminated constructs at EOF - content must not be lost."""

import pytest

from md0 import parse
from md0.tokens import Code, Paragraph


class TestUnterminatedFences:
    """Fences without a closing line."""

    def test_everything_after_opener_is_code(self) -> None:
        source = "intro\n```js\nlet a = 1;\n\n# not a heading\n---"
        assert parse(source) == [
            Paragraph(content="intro"),
            Code(language="js", content="let a = 1;\n\n# not a heading\n---\n"),
        ]

    @pytest.mark.parametrize("lines", [1, 5, 100])
    def test_line_count_preserved(self, lines: int) -> None:
        body = "\n".join(f"line {i}" for i in range(lines))
        (code,) = parse("```\n" + body)
        assert isinstance(code, Code)
        assert code.content.count("\n") == lines

    def test_opener_on_last_line(self) -> None:
        assert parse("text\n```") == [Paragraph(content="text"), Code(language="", content="")]
