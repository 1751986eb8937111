"""Error-path and malformed input tests.

Malformed Markdown never raises; errors are reserved for misuse of the
library surface.
"""

import pytest

from md0 import parse, tokens_to_html
from md0.errors import ConfigError, Md0Error, RenderError
from md0.tokens import Code, HorizontalRule, Paragraph


class TestRenderError:
    """Verify RenderError formatting and hierarchy."""

    def test_message_with_index(self) -> None:
        err = RenderError("oops", index=3)
        assert "str" in str(err)
        assert "index 3" in str(err)

    def test_message_without_index(self) -> None:
        err = RenderError(None)
        assert str(err) == "Cannot render NoneType: not a token"

    def test_is_md0_error(self) -> None:
        assert isinstance(RenderError(1), Md0Error)

    def test_raised_by_tokens_to_html(self) -> None:
        with pytest.raises(RenderError):
            tokens_to_html(["<p>raw</p>"])  # type: ignore[list-item]


class TestConfigError:
    """Verify ConfigError formatting and hierarchy."""

    def test_format(self) -> None:
        err = ConfigError("trace_lines", "expected bool, got str")
        assert str(err) == "Config field 'trace_lines': expected bool, got str"

    def test_is_md0_error(self) -> None:
        assert isinstance(ConfigError("x", "y"), Md0Error)


class TestMalformedInput:
    """Unusual input degrades gracefully."""

    @pytest.mark.parametrize(
        "source",
        [
            "```",
            "```\n",
            "[",
            "![",
            "](",
            "[a](",
            "![a](b",
            "#",
            "#######",
            "-",
            "--",
            "\n\n\n",
            "\r\n\r\n",
            "\x00",
            "\t",
        ],
    )
    def test_never_raises(self, source: str) -> None:
        tokens = parse(source)
        tokens_to_html(tokens)

    def test_lone_fence(self) -> None:
        assert parse("```") == [Code(language="", content="")]

    def test_unclosed_brackets_in_paragraph(self) -> None:
        assert parse("[a](b") == [Paragraph(content="[a](b")]

    def test_rule_only_document(self) -> None:
        assert parse("---\n\n---") == [HorizontalRule(), HorizontalRule()]
