"""Dash line classifier mixin."""

from __future__ import annotations

from md0.lines import Line, LineType
from md0.parsing.charsets import DASH, DASH_LINE_PREFIX


class DashClassifierMixin:
    """Mixin providing dash line classification.

    A dash line is either a horizontal rule or a setext heading underline;
    the parser decides which from what precedes it.

    """

    def _make_line(
        self,
        line_type: LineType,
        value: str,
        *,
        level: int = 0,
        text: str = "",
    ) -> Line:
        """Create line token at the current line number. Implemented by Lexer."""
        raise NotImplementedError

    def _try_classify_dash_line(self, line: str) -> Line | None:
        """Try to classify line as a dash line.

        Three or more dashes and nothing else; no surrounding whitespace.

        Args:
            line: Raw line (no trailing newline)

        Returns:
            Line if valid dash line, None otherwise.
        """
        if not line.startswith(DASH_LINE_PREFIX):
            return None

        if line.strip(DASH):
            return None

        return self._make_line(LineType.DASH_LINE, line)
