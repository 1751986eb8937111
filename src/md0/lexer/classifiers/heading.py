"""ATX heading classifier mixin."""

from md0.lines import Line, LineType
from md0.parsing.charsets import HEADING_MARKER, MAX_HEADING_LEVEL


class HeadingClassifierMixin:
    """Mixin providing ATX heading classification."""

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

    def _try_classify_atx_heading(self, line: str) -> Line | None:
        """Try to classify line as ATX heading.

        ATX headings start at column 1 with 1-6 # characters, followed by at
        least one whitespace character and at least one more character.
        Seven or more # never form a heading.

        Args:
            line: Raw line (no trailing newline)

        Returns:
            Line if valid heading, None otherwise.
        """
        level = 0
        line_len = len(line)
        while level < line_len and line[level] == HEADING_MARKER:
            level += 1

        if level == 0 or level > MAX_HEADING_LEVEL:
            return None

        rest = line[level:]
        # Whitespace separator plus at least one character of content
        if len(rest) < 2 or not rest[0].isspace():
            return None

        return self._make_line(LineType.ATX_HEADING, line, level=level, text=rest.strip())
