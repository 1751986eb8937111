"""Fenced code block classifier mixin."""

from md0.lexer.modes import LexerMode
from md0.lines import Line, LineType
from md0.parsing.charsets import FENCE, FENCE_INFO_PUNCTUATION


class FenceClassifierMixin:
    """Mixin providing fenced code block classification."""

    # These will be set by the Lexer class
    _fence_info: str
    _mode: LexerMode

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

    def _try_classify_fence_start(self, line: str) -> Line | None:
        """Try to classify line as fenced code start.

        A fence opens with exactly three backticks at column 1, an optional
        language tag of alphanumerics, ``+``, ``-`` or ``_``, and optional
        trailing whitespace.

        Args:
            line: Raw line (no trailing newline)

        Returns:
            Line if valid fence, None otherwise.
        """
        if not line.startswith(FENCE):
            return None

        info = line[len(FENCE) :].rstrip()
        for char in info:
            if not (char.isalnum() or char in FENCE_INFO_PUNCTUATION):
                return None

        # Valid fence - update state
        self._fence_info = info
        self._mode = LexerMode.CODE_FENCE

        return self._make_line(LineType.FENCE_START, line, text=info)

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line closes the current code block.

        The closing line is exactly three backticks once surrounding
        whitespace is removed.

        Args:
            line: Raw line (no trailing newline)

        Returns:
            True if this is a closing fence.
        """
        return line.strip() == FENCE
