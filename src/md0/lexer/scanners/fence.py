"""Fenced code mode scanner mixin."""

from md0.lexer.modes import LexerMode
from md0.lines import Line, LineType


class FenceScannerMixin:
    """Mixin providing fenced code mode scanning logic.

    Passes lines through verbatim until the closing fence.

    """

    # These will be set by the Lexer class
    _mode: LexerMode
    _fence_info: str

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

    def _is_closing_fence(self, line: str) -> bool:
        """Check if line is a closing fence. Implemented by FenceClassifierMixin."""
        raise NotImplementedError

    def _scan_code_fence_content(self, line: str) -> Line:
        """Classify a line inside fenced code.

        Returns:
            FENCE_END for the closing fence, otherwise FENCE_CONTENT with the
            line's newline restored.
        """
        if self._is_closing_fence(line):
            self._mode = LexerMode.BLOCK
            self._fence_info = ""
            return self._make_line(LineType.FENCE_END, line)

        return self._make_line(LineType.FENCE_CONTENT, line + "\n")
