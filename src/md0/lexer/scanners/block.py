"""Block mode scanner mixin."""

from __future__ import annotations

from md0.lines import Line, LineType
from md0.parsing.charsets import DASH, FENCE, HEADING_MARKER


class BlockScannerMixin:
    """Mixin providing block mode scanning logic.

    Classifies one line per call:
    1. Blank (empty or whitespace-only)
    2. Fence start, ATX heading or dash line, picked by the first character
    3. Anything else is TEXT

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

    # Classifier methods (provided by classifier mixins)
    def _try_classify_fence_start(self, line: str) -> Line | None:
        raise NotImplementedError

    def _try_classify_atx_heading(self, line: str) -> Line | None:
        raise NotImplementedError

    def _try_classify_dash_line(self, line: str) -> Line | None:
        raise NotImplementedError

    def _scan_block(self, line: str) -> Line:
        """Classify a line outside fenced code."""
        if not line or line.isspace():
            return self._make_line(LineType.BLANK, line)

        first = line[0]
        classified: Line | None = None
        if first == FENCE[0]:
            classified = self._try_classify_fence_start(line)
        elif first == HEADING_MARKER:
            classified = self._try_classify_atx_heading(line)
        elif first == DASH:
            classified = self._try_classify_dash_line(line)

        if classified is not None:
            return classified

        return self._make_line(LineType.TEXT, line)
