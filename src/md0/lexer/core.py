"""Line-classifying lexer with O(n) guaranteed performance.

Splits the source into physical lines once, then classifies each line in
a single forward pass. Every call to the scanner consumes exactly one line,
so the lexer always makes progress and never rewinds.

No regex anywhere. Zero ReDoS vulnerability by construction.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from md0.lexer.classifiers import (
    DashClassifierMixin,
    FenceClassifierMixin,
    HeadingClassifierMixin,
)
from md0.lexer.modes import LexerMode
from md0.lexer.scanners import (
    BlockScannerMixin,
    FenceScannerMixin,
)
from md0.lines import Line, LineType
from md0.utils.logger import get_logger

logger = get_logger(__name__)


class Lexer(
    # Classifiers (pure logic, no position mutation)
    HeadingClassifierMixin,
    FenceClassifierMixin,
    DashClassifierMixin,
    # Scanners (mode-specific scanning logic)
    BlockScannerMixin,
    FenceScannerMixin,
):
    """Line-classifying lexer.

    Usage:
            >>> lexer = Lexer("# Hello\n\nWorld")
            >>> for line in lexer.tokenize():
            ...     print(line)
        Line(ATX_HEADING, '# Hello', 1)
        Line(BLANK, '', 2)
        Line(TEXT, 'World', 3)
        Line(EOF, '', 3)

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_lines",
        "_index",
        "_mode",
        "_fence_info",  # Language tag of the open fence
        "_trace",
    )

    def __init__(self, source: str, *, trace: bool = False) -> None:
        """Initialize lexer with source text.

        Args:
            source: Markdown source text
            trace: Log each classified line at DEBUG level
        """
        self._lines = source.split("\n")
        self._index = 0
        self._mode = LexerMode.BLOCK
        self._fence_info: str = ""
        self._trace = trace

    def tokenize(self) -> Iterator[Line]:
        """Tokenize source into a stream of classified lines.

        Yields:
            One Line per physical line, then a single EOF

        Complexity: O(n) where n = len(source)
        """
        lines = self._lines
        line_count = len(lines)
        while self._index < line_count:
            line = self._dispatch_mode(lines[self._index])
            if self._trace:
                logger.debug("line %d %s %r", line.lineno, line.type.name, line.value)
            yield line
            self._index += 1

        yield Line(LineType.EOF, "", max(line_count, 1))

    def _dispatch_mode(self, line: str) -> Line:
        """Dispatch to appropriate scanner based on current mode."""
        if self._mode == LexerMode.CODE_FENCE:
            return self._scan_code_fence_content(line)
        return self._scan_block(line)

    def _make_line(
        self,
        line_type: LineType,
        value: str,
        *,
        level: int = 0,
        text: str = "",
    ) -> Line:
        """Create a Line at the current line number.

        Args:
            line_type: The line classification.
            value: The raw line value.
            level: Heading level (ATX_HEADING only).
            text: Heading content or fence language.

        Returns:
            Line for the line under the cursor.
        """
        return Line(
            type=line_type,
            value=value,
            lineno=self._index + 1,
            level=level,
            text=text,
        )
