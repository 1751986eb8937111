"""Single-pass block parser producing typed tokens.

Consumes the line stream from Lexer and assembles block tokens.
Produces immutable (frozen) dataclass tokens for thread-safety.

Architecture:
The parser uses a mixin-based design for separation of concerns:
- `LineNavigationMixin`: Line stream traversal
- `BlockParsingMixin`: Paragraphs, headings, rules and fenced code

Thread Safety:
- Parser produces immutable tokens (frozen dataclasses)
- Configuration is read from ContextVar (thread-local)
- Safe to share the resulting tokens across threads

"""

from __future__ import annotations

from md0.config import ParseConfig, get_parse_config
from md0.lexer import Lexer
from md0.lines import Line
from md0.parsing import BlockParsingMixin, LineNavigationMixin
from md0.tokens import Token
from md0.utils.logger import get_logger

logger = get_logger(__name__)


class Parser(
    LineNavigationMixin,
    BlockParsingMixin,
):
    """Line-oriented parser for Markdown.

    Consumes lines from Lexer and builds the token list.

    Usage:
            >>> parser = Parser("# Hello\n\nWorld")
            >>> parser.parse()
        [Heading(1, "Hello"), Paragraph("World", [])]

    Thread Safety:
        Parser instances are single-use and not thread-safe. Create one per
        parse operation. Configuration is read from ContextVar (thread-local).
        The resulting tokens are immutable and thread-safe.

    """

    __slots__ = (
        "_source",
        "_lines",
        "_lines_len",
        "_pos",
        "_current",
    )

    def __init__(self, source: str) -> None:
        """Initialize parser with source text.

        Configuration is read from ContextVar, not passed as parameters.
        Use set_parse_config() or parse_config_context() before creating
        a Parser if you need non-default configuration.

        Args:
            source: Markdown source text

        """
        self._source = source
        self._lines: list[Line] = []
        self._lines_len = 0
        self._pos = 0
        self._current: Line | None = None

    @property
    def _config(self) -> ParseConfig:
        """Get current parse configuration (thread-local)."""
        return get_parse_config()

    def parse(self) -> list[Token]:
        """Parse source into block tokens.

        Never raises for any input string; empty input yields an empty list.

        Returns:
            Tokens in document order
        """
        config = self._config
        lexer = Lexer(self._source, trace=config.trace_lines)
        self._lines = list(lexer.tokenize())
        self._lines_len = len(self._lines)
        self._pos = 0
        self._current = self._lines[0] if self._lines else None

        tokens: list[Token] = []
        while not self._at_end():
            tokens.extend(self._parse_block())

        if config.trace_lines:
            logger.debug("parsed %d lines into %d tokens", self._lines_len - 1, len(tokens))

        return tokens
