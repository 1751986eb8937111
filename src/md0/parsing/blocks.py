"""Block assembly for the md0 parser.

Turns classified lines into block tokens:
- ATX headings at the top level
- Paragraphs (lines joined with single spaces)
- Dash lines, which become a horizontal rule or a setext heading
- Fenced code blocks, captured verbatim
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from md0.lines import Line, LineType
from md0.parsing.links import extract_metadata
from md0.tokens import Code, Heading, HorizontalRule, Paragraph, Token

if TYPE_CHECKING:
    from md0.config import ParseConfig


class BlockParsingMixin:
    """Mixin assembling block tokens from the line stream.

    Required Host Attributes:
        - _current: Line | None
        - _config: ParseConfig

    """

    _current: Line | None
    _config: ParseConfig

    def _at_end(self) -> bool:
        raise NotImplementedError

    def _advance(self) -> Line | None:
        raise NotImplementedError

    def _parse_block(self) -> list[Token]:
        """Parse blocks starting at the current line.

        Returns:
            Zero or more tokens; the current line is always consumed.
        """
        line = self._current
        assert line is not None

        if line.type == LineType.BLANK:
            self._advance()
            return []

        if line.type == LineType.ATX_HEADING:
            self._advance()
            return [Heading(level=line.level, content=line.text)]  # type: ignore[arg-type]

        return self._parse_paragraph_run()

    def _parse_paragraph_run(self) -> list[Token]:
        """Collect lines into a paragraph until something ends it.

        A blank line ends the paragraph. A dash line turns into a horizontal
        rule (nothing collected) or a setext heading made of the last
        collected line. A fence start ends the paragraph and opens a code
        block.
        """
        tokens: list[Token] = []
        buffer: list[str] = []

        while not self._at_end():
            line = self._current
            assert line is not None

            if line.type == LineType.BLANK:
                self._advance()
                break

            if line.type == LineType.DASH_LINE:
                self._advance()
                if not buffer:
                    tokens.append(HorizontalRule())
                    return tokens
                heading = buffer.pop()
                self._flush_paragraph(buffer, tokens)
                tokens.append(Heading(level=1, content=heading.strip()))
                return tokens

            if line.type == LineType.FENCE_START:
                self._flush_paragraph(buffer, tokens)
                tokens.append(self._parse_fenced_code())
                return tokens

            # ATX headings do not interrupt a paragraph
            buffer.append(line.value)
            self._advance()

        self._flush_paragraph(buffer, tokens)
        return tokens

    def _flush_paragraph(self, buffer: list[str], tokens: list[Token]) -> None:
        """Emit buffered lines as one Paragraph and clear the buffer."""
        if not buffer:
            return
        content = " ".join(buffer)
        buffer.clear()
        metadata = extract_metadata(content) if self._config.collect_metadata else ()
        tokens.append(Paragraph(content=content, metadata=metadata))

    def _parse_fenced_code(self) -> Code:
        """Parse a fenced code block starting at the FENCE_START line.

        An unterminated fence takes every remaining line as content.
        """
        start = self._current
        assert start is not None
        language = start.text

        parts: list[str] = []
        line = self._advance()
        while line is not None and line.type == LineType.FENCE_CONTENT:
            parts.append(line.value)
            line = self._advance()

        if line is not None and line.type == LineType.FENCE_END:
            self._advance()

        return Code(language=language, content="".join(parts))
