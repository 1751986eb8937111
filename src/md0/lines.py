"""Line and LineType definitions for the md0 lexer.

The lexer classifies each physical line of the source and yields a stream
of Line objects that the parser assembles into block tokens.

Thread Safety:
Line is frozen (immutable) and safe to share across threads.
LineType is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum, auto


class LineType(Enum):
    """Line classifications produced by the lexer.

    Classification is context-free: the parser decides, for instance, that
    an ATX_HEADING line directly under paragraph text is paragraph text.

    """

    # Document structure
    EOF = auto()
    BLANK = auto()  # Empty or whitespace-only

    # Headings and rules
    ATX_HEADING = auto()  # # Heading
    DASH_LINE = auto()  # --- (horizontal rule or setext underline)

    # Fenced code
    FENCE_START = auto()  # ```lang
    FENCE_CONTENT = auto()  # Verbatim line inside a fence
    FENCE_END = auto()  # ```

    # Anything else
    TEXT = auto()


@dataclass(frozen=True, slots=True)
class Line:
    """A classified source line.

    Attributes:
        type: The line classification
        value: Raw line text (FENCE_CONTENT lines include their trailing newline)
        lineno: Line number (1-indexed)
        level: Heading level for ATX_HEADING lines, 0 otherwise
        text: Heading content for ATX_HEADING, language tag for FENCE_START,
            empty otherwise

    """

    type: LineType
    value: str
    lineno: int
    level: int = 0
    text: str = ""

    def __repr__(self) -> str:
        """Compact repr for debugging."""
        val = self.value
        if len(val) > 20:
            val = val[:17] + "..."
        return f"Line({self.type.name}, {val!r}, {self.lineno})"
