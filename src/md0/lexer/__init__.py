"""Line-classifying lexer for the md0 Markdown tokenizer.

This package provides a lexer with O(n) guaranteed performance.
The lexer splits the source into lines and classifies each one.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer, LexerMode
├── core.py              # Lexer class (mixin composition + line cursor)
├── modes.py             # LexerMode enum
├── classifiers/         # Line classification mixins
│   ├── heading.py       # ATX heading
│   ├── fence.py         # Fenced code open/close
│   └── dash.py          # Dash line (rule or setext underline)
└── scanners/            # Mode-specific scanners
    ├── block.py         # Block mode (main dispatch)
    └── fence.py         # Code fence mode

Usage:
    >>> from md0.lexer import Lexer
    >>> lexer = Lexer("# Hello\n\nWorld")
    >>> for line in lexer.tokenize():
    ...     print(line)
Line(ATX_HEADING, '# Hello', 1)
Line(BLANK, '', 2)
Line(TEXT, 'World', 3)
Line(EOF, '', 3)

"""

from md0.lexer.core import Lexer
from md0.lexer.modes import LexerMode

__all__ = ["Lexer", "LexerMode"]
