"""Parsing subsystem for the md0 tokenizer.

Provides mixin classes for modular parsing functionality:
- `LineNavigationMixin`: Line stream traversal
- `BlockParsingMixin`: Block assembly (paragraphs, headings, rules, code)

Inline metadata extraction lives in `md0.parsing.links`.

Example:
    >>> from md0.parsing import LineNavigationMixin, BlockParsingMixin
    >>> class Parser(LineNavigationMixin, BlockParsingMixin):
    ...     pass

"""

from md0.parsing.blocks import BlockParsingMixin
from md0.parsing.line_nav import LineNavigationMixin
from md0.parsing.links import extract_metadata, scan_images, scan_links

__all__ = [
    "LineNavigationMixin",
    "BlockParsingMixin",
    "extract_metadata",
    "scan_images",
    "scan_links",
]
