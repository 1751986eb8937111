"""Utility modules for md0.

Provides:
- text: escape_html, char_span for text processing
- logger: get_logger for logging
"""

from md0.utils.logger import get_logger
from md0.utils.text import char_span, escape_html

__all__ = [
    "char_span",
    "escape_html",
    "get_logger",
]
