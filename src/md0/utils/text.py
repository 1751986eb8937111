"""Text processing utilities for md0.

Example:
    >>> from md0.utils.text import escape_html
    >>> escape_html("a < b")
    'a &lt; b'
"""

from __future__ import annotations

import html as html_module


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - " becomes &quot;
    - ' becomes &#x27;

    Args:
        text: Text to escape

    Returns:
        HTML-escaped text safe for element content and attribute values

    Examples:
        >>> escape_html("<script>alert('xss')</script>")
        '&lt;script&gt;alert(&#x27;xss&#x27;)&lt;/script&gt;'
    """
    if not text:
        return ""

    return html_module.escape(text, quote=True)


def char_span(text: str, span: tuple[int, int]) -> tuple[int, int]:
    """Convert a UTF-8 byte offset span into Python string offsets.

    Metadata spans index the UTF-8 encoding of the paragraph text. Python
    code slicing the ``str`` itself needs string offsets instead.

    Args:
        text: The text the span indexes into (a paragraph's content)
        span: (start, end) offsets into ``text.encode("utf-8")``

    Returns:
        (start, end) offsets such that ``text[start:end]`` is the spanned text

    Examples:
        >>> char_span("é [a](b)", (3, 9))
        (2, 8)
    """
    start, end = span
    encoded = text.encode("utf-8", "surrogatepass")
    char_start = len(encoded[:start].decode("utf-8", "surrogatepass"))
    return char_start, char_start + len(encoded[start:end].decode("utf-8", "surrogatepass"))
