"""Link and image metadata extraction for md0.

Finds ``[label](url)`` and ``![label](url)`` constructs in paragraph text
and reports where they occur. Nothing is rewritten: the paragraph keeps its
raw text and the metadata only records positions.

Matching rules:
- The label runs to the first ``]`` (it cannot contain one)
- The ``]`` must be followed directly by ``(``
- The url runs to the first ``)`` (it cannot contain one)
- Empty labels and urls are allowed
- Matches never overlap; scanning resumes after the previous match

Links and images are scanned independently, so an image also produces a
link entry covering the same text minus the leading ``!``.

Spans are UTF-8 byte offsets into the paragraph text, so
``content.encode("utf-8")[start:end]`` is the raw construct.

Every failed candidate moves the scan past the ``]`` it consumed, which
keeps both scanners linear in the length of the text.
"""

from __future__ import annotations

from collections.abc import Iterator

from md0.parsing.charsets import IMAGE_OPENER, LINK_OPENER
from md0.tokens import Image, Link, Metadata


def _utf8_len(text: str) -> int:
    return len(text.encode("utf-8", "surrogatepass"))


def _scan_bracketed(text: str, opener: str) -> Iterator[tuple[int, int, str, str]]:
    """Yield (start, end, label, url) for each ``opener label](url)`` in text.

    Args:
        text: Paragraph text
        opener: ``[`` for links, ``![`` for images

    Yields:
        Match start and end (exclusive) as UTF-8 byte offsets, label and
        url, left to right
    """
    pos = 0
    text_len = len(text)
    # Byte offset of text[:mark]; only advances, so encoding stays linear
    mark = 0
    mark_bytes = 0
    while pos < text_len:
        start = text.find(opener, pos)
        if start == -1:
            return

        label_start = start + len(opener)
        label_end = text.find("]", label_start)
        if label_end == -1:
            # No later opener can find a closing bracket either
            return

        paren = label_end + 1
        if paren >= text_len or text[paren] != "(":
            # Any opener before label_end would stop at the same bracket
            pos = label_end + 1
            continue

        url_end = text.find(")", paren + 1)
        if url_end == -1:
            return

        end = url_end + 1
        byte_start = mark_bytes + _utf8_len(text[mark:start])
        byte_end = byte_start + _utf8_len(text[start:end])
        yield byte_start, byte_end, text[label_start:label_end], text[paren + 1 : url_end]
        mark, mark_bytes = end, byte_end
        pos = end


def scan_links(text: str) -> list[Link]:
    """Find every ``[label](url)`` in text.

    Args:
        text: Paragraph text

    Returns:
        Link entries in left-to-right order

    Example:
        >>> scan_links("See [Docs](http://x) and more")
        [Link((4, 20), "Docs", "http://x")]

    """
    return [
        Link(span=(start, end), label=label, url=url)
        for start, end, label, url in _scan_bracketed(text, LINK_OPENER)
    ]


def scan_images(text: str) -> list[Image]:
    """Find every ``![label](url)`` in text.

    Args:
        text: Paragraph text

    Returns:
        Image entries in left-to-right order

    Example:
        >>> scan_images("![Alt](img.png)")
        [Image((0, 15), "Alt", "img.png")]

    """
    return [
        Image(span=(start, end), label=label, url=url)
        for start, end, label, url in _scan_bracketed(text, IMAGE_OPENER)
    ]


def extract_metadata(text: str) -> tuple[Metadata, ...]:
    """Collect link and image metadata for a paragraph.

    Link entries come first, then image entries. Overlapping spans are kept
    as found.

    Example:
        >>> extract_metadata("![Alt](img.png)")
        (Link((1, 15), "Alt", "img.png"), Image((0, 15), "Alt", "img.png"))

    """
    if LINK_OPENER not in text:
        return ()

    found: list[Metadata] = []
    found.extend(scan_links(text))
    found.extend(scan_images(text))
    return tuple(found)
