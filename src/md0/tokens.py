"""Typed block tokens and inline metadata for md0.

The tokenizer produces an ordered list of block tokens. Paragraph tokens
carry positional metadata for the links and images found in their text.

All tokens are frozen dataclasses with slots for:
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: ``match`` statements work naturally

Token Hierarchy:
Token (union)
├── Heading
├── Paragraph
├── HorizontalRule
└── Code

Metadata (union)
├── Link
└── Image

Debug Representation:
Every variant renders as ``VariantName(field, ...)`` with strings in
double-quoted escaped form, e.g. ``Heading(1, "Title")``. Used for test
and diagnostic output only.

"""

import json
from dataclasses import dataclass
from typing import Literal, assert_never

# (start, end) UTF-8 byte offsets into a paragraph's content
type Span = tuple[int, int]
type HeadingLevel = Literal[1, 2, 3, 4, 5, 6]

# =============================================================================
# Inline Metadata
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class Link:
    """Position of a ``[label](url)`` construct in paragraph text.

    ``content.encode("utf-8")[span[0]:span[1]]`` is exactly the raw construct,
    brackets and parentheses included.

    """

    span: Span
    label: str
    url: str

    def __repr__(self) -> str:
        return debug_repr(self)


@dataclass(frozen=True, slots=True, repr=False)
class Image:
    """Position of a ``![label](url)`` construct in paragraph text.

    The span includes the leading ``!``.

    """

    span: Span
    label: str
    url: str

    def __repr__(self) -> str:
        return debug_repr(self)


type Metadata = Link | Image

# =============================================================================
# Block Tokens
# =============================================================================


@dataclass(frozen=True, slots=True, repr=False)
class Heading:
    """ATX or setext heading.

    Markdown: # Heading, or a text line followed by ---
    HTML: <h1>Heading</h1>

    Content is the trimmed line remainder; no inline processing is applied.

    """

    level: HeadingLevel
    content: str

    def __repr__(self) -> str:
        return debug_repr(self)


@dataclass(frozen=True, slots=True, repr=False)
class Paragraph:
    """Paragraph block.

    Consecutive non-blank lines joined with single spaces. Never contains
    a newline.

    """

    content: str
    metadata: tuple[Metadata, ...] = ()

    def __repr__(self) -> str:
        return debug_repr(self)

    @property
    def links(self) -> tuple[Link, ...]:
        """Link entries only, in scan order."""
        return tuple(m for m in self.metadata if isinstance(m, Link))

    @property
    def images(self) -> tuple[Image, ...]:
        """Image entries only, in scan order."""
        return tuple(m for m in self.metadata if isinstance(m, Image))


@dataclass(frozen=True, slots=True, repr=False)
class HorizontalRule:
    """Horizontal rule.

    Markdown: --- (with no paragraph text directly above)
    HTML: <hr />

    """

    def __repr__(self) -> str:
        return debug_repr(self)


@dataclass(frozen=True, slots=True, repr=False)
class Code:
    """Fenced code block.

    Markdown:
        ```python
        print(1)
        ```

    Content holds the raw lines between the fences, each terminated by a
    newline. ``language`` is the fence tag, or ``""`` when absent.

    """

    language: str
    content: str

    def __repr__(self) -> str:
        return debug_repr(self)


type Token = Heading | Paragraph | HorizontalRule | Code
type Tokens = list[Token]

TOKEN_TYPES: tuple[type, ...] = (Heading, Paragraph, HorizontalRule, Code)
METADATA_TYPES: tuple[type, ...] = (Link, Image)


def _quote(s: str) -> str:
    return json.dumps(s, ensure_ascii=False)


def debug_repr(value: Token | Metadata) -> str:
    """Format a token or metadata entry as ``VariantName(field, ...)``.

    Examples:
        >>> debug_repr(Heading(1, "Title"))
        'Heading(1, "Title")'
        >>> debug_repr(HorizontalRule())
        'HorizontalRule'

    """
    match value:
        case Heading(level=level, content=content):
            return f"Heading({level}, {_quote(content)})"
        case Paragraph(content=content, metadata=metadata):
            entries = ", ".join(debug_repr(m) for m in metadata)
            return f"Paragraph({_quote(content)}, [{entries}])"
        case HorizontalRule():
            return "HorizontalRule"
        case Code(language=language, content=content):
            return f"Code({_quote(language)}, {_quote(content)})"
        case Link(span=(start, end), label=label, url=url):
            return f"Link(({start}, {end}), {_quote(label)}, {_quote(url)})"
        case Image(span=(start, end), label=label, url=url):
            return f"Image(({start}, {end}), {_quote(label)}, {_quote(url)})"
        case _:
            assert_never(value)
