"""
md0: minimal line-oriented Markdown tokenizer and HTML renderer

Converts Markdown text into a flat list of block tokens (headings,
paragraphs, horizontal rules, fenced code) and renders those tokens to HTML.
Paragraph tokens carry the positions of links and images found in their
text. Parsing is total: every string produces a token list.

Quick Start:
    >>> from md0 import parse, tokens_to_html
    >>> tokens = parse("# Hello, World!")
    >>> tokens
    [Heading(1, "Hello, World!")]
    >>> tokens_to_html(tokens)
    '<h1>Hello, World!</h1>'

    >>> # Or use the high-level Markdown class
    >>> from md0 import Markdown
    >>> md = Markdown()
    >>> md("See [Docs](http://x)")
    '<p>See [Docs](http://x)</p>'

Installation:
    pip install md0
"""

from collections.abc import Iterable

from md0.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from md0.errors import ConfigError, Md0Error, RenderError
from md0.lexer import Lexer
from md0.parser import Parser
from md0.renderers.html import HtmlRenderer
from md0.serialization import from_dict, from_json, to_dict, to_json
from md0.tokens import (
    Code,
    Heading,
    HorizontalRule,
    Image,
    Link,
    Metadata,
    Paragraph,
    Token,
    Tokens,
    debug_repr,
)

__version__ = "0.3.0"


def parse(markdown: str, *, config: ParseConfig | None = None) -> Tokens:
    """Parse Markdown source into block tokens.

    Args:
        markdown: Markdown source text
        config: Configuration for this call only. When None, the config
            active in the current context is used.

    Returns:
        Tokens in document order (empty for empty input)

    Example:
        >>> parse("Intro line\\nHeading text\\n---")
        [Paragraph("Intro line", []), Heading(1, "Heading text")]
    """
    if config is None:
        return Parser(markdown).parse()

    with parse_config_context(config):
        return Parser(markdown).parse()


def tokens_to_html(tokens: Iterable[Token]) -> str:
    """Render tokens to HTML.

    Args:
        tokens: Tokens as produced by parse()

    Returns:
        HTML string, one element per token, joined with newlines

    Raises:
        RenderError: If an item is not a token

    Example:
        >>> tokens_to_html(parse("a < b"))
        '<p>a &lt; b</p>'
    """
    return _RENDERER.render(tokens)


# Stateless, shared by every call
_RENDERER = HtmlRenderer()


class Markdown:
    """High-level Markdown processor combining parser and renderer.

    Usage:
        >>> md = Markdown()
        >>> md("# Hello")
        '<h1>Hello</h1>'

        >>> # Access the tokens
        >>> md.parse("# Heading")[0].level
        1

        >>> # Skip link/image scanning
        >>> md = Markdown(collect_metadata=False)

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markdown instances concurrently from different threads.

    """

    __slots__ = ("_config",)

    def __init__(self, *, trace_lines: bool = False, collect_metadata: bool = True) -> None:
        """Initialize Markdown processor.

        Args:
            trace_lines: Log each classified line at DEBUG level
            collect_metadata: Scan paragraphs for links and images
        """
        # Build immutable config once (thread-safe, reused across calls)
        self._config = ParseConfig(trace_lines=trace_lines, collect_metadata=collect_metadata)

    @property
    def config(self) -> ParseConfig:
        """The configuration applied to every parse."""
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render Markdown in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str) -> Tokens:
        """Parse Markdown source into tokens with this instance's config."""
        return parse(source, config=self._config)

    def parse_many(self, sources: Iterable[str]) -> list[Tokens]:
        """Parse multiple Markdown sources.

        Sets config once, parses all, restores once.

        Example:
            >>> md = Markdown()
            >>> md.parse_many(["# Doc 1", "# Doc 2"])
            [[Heading(1, "Doc 1")], [Heading(1, "Doc 2")]]
        """
        with parse_config_context(self._config):
            return [Parser(source).parse() for source in sources]

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to HTML."""
        return tokens_to_html(tokens)


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "tokens_to_html",
    # Tokens
    "Code",
    "Heading",
    "HorizontalRule",
    "Paragraph",
    "Token",
    "Tokens",
    # Metadata
    "Image",
    "Link",
    "Metadata",
    "debug_repr",
    # Parser components
    "Lexer",
    "Parser",
    # Renderer
    "HtmlRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "Md0Error",
    "RenderError",
    "ConfigError",
    # High-level
    "Markdown",
]
