"""HTML renderer using StringBuilder pattern.

Renders a token list to HTML with O(n) performance: one line of HTML per
token, lines joined with a newline, no wrapping element.

Inline Markdown inside paragraph text is escaped, never turned into
elements. Paragraph metadata is positional information for callers and is
not consulted here. The code language tag is not emitted.

Thread Safety:
The renderer holds no per-render state. Multiple threads can safely share
a single HtmlRenderer instance and call render() concurrently.
"""

from collections.abc import Iterable

from md0.errors import RenderError
from md0.stringbuilder import StringBuilder
from md0.tokens import Code, Heading, HorizontalRule, Paragraph, Token
from md0.utils.logger import get_logger
from md0.utils.text import escape_html

logger = get_logger(__name__)


class HtmlRenderer:
    """Render tokens to HTML using StringBuilder pattern.

    Usage:
        >>> renderer = HtmlRenderer()
        >>> renderer.render([Heading(1, "Hi"), Paragraph("a < b")])
        '<h1>Hi</h1>\\n<p>a &lt; b</p>'

    Thread Safety:
        Stateless; safe to share across threads.
    """

    __slots__ = ()

    def render(self, tokens: Iterable[Token]) -> str:
        """Render tokens to an HTML string.

        Args:
            tokens: Tokens in document order

        Returns:
            HTML string, one element per line

        Raises:
            RenderError: If an item is not a token
        """
        sb = StringBuilder()
        for index, token in enumerate(tokens):
            if sb:
                sb.append("\n")
            self._render_token(token, index, sb)
        return sb.build()

    def _render_token(self, token: Token, index: int, sb: StringBuilder) -> None:
        """Render a single token."""
        match token:
            case Heading(level=level, content=content):
                sb.append(f"<h{level}>").append(escape_html(content)).append(f"</h{level}>")
            case Paragraph(content=content):
                sb.append("<p>").append(escape_html(content)).append("</p>")
            case HorizontalRule():
                sb.append("<hr />")
            case Code(content=content):
                sb.append("<pre><code>").append(escape_html(content)).append("</code></pre>")
            case _:
                logger.debug("refusing to render %r at index %d", token, index)
                raise RenderError(token, index)
