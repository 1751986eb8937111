"""md0 renderers.

Renderers convert block tokens into output formats.

Available Renderers:
- HtmlRenderer: Renders tokens to HTML using StringBuilder pattern

"""

from md0.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
