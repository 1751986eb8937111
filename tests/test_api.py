"""Tests for the high-level md0 API."""

from md0 import (
    Code,
    Heading,
    HorizontalRule,
    Image,
    Link,
    Markdown,
    Paragraph,
    parse,
    tokens_to_html,
)


class TestParseFunction:
    """Tests for the parse() function."""

    def test_empty_input(self) -> None:
        """Empty input yields no tokens."""
        assert parse("") == []

    def test_only_newlines(self) -> None:
        """Blank lines alone yield no tokens."""
        assert parse("\n\n\n") == []

    def test_parse_heading(self) -> None:
        """Test parsing a heading."""
        assert parse("# Heading") == [Heading(level=1, content="Heading")]

    def test_parse_deepest_heading(self) -> None:
        """Six hashes is the deepest heading."""
        assert parse("###### Deep") == [Heading(level=6, content="Deep")]

    def test_seven_hashes_is_paragraph(self) -> None:
        """Seven hashes is paragraph text."""
        tokens = parse("####### TooDeep")
        assert tokens == [Paragraph(content="####### TooDeep")]

    def test_horizontal_rule(self) -> None:
        """A lone dash line is a horizontal rule."""
        assert parse("---") == [HorizontalRule()]

    def test_setext_disambiguation(self) -> None:
        """Only the line above the dashes becomes the heading."""
        tokens = parse("Intro line\nHeading text\n---")
        assert tokens == [
            Paragraph(content="Intro line"),
            Heading(level=1, content="Heading text"),
        ]

    def test_paragraphs_split_on_blank_line(self) -> None:
        """Blank lines separate paragraphs; lines within are space-joined."""
        tokens = parse("line one\nline two\n\nline three")
        assert tokens == [
            Paragraph(content="line one line two"),
            Paragraph(content="line three"),
        ]

    def test_fenced_code(self) -> None:
        """Fenced code keeps its language and newline-terminated lines."""
        tokens = parse("```python\nprint(1)\n```")
        assert tokens == [Code(language="python", content="print(1)\n")]

    def test_unterminated_fence(self) -> None:
        """An unterminated fence swallows the rest of the input."""
        assert parse("```\nfoo") == [Code(language="", content="foo\n")]

    def test_link_metadata(self) -> None:
        """Links are reported with exact spans."""
        (para,) = parse("See [Docs](http://x) and more")
        assert isinstance(para, Paragraph)
        (link,) = para.metadata
        assert link == Link(span=(4, 20), label="Docs", url="http://x")
        assert para.content[link.span[0] : link.span[1]] == "[Docs](http://x)"

    def test_link_span_counts_bytes(self) -> None:
        """Spans index the UTF-8 encoding of the paragraph content."""
        (para,) = parse("é [a](b)")
        assert isinstance(para, Paragraph)
        (link,) = para.metadata
        assert link.span == (3, 9)
        start, end = link.span
        assert para.content.encode("utf-8")[start:end] == b"[a](b)"

    def test_image_also_matches_link(self) -> None:
        """An image yields an image entry and a one-narrower link entry."""
        (para,) = parse("![Alt](img.png)")
        assert isinstance(para, Paragraph)
        assert para.metadata == (
            Link(span=(1, 15), label="Alt", url="img.png"),
            Image(span=(0, 15), label="Alt", url="img.png"),
        )


class TestTokensToHtml:
    """Tests for the tokens_to_html() function."""

    def test_escapes_paragraph(self) -> None:
        """Paragraph content is escaped."""
        assert tokens_to_html([Paragraph(content="a < b")]) == "<p>a &lt; b</p>"

    def test_empty_tokens(self) -> None:
        """No tokens render to an empty string."""
        assert tokens_to_html([]) == ""

    def test_full_document(self) -> None:
        """Every block type renders on its own line."""
        source = "# Title\n\nSome text\n\n---\n\n```sh\necho <hi>\n```"
        html = tokens_to_html(parse(source))
        assert html == (
            "<h1>Title</h1>\n"
            "<p>Some text</p>\n"
            "<hr />\n"
            "<pre><code>echo &lt;hi&gt;\n</code></pre>"
        )

    def test_idempotent(self) -> None:
        """Rendering the same tokens twice gives the same output."""
        tokens = parse("# A & B\n\n[x](y) & <z>\n\n```\n<code>\n```")
        assert tokens_to_html(tokens) == tokens_to_html(tokens)

    def test_accepts_any_iterable(self) -> None:
        """A generator of tokens is accepted."""
        html = tokens_to_html(t for t in [HorizontalRule(), HorizontalRule()])
        assert html == "<hr />\n<hr />"


class TestMarkdownClass:
    """Tests for the Markdown class."""

    def test_basic_usage(self) -> None:
        """Calling the instance parses and renders."""
        md = Markdown()
        assert md("# Hello") == "<h1>Hello</h1>"

    def test_parse_returns_tokens(self) -> None:
        """parse() exposes the tokens."""
        md = Markdown()
        tokens = md.parse("# Heading")
        assert tokens[0].level == 1  # type: ignore[union-attr]

    def test_collect_metadata_disabled(self) -> None:
        """Instances can skip link/image scanning."""
        md = Markdown(collect_metadata=False)
        (para,) = md.parse("[a](b)")
        assert isinstance(para, Paragraph)
        assert para.metadata == ()

    def test_parse_many(self) -> None:
        """parse_many() parses each source independently."""
        md = Markdown()
        results = md.parse_many(["# Doc 1", "---", ""])
        assert results == [[Heading(level=1, content="Doc 1")], [HorizontalRule()], []]

    def test_render_matches_function(self) -> None:
        """render() is tokens_to_html()."""
        md = Markdown()
        tokens = md.parse("text")
        assert md.render(tokens) == tokens_to_html(tokens)
