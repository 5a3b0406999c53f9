#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for markdown snippet parsing and pandoc markdown rendering."""
import pytest

from acrodoc.ast import (
    AcronymReference,
    Document,
    Emphasis,
    Heading,
    Link,
    Note,
    Paragraph,
    SmallCaps,
    Span,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Text,
    Underline,
    extract_text,
)
from acrodoc.parsers.markdown import parse_inline_markdown
from acrodoc.renderers.markdown import MarkdownRenderer


@pytest.mark.unit
class TestInlineMarkdownParser:
    """Test conversion of markdown snippets into rich text."""

    def test_plain_text(self) -> None:
        """Test that plain text is a single leaf."""
        assert parse_inline_markdown("Reinforcement Learning") == [Text(content="Reinforcement Learning")]

    def test_emphasis_and_strong(self) -> None:
        """Test emphasis and strong emphasis."""
        nodes = parse_inline_markdown("*in vitro* and **bold**")

        assert isinstance(nodes[0], Emphasis)
        assert extract_text(nodes[0]) == "in vitro"
        assert isinstance(nodes[-1], Strong)
        assert extract_text(nodes) == "in vitro and bold"

    def test_nested_formatting(self) -> None:
        """Test emphasis nested in strong."""
        nodes = parse_inline_markdown("**very *nested***")

        assert isinstance(nodes[0], Strong)
        assert any(isinstance(child, Emphasis) for child in nodes[0].content)

    def test_extension_syntax(self) -> None:
        """Test strikethrough, superscript and subscript plugins."""
        assert isinstance(parse_inline_markdown("~~old~~")[0], Strikethrough)
        assert isinstance(parse_inline_markdown("E=mc^2^")[-1], Superscript)
        assert isinstance(parse_inline_markdown("H~2~O")[1], Subscript)

    def test_link(self) -> None:
        """Test inline links."""
        nodes = parse_inline_markdown("[site](https://example.com)")

        assert isinstance(nodes[0], Link)
        assert nodes[0].url == "https://example.com"
        assert extract_text(nodes) == "site"

    def test_code_span_becomes_text(self) -> None:
        """Test that code spans are kept as text."""
        assert extract_text(parse_inline_markdown("`grep` tool")) == "grep tool"

    def test_paragraphs_are_flattened(self) -> None:
        """Test that several paragraphs become one run of inlines."""
        assert extract_text(parse_inline_markdown("first\n\nsecond")) == "first second"


@pytest.mark.unit
class TestMarkdownRenderer:
    """Test pandoc markdown output."""

    @pytest.mark.parametrize(
        "node,expected",
        [
            (Emphasis(content=[Text(content="e")]), "*e*"),
            (Strong(content=[Text(content="s")]), "**s**"),
            (Strikethrough(content=[Text(content="x")]), "~~x~~"),
            (SmallCaps(content=[Text(content="x")]), "[x]{.smallcaps}"),
            (Superscript(content=[Text(content="x")]), "^x^"),
            (Subscript(content=[Text(content="x")]), "~x~"),
            (Underline(content=[Text(content="x")]), "[x]{.underline}"),
            (Link(url="#acronyms_RL", content=[Text(content="RL")]), "[RL](#acronyms_RL)"),
            (Note(content=[Text(content="note")]), "^[note]"),
        ],
    )
    def test_inline_syntax(self, node, expected) -> None:
        """Test the syntax of each inline node."""
        assert MarkdownRenderer().render_inlines([node]) == expected

    def test_span_attributes(self) -> None:
        """Test bracketed span attributes."""
        span = Span(content=[Text(content="x")], identifier="id", classes=["c"], attributes={"k": "v"})
        assert MarkdownRenderer().render_inlines([span]) == '[x]{#id .c k="v"}'

    def test_link_with_title(self) -> None:
        """Test link titles."""
        link = Link(url="https://example.com", content=[Text(content="x")], title="Example")
        assert MarkdownRenderer().render_inlines([link]) == '[x](https://example.com "Example")'

    def test_escaping(self) -> None:
        """Test escaping of markup characters in text."""
        rendered = MarkdownRenderer().render_inlines([Text(content="a*b [c] _d snake_case 2^3")])
        assert rendered == r"a\*b \[c\] \_d snake_case 2\^3"

    def test_nested_link_in_note(self) -> None:
        """Test a short-footnote style fragment."""
        nodes = [
            Text(content="RL"),
            Note(content=[Link(url="#acronyms_RL", content=[Text(content="RL")]), Text(content=": Reinforcement")]),
        ]
        assert MarkdownRenderer().render_inlines(nodes) == "RL^[[RL](#acronyms_RL): Reinforcement]"

    def test_unexpanded_reference(self) -> None:
        """Test that references are written back in source form."""
        renderer = MarkdownRenderer()

        assert renderer.render_inlines([AcronymReference(key="RL")]) == r"\acr{RL}"
        assert (
            renderer.render_inlines([AcronymReference(key="RL", style="short-long", plural=True)])
            == r"\acr[style=short-long,plural=true]{RL}"
        )

    def test_document(self) -> None:
        """Test block separation in documents."""
        doc = Document(
            children=[
                Heading(level=2, content=[Text(content="Title")]),
                Paragraph(content=[Text(content="Body")]),
            ]
        )
        assert MarkdownRenderer().render_to_string(doc) == "## Title\n\nBody"
