#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/renderers/markdown.py
"""Pandoc markdown rendering of rich text and documents.

The renderer walks the AST with the visitor pattern and writes pandoc's
markdown dialect, so that bracketed spans, small caps, underline and inline
notes survive a round-trip through pandoc::

    *emphasis*  **strong**  ~~strike~~  [x]{.smallcaps}  ^sup^  ~sub~
    [x]{.underline}  [x]{#id .class key="value"}  [text](url)  ^[note]

References that were not expanded are written back in their source form
``\\acr[...]{KEY}``.
"""

from __future__ import annotations

import re

from acrodoc.ast.nodes import (
    AcronymReference,
    Document,
    Emphasis,
    Heading,
    Link,
    Node,
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
)
from acrodoc.ast.visitors import NodeVisitor

_ALWAYS_ESCAPE = "\\`*[]^~"


class MarkdownRenderer(NodeVisitor):
    """Render AST nodes to pandoc markdown.

    Examples
    --------
        >>> from acrodoc.ast import Emphasis, Text
        >>> MarkdownRenderer().render_inlines([Emphasis(content=[Text(content="in vitro")])])
        '*in vitro*'

    """

    def __init__(self) -> None:
        """Initialize the renderer."""
        self._output: list[str] = []

    def render_to_string(self, document: Document) -> str:
        """Render a document to a markdown string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            Markdown text, blocks separated by blank lines

        """
        self._output = []
        document.accept(self)
        result = "".join(self._output)
        self._output = []

        result = re.sub(r"\n{3,}", "\n\n", result)
        return result.rstrip()

    def render_inlines(self, nodes: list[Node]) -> str:
        """Render a rich text value to a markdown string."""
        return self._render_inline_content(nodes)

    def _render_inline_content(self, content: list[Node]) -> str:
        """Render a list of inline nodes, capturing their output."""
        saved_output = self._output
        self._output = []

        for node in content:
            node.accept(self)

        result = "".join(self._output)
        self._output = saved_output
        return result

    @staticmethod
    def _escape_markdown(text: str) -> str:
        """Escape characters that would start inline markup.

        Underscores are escaped only at word boundaries, so ``snake_case``
        stays readable.
        """
        escaped_chars = []
        for i, char in enumerate(text):
            if char in _ALWAYS_ESCAPE:
                escaped_chars.append("\\")
                escaped_chars.append(char)
            elif char == "_":
                prev_is_word = i > 0 and text[i - 1].isalnum()
                next_is_word = i < len(text) - 1 and text[i + 1].isalnum()
                if not (prev_is_word and next_is_word):
                    escaped_chars.append("\\")
                escaped_chars.append(char)
            else:
                escaped_chars.append(char)
        return "".join(escaped_chars)

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for i, child in enumerate(node.children):
            child.accept(self)
            if i < len(node.children) - 1:
                self._output.append("\n\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node."""
        self._output.append(self._render_inline_content(node.content))

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node with an ATX prefix."""
        content = self._render_inline_content(node.content)
        self._output.append(f"{'#' * node.level} {content}")

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(self._escape_markdown(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"*{self._render_inline_content(node.content)}*")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"**{self._render_inline_content(node.content)}**")

    def visit_span(self, node: Span) -> None:
        """Render a Span node as a bracketed span with attributes.

        Parameters
        ----------
        node : Span
            Span to render

        """
        content = self._render_inline_content(node.content)
        attrs: list[str] = []
        if node.identifier:
            attrs.append(f"#{node.identifier}")
        attrs.extend(f".{cls}" for cls in node.classes)
        for key, value in node.attributes.items():
            value = str(value).replace("\\", "\\\\").replace('"', '\\"')
            attrs.append(f'{key}="{value}"')
        self._output.append(f"[{content}]{{{' '.join(attrs)}}}")

    def visit_strikethrough(self, node: Strikethrough) -> None:
        """Render a Strikethrough node."""
        self._output.append(f"~~{self._render_inline_content(node.content)}~~")

    def visit_small_caps(self, node: SmallCaps) -> None:
        """Render a SmallCaps node."""
        self._output.append(f"[{self._render_inline_content(node.content)}]{{.smallcaps}}")

    def visit_superscript(self, node: Superscript) -> None:
        """Render a Superscript node."""
        self._output.append(f"^{self._render_inline_content(node.content)}^")

    def visit_subscript(self, node: Subscript) -> None:
        """Render a Subscript node."""
        self._output.append(f"~{self._render_inline_content(node.content)}~")

    def visit_underline(self, node: Underline) -> None:
        """Render an Underline node."""
        self._output.append(f"[{self._render_inline_content(node.content)}]{{.underline}}")

    def visit_link(self, node: Link) -> None:
        """Render a Link node inline.

        Parameters
        ----------
        node : Link
            Link to render

        """
        content = self._render_inline_content(node.content)
        if node.title:
            title = node.title.replace('"', '\\"')
            self._output.append(f'[{content}]({node.url} "{title}")')
        else:
            self._output.append(f"[{content}]({node.url})")

    def visit_note(self, node: Note) -> None:
        """Render a Note node as a pandoc inline note."""
        self._output.append(f"^[{self._render_inline_content(node.content)}]")

    def visit_acronym_reference(self, node: AcronymReference) -> None:
        """Render an unexpanded reference in its source form."""
        options: list[str] = []
        if node.style is not None:
            options.append(f"style={node.style}")
        if node.plural:
            options.append("plural=true")
        if node.case is not None:
            options.append(f"case={node.case}")
        if node.case_target is not None:
            options.append(f"case_target={node.case_target}")
        if node.insert_links is not None:
            options.append(f"insert_links={str(node.insert_links).lower()}")
        if node.first_use is not None:
            options.append(f"first_use={str(node.first_use).lower()}")

        bracket = f"[{','.join(options)}]" if options else ""
        self._output.append(f"\\acr{bracket}{{{node.key}}}")
