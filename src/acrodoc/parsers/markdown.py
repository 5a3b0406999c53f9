#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/parsers/markdown.py
"""Markdown snippet parsing for acronym names.

Acronym definitions flagged with ``parse_markdown`` may use inline markdown in
their names (e.g. ``*in vitro*`` or ``CO~2~``). This module parses such
snippets with mistune and converts the inline tokens into rich text nodes.
Only inline content is kept: the paragraphs of a snippet are flattened into a
single run of inline nodes.
"""

from __future__ import annotations

import logging
from typing import Any

from acrodoc.ast.nodes import (
    Emphasis,
    Link,
    Node,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Text,
    Underline,
)

logger = logging.getLogger(__name__)

MARKDOWN_PLUGINS = ["strikethrough", "superscript", "subscript", "insert"]

_INLINE_CONTAINER_BLOCKS = {"paragraph", "block_text", "heading"}


class InlineMarkdownParser:
    """Convert markdown snippets into rich text.

    The parser holds no state between calls and can be reused for every
    acronym definition of a configuration.
    """

    def __init__(self) -> None:
        """Create the mistune parser."""
        import mistune

        self._markdown = mistune.create_markdown(plugins=MARKDOWN_PLUGINS, renderer=None)

    def parse(self, text: str) -> list[Node]:
        """Parse a markdown snippet into inline nodes.

        Parameters
        ----------
        text : str
            Markdown snippet

        Returns
        -------
        list of Node
            Inline nodes, with adjacent text leaves merged

        """
        tokens, _state = self._markdown.parse(str(text).strip() + "\n")
        if not isinstance(tokens, list):
            return [Text(content=str(text))]

        nodes: list[Node] = []
        for token in tokens:
            if token.get("type") in _INLINE_CONTAINER_BLOCKS:
                if nodes:
                    nodes.append(Text(content=" "))
                nodes.extend(self._process_inline_tokens(token.get("children", [])))
            elif token.get("type") != "blank_line":
                logger.debug(f"Ignoring block-level markdown token '{token.get('type')}' in acronym name")
        return _merge_adjacent_text(nodes)

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_inline_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _children(self, token: dict[str, Any]) -> list[Node]:
        children = token.get("children")
        if isinstance(children, list):
            return self._process_inline_tokens(children)
        return [Text(content=token.get("raw", ""))]

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node, or None for unsupported tokens

        """
        token_type = token.get("type", "")

        if token_type in ("text", "codespan", "inline_html"):
            return Text(content=token.get("raw", ""))
        if token_type in ("softbreak", "linebreak"):
            return Text(content=" ")
        if token_type == "emphasis":
            return Emphasis(content=self._children(token))
        if token_type == "strong":
            return Strong(content=self._children(token))
        if token_type == "strikethrough":
            return Strikethrough(content=self._children(token))
        if token_type == "superscript":
            return Superscript(content=self._children(token))
        if token_type == "subscript":
            return Subscript(content=self._children(token))
        if token_type == "insert":
            return Underline(content=self._children(token))
        if token_type == "link":
            attrs = token.get("attrs", {})
            if not isinstance(attrs, dict):
                attrs = {}
            return Link(url=attrs.get("url", ""), content=self._children(token), title=attrs.get("title"))

        logger.debug(f"Ignoring unsupported inline markdown token '{token_type}'")
        return None


def _merge_adjacent_text(nodes: list[Node]) -> list[Node]:
    merged: list[Node] = []
    for node in nodes:
        if isinstance(node, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(content=merged[-1].content + node.content)
        else:
            merged.append(node)
    return merged


def parse_inline_markdown(text: str) -> list[Node]:
    """Parse a markdown snippet into rich text.

    Examples
    --------
    >>> nodes = parse_inline_markdown("*in vitro* diagnostics")
    >>> type(nodes[0]).__name__, nodes[1].content
    ('Emphasis', ' diagnostics')

    """
    return InlineMarkdownParser().parse(text)
