#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/ast/__init__.py
"""Abstract Syntax Tree (AST) module for rich text.

Acronym names, rendered acronym fragments and the documents they are spliced
into all share this representation:

- nodes: AST node classes (text leaves, styled wrappers, links, notes)
- visitors: Visitor pattern base class for traversal
- transforms: Transformer base class and cloning helpers
- utils: Stringification and normalization helpers

Examples
--------
    >>> from acrodoc.ast import Emphasis, Text
    >>> longname = [Text(content="Reinforcement "), Emphasis(content=[Text(content="Learning")])]

"""

from __future__ import annotations

from acrodoc.ast.nodes import (
    STYLED_NODE_TYPES,
    AcronymReference,
    Document,
    Emphasis,
    Heading,
    Link,
    Node,
    Note,
    Paragraph,
    RichText,
    SmallCaps,
    Span,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Text,
    Underline,
    get_node_children,
    is_styled_node,
    replace_node_children,
)
from acrodoc.ast.transforms import NodeTransformer, clone_inlines, clone_node
from acrodoc.ast.utils import ensure_inlines, extract_text, is_plain_text
from acrodoc.ast.visitors import NodeVisitor

__all__ = [
    "STYLED_NODE_TYPES",
    "AcronymReference",
    "Document",
    "Emphasis",
    "Heading",
    "Link",
    "Node",
    "Note",
    "Paragraph",
    "RichText",
    "SmallCaps",
    "Span",
    "Strikethrough",
    "Strong",
    "Subscript",
    "Superscript",
    "Text",
    "Underline",
    "get_node_children",
    "is_styled_node",
    "replace_node_children",
    "NodeTransformer",
    "NodeVisitor",
    "clone_inlines",
    "clone_node",
    "ensure_inlines",
    "extract_text",
    "is_plain_text",
]
