#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/ast/transforms.py
"""AST transformation utilities.

This module provides the base transformer used by the case transformation and
the acronym reference walker, along with tree cloning helpers.

Examples
--------
Upper-case every text leaf of a rich text value:

    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>>
    >>> shouted = UppercaseTransformer().transform_inlines(nodes)

"""

from __future__ import annotations

import copy
from typing import Union

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
    get_node_children,
    replace_node_children,
)
from acrodoc.ast.visitors import NodeVisitor

TransformResult = Union[Node, list[Node], None]


class NodeTransformer(NodeVisitor):
    """Base class for transforming AST nodes.

    Subclasses override visit_* methods and return a modified node, a list of
    nodes to splice in place of the original, or None to remove it. The
    transformer always builds a new tree; the input is never mutated.

    """

    def transform(self, node: Node) -> TransformResult:
        """Transform an AST node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node, list of Node or None
            Transformed node, nodes to splice in its place, or None to remove

        """
        return node.accept(self)

    def transform_inlines(self, nodes: list[Node]) -> list[Node]:
        """Transform a rich text value (a list of inline nodes)."""
        return self._transform_children(nodes)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a list of child nodes, in order.

        Parameters
        ----------
        children : list of Node
            Children to transform

        Returns
        -------
        list of Node
            Transformed children, with list results spliced and None dropped

        """
        result: list[Node] = []
        for child in children:
            transformed = self.transform(child)
            if transformed is None:
                continue
            if isinstance(transformed, list):
                result.extend(transformed)
            else:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Transform a node by rebuilding it around its transformed children.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node
            Transformed node with children replaced

        """
        transformed_children = self._transform_children(get_node_children(node))
        transformed = replace_node_children(node, transformed_children)
        if transformed is node:
            # Leaf node - return a copy
            return copy.copy(node)
        return transformed

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return Document(children=self._transform_children(node.children), metadata=node.metadata.copy())

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Transform a Paragraph node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_heading(self, node: Heading) -> Heading:
        """Transform a Heading node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_text(self, node: Text) -> TransformResult:
        """Transform a Text node."""
        return Text(content=node.content, metadata=node.metadata.copy())

    def visit_emphasis(self, node: Emphasis) -> TransformResult:
        """Transform an Emphasis node."""
        return self._generic_transform(node)

    def visit_strong(self, node: Strong) -> TransformResult:
        """Transform a Strong node."""
        return self._generic_transform(node)

    def visit_span(self, node: Span) -> TransformResult:
        """Transform a Span node, keeping its attributes."""
        return Span(
            content=self._transform_children(node.content),
            identifier=node.identifier,
            classes=list(node.classes),
            attributes=dict(node.attributes),
            metadata=node.metadata.copy(),
        )

    def visit_strikethrough(self, node: Strikethrough) -> TransformResult:
        """Transform a Strikethrough node."""
        return self._generic_transform(node)

    def visit_small_caps(self, node: SmallCaps) -> TransformResult:
        """Transform a SmallCaps node."""
        return self._generic_transform(node)

    def visit_superscript(self, node: Superscript) -> TransformResult:
        """Transform a Superscript node."""
        return self._generic_transform(node)

    def visit_subscript(self, node: Subscript) -> TransformResult:
        """Transform a Subscript node."""
        return self._generic_transform(node)

    def visit_underline(self, node: Underline) -> TransformResult:
        """Transform an Underline node."""
        return self._generic_transform(node)

    def visit_link(self, node: Link) -> TransformResult:
        """Transform a Link node."""
        return Link(
            url=node.url,
            content=self._transform_children(node.content),
            title=node.title,
            metadata=node.metadata.copy(),
        )

    def visit_note(self, node: Note) -> TransformResult:
        """Transform a Note node."""
        return self._generic_transform(node)

    def visit_acronym_reference(self, node: AcronymReference) -> TransformResult:
        """Transform an AcronymReference node (copied unchanged by default)."""
        return copy.copy(node)


def clone_node(node: Node) -> Node:
    """Create a deep copy of an AST node.

    Parameters
    ----------
    node : Node
        Node to clone

    Returns
    -------
    Node
        Deep copy of the node

    """
    return copy.deepcopy(node)


def clone_inlines(nodes: list[Node]) -> list[Node]:
    """Create a deep copy of a rich text value."""
    return [clone_node(node) for node in nodes]
