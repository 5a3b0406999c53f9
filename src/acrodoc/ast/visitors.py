#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for traversing and processing AST
nodes. Visitors keep the algorithms (case transformation, reference
substitution, markdown rendering) separate from the node structure itself.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from acrodoc.ast.nodes import (
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
)


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node type. All visit
    methods accept a node and return Any (typically None for side-effect
    visitors, or new nodes for transforming visitors).

    Examples
    --------
    Simple visitor that counts text leaves:

        >>> class TextCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...
        ...     def visit_text(self, node):
        ...         self.count += 1

    """

    @abstractmethod
    def visit_document(self, node: Document) -> Any:
        """Visit a Document node.

        Parameters
        ----------
        node : Document
            The document node to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_paragraph(self, node: Paragraph) -> Any:
        """Visit a Paragraph node."""
        pass

    @abstractmethod
    def visit_heading(self, node: Heading) -> Any:
        """Visit a Heading node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node.

        Parameters
        ----------
        node : Text
            The text leaf to visit

        Returns
        -------
        Any
            Result of processing this node

        """
        pass

    @abstractmethod
    def visit_emphasis(self, node: Emphasis) -> Any:
        """Visit an Emphasis node."""
        pass

    @abstractmethod
    def visit_strong(self, node: Strong) -> Any:
        """Visit a Strong node."""
        pass

    @abstractmethod
    def visit_span(self, node: Span) -> Any:
        """Visit a Span node."""
        pass

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough) -> Any:
        """Visit a Strikethrough node."""
        pass

    @abstractmethod
    def visit_small_caps(self, node: SmallCaps) -> Any:
        """Visit a SmallCaps node."""
        pass

    @abstractmethod
    def visit_superscript(self, node: Superscript) -> Any:
        """Visit a Superscript node."""
        pass

    @abstractmethod
    def visit_subscript(self, node: Subscript) -> Any:
        """Visit a Subscript node."""
        pass

    @abstractmethod
    def visit_underline(self, node: Underline) -> Any:
        """Visit an Underline node."""
        pass

    @abstractmethod
    def visit_link(self, node: Link) -> Any:
        """Visit a Link node."""
        pass

    @abstractmethod
    def visit_note(self, node: Note) -> Any:
        """Visit a Note node."""
        pass

    @abstractmethod
    def visit_acronym_reference(self, node: AcronymReference) -> Any:
        """Visit an AcronymReference node.

        Parameters
        ----------
        node : AcronymReference
            The unresolved acronym reference

        Returns
        -------
        Any
            Result of processing this node

        """
        pass
