#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/ast/nodes.py
"""AST node classes for rich text and acronym references.

This module defines the node hierarchy used to represent acronym names and the
fragments rendered from them. A rich text value is simply a ``list`` of inline
nodes; only ``Text`` leaves hold literal characters, every other inline node
wraps a nested list of inline nodes.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Block-level nodes (used by the document walker):
    - Document, Paragraph, Heading

Inline leaf:
    - Text

Styled wrappers (the closed set a case transformation descends into):
    - Emphasis, Strong, Span, Strikethrough
    - SmallCaps, Superscript, Subscript, Underline

Other inline nodes produced or consumed while rendering:
    - Link, Note, AcronymReference

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, Optional

RichText = list["Node"]


class Node(ABC):
    """Base class for all AST nodes.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass
class Document(Node):
    """Root document node containing block-level children.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this document."""
        return visitor.visit_document(self)


@dataclass
class Paragraph(Node):
    """Paragraph node holding inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes in the paragraph
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this paragraph."""
        return visitor.visit_paragraph(self)


@dataclass
class Heading(Node):
    """Heading node.

    Parameters
    ----------
    level : int
        Heading level (1-6)
    content : list of Node, default = empty list
        Inline nodes forming the heading text
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this heading."""
        return visitor.visit_heading(self)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass
class Text(Node):
    """Plain text node.

    The only node kind holding literal characters.

    Parameters
    ----------
    content : str
        Text content
    metadata : dict, default = empty dict
        Text metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this text.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_text method

        Returns
        -------
        Any
            Result from visitor.visit_text(self)

        """
        return visitor.visit_text(self)


@dataclass
class Emphasis(Node):
    """Emphasis (italic) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with emphasis
    metadata : dict, default = empty dict
        Emphasis metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this emphasis."""
        return visitor.visit_emphasis(self)


@dataclass
class Strong(Node):
    """Strong (bold) node.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes with strong emphasis
    metadata : dict, default = empty dict
        Strong metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strong emphasis."""
        return visitor.visit_strong(self)


@dataclass
class Span(Node):
    """Generic inline container with attributes.

    Mirrors the pandoc ``Span`` element: the attributes are carried through
    every transformation untouched.

    Parameters
    ----------
    content : list of Node, default = empty list
        Wrapped inline nodes
    identifier : str or None, default = None
        Element identifier
    classes : list of str, default = empty list
        Class names
    attributes : dict of str to str, default = empty dict
        Additional key/value attributes
    metadata : dict, default = empty dict
        Span metadata

    """

    content: list[Node] = field(default_factory=list)
    identifier: Optional[str] = None
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this span."""
        return visitor.visit_span(self)


@dataclass
class Strikethrough(Node):
    """Strikethrough node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this strikethrough."""
        return visitor.visit_strikethrough(self)


@dataclass
class SmallCaps(Node):
    """Small capitals node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this small caps run."""
        return visitor.visit_small_caps(self)


@dataclass
class Superscript(Node):
    """Superscript node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this superscript."""
        return visitor.visit_superscript(self)


@dataclass
class Subscript(Node):
    """Subscript node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this subscript."""
        return visitor.visit_subscript(self)


@dataclass
class Underline(Node):
    """Underline node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this underline."""
        return visitor.visit_underline(self)


@dataclass
class Link(Node):
    """Link node.

    Represents a hyperlink; acronym renderings link to the acronym's anchor
    in the list of acronyms.

    Parameters
    ----------
    url : str
        Link destination (``#anchor`` for acronym links)
    content : list of Node, default = empty list
        Inline nodes representing link text
    title : str or None, default = None
        Optional link title (tooltip)
    metadata : dict, default = empty dict
        Link metadata

    """

    url: str
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this link."""
        return visitor.visit_link(self)


@dataclass
class Note(Node):
    """Inline footnote node.

    Holds the footnote body inline, at the position of its reference, the
    way pandoc's ``Note`` element does.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes forming the footnote body
    metadata : dict, default = empty dict
        Note metadata

    """

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this note."""
        return visitor.visit_note(self)


@dataclass
class AcronymReference(Node):
    """Placeholder for an acronym reference in a document.

    A document walker replaces each reference, in document order, by the
    fragment rendered for it. Every option left as ``None`` falls back to the
    document-wide configuration.

    Parameters
    ----------
    key : str
        Acronym key
    style : str or None, default = None
        Rendering style override
    plural : bool, default = False
        Whether the plural form is requested
    case : str or None, default = None
        Case transformation (``upper``, ``lower``, ``sentence``)
    case_target : str or None, default = None
        Which name the case applies to (``short``, ``long``, ``both``)
    insert_links : bool or None, default = None
        Link insertion override
    first_use : bool or None, default = None
        Force first-use (``True``) or next-use (``False``) rendering
    metadata : dict, default = empty dict
        Reference metadata

    """

    key: str
    style: Optional[str] = None
    plural: bool = False
    case: Optional[str] = None
    case_target: Optional[str] = None
    insert_links: Optional[bool] = None
    first_use: Optional[bool] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this reference."""
        return visitor.visit_acronym_reference(self)


STYLED_NODE_TYPES: tuple[type[Node], ...] = (
    Emphasis,
    Strong,
    Span,
    Strikethrough,
    SmallCaps,
    Superscript,
    Subscript,
    Underline,
)

_INLINE_CONTAINER_TYPES: tuple[type[Node], ...] = STYLED_NODE_TYPES + (Paragraph, Heading, Link, Note)


def get_node_children(node: Node) -> list[Node]:
    """Get all child nodes from a node.

    Parameters
    ----------
    node : Node
        The node to get children from

    Returns
    -------
    list of Node
        List of child nodes (empty list if node has no children)

    Examples
    --------
    >>> strong = Strong(content=[Text("Reinforcement"), Emphasis(content=[Text(" Learning")])])
    >>> len(get_node_children(strong))
    2

    """
    if isinstance(node, Document):
        return list(node.children)

    if isinstance(node, _INLINE_CONTAINER_TYPES):
        return list(node.content)  # type: ignore[attr-defined]

    # Leaf nodes (no children)
    return []


def replace_node_children(node: Node, new_children: list[Node]) -> Node:
    """Create a copy of a node with replaced children.

    Every other field (span attributes, link URL, heading level) is copied
    over unchanged.

    Parameters
    ----------
    node : Node
        The node to copy and modify
    new_children : list of Node
        New children to use in the copy

    Returns
    -------
    Node
        New node with replaced children, or the node itself for leaves

    """
    if isinstance(node, Document):
        return replace(node, children=new_children, metadata=node.metadata.copy())

    if isinstance(node, _INLINE_CONTAINER_TYPES):
        return replace(node, content=new_children, metadata=node.metadata.copy())  # type: ignore[call-arg]

    # Leaf nodes - return as-is
    return node


def is_styled_node(node: Node) -> bool:
    """Return whether ``node`` is one of the styled wrapper kinds."""
    return isinstance(node, STYLED_NODE_TYPES)
