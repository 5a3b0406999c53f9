#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/ast/utils.py
"""Utility functions for working with rich text values.

Functions
---------
extract_text : Extract plain text from a node or list of nodes
ensure_inlines : Normalize a string or rich text value to a list of nodes
is_plain_text : Check whether a rich text value carries no formatting

Examples
--------
Stringify an acronym long name:

    >>> from acrodoc.ast import Emphasis, Text
    >>> from acrodoc.ast.utils import extract_text
    >>>
    >>> extract_text([Text(content="Reinforcement "), Emphasis(content=[Text(content="Learning")])])
    'Reinforcement Learning'

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union

from acrodoc.ast.nodes import Text, get_node_children

if TYPE_CHECKING:
    from acrodoc.ast.nodes import Node


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = "") -> str:
    """Extract plain text from a node or list of nodes.

    Text leaves are concatenated in document order. Unlike a word count
    extraction, the default joiner is empty: leaves of a rich text value
    already carry their own spacing.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = ""
        String inserted between the text of sibling nodes

    Returns
    -------
    str
        Concatenated text content from all Text nodes

    """
    if isinstance(node_or_nodes, list):
        return joiner.join(part for part in (extract_text(node, joiner=joiner) for node in node_or_nodes) if part)

    node = node_or_nodes
    if isinstance(node, Text):
        return node.content

    return extract_text(get_node_children(node), joiner=joiner)


def ensure_inlines(value: Union[str, Node, list[Node], None]) -> list[Node]:
    """Normalize a name value to a rich text list.

    Parameters
    ----------
    value : str, Node, list of Node or None
        A plain string, a single inline node or a rich text value

    Returns
    -------
    list of Node
        A new list (the nodes themselves are not copied); empty for None

    """
    if value is None:
        return []
    if isinstance(value, str):
        return [Text(content=value)]
    if isinstance(value, list):
        return list(value)
    return [value]


def is_plain_text(nodes: list[Node]) -> bool:
    """Return whether a rich text value is a single unformatted leaf.

    An empty value counts as plain as well. Anything with a wrapper node, or
    split over several leaves, is considered formatted.
    """
    if not nodes:
        return True
    return len(nodes) == 1 and isinstance(nodes[0], Text)


__all__ = [
    "extract_text",
    "ensure_inlines",
    "is_plain_text",
]
