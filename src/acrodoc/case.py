#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/case.py
"""Case transformation of rich text that preserves formatting.

The transformation only rewrites the characters of ``Text`` leaves; every
styled wrapper (emphasis, strong, span, ...) is rebuilt around its transformed
children so that the formatting structure is unchanged.

Sentence case treats the leaves of the whole tree, in pre-order, as one
logical string: only the first alphabetic character of that string is
upper-cased, wherever it lives.

Examples
--------
    >>> from acrodoc.ast import Emphasis, Text
    >>> nodes = [Text(content=""), Emphasis(content=[Text(content="abc")]), Text(content="def")]
    >>> result = transform_case(nodes, "sentence")
    >>> result[1].content[0].content, result[2].content
    ('Abc', 'def')

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Union

from acrodoc.ast.nodes import AcronymReference, Link, Node, Note, Text
from acrodoc.ast.transforms import NodeTransformer, TransformResult, clone_node

logger = logging.getLogger(__name__)


class CaseKind(str, Enum):
    """Supported case transformations."""

    UPPER = "upper"
    LOWER = "lower"
    SENTENCE = "sentence"


class CaseTarget(str, Enum):
    """Which acronym name(s) a case transformation applies to."""

    SHORT = "short"
    LONG = "long"
    BOTH = "both"

    @property
    def applies_to_short(self) -> bool:
        """Whether the shortname is transformed."""
        return self in (CaseTarget.SHORT, CaseTarget.BOTH)

    @property
    def applies_to_long(self) -> bool:
        """Whether the longname is transformed."""
        return self in (CaseTarget.LONG, CaseTarget.BOTH)


def _capitalize_first_alpha(text: str) -> tuple[str, bool]:
    """Upper-case the first alphabetic character of ``text``.

    Returns
    -------
    tuple of (str, bool)
        The new text, and whether an alphabetic character was found

    """
    for index, char in enumerate(text):
        if char.isalpha():
            return text[:index] + char.upper() + text[index + 1 :], True
    return text, False


class CaseTransformer(NodeTransformer):
    """Rewrite the text leaves of a rich text value according to a case kind.

    Only text leaves and the styled wrappers are descended into; links, notes
    and unresolved references are copied untouched and are invisible to the
    sentence-case scan.

    Parameters
    ----------
    case : CaseKind
        The case transformation to apply

    """

    def __init__(self, case: CaseKind) -> None:
        """Initialize the transformer."""
        self.case = case
        self._capitalized = False

    def transform_inlines(self, nodes: list[Node]) -> list[Node]:
        """Transform a rich text value, starting a fresh sentence-case scan."""
        self._capitalized = False
        return super().transform_inlines(nodes)

    def visit_text(self, node: Text) -> TransformResult:
        """Apply the case kind to a single leaf."""
        content = node.content
        if self.case is CaseKind.UPPER:
            content = content.upper()
        elif self.case is CaseKind.LOWER:
            content = content.lower()
        elif self.case is CaseKind.SENTENCE and not self._capitalized:
            content, self._capitalized = _capitalize_first_alpha(content)
        return Text(content=content, metadata=node.metadata.copy())

    def visit_link(self, node: Link) -> TransformResult:
        """Copy links untouched."""
        return clone_node(node)

    def visit_note(self, node: Note) -> TransformResult:
        """Copy notes untouched."""
        return clone_node(node)

    def visit_acronym_reference(self, node: AcronymReference) -> TransformResult:
        """Copy unresolved references untouched."""
        return clone_node(node)


def resolve_case_kind(case: Union[CaseKind, str, None]) -> Optional[CaseKind]:
    """Resolve a case kind value, returning None for none or unsupported values.

    Unsupported values are logged and treated as no transformation.
    """
    if case is None or isinstance(case, CaseKind):
        return case
    if str(case).lower() in ("", "none"):
        return None
    try:
        return CaseKind(str(case).lower())
    except ValueError:
        logger.warning("Unsupported case transformation '%s' ignored; expected one of upper, lower, sentence", case)
        return None


def resolve_case_target(case_target: Union[CaseTarget, str, None]) -> Optional[CaseTarget]:
    """Resolve a case target value, returning None for none or unsupported values."""
    if case_target is None or isinstance(case_target, CaseTarget):
        return case_target
    if str(case_target).lower() in ("", "none"):
        return None
    try:
        return CaseTarget(str(case_target).lower())
    except ValueError:
        logger.warning("Unsupported case target '%s' ignored; expected one of short, long, both", case_target)
        return None


def transform_case(nodes: list[Node], case: Union[CaseKind, str, None]) -> list[Node]:
    """Transform the case of a rich text value while preserving its structure.

    Parameters
    ----------
    nodes : list of Node
        Rich text value to transform; it is not modified
    case : CaseKind, str or None
        ``upper``, ``lower``, ``sentence``, or None for no transformation.
        Unsupported values are a no-op.

    Returns
    -------
    list of Node
        A new list holding the transformed tree

    """
    case_kind = resolve_case_kind(case)
    if case_kind is None:
        return list(nodes)
    return CaseTransformer(case_kind).transform_inlines(nodes)
