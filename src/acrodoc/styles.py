#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/styles.py
"""Rendering styles for acronym references.

A style turns an acronym into the rich text fragment that replaces one
reference in the document. Most styles depend on whether this is the
acronym's first use in the document or a later ("next") use, in the manner of
the LaTeX ``glossaries`` package:

=================  =================================  ==============
style              first use                          next use
=================  =================================  ==============
``long-short``     long name (short name)             short name
``short-long``     short name (long name)             short name
``long-long``      long name                          long name
``short-footnote`` short name, with a footnote        short name
                   "short name: long name"
=================  =================================  ==============

When links are inserted, the whole fragment is wrapped in a single link to the
acronym's anchor in the list of acronyms. For ``short-footnote`` the first-use
text stays unlinked and only the short name inside the footnote is linked.

Examples
--------
    >>> from acrodoc.ast import extract_text
    >>> from acrodoc.registry import AcronymRegistry
    >>> registry = AcronymRegistry()
    >>> _ = registry.register("RL", "RL", "Reinforcement Learning")
    >>> engine = StyleEngine(registry)
    >>> extract_text(engine.render("RL", "long-short", insert_links=False))
    'Reinforcement Learning (RL)'
    >>> extract_text(engine.render("RL", "long-short", insert_links=False))
    'RL'

"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from acrodoc.acronym import Acronym
from acrodoc.ast.nodes import Link, Node, Note, Text
from acrodoc.ast.transforms import clone_inlines
from acrodoc.case import CaseKind, CaseTarget, resolve_case_kind, resolve_case_target, transform_case
from acrodoc.constants import DEFAULT_ID_PREFIX, DEFAULT_PLURAL_SUFFIX
from acrodoc.exceptions import UnknownStyleError
from acrodoc.utils.text import key_to_link

if TYPE_CHECKING:
    from acrodoc.registry import AcronymRegistry

logger = logging.getLogger(__name__)


class AcronymStyle(str, Enum):
    """The closed set of rendering styles."""

    LONG_SHORT = "long-short"
    SHORT_LONG = "short-long"
    LONG_LONG = "long-long"
    SHORT_FOOTNOTE = "short-footnote"


def resolve_style(style: Union[AcronymStyle, str, None]) -> AcronymStyle:
    """Resolve a style name.

    Raises
    ------
    UnknownStyleError
        If ``style`` is not one of the recognized style names

    """
    if isinstance(style, AcronymStyle):
        return style
    try:
        return AcronymStyle(style)
    except ValueError:
        raise UnknownStyleError(style) from None


def _create_element(content: list[Node], insert_links: bool, url: str) -> list[Node]:
    """Wrap ``content`` in a link to ``url`` when links are requested."""
    inlines = clone_inlines(content)
    if insert_links:
        return [Link(url=url, content=inlines)]
    return inlines


def _make_parenthesized(front: list[Node], back: list[Node], insert_links: bool, url: str) -> list[Node]:
    """Join two names as ``front (back)``, linking the whole phrase if requested."""
    phrase = [*clone_inlines(front), Text(content=" ("), *clone_inlines(back), Text(content=")")]
    if insert_links:
        return [Link(url=url, content=phrase)]
    return phrase


def _render_long_short(acronym: Acronym, insert_links: bool, is_first_use: bool, url: str) -> list[Node]:
    if is_first_use:
        return _make_parenthesized(acronym.longname, acronym.shortname, insert_links, url)
    return _create_element(acronym.shortname, insert_links, url)


def _render_short_long(acronym: Acronym, insert_links: bool, is_first_use: bool, url: str) -> list[Node]:
    if is_first_use:
        return _make_parenthesized(acronym.shortname, acronym.longname, insert_links, url)
    return _create_element(acronym.shortname, insert_links, url)


def _render_long_long(acronym: Acronym, insert_links: bool, is_first_use: bool, url: str) -> list[Node]:
    return _create_element(acronym.longname, insert_links, url)


def _render_short_footnote(acronym: Acronym, insert_links: bool, is_first_use: bool, url: str) -> list[Node]:
    if not is_first_use:
        return _create_element(acronym.shortname, insert_links, url)

    # The main text is never linked; the footnote is "shortname: longname"
    note_content = [
        *_create_element(acronym.shortname, insert_links, url),
        Text(content=": "),
        *clone_inlines(acronym.longname),
    ]
    return [*clone_inlines(acronym.shortname), Note(content=note_content)]


def render_acronym(
    acronym: Acronym,
    style: Union[AcronymStyle, str],
    insert_links: bool,
    is_first_use: bool,
    plural: bool = False,
    case_target: Union[CaseTarget, str, None] = None,
    case: Union[CaseKind, str, None] = None,
    id_prefix: str = DEFAULT_ID_PREFIX,
    plural_suffix: str = DEFAULT_PLURAL_SUFFIX,
) -> list[Node]:
    """Render an acronym into a rich text fragment.

    The steps are applied in a fixed order: pluralization, then case
    transformation, then dispatch to the style. The acronym itself is never
    modified; each step works on a new value.

    Parameters
    ----------
    acronym : Acronym
        The acronym to render (assumed to exist)
    style : AcronymStyle or str
        Rendering style
    insert_links : bool
        Whether to wrap the fragment in a link to the acronym's anchor
    is_first_use : bool
        Whether this is the first use of the acronym in the document
    plural : bool, default = False
        Use the plural forms of the names
    case_target : CaseTarget, str or None, default = None
        Which name(s) the case transformation applies to
    case : CaseKind, str or None, default = None
        Case transformation; unsupported values are ignored
    id_prefix : str, default = "acronyms_"
        Prefix of the anchor identifiers
    plural_suffix : str, default = "s"
        Suffix appended to plain names that have no explicit plural form

    Returns
    -------
    list of Node
        The rendered fragment. For ``short-footnote`` on first use, the last
        node is the attached ``Note``.

    Raises
    ------
    MissingPluralVariantError
        If a plural is requested for a formatted name without a plural form
    UnknownStyleError
        If ``style`` is not recognized

    """
    if plural:
        acronym = acronym.pluralized(suffix=plural_suffix)

    target = resolve_case_target(case_target)
    case_kind = resolve_case_kind(case)
    if target is not None and case_kind is not None:
        acronym = acronym.with_names(
            transform_case(acronym.shortname, case_kind) if target.applies_to_short else acronym.shortname,
            transform_case(acronym.longname, case_kind) if target.applies_to_long else acronym.longname,
        )

    resolved = resolve_style(style)
    url = key_to_link(acronym.key, id_prefix=id_prefix)

    if resolved is AcronymStyle.LONG_SHORT:
        return _render_long_short(acronym, insert_links, is_first_use, url)
    elif resolved is AcronymStyle.SHORT_LONG:
        return _render_short_long(acronym, insert_links, is_first_use, url)
    elif resolved is AcronymStyle.LONG_LONG:
        return _render_long_long(acronym, insert_links, is_first_use, url)
    elif resolved is AcronymStyle.SHORT_FOOTNOTE:
        return _render_short_footnote(acronym, insert_links, is_first_use, url)
    else:
        raise UnknownStyleError(style)


class StyleEngine:
    """Render acronyms of a registry, tracking first uses.

    Parameters
    ----------
    registry : AcronymRegistry
        Registry of the current conversion
    id_prefix : str, default = "acronyms_"
        Prefix of the anchor identifiers used as link targets
    plural_suffix : str, default = "s"
        Suffix appended to plain names that have no explicit plural form

    """

    def __init__(
        self,
        registry: AcronymRegistry,
        id_prefix: str = DEFAULT_ID_PREFIX,
        plural_suffix: str = DEFAULT_PLURAL_SUFFIX,
    ) -> None:
        """Initialize the engine."""
        self.registry = registry
        self.id_prefix = id_prefix
        self.plural_suffix = plural_suffix

    def render(
        self,
        acronym: Union[Acronym, str],
        style: Union[AcronymStyle, str],
        insert_links: bool = True,
        is_first_use: Optional[bool] = None,
        plural: bool = False,
        case_target: Union[CaseTarget, str, None] = None,
        case: Union[CaseKind, str, None] = None,
    ) -> list[Node]:
        """Render one acronym reference.

        When ``is_first_use`` is None, the acronym is marked as used in the
        registry and the first-use flag is taken from that call. Each
        reference must therefore be rendered exactly once, in document order.

        Parameters
        ----------
        acronym : Acronym or str
            The acronym, or its key
        style : AcronymStyle or str
            Rendering style
        insert_links : bool, default = True
            Whether to link the fragment to the acronym's anchor
        is_first_use : bool or None, default = None
            Explicit first-use flag; derived from the registry when None
        plural : bool, default = False
            Use the plural forms of the names
        case_target : CaseTarget, str or None, default = None
            Which name(s) the case transformation applies to
        case : CaseKind, str or None, default = None
            Case transformation

        Returns
        -------
        list of Node
            The rendered fragment

        """
        key = acronym if isinstance(acronym, str) else acronym.key
        if isinstance(acronym, str):
            acronym = self.registry.lookup(key)

        if is_first_use is None:
            is_first_use = self.registry.mark_used(key)

        logger.debug(f"Rendering acronym '{key}' with style '{style}' (first use: {is_first_use})")
        return render_acronym(
            acronym,
            style,
            insert_links=insert_links,
            is_first_use=is_first_use,
            plural=plural,
            case_target=case_target,
            case=case,
            id_prefix=self.id_prefix,
            plural_suffix=self.plural_suffix,
        )

