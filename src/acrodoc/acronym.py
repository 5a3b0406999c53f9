#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/acronym.py
"""The acronym entity.

An acronym is addressed by a unique key and carries a short and a long rich
text name, optional plural variants of both, and the two ordering ranks used
by the list of acronyms: the definition order (fixed at registration) and the
usage order (fixed the first time the acronym is rendered).

Acronym values are immutable. Every transformation applied while rendering
(pluralization, case) produces a new value.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from acrodoc.ast.nodes import Node, Text
from acrodoc.ast.utils import extract_text, is_plain_text
from acrodoc.constants import DEFAULT_PLURAL_SUFFIX
from acrodoc.exceptions import MissingPluralVariantError


@dataclass(frozen=True)
class Acronym:
    """An acronym definition and its ordering state.

    Parameters
    ----------
    key : str
        Unique identifier of the acronym
    shortname : list of Node
        Short form (e.g., "RL")
    longname : list of Node
        Long form (e.g., "Reinforcement Learning")
    definition_order : int
        Rank among registered acronyms, in registration order
    plural_shortname : list of Node or None, default = None
        Explicit plural short form
    plural_longname : list of Node or None, default = None
        Explicit plural long form
    usage_order : int or None, default = None
        Rank among used acronyms, in order of first use; None while unused

    """

    key: str
    shortname: list[Node]
    longname: list[Node]
    definition_order: int
    plural_shortname: Optional[list[Node]] = None
    plural_longname: Optional[list[Node]] = None
    usage_order: Optional[int] = None

    @property
    def is_used(self) -> bool:
        """Whether the acronym has been rendered at least once."""
        return self.usage_order is not None

    @property
    def shortname_text(self) -> str:
        """The shortname as plain text, used for alphabetical sorting."""
        return extract_text(self.shortname)

    @property
    def longname_text(self) -> str:
        """The longname as plain text."""
        return extract_text(self.longname)

    def with_names(self, shortname: list[Node], longname: list[Node]) -> Acronym:
        """Return a copy with the short and long names replaced."""
        return replace(self, shortname=shortname, longname=longname)

    def pluralized(self, suffix: str = DEFAULT_PLURAL_SUFFIX) -> Acronym:
        """Return a copy whose names are the plural forms.

        An explicit plural variant always wins. A plain name (a single text
        leaf) without a variant falls back to appending ``suffix``. A
        formatted name without a variant cannot be pluralized safely.

        Raises
        ------
        MissingPluralVariantError
            If a formatted name has no explicit plural variant

        """
        return self.with_names(
            _plural_of(self.key, "shortname", self.shortname, self.plural_shortname, suffix),
            _plural_of(self.key, "longname", self.longname, self.plural_longname, suffix),
        )


def _plural_of(
    key: str,
    name_field: str,
    name: list[Node],
    plural: Optional[list[Node]],
    suffix: str,
) -> list[Node]:
    if plural is not None:
        return list(plural)
    if not is_plain_text(name):
        raise MissingPluralVariantError(key, name_field)
    return [Text(content=extract_text(name) + suffix)]
