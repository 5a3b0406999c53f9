#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/sorting.py
"""Sorting strategies for the list of acronyms.

A sorting criterion maps an acronym to a sort key:

- ``alphabetical``: the stringified short name, case-sensitive;
- ``alphabetical-case-insensitive``: the same, upper-cased;
- ``initial``: the definition order;
- ``usage``: the usage order. Unused acronyms have no usage order, so this
  criterion cannot be combined with ``include_unused``.

Only ``initial`` is a strict total order; ties of the other criteria keep the
input order (Python's sort is stable) but callers should not rely on it.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Iterable, Union

from acrodoc.acronym import Acronym
from acrodoc.exceptions import InvalidConfigurationError, UnknownSortCriterionError

logger = logging.getLogger(__name__)


class SortCriterion(str, Enum):
    """The closed set of sorting criteria."""

    ALPHABETICAL = "alphabetical"
    ALPHABETICAL_CASE_INSENSITIVE = "alphabetical-case-insensitive"
    INITIAL = "initial"
    USAGE = "usage"


_SORT_KEYS: dict[SortCriterion, Callable[[Acronym], Any]] = {
    SortCriterion.ALPHABETICAL: lambda acronym: acronym.shortname_text,
    SortCriterion.ALPHABETICAL_CASE_INSENSITIVE: lambda acronym: acronym.shortname_text.upper(),
    SortCriterion.INITIAL: lambda acronym: acronym.definition_order,
    SortCriterion.USAGE: lambda acronym: acronym.usage_order,
}


def resolve_sort_criterion(criterion: Union[SortCriterion, str, None]) -> SortCriterion:
    """Resolve a sorting criterion name.

    Raises
    ------
    UnknownSortCriterionError
        If ``criterion`` is not recognized

    """
    if isinstance(criterion, SortCriterion):
        return criterion
    try:
        return SortCriterion(criterion)
    except ValueError:
        raise UnknownSortCriterionError(criterion) from None


def validate_sorting(criterion: Union[SortCriterion, str, None], include_unused: bool) -> SortCriterion:
    """Validate a sorting criterion together with the ``include_unused`` flag.

    Raises
    ------
    UnknownSortCriterionError
        If ``criterion`` is not recognized
    InvalidConfigurationError
        If sorting by ``usage`` while including unused acronyms

    """
    resolved = resolve_sort_criterion(criterion)
    if resolved is SortCriterion.USAGE and include_unused:
        raise InvalidConfigurationError(
            "Cannot sort by `usage` when `include_unused` is true. "
            "Please set another sorting or set `include_unused` to `false`.",
            parameter_name="sorting",
            parameter_value=criterion,
        )
    return resolved


def sort_acronyms(
    entries: Iterable[Acronym],
    criterion: Union[SortCriterion, str],
    include_unused: bool,
) -> list[Acronym]:
    """Produce the ordered list of acronyms.

    Parameters
    ----------
    entries : iterable of Acronym
        Acronyms to sort, e.g. ``registry.all_entries()``
    criterion : SortCriterion or str
        Sorting criterion
    include_unused : bool
        Whether acronyms that were never rendered are kept

    Returns
    -------
    list of Acronym
        New sorted list

    Raises
    ------
    UnknownSortCriterionError
        If ``criterion`` is not recognized
    InvalidConfigurationError
        If sorting by ``usage`` while including unused acronyms

    """
    resolved = validate_sorting(criterion, include_unused)

    selected = [acronym for acronym in entries if include_unused or acronym.usage_order is not None]
    logger.debug(f"Sorting {len(selected)} acronyms by '{resolved.value}' (include_unused={include_unused})")
    return sorted(selected, key=_SORT_KEYS[resolved])
