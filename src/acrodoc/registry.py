#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/registry.py
"""Acronym registry holding the acronyms of one document conversion.

The registry owns the acronym table and both ordering counters:

- the definition order, assigned once at registration;
- the usage order, assigned the first time an acronym is marked as used.

A registry is created empty at the start of a conversion, populated from the
configuration, mutated through ``mark_used`` while references are rendered in
document order, read when the list of acronyms is produced, and discarded.
It is not designed for concurrent mutation: one conversion owns one registry.

Examples
--------
    >>> registry = AcronymRegistry()
    >>> _ = registry.register("RL", "RL", "Reinforcement Learning")
    >>> registry.mark_used("RL")
    True
    >>> registry.mark_used("RL")
    False
    >>> registry.lookup("RL").usage_order
    0

"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterator, Optional, Union

from acrodoc.acronym import Acronym
from acrodoc.ast.nodes import Node
from acrodoc.ast.utils import ensure_inlines
from acrodoc.exceptions import AcronymNotFoundError, DuplicateKeyError

logger = logging.getLogger(__name__)

NameValue = Union[str, Node, list[Node]]


class AcronymRegistry:
    """Registry of the acronyms defined for a document.

    Acronyms are stored as immutable values; marking one as used replaces the
    stored value with a copy carrying its usage order, so values previously
    returned by ``lookup`` are never modified.

    """

    def __init__(self) -> None:
        """Create an empty registry."""
        self._acronyms: dict[str, Acronym] = {}
        self._next_definition_order = 0
        self._next_usage_order = 0

    def register(
        self,
        key: str,
        shortname: NameValue,
        longname: NameValue,
        plural_shortname: Optional[NameValue] = None,
        plural_longname: Optional[NameValue] = None,
    ) -> Acronym:
        """Register a new acronym.

        Parameters
        ----------
        key : str
            Unique acronym key
        shortname : str, Node or list of Node
            Short form; a string becomes a single text leaf
        longname : str, Node or list of Node
            Long form; a string becomes a single text leaf
        plural_shortname : str, Node, list of Node or None, default = None
            Explicit plural short form
        plural_longname : str, Node, list of Node or None, default = None
            Explicit plural long form

        Returns
        -------
        Acronym
            The registered acronym

        Raises
        ------
        DuplicateKeyError
            If ``key`` is already registered

        """
        if key in self._acronyms:
            raise DuplicateKeyError(key)

        acronym = Acronym(
            key=key,
            shortname=ensure_inlines(shortname),
            longname=ensure_inlines(longname),
            definition_order=self._next_definition_order,
            plural_shortname=ensure_inlines(plural_shortname) if plural_shortname is not None else None,
            plural_longname=ensure_inlines(plural_longname) if plural_longname is not None else None,
        )
        self._acronyms[key] = acronym
        self._next_definition_order += 1
        logger.debug(f"Registered acronym '{key}' (definition order {acronym.definition_order})")
        return acronym

    def lookup(self, key: str) -> Acronym:
        """Return the acronym registered under ``key``.

        Raises
        ------
        AcronymNotFoundError
            If ``key`` is not registered

        """
        try:
            return self._acronyms[key]
        except KeyError:
            raise AcronymNotFoundError(key) from None

    def mark_used(self, key: str) -> bool:
        """Mark an acronym as used and report whether this was its first use.

        The first call for a key assigns the next usage order and returns
        True. Later calls leave the state untouched and return False, so the
        caller must capture the returned flag at call time.

        Raises
        ------
        AcronymNotFoundError
            If ``key`` is not registered

        """
        acronym = self.lookup(key)
        if acronym.usage_order is not None:
            return False

        self._acronyms[key] = replace(acronym, usage_order=self._next_usage_order)
        logger.debug(f"First use of acronym '{key}' (usage order {self._next_usage_order})")
        self._next_usage_order += 1
        return True

    def is_first_use(self, key: str) -> bool:
        """Return whether the next rendering of ``key`` would be its first use."""
        return self.lookup(key).usage_order is None

    def all_entries(self) -> list[Acronym]:
        """Return a snapshot of all registered acronyms, in definition order."""
        return list(self._acronyms.values())

    def keys(self) -> list[str]:
        """Return the registered keys, in definition order."""
        return list(self._acronyms)

    def __contains__(self, key: object) -> bool:
        return key in self._acronyms

    def __len__(self) -> int:
        return len(self._acronyms)

    def __iter__(self) -> Iterator[Acronym]:
        return iter(self.all_entries())
