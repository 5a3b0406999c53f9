#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options controlling acronym rendering and listing.

This module defines the immutable options object read from the ``acronyms``
section of the configuration. Option values are validated when the object is
created, so an invalid configuration aborts the conversion before any
reference is rendered.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, fields, replace
from typing import Any, Mapping

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from acrodoc.constants import (
    DEFAULT_ID_PREFIX,
    DEFAULT_INCLUDE_UNUSED,
    DEFAULT_INSERT_LINKS,
    DEFAULT_NON_EXISTING,
    DEFAULT_ON_DUPLICATE,
    DEFAULT_PLURAL_SUFFIX,
    DEFAULT_SORTING,
    DEFAULT_STYLE,
    NON_EXISTING_MODES,
    ON_DUPLICATE_MODES,
    NonExistingMode,
    OnDuplicateMode,
)
from acrodoc.exceptions import InvalidConfigurationError
from acrodoc.sorting import validate_sorting
from acrodoc.styles import resolve_style
from acrodoc.utils.text import str_to_boolean

_BOOLEAN_FIELDS = ("include_unused", "insert_links")


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class AcronymsOptions(CloneFrozenMixin):
    """Configuration of acronym rendering for one document.

    Parameters
    ----------
    style : str, default "long-short"
        Default rendering style of references
    sorting : str, default "alphabetical"
        Sorting criterion of the list of acronyms
    include_unused : bool, default True
        Whether acronyms never referenced appear in the list of acronyms
    insert_links : bool, default True
        Whether references link to the acronym's entry in the list
    id_prefix : str, default "acronyms_"
        Prefix of the anchor identifiers
    non_existing : {"key", "??", "error"}, default "key"
        What replaces a reference to an unknown key
    on_duplicate : {"warn", "error", "keep"}, default "warn"
        What happens when a key is defined twice in the configuration
    plural_suffix : str, default "s"
        Suffix appended to plain names without an explicit plural form
    fromfile : list of str, default empty
        Additional files whose acronym definitions are loaded first

    """

    style: str = field(
        default=DEFAULT_STYLE,
        metadata={"help": "Default rendering style (long-short, short-long, long-long, short-footnote)"},
    )
    sorting: str = field(
        default=DEFAULT_SORTING,
        metadata={"help": "Sorting of the list of acronyms (alphabetical, alphabetical-case-insensitive, initial, usage)"},
    )
    include_unused: bool = field(
        default=DEFAULT_INCLUDE_UNUSED,
        metadata={"help": "Include acronyms that are never referenced in the list of acronyms"},
    )
    insert_links: bool = field(
        default=DEFAULT_INSERT_LINKS,
        metadata={"help": "Link each reference to the acronym's entry in the list of acronyms"},
    )
    id_prefix: str = field(
        default=DEFAULT_ID_PREFIX,
        metadata={"help": "Prefix of the generated anchor identifiers"},
    )
    non_existing: NonExistingMode = field(
        default=DEFAULT_NON_EXISTING,
        metadata={"help": "Replacement for references to unknown keys: the key, '??', or an error"},
    )
    on_duplicate: OnDuplicateMode = field(
        default=DEFAULT_ON_DUPLICATE,
        metadata={"help": "Handling of keys defined twice: warn and keep the first, error, or silently keep"},
    )
    plural_suffix: str = field(
        default=DEFAULT_PLURAL_SUFFIX,
        metadata={"help": "Suffix of the default plural form of plain names"},
    )
    fromfile: tuple[str, ...] = field(
        default_factory=tuple,
        metadata={"help": "Additional acronym definition files, loaded before the inline keys"},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        InvalidConfigurationError
            If a value is out of range or options conflict
        UnknownStyleError
            If ``style`` is not recognized
        UnknownSortCriterionError
            If ``sorting`` is not recognized

        """
        resolve_style(self.style)
        validate_sorting(self.sorting, self.include_unused)

        if self.non_existing not in NON_EXISTING_MODES:
            raise InvalidConfigurationError(
                f"non_existing must be one of {', '.join(NON_EXISTING_MODES)}, got '{self.non_existing}'",
                parameter_name="non_existing",
                parameter_value=self.non_existing,
            )
        if self.on_duplicate not in ON_DUPLICATE_MODES:
            raise InvalidConfigurationError(
                f"on_duplicate must be one of {', '.join(ON_DUPLICATE_MODES)}, got '{self.on_duplicate}'",
                parameter_name="on_duplicate",
                parameter_value=self.on_duplicate,
            )

    @classmethod
    def from_dict(cls, mapping: Mapping[str, Any]) -> AcronymsOptions:
        """Create options from a raw configuration mapping.

        Unknown entries (such as the ``keys`` definitions) are ignored, boolean
        options accept yes/no style strings, and ``fromfile`` accepts a single
        path or a list of paths.

        Parameters
        ----------
        mapping : Mapping
            The ``acronyms`` section of the configuration

        Returns
        -------
        AcronymsOptions
            Validated options

        """
        known = {f.name for f in fields(cls)}
        values: dict[str, Any] = {}
        for name, value in mapping.items():
            name = name.replace("-", "_")
            if name not in known or value is None:
                continue
            if name in _BOOLEAN_FIELDS:
                value = str_to_boolean(value)
            elif name == "fromfile":
                value = (str(value),) if isinstance(value, str) else tuple(str(item) for item in value)
            else:
                value = str(value)
            values[name] = value
        return cls(**values)
