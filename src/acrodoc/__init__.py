"""acrodoc - Acronym management for markdown documents.

acrodoc keeps a registry of acronyms and replaces references to them with
text rendered in a configurable style, in the manner of the LaTeX
``glossaries`` package: the first use of an acronym spells it out, later uses
show the short form.

Key Features
------------
- Four rendering styles: long-short, short-long, long-long, short-footnote
- Plural forms and case transformations per reference
- Links from each reference to the acronym's entry in the list of acronyms
- Sorting of the list of acronyms (alphabetical, initial, usage)
- YAML, TOML, JSON or pyproject.toml configuration

Examples
--------
Expand the references of a markdown source:

    >>> from acrodoc import expand_markdown
    >>> config = {"keys": [{"key": "RL", "shortname": "RL", "longname": "Reinforcement Learning"}]}
    >>> expand_markdown(r"\\acr{RL} and \\acr{RL}", config, insert_links=False)
    'Reinforcement Learning (RL) and RL'

Work with the registry directly:

    >>> from acrodoc import AcronymRegistry, StyleEngine
    >>> registry = AcronymRegistry()
    >>> _ = registry.register("CPU", "CPU", "Central Processing Unit")
    >>> nodes = StyleEngine(registry).render("CPU", "short-long", insert_links=False)

See Also
--------
acrodoc.ast : rich text node definitions
acrodoc.styles : rendering styles

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "acrodoc requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from acrodoc.acronym import Acronym
from acrodoc.api import expand_document, expand_markdown, list_acronyms
from acrodoc.case import CaseKind, CaseTarget, transform_case
from acrodoc.config import build_registry, load_acronyms, load_config_file
from acrodoc.exceptions import (
    AcrodocError,
    AcronymNotFoundError,
    ConfigFileError,
    DuplicateKeyError,
    InvalidConfigurationError,
    MissingPluralVariantError,
    UnknownSortCriterionError,
    UnknownStyleError,
)
from acrodoc.options import AcronymsOptions
from acrodoc.registry import AcronymRegistry
from acrodoc.sorting import SortCriterion, sort_acronyms
from acrodoc.styles import AcronymStyle, StyleEngine, render_acronym
from acrodoc.transforms.acronyms import AcronymTransformer, expand_references

__all__ = [
    "__version__",
    # API
    "expand_markdown",
    "expand_document",
    "list_acronyms",
    # Core
    "Acronym",
    "AcronymRegistry",
    "AcronymStyle",
    "AcronymTransformer",
    "AcronymsOptions",
    "CaseKind",
    "CaseTarget",
    "SortCriterion",
    "StyleEngine",
    "build_registry",
    "expand_references",
    "load_acronyms",
    "load_config_file",
    "render_acronym",
    "sort_acronyms",
    "transform_case",
    # Exceptions
    "AcrodocError",
    "AcronymNotFoundError",
    "ConfigFileError",
    "DuplicateKeyError",
    "InvalidConfigurationError",
    "MissingPluralVariantError",
    "UnknownSortCriterionError",
    "UnknownStyleError",
]
