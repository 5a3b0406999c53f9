"""The major exported API functions for acronym expansion and listing."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/acrodoc/api.py
import logging
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from acrodoc.acronym import Acronym
from acrodoc.ast.nodes import Document
from acrodoc.config import build_registry, load_acronyms
from acrodoc.options import AcronymsOptions
from acrodoc.registry import AcronymRegistry
from acrodoc.sorting import sort_acronyms
from acrodoc.transforms.acronyms import AcronymTransformer, expand_references

logger = logging.getLogger(__name__)


def _resolve_acronyms(
    config: Union[str, Path, Mapping[str, Any]],
    **option_overrides: Any,
) -> tuple[AcronymsOptions, AcronymRegistry]:
    """Load options and registry from a file path or an ``acronyms`` mapping."""
    if isinstance(config, (str, Path)):
        return load_acronyms(config, **option_overrides)

    options = AcronymsOptions.from_dict(config)
    if option_overrides:
        options = options.create_updated(**option_overrides)
    return options, build_registry(config, options)


def expand_markdown(
    text: str,
    config: Union[str, Path, Mapping[str, Any]],
    **option_overrides: Any,
) -> str:
    """Expand the ``\\acr{KEY}`` references of a markdown source.

    Parameters
    ----------
    text : str
        Markdown source
    config : str, Path or Mapping
        Path to a configuration file, or the ``acronyms`` section as a mapping
    **option_overrides
        Option values overriding the configuration (e.g. ``style="short-long"``)

    Returns
    -------
    str
        The source with references replaced by pandoc markdown

    Examples
    --------
        >>> config = {"keys": [{"key": "RL", "shortname": "RL", "longname": "Reinforcement Learning"}]}
        >>> expand_markdown(r"\\acr{RL}", config, insert_links=False)
        'Reinforcement Learning (RL)'

    """
    options, registry = _resolve_acronyms(config, **option_overrides)
    return expand_references(text, AcronymTransformer(registry, options))


def expand_document(
    document: Document,
    registry: AcronymRegistry,
    options: Optional[AcronymsOptions] = None,
) -> Document:
    """Replace the acronym references of a document AST.

    The registry records the usage of each acronym, so it can be listed with
    :func:`list_acronyms` afterwards.

    Returns
    -------
    Document
        A new document; the input is not modified

    """
    result = AcronymTransformer(registry, options).transform(document)
    assert isinstance(result, Document)
    return result


def list_acronyms(registry: AcronymRegistry, options: Optional[AcronymsOptions] = None) -> list[Acronym]:
    """Return the acronyms of a registry, sorted and filtered as configured.

    Parameters
    ----------
    registry : AcronymRegistry
        Registry of the document
    options : AcronymsOptions, optional
        Options providing ``sorting`` and ``include_unused``

    Returns
    -------
    list of Acronym
        The list of acronyms

    """
    options = options or AcronymsOptions()
    return sort_acronyms(registry.all_entries(), options.sorting, options.include_unused)
