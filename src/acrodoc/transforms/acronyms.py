#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/transforms/acronyms.py
"""Replacement of acronym references in documents and markdown sources.

Two entry points share the same rendering rules:

- :class:`AcronymTransformer` walks an AST and replaces each
  :class:`~acrodoc.ast.nodes.AcronymReference` node by its rendered fragment;
- :func:`expand_references` rewrites ``\\acr{KEY}`` references found in raw
  markdown text, writing each fragment back as pandoc markdown.

References are rendered in document order, and the first rendered reference
to a key is that acronym's first use.

Examples
--------
    >>> from acrodoc.options import AcronymsOptions
    >>> from acrodoc.registry import AcronymRegistry
    >>> registry = AcronymRegistry()
    >>> _ = registry.register("RL", "RL", "Reinforcement Learning")
    >>> transformer = AcronymTransformer(registry, AcronymsOptions(insert_links=False))
    >>> expand_references(r"\\acr{RL} then \\acr{RL}", transformer)
    'Reinforcement Learning (RL) then RL'

"""

from __future__ import annotations

import logging
import re
from typing import Optional

from acrodoc.ast.nodes import AcronymReference, Node, Strong, Text
from acrodoc.ast.transforms import NodeTransformer, TransformResult
from acrodoc.constants import UNKNOWN_ACRONYM_PLACEHOLDER
from acrodoc.exceptions import AcronymNotFoundError, InvalidConfigurationError
from acrodoc.options import AcronymsOptions
from acrodoc.registry import AcronymRegistry
from acrodoc.renderers.markdown import MarkdownRenderer
from acrodoc.styles import StyleEngine
from acrodoc.utils.text import str_to_boolean

logger = logging.getLogger(__name__)

REFERENCE_PATTERN = re.compile(r"\\acr(?:\[(?P<options>[^\]]*)\])?\{(?P<key>[^{}]+)\}")

# Fenced blocks, indented blocks after a blank line, then code spans
CODE_PATTERN = re.compile(
    r"^[ ]{0,3}(?P<fence>`{3,}|~{3,})[^\n]*\n[\s\S]*?(?:^[ ]{0,3}(?P=fence)[`~]*[ \t]*$|\Z)"
    r"|(?:\A|(?<=\n\n))(?:(?: {4}|\t)[^\n]*(?:\n|\Z))+"
    r"|(?P<ticks>`+)(?!`)(?:[^\n]|\n(?![ \t]*\n))+?(?<!`)(?P=ticks)(?!`)",
    re.MULTILINE,
)

_BOOLEAN_REFERENCE_OPTIONS = ("plural", "insert_links", "first_use")
_STRING_REFERENCE_OPTIONS = ("style", "case", "case_target")


class AcronymTransformer(NodeTransformer):
    """Replace acronym references with their rendered fragments.

    Parameters
    ----------
    registry : AcronymRegistry
        Acronyms of the document; usage is recorded in it
    options : AcronymsOptions, optional
        Document-wide options; references fall back to them

    """

    def __init__(self, registry: AcronymRegistry, options: Optional[AcronymsOptions] = None) -> None:
        """Initialize the transformer."""
        self.registry = registry
        self.options = options or AcronymsOptions()
        self.engine = StyleEngine(registry, id_prefix=self.options.id_prefix, plural_suffix=self.options.plural_suffix)

    def visit_acronym_reference(self, node: AcronymReference) -> TransformResult:
        """Render one reference.

        Parameters
        ----------
        node : AcronymReference
            The reference to replace

        Returns
        -------
        list of Node
            Nodes spliced in place of the reference

        Raises
        ------
        AcronymNotFoundError
            If the key is unknown and ``non_existing`` is "error"

        """
        if node.key not in self.registry:
            return self._render_missing(node.key)

        is_first_use = self.registry.mark_used(node.key)
        if node.first_use is not None:
            is_first_use = node.first_use

        return self.engine.render(
            node.key,
            node.style or self.options.style,
            insert_links=self.options.insert_links if node.insert_links is None else node.insert_links,
            is_first_use=is_first_use,
            plural=node.plural,
            case_target=node.case_target,
            case=node.case,
        )

    def _render_missing(self, key: str) -> list[Node]:
        mode = self.options.non_existing
        if mode == "error":
            raise AcronymNotFoundError(key)

        replacement = key if mode == "key" else UNKNOWN_ACRONYM_PLACEHOLDER
        logger.warning(f"Acronym key '{key}' not recognized; replacing it with '{replacement}'")
        return [Strong(content=[Text(content=replacement)])]


def parse_reference_options(key: str, options: Optional[str] = None) -> AcronymReference:
    """Build a reference node from the parts of a ``\\acr[options]{KEY}`` call.

    Options are comma-separated ``name=value`` pairs. A bare name sets a
    boolean option to true (``\\acr[plural]{RL}``).

    Parameters
    ----------
    key : str
        Acronym key
    options : str, optional
        Content of the square brackets

    Returns
    -------
    AcronymReference
        The reference

    Raises
    ------
    InvalidConfigurationError
        If an option name is not recognized

    """
    values: dict[str, object] = {}
    for item in (options or "").split(","):
        item = item.strip()
        if not item:
            continue
        name, sep, value = item.partition("=")
        name = name.strip().replace("-", "_")
        value = value.strip().strip("\"'")

        if name in _BOOLEAN_REFERENCE_OPTIONS:
            values[name] = str_to_boolean(value) if sep else True
        elif name in _STRING_REFERENCE_OPTIONS and sep:
            values[name] = value
        else:
            raise InvalidConfigurationError(
                f"Unknown option '{item}' in reference to acronym '{key}'",
                parameter_name=name,
                parameter_value=value,
            )
    return AcronymReference(key=key.strip(), **values)  # type: ignore[arg-type]


def expand_references(text: str, transformer: AcronymTransformer) -> str:
    """Expand the ``\\acr`` references of a markdown source.

    References inside code spans and code blocks are left as written and
    do not count as a use of the acronym.

    Parameters
    ----------
    text : str
        Markdown source
    transformer : AcronymTransformer
        Transformer holding the registry and options of the document

    Returns
    -------
    str
        The source with every reference replaced by pandoc markdown

    """
    renderer = MarkdownRenderer()

    def replace_reference(match: re.Match[str]) -> str:
        reference = parse_reference_options(match.group("key"), match.group("options"))
        return renderer.render_inlines(transformer.transform_inlines([reference]))

    pieces: list[str] = []
    count = 0
    position = 0
    for code in CODE_PATTERN.finditer(text):
        expanded, found = REFERENCE_PATTERN.subn(replace_reference, text[position : code.start()])
        pieces.extend([expanded, code.group(0)])
        count += found
        position = code.end()
    expanded, found = REFERENCE_PATTERN.subn(replace_reference, text[position:])
    pieces.append(expanded)
    count += found

    logger.debug(f"Expanded {count} acronym references")
    return "".join(pieces)
