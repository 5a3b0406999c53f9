#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Document transforms."""

from acrodoc.transforms.acronyms import (
    REFERENCE_PATTERN,
    AcronymTransformer,
    expand_references,
    parse_reference_options,
)

__all__ = ["AcronymTransformer", "REFERENCE_PATTERN", "expand_references", "parse_reference_options"]
