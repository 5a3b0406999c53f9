#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the acrodoc library.

Constants are organized by category:
1. Type Definitions - Literal types for option values
2. Rendering Defaults - Style, links, plural forms
3. Listing Defaults - Sorting and inclusion of unused acronyms
4. Configuration Files - Discovery and section names
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions
# =============================================================================

NonExistingMode = Literal["key", "??", "error"]
OnDuplicateMode = Literal["warn", "error", "keep"]

# =============================================================================
# Rendering Defaults
# =============================================================================

DEFAULT_STYLE = "long-short"
DEFAULT_INSERT_LINKS = True
DEFAULT_ID_PREFIX = "acronyms_"
DEFAULT_PLURAL_SUFFIX = "s"
DEFAULT_NON_EXISTING: NonExistingMode = "key"
NON_EXISTING_MODES: tuple[str, ...] = ("key", "??", "error")
UNKNOWN_ACRONYM_PLACEHOLDER = "??"

# Characters outside this class are replaced when building anchor identifiers
ANCHOR_UNSAFE_PATTERN = r"[^0-9A-Za-z]"
ANCHOR_REPLACEMENT = "_"

# =============================================================================
# Listing Defaults
# =============================================================================

DEFAULT_SORTING = "alphabetical"
DEFAULT_INCLUDE_UNUSED = True

# =============================================================================
# Configuration Files
# =============================================================================

DEFAULT_ON_DUPLICATE: OnDuplicateMode = "warn"
ON_DUPLICATE_MODES: tuple[str, ...] = ("warn", "error", "keep")

CONFIG_SECTION = "acronyms"
CONFIG_FILENAMES = [".acrodoc.yaml", ".acrodoc.yml", ".acrodoc.toml", ".acrodoc.json", "pyproject.toml"]

# Recognized (case-insensitive) string spellings of booleans
BOOLEAN_STRINGS: dict[str, bool] = {
    "true": True,
    "false": False,
    "yes": True,
    "no": False,
    "y": True,
    "n": False,
}
