#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/acrodoc/utils/text.py
"""Text helpers for anchors and option values.

Functions
---------
key_to_id : Convert an acronym key to an anchor identifier
key_to_link : Convert an acronym key to an in-document link target
str_to_boolean : Interpret a yes/no style option value

Examples
--------
Anchor generation:

    >>> key_to_id("C++ lang", id_prefix="acronyms_")
    'acronyms_C___lang'
    >>> key_to_link("RL")
    '#acronyms_RL'

"""

from __future__ import annotations

import logging
import re
from typing import Any

from acrodoc.constants import ANCHOR_REPLACEMENT, ANCHOR_UNSAFE_PATTERN, BOOLEAN_STRINGS, DEFAULT_ID_PREFIX

logger = logging.getLogger(__name__)

_ANCHOR_UNSAFE_RE = re.compile(ANCHOR_UNSAFE_PATTERN)


def key_to_id(key: str, id_prefix: str = DEFAULT_ID_PREFIX) -> str:
    """Generate the anchor identifier of an acronym.

    Every character outside ``[0-9A-Za-z]`` is replaced by an underscore,
    one replacement per character, so that the identifier is valid in every
    output format.

    Parameters
    ----------
    key : str
        Acronym key
    id_prefix : str, default = "acronyms_"
        Prefix prepended to the sanitized key

    Returns
    -------
    str
        Anchor identifier

    """
    return id_prefix + _ANCHOR_UNSAFE_RE.sub(ANCHOR_REPLACEMENT, key)


def key_to_link(key: str, id_prefix: str = DEFAULT_ID_PREFIX) -> str:
    """Generate the in-document link target (``#identifier``) of an acronym."""
    return "#" + key_to_id(key, id_prefix=id_prefix)


def str_to_boolean(value: Any) -> bool:
    """Interpret an option value as a boolean.

    Booleans are returned as-is. Strings are matched case-insensitively
    against true/false, yes/no and y/n. Any other value is logged and
    treated as False.

    Parameters
    ----------
    value : Any
        The raw option value

    Returns
    -------
    bool
        The interpreted value

    """
    if isinstance(value, bool):
        return value

    result = BOOLEAN_STRINGS.get(str(value).strip().lower())
    if result is None:
        logger.warning(f"Could not convert value to boolean, unrecognized value: {value!r}. Assuming `false`.")
        return False
    return result


__all__ = [
    "key_to_id",
    "key_to_link",
    "str_to_boolean",
]
