#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for acrodoc."""

from acrodoc.utils.text import key_to_id, key_to_link, str_to_boolean

__all__ = ["key_to_id", "key_to_link", "str_to_boolean"]
