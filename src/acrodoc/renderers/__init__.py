#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers turning rich text and documents into text formats."""

from acrodoc.renderers.markdown import MarkdownRenderer

__all__ = ["MarkdownRenderer"]
