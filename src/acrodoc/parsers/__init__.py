#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers turning markdown source into rich text."""

from acrodoc.parsers.markdown import InlineMarkdownParser, parse_inline_markdown

__all__ = ["InlineMarkdownParser", "parse_inline_markdown"]
