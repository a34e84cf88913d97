#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2troff/parsers/__init__.py
"""Parsers producing the document tree rendered by md2troff."""

from md2troff.parsers.markdown import MarkdownToTreeConverter, parse_markdown, split_title_block

__all__ = ["MarkdownToTreeConverter", "parse_markdown", "split_title_block"]
