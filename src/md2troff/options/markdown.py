#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing.

This module defines options for the mistune based markdown adapter.
"""
# src/md2troff/options/markdown.py


from __future__ import annotations

from dataclasses import dataclass, field

from md2troff.constants import (
    DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH,
    DEFAULT_MARKDOWN_PARSE_TABLES,
    DEFAULT_MARKDOWN_PARSE_TITLE_BLOCK,
)
from md2troff.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-tree parsing.

    Parameters
    ----------
    parse_title_block : bool, default True
        Turn leading ``%`` lines into a front-matter heading.
    parse_tables : bool, default True
        Enable the mistune table plugin.
    parse_strikethrough : bool, default False
        Enable the mistune strikethrough plugin. Struck-through text has no
        ms counterpart and is kept as plain text.

    """

    parse_title_block: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_TITLE_BLOCK,
        metadata={"help": "Parse leading '%' lines as YAML front matter"},
    )
    parse_tables: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_TABLES,
        metadata={"help": "Parse pipe tables"},
    )
    parse_strikethrough: bool = field(
        default=DEFAULT_MARKDOWN_PARSE_STRIKETHROUGH,
        metadata={"help": "Parse ~~strikethrough~~ spans as plain text"},
    )
