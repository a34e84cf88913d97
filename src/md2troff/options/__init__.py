#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for md2troff.

Each stage of the pipeline has its own frozen Options dataclass: the markdown
adapter, the ms renderer and the external typesetting passes.
"""

from __future__ import annotations

from md2troff.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from md2troff.options.markdown import MarkdownParserOptions
from md2troff.options.ms import MsRendererOptions
from md2troff.options.typeset import TypesetOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "MarkdownParserOptions",
    "MsRendererOptions",
    "TypesetOptions",
]
