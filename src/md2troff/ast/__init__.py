#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/ast/__init__.py
"""Document tree representation consumed by the ms renderer.

The module consists of two components:

- nodes: the ``Node`` dataclass, the ``NodeKind`` enumeration and small
  constructor helpers
- walk: the enter/exit traversal protocol (``walk`` and ``WalkStatus``)

Examples
--------
Basic usage:

    >>> from md2troff.ast import document, heading, paragraph, text
    >>> from md2troff.renderers.ms import MsRenderer
    >>>
    >>> doc = document(
    ...     heading(1, text("Title")),
    ...     paragraph(text("Hello world")),
    ... )
    >>> macros = MsRenderer().render_to_string(doc)

"""

from __future__ import annotations

from md2troff.ast.nodes import (
    LEAF_KINDS,
    ListData,
    Node,
    NodeKind,
    block_quote,
    code_block,
    code_span,
    document,
    emphasis,
    heading,
    html_block,
    html_span,
    image,
    link,
    list_item,
    list_node,
    paragraph,
    strong,
    table,
    text,
)
from md2troff.ast.walk import NodeVisitorFunc, WalkStatus, walk

__all__ = [
    "LEAF_KINDS",
    "ListData",
    "Node",
    "NodeKind",
    "NodeVisitorFunc",
    "WalkStatus",
    "block_quote",
    "code_block",
    "code_span",
    "document",
    "emphasis",
    "heading",
    "html_block",
    "html_span",
    "image",
    "link",
    "list_item",
    "list_node",
    "paragraph",
    "strong",
    "table",
    "text",
    "walk",
]
