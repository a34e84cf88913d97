#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/ast/nodes.py
"""Document tree nodes consumed by the ms renderer.

The tree is produced by a markdown parser (see ``md2troff.parsers.markdown``)
and is never mutated by the renderer. Every node carries a ``kind`` tag from
the closed ``NodeKind`` enumeration plus the kind-specific data the renderer
reads:

- ``literal`` for text, code spans, code blocks and raw HTML
- ``level`` and ``is_titleblock`` for headings
- ``list_data`` for lists and list items
- ``destination`` for links and images

Container kinds are visited twice during a walk (enter, then exit); leaf
kinds are visited once. See ``md2troff.ast.walk``.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterator, Optional


class NodeKind(str, Enum):
    """Discriminant tag of a document tree node."""

    DOCUMENT = "document"
    TEXT = "text"
    PARAGRAPH = "paragraph"
    HEADING = "heading"
    LIST = "list"
    LIST_ITEM = "list-item"
    EMPHASIS = "emphasis"
    STRONG = "strong"
    CODE_SPAN = "code-span"
    CODE_BLOCK = "code-block"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    TABLE_HEAD = "table-head"
    TABLE_BODY = "table-body"
    BLOCK_QUOTE = "block-quote"
    HTML_BLOCK = "html-block"
    HTML_SPAN = "html-span"
    LINK = "link"
    IMAGE = "image"
    # No ms rendering; both fail as unknown kinds. The markdown adapter
    # produces THEMATIC_BREAK and turns hard breaks into newline text instead
    # of LINE_BREAK.
    THEMATIC_BREAK = "thematic-break"
    LINE_BREAK = "line-break"


LEAF_KINDS = frozenset(
    {
        NodeKind.TEXT,
        NodeKind.CODE_SPAN,
        NodeKind.CODE_BLOCK,
        NodeKind.HTML_BLOCK,
        NodeKind.HTML_SPAN,
        NodeKind.THEMATIC_BREAK,
        NodeKind.LINE_BREAK,
    }
)


@dataclass(frozen=True)
class ListData:
    """List metadata shared by a list and its items.

    Parameters
    ----------
    ordered : bool, default = False
        Whether the list is numbered
    bullet_char : str, default = "*"
        Marker used by an unordered list in the source, or the delimiter
        (``.`` or ``)``) of an ordered one
    start : int, default = 1
        First number of an ordered list in the source

    """

    ordered: bool = False
    bullet_char: str = "*"
    start: int = 1


@dataclass
class Node:
    """A typed document tree node.

    Parameters
    ----------
    kind : NodeKind
        What this node represents
    children : list of Node, default = empty list
        Child nodes in document order
    literal : str, default = ""
        Raw payload of text-like nodes
    level : int, default = 0
        Heading level (1-6) for headings
    is_titleblock : bool, default = False
        Whether a heading carries the document front matter
    list_data : ListData or None, default = None
        List metadata for lists and list items
    destination : str, default = ""
        Target of a link or image
    metadata : dict, default = empty dict
        Arbitrary parser-supplied metadata

    """

    kind: NodeKind
    children: list[Node] = field(default_factory=list)
    literal: str = ""
    level: int = 0
    is_titleblock: bool = False
    list_data: Optional[ListData] = None
    destination: str = ""
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def is_container(self) -> bool:
        """Whether the node is visited on both enter and exit."""
        return self.kind not in LEAF_KINDS

    def iter_descendants(self) -> Iterator[Node]:
        """Yield every descendant in document order."""
        for child in self.children:
            yield child
            yield from child.iter_descendants()


# ============================================================================
# Constructors
# ============================================================================
# Thin helpers that keep tree literals in tests and parsers readable.


def document(*children: Node) -> Node:
    return Node(NodeKind.DOCUMENT, children=list(children))


def text(literal: str) -> Node:
    return Node(NodeKind.TEXT, literal=literal)


def paragraph(*children: Node) -> Node:
    return Node(NodeKind.PARAGRAPH, children=list(children))


def heading(level: int, *children: Node, is_titleblock: bool = False) -> Node:
    """Create a heading node, validating the level is between 1 and 6."""
    if not 1 <= level <= 6:
        raise ValueError(f"Heading level must be 1-6, got {level}")
    return Node(NodeKind.HEADING, children=list(children), level=level, is_titleblock=is_titleblock)


def list_node(*items: Node, ordered: bool = False, bullet_char: str = "*", start: int = 1) -> Node:
    """Create a list node and propagate its list data to the items."""
    data = ListData(ordered=ordered, bullet_char=bullet_char, start=start)
    for item in items:
        item.list_data = data
    return Node(NodeKind.LIST, children=list(items), list_data=data)


def list_item(*children: Node) -> Node:
    return Node(NodeKind.LIST_ITEM, children=list(children))


def emphasis(*children: Node) -> Node:
    return Node(NodeKind.EMPHASIS, children=list(children))


def strong(*children: Node) -> Node:
    return Node(NodeKind.STRONG, children=list(children))


def code_span(literal: str) -> Node:
    return Node(NodeKind.CODE_SPAN, literal=literal)


def code_block(literal: str) -> Node:
    return Node(NodeKind.CODE_BLOCK, literal=literal)


def block_quote(*children: Node) -> Node:
    return Node(NodeKind.BLOCK_QUOTE, children=list(children))


def html_block(literal: str) -> Node:
    return Node(NodeKind.HTML_BLOCK, literal=literal)


def html_span(literal: str) -> Node:
    return Node(NodeKind.HTML_SPAN, literal=literal)


def link(destination: str, *children: Node) -> Node:
    return Node(NodeKind.LINK, children=list(children), destination=destination)


def image(destination: str, *children: Node) -> Node:
    return Node(NodeKind.IMAGE, children=list(children), destination=destination)


def table(header: list[list[str]] | None = None, rows: list[list[str]] | None = None) -> Node:
    """Create a table node from plain cell strings.

    Parameters
    ----------
    header : list of list of str, optional
        Header rows, usually exactly one
    rows : list of list of str, optional
        Body rows

    Returns
    -------
    Node
        Table node with head and body sections

    """

    def _rows(cell_rows: list[list[str]]) -> list[Node]:
        return [
            Node(
                NodeKind.TABLE_ROW,
                children=[Node(NodeKind.TABLE_CELL, children=[text(cell)]) for cell in cells],
            )
            for cells in cell_rows
        ]

    return Node(
        NodeKind.TABLE,
        children=[
            Node(NodeKind.TABLE_HEAD, children=_rows(header or [])),
            Node(NodeKind.TABLE_BODY, children=_rows(rows or [])),
        ],
    )
