#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/ast/walk.py
"""Two-phase (enter/exit) traversal of the document tree.

``walk`` visits nodes depth first in document order. Container nodes are
handed to the visitor twice, first with ``entering=True`` and again with
``entering=False`` once all of their children have been visited. Leaf nodes
are handed over once, entering. The visitor steers the walk through the
``WalkStatus`` it returns.

Examples
--------
Collecting the text of a document:

    >>> from md2troff.ast import NodeKind, WalkStatus, walk
    >>> parts = []
    >>> def collect(node, entering):
    ...     if node.kind is NodeKind.TEXT:
    ...         parts.append(node.literal)
    ...     return WalkStatus.GO_TO_NEXT
    >>> walk(doc, collect)

"""

from __future__ import annotations

from enum import Enum
from typing import Callable

from md2troff.ast.nodes import Node


class WalkStatus(Enum):
    """What the walker does after a visit."""

    #: Continue with the next node in document order
    GO_TO_NEXT = "go_to_next"
    #: On enter, skip the node's children and its exit visit
    SKIP_CHILDREN = "skip_children"
    #: Stop the walk immediately
    TERMINATE = "terminate"


NodeVisitorFunc = Callable[[Node, bool], WalkStatus]


def walk(root: Node, visitor: NodeVisitorFunc) -> WalkStatus:
    """Walk ``root`` and its descendants, calling ``visitor(node, entering)``.

    Parameters
    ----------
    root : Node
        Node to start from; it is visited too
    visitor : callable
        Called with each node and the visitation phase

    Returns
    -------
    WalkStatus
        ``TERMINATE`` if the visitor stopped the walk, else ``GO_TO_NEXT``

    """
    stack: list[tuple[Node, bool]] = [(root, True)]
    while stack:
        node, entering = stack.pop()
        status = visitor(node, entering)
        if status is WalkStatus.TERMINATE:
            return status
        if not entering or not node.is_container or status is WalkStatus.SKIP_CHILDREN:
            continue
        stack.append((node, False))
        stack.extend((child, True) for child in reversed(node.children))
    return WalkStatus.GO_TO_NEXT
