#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/renderers/ms.py
"""ms macro rendering from the document tree.

This module provides the MsRenderer class which walks a document tree in
document order and writes troff ms macros for each node, on entering and on
exiting container nodes. The output is meant for ``troff -ms``.

"""

from __future__ import annotations

import logging
from io import BytesIO
from typing import IO, Callable

from md2troff import macros
from md2troff.ast import ListData, Node, NodeKind, WalkStatus, walk
from md2troff.constants import FRONT_MATTER_SNIFF_PREFIX, SECTION_HEADING
from md2troff.exceptions import FrontMatterError, RenderingError, UnknownNodeKindError
from md2troff.options.ms import MsRendererOptions
from md2troff.renderers.base import BaseRenderer
from md2troff.titleblock import TitleBlock, load_title_block

logger = logging.getLogger(__name__)

NodeHandler = Callable[[IO[bytes], Node, bool], WalkStatus]


class MsRenderer(BaseRenderer):
    """Render a document tree to troff ms macros.

    The renderer keeps a little state across nodes: the list counters of the
    currently open lists, the buffer of the table being assembled and the
    title block read from the front matter. The state belongs to the
    instance and is reset at the start of every render, so independent
    documents can be rendered concurrently with one renderer each.

    Parameters
    ----------
    options : MsRendererOptions or None, default = None
        ms rendering options

    Examples
    --------
    Basic usage:

        >>> from md2troff.ast import document, heading, paragraph, text
        >>> from md2troff.renderers.ms import MsRenderer
        >>> doc = document(heading(1, text("Intro")), paragraph(text("Hello")))
        >>> print(MsRenderer().render_to_string(doc))
        .SH
        Intro
        <BLANKLINE>
        Hello
        .SG
        <BLANKLINE>

    """

    def __init__(self, options: MsRendererOptions | None = None):
        """Initialize the ms renderer with options."""
        BaseRenderer._validate_options_type(options, MsRendererOptions, "ms")
        options = options or MsRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MsRendererOptions = options

        self._handlers: dict[NodeKind, NodeHandler] = {
            NodeKind.DOCUMENT: self._render_passthrough,
            NodeKind.TEXT: self._render_text,
            NodeKind.PARAGRAPH: self._render_paragraph,
            NodeKind.BLOCK_QUOTE: self._render_block_quote,
            NodeKind.HTML_BLOCK: self._render_html_block,
            NodeKind.HTML_SPAN: self._render_passthrough,
            NodeKind.CODE_SPAN: self._render_code_span,
            NodeKind.CODE_BLOCK: self._render_code_block,
            NodeKind.TABLE: self._render_table,
            NodeKind.TABLE_HEAD: self._render_passthrough,
            NodeKind.TABLE_BODY: self._render_passthrough,
            NodeKind.TABLE_ROW: self._render_table_row,
            NodeKind.TABLE_CELL: self._render_table_cell,
            NodeKind.LIST: self._render_list,
            NodeKind.LIST_ITEM: self._render_list_item,
            NodeKind.EMPHASIS: self._render_emphasis,
            NodeKind.STRONG: self._render_strong,
            # TODO: find the ms macro for links; only the link text is rendered for now
            NodeKind.LINK: self._render_passthrough,
            NodeKind.IMAGE: self._render_image,
            NodeKind.HEADING: self._render_heading,
        }

        self.consuming_front_matter: bool = False
        self.title_block: TitleBlock | None = None
        self.list_depth: list[int] = []
        self.table_buffer: BytesIO | None = None

    def _reset(self) -> None:
        self.consuming_front_matter = False
        self.title_block = None
        self.list_depth = []
        self.table_buffer = None

    def render_to_bytes(self, doc: Node) -> bytes:
        """Render a document tree to ms macros.

        Parameters
        ----------
        doc : Node
            The document node to render

        Returns
        -------
        bytes
            ms macro source, always ending with ``.SG``

        Raises
        ------
        RenderingError
            On unknown node kinds, malformed front matter or malformed
            tables. Nothing is returned in that case.

        """
        self._reset()
        out = BytesIO()

        self.render_header(out, doc)
        walk(doc, lambda node, entering: self.render_node(out, node, entering))
        self.render_footer(out, doc)

        logger.debug("Rendered %d bytes of ms macros", out.tell())
        return out.getvalue()

    def render_header(self, w: IO[bytes], doc: Node) -> None:
        """Write the document preamble, if any has been configured."""
        if self.options.preamble:
            w.write(self.options.preamble.encode("utf-8"))

    def render_footer(self, w: IO[bytes], doc: Node) -> None:
        """Write the closing ``.SG`` signature macro."""
        macros.signature(w)

    def render_node(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        """Render one visit of a node.

        Called once for leaf nodes and twice for container nodes, first with
        ``entering=True`` and then with ``entering=False``.

        Parameters
        ----------
        w : IO[bytes]
            Output sink
        node : Node
            The node being visited
        entering : bool
            Visitation phase

        Returns
        -------
        WalkStatus
            How the walk continues

        Raises
        ------
        UnknownNodeKindError
            If the renderer has no behavior for the node kind

        """
        handler = self._handlers.get(node.kind)
        if handler is None:
            raise UnknownNodeKindError(node.kind, entering)
        return handler(w, node, entering)

    def _sink(self, w: IO[bytes]) -> IO[bytes]:
        return self.table_buffer if self.table_buffer is not None else w

    def _open_table_buffer(self, kind: NodeKind) -> BytesIO:
        if self.table_buffer is None:
            raise RenderingError(f"{kind.value} outside of a table", rendering_stage="table")
        return self.table_buffer

    def _render_passthrough(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        return WalkStatus.GO_TO_NEXT

    def _render_text(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if self.consuming_front_matter:
            self.title_block = load_title_block(node.literal)
            self.consuming_front_matter = False
            return WalkStatus.GO_TO_NEXT

        if node.literal:
            self._sink(w).write(node.literal.lstrip(" ").encode("utf-8"))
        return WalkStatus.GO_TO_NEXT

    def _render_paragraph(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if entering:
            macros.left_aligned_paragraph(w, node.literal, len(self.list_depth))
        else:
            macros.line_break(w)
        return WalkStatus.GO_TO_NEXT

    def _render_block_quote(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if entering:
            macros.left_aligned_paragraph(w, node.literal, 1)
        else:
            macros.line_break(w)
        return WalkStatus.GO_TO_NEXT

    def _render_html_block(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        macros.html(w, node.literal)
        return WalkStatus.GO_TO_NEXT

    def _render_code_span(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        macros.line_break(w)
        macros.bold(w, node.literal)
        macros.roman(w)
        return WalkStatus.GO_TO_NEXT

    def _render_code_block(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        macros.code_block(w, node.literal)
        return WalkStatus.GO_TO_NEXT

    def _render_table(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if entering:
            if self.table_buffer is not None:
                raise RenderingError("Tables cannot be nested", rendering_stage="table")
            self.table_buffer = BytesIO()
        else:
            buffered = self._open_table_buffer(node.kind).getvalue()
            self.table_buffer = None
            macros.table(w, buffered)
        return WalkStatus.GO_TO_NEXT

    def _render_table_row(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if not entering:
            self._open_table_buffer(node.kind).write(b"\n")
        return WalkStatus.GO_TO_NEXT

    def _render_table_cell(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if not entering:
            self._open_table_buffer(node.kind).write(b"\t")
        return WalkStatus.GO_TO_NEXT

    def _render_list(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if entering:
            if self.list_depth:
                macros.indent(w)
            self.list_depth.append(0)
        else:
            if self.list_depth:
                self.list_depth.pop()
            macros.outdent(w)
        return WalkStatus.GO_TO_NEXT

    def _render_list_item(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if not entering:
            return WalkStatus.GO_TO_NEXT
        if not self.list_depth:
            raise RenderingError("List item outside of a list", rendering_stage="list")

        self.list_depth[-1] += 1
        data = node.list_data or ListData()
        if data.ordered:
            label = "".join(f"{count}." for count in self.list_depth)
        else:
            label = data.bullet_char
        macros.indent_paragraph(w, label)
        return WalkStatus.GO_TO_NEXT

    def _render_emphasis(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if entering:
            macros.italic(w)
        else:
            macros.line_break(w)
            macros.roman(w)
        return WalkStatus.GO_TO_NEXT

    def _render_strong(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        if entering:
            macros.bold(w)
        else:
            macros.line_break(w)
            macros.roman(w)
        return WalkStatus.GO_TO_NEXT

    def _render_image(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        # Images are not rendered; alt text is dropped with the subtree
        logger.debug("Skipping image %s", node.destination)
        return WalkStatus.SKIP_CHILDREN

    def _is_front_matter(self, node: Node) -> bool:
        if node.is_titleblock:
            return True
        if not self.options.sniff_front_matter or node.level != 1 or not node.children:
            return False
        # Heuristic: the tree carries no flag, so look at the payload itself
        first = node.children[0]
        return first.kind is NodeKind.TEXT and first.literal.lstrip().startswith(FRONT_MATTER_SNIFF_PREFIX)

    def _render_heading(self, w: IO[bytes], node: Node, entering: bool) -> WalkStatus:
        front_matter = self._is_front_matter(node)

        if entering:
            if front_matter and self.title_block is not None:
                logger.warning("Ignoring additional front matter heading; the title block is already set")
                return WalkStatus.SKIP_CHILDREN
            self.consuming_front_matter = front_matter
            if not front_matter:
                w.write(macros.ms_print(SECTION_HEADING))
            return WalkStatus.GO_TO_NEXT

        self.consuming_front_matter = False
        if not front_matter:
            macros.line_break(w)
            return WalkStatus.GO_TO_NEXT

        if self.title_block is None:
            raise FrontMatterError("Front matter heading carries no metadata payload")
        macros.title_block(w, self.title_block)
        return WalkStatus.GO_TO_NEXT
