#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/parsers/markdown.py
"""Markdown to document tree converter.

This module turns markdown into the document tree consumed by the ms
renderer, using the mistune parser. A document may open with a title block:
consecutive lines starting with ``%`` whose remaining text is YAML front
matter::

    % title: markdown troff renderer
    % authors:
    % - name: Jane Doe
    %   email: jane@example.com
    % date: Feb 22, 2020

    # Introduction

The title block becomes a level-1 heading flagged with ``is_titleblock`` and
holding the YAML text as its only text child.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Union

from md2troff.ast import ListData, Node, NodeKind
from md2troff.constants import TITLE_BLOCK_LINE_PREFIX
from md2troff.exceptions import InvalidOptionsError, ParsingError
from md2troff.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

_FALLBACK_ENCODINGS = ("utf-8", "utf-8-sig", "latin-1")


def _decode(data: bytes) -> str:
    for encoding in _FALLBACK_ENCODINGS:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            logger.debug("Failed to decode markdown with %s", encoding)
    return data.decode("utf-8", errors="replace")


def split_title_block(content: str) -> tuple[str | None, str]:
    """Split the leading ``%`` title block off markdown content.

    Parameters
    ----------
    content : str
        Markdown content

    Returns
    -------
    tuple of (str or None, str)
        The title block text with its ``%`` prefixes removed (None when the
        document has no title block) and the remaining markdown

    """
    if not content.startswith(TITLE_BLOCK_LINE_PREFIX):
        return None, content

    lines = content.splitlines(keepends=True)
    end = 0
    while end < len(lines) and lines[end].startswith(TITLE_BLOCK_LINE_PREFIX):
        end += 1

    block_lines = []
    for line in lines[:end]:
        line = line.rstrip("\r\n")[len(TITLE_BLOCK_LINE_PREFIX) :]
        block_lines.append(line[1:] if line.startswith(" ") else line)

    return "\n".join(block_lines), "".join(lines[end:])


class MarkdownToTreeConverter:
    r"""Convert Markdown to a document tree.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToTreeConverter()
        >>> doc = converter.parse("# Hello\n\nThis is **bold**.")

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        if options is not None and not isinstance(options, MarkdownParserOptions):
            raise InvalidOptionsError(
                converter_name="markdown",
                expected_type=MarkdownParserOptions,
                received_type=type(options),
            )
        self.options: MarkdownParserOptions = options or MarkdownParserOptions()

    def parse(self, input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> Node:
        """Parse Markdown input into a document tree.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            Markdown text, raw bytes, a file path or a file-like object

        Returns
        -------
        Node
            Document node

        Raises
        ------
        ParsingError
            If mistune produces a token the tree has no kind for

        """
        content = self._load_text_content(input_data)

        children: list[Node] = []
        if self.options.parse_title_block:
            payload, content = split_title_block(content)
            if payload is not None:
                logger.debug("Found %d line title block", payload.count("\n") + 1)
                children.append(Node(NodeKind.HEADING, level=1, is_titleblock=True, children=[self._text(payload)]))

        import mistune

        plugins = []
        if self.options.parse_tables:
            plugins.append("table")
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")

        markdown = mistune.create_markdown(renderer=None, plugins=plugins)
        tokens, _state = markdown.parse(content)

        children.extend(self._process_tokens(tokens))
        return Node(NodeKind.DOCUMENT, children=children)

    @staticmethod
    def _load_text_content(input_data: Union[str, Path, IO[bytes], IO[str], bytes]) -> str:
        if isinstance(input_data, bytes):
            return _decode(input_data)
        if isinstance(input_data, Path):
            return _decode(input_data.read_bytes())
        if isinstance(input_data, str):
            return input_data
        data = input_data.read()
        return _decode(data) if isinstance(data, bytes) else data

    @staticmethod
    def _text(literal: str) -> Node:
        return Node(NodeKind.TEXT, literal=literal)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        nodes: list[Node] = []
        for token in tokens:
            nodes.extend(self._process_token(token))
        return nodes

    def _process_token(self, token: dict[str, Any]) -> list[Node]:
        """Process a single mistune token into zero or more tree nodes."""
        token_type = token.get("type", "")
        attrs = token.get("attrs") or {}
        children = token.get("children") or []

        # Block-level tokens
        if token_type == "blank_line":
            return []
        if token_type == "heading":
            return [Node(NodeKind.HEADING, level=attrs.get("level", 1), children=self._process_tokens(children))]
        if token_type in ("paragraph", "block_text"):
            # block_text is what tight list items hold
            return [Node(NodeKind.PARAGRAPH, children=self._process_tokens(children))]
        if token_type == "block_code":
            # Indented blocks come without their final newline; .P2 must start a line
            code = token.get("raw", "")
            if not code.endswith("\n"):
                code += "\n"
            return [Node(NodeKind.CODE_BLOCK, literal=code)]
        if token_type == "block_quote":
            return [Node(NodeKind.BLOCK_QUOTE, children=self._process_tokens(children))]
        if token_type == "block_html":
            return [Node(NodeKind.HTML_BLOCK, literal=token.get("raw", ""))]
        if token_type == "thematic_break":
            return [Node(NodeKind.THEMATIC_BREAK)]
        if token_type == "list":
            return [self._process_list(token)]
        if token_type == "table":
            return [self._process_table(token)]

        # Inline tokens
        if token_type == "text":
            return [self._text(token.get("raw", ""))]
        if token_type in ("softbreak", "linebreak"):
            return [self._text("\n")]
        if token_type == "emphasis":
            return [Node(NodeKind.EMPHASIS, children=self._process_tokens(children))]
        if token_type == "strong":
            return [Node(NodeKind.STRONG, children=self._process_tokens(children))]
        if token_type == "strikethrough":
            return self._process_tokens(children)
        if token_type == "codespan":
            return [Node(NodeKind.CODE_SPAN, literal=token.get("raw", ""))]
        if token_type == "inline_html":
            return [Node(NodeKind.HTML_SPAN, literal=token.get("raw", ""))]
        if token_type == "link":
            return [Node(NodeKind.LINK, destination=attrs.get("url", ""), children=self._process_tokens(children))]
        if token_type == "image":
            return [Node(NodeKind.IMAGE, destination=attrs.get("url", ""), children=self._process_tokens(children))]

        raise ParsingError(f"Unsupported markdown token: {token_type!r}", parsing_stage="tree_building")

    def _process_list(self, token: dict[str, Any]) -> Node:
        attrs = token.get("attrs") or {}
        ordered = bool(attrs.get("ordered", False))
        data = ListData(
            ordered=ordered,
            bullet_char=token.get("bullet") or ("." if ordered else "*"),
            start=attrs.get("start", 1),
        )

        items = []
        for child in token.get("children") or []:
            if child.get("type") != "list_item":
                raise ParsingError(f"Unexpected token in list: {child.get('type')!r}", parsing_stage="tree_building")
            items.append(
                Node(NodeKind.LIST_ITEM, list_data=data, children=self._process_tokens(child.get("children") or []))
            )
        return Node(NodeKind.LIST, list_data=data, children=items)

    def _process_row(self, cell_tokens: list[dict[str, Any]]) -> Node:
        cells = [
            Node(NodeKind.TABLE_CELL, children=self._process_tokens(cell.get("children") or []))
            for cell in cell_tokens
        ]
        return Node(NodeKind.TABLE_ROW, children=cells)

    def _process_table(self, token: dict[str, Any]) -> Node:
        sections = []
        for section in token.get("children") or []:
            section_type = section.get("type")
            if section_type == "table_head":
                # mistune puts head cells directly under table_head
                sections.append(Node(NodeKind.TABLE_HEAD, children=[self._process_row(section.get("children") or [])]))
            elif section_type == "table_body":
                rows = [self._process_row(row.get("children") or []) for row in section.get("children") or []]
                sections.append(Node(NodeKind.TABLE_BODY, children=rows))
            else:
                raise ParsingError(f"Unexpected token in table: {section_type!r}", parsing_stage="tree_building")
        return Node(NodeKind.TABLE, children=sections)


def parse_markdown(content: Union[str, bytes], options: MarkdownParserOptions | None = None) -> Node:
    """Parse markdown text into a document tree."""
    return MarkdownToTreeConverter(options).parse(content)
