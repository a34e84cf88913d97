#  Copyright (c) 2025 Tom Villani, Ph.D.
"""md2troff - render markdown documents as troff ms macros.

md2troff walks a parsed document tree and writes the macro source that
``troff -ms`` typesets: section headings, paragraphs, indented lists, program
displays, tbl tables and a title block assembled from YAML front matter.
The macro source can be piped through troff, tr2post and ps2pdf to produce a
PDF.

Requirements
------------
- Python 3.10+
- mistune (markdown parsing) and PyYAML (front matter)
- troff, tr2post and ps2pdf on the system for PDF output

Examples
--------
Basic usage:

    >>> from md2troff import markdown_to_ms
    >>> print(markdown_to_ms("# Intro\\n\\nHello").decode())
    .SH
    Intro
    <BLANKLINE>
    Hello
    .SG
    <BLANKLINE>

Rendering a tree built by hand:

    >>> from md2troff.ast import document, heading, text
    >>> from md2troff.renderers import MsRenderer
    >>> macros = MsRenderer().render_to_bytes(document(heading(1, text("Title"))))

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Union

from md2troff.ast import Node
from md2troff.exceptions import (
    ExternalToolError,
    FrontMatterError,
    InvalidOptionsError,
    Md2TroffError,
    ParsingError,
    RenderingError,
    TableLayoutError,
    UnknownNodeKindError,
    ValidationError,
)
from md2troff.options import MarkdownParserOptions, MsRendererOptions, TypesetOptions
from md2troff.parsers import MarkdownToTreeConverter
from md2troff.renderers import MsRenderer
from md2troff.typeset import typeset_pdf

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

MarkdownInput = Union[str, Path, IO[bytes], IO[str], bytes]


def to_ast(source: MarkdownInput, parser_options: MarkdownParserOptions | None = None) -> Node:
    """Parse markdown into a document tree.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown text, raw bytes, a file path or a file-like object
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parsing options

    Returns
    -------
    Node
        Document node

    """
    return MarkdownToTreeConverter(parser_options).parse(source)


def markdown_to_ms(
    source: MarkdownInput,
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: MsRendererOptions | None = None,
) -> bytes:
    """Convert markdown to ms macro source.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        Markdown text, raw bytes, a file path or a file-like object
    parser_options : MarkdownParserOptions or None, default = None
        Markdown parsing options
    renderer_options : MsRendererOptions or None, default = None
        ms rendering options

    Returns
    -------
    bytes
        ms macro source

    Raises
    ------
    ParsingError
        If the markdown cannot be turned into a document tree
    RenderingError
        If the tree cannot be rendered

    """
    doc = to_ast(source, parser_options)
    return MsRenderer(renderer_options).render_to_bytes(doc)


def markdown_to_pdf(
    source: MarkdownInput,
    parser_options: MarkdownParserOptions | None = None,
    renderer_options: MsRendererOptions | None = None,
    typeset_options: TypesetOptions | None = None,
) -> bytes:
    """Convert markdown to PDF through troff, tr2post and ps2pdf.

    Raises
    ------
    ExternalToolError
        If one of the typesetting programs fails

    """
    payload = markdown_to_ms(source, parser_options, renderer_options)
    logger.debug("Typesetting %d bytes of ms macros", len(payload))
    return typeset_pdf(payload, typeset_options)


__all__ = [
    "__version__",
    "to_ast",
    "markdown_to_ms",
    "markdown_to_pdf",
    "MarkdownToTreeConverter",
    "MsRenderer",
    "MarkdownParserOptions",
    "MsRendererOptions",
    "TypesetOptions",
    "Md2TroffError",
    "ValidationError",
    "InvalidOptionsError",
    "ParsingError",
    "RenderingError",
    "UnknownNodeKindError",
    "FrontMatterError",
    "TableLayoutError",
    "ExternalToolError",
]
