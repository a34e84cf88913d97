#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/md2troff/renderers/__init__.py
"""Renderers for converting the document tree to troff macro source.

Available renderers:
- MsRenderer: Render to troff ms macros

Examples
--------
    >>> from md2troff.ast import document, heading, text
    >>> from md2troff.renderers import MsRenderer
    >>> macros = MsRenderer().render_to_string(document(heading(1, text("Title"))))

"""

from md2troff.renderers.base import BaseRenderer
from md2troff.renderers.ms import MsRenderer

__all__ = ["BaseRenderer", "MsRenderer"]
