#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/renderers/base.py
"""Base classes for document tree renderers.

This module defines the abstract base class renderers inherit from. A renderer
produces its whole output as bytes; writing to paths and streams is shared
here.

"""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union, cast

from md2troff.ast import Node
from md2troff.exceptions import InvalidOptionsError
from md2troff.options.base import BaseRendererOptions

OutputTarget = Union[str, Path, IO[bytes], IO[str]]


class BaseRenderer(ABC):
    """Abstract base class for document tree renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_bytes(self, doc: Node) -> bytes:
        """Render the document tree to bytes.

        Parameters
        ----------
        doc : Node
            Root document node

        Returns
        -------
        bytes
            Rendered output

        Raises
        ------
        RenderingError
            If rendering fails

        """

    def render_to_string(self, doc: Node) -> str:
        """Render the document tree to a UTF-8 decoded string."""
        return self.render_to_bytes(doc).decode("utf-8")

    def render(self, doc: Node, output: OutputTarget) -> None:
        """Render the document tree and write it to ``output``.

        Parameters
        ----------
        doc : Node
            Root document node
        output : str, Path, IO[bytes] or IO[str]
            File path or file-like object

        """
        self.write_output(self.render_to_bytes(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_output(content: bytes, output: OutputTarget) -> None:
        """Write rendered bytes to a path or stream.

        Text streams receive the content decoded as UTF-8.

        Raises
        ------
        TypeError
            If output type is not supported

        """
        if isinstance(output, (str, Path)):
            Path(output).write_bytes(content)
            return

        if not hasattr(output, "write"):
            raise TypeError(f"Unsupported output type: {type(output)}")

        if isinstance(output, io.TextIOBase):
            cast(IO[str], output).write(content.decode("utf-8"))
        else:
            cast(IO[bytes], output).write(content)
