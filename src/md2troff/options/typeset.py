#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2troff/options/typeset.py
"""Configuration options for the external typesetting passes."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2troff.constants import (
    DEFAULT_PS2PDF_ARGS,
    DEFAULT_PS2PDF_BINARY,
    DEFAULT_TR2POST_ARGS,
    DEFAULT_TR2POST_BINARY,
    DEFAULT_TROFF_ARGS,
    DEFAULT_TROFF_BINARY,
    DEFAULT_TYPESET_TIMEOUT,
)
from md2troff.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class TypesetOptions(CloneFrozenMixin):
    """Binaries and arguments for turning ms macros into PDF.

    Parameters
    ----------
    troff_binary : str
        troff executable, plan9port's by default
    troff_args : tuple of str
        Arguments for troff
    tr2post_binary : str
        troff-output-to-PostScript converter
    tr2post_args : tuple of str
        Arguments for tr2post
    ps2pdf_binary : str
        PostScript-to-PDF converter
    ps2pdf_args : tuple of str
        Arguments for ps2pdf; the default reads stdin and writes stdout
    timeout : float or None
        Seconds each pass may run; None waits forever

    """

    troff_binary: str = field(
        default=DEFAULT_TROFF_BINARY,
        metadata={"help": "troff executable"},
    )
    troff_args: tuple[str, ...] = field(
        default=DEFAULT_TROFF_ARGS,
        metadata={"help": "Arguments passed to troff"},
    )
    tr2post_binary: str = field(
        default=DEFAULT_TR2POST_BINARY,
        metadata={"help": "tr2post executable"},
    )
    tr2post_args: tuple[str, ...] = field(
        default=DEFAULT_TR2POST_ARGS,
        metadata={"help": "Arguments passed to tr2post"},
    )
    ps2pdf_binary: str = field(
        default=DEFAULT_PS2PDF_BINARY,
        metadata={"help": "ps2pdf executable"},
    )
    ps2pdf_args: tuple[str, ...] = field(
        default=DEFAULT_PS2PDF_ARGS,
        metadata={"help": "Arguments passed to ps2pdf"},
    )
    timeout: float | None = field(
        default=DEFAULT_TYPESET_TIMEOUT,
        metadata={"help": "Seconds each pass may run"},
    )

    def __post_init__(self) -> None:
        """Validate the timeout.

        Raises
        ------
        ValueError
            If the timeout is not positive.

        """
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
