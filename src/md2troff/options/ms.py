#  Copyright (c) 2025 Tom Villani, Ph.D.

# md2troff/options/ms.py
"""Configuration options for ms macro rendering."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2troff.constants import DEFAULT_MS_PREAMBLE, DEFAULT_MS_SNIFF_FRONT_MATTER
from md2troff.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MsRendererOptions(BaseRendererOptions):
    """Configuration options for document-tree-to-ms rendering.

    Parameters
    ----------
    preamble : str, default ""
        Text written verbatim before the first rendered node. Empty by
        default, so no header is emitted.
    sniff_front_matter : bool, default False
        Also treat a level-1 heading whose text starts with ``title:`` as
        front matter, for trees whose parser cannot flag the front-matter
        heading itself. This is a heuristic: any heading that happens to
        start with that prefix is taken for front matter.

    """

    preamble: str = field(
        default=DEFAULT_MS_PREAMBLE,
        metadata={"help": "Text written before the rendered document"},
    )
    sniff_front_matter: bool = field(
        default=DEFAULT_MS_SNIFF_FRONT_MATTER,
        metadata={
            "help": "Detect front matter by its 'title:' prefix when the parser does not flag it "
            "(heuristic, best effort)"
        },
    )

    def __post_init__(self) -> None:
        """Validate the preamble type."""
        super().__post_init__()
        if not isinstance(self.preamble, str):
            raise TypeError(f"preamble must be a string, got {type(self.preamble).__name__}")
