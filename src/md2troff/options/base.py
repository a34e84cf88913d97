"""Shared behavior of the md2troff option dataclasses.

Every stage of the pipeline is configured through a frozen dataclass. Fields
carry their CLI help text in ``field(metadata={"help": ...})``, which the
argument parser reads back through ``option_help``.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin for frozen option dataclasses: cloning and field metadata."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        ``__post_init__`` validation runs again on the copy.

        Raises
        ------
        TypeError
            If a keyword does not name a field

        """
        return replace(self, **kwargs)

    @classmethod
    def option_help(cls, name: str) -> str:
        """Return the help text declared for field ``name``.

        Raises
        ------
        KeyError
            If the class has no such field

        """
        for option in fields(cls):
            if option.name == name:
                return str(option.metadata.get("help", ""))
        raise KeyError(f"{cls.__name__} has no option {name!r}")


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for renderer options."""

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for parser options."""

    def __post_init__(self) -> None:
        """Validate field values; subclasses extend this."""
