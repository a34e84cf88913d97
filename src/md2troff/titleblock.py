#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/titleblock.py
"""Front-matter title block model.

A document may open with a block of YAML front matter describing its title,
date, authors and abstract. The parser hands that block to the renderer as the
text of a specially flagged heading; ``load_title_block`` deserializes it into
an immutable ``TitleBlock`` which the renderer turns into the ms title macros.

Recognized keys are ``title``, ``date``, ``slug``, ``authors`` (a list of
``name``/``email``/``affiliation`` mappings), ``abstract`` and ``tags``.
Unknown keys are ignored.

"""

from __future__ import annotations

import datetime
import logging
import re
from dataclasses import dataclass
from email.utils import parsedate_to_datetime
from typing import Any, Mapping

import yaml

from md2troff.exceptions import FrontMatterError

logger = logging.getLogger(__name__)

# Tried in order after whitespace has been collapsed
_DATE_FORMATS = (
    "%b %d, %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%d %B %Y",
    "%Y-%m-%d",
    "%Y/%m/%d",
    "%m/%d/%Y",
    "%Y-%m-%d %H:%M",
    "%Y-%m-%d %H:%M:%S",
    "%a %b %d %H:%M:%S %Y",
    "%a %b %d %H:%M:%S %Z %Y",
    "%a, %d %b %Y",
)

# Zone abbreviation in Unix date(1) output, e.g. "Sat Feb 22 15:18:37 PST 2020"
_DATE_ZONE_RE = re.compile(r"\s[A-Z]{2,5}\s(?=\d{4}$)")


@dataclass(frozen=True)
class Author:
    """An author entry of the title block."""

    name: str = ""
    affiliation: str = ""
    email: str = ""


@dataclass(frozen=True)
class TitleBlock:
    """Document metadata carried by the front matter.

    Parameters
    ----------
    title : str, default = ""
        Document title
    date : datetime.datetime or None, default = None
        Document date, parsed leniently from free text
    slug : str, default = ""
        URL slug; preserved but not rendered
    authors : tuple of Author, default = ()
        Authors in document order
    abstract : str, default = ""
        Abstract text
    tags : frozenset of str, default = frozenset()
        Document tags; preserved but not rendered

    """

    title: str = ""
    date: datetime.datetime | None = None
    slug: str = ""
    authors: tuple[Author, ...] = ()
    abstract: str = ""
    tags: frozenset[str] = frozenset()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> TitleBlock:
        """Build a title block from a deserialized front-matter mapping.

        Raises
        ------
        ValueError
            If the date cannot be parsed or a field has the wrong shape

        """
        date_value = data.get("date")
        return cls(
            title=_as_text(data.get("title")),
            date=parse_date(date_value) if date_value not in (None, "") else None,
            slug=_as_text(data.get("slug")),
            authors=_parse_authors(data.get("authors")),
            abstract=_as_text(data.get("abstract")),
            tags=_parse_tags(data.get("tags")),
        )


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


def _parse_authors(value: Any) -> tuple[Author, ...]:
    if value is None:
        return ()
    if not isinstance(value, list):
        raise ValueError(f"authors must be a list, got {type(value).__name__}")

    authors = []
    for entry in value:
        if isinstance(entry, str):
            authors.append(Author(name=entry))
        elif isinstance(entry, Mapping):
            authors.append(
                Author(
                    name=_as_text(entry.get("name")),
                    affiliation=_as_text(entry.get("affiliation")),
                    email=_as_text(entry.get("email")),
                )
            )
        else:
            raise ValueError(f"author entries must be mappings, got {type(entry).__name__}")
    return tuple(authors)


def _parse_tags(value: Any) -> frozenset[str]:
    if value is None:
        return frozenset()
    if isinstance(value, str):
        return frozenset(tag.strip() for tag in value.split(",") if tag.strip())
    if isinstance(value, list):
        return frozenset(str(tag) for tag in value)
    raise ValueError(f"tags must be a list, got {type(value).__name__}")


def parse_date(value: Any) -> datetime.datetime:
    """Parse a loosely formatted date.

    Accepts ``datetime``/``date`` objects (YAML turns ISO dates into these),
    and text in a number of common shapes: ``Feb 22, 2020``, ``22 February
    2020``, ``2020-02-22``, ``02/22/2020``, Unix ``date`` output such as
    ``Sat Feb 22 15:18:37 GMT 2020``, RFC 2822 and ISO 8601 timestamps.

    Parameters
    ----------
    value : str, datetime.date or datetime.datetime
        The date to parse

    Returns
    -------
    datetime.datetime
        Parsed date; time zone information is kept when the text has one

    Raises
    ------
    ValueError
        If the value matches none of the accepted formats

    """
    if isinstance(value, datetime.datetime):
        return value
    if isinstance(value, datetime.date):
        return datetime.datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        raise ValueError(f"Cannot parse date from {type(value).__name__}")

    candidate = " ".join(value.split())
    if not candidate:
        raise ValueError("Cannot parse an empty date")

    for date_format in _DATE_FORMATS:
        try:
            return datetime.datetime.strptime(candidate, date_format)
        except ValueError:
            continue

    without_zone = _DATE_ZONE_RE.sub(" ", candidate)
    if without_zone != candidate:
        try:
            return datetime.datetime.strptime(without_zone, "%a %b %d %H:%M:%S %Y")
        except ValueError:
            pass

    try:
        return datetime.datetime.fromisoformat(candidate)
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(candidate)
    except (TypeError, ValueError):
        pass

    raise ValueError(f"Unrecognized date format: {value!r}")


def load_title_block(payload: str) -> TitleBlock:
    """Deserialize a YAML front-matter payload into a title block.

    Parameters
    ----------
    payload : str
        The YAML text

    Returns
    -------
    TitleBlock
        The parsed title block

    Raises
    ------
    FrontMatterError
        If the payload is not valid YAML, is not a mapping, or holds a value
        of the wrong shape

    """
    try:
        data = yaml.safe_load(payload)
    except yaml.YAMLError as e:
        raise FrontMatterError(f"Front matter is not valid YAML: {e}", payload=payload, original_error=e) from e

    if not isinstance(data, Mapping):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}",
            payload=payload,
        )

    try:
        block = TitleBlock.from_dict(data)
    except ValueError as e:
        raise FrontMatterError(f"Invalid front matter: {e}", payload=payload, original_error=e) from e

    logger.debug("Loaded title block %r with %d author(s)", block.title, len(block.authors))
    return block
