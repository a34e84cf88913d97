#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/macros.py
"""ms macro command formatter and block emitters.

``ms_print`` renders one macro request line, ``.NAME arg1 arg2\\n``. The
emitters below write fixed macro sequences to a binary sink and are the only
callers of ``ms_print``; they pass nothing but strings and integers.

Arguments are written verbatim: troff special characters are not escaped
(see ``esc``).

"""

from __future__ import annotations

import datetime
import io
from typing import IO, Union

from md2troff.constants import (
    AUTHOR,
    BEGIN_ABSTRACT,
    BEGIN_AND_INDENT_PARAGRAPH,
    BEGIN_CODE_BLOCK,
    BEGIN_INDENT,
    BEGIN_PARAGRAPH,
    BOLD,
    CHANGE_DATE,
    CHANGE_DATE_FORMAT,
    DISPLAY_END,
    DISPLAY_START,
    END_ABSTRACT,
    END_CODE_BLOCK,
    END_INDENT,
    HTML,
    INSTITUTION,
    ITALIC,
    LEFT_ALIGNED_PARAGRAPH,
    LINEBREAK,
    ROMAN,
    SIGNATURE,
    TABLE_END,
    TABLE_HAS_HEADER,
    TABLE_HEADING,
    TABLE_START,
    TITLE,
    UNDERLINE,
)
from md2troff.tables import align_table
from md2troff.titleblock import Author, TitleBlock

MacroArg = Union[str, int]


def _format_arg(arg: MacroArg) -> str:
    if isinstance(arg, str):
        return arg
    if isinstance(arg, int):
        return f"{arg:d}"
    raise TypeError(f"ms macro arguments must be str or int, got {type(arg).__name__}")


def ms_print(macro: str, *args: MacroArg) -> bytes:
    """Format a macro request line.

    Parameters
    ----------
    macro : str
        Macro name without the leading dot
    *args : str or int
        Arguments, each written after a single space

    Returns
    -------
    bytes
        ``.<macro> <args...>\\n`` encoded as UTF-8

    Raises
    ------
    TypeError
        If an argument is neither str nor int. Callers only pass str or int
        arguments, so this is a backstop and not part of the call contract.
        ``bool`` passes as an int subclass.

    Examples
    --------
        >>> ms_print("IP", "first:", 9)
        b'.IP first: 9\\n'

    """
    parts = [f".{macro}"]
    parts.extend(_format_arg(arg) for arg in args)
    return (" ".join(parts) + LINEBREAK).encode("utf-8")


def _write_text(w: IO[bytes], text: str) -> None:
    w.write(text.encode("utf-8"))


def esc(w: IO[bytes], p: bytes) -> None:
    """Write ``p`` to ``w``.

    This is meant to escape troff special characters but writes the bytes
    unchanged. Backslashes and leading dots or quotes in document text reach
    troff as is.
    """
    w.write(p)


def line_break(w: IO[bytes]) -> None:
    w.write(LINEBREAK.encode("utf-8"))


def display(w: IO[bytes], p: bytes) -> None:
    """Wrap ``p`` in a display block::

    .DS
    <p>
    .DE
    """
    w.write(ms_print(DISPLAY_START))
    w.write(p)
    w.write(ms_print(DISPLAY_END))


def table_heading(w: IO[bytes]) -> None:
    w.write(ms_print(TABLE_HEADING))


def table(w: IO[bytes], p: bytes) -> None:
    """Align a buffered table and write it inside a display block::

    .DS
    .TS H
    <header>
    .TH
    <body>
    .TE
    .DE

    Raises
    ------
    TableLayoutError
        If ``p`` holds no complete row
    """
    header, body = align_table(p)
    buf = io.BytesIO()
    buf.write(ms_print(TABLE_START, TABLE_HAS_HEADER))
    esc(buf, header)
    line_break(buf)
    table_heading(buf)
    esc(buf, body)
    buf.write(ms_print(TABLE_END))
    display(w, buf.getvalue())


def indent(w: IO[bytes]) -> None:
    w.write(ms_print(BEGIN_INDENT))


def outdent(w: IO[bytes]) -> None:
    w.write(ms_print(END_INDENT))


def indent_paragraph(w: IO[bytes], label: str) -> None:
    """Write ``.IP <label>``."""
    w.write(ms_print(BEGIN_AND_INDENT_PARAGRAPH, label))


def left_aligned_paragraph(w: IO[bytes], text: str, level: int) -> None:
    """Start a paragraph.

    A negative ``level`` starts a fresh ``.LP`` paragraph. Otherwise the text
    continues the current (possibly indented) context after a newline.
    """
    if level < 0:
        w.write(ms_print(LEFT_ALIGNED_PARAGRAPH, LINEBREAK, text))
    else:
        _write_text(w, LINEBREAK)
        _write_text(w, text)


def bold(w: IO[bytes], text: str | None = None) -> None:
    """Switch to bold, or set ``text`` in bold when given."""
    w.write(ms_print(BOLD) if text is None else ms_print(BOLD, text))


def roman(w: IO[bytes]) -> None:
    w.write(ms_print(ROMAN))


def italic(w: IO[bytes]) -> None:
    w.write(ms_print(ITALIC))


def underline(w: IO[bytes]) -> None:
    w.write(ms_print(UNDERLINE))


def code_block(w: IO[bytes], code: str) -> None:
    """Write a program display::

    .P1
    <code>
    .P2

    Leading spaces of the first line are dropped.
    """
    w.write(ms_print(BEGIN_CODE_BLOCK))
    _write_text(w, code.lstrip(" "))
    w.write(ms_print(END_CODE_BLOCK))


def html(w: IO[bytes], attribute: str) -> None:
    w.write(ms_print(HTML, attribute))


def title(w: IO[bytes], text: str) -> None:
    w.write(ms_print(TITLE, LINEBREAK, text))


def abstract(w: IO[bytes], text: str) -> None:
    """Write the abstract between ``.AB`` and ``.AE``."""
    w.write(ms_print(BEGIN_ABSTRACT, LINEBREAK, text.lstrip(" ")))
    w.write(ms_print(END_ABSTRACT))


def author_bio(w: IO[bytes], author: Author) -> None:
    """Write an author entry::

    .AU
    .I <name>
    .I <email>
    .AI <affiliation>

    The ``.AI`` line is left out when the affiliation is one character or
    shorter.
    """
    w.write(ms_print(AUTHOR))
    w.write(ms_print(ITALIC, author.name))
    w.write(ms_print(ITALIC, author.email))
    if len(author.affiliation) > 1:
        w.write(ms_print(INSTITUTION, author.affiliation))


def format_change_date(d: datetime.datetime) -> str:
    """Format ``d`` the way ``.ND`` expects, e.g. ``Feb 22, 2020``."""
    return CHANGE_DATE_FORMAT.format(month=d.strftime("%b"), day=d.day, year=d.year)


def change_date(w: IO[bytes], d: datetime.datetime | None) -> None:
    """Write ``.ND <date>``; with no date, ``.ND`` alone suppresses the date."""
    if d is None:
        w.write(ms_print(CHANGE_DATE))
    else:
        w.write(ms_print(CHANGE_DATE, format_change_date(d)))


def begin_paragraph(w: IO[bytes]) -> None:
    w.write(ms_print(BEGIN_PARAGRAPH))


def signature(w: IO[bytes]) -> None:
    w.write(ms_print(SIGNATURE))


def title_block(w: IO[bytes], block: TitleBlock) -> None:
    """Write the document title block.

    The sequence is ``.HTML <title>``, the title, one author entry per author,
    the date, the abstract if there is one, and ``.PP`` to resume body text.
    """
    html(w, block.title)
    title(w, block.title)
    for author in block.authors:
        author_bio(w, author)
    change_date(w, block.date)
    if block.abstract:
        abstract(w, block.abstract)
    begin_paragraph(w)
