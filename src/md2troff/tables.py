#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2troff/tables.py
"""Column alignment for buffered tables.

While a table is open the renderer writes every cell followed by a tab and
every row followed by a newline. ``align_table`` turns that buffer into
fixed-width text the way Go's text/tabwriter does, padding each column block
to its widest cell plus a gutter, and splits the result into the header line
and the body.

"""

from __future__ import annotations

from md2troff.constants import TABLE_COLUMN_PADDING
from md2troff.exceptions import TableLayoutError


def align_columns(text: str, padding: int = TABLE_COLUMN_PADDING) -> str:
    """Pad tab-terminated cells so that columns line up.

    Cells are aligned within column blocks: a run of consecutive lines that
    all hold a tab-terminated cell in the same column. A line without that
    cell ends the block, and the lines after it get their own width. Only
    tab-terminated cells belong to a column. Whatever follows the last tab of
    a line is copied through unpadded. Widths are counted in characters, not
    bytes.

    Parameters
    ----------
    text : str
        Rows separated by newlines, cells terminated by tabs
    padding : int, default = TABLE_COLUMN_PADDING
        Spaces added after the widest cell of each column block

    Returns
    -------
    str
        Aligned text with the same line structure

    Examples
    --------
        >>> align_columns("a\\tbbbbbb\\t\\nccc\\t\\nd\\te\\t\\n").split("\\n")
        ['a      bbbbbb    ', 'ccc    ', 'd      e    ', '']

    """
    rows = [line.split("\t") for line in text.split("\n")]
    lines = [""] * len(rows)
    widths: list[int] = []

    def emit(start: int, stop: int) -> None:
        for index in range(start, stop):
            cells = rows[index]
            padded = "".join(cell.ljust(widths[column]) for column, cell in enumerate(cells[:-1]))
            lines[index] = padded + cells[-1]

    def format_block(start: int, stop: int) -> None:
        column = len(widths)
        current = start
        while current < stop:
            if column >= len(rows[current]) - 1:
                current += 1
                continue
            emit(start, current)
            start = current
            width = 0
            while current < stop and column < len(rows[current]) - 1:
                width = max(width, len(rows[current][column]) + padding)
                current += 1
            widths.append(width)
            format_block(start, current)
            widths.pop()
            start = current
        emit(start, stop)

    format_block(0, len(rows))
    return "\n".join(lines)


def align_table(data: bytes, padding: int = TABLE_COLUMN_PADDING) -> tuple[bytes, bytes]:
    """Align a buffered table and split it into header and body.

    Parameters
    ----------
    data : bytes
        UTF-8 table buffer as written by the renderer
    padding : int, default = TABLE_COLUMN_PADDING
        Minimum gutter between columns

    Returns
    -------
    tuple of (bytes, bytes)
        The header line without its newline, and the remaining body

    Raises
    ------
    TableLayoutError
        If the buffer holds no rows or no row terminator

    """
    if not data:
        raise TableLayoutError("Cannot lay out a table without rows")

    try:
        decoded = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise TableLayoutError("Table buffer is not valid UTF-8", original_error=e) from e

    header, newline, body = align_columns(decoded, padding).partition("\n")
    if not newline:
        raise TableLayoutError(f"Table buffer has no row terminator: {decoded!r}")

    return header.encode("utf-8"), body.encode("utf-8")
