"""Render a list of issue records as an aligned text table.

Widths are computed up front from the headers and every cell, so building
the lines is free of side effects; only print_table_for_columns writes.

    number created_at title
    ------ ---------- -----
    1      2020-01-01 x
    22     2020-02-02 yy
"""

import sys
from typing import Any, Dict, List, Mapping, Sequence, TextIO


def printable(value: Any) -> str:
    """Display string of a cell value."""
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    return str(value)


def split_into_columns(rows: Sequence[Mapping[str, Any]], headers: Sequence[str]) -> List[List[str]]:
    """Return one list of printable cells per header.

    A row without one of the headers raises KeyError.
    """
    return [[printable(row[header]) for row in rows] for header in headers]


def column_widths(rows: Sequence[Mapping[str, Any]], headers: Sequence[str]) -> Dict[str, int]:
    """Map each header to the widest of its label and its cells."""
    columns = split_into_columns(rows, headers)
    return {header: max([len(header), *(len(cell) for cell in column)]) for header, column in zip(headers, columns)}


def format_row(values: Sequence[str], widths: Sequence[int]) -> str:
    return " ".join(value.ljust(width) for value, width in zip(values, widths))


def separator(widths: Sequence[int]) -> str:
    return " ".join("-" * width for width in widths)


def format_table(rows: Sequence[Mapping[str, Any]], headers: Sequence[str]) -> List[str]:
    """Header line, dash separator, then one line per row."""
    widths_by_header = column_widths(rows, headers)
    widths = [widths_by_header[header] for header in headers]
    lines = [format_row(headers, widths), separator(widths)]
    for row in rows:
        lines.append(format_row([printable(row[header]) for header in headers], widths))
    return lines


def print_table_for_columns(
    rows: Sequence[Mapping[str, Any]],
    headers: Sequence[str],
    out: TextIO | None = None,
) -> None:
    """Write the table for rows to out (stdout by default)."""
    out = out or sys.stdout
    for line in format_table(rows, headers):
        out.write(line + "\n")
