# Copyright 2026, SpellIt contributors
#
# This file is under the Apache License, Version 2.0.
# See the file `LICENSE` for details.
"""Pretty-print result rows as tables"""
from __future__ import annotations

from typing import Any, Collection, Iterator, List, Mapping, TextIO, Tuple, Union

import json
import sys

ResultType = Collection[Mapping[str, Any]]
TableLayout = Collection[Union[List[str], Tuple[str, ...], str]]


def format_item(key: str | None, value: Any) -> str:
    if value is None:
        formatted = ""
    elif isinstance(value, (list, tuple)):
        formatted = ", ".join(format_item(None, entry) for entry in value)
    elif isinstance(value, dict):
        formatted = json.dumps(value, sort_keys=True, ensure_ascii=False)
    elif isinstance(value, float):
        formatted = "{:.3f}".format(value)
    elif isinstance(value, str):
        # quote strings only when they would be ambiguous in a table: empty or padded
        if not value or value != value.strip():
            formatted = json.dumps(value, ensure_ascii=False)
        else:
            formatted = value
    else:
        formatted = str(value)

    return formatted


def flatten_list(complex_list: TableLayout | None) -> Collection[str]:
    """Flatten a multi-dimensional list to 1D list"""
    if complex_list is None:
        return []
    flattened_list: list[str] = []
    for level1 in complex_list:
        if isinstance(level1, (list, tuple)):
            flattened_list.extend(flatten_list(level1))
        else:
            flattened_list.append(level1)
    return flattened_list


def yield_table(
    result: ResultType,
    table_layout: TableLayout | None = None,
    header: bool = True,
) -> Iterator[str]:
    """
    format a list of dicts in a table, yielding string rows

    :param list result: List of dicts to be printed.
    :param list table_layout: Fields to be printed, could be 1D or 2D list. Examples:
        ["column1", "column2"] or
        [["column1", "column2"], "detail1"]
        Fields after the first row are printed one per line below each entry.
    :param bool header: True to print the field names
    """
    fields = list(flatten_list(table_layout))
    formatted_values: list[dict[str, str]] = []
    widths: dict[str, int] = {}
    for item in result:
        formatted_row = {key: format_item(key, value) for key, value in item.items() if not fields or key in fields}
        formatted_values.append(formatted_row)
        for key, value in formatted_row.items():
            widths[key] = max(len(key), len(value), widths.get(key, 1))

    if table_layout is None:
        table_layout = [sorted(widths)]
    elif not isinstance(next(iter(table_layout), []), (list, tuple)):
        table_layout = [list(table_layout)]  # type: ignore[arg-type]

    layout = list(table_layout)
    horizontal_fields = list(layout[0]) if layout else []
    for field in fields:
        widths.setdefault(field, len(field))

    if header:
        yield "  ".join(f.upper().ljust(widths[f]) for f in horizontal_fields).rstrip()
        yield "  ".join("=" * widths[f] for f in horizontal_fields)
    for row_num, formatted_row in enumerate(formatted_values):
        if len(layout) > 1 and row_num > 0:
            yield ""
        yield "  ".join(formatted_row.get(f, "").ljust(widths[f]) for f in horizontal_fields).rstrip()
        vertical_fields = [f for f in layout[1:] if isinstance(f, str) and formatted_row.get(f)]
        if vertical_fields:
            max_key_width = max(len(f) for f in vertical_fields)
            for f in vertical_fields:
                yield "    {:{}} = {}".format(f, max_key_width, formatted_row[f])


def print_table(
    result: ResultType | None,
    table_layout: TableLayout | None = None,
    header: bool = True,
    file: TextIO | None = None,
) -> None:
    """print a list of dicts in a nicer table format"""
    if not result:
        return
    for row in yield_table(result, table_layout=table_layout, header=header):
        print(row, file=file or sys.stdout)
