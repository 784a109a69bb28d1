"""Render rows of strings as an aligned, optionally coloured, table.

The first row is the header. Numbers are shown with a fixed budget of
significant figures and aligned on their decimal point. Missing values are
shown as ``NA``. Long cells are truncated with an ellipsis.

Example::

    rows = [
        ["a", "b"],
        ["1", "b"],
        ["4.1453", "c"],
        ["2.4", "f"],
        ["5", "e"],
    ]
    display_table(rows)
"""

from __future__ import annotations

import json
import shutil
import sys
from dataclasses import dataclass, field
from typing import Optional, Sequence, TextIO

from tidyviewer.datatype import (
    ValueType,
    format_strings,
    get_col_data_type,
    is_na,
    is_na_string_padded,
    is_negative_number,
    is_number,
)

__all__ = ["TableConfig", "render_table", "display_table"]

Color = tuple[int, int, int]

NORD_META_COLOR: Color = (143, 188, 187)
NORD_HEADER_COLOR: Color = (94, 129, 172)
NORD_STD_COLOR: Color = (216, 222, 233)
NORD_NA_COLOR: Color = (191, 97, 106)
NORD_NEG_NUM_COLOR: Color = (208, 135, 112)

ELLIPSIS = "\u2026"
MARGIN = " " * 6

_TYPE_NAMES = {
    ValueType.BOOLEAN: "Boolean",
    ValueType.INTEGER: "Integer",
    ValueType.DOUBLE: "Double",
    ValueType.DATE: "Date",
    ValueType.TIME: "Time",
    ValueType.DATE_TIME: "DateTime",
    ValueType.CHARACTER: "Character",
    ValueType.NA: "Na",
}


def _stdout_is_tty() -> bool:
    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


def _terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size()
    return size.columns, size.lines


@dataclass
class TableConfig:
    """How a table is laid out and coloured."""

    std_color: Color = NORD_STD_COLOR
    neg_num_color: Color = NORD_NEG_NUM_COLOR
    na_color: Color = NORD_NA_COLOR
    meta_color: Color = NORD_META_COLOR
    header_color: Color = NORD_HEADER_COLOR
    title_option: str = ""
    footer_option: str = ""
    display_meta: bool = False
    extend_option: bool = True
    line_counter: bool = False
    debug_mode: bool = False
    is_tty: bool = field(default_factory=_stdout_is_tty)
    is_force_color: bool = False
    term_tuple: tuple[int, int] = field(default_factory=_terminal_size)
    sigfig: int = 3
    lower_column_width: int = 2
    upper_column_width: int = 50
    row_display_option: int = 25

    @property
    def colored(self) -> bool:
        return self.is_tty or self.is_force_color


class _Painter:
    """Wraps text in true-colour escape sequences when colouring is on."""

    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def color(self, text: object, rgb: Color) -> str:
        if not self.enabled:
            return str(text)
        r, g, b = rgb
        return f"\x1b[38;2;{r};{g};{b}m{text}\x1b[39m"

    def bold(self, text: str) -> str:
        return f"\x1b[1m{text}\x1b[0m" if self.enabled else text

    def underline(self, text: str) -> str:
        return f"\x1b[4m{text}\x1b[0m" if self.enabled else text


def _debug(label: str, value: object) -> str:
    return f'"{label}"\n{json.dumps(value, ensure_ascii=False)}\n'


def _num_cols_to_print(header: Sequence[str], term_width: int) -> int:
    """How many leading columns fit in a terminal of ``term_width``."""
    line = MARGIN
    count = 0
    for text in header:
        line += text
        if len(line) > term_width:
            break
        count += 1
    return count


def render_table(rows: Sequence[Sequence[str]], config: Optional[TableConfig] = None) -> str:
    """Return the text that displays ``rows``, whose first row is the header.

    Raises:
        ValueError: if there are no rows, or a shown row has fewer cells
            than the header.
    """
    if config is None:
        config = TableConfig()
    if not rows:
        raise ValueError("a table needs at least a header row")

    cols = len(rows[0])
    rows_in_file = len(rows)
    if config.extend_option:
        shown = rows_in_file
    else:
        shown = min(rows_in_file, config.row_display_option + 1)
    rows_remaining = rows_in_file - shown
    remaining_text = f"{ELLIPSIS} with {rows_remaining} more rows"

    shown_rows = rows[:shown]
    for number, row in enumerate(shown_rows):
        if len(row) < cols:
            raise ValueError(
                f"row {number} has {len(row)} cells, the header has {cols}"
            )
    columns = [[row[col] for row in shown_rows] for col in range(cols)]

    out: list[str] = []
    if config.debug_mode:
        out.append(_debug("v", columns))
        types = [_TYPE_NAMES[get_col_data_type(column)] for column in columns]
        out.append('"vec_datatypes"\n' + "[" + ", ".join(types) + "]\n")

    formatted = [
        format_strings(
            column,
            config.lower_column_width,
            config.upper_column_width,
            config.sigfig,
        )
        for column in columns
    ]

    if config.debug_mode:
        out.append(_debug("Transposed Vector of Elements", columns))
        out.append(_debug("Formatted: Vector of Elements", formatted))

    table = [list(cells) for cells in zip(*formatted)] if formatted else [[] for _ in shown_rows]

    if config.extend_option:
        num_cols = cols
    else:
        num_cols = _num_cols_to_print(table[0], config.term_tuple[0])

    paint = _Painter(config.colored)
    meta = config.meta_color

    if config.display_meta:
        out.append(MARGIN)
        out.append(
            " ".join(
                paint.color(part, meta)
                for part in ("tv dim:", rows_in_file - 1, "x", cols)
            )
            + "\n"
        )

    if not is_na(config.title_option):
        out.append(MARGIN)
        out.append(paint.bold(paint.underline(paint.color(config.title_option, meta))) + "\n")

    if config.line_counter:
        out.append(MARGIN)
    for text in table[0][:num_cols]:
        out.append(paint.bold(paint.color(text, config.header_color)))
    out.append("\n")

    for number, row in enumerate(table[1:], start=1):
        if config.line_counter:
            out.append(paint.color(f"{number:<6}", meta))
        for cell in row[:num_cols]:
            if is_na_string_padded(cell):
                rgb = config.na_color
            elif is_number(cell) and is_negative_number(cell):
                rgb = config.neg_num_color
            else:
                rgb = config.std_color
            out.append(paint.color(cell, rgb))
        out.append("\n")

    if rows_remaining > 0:
        out.append(MARGIN)
        out.append(paint.color(remaining_text, meta))
        if num_cols < cols:
            out.append(
                " "
                + " ".join(
                    paint.color(part, meta)
                    for part in ("and", cols - num_cols, "more variables")
                )
                + paint.color(":", meta)
            )
            hidden = rows[0][num_cols:cols]
            for position, name in enumerate(hidden):
                out.append(" " + paint.color(name, meta))
                if position + 1 < len(hidden):
                    out.append(paint.color(",", meta))

    if not is_na(config.footer_option):
        out.append(MARGIN)
        out.append(paint.color(config.footer_option, meta) + "\n")

    return "".join(out)


def display_table(
    rows: Sequence[Sequence[str]],
    config: Optional[TableConfig] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Write the table for ``rows`` to ``file`` (standard output by default).

    A closed pipe on the other end is ignored.
    """
    text = render_table(rows, config)
    stream = sys.stdout if file is None else file
    try:
        stream.write(text)
        stream.flush()
    except BrokenPipeError:
        pass