"""Type inference and column formatting for tabular string data."""

from __future__ import annotations

import re
from enum import Enum
from itertools import groupby
from typing import Iterable, Optional, Sequence

from wcwidth import wcwidth

from tidyviewer.sigfig import DecimalSplits

__all__ = [
    "ValueType",
    "is_logical",
    "is_integer",
    "is_number",
    "is_negative_number",
    "is_double",
    "is_time",
    "is_date",
    "is_date_time",
    "is_na",
    "is_na_string_padded",
    "infer_type_from_string",
    "format_strings",
    "format_if_na",
    "format_if_num",
    "get_col_data_type",
]

ELLIPSIS = "\u2026"
MISSING_VALUE = "NA"


class ValueType(Enum):
    """The kind of value held by a cell."""

    BOOLEAN = "boolean"
    INTEGER = "integer"
    DOUBLE = "double"
    DATE = "date"
    TIME = "time"
    DATE_TIME = "datetime"
    CHARACTER = "character"
    NA = "na"
    """A missing value."""


_LOGICAL = re.compile(
    r"^true\Z|^false\Z|^t\Z|^f\Z|TRUE\Z|^FALSE\Z|^T\Z|^F\Z|^True|^False|^1\Z|^0\Z"
)
_INTEGER = re.compile(r"^\s*([+-]?[1-9][0-9]*|0)\s*\Z")
_NEGATIVE_NUMBER = re.compile(r"^\s*-[0-9]*.?[0-9]*\s*\Z")
_FLOAT = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)
_TIME = re.compile(r"^(?:[01][0-9]|2[0123]):(?:[012345][0-9]):(?:[012345][0-9])\Z")
_DATE = re.compile(r"\d{4}-\d{2}-\d{2}")
_DATE_TIME = re.compile(r"^(?:[01][0-9]|2[0123]):(?:[012345][0-9]):(?:[012345][0-9])")
_NA = re.compile(
    r"^\Z|^(?:N(?:(?:(?:one|AN|a[Nn]|/A)|[Aa])|ull)|n(?:ull|an?|/a?)|(?:missing))\Z"
)
_NA_PADDED = re.compile(
    r"^\Z|(^|\s)(?:N(?:(?:(?:AN|a[Nn]|/A)|[Aa])|ull)|n(?:ull|an?|/a?)|(?:missing))\s*\Z"
)


def _parse_float(text: str) -> Optional[float]:
    """Parse ``text`` strictly as a float literal, without trimming."""
    if _FLOAT.fullmatch(text) is None:
        return None
    return float(text)


def is_logical(text: str) -> bool:
    """Whether ``text`` reads as a boolean (T, F, TRUE, false, 1, 0, ...)."""
    return _LOGICAL.search(text) is not None


def is_integer(text: str) -> bool:
    """Whether ``text`` is an integer, optionally signed and padded."""
    return _INTEGER.search(text) is not None


def is_number(text: str) -> bool:
    """Whether ``text`` is an integer or a floating point number."""
    return is_integer(text) or is_double(text)


def is_negative_number(text: str) -> bool:
    """Whether ``text`` looks like a negative number."""
    return _NEGATIVE_NUMBER.search(text) is not None


def is_double(text: str) -> bool:
    """Whether ``text``, once trimmed, parses as a floating point number."""
    return _parse_float(text.strip()) is not None


def is_time(text: str) -> bool:
    """Whether ``text`` is a time of day such as ``11:59:37``."""
    return _TIME.search(text) is not None


def is_date(text: str) -> bool:
    """Whether ``text`` contains a date such as ``2020-10-09``."""
    return _DATE.search(text) is not None


def is_date_time(text: str) -> bool:
    """Whether ``text`` starts with a time of day."""
    return _DATE_TIME.search(text) is not None


def is_na(text: str) -> bool:
    """Whether ``text`` denotes a missing value."""
    return _NA.search(text) is not None


def is_na_string_padded(text: str) -> bool:
    """Whether ``text`` ends with a missing-value marker, possibly padded."""
    return _NA_PADDED.search(text) is not None


def infer_type_from_string(text: str) -> ValueType:
    """Guess the type of a single value."""
    if is_time(text):
        return ValueType.TIME
    if is_logical(text):
        return ValueType.BOOLEAN
    if is_integer(text):
        return ValueType.INTEGER
    if is_date_time(text):
        return ValueType.DATE_TIME
    if is_date(text):
        return ValueType.DATE
    if is_double(text):
        return ValueType.DOUBLE
    if not text or is_na(text):
        return ValueType.NA
    return ValueType.CHARACTER


def format_if_na(text: str) -> str:
    """Replace a missing value by ``NA``."""
    return MISSING_VALUE if is_na(text) else text


def format_if_num(text: str, sigfig: int) -> str:
    """Format ``text`` to ``sigfig`` significant figures if it is a number."""
    value = _parse_float(text)
    if value is None:
        return text
    return DecimalSplits(value, sigfig).final_string()


def _truncate_to_width(text: str, width: int) -> str:
    """Longest prefix of ``text`` whose display width is at most ``width``."""
    used = 0
    kept = []
    for char in text:
        char_width = max(wcwidth(char), 0)
        if used + char_width > width:
            break
        used += char_width
        kept.append(char)
    return "".join(kept)


def _number_parts(text: str) -> tuple[int, int]:
    """Lengths of the whole and fractional parts of a numeric string."""
    if not is_double(text):
        return 0, 0
    pieces = text.split(".")
    whole = len(pieces[0].encode())
    fract = len(pieces[1].encode()) if len(pieces) > 1 else 0
    return whole, fract


def format_strings(
    column: Iterable[str],
    lower_column_width: int,
    upper_column_width: int,
    sigfig: int,
) -> list[str]:
    """Format a column so that every cell has the same width.

    Numbers are rounded and aligned on their decimal point, missing values
    become ``NA`` and over-long cells are truncated with an ellipsis. Each
    cell is followed by at least one space.
    """
    if lower_column_width > upper_column_width:
        raise ValueError(
            f"lower column width {lower_column_width} exceeds "
            f"upper column width {upper_column_width}"
        )

    cells = []
    for text in column:
        formatted = format_if_num(format_if_na(text), sigfig)
        whole, fract = _number_parts(formatted)
        cells.append((formatted, whole, fract))

    max_fract = max((fract for _, _, fract in cells), default=0)
    max_whole = max((whole for _, whole, _ in cells), default=0)

    padded = []
    for text, whole, fract in cells:
        if max_fract > 0 and is_double(text):
            if whole < max_whole:
                text = " " * (max_whole - whole) + text
            text += " " * (max_fract - fract)
        elif max_fract > 0 and is_na(text):
            if max_whole > 2:
                text = " " * (max_whole - 2) + text
            text += " " * (max_fract - fract)
        padded.append(text)

    widest = max((len(text) for text in padded), default=0)
    max_width = min(max(widest, lower_column_width), upper_column_width)

    result = []
    for text in padded:
        if len(text) > max_width:
            if max_width < 1:
                raise ValueError("column width too small to truncate a cell")
            result.append(_truncate_to_width(text, max_width - 1) + ELLIPSIS + " ")
        else:
            result.append(text + " " * (max_width - len(text) + 1))
    return result


def get_col_data_type(column: Sequence[str]) -> ValueType:
    """The most frequent run type in ``column``, ignoring missing values.

    Consecutive values of the same type are counted together; on a tie the
    later run wins.

    Raises:
        ValueError: if every value of the column is missing.
    """
    types = (infer_type_from_string(text) for text in column)
    best: Optional[tuple[ValueType, int]] = None
    for kind, run in groupby(t for t in types if t is not ValueType.NA):
        count = sum(1 for _ in run)
        if best is None or count >= best[1]:
            best = (kind, count)
    if best is None:
        raise ValueError("column holds no non-missing values")
    return best[0]