"""Significant-figure formatting of floating point numbers for column display.

Numbers are shown in decimal notation with a budget of significant digits,
so that columns of numbers are easy to compare:

* values below one are rounded to ``sigfig`` significant digits
  (``0.12345 -> 0.123``);
* values whose integer part already uses the whole budget keep the integer
  part, followed by a point if there was a fractional part
  (``1234.5 -> 1234.``, ``1234.0 -> 1234``);
* other values spend the remaining budget on the fractional part
  (``12.345 -> 12.3``, ``1.2345 -> 1.23``).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

__all__ = ["DecimalSplits", "get_final_string"]


def _display(x: float) -> str:
    """Shortest round-trip decimal text of ``x`` without exponent or trailing ``.0``."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    text = format(Decimal(repr(x)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _fixed(x: float, digits: int) -> str:
    """``x`` written with exactly ``digits`` fractional digits."""
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "inf" if x > 0 else "-inf"
    return f"{x:.{max(digits, 0)}f}"


def _round_half_away(x: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    if not math.isfinite(x):
        return x
    return float(Decimal(x).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def _integer_part(text: str) -> str:
    return text.split(".", 1)[0]


def get_final_string(x: float, lhs: float, rhs: float, neg: bool, sigfig: int) -> str:
    """Format ``x`` given its integer part ``lhs``, fraction ``rhs`` and sign."""
    if abs(lhs) + abs(rhs) == 0.0:
        return "0"

    if lhs == 0.0:
        magnitude = math.floor(math.log10(abs(x)))
        n = magnitude + 1.0 - sigfig
        scale = math.pow(10.0, n)
        r = scale * _round_half_away(x / scale)
        text = _display(r)
        if len(text) <= 13:
            return text
        # Rounding noise such as 0.00009999999999999999: fall back to fixed digits.
        leading_zeros = int(abs(magnitude))
        if leading_zeros >= sigfig:
            return _fixed(r, leading_zeros)
        return _fixed(r, sigfig)

    if math.log10(lhs) + 1.0 >= sigfig:
        if rhs > 0.0:
            total = _display(lhs + rhs)
            kept = total[: len(_integer_part(total)) + 1]
            return "-" + kept if neg else kept
        if neg:
            total = _display(lhs + rhs)
            return "-" + total[: len(_integer_part(total))]
        total = _display(x)
        return total[: len(_integer_part(total))]

    if rhs == 0.0:
        total = _display(x)
        return total[: len(_integer_part(total))]

    total = _fixed(x, sigfig - 1)
    whole, _, fraction = total.partition(".")
    if neg:
        take_rhs = min(max(sigfig - len(whole), 0), len(fraction)) + 1
        return total[: len(whole) + take_rhs + 1]
    take = len(whole) + (sigfig + 1 - len(whole))
    return total if take >= len(total) else total[:take]


@dataclass(frozen=True)
class DecimalSplits:
    """A value together with its significant-figure budget."""

    val: float
    sigfig: int = 3

    def neg(self) -> bool:
        """Whether the value is negative."""
        return self.val < 0.0

    def lhs(self) -> float:
        """Absolute value of the integer part."""
        _, whole = math.modf(self.val)
        return abs(whole)

    def rhs(self) -> float:
        """Absolute value of the fractional part."""
        _, whole = math.modf(self.val)
        return abs(self.val - whole)

    def final_string(self) -> str:
        """The value formatted for display."""
        return get_final_string(self.val, self.lhs(), self.rhs(), self.neg(), self.sigfig)