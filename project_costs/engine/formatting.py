from __future__ import annotations

import math
import numbers
from decimal import Decimal
from typing import Any

MAX_FRACTION_DIGITS = 3


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return isinstance(value, (numbers.Real, Decimal))


def format_value(
    value: Any,
    *,
    thousands_sep: str = ",",
    decimal_sep: str = ".",
    max_fraction_digits: int = MAX_FRACTION_DIGITS,
) -> Any:
    """Render a cost with digit grouping, e.g. ``1234567 -> "1,234,567"``.

    Non-numeric, missing and non-finite values come back unchanged so callers
    can display them as they are.
    """
    if not _is_number(value):
        return value
    if isinstance(value, numbers.Integral):
        text = f"{int(value):,}"
    else:
        number = float(value)
        if not math.isfinite(number):
            return value
        text = f"{number:,.{max_fraction_digits}f}"
        if "." in text:
            text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    if (thousands_sep, decimal_sep) != (",", "."):
        text = text.translate(str.maketrans({",": thousands_sep, ".": decimal_sep}))
    return text


def format_label(value: Any) -> Any:
    """Text drawn on top of a bar segment."""
    return format_value(value)


def format_tooltip_line(name: str, value: Any) -> str:
    shown = format_value(value)
    return f"{name}: {'' if shown is None else shown}"
