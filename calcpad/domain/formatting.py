"""Display formatting for operands.

Call context:
    ``CalculatorVM`` formats both operands with :func:`format_operand` after
    every dispatched action.
"""

from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Optional

from .arithmetic import parse_float

DEFAULT_THOUSANDS_SEPARATOR = ","


def format_integer(value: float, *, thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR) -> str:
    """Round ``value`` to an integer and group its thousands."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-∞" if value < 0 else "∞"
    with localcontext() as ctx:
        # doubles reach 309 integer digits
        ctx.prec = 400
        rounded = Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    text = f"{rounded.copy_abs():,f}"
    if thousands_separator != ",":
        text = text.replace(",", thousands_separator)
    negative = rounded < 0 or (rounded == 0 and math.copysign(1.0, value) < 0)
    return f"-{text}" if negative else text


def format_operand(
    operand: Optional[str],
    *,
    thousands_separator: str = DEFAULT_THOUSANDS_SEPARATOR,
) -> Optional[str]:
    """Group the integer part of ``operand`` and keep its decimals as typed.

    ``"1234.5"`` renders as ``"1,234.5"`` and partial input ``"1234."`` as
    ``"1,234."``. Returns ``None`` when there is no operand to show.
    """
    if operand is None:
        return None
    integer, dot, decimal = operand.partition(".")
    grouped = format_integer(parse_float(integer), thousands_separator=thousands_separator)
    if not dot:
        return grouped
    return f"{grouped}.{decimal}"


__all__ = ["DEFAULT_THOUSANDS_SEPARATOR", "format_integer", "format_operand"]
