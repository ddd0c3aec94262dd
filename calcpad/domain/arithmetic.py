"""Binary evaluation of the pending expression.

Call context:
    ``reducer.reduce`` calls :func:`evaluate` on EVALUATE and when chaining a
    second CHOOSE_OPERATION. The display layer reuses :func:`parse_float`
    through ``formatting.format_operand``.

Operand parsing and result rendering follow the browser number rules the
calculator has always shown: ``parseFloat`` prefix parsing on the way in and
shortest round-trip ``Number.prototype.toString`` text on the way out, so
``5 + 3`` shows ``8`` and ``10 ÷ 0`` shows ``Infinity``.
"""

from __future__ import annotations

import math
import operator
import re
from decimal import Decimal
from typing import Callable, Dict, Optional, Tuple

from .entities import DIVIDE, CalculatorState

_FLOAT_PREFIX_RE = re.compile(
    r"^[\s]*(?P<num>[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?))"
)


def _divide(left: float, right: float) -> float:
    if right == 0:
        if math.isnan(left) or left == 0:
            return math.nan
        negative = (left < 0) != (math.copysign(1.0, right) < 0)
        return -math.inf if negative else math.inf
    return left / right


BINARY_OPERATIONS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    DIVIDE: _divide,
}


def parse_float(text: Optional[str]) -> float:
    """Parse the longest numeric prefix of ``text``; NaN when there is none."""
    if not text:
        return math.nan
    match = _FLOAT_PREFIX_RE.match(text)
    if match is None:
        return math.nan
    token = match.group("num")
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def _shortest_digits(value: float) -> Tuple[str, int]:
    """Return ``(digits, n)`` so that ``abs(value) == 0.digits * 10**n``."""
    _, digit_tuple, exponent = Decimal(repr(abs(value))).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).lstrip("0")
    stripped = digits.rstrip("0")
    exponent += len(digits) - len(stripped)
    return stripped, exponent + len(stripped)


def number_to_string(value: float) -> str:
    """Render ``value`` the way a browser stringifies a Number."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value == 0:
        return "0"

    digits, n = _shortest_digits(value)
    k = len(digits)
    sign = "-" if value < 0 else ""

    if k <= n <= 21:
        return f"{sign}{digits}{'0' * (n - k)}"
    if 0 < n <= 21:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"

    exp = n - 1
    exp_text = f"+{exp}" if exp >= 0 else str(exp)
    mantissa = digits if k == 1 else f"{digits[0]}.{digits[1:]}"
    return f"{sign}{mantissa}e{exp_text}"


def evaluate(state: CalculatorState) -> str:
    """Compute ``previous <operation> current`` and return it as display text.

    Returns an empty string when either operand does not parse. Division by
    zero is not an error: it yields ``Infinity``, ``-Infinity`` or ``NaN``.
    An operator outside :data:`BINARY_OPERATIONS` yields ``NaN``.
    """
    previous = parse_float(state.previous_operand)
    current = parse_float(state.current_operand)
    if math.isnan(previous) or math.isnan(current):
        return ""

    fn = BINARY_OPERATIONS.get(state.operation or "")
    if fn is None:
        return number_to_string(math.nan)
    return number_to_string(fn(previous, current))


__all__ = ["BINARY_OPERATIONS", "evaluate", "number_to_string", "parse_float"]
