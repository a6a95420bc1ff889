"""String representations of evaluated values."""

from __future__ import annotations

import math
from decimal import Decimal

from komi.value import Value, ValueKind

EMPTY_REPR = "(EMPTY)"
TRUE_REPR = "참"
FALSE_REPR = "거짓"


def represent(value: Value) -> str:
    """Return the string representation of a value."""
    if value.kind is ValueKind.NUMBER:
        return _represent_number(float(value.value))
    if value.kind is ValueKind.BOOL:
        return TRUE_REPR if value.value else FALSE_REPR
    return EMPTY_REPR


def _represent_number(num: float) -> str:
    """Shortest round-tripping decimal form, never in exponent notation."""
    if math.isnan(num):
        return "NaN"
    if math.isinf(num):
        return "inf" if num > 0 else "-inf"
    if num.is_integer():
        text = str(int(num))
        if num == 0 and math.copysign(1.0, num) < 0:
            return "-0"
        return text
    return format(Decimal(repr(num)), "f")