"""Numeric capability shared by every chart value.

Chart values are never required to share a base class. Anything that can be
added, compared and converted to ``float`` works: ``int``, ``float``,
``decimal.Decimal``, ``fractions.Fraction`` and numpy scalars all qualify.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Protocol, runtime_checkable


@runtime_checkable
class NumericValue(Protocol):
    """Capability view of a chart value: add, compare, zero and to-float."""

    def __add__(self, other: Any) -> Any: ...

    def __lt__(self, other: Any) -> bool: ...

    def __float__(self) -> float: ...


def is_numeric(value: Any) -> bool:
    # str/bytes implement __add__ and __lt__ but not __float__
    return isinstance(value, NumericValue)


def zero_like(value: Any) -> Any:
    """Return the additive identity in the numeric type of ``value``."""
    try:
        return type(value)(0)
    except Exception:
        return value - value


def zero_of(values: Iterable[Any]) -> Any:
    for v in values:
        return zero_like(v)
    return 0


def is_finite(value: Any) -> bool:
    try:
        return math.isfinite(float(value))
    except (TypeError, ValueError, OverflowError):
        return False
