"""Label text helpers for pie charts.

Each ``*_label`` function matches the ``label_fn(unit, total)`` callback
signature stored on a Graph.
"""

from __future__ import annotations

import math
from typing import Any, Optional

from ..model import Unit


def fmt_compact(x) -> str:
    if x is None:
        return "—"
    try:
        if isinstance(x, float) and (math.isnan(x) or math.isinf(x)):
            return "—"
        return f"{x:.4g}"
    except (TypeError, ValueError):
        try:
            return f"{float(x):.4g}"
        except (TypeError, ValueError):
            return str(x)


def fmt_percent(part: Any, total: Any, digits: int = 1) -> Optional[str]:
    t = float(total)
    if not (t > 0 and math.isfinite(t)):
        return None
    p = float(part)
    # same clamp the layout applies: negative and non-finite parts count as zero
    p = p if (math.isfinite(p) and p > 0) else 0.0
    return f"{p / t * 100:.{digits}f}%"


def percent_label(unit: Unit, total: Any) -> Optional[str]:
    return fmt_percent(unit.value, total)


def value_label(unit: Unit, total: Any) -> Optional[str]:
    return fmt_compact(unit.value)


def key_label(unit: Unit, total: Any) -> Optional[str]:
    return str(unit.key)


LABELERS = {
    "percent": percent_label,
    "value": value_label,
    "key": key_label,
    "none": None,
}
