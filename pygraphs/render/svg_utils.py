from __future__ import annotations

import html as _html
import math


def fmt_coord(v: float) -> str:
    if not math.isfinite(v):
        return "0"
    s = f"{v:.2f}"
    # avoid "-0.00"
    return "0.00" if s == "-0.00" else s


def escape(text: str) -> str:
    return _html.escape(str(text), quote=True)
