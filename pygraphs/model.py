"""Chart data model.

A :class:`Graph` is the normalized description every renderer consumes: a
chart kind, an ordered tuple of :class:`Unit` data points, an optional value
range and an optional label callback. All three types are frozen; rendering
new data means building a new ``Graph``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Generic, Hashable, Iterator, Optional, Tuple, TypeVar

from .numeric import is_finite, is_numeric, zero_of

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class GraphKind(str, Enum):
    """Chart kinds a Graph can describe."""

    BAR = "bar"
    LINE = "line"
    PIE = "pie"


@dataclass(frozen=True)
class Unit(Generic[K, V]):
    """One data point of a chart.

    Attributes:
        key: Identity used for display and correlation only.
        value: A NumericValue-conformant magnitude.
    """

    key: K
    value: V

    def __post_init__(self) -> None:
        if not is_numeric(self.value):
            raise TypeError(
                f"Unit value for key {self.key!r} is not numeric: {self.value!r}"
            )


@dataclass(frozen=True)
class GraphRange(Generic[V]):
    """Value bounds for Bar/Line charts.

    ``min > max`` is stored as given; interpreting such a range is the
    caller's responsibility.
    """

    min: V
    max: V

    @property
    def is_ordered(self) -> bool:
        return not (self.max < self.min)


# (unit, total) -> label text, or None to suppress the label
LabelFn = Callable[["Unit[Any, Any]", Any], Optional[str]]


@dataclass(frozen=True)
class Graph(Generic[K, V]):
    """Normalized, ordered, typed description of a dataset.

    Attributes:
        kind: Chart kind tag.
        units: Data points in caller order; position ``i`` maps to the
            ``i``-th rendered segment and the ``i``-th color.
        range: Optional value bounds (ignored for pie charts).
        label_fn: Optional callback producing the label for a unit given
            the aggregate total.
    """

    kind: GraphKind
    units: Tuple[Unit[K, V], ...] = ()
    range: Optional[GraphRange[V]] = None
    label_fn: Optional[LabelFn] = None

    def __post_init__(self) -> None:
        if not isinstance(self.units, tuple):
            object.__setattr__(self, "units", tuple(self.units))
        if not isinstance(self.kind, GraphKind):
            object.__setattr__(self, "kind", GraphKind(self.kind))

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[Unit[K, V]]:
        return iter(self.units)

    @property
    def is_empty(self) -> bool:
        return not self.units

    def keys(self) -> Tuple[K, ...]:
        return tuple(u.key for u in self.units)

    def values(self) -> Tuple[V, ...]:
        return tuple(u.value for u in self.units)

    def clamped_values(self) -> Tuple[V, ...]:
        """Values with negatives and non-finite values replaced by zero."""
        zero = zero_of(self.values())
        return tuple(
            v if (is_finite(v) and zero < v) else zero for v in self.values()
        )

    def total(self) -> V:
        """Sum of the clamped values (never negative)."""
        values = self.clamped_values()
        acc = zero_of(values)
        for v in values:
            acc = acc + v
        return acc

    def label_for(self, unit: Unit[K, V], total: Any = None) -> Optional[str]:
        if self.label_fn is None:
            return None
        return self.label_fn(unit, self.total() if total is None else total)
