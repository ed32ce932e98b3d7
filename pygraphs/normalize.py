"""Adapters from caller data shapes to :class:`~pygraphs.model.Graph`.

Three shapes are accepted:

- keyed sequences: ``Unit`` objects, ``(key, value)`` pairs, or any object
  exposing ``key`` and ``value`` attributes;
- plain numeric sequences (lists, tuples, numpy arrays), keyed by position;
- mappings, optionally ordered by a caller-supplied comparator.

None of the constructors fail for numeric input; they raise ``TypeError``
only when an item cannot be read as a key/value record or a value is not
numeric.
"""

from __future__ import annotations

import collections.abc as cabc
import functools
from typing import Any, Callable, Iterable, Mapping, Optional, Tuple, Union

import pandas as pd

from .model import Graph, GraphKind, GraphRange, LabelFn, Unit

# less-than predicate over (key, value) pairs
PairComparator = Callable[[Tuple[Any, Any], Tuple[Any, Any]], bool]


def _as_unit(item: Any) -> Unit:
    if isinstance(item, Unit):
        return item
    if isinstance(item, tuple) and len(item) == 2:
        return Unit(item[0], item[1])
    if hasattr(item, "key") and hasattr(item, "value"):
        return Unit(item.key, item.value)
    raise TypeError(
        f"Cannot read a (key, value) record from {type(item).__name__}: {item!r}"
    )


def _kind(kind: Union[GraphKind, str]) -> GraphKind:
    return kind if isinstance(kind, GraphKind) else GraphKind(str(kind).lower())


def from_keyed_sequence(
    units: Iterable[Any],
    kind: Union[GraphKind, str],
    range: Optional[GraphRange] = None,
    label_fn: Optional[LabelFn] = None,
) -> Graph:
    """Build a Graph from key/value records, preserving input order."""
    return Graph(
        kind=_kind(kind),
        units=tuple(_as_unit(item) for item in units),
        range=range,
        label_fn=label_fn,
    )


def from_plain_sequence(
    values: Iterable[Any],
    kind: Union[GraphKind, str],
    range: Optional[GraphRange] = None,
    label_fn: Optional[LabelFn] = None,
) -> Graph:
    """Build a Graph from bare values; keys are positional indices as strings."""
    return Graph(
        kind=_kind(kind),
        units=tuple(Unit(str(i), v) for i, v in enumerate(values)),
        range=range,
        label_fn=label_fn,
    )


def from_mapping(
    mapping: Mapping[Any, Any],
    kind: Union[GraphKind, str],
    range: Optional[GraphRange] = None,
    sort_fn: Optional[PairComparator] = None,
    label_fn: Optional[LabelFn] = None,
) -> Graph:
    """Build a Graph from a key -> value mapping.

    Args:
        mapping: Source mapping.
        kind: Chart kind.
        range: Optional value range (Bar/Line only).
        sort_fn: Less-than predicate over ``(key, value)`` pairs. When
            omitted the unit order is the mapping's iteration order, which
            callers should treat as unspecified.
        label_fn: Optional label callback.

    Returns:
        A Graph whose units follow ``sort_fn`` order when given.
    """
    pairs = list(mapping.items())
    if sort_fn is not None:

        def _cmp(a: Tuple[Any, Any], b: Tuple[Any, Any]) -> int:
            if sort_fn(a, b):
                return -1
            if sort_fn(b, a):
                return 1
            return 0

        pairs.sort(key=functools.cmp_to_key(_cmp))
    return from_keyed_sequence(pairs, kind, range=range, label_fn=label_fn)


def from_series(
    series: pd.Series,
    kind: Union[GraphKind, str],
    range: Optional[GraphRange] = None,
    label_fn: Optional[LabelFn] = None,
) -> Graph:
    """Build a Graph from a pandas Series; index labels become keys."""
    return from_keyed_sequence(
        zip(series.index.tolist(), series.tolist()),
        kind,
        range=range,
        label_fn=label_fn,
    )


def _looks_keyed(item: Any) -> bool:
    return isinstance(item, (Unit, tuple)) or (
        hasattr(item, "key") and hasattr(item, "value")
    )


def to_graph(
    data: Any,
    kind: Union[GraphKind, str],
    range: Optional[GraphRange] = None,
    sort_fn: Optional[PairComparator] = None,
    label_fn: Optional[LabelFn] = None,
) -> Graph:
    """Dispatch ``data`` to the matching constructor based on its shape.

    Raises:
        TypeError: If ``data`` is a string or not iterable.
    """
    if isinstance(data, Graph):
        return data
    if isinstance(data, pd.Series):
        return from_series(data, kind, range=range, label_fn=label_fn)
    if isinstance(data, cabc.Mapping):
        return from_mapping(data, kind, range=range, sort_fn=sort_fn, label_fn=label_fn)
    if isinstance(data, (str, bytes, bytearray)) or not isinstance(data, cabc.Iterable):
        raise TypeError(
            f"Unsupported data for a graph: {type(data).__name__}. Provide a "
            "mapping, a sequence of (key, value) records, a numeric sequence "
            "or a pandas Series."
        )
    items = list(data)
    if items and _looks_keyed(items[0]):
        return from_keyed_sequence(items, kind, range=range, label_fn=label_fn)
    return from_plain_sequence(items, kind, range=range, label_fn=label_fn)


def bar_graph(data: Any, range: Optional[GraphRange] = None, **kwargs: Any) -> Graph:
    return to_graph(data, GraphKind.BAR, range=range, **kwargs)


def line_graph(data: Any, range: Optional[GraphRange] = None, **kwargs: Any) -> Graph:
    return to_graph(data, GraphKind.LINE, range=range, **kwargs)


def pie_graph(data: Any, **kwargs: Any) -> Graph:
    """Pie charts carry no value range; any ``range`` argument is dropped."""
    kwargs.pop("range", None)
    graph = to_graph(data, GraphKind.PIE, **kwargs)
    if graph.kind is not GraphKind.PIE or graph.range is not None:
        graph = Graph(kind=GraphKind.PIE, units=graph.units, label_fn=graph.label_fn)
    return graph
