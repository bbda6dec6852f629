"""
Classify sequence items with named boolean filters.

Each filter receives ``(item, index, length)``; the names of the filters
that return True become the item's class list. Handy for styling list
items or bucketing data. Callers can pass their own ordered mapping of
filters in place of the defaults.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from coolkit.validation import VariableKind, kind_of

ItemFilter = Callable[[Any, int, int], bool]


DEFAULT_FILTERS: Dict[str, ItemFilter] = {
    "even": lambda item, index, length: (index + 1) % 2 == 0,
    "odd": lambda item, index, length: index % 2 == 0,
    "first": lambda item, index, length: index == 0,
    "last": lambda item, index, length: index == length - 1,
    "number": lambda item, index, length: kind_of(item) is VariableKind.NUMBER,
    "string": lambda item, index, length: kind_of(item) is VariableKind.STRING,
}


def classify_array(
    items: Sequence[Any],
    filters: Optional[Mapping[str, ItemFilter]] = None,
) -> List[List[str]]:
    """Return one list of class names per item, parallel to *items*."""
    active = DEFAULT_FILTERS if filters is None else filters
    length = len(items)
    return [
        [name for name, matches in active.items() if matches(item, index, length)]
        for index, item in enumerate(items)
    ]
