"""Generic mapping / sequence helpers."""

from collections.abc import Iterable, Mapping
from typing import Any


def table_keyvals(tab: Mapping[Any, Any]) -> tuple[list[Any], list[Any]]:
    """Return the keys and the values of *tab* as two aligned lists."""
    keyset: list[Any] = []
    valset: list[Any] = []
    for k, v in tab.items():
        keyset.append(k)
        valset.append(v)
    return keyset, valset


def search(element: Any, tab: Iterable[Any]) -> bool:
    """True if *element* equals any item of *tab*."""
    for v in tab:
        if v == element:
            return True
    return False
