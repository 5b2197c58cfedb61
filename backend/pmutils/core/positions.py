"""
Position helpers.

Positions are anything with ``x``, ``y`` and ``z`` attributes; ``Position``
is provided for callers that do not have a host vector type.
"""

from typing import Any, NamedTuple


class Position(NamedTuple):
    x: float
    y: float
    z: float


def different_pos(pos1: Any, pos2: Any) -> bool:
    if pos1.x != pos2.x:
        return True
    if pos1.z != pos2.z:
        return True
    return pos1.y != pos2.y


def ptos(x: Any, y: Any, z: Any) -> str:
    """Stringify a point, e.g. for use as a dict key: ``"1, 2, 3"``."""
    return f"{x}, {y}, {z}"


def vtos(v: Any) -> str:
    return ptos(v.x, v.y, v.z)
