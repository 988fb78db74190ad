"""Planar rotations in four dimensions."""
import math
from typing import List, Sequence, Tuple

from geometry.hypercube import Vertex4D

X, Y, Z, W = 0, 1, 2, 3

# Ordered (axis_i, axis_j, angular velocity). Order matters: plane rotations
# sharing an axis do not commute.
ROTATION_PLANES: Tuple[Tuple[int, int, float], ...] = (
    (X, W, 0.7),
    (Y, W, 0.5),
    (Z, W, 0.3),
    (X, Y, 0.4),
    (Y, Z, 0.35),
)


def rotate_plane(point: List[float], axis_i: int, axis_j: int, angle: float) -> List[float]:
    """Rotate ``point`` in place in the plane spanned by two axes.

    Returns the same list for chaining.
    """
    if axis_i == axis_j or not (0 <= axis_i < len(point) and 0 <= axis_j < len(point)):
        raise ValueError(f"invalid rotation plane ({axis_i}, {axis_j})")
    c = math.cos(angle)
    s = math.sin(angle)
    pi, pj = point[axis_i], point[axis_j]
    point[axis_i] = pi * c - pj * s
    point[axis_j] = pi * s + pj * c
    return point


def rotate(point: Sequence[float], axis_i: int, axis_j: int, angle: float) -> Vertex4D:
    """Return a rotated copy of ``point``; the input is left untouched."""
    return tuple(rotate_plane(list(point), axis_i, axis_j, angle))


def rotate_vertex(vertex: Sequence[float], phase: float,
                  planes: Sequence[Tuple[int, int, float]] = ROTATION_PLANES) -> Vertex4D:
    """Apply every plane rotation in order, each at ``coefficient * phase``."""
    working = list(vertex)
    for axis_i, axis_j, coefficient in planes:
        rotate_plane(working, axis_i, axis_j, coefficient * phase)
    return tuple(working)
