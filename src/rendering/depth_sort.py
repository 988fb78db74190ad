"""Painter's-algorithm ordering of edges."""
from typing import List, Sequence

from geometry.hypercube import Edge


def mean_depth(edge: Edge, depths: Sequence[float]) -> float:
    a, b = edge
    return (depths[a] + depths[b]) * 0.5


def sort_edges(edges: Sequence[Edge], depths: Sequence[float]) -> List[Edge]:
    """Order edges far-to-near by the mean depth of their endpoints.

    ``depths`` is indexed by vertex. The sort is stable, so edges with equal
    depth keep their original relative order.
    """
    return sorted(edges, key=lambda edge: mean_depth(edge, depths))
