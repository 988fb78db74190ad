"""Vertices and edges of the 4-cube."""
import math
from typing import List, Tuple

Vertex4D = Tuple[float, float, float, float]
Edge = Tuple[int, int]

NUM_VERTICES = 16


def generate_vertices() -> List[Vertex4D]:
    """Return the 16 corners of the unit-sign hypercube.

    Bit 0 of the index selects x, bit 1 y, bit 2 z and bit 3 w; a clear bit
    gives -1 and a set bit +1. Callers index vertices by position.
    """
    vertices = []
    for i in range(NUM_VERTICES):
        vertices.append(tuple(1 if i & (1 << axis) else -1 for axis in range(4)))
    return vertices


def generate_edges(vertices: List[Vertex4D]) -> List[Edge]:
    """Return every (a, b), a < b, whose vertices differ in exactly one coordinate."""
    edges = []
    for a in range(len(vertices)):
        for b in range(a + 1, len(vertices)):
            diff = sum(1 for ca, cb in zip(vertices[a], vertices[b]) if ca != cb)
            if diff == 1:
                edges.append((a, b))
    return edges


VERTICES: Tuple[Vertex4D, ...] = tuple(generate_vertices())
EDGES: Tuple[Edge, ...] = tuple(generate_edges(list(VERTICES)))

# Every vertex sits at distance 2 from the origin.
VERTEX_RADIUS = math.sqrt(sum(c * c for c in VERTICES[0]))
