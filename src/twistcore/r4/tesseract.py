from __future__ import annotations

import itertools
from collections.abc import Sequence

from .r4 import V4, mul4v


def tesseract_vertices() -> list[V4]:
    """16 vertices of the [-1, 1]^4 hypercube in lexicographic sign order."""
    verts: list[V4] = []
    for signs in itertools.product((-1.0, 1.0), repeat=4):
        verts.append((signs[0], signs[1], signs[2], signs[3]))
    return verts


def tesseract_edges() -> list[tuple[int, int]]:
    """32 vertex pairs differing in exactly one coordinate."""
    verts = tesseract_vertices()
    edges = []
    for a, b in itertools.combinations(range(len(verts)), 2):
        diff = sum(1 for x, y in zip(verts[a], verts[b]) if x != y)
        if diff == 1:
            edges.append((a, b))
    return edges


def project_to_3d(v: Sequence[float], distance: float = 3.0) -> tuple[float, float, float]:
    """Perspective projection from w = distance onto the w = 0 hyperplane."""
    denom = distance - v[3]
    if denom <= 0:
        raise ValueError(f"point at w={v[3]} is behind the projection centre w={distance}")
    k = 1.0 / denom
    return (v[0] * k, v[1] * k, v[2] * k)


def transform_vertices(m: Sequence[float], verts: Sequence[Sequence[float]]) -> list[V4]:
    return [mul4v(m, v) for v in verts]
