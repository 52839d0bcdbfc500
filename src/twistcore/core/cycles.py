"""Cycle decomposition of 48-slot permutations and the eigen-ring lookup.

A length-k cycle contributes a k x k cyclic block to the permutation matrix,
whose eigenvalues are the k-th roots of unity; grouping cycles by length is
all the eigen-ring display needs.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

from .perm import Perm, validate

Cycle = tuple[int, ...]


def decompose(p: Sequence[int], include_fixed_points: bool = True) -> list[Cycle]:
    """Disjoint cycles of p, longest first; ties keep left-to-right discovery order."""
    validate(p)
    seen = [False] * len(p)
    cycles: list[Cycle] = []
    for start in range(len(p)):
        if seen[start]:
            continue
        cyc = []
        j = start
        while not seen[j]:
            seen[j] = True
            cyc.append(j)
            j = p[j]
        if len(cyc) > 1 or include_fixed_points:
            cycles.append(tuple(cyc))
    # list.sort is stable
    cycles.sort(key=len, reverse=True)
    return cycles


def bucket_by_length(cycles: Sequence[Cycle]) -> dict[int, list[Cycle]]:
    buckets: dict[int, list[Cycle]] = {}
    for c in cycles:
        buckets.setdefault(len(c), []).append(c)
    return buckets


def roots_of_unity_angles(k: int) -> list[float]:
    """Angles (radians, 0 at +x, counterclockwise) of the k-th roots of unity."""
    if k < 1:
        raise ValueError("k must be >= 1")
    return [2.0 * math.pi * j / k for j in range(k)]


def sum_bucket_sizes(buckets: Mapping[int, Sequence[Cycle]]) -> int:
    return sum(len(c) for cycles in buckets.values() for c in cycles)


def cycle_type(p: Sequence[int]) -> tuple[int, ...]:
    """Cycle lengths in descending order, fixed points included."""
    return tuple(len(c) for c in decompose(p, include_fixed_points=True))


def eigen_ring(p: Perm) -> dict[int, tuple[int, list[float]]]:
    """cycle length -> (number of cycles of that length, root angles)."""
    buckets = bucket_by_length(decompose(p, include_fixed_points=True))
    return {k: (len(cycles), roots_of_unity_angles(k)) for k, cycles in buckets.items()}
