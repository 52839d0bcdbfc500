"""Geometric ground truth for face turns over the full 54-facelet set.

Facelets are numbered face by face in the order U, R, F, D, L, B, nine per face,
row-major with row 0 at the top (index = base + 3*row + col). The six centers
never move and are dropped when the result is compressed to the canonical
48-slot numbering of :mod:`twistcore.core.indexing`.

A facelet is modelled as the position of the cubie that carries it plus its
outward normal; turning a layer rotates both, and the rotated normal names the
face the sticker ends up on.
"""

from __future__ import annotations

from collections.abc import Sequence

from twistcore.errors import BijectionError, LengthMismatchError

from .indexing import (
    BASIS,
    Face,
    Vec3,
    add3,
    check_face,
    dot3,
    face_of_normal,
    index_of,
    local_coords,
    scale3,
)
from .perm import STATE_LEN, Perm, validate
from .rotations import mat_vec, quarter_turn_matrix

FACELET_COUNT = 54

FACELET_FACE_ORDER: tuple[Face, ...] = ("U", "R", "F", "D", "L", "B")

FACE_BASE: dict[Face, int] = {f: 9 * k for k, f in enumerate(FACELET_FACE_ORDER)}

CENTER_FACELETS: tuple[int, ...] = tuple(FACE_BASE[f] + 4 for f in FACELET_FACE_ORDER)

MOVING_FACELETS: tuple[int, ...] = tuple(i for i in range(FACELET_COUNT) if i not in CENTER_FACELETS)


def facelet_to_coord(idx: int) -> tuple[Face, int, int]:
    """Facelet index -> (face, col, row) with col, row in 0..2."""
    if not (0 <= idx < FACELET_COUNT):
        raise ValueError(f"facelet index out of range: {idx}")
    face = FACELET_FACE_ORDER[idx // 9]
    k = idx % 9
    return face, k % 3, k // 3


def coord_to_facelet(face: Face, col: int, row: int) -> int:
    check_face(face)
    if not (0 <= col < 3 and 0 <= row < 3):
        raise ValueError(f"facelet coordinate out of range: ({col},{row})")
    return FACE_BASE[face] + 3 * row + col


def facelet_geometry(idx: int) -> tuple[Vec3, Vec3]:
    """(cubie position, outward normal) of a facelet."""
    face, col, row = facelet_to_coord(idx)
    n, u, v = BASIS[face]
    pos = add3(n, add3(scale3(u, col - 1), scale3(v, 1 - row)))
    return pos, n


def facelet_at(pos: Vec3, normal: Vec3) -> int:
    face = face_of_normal(normal)
    i, j = local_coords(face, pos)
    return coord_to_facelet(face, i + 1, 1 - j)


def to_reduced_index(idx: int) -> int:
    """Crosswalk from a non-center facelet to its canonical 48-slot index."""
    face, col, row = facelet_to_coord(idx)
    return index_of(face, col - 1, 1 - row)


def quarter_turn_54(face: Face) -> tuple[int, ...]:
    """Push form over all 54 facelets: result[src] = destination facelet."""
    n = BASIS[check_face(face)][0]
    m = quarter_turn_matrix(n)
    out = []
    for idx in range(FACELET_COUNT):
        pos, normal = facelet_geometry(idx)
        if dot3(pos, n) == 1:
            pos, normal = mat_vec(m, pos), mat_vec(m, normal)
        out.append(facelet_at(pos, normal))
    return tuple(out)


def compress_to_48(p54: Sequence[int]) -> Perm:
    """Drop the centers and convert a 54-facelet push map to a 48-slot pull permutation."""
    if len(p54) != FACELET_COUNT:
        raise LengthMismatchError(f"facelet map length {len(p54)} != {FACELET_COUNT}")
    for c in CENTER_FACELETS:
        if p54[c] != c:
            raise BijectionError(f"center facelet {c} is not fixed")
    out = [-1] * STATE_LEN
    for src in MOVING_FACELETS:
        dst = p54[src]
        if dst in CENTER_FACELETS:
            raise BijectionError(f"facelet {src} maps onto center {dst}")
        out[to_reduced_index(dst)] = to_reduced_index(src)
    perm = tuple(out)
    validate(perm)
    return perm


def geometric_quarter(face: Face) -> Perm:
    return compress_to_48(quarter_turn_54(face))
