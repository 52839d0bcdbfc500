"""Canonical 48-slot sticker numbering.

Faces are laid out as U, D, F, B, R, L with 8 slots each. Inside a face a slot
is addressed by local coordinates (i, j) in {-1, 0, 1}^2 along the face's own
(u, v) basis, the center (0, 0) excluded. Each basis satisfies u x v = n, so
(u, v) reads as (right, up) for an observer looking at the face from outside.
"""

from __future__ import annotations

from typing import Literal

Face = Literal["U", "D", "F", "B", "R", "L"]
Vec3 = tuple[int, int, int]

FACE_ORDER: tuple[Face, ...] = ("U", "D", "F", "B", "R", "L")

# face -> (n, u, v)
BASIS: dict[Face, tuple[Vec3, Vec3, Vec3]] = {
    "U": ((0, 1, 0), (1, 0, 0), (0, 0, -1)),
    "D": ((0, -1, 0), (1, 0, 0), (0, 0, 1)),
    "F": ((0, 0, 1), (1, 0, 0), (0, 1, 0)),
    "B": ((0, 0, -1), (-1, 0, 0), (0, 1, 0)),
    "R": ((1, 0, 0), (0, 0, -1), (0, 1, 0)),
    "L": ((-1, 0, 0), (0, 0, 1), (0, 1, 0)),
}

# Row by row from the top, left to right.
LOCAL_COORDS: tuple[tuple[int, int], ...] = (
    (-1, 1),
    (0, 1),
    (1, 1),
    (-1, 0),
    (1, 0),
    (-1, -1),
    (0, -1),
    (1, -1),
)

_FACE_OFFSET: dict[Face, int] = {f: 8 * k for k, f in enumerate(FACE_ORDER)}
_LOCAL_INDEX: dict[tuple[int, int], int] = {c: k for k, c in enumerate(LOCAL_COORDS)}


def check_face(face: str) -> Face:
    if face not in BASIS:
        raise ValueError(f"unknown face: {face!r}")
    return face  # type: ignore[return-value]


def index_of(face: Face, i: int, j: int) -> int:
    check_face(face)
    try:
        k = _LOCAL_INDEX[(i, j)]
    except KeyError as e:
        raise ValueError(f"no sticker slot at ({i},{j}) on {face}") from e
    return _FACE_OFFSET[face] + k


def describe(index: int) -> tuple[Face, int, int]:
    if not (0 <= index < 48):
        raise ValueError(f"index out of range: {index}")
    face = FACE_ORDER[index // 8]
    i, j = LOCAL_COORDS[index % 8]
    return face, i, j


def add3(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def scale3(a: Vec3, k: int) -> Vec3:
    return (a[0] * k, a[1] * k, a[2] * k)


def dot3(a: Vec3, b: Vec3) -> int:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cubie_position(face: Face, i: int, j: int) -> Vec3:
    """Position of the cubie carrying sticker (face, i, j); coordinates in {-1,0,1}."""
    n, u, v = BASIS[check_face(face)]
    return add3(n, add3(scale3(u, i), scale3(v, j)))


def local_coords(face: Face, pos: Vec3) -> tuple[int, int]:
    """Inverse of cubie_position for a cubie lying on `face`."""
    n, u, v = BASIS[check_face(face)]
    if dot3(pos, n) != 1:
        raise ValueError(f"cubie {pos} does not lie on face {face}")
    return dot3(pos, u), dot3(pos, v)


def face_of_normal(normal: Vec3) -> Face:
    for face in FACE_ORDER:
        if BASIS[face][0] == normal:
            return face
    raise ValueError(f"not a face normal: {normal}")
