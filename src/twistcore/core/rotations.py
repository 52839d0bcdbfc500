from __future__ import annotations

import itertools

from .indexing import Vec3

Matrix3 = tuple[Vec3, Vec3, Vec3]

_AXES: tuple[Vec3, Vec3, Vec3] = ((1, 0, 0), (0, 1, 0), (0, 0, 1))


def det3(m: Matrix3) -> int:
    (a, b, c), (d, e, f), (g, h, i) = m
    return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)


def mat_mul(a: Matrix3, b: Matrix3) -> Matrix3:
    rows = tuple(
        tuple(sum(a[r][k] * b[k][c] for k in range(3)) for c in range(3)) for r in range(3)
    )
    return rows  # type: ignore[return-value]


def mat_vec(m: Matrix3, v: Vec3) -> Vec3:
    x, y, z = v
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z,
        m[1][0] * x + m[1][1] * y + m[1][2] * z,
        m[2][0] * x + m[2][1] * y + m[2][2] * z,
    )


def transpose(m: Matrix3) -> Matrix3:
    return (
        (m[0][0], m[1][0], m[2][0]),
        (m[0][1], m[1][1], m[2][1]),
        (m[0][2], m[1][2], m[2][2]),
    )


def cross3(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def quarter_turn_matrix(normal: Vec3) -> Matrix3:
    """Clockwise 90° turn about `normal`, as seen from the tip of `normal`.

    p -> (n·p) n + p x n. Only axis-aligned unit normals are accepted.
    """
    if sorted(abs(c) for c in normal) != [0, 0, 1]:
        raise ValueError(f"normal must be an axis-aligned unit vector: {normal}")
    cols = []
    for e in _AXES:
        along = sum(ni * ei for ni, ei in zip(normal, e))
        c = cross3(e, normal)
        cols.append((along * normal[0] + c[0], along * normal[1] + c[1], along * normal[2] + c[2]))
    # cols holds images of the basis vectors; the matrix stores them as columns.
    return transpose((cols[0], cols[1], cols[2]))


def generate_proper_rotations() -> list[Matrix3]:
    """The 24 proper cube rotations: signed axis permutations with det=+1."""
    mats: list[Matrix3] = []
    for perm in itertools.permutations(_AXES, 3):
        for signs in itertools.product([1, -1], repeat=3):
            m = tuple(tuple(s * c for c in row) for row, s in zip(perm, signs))
            if det3(m) == 1:  # type: ignore[arg-type]
                mats.append(m)  # type: ignore[arg-type]

    uniq = sorted(dict.fromkeys(mats))
    if len(uniq) != 24:
        raise AssertionError(f"expected 24 proper rotations, got {len(uniq)}")
    return uniq


ROTATIONS: list[Matrix3] = generate_proper_rotations()
ROTATION_INDEX: dict[Matrix3, int] = {m: i for i, m in enumerate(ROTATIONS)}
