"""4x4 matrix / 4-vector algebra for the tesseract view.

Matrices are flat row-major tuples of 16 floats; vectors are 4-tuples.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from twistcore.errors import DegeneratePlaneError

V4 = tuple[float, float, float, float]
M4 = tuple[float, ...]

AXES = (0, 1, 2, 3)


def v4(x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0) -> V4:
    return (x, y, z, w)


def _check_m4(m: Sequence[float]) -> None:
    if len(m) != 16:
        raise ValueError(f"4x4 matrix needs 16 values, got {len(m)}")


def identity4() -> M4:
    return tuple(1.0 if r == c else 0.0 for r in range(4) for c in range(4))


def transpose4(a: Sequence[float]) -> M4:
    _check_m4(a)
    return tuple(a[c * 4 + r] for r in range(4) for c in range(4))


def mul4(a: Sequence[float], b: Sequence[float]) -> M4:
    _check_m4(a)
    _check_m4(b)
    return tuple(
        a[r * 4 + 0] * b[0 + c]
        + a[r * 4 + 1] * b[4 + c]
        + a[r * 4 + 2] * b[8 + c]
        + a[r * 4 + 3] * b[12 + c]
        for r in range(4)
        for c in range(4)
    )


def mul4v(a: Sequence[float], v: Sequence[float]) -> V4:
    _check_m4(a)
    return (
        a[0] * v[0] + a[1] * v[1] + a[2] * v[2] + a[3] * v[3],
        a[4] * v[0] + a[5] * v[1] + a[6] * v[2] + a[7] * v[3],
        a[8] * v[0] + a[9] * v[1] + a[10] * v[2] + a[11] * v[3],
        a[12] * v[0] + a[13] * v[1] + a[14] * v[2] + a[15] * v[3],
    )


def dot4(a: Sequence[float], b: Sequence[float]) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2] + a[3] * b[3]


def norm4(a: Sequence[float]) -> float:
    return math.hypot(a[0], a[1], a[2], a[3])


def det4(m: Sequence[float]) -> float:
    """Cofactor expansion along the first row."""
    _check_m4(m)
    m00, m01, m02, m03, m10, m11, m12, m13, m20, m21, m22, m23, m30, m31, m32, m33 = m

    s0 = m22 * m33 - m23 * m32
    s1 = m21 * m33 - m23 * m31
    s2 = m21 * m32 - m22 * m31
    s3 = m20 * m33 - m23 * m30
    s4 = m20 * m32 - m22 * m30
    s5 = m20 * m31 - m21 * m30

    cof00 = m11 * s0 - m12 * s1 + m13 * s2
    cof01 = -(m10 * s0 - m12 * s3 + m13 * s4)
    cof02 = m10 * s1 - m11 * s3 + m13 * s5
    cof03 = -(m10 * s2 - m11 * s4 + m12 * s5)

    return m00 * cof00 + m01 * cof01 + m02 * cof02 + m03 * cof03


def is_orthonormal4(r: Sequence[float], eps: float = 1e-9) -> bool:
    p = mul4(transpose4(r), r)
    ident = identity4()
    return all(abs(p[t] - ident[t]) <= eps for t in range(16))


def rot_plane(i: int, j: int, theta: float) -> M4:
    """Rotation by theta in the (i, j) coordinate plane; the other two axes are fixed."""
    if i not in AXES or j not in AXES:
        raise ValueError(f"axes must be in 0..3, got ({i}, {j})")
    if i == j:
        raise DegeneratePlaneError(f"rotation plane needs two distinct axes, got ({i}, {j})")
    c = math.cos(theta)
    s = math.sin(theta)
    m = list(identity4())
    m[i * 4 + i] = c
    m[j * 4 + j] = c
    m[i * 4 + j] = -s
    m[j * 4 + i] = s
    return tuple(m)


def rot_double(i: int, j: int, theta: float, k: int, l: int, phi: float) -> M4:  # noqa: E741
    """(i, j) rotation first, then (k, l) rotation."""
    return mul4(rot_plane(k, l, phi), rot_plane(i, j, theta))
