from __future__ import annotations

import itertools
import math
import random

import pytest

from twistcore.errors import DegeneratePlaneError
from twistcore.r4 import (
    det4,
    dot4,
    identity4,
    is_orthonormal4,
    mul4,
    mul4v,
    norm4,
    project_to_3d,
    rot_double,
    rot_plane,
    slab_alpha,
    tesseract_edges,
    tesseract_vertices,
    transform_vertices,
    transpose4,
    v4,
)

PLANES = list(itertools.combinations(range(4), 2))
ANGLES = [0.3, -1.1, math.pi / 2, 2.5, math.pi]


def _close(a, b, eps):
    return all(abs(x - y) <= eps for x, y in zip(a, b))


def test_identity_and_transpose():
    ident = identity4()
    assert len(ident) == 16
    assert ident == transpose4(ident)
    m = tuple(float(k) for k in range(16))
    assert transpose4(m)[1] == m[4]
    assert transpose4(transpose4(m)) == m


def test_mul4_against_identity_and_vector():
    m = tuple(float(k) for k in range(16))
    assert mul4(identity4(), m) == m
    assert mul4(m, identity4()) == m
    assert mul4v(identity4(), v4(1, 2, 3, 4)) == (1, 2, 3, 4)
    assert mul4v(m, v4(1, 0, 0, 0)) == (0.0, 4.0, 8.0, 12.0)


def test_dot_and_norm():
    assert dot4(v4(1, 2, 3, 4), v4(4, 3, 2, 1)) == 20
    assert norm4(v4(1, 1, 1, 1)) == pytest.approx(2.0)


def test_det4_known_values():
    assert det4(identity4()) == pytest.approx(1.0)
    diag = (2.0, 0, 0, 0, 0, 3.0, 0, 0, 0, 0, 4.0, 0, 0, 0, 0, 5.0)
    assert det4(diag) == pytest.approx(120.0)
    # swapping two rows flips the sign
    swap = (0, 1.0, 0, 0, 1.0, 0, 0, 0, 0, 0, 1.0, 0, 0, 0, 0, 1.0)
    assert det4(swap) == pytest.approx(-1.0)
    singular = tuple(float(k) for k in range(16))
    assert det4(singular) == pytest.approx(0.0)


@pytest.mark.parametrize("i,j", PLANES)
def test_rot_plane_zero_is_identity(i, j):
    assert _close(rot_plane(i, j, 0.0), identity4(), 1e-9)


@pytest.mark.parametrize("i,j", PLANES)
@pytest.mark.parametrize("theta", ANGLES)
def test_rot_plane_laws(i, j, theta):
    r = rot_plane(i, j, theta)
    assert _close(mul4(r, rot_plane(i, j, -theta)), identity4(), 1e-8)
    assert det4(r) == pytest.approx(1.0, abs=1e-8)
    assert is_orthonormal4(r)
    assert _close(mul4(transpose4(r), r), identity4(), 1e-8)


@pytest.mark.parametrize("i,j", PLANES)
def test_same_plane_angles_add(i, j):
    a, b = 0.4, 1.3
    assert _close(mul4(rot_plane(i, j, a), rot_plane(i, j, b)), rot_plane(i, j, a + b), 1e-9)


def test_rot_plane_fixes_other_axes():
    r = rot_plane(0, 3, 0.7)
    assert _close(mul4v(r, v4(0, 1, 0, 0)), (0, 1, 0, 0), 1e-12)
    assert _close(mul4v(r, v4(0, 0, 1, 0)), (0, 0, 1, 0), 1e-12)
    x = mul4v(r, v4(1, 0, 0, 0))
    assert x[0] == pytest.approx(math.cos(0.7))
    assert x[3] == pytest.approx(math.sin(0.7))


def test_rot_plane_rejects_degenerate_and_bad_axes():
    with pytest.raises(DegeneratePlaneError):
        rot_plane(2, 2, 0.5)
    with pytest.raises(ValueError):
        rot_plane(0, 4, 0.5)


def test_rot_double_order_and_properties():
    rng = random.Random(4)
    for _ in range(50):
        i, j = rng.sample(range(4), 2)
        k, l = rng.sample(range(4), 2)  # noqa: E741
        theta, phi = rng.uniform(-math.pi, math.pi), rng.uniform(-math.pi, math.pi)
        r = rot_double(i, j, theta, k, l, phi)
        assert _close(r, mul4(rot_plane(k, l, phi), rot_plane(i, j, theta)), 1e-12)
        assert is_orthonormal4(r)
        assert det4(r) == pytest.approx(1.0, abs=1e-8)
        v = v4(*(rng.uniform(-1, 1) for _ in range(4)))
        assert norm4(mul4v(r, v)) == pytest.approx(norm4(v))


def test_is_orthonormal_rejects_scaled():
    scaled = tuple(2.0 * x for x in identity4())
    assert not is_orthonormal4(scaled)


def test_slab_alpha_endpoints_and_symmetry():
    w0, h = 0.5, 0.25
    assert slab_alpha(w0, w0, h) == 1.0
    assert slab_alpha(w0 + h, w0, h) == 0.0
    assert slab_alpha(w0 - h, w0, h) == 0.0
    assert slab_alpha(w0 + 0.5 * h, w0, h) == 1.0
    for d in (0.0, 0.05, 0.125, 0.15, 0.2, 0.24, 0.6):
        assert slab_alpha(w0 + d, w0, h) == pytest.approx(slab_alpha(w0 - d, w0, h))


def test_slab_alpha_midpoint_and_monotone():
    h = 1.0
    assert slab_alpha(0.75, 0.0, h) == pytest.approx(0.5)
    ds = [k / 200 for k in range(201)]
    values = [slab_alpha(d, 0.0, h) for d in ds]
    assert all(a >= b for a, b in zip(values, values[1:]))
    assert all(0.0 <= v <= 1.0 for v in values)


def test_slab_alpha_clamps_half_width():
    assert slab_alpha(0.0, 0.0, 0.0) == 1.0
    assert slab_alpha(1.0, 0.0, 0.0) == 0.0
    assert slab_alpha(1.0, 0.0, -3.0) == 0.0


def test_tesseract():
    verts = tesseract_vertices()
    assert len(verts) == 16
    edges = tesseract_edges()
    assert len(edges) == 32
    r = rot_double(0, 3, 0.4, 1, 2, 0.9)
    moved = transform_vertices(r, verts)
    for a, b in edges:
        d = [x - y for x, y in zip(moved[a], moved[b])]
        assert norm4(d) == pytest.approx(2.0)


def test_project_to_3d():
    assert project_to_3d(v4(1, 2, 3, 0), distance=2.0) == pytest.approx((0.5, 1.0, 1.5))
    with pytest.raises(ValueError):
        project_to_3d(v4(0, 0, 0, 3), distance=3.0)
