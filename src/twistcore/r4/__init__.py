"""twistcore.r4 — four-dimensional rotation and slicing primitives."""

from .r4 import (
    det4,
    dot4,
    identity4,
    is_orthonormal4,
    mul4,
    mul4v,
    norm4,
    rot_double,
    rot_plane,
    transpose4,
    v4,
)
from .slab import slab_alpha
from .tesseract import project_to_3d, tesseract_edges, tesseract_vertices, transform_vertices

__all__ = [
    "v4",
    "identity4",
    "transpose4",
    "mul4",
    "mul4v",
    "dot4",
    "norm4",
    "det4",
    "is_orthonormal4",
    "rot_plane",
    "rot_double",
    "slab_alpha",
    "tesseract_vertices",
    "tesseract_edges",
    "project_to_3d",
    "transform_vertices",
]
