from __future__ import annotations

import logging
from dataclasses import dataclass

from twistcore.core.cycles import decompose
from twistcore.core.facelets import geometric_quarter
from twistcore.core.indexing import BASIS, FACE_ORDER, Face
from twistcore.core.moves import MoveTable
from twistcore.core.perm import compose, identity, invert, moved_count, power, validate
from twistcore.core.rotations import ROTATION_INDEX, Matrix3, det3, mat_mul, quarter_turn_matrix

logger = logging.getLogger(__name__)

MOVED_PER_QUARTER = 20


@dataclass(frozen=True, slots=True)
class FaceAudit:
    face: Face
    rotation_index: int
    moved: int
    cycle_type: tuple[int, ...]


def build_face_rotation_indices() -> dict[Face, int]:
    """Index into ROTATIONS of each face's quarter-turn matrix; checks it has order 4."""
    out: dict[Face, int] = {}
    for face in FACE_ORDER:
        m: Matrix3 = quarter_turn_matrix(BASIS[face][0])
        if det3(m) != 1:
            raise AssertionError(f"{face} quarter-turn matrix is not a proper rotation")
        try:
            out[face] = ROTATION_INDEX[m]
        except KeyError as e:
            raise AssertionError(f"{face} quarter-turn matrix is not a cube rotation") from e
        m4 = mat_mul(mat_mul(m, m), mat_mul(m, m))
        if m4 != ((1, 0, 0), (0, 1, 0), (0, 0, 1)):
            raise AssertionError(f"{face} quarter-turn matrix does not have order 4")
    return out


def audit_face(face: Face, table: MoveTable, rotation_index: int) -> FaceAudit:
    q = table.quarter(face)
    validate(q)
    moved = moved_count(q)
    if moved != MOVED_PER_QUARTER:
        raise AssertionError(f"{face}: quarter turn moves {moved} positions, expected {MOVED_PER_QUARTER}")
    if compose(q, invert(q)) != identity():
        raise AssertionError(f"{face}: quarter composed with its inverse is not identity")
    if power(q, 4) != identity():
        raise AssertionError(f"{face}: fourth power of quarter turn is not identity")
    if table.double(face) != compose(q, q):
        raise AssertionError(f"{face}: double turn differs from quarter composed twice")
    if geometric_quarter(face) != q:
        raise AssertionError(f"{face}: closed-form quarter turn disagrees with facelet geometry")
    return FaceAudit(
        face=face,
        rotation_index=rotation_index,
        moved=moved,
        cycle_type=tuple(len(c) for c in decompose(q, include_fixed_points=False)),
    )


def audit_move_table(table: MoveTable | None = None) -> list[FaceAudit]:
    """Check every face of `table` (default: a freshly built one). Non-mutating."""
    table = table or MoveTable.build()
    rot_idx = build_face_rotation_indices()
    results = [audit_face(face, table, rot_idx[face]) for face in FACE_ORDER]
    logger.info("move table audit passed for %d faces", len(results))
    return results
