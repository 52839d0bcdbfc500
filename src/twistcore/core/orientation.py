"""Edge flip / corner twist bookkeeping driven by the sticker permutations.

Orientation slots are cubie positions: 12 edges (one zero coordinate) and 8
corners (no zero coordinate). A quarter turn first carries every orientation
value along with its cubie, using the slot map induced by the sticker
permutation, then adds the face's delta to the slots of the turning layer only.
Corner deltas are signed by the corner's checkerboard sign x*y*z, which
alternates around a face, so the twist sum is conserved.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from .indexing import Face, Vec3, check_face, cubie_position, describe
from .moves import Move, MoveTable, quarter
from .perm import STATE_LEN, Perm

EDGE_COUNT = 12
CORNER_COUNT = 8

EDGE_DELTA: dict[Face, int] = {"U": 0, "D": 0, "F": 1, "B": 1, "R": 0, "L": 0}
CORNER_DELTA: dict[Face, int] = {"U": 0, "D": 0, "F": 1, "B": 1, "R": -1, "L": -1}

_CUBE = (-1, 0, 1)
EDGE_SLOTS: tuple[Vec3, ...] = tuple(
    (x, y, z) for x in _CUBE for y in _CUBE for z in _CUBE if (x, y, z).count(0) == 1
)
CORNER_SLOTS: tuple[Vec3, ...] = tuple(
    (x, y, z) for x in _CUBE for y in _CUBE for z in _CUBE if 0 not in (x, y, z)
)
_EDGE_INDEX = {c: k for k, c in enumerate(EDGE_SLOTS)}
_CORNER_INDEX = {c: k for k, c in enumerate(CORNER_SLOTS)}

Kind = Literal["edge", "corner"]


def slot_of_position(index: int) -> tuple[Kind, int]:
    """Orientation slot owning the sticker at a 48-slot position."""
    pos = cubie_position(*describe(index))
    if pos in _CORNER_INDEX:
        return "corner", _CORNER_INDEX[pos]
    return "edge", _EDGE_INDEX[pos]


_POSITION_SLOT: tuple[tuple[Kind, int], ...] = tuple(slot_of_position(i) for i in range(STATE_LEN))


@dataclass(frozen=True, slots=True)
class Orientation:
    edges: tuple[int, ...]
    corners: tuple[int, ...]

    def __post_init__(self) -> None:
        if len(self.edges) != EDGE_COUNT or len(self.corners) != CORNER_COUNT:
            raise ValueError("orientation needs 12 edge and 8 corner values")
        if any(e not in (0, 1) for e in self.edges):
            raise ValueError("edge parity values must be 0 or 1")
        if any(c not in (0, 1, 2) for c in self.corners):
            raise ValueError("corner twist values must be 0, 1 or 2")

    @classmethod
    def solved(cls) -> "Orientation":
        return cls(edges=(0,) * EDGE_COUNT, corners=(0,) * CORNER_COUNT)


@dataclass(frozen=True, slots=True)
class SlotMap:
    """Slot transition for one permutation: dst slot <- src slot, for moved slots."""

    edges: dict[int, int]
    corners: dict[int, int]


def slot_map(perm: Perm) -> SlotMap:
    edges: dict[int, int] = {}
    corners: dict[int, int] = {}
    for i, src in enumerate(perm):
        if src == i:
            continue
        kind, dst_slot = _POSITION_SLOT[i]
        src_kind, src_slot = _POSITION_SLOT[src]
        if kind != src_kind:
            raise AssertionError(f"position {src} moves a {src_kind} sticker onto a {kind} slot")
        table = edges if kind == "edge" else corners
        if table.setdefault(dst_slot, src_slot) != src_slot:
            raise AssertionError(f"stickers of {kind} slot {dst_slot} come from different cubies")
    return SlotMap(edges=edges, corners=corners)


def _corner_sign(slot: int) -> int:
    x, y, z = CORNER_SLOTS[slot]
    return x * y * z


def edge_delta(face: Face) -> int:
    return EDGE_DELTA[check_face(face)]


def corner_delta(face: Face) -> int:
    return CORNER_DELTA[check_face(face)]


def apply_quarter(ori: Orientation, face: Face, table: MoveTable | None = None) -> Orientation:
    sm = slot_map(quarter(face, table))
    de, dc = edge_delta(face), corner_delta(face)
    edges = list(ori.edges)
    corners = list(ori.corners)
    for dst, src in sm.edges.items():
        edges[dst] = (ori.edges[src] + de) % 2
    for dst, src in sm.corners.items():
        corners[dst] = (ori.corners[src] + dc * _corner_sign(dst)) % 3
    return Orientation(edges=tuple(edges), corners=tuple(corners))


def apply_prime(ori: Orientation, face: Face, table: MoveTable | None = None) -> Orientation:
    """Exact inverse of apply_quarter: subtract the delta, then carry values back."""
    sm = slot_map(quarter(face, table))
    de, dc = edge_delta(face), corner_delta(face)
    edges = list(ori.edges)
    corners = list(ori.corners)
    for dst, src in sm.edges.items():
        edges[src] = (ori.edges[dst] - de) % 2
    for dst, src in sm.corners.items():
        corners[src] = (ori.corners[dst] - dc * _corner_sign(dst)) % 3
    return Orientation(edges=tuple(edges), corners=tuple(corners))


def apply_double(ori: Orientation, face: Face, table: MoveTable | None = None) -> Orientation:
    return apply_quarter(apply_quarter(ori, face, table), face, table)


def apply_move(ori: Orientation, move: Move, table: MoveTable | None = None) -> Orientation:
    if move.power == 2:
        return apply_double(ori, move.face, table)
    if move.prime:
        return apply_prime(ori, move.face, table)
    return apply_quarter(ori, move.face, table)


def edge_parity_sum(ori: Orientation) -> int:
    return sum(ori.edges) % 2


def corner_twist_sum(ori: Orientation) -> int:
    return sum(ori.corners) % 3


def check_invariants(ori: Orientation) -> None:
    if edge_parity_sum(ori) != 0:
        raise AssertionError("edge parity sum is not 0 mod 2")
    if corner_twist_sum(ori) != 0:
        raise AssertionError("corner twist sum is not 0 mod 3")


def layer_slots(face: Face, table: MoveTable | None = None) -> tuple[list[int], list[int]]:
    """(edge slots, corner slots) of the layer turned by `face`."""
    sm = slot_map(quarter(face, table))
    return sorted(sm.edges), sorted(sm.corners)

