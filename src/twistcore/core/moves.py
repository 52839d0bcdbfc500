"""Closed-form quarter turns built from two index cycles per face.

The ring lists the turning face's own border slots clockwise. The belt lists
the neighbouring faces' border slots clockwise around the turning face (top,
right, bottom, left neighbour in the face's own frame), three per neighbour
in travel order, so a quarter turn sends belt[k] to belt[k + 3].
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .indexing import FACE_ORDER, Face, check_face, index_of
from .perm import Perm, compose, identity, invert, validate

Coord = tuple[Face, int, int]

RING_STEP = 2
BELT_STEP = 3


def _ring(face: Face) -> list[Coord]:
    return [
        (face, -1, 1),
        (face, 0, 1),
        (face, 1, 1),
        (face, 1, 0),
        (face, 1, -1),
        (face, 0, -1),
        (face, -1, -1),
        (face, -1, 0),
    ]


def _row(face: Face, j: int, reverse: bool = False) -> list[Coord]:
    row = [(face, -1, j), (face, 0, j), (face, 1, j)]
    return row[::-1] if reverse else row


def _col(face: Face, i: int, reverse: bool = False) -> list[Coord]:
    col = [(face, i, 1), (face, i, 0), (face, i, -1)]
    return col[::-1] if reverse else col


FACE_RING: dict[Face, list[Coord]] = {f: _ring(f) for f in FACE_ORDER}

BELT_RING: dict[Face, list[Coord]] = {
    "U": _row("B", 1, True) + _row("R", 1, True) + _row("F", 1, True) + _row("L", 1, True),
    "D": _row("F", -1) + _row("R", -1) + _row("B", -1) + _row("L", -1),
    "F": _row("U", -1) + _col("R", -1) + _row("D", 1, True) + _col("L", 1, True),
    "B": _row("U", 1, True) + _col("L", -1) + _row("D", -1) + _col("R", 1, True),
    "R": _col("U", 1, True) + _col("B", -1) + _col("D", 1, True) + _col("F", 1, True),
    "L": _col("U", -1) + _col("F", -1) + _col("D", -1) + _col("B", 1, True),
}

FACE_RING_IDX: dict[Face, tuple[int, ...]] = {
    f: tuple(index_of(*c) for c in coords) for f, coords in FACE_RING.items()
}
BELT_RING_IDX: dict[Face, tuple[int, ...]] = {
    f: tuple(index_of(*c) for c in coords) for f, coords in BELT_RING.items()
}


def _rotate_cycle(perm: list[int], indices: tuple[int, ...], step: int) -> None:
    # the sticker at indices[k] lands on indices[k + step]
    n = len(indices)
    for k, src in enumerate(indices):
        perm[indices[(k + step) % n]] = src


def build_quarter(face: Face) -> Perm:
    check_face(face)
    perm = list(identity())
    _rotate_cycle(perm, FACE_RING_IDX[face], RING_STEP)
    _rotate_cycle(perm, BELT_RING_IDX[face], BELT_STEP)
    out = tuple(perm)
    validate(out)
    return out


@dataclass(frozen=True)
class MoveTable:
    """Read-only face -> quarter-turn permutation table.

    Built once and shared; callers that want isolation can build and pass
    their own instance.
    """

    quarters: Mapping[Face, Perm]

    @classmethod
    def build(cls) -> "MoveTable":
        return cls(quarters=MappingProxyType({f: build_quarter(f) for f in FACE_ORDER}))

    def quarter(self, face: Face) -> Perm:
        return self.quarters[check_face(face)]

    def prime(self, face: Face) -> Perm:
        return invert(self.quarter(face))

    def double(self, face: Face) -> Perm:
        q = self.quarter(face)
        return compose(q, q)


DEFAULT_TABLE = MoveTable.build()


def quarter(face: Face, table: MoveTable | None = None) -> Perm:
    return (table or DEFAULT_TABLE).quarter(face)


def prime(face: Face, table: MoveTable | None = None) -> Perm:
    return (table or DEFAULT_TABLE).prime(face)


def double(face: Face, table: MoveTable | None = None) -> Perm:
    return (table or DEFAULT_TABLE).double(face)


@dataclass(frozen=True, slots=True)
class Move:
    """A face turn as handed over by a move-text parser.

    power 1 is a quarter turn, power 2 a half turn; `prime` flips the direction
    (it has no effect on a half turn).
    """

    face: Face
    power: int = 1
    prime: bool = False

    def __post_init__(self) -> None:
        check_face(self.face)
        if self.power not in (1, 2):
            raise ValueError(f"power must be 1 or 2, got {self.power}")

    def inverse(self) -> "Move":
        if self.power == 2:
            return self
        return Move(self.face, 1, not self.prime)


def perm_for(move: Move, table: MoveTable | None = None) -> Perm:
    if move.power == 2:
        return double(move.face, table)
    if move.prime:
        return prime(move.face, table)
    return quarter(move.face, table)


def sequence_perm(moves: Iterable[Move], table: MoveTable | None = None) -> Perm:
    """Single permutation equivalent to applying `moves` left to right."""
    p = identity()
    for m in moves:
        p = compose(p, perm_for(m, table))
    return p


def invert_sequence(moves: Iterable[Move]) -> list[Move]:
    return [m.inverse() for m in reversed(list(moves))]
