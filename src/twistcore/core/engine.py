from __future__ import annotations

from collections.abc import Iterable

from .moves import Move, MoveTable, invert_sequence, perm_for
from .orientation import Orientation, apply_move, check_invariants
from .perm import Perm, compose, identity, invert, validate
from .state import SOLVED, State, apply_permutation, pack_u16, state_hash, validate_state


class CubeEngine:
    """Current puzzle state for a render/animation layer.

    Every field holds an immutable value; applying a move swaps in new values.
    `perm` is the accumulated permutation, so `apply_permutation(SOLVED, perm)`
    always equals `state`.
    """

    def __init__(self, table: MoveTable | None = None):
        self.table = table
        self.reset()

    def reset(self) -> None:
        self.state: State = SOLVED
        self.orientation = Orientation.solved()
        self.perm: Perm = identity()
        self.history: list[Move] = []

    def apply(self, move: Move) -> None:
        p = perm_for(move, self.table)
        self.state = apply_permutation(self.state, p)
        self.orientation = apply_move(self.orientation, move, self.table)
        self.perm = compose(self.perm, p)
        self.history.append(move)

    def apply_sequence(self, moves: Iterable[Move]) -> None:
        for m in moves:
            self.apply(m)

    def undo(self) -> Move | None:
        if not self.history:
            return None
        last = self.history[-1]
        inv = last.inverse()
        p = perm_for(inv, self.table)
        self.state = apply_permutation(self.state, p)
        self.orientation = apply_move(self.orientation, inv, self.table)
        self.perm = compose(self.perm, p)
        self.history.pop()
        return last

    def inverse_moves(self) -> list[Move]:
        return invert_sequence(self.history)

    def is_solved(self) -> bool:
        return self.state == SOLVED and self.orientation == Orientation.solved()

    def snapshot(self) -> dict:
        return {
            "state": list(self.state),
            "perm": list(self.perm),
            "edges": list(self.orientation.edges),
            "corners": list(self.orientation.corners),
            "moves": len(self.history),
        }

    def _canonical_values(self) -> list[int]:
        # state, then edge and corner orientation
        return [*self.state, *self.orientation.edges, *self.orientation.corners]

    def _canonical_bytes(self) -> bytes:
        return pack_u16(self._canonical_values())

    def hash(self) -> str:
        return state_hash(self._canonical_values())

    def audit(self) -> None:
        # NON-MUTATING: must restore exactly.
        before = (self.state, self.orientation, self.perm, list(self.history))
        before_hash = self.hash()
        try:
            self._audit_state()
            self._audit_inverse_roundtrip()
        finally:
            self.state, self.orientation, self.perm, self.history = before
            if self.hash() != before_hash:
                raise AssertionError("audit() mutated engine state (hash mismatch)")

    def _audit_state(self) -> None:
        validate_state(self.state)
        validate(self.perm)
        if apply_permutation(SOLVED, self.perm) != self.state:
            raise AssertionError("accumulated permutation does not reproduce the state")
        check_invariants(self.orientation)

    def _audit_inverse_roundtrip(self) -> None:
        if not self.history:
            return
        snap = self._canonical_bytes()
        last = self.history[-1]
        self.apply(last)
        self.undo()
        if self._canonical_bytes() != snap:
            raise AssertionError("apply(move); undo() did not restore state")
        if apply_permutation(self.state, invert(self.perm)) != SOLVED:
            raise AssertionError("inverse of the accumulated permutation does not solve the state")
