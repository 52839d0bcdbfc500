from __future__ import annotations

import random

import pytest

from twistcore.core.engine import CubeEngine
from twistcore.core.moves import Move, sequence_perm
from twistcore.core.orientation import Orientation
from twistcore.core.state import SOLVED, apply_permutation, state_hash
from twistcore.explorer import random_moves


def test_engine_starts_solved():
    eng = CubeEngine()
    assert eng.is_solved()
    assert eng.state == SOLVED
    eng.audit()


def test_apply_tracks_accumulated_permutation():
    eng = CubeEngine()
    moves = random_moves(random.Random(42), 25)
    eng.apply_sequence(moves)
    assert eng.perm == sequence_perm(moves)
    assert apply_permutation(SOLVED, eng.perm) == eng.state
    assert len(eng.history) == 25


@pytest.mark.parametrize("seed", [1, 2, 3])
def test_audit_non_mutating(seed: int):
    eng = CubeEngine()
    eng.apply_sequence(random_moves(random.Random(seed), 15))
    h0 = eng.hash()
    snap = eng.snapshot()
    eng.audit()
    assert eng.hash() == h0
    assert eng.snapshot() == snap


def test_audit_detects_corrupted_state():
    eng = CubeEngine()
    eng.apply(Move("R"))
    s = list(eng.state)
    s[0], s[1] = s[1], s[0]
    eng.state = tuple(s)
    with pytest.raises(AssertionError):
        eng.audit()


def test_audit_detects_broken_orientation():
    eng = CubeEngine()
    eng.apply(Move("F"))
    eng.orientation = Orientation(edges=(1,) + (0,) * 11, corners=(0,) * 8)
    with pytest.raises(AssertionError):
        eng.audit()


def test_audit_rejects_invalid_labels():
    eng = CubeEngine()
    eng.state = (1,) * 48
    with pytest.raises(ValueError):
        eng.audit()


def test_hash_covers_stickers_and_orientation():
    eng = CubeEngine()
    eng.apply(Move("F"))
    ori = eng.orientation
    assert eng.hash() == state_hash([*eng.state, *ori.edges, *ori.corners])
    assert eng.hash() != state_hash(eng.state)


def test_undo_restores_previous_hash():
    eng = CubeEngine()
    eng.apply_sequence(random_moves(random.Random(9), 10))
    before = eng.hash()
    eng.apply(Move("B", prime=True))
    assert eng.undo() == Move("B", prime=True)
    assert eng.hash() == before
    assert len(eng.history) == 10


def test_undo_on_empty_history():
    assert CubeEngine().undo() is None


def test_inverse_moves_solve():
    eng = CubeEngine()
    eng.apply_sequence(random_moves(random.Random(5), 28))
    assert not eng.is_solved()
    eng.apply_sequence(eng.inverse_moves())
    assert eng.is_solved()


def test_reset_and_snapshot():
    eng = CubeEngine()
    eng.apply(Move("U", power=2))
    snap = eng.snapshot()
    assert snap["moves"] == 1
    assert len(snap["state"]) == 48
    eng.reset()
    assert eng.is_solved()
    assert eng.history == []


def test_sexy_move_has_order_six():
    eng = CubeEngine()
    seq = [Move("R"), Move("U"), Move("R", prime=True), Move("U", prime=True)]
    for k in range(6):
        eng.apply_sequence(seq)
        assert eng.is_solved() == (k == 5)
