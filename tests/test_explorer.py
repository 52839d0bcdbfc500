from __future__ import annotations

import random

import pytest

from twistcore.core.moves import Move
from twistcore.explorer import explore_scrambles, random_move, random_moves
from twistcore.explorer.scramble import _visit_entropy


def test_random_moves_reproducible():
    a = random_moves(random.Random(17), 30)
    b = random_moves(random.Random(17), 30)
    assert a == b
    assert all(isinstance(m, Move) for m in a)


def test_random_move_covers_all_kinds():
    rng = random.Random(0)
    kinds = {(m.power, m.prime) for m in (random_move(rng) for _ in range(300))}
    assert kinds == {(1, False), (1, True), (2, False)}


def test_random_moves_rejects_negative_length():
    with pytest.raises(ValueError):
        random_moves(random.Random(0), -1)


def test_visit_entropy():
    assert _visit_entropy({}) == 0.0
    assert _visit_entropy({"a": 5}) == 0.0
    assert _visit_entropy({"a": 1, "b": 1}) == pytest.approx(1.0)


def test_explore_scrambles_report():
    r = explore_scrambles(8, 12, seed=3)
    assert r["trials"] == 8
    assert r["length"] == 12
    assert r["unique_state_count"] > 1
    assert r["entropy_bits"] > 0
    assert r["edge_parity_sums"] == {0: 8}
    assert r["corner_twist_sums"] == {0: 8}
    assert r["max_order"] >= 1


def test_explore_scrambles_deterministic():
    assert explore_scrambles(4, 10, seed=5, audit=False) == explore_scrambles(4, 10, seed=5, audit=False)


def test_explore_scrambles_zero_trials():
    r = explore_scrambles(0, 10)
    assert r["unique_state_count"] == 0
    assert r["max_order"] == 1
