from __future__ import annotations

import logging
import math
import random
from collections import Counter

from twistcore.core.cycles import cycle_type
from twistcore.core.engine import CubeEngine
from twistcore.core.indexing import FACE_ORDER
from twistcore.core.moves import Move, sequence_perm
from twistcore.core.orientation import corner_twist_sum, edge_parity_sum
from twistcore.core.perm import order

logger = logging.getLogger(__name__)


def random_move(rng: random.Random) -> Move:
    face = rng.choice(FACE_ORDER)
    kind = rng.randrange(3)
    if kind == 2:
        return Move(face, power=2)
    return Move(face, prime=(kind == 1))


def random_moves(rng: random.Random, length: int) -> list[Move]:
    if length < 0:
        raise ValueError("length must be >= 0")
    return [random_move(rng) for _ in range(length)]


def _visit_entropy(visit_counts: dict[str, int]) -> float:
    """Shannon entropy (bits) of state visit distribution."""
    total = sum(visit_counts.values())
    if total == 0:
        return 0.0
    h = 0.0
    for c in visit_counts.values():
        p = c / total
        h -= p * math.log2(p)
    return h


def explore_scrambles(trials: int, length: int, seed: int = 0, *, audit: bool = True) -> dict:
    """Run `trials` seeded scrambles of `length` moves each from the solved state.

    Every scramble is undone with its inverse sequence afterwards, which must
    land back on the solved state. With `audit`, the engine is audited after
    every move.
    """
    if trials < 0:
        raise ValueError("trials must be >= 0")

    rng = random.Random(seed)
    visit_counts: dict[str, int] = {}
    type_counts: Counter[tuple[int, ...]] = Counter()
    orders: list[int] = []
    edge_sums: Counter[int] = Counter()
    corner_sums: Counter[int] = Counter()

    for trial in range(trials):
        engine = CubeEngine()
        moves = random_moves(rng, length)
        for m in moves:
            engine.apply(m)
            if audit:
                engine.audit()
            h = engine.hash()
            visit_counts[h] = visit_counts.get(h, 0) + 1

        if engine.perm != sequence_perm(moves):
            raise AssertionError(f"trial {trial}: engine permutation differs from the composed sequence")
        type_counts[cycle_type(engine.perm)] += 1
        orders.append(order(engine.perm))
        edge_sums[edge_parity_sum(engine.orientation)] += 1
        corner_sums[corner_twist_sum(engine.orientation)] += 1

        engine.apply_sequence(engine.inverse_moves())
        if not engine.is_solved():
            raise AssertionError(f"trial {trial}: inverse sequence did not restore the solved state")
        logger.debug("trial %d: %d moves, order %d", trial, length, orders[-1])

    logger.info("explored %d scrambles of length %d (seed=%d)", trials, length, seed)
    return {
        "trials": trials,
        "length": length,
        "seed": seed,
        "unique_state_count": len(visit_counts),
        "entropy_bits": _visit_entropy(visit_counts),
        "distinct_cycle_types": len(type_counts),
        "most_common_cycle_types": [[list(t), c] for t, c in type_counts.most_common(5)],
        "max_order": max(orders, default=1),
        "edge_parity_sums": dict(edge_sums),
        "corner_twist_sums": dict(corner_sums),
    }
