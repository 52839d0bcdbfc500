from __future__ import annotations

import math
from collections.abc import Sequence

from twistcore.errors import BijectionError, LengthMismatchError

STATE_LEN = 48

Perm = tuple[int, ...]


def identity() -> Perm:
    return tuple(range(STATE_LEN))


def _check_len(p: Sequence[int], what: str = "perm") -> None:
    if len(p) != STATE_LEN:
        raise LengthMismatchError(f"{what} length {len(p)} != {STATE_LEN}")


def compose(a: Sequence[int], b: Sequence[int]) -> Perm:
    """(a ∘ b)[i] = a[b[i]]: b's remap is applied first, then a's."""
    validate(a)
    validate(b)
    return tuple(a[b[i]] for i in range(STATE_LEN))


def invert(p: Sequence[int]) -> Perm:
    validate(p)
    out = [0] * STATE_LEN
    for i, v in enumerate(p):
        out[v] = i
    return tuple(out)


def validate(p: Sequence[int]) -> None:
    _check_len(p)
    seen = [False] * STATE_LEN
    for i, v in enumerate(p):
        if not (0 <= v < STATE_LEN):
            raise BijectionError(f"perm[{i}] out of range: {v}")
        if seen[v]:
            raise BijectionError(f"perm is not a bijection; duplicate value {v}")
        seen[v] = True


def is_identity(p: Sequence[int]) -> bool:
    return tuple(p) == identity()


def power(p: Sequence[int], n: int) -> Perm:
    if n < 0:
        raise ValueError("n must be >= 0")
    out = identity()
    for _ in range(n):
        out = compose(out, p)
    return out


def moved_count(p: Sequence[int]) -> int:
    _check_len(p)
    return sum(1 for i, v in enumerate(p) if v != i)


def order(p: Sequence[int]) -> int:
    """Smallest n >= 1 with p^n == identity."""
    validate(p)
    seen = [False] * STATE_LEN
    result = 1
    for start in range(STATE_LEN):
        if seen[start]:
            continue
        length = 0
        j = start
        while not seen[j]:
            seen[j] = True
            j = p[j]
            length += 1
        result = math.lcm(result, length)
    return result
