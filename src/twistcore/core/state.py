from __future__ import annotations

import hashlib
import struct
from collections.abc import Sequence

from twistcore.errors import BijectionError, LengthMismatchError

from .perm import STATE_LEN, validate

State = tuple[int, ...]

# Solved labeling: position i holds label i + 1.
SOLVED: State = tuple(range(1, STATE_LEN + 1))


def validate_state(s: Sequence[int]) -> None:
    if len(s) != STATE_LEN:
        raise LengthMismatchError(f"state length {len(s)} != {STATE_LEN}")
    seen = [False] * (STATE_LEN + 1)
    for i, v in enumerate(s):
        if not (1 <= v <= STATE_LEN):
            raise BijectionError(f"state[{i}] out of range: {v}")
        if seen[v]:
            raise BijectionError(f"state label {v} occurs more than once")
        seen[v] = True


def apply_permutation(state: Sequence[int], perm: Sequence[int]) -> State:
    """Pull remap: out[i] = state[perm[i]]. Returns a new tuple."""
    validate_state(state)
    validate(perm)
    return tuple(state[perm[i]] for i in range(STATE_LEN))


def pack_u16(values: Sequence[int]) -> bytes:
    # little-endian uint16 array
    return struct.pack("<" + "H" * len(values), *values)


def state_hash(values: Sequence[int]) -> str:
    return hashlib.sha256(pack_u16(values)).hexdigest()
