"""twistcore: permutation algebra for 3x3x3 face turns plus 4D rotation primitives."""

from .core.engine import CubeEngine
from .core.moves import Move, double, prime, quarter, sequence_perm
from .core.perm import compose, identity, invert, is_identity, validate
from .core.state import SOLVED, apply_permutation
from .errors import BijectionError, DegeneratePlaneError, LengthMismatchError

__all__ = [
    "CubeEngine",
    "Move",
    "quarter",
    "prime",
    "double",
    "sequence_perm",
    "identity",
    "compose",
    "invert",
    "validate",
    "is_identity",
    "SOLVED",
    "apply_permutation",
    "LengthMismatchError",
    "BijectionError",
    "DegeneratePlaneError",
]
