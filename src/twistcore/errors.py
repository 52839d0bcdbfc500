"""Error kinds raised by the permutation and 4D cores.

All of them are ``ValueError`` subclasses: they describe malformed caller input.
Broken internal invariants are reported with ``AssertionError`` instead.
"""

from __future__ import annotations


class LengthMismatchError(ValueError):
    """A permutation or state does not have exactly 48 entries."""


class BijectionError(ValueError):
    """A claimed permutation (or labeling) has an out-of-range or repeated value."""


class DegeneratePlaneError(ValueError):
    """A 4D plane rotation was requested with two equal axes."""
