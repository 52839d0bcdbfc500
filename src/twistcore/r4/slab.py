from __future__ import annotations

# Lower bound on the slab half-width.
MIN_HALF_WIDTH = 1e-9


def slab_alpha(w: float, w0: float, half: float) -> float:
    """Blend weight of a point at 4th coordinate `w` for a slab centred at `w0`.

    1 inside the inner half of the slab, 0 at or beyond `half`, mirrored
    smoothstep in between. Symmetric in w - w0 and non-increasing in |w - w0|.
    """
    d = abs(w - w0)
    h = max(MIN_HALF_WIDTH, half)
    inner = 0.5 * h
    if d >= h:
        return 0.0
    if d <= inner:
        return 1.0
    x = (d - inner) / (h - inner)
    return 1.0 - (3.0 * x * x - 2.0 * x * x * x)
