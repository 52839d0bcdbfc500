from __future__ import annotations

import math
from collections.abc import Mapping, Sequence

import matplotlib.pyplot as plt

from twistcore.core.cycles import Cycle, roots_of_unity_angles
from twistcore.r4.slab import slab_alpha


def plot_eigen_ring(buckets: Mapping[int, Sequence[Cycle]], *, ax=None, title: str | None = None):
    """Roots of unity for each cycle length, one concentric ring per length."""
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111)

    t = [2 * math.pi * s / 256 for s in range(257)]
    for r, (k, cycles) in enumerate(sorted(buckets.items()), start=1):
        ax.plot([r * math.cos(a) for a in t], [r * math.sin(a) for a in t], color="0.85", lw=0.8)
        angles = roots_of_unity_angles(k)
        ax.scatter(
            [r * math.cos(a) for a in angles],
            [r * math.sin(a) for a in angles],
            s=20 + 10 * len(cycles),
            label=f"k={k} (x{len(cycles)})",
        )

    ax.set_aspect("equal")
    ax.set_xticks([])
    ax.set_yticks([])
    ax.legend(loc="upper right", fontsize="small")
    ax.set_title(title or "Eigen-ring")
    return ax


def plot_slab_profile(w0: float, half: float, *, ax=None, samples: int = 201):
    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111)

    lo, hi = w0 - 1.5 * half, w0 + 1.5 * half
    ws = [lo + (hi - lo) * s / (samples - 1) for s in range(samples)]
    ax.plot(ws, [slab_alpha(w, w0, half) for w in ws])
    ax.axvline(w0, color="0.6", ls="--", lw=0.8)
    ax.set_xlabel("w")
    ax.set_ylabel("alpha")
    ax.set_ylim(-0.05, 1.05)
    ax.set_title(f"Slab alpha (w0={w0:g}, half={half:g})")
    return ax
