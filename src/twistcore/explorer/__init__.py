"""twistcore.explorer"""

from .scramble import explore_scrambles, random_move, random_moves

__all__ = [
    "explore_scrambles",
    "random_move",
    "random_moves",
]
