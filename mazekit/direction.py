# direction.py
# -----------------------------------------------------------------------------
# The four cardinal directions. Members are single bits so a set of
# directions is just an int mask (used for the generator's tried set).
# Row increases downward, column increases rightward.
# -----------------------------------------------------------------------------
import random
from enum import IntFlag
from typing import Optional, Tuple


class Direction(IntFlag):
    N = 1
    E = 2
    S = 4
    W = 8

    @classmethod
    def cases(cls) -> Tuple["Direction", ...]:
        return (cls.N, cls.E, cls.S, cls.W)

    def members(self) -> Tuple["Direction", ...]:
        """Single directions contained in this mask, in N,E,S,W order."""
        return tuple(d for d in Direction.cases() if d & self)

    @property
    def delta(self) -> Tuple[int, int]:
        return DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return OPP[self]

    @property
    def perpendiculars(self) -> "Direction":
        """Mask of the two directions at right angles to this one."""
        if self in (Direction.N, Direction.S):
            return Direction.E | Direction.W
        return Direction.N | Direction.S

    @classmethod
    def random(cls, exclude: int = 0, rng: Optional[random.Random] = None) -> Optional["Direction"]:
        """
        Uniform pick among the directions not in `exclude`.
        Returns None once `exclude` covers all four.
        """
        choices = [d for d in cls.cases() if not d & exclude]
        if not choices:
            return None
        return (rng or random).choice(choices)


ALL_DIRECTIONS = Direction.N | Direction.E | Direction.S | Direction.W

DELTAS = {
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
}
OPP = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
}
