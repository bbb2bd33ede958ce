# point.py - (row, column) position on a maze grid

from dataclasses import dataclass
from typing import Tuple

from mazekit.direction import Direction


@dataclass(slots=True, unsafe_hash=True)
class Point:
    """A (row, column) position. Origin (0, 0) is the top-left cell."""
    row: int
    column: int

    @classmethod
    def zero(cls) -> "Point":
        return cls(0, 0)

    def offsetting(self, direction: Direction, amount: int = 1) -> "Point":
        """New point `amount` cells away in `direction` (negative goes backwards)."""
        dr, dc = direction.delta
        return Point(self.row + dr * amount, self.column + dc * amount)

    def offset(self, direction: Direction, amount: int = 1) -> None:
        """In-place variant of offsetting(). Don't call on a point used as a dict/set key."""
        dr, dc = direction.delta
        self.row += dr * amount
        self.column += dc * amount

    def as_tuple(self) -> Tuple[int, int]:
        return self.row, self.column

    @classmethod
    def parse(cls, s: str) -> "Point":
        """'r,c' -> Point(r, c)"""
        r, c = s.split(",")
        return cls(int(r), int(c))
