# generator.py
# -----------------------------------------------------------------------------
# Iterative randomized depth-first carving with an explicit backtracking
# stack. A Generator is created per generate() call, mutates the Grid it is
# handed, and is thrown away afterwards.
# -----------------------------------------------------------------------------
import random
from typing import Callable, List, Optional

from mazekit.direction import Direction
from mazekit.errors import GenerationAborted
from mazekit.grid import DEF_STEP, Grid, Space
from mazekit.point import Point


class Generator:
    """
    Carving head + tracking stack.

      current : cell the carver is standing on
      track   : backtracking stack (append / pop from the end only)
      tried   : mask of directions already rejected from `current`
      carves  : number of successful pathway+destination carves
    """

    step = DEF_STEP

    def __init__(self, start: Point, rng: Optional[random.Random] = None,
                 should_abort: Optional[Callable[[], bool]] = None):
        self.rng = rng
        self.should_abort = should_abort
        self.reset(start)

    def reset(self, point: Point):
        self.current = Point(point.row, point.column)
        self.track: List[Point] = [self.current]
        self.tried = Direction(0)
        self.carves = 0

    def generate(self, grid: Grid):
        grid[self.current] = Space.PASSABLE

        while self.track:
            if self.should_abort is not None and self.should_abort():
                raise GenerationAborted(f"Generation aborted after {self.carves} carves.")

            direction = Direction.random(exclude=self.tried, rng=self.rng)
            if direction is None:
                # every direction exhausted here: unwind
                self.current = self.track.pop()
                self.tried = Direction(0)
                continue

            construction = grid.construct(self.current, direction, self.step)
            if construction is None:
                self.tried |= direction
                continue

            grid[construction.pathway] = Space.PASSABLE
            grid[construction.destination] = Space.PASSABLE
            self.track += construction.searched
            self.current = construction.destination
            self.tried = Direction(0)
            self.carves += 1
