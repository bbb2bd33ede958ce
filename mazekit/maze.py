# maze.py
# -----------------------------------------------------------------------------
# Public facade: owns the Grid and generation metadata. Callers only ever
# read cells through get() / maze[r, c].
# -----------------------------------------------------------------------------
import random
from typing import Callable, Optional, Tuple

from mazekit.errors import GenerationAborted, MazeBoundsError, MazeStateError
from mazekit.generator import Generator
from mazekit.grid import Grid, Space
from mazekit.point import Point


def make_odd(n: int) -> int:
    return n if n % 2 != 0 else n + 1


class Maze:
    """
    A grid maze, ungenerated until generate() is called.

    Both dimensions are forced odd: an even width/height is incremented.
    `end` is never set by the DFS generator and stays None.
    """

    def __init__(self, width: int, height: int, start: Optional[Point] = None,
                 rng: Optional[random.Random] = None):
        self.rows = make_odd(height)
        self.columns = make_odd(width)
        self.grid = Grid(self.rows, self.columns)
        self.rng = rng
        self.start = self._validated(start if start is not None else Point.zero())
        self.end: Optional[Point] = None
        self.generated = False
        self.carves = 0
        self._generating = False

    @property
    def spaces(self) -> int:
        return self.rows * self.columns

    def _validated(self, point: Point) -> Point:
        if not self.grid.contains(point):
            raise MazeBoundsError(point.row, point.column, self.rows, self.columns)
        return Point(point.row, point.column)

    def generate(self, should_abort: Optional[Callable[[], bool]] = None):
        """Carve the maze in place. Call reset() before generating again."""
        if self._generating:
            raise MazeStateError("Maze is already being generated.")
        if self.generated:
            raise MazeStateError("Maze is already generated; reset() it first.")

        generator = Generator(self.start, rng=self.rng, should_abort=should_abort)
        self._generating = True
        finished = False
        try:
            generator.generate(self.grid)
            finished = True
        except MemoryError as e:
            raise GenerationAborted("Generation ran out of memory.") from e
        finally:
            self._generating = False
            if not finished:
                # discard partial carving whatever stopped the run
                self.grid.clear()
                self.carves = 0

        self.carves = generator.carves
        self.generated = True

    def reset(self, to: Optional[Point] = None, regenerate: bool = False):
        """
        Restore every cell to impassable.

        :param to: new start point (keeps the current one if None)
        :param regenerate: run generate() again right away
        """
        if self._generating:
            raise MazeStateError("Cannot reset while generating.")
        if to is not None:
            self.start = self._validated(to)
        self.grid.clear()
        self.generated = False
        self.end = None
        self.carves = 0
        if regenerate:
            self.generate()

    def get(self, row: int, column: int) -> Space:
        return self.grid.get(row, column)

    def __getitem__(self, rc: Tuple[int, int]) -> Space:
        row, column = rc
        return self.grid.get(row, column)

    def __str__(self) -> str:
        from mazekit.render import to_text
        return to_text(self)

    def __repr__(self) -> str:
        return (f"Maze(rows={self.rows}, columns={self.columns}, "
                f"start={self.start}, generated={self.generated})")
