# grid.py
# -----------------------------------------------------------------------------
# Cell storage for a maze plus the carve-feasibility probe used by the
# generator. Cells live in one (rows, columns) uint8 numpy block.
# -----------------------------------------------------------------------------
from enum import IntEnum
from typing import NamedTuple, Optional

import numpy as np

from mazekit.direction import Direction
from mazekit.errors import MazeBoundsError
from mazekit.point import Point

# -------------------------
# Defaults
# -------------------------
DEF_STEP = 2  # node-to-node distance; the cell in between is the pathway


class Space(IntEnum):
    IMPASSABLE = 0  # wall
    PASSABLE = 1    # path


class Construction(NamedTuple):
    """Cells opened by one carve: `pathway` sits between the base and `destination`."""
    pathway: Point
    destination: Point

    @property
    def searched(self):
        return [self.pathway, self.destination]


class Grid:
    def __init__(self, rows: int, columns: int):
        if rows <= 0 or columns <= 0:
            raise ValueError(f"Grid dimensions must be positive, got {rows}x{columns}.")
        self.rows = rows
        self.columns = columns
        self._cells = np.full((rows, columns), Space.IMPASSABLE, dtype=np.uint8)

    @property
    def cells(self) -> np.ndarray:
        """Read-only view of the cell block (1 = passable)."""
        view = self._cells.view()
        view.flags.writeable = False
        return view

    # -------------------------
    # Bounds
    # -------------------------

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows and 0 <= column < self.columns

    def contains(self, point: Point) -> bool:
        return self.in_bounds(point.row, point.column)

    def _check(self, row: int, column: int):
        # numpy would silently wrap negative indices
        if not self.in_bounds(row, column):
            raise MazeBoundsError(row, column, self.rows, self.columns)

    # -------------------------
    # Access
    # -------------------------

    def get(self, row: int, column: int) -> Space:
        self._check(row, column)
        return Space(int(self._cells[row, column]))

    def _set(self, row: int, column: int, state: Space):
        self._check(row, column)
        self._cells[row, column] = state

    def __getitem__(self, point: Point) -> Space:
        return self.get(point.row, point.column)

    def __setitem__(self, point: Point, state: Space):
        self._set(point.row, point.column, state)

    def clear(self):
        self._cells.fill(Space.IMPASSABLE)

    def count(self, state: Space = Space.PASSABLE) -> int:
        return int(np.count_nonzero(self._cells == state))

    # -------------------------
    # Carving probe
    # -------------------------

    def _open(self, point: Point) -> bool:
        """True if `point` is in bounds and passable; out-of-bounds counts as closed."""
        return self.contains(point) and self[point] == Space.PASSABLE

    def construct(self, base: Point, direction: Direction, step: int = DEF_STEP) -> Optional[Construction]:
        """
        Probe carving from `base` toward `direction`. Returns the pathway and
        destination cells to open, or None if the carve would touch an already
        opened corridor.
        """
        destination = base.offsetting(direction, step)
        if not self.contains(destination) or self[destination] != Space.IMPASSABLE:
            return None

        pathway = destination.offsetting(direction, -1)
        if self._open(pathway):
            return None

        if self._open(destination.offsetting(direction, 1)):
            return None

        # Cells flanking the new corridor on either side of base.
        for side in direction.perpendiculars.members():
            flank = base.offsetting(side, 1)
            for k in range(1, step + 1):
                if self._open(flank.offsetting(direction, k)):
                    return None

        return Construction(pathway=pathway, destination=destination)

    def can_carve(self, base: Point, direction: Direction, step: int = DEF_STEP) -> bool:
        return self.construct(base, direction, step) is not None
