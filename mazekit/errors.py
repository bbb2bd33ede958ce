# errors.py - exception types raised by mazekit


class MazeError(Exception):
    """Base class for mazekit errors."""


class MazeBoundsError(MazeError, IndexError):
    """A row/column outside the grid was read or written."""

    def __init__(self, row: int, column: int, rows: int, columns: int):
        super().__init__(f"Index ({row}, {column}) out of bounds for {rows}x{columns} maze")
        self.row = row
        self.column = column


class MazeStateError(MazeError, RuntimeError):
    """Operation not allowed in the maze's current state (e.g. generating twice)."""


class GenerationAborted(MazeError, RuntimeError):
    """Generation was cancelled before completing. The maze is left ungenerated."""
