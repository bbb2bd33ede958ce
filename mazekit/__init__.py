from mazekit.direction import Direction
from mazekit.errors import GenerationAborted, MazeBoundsError, MazeError, MazeStateError
from mazekit.grid import Space
from mazekit.maze import Maze
from mazekit.point import Point

__all__ = [
    "Direction",
    "GenerationAborted",
    "Maze",
    "MazeBoundsError",
    "MazeError",
    "MazeStateError",
    "Point",
    "Space",
]
