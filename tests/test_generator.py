import random
import unittest

from mazekit.analysis import edge_count, is_acyclic, is_connected, is_perfect, passable_graph
from mazekit.errors import GenerationAborted
from mazekit.generator import Generator
from mazekit.grid import Grid, Space
from mazekit.maze import Maze
from mazekit.point import Point


class TestGenerator(unittest.TestCase):

    def test_single_cell_grid(self):
        """1x1 grid: start is opened, nothing else to carve."""
        grid = Grid(1, 1)
        gen = Generator(Point(0, 0), rng=random.Random(0))
        gen.generate(grid)
        self.assertEqual(grid.get(0, 0), Space.PASSABLE)
        self.assertEqual(gen.carves, 0)
        self.assertEqual(gen.track, [])

    def test_track_empty_when_done(self):
        grid = Grid(11, 11)
        gen = Generator(Point(0, 0), rng=random.Random(1))
        gen.generate(grid)
        self.assertEqual(gen.track, [])
        self.assertGreater(gen.carves, 0)

    def test_passable_count_matches_carves(self):
        """Every carve opens exactly two new cells, so no cell is opened twice."""
        for seed in range(10):
            grid = Grid(15, 21)
            gen = Generator(Point(0, 0), rng=random.Random(seed))
            gen.generate(grid)
            self.assertEqual(grid.count(Space.PASSABLE), 1 + 2 * gen.carves)

    def test_attempts_bounded_by_area(self):
        """
        Loop iterations (carves, rejected directions and backtracks) stay
        linear in the grid area: at most 4 rejections per head position.
        """
        for rows, columns, seed in [(31, 31, 5), (21, 9, 1), (3, 3, 0), (1, 1, 0)]:
            iterations = []

            def count_iteration():
                iterations.append(1)
                return False

            grid = Grid(rows, columns)
            gen = Generator(Point(0, 0), rng=random.Random(seed), should_abort=count_iteration)
            gen.generate(grid)
            area = rows * columns
            self.assertLessEqual(gen.carves, area)
            self.assertLessEqual(len(iterations), 8 * area)

    def test_origin_start_reaches_every_node_on_small_grid(self):
        """3x3 from the corner: all four even nodes get opened."""
        grid = Grid(3, 3)
        Generator(Point(0, 0), rng=random.Random(2)).generate(grid)
        for r, c in [(0, 0), (0, 2), (2, 0), (2, 2)]:
            self.assertEqual(grid.get(r, c), Space.PASSABLE)
        self.assertEqual(grid.get(1, 1), Space.IMPASSABLE)

    def test_abort_raises(self):
        calls = []

        def should_abort():
            calls.append(1)
            return len(calls) > 5

        grid = Grid(21, 21)
        gen = Generator(Point(0, 0), rng=random.Random(0), should_abort=should_abort)
        with self.assertRaises(GenerationAborted):
            gen.generate(grid)

    def test_reset_rearms(self):
        gen = Generator(Point(0, 0))
        gen.generate(Grid(5, 5))
        gen.reset(Point(2, 2))
        self.assertEqual(gen.current, Point(2, 2))
        self.assertEqual(gen.track, [Point(2, 2)])
        self.assertEqual(gen.carves, 0)


class TestPerfectMaze(unittest.TestCase):

    def assertPerfect(self, maze):
        G = passable_graph(maze)
        self.assertTrue(is_connected(maze, G), "passable cells not connected")
        self.assertTrue(is_acyclic(maze, G), "passable cells contain a loop")
        self.assertEqual(edge_count(G), len(G) - 1)
        self.assertEqual(len(G), 1 + 2 * maze.carves)

    def test_spanning_tree_various_sizes(self):
        for width, height in [(3, 3), (5, 9), (10, 10), (21, 21), (25, 9), (10, 25), (41, 31)]:
            for seed in range(3):
                maze = Maze(width, height, rng=random.Random(seed))
                maze.generate()
                self.assertPerfect(maze)

    def test_spanning_tree_various_starts(self):
        """Odd, even and mixed-parity starts all give a tree."""
        for start in [Point(0, 0), Point(1, 1), Point(0, 1), Point(3, 0), Point(10, 10), Point(20, 20)]:
            maze = Maze(21, 21, start=start, rng=random.Random(42))
            maze.generate()
            self.assertEqual(maze.get(start.row, start.column), Space.PASSABLE)
            self.assertPerfect(maze)

    def test_unseeded_generation_is_perfect(self):
        maze = Maze(31, 31)
        maze.generate()
        self.assertTrue(is_perfect(maze))


if __name__ == '__main__':
    unittest.main()
