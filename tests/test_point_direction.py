import random
import unittest

from mazekit.direction import ALL_DIRECTIONS, Direction
from mazekit.point import Point


class TestPoint(unittest.TestCase):

    def test_offsetting_each_direction(self):
        """Row grows southward, column grows eastward."""
        p = Point(5, 5)
        self.assertEqual(p.offsetting(Direction.N, 2), Point(3, 5))
        self.assertEqual(p.offsetting(Direction.S, 2), Point(7, 5))
        self.assertEqual(p.offsetting(Direction.E, 2), Point(5, 7))
        self.assertEqual(p.offsetting(Direction.W, 2), Point(5, 3))
        # pure: original untouched
        self.assertEqual(p, Point(5, 5))

    def test_offsetting_negative_amount(self):
        self.assertEqual(Point(4, 4).offsetting(Direction.E, -1), Point(4, 3))

    def test_offset_in_place(self):
        p = Point(0, 0)
        p.offset(Direction.S, 3)
        p.offset(Direction.E)
        self.assertEqual(p, Point(3, 1))

    def test_equality_and_hash(self):
        self.assertEqual(Point(1, 2), Point(1, 2))
        self.assertNotEqual(Point(1, 2), Point(2, 1))
        self.assertEqual(len({Point(1, 2), Point(1, 2), Point(0, 0)}), 2)

    def test_zero_and_parse(self):
        self.assertEqual(Point.zero(), Point(0, 0))
        self.assertEqual(Point.parse("3,4"), Point(3, 4))
        self.assertEqual(Point(3, 4).as_tuple(), (3, 4))


class TestDirection(unittest.TestCase):

    def test_perpendiculars(self):
        ew = Direction.E | Direction.W
        ns = Direction.N | Direction.S
        self.assertEqual(Direction.N.perpendiculars, ew)
        self.assertEqual(Direction.S.perpendiculars, ew)
        self.assertEqual(Direction.E.perpendiculars, ns)
        self.assertEqual(Direction.W.perpendiculars, ns)
        self.assertEqual(Direction.N.perpendiculars.members(), (Direction.E, Direction.W))

    def test_opposite(self):
        for d in Direction.cases():
            self.assertEqual(d.opposite.opposite, d)
            dr, dc = d.delta
            odr, odc = d.opposite.delta
            self.assertEqual((dr + odr, dc + odc), (0, 0))

    def test_random_none_when_all_excluded(self):
        self.assertIsNone(Direction.random(exclude=ALL_DIRECTIONS))

    def test_random_respects_exclusion(self):
        rng = random.Random(3)
        exclude = Direction.N | Direction.E | Direction.W
        for _ in range(50):
            self.assertIs(Direction.random(exclude=exclude, rng=rng), Direction.S)

    def test_random_covers_all_when_nothing_excluded(self):
        rng = random.Random(11)
        seen = {Direction.random(rng=rng) for _ in range(200)}
        self.assertEqual(seen, set(Direction.cases()))


if __name__ == '__main__':
    unittest.main()
