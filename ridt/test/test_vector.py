import math
import unittest

import numpy as np

from ..geometry.vector import Vector2D


class TestVector2D(unittest.TestCase):

    def setUp(self):
        self.a = Vector2D(1, 2)
        self.b = Vector2D(3, 5)

    def test_arithmetic(self):
        s = self.a.add(self.b)
        self.assertEqual((s.x, s.y), (4.0, 7.0))
        d = self.b.sub(self.a)
        self.assertEqual((d.x, d.y), (2.0, 3.0))
        m = self.a.mult(2)
        self.assertEqual((m.x, m.y), (2.0, 4.0))
        self.assertEqual(self.a.dot(self.b), 13.0)
        self.assertEqual(self.a.cross(self.b), -1.0)
        self.assertEqual(self.b.cross(self.a), 1.0)
        self.assertEqual(Vector2D(3, 4).mag(), 5.0)

    def test_operators_match_named_methods(self):
        self.assertEqual(list(self.a + self.b), [4.0, 7.0])
        self.assertEqual(list(self.b - self.a), [2.0, 3.0])
        self.assertEqual(list(self.a * 3), [3.0, 6.0])
        self.assertEqual(list(3 * self.a), [3.0, 6.0])

    def test_equality_is_identity(self):
        clone = Vector2D(1, 2)
        self.assertEqual(self.a, self.a)
        self.assertNotEqual(self.a, clone)
        self.assertEqual(len({self.a, clone}), 2)

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            self.a.x = 10.0
        self.assertEqual(self.a.x, 1.0)

    def test_from_any(self):
        self.assertIs(Vector2D.from_any(self.a), self.a)
        v = Vector2D.from_any((7, 8))
        self.assertEqual((v.x, v.y), (7.0, 8.0))
        row = np.array([[0.5, -1.5]])[0]
        w = Vector2D.from_any(row)
        self.assertIsInstance(w.x, float)
        self.assertEqual(list(w), [0.5, -1.5])

    def test_repr_keeps_full_precision(self):
        near = Vector2D(0.1234567, 2)
        nearer = Vector2D(0.1234568, 2)
        self.assertEqual(repr(near), "Vector2D(0.1234567, 2.0)")
        self.assertNotEqual(repr(near), repr(nearer))

    def test_nan_propagates(self):
        n = Vector2D(float("nan"), 0.0)
        self.assertTrue(math.isnan(n.add(self.a).x))


if __name__ == "__main__":
    unittest.main()
