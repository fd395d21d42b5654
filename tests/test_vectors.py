import math
from unittest import TestCase

from rtkernel import GeometricVector, equal_approx, point, vector


class TestGeometricVector(TestCase):

    def test_point_has_w_one(self):
        p = point(4.0, -4.0, 3.0)
        self.assertEqual(p.x, 4.0)
        self.assertEqual(p.y, -4.0)
        self.assertEqual(p.z, 3.0)
        self.assertEqual(p.w, 1.0)
        self.assertTrue(p.is_point)
        self.assertFalse(p.is_vector)

    def test_vector_has_w_zero(self):
        v = vector(4.0, -4.0, 3.0)
        self.assertEqual(v.w, 0.0)
        self.assertTrue(v.is_vector)
        self.assertEqual(v, GeometricVector.vector(4.0, -4.0, 3.0))

    def test_equal_approx_threshold(self):
        self.assertTrue(equal_approx(1.0, 1.0000005))
        self.assertFalse(equal_approx(1.0, 1.005))

    def test_equality_is_approximate(self):
        self.assertEqual(vector(0.0, 0.0, 0.0), vector(0.0, 0.0, 0.0))
        self.assertEqual(point(2.0, 4.0, 6.0), point(2.0, 4.0, 6.0000001))
        self.assertNotEqual(point(2.0, 4.0, 6.0), point(2.0, 4.0, 6.001))
        self.assertNotEqual(point(2.0, 4.0, 6.0), vector(2.0, 4.0, 6.0))

    def test_point_plus_vector_is_point(self):
        p = point(4.0, -4.0, 3.0)
        v = vector(1.0, -8.0, 2.0)
        result = p + v
        self.assertEqual(result, point(5.0, -12.0, 5.0))
        self.assertTrue(result.is_point)
        self.assertEqual(p.x, 4.0)
        self.assertEqual(v.x, 1.0)

    def test_vector_plus_vector_is_vector(self):
        result = vector(10.0, 10.0, 5.0) + vector(-10.0, -10.0, -5.0)
        self.assertEqual(result, vector(0.0, 0.0, 0.0))
        self.assertTrue(result.is_vector)

    def test_point_minus_point_is_vector(self):
        result = point(3.0, 2.0, 1.0) - point(5.0, 6.0, 7.0)
        self.assertEqual(result, vector(-2.0, -4.0, -6.0))
        self.assertTrue(result.is_vector)

    def test_point_minus_vector_is_point(self):
        result = point(3.0, 2.0, 1.0) - vector(5.0, 6.0, 7.0)
        self.assertEqual(result, point(-2.0, -4.0, -6.0))

    def test_negate(self):
        v = vector(1.0, 2.0, 3.0)
        p = point(5.0, 6.0, 7.0)
        self.assertEqual(-v, GeometricVector(-1.0, -2.0, -3.0, 0.0))
        self.assertEqual(-p, GeometricVector(-5.0, -6.0, -7.0, -1.0))
        self.assertEqual(v.x, 1.0)
        self.assertEqual(p.x, 5.0)

    def test_multiply_by_scalar(self):
        self.assertEqual(vector(1.0, 2.0, 3.0) * 2.0, GeometricVector(2.0, 4.0, 6.0, 0.0))
        self.assertEqual(point(5.0, 6.0, 7.0) * 2.5, GeometricVector(12.5, 15.0, 17.5, 2.5))
        self.assertEqual(2.0 * vector(1.0, 2.0, 3.0), vector(2.0, 4.0, 6.0))

    def test_divide_by_scalar(self):
        self.assertEqual(vector(1.0, 2.0, 3.0) / 2.0, GeometricVector(0.5, 1.0, 1.5, 0.0))
        self.assertEqual(point(5.0, 6.0, 7.0) / 2.5, GeometricVector(2.0, 2.4, 2.8, 0.4))

    def test_multiply_two_vectors_is_type_error(self):
        with self.assertRaises(TypeError):
            vector(1.0, 2.0, 3.0) * vector(1.0, 2.0, 3.0)

    def test_magnitude(self):
        self.assertEqual(vector(2.0, 2.0, 2.0).magnitude(), math.sqrt(12.0))
        self.assertEqual(vector(0.0, 0.0, 1.0).magnitude(), 1.0)

    def test_normalized_axis_vector(self):
        v = vector(4.0, 0.0, 0.0)
        self.assertEqual(v.normalized(), vector(1.0, 0.0, 0.0))
        self.assertEqual(v.x, 4.0)

    def test_normalized_magnitude_is_exactly_one(self):
        samples = [
            vector(1.0, 2.0, 3.0),
            vector(10.0, 12.0, 5.0),
            vector(-3.0, 7.0, 0.5),
            vector(0.1, 0.2, 0.3),
            vector(0.0, -9.0, 4.0),
            point(1.0, 2.0, 3.0),
            point(0.03813126165684444, -0.05771275498635586, 0.03443592381663063),
            point(0.0, 0.0, 0.0),
        ]
        for v in samples:
            with self.subTest(v=v):
                self.assertEqual(v.normalized().magnitude(), 1.0)

    def test_normalized_does_not_mutate(self):
        v = vector(1.0, 2.0, 3.0)
        before = v.as_array()
        v.normalized()
        self.assertEqual(list(v), list(before))

    def test_normalized_zero_vector_raises(self):
        with self.assertRaises(ValueError):
            vector(0.0, 0.0, 0.0).normalized()

    def test_dot(self):
        self.assertEqual(vector(1.0, 2.0, 3.0).dot(vector(2.0, 3.0, 4.0)), 20.0)

    def test_cross(self):
        a = vector(1.0, 2.0, 3.0)
        b = vector(2.0, 3.0, 4.0)
        self.assertEqual(a.cross(b), vector(-1.0, 2.0, -1.0))
        self.assertEqual(b.cross(a), vector(1.0, -2.0, 1.0))

    def test_cross_is_anticommutative(self):
        pairs = [
            (vector(1.0, 2.0, 3.0), vector(2.0, 3.0, 4.0)),
            (vector(-0.5, 4.0, 9.0), vector(3.0, 0.0, -2.0)),
            (vector(1.0, 0.0, 0.0), vector(0.0, 1.0, 0.0)),
        ]
        for a, b in pairs:
            with self.subTest(a=a, b=b):
                self.assertEqual(a.cross(b), -b.cross(a))

    def test_cross_of_points_is_vector(self):
        result = point(1.0, 0.0, 0.0).cross(point(0.0, 1.0, 0.0))
        self.assertEqual(result.w, 0.0)
        self.assertEqual(result, vector(0.0, 0.0, 1.0))
