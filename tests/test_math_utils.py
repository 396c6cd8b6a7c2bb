import unittest

from sphere_cli_renderer.math_utils import Vec3


class TestVec3(unittest.TestCase):
    def test_componentwise_add_and_sub(self) -> None:
        a = Vec3(1, 2, 3)
        b = Vec3(0.5, -2, 4)

        self.assertEqual(a.add(b), Vec3(1.5, 0, 7))
        self.assertEqual(a.sub(b), Vec3(0.5, 4, -1))
        self.assertEqual(a + b, a.add(b))
        self.assertEqual(a - b, a.sub(b))

    def test_scale(self) -> None:
        v = Vec3(1, -2, 0.5)
        self.assertEqual(v.scale(2), Vec3(2, -4, 1))
        self.assertEqual(v * 2, v.scale(2))
        self.assertEqual(2 * v, v.scale(2))

    def test_dot_and_cross(self) -> None:
        x = Vec3(1, 0, 0)
        y = Vec3(0, 1, 0)
        z = Vec3(0, 0, 1)

        self.assertEqual(Vec3(1, 2, 3).dot(Vec3(4, -5, 6)), 12.0)
        self.assertEqual(x.cross(y), z)
        self.assertEqual(y.cross(z), x)
        self.assertEqual(y.cross(x), Vec3(0, 0, -1))

    def test_operations_return_new_instances(self) -> None:
        v = Vec3(1, 1, 1)
        w = v.add(Vec3(0, 0, 0))

        self.assertIsNot(v, w)
        self.assertEqual(v, Vec3(1, 1, 1))

    def test_is_immutable(self) -> None:
        v = Vec3(1, 2, 3)
        with self.assertRaises(AttributeError):
            v.x = 5
        self.assertEqual(v.x, 1.0)

    def test_value_equality_and_hash(self) -> None:
        self.assertEqual(Vec3(1, 2, 3), Vec3(1.0, 2.0, 3.0))
        self.assertNotEqual(Vec3(1, 2, 3), Vec3(3, 2, 1))
        self.assertEqual(len({Vec3(1, 2, 3), Vec3(1, 2, 3)}), 1)

    def test_magnitude_and_iteration(self) -> None:
        self.assertEqual(Vec3(3, 4, 0).magnitude(), 5.0)
        self.assertEqual(list(Vec3(1, 2, 3)), [1.0, 2.0, 3.0])


if __name__ == "__main__":
    unittest.main()
