import unittest
from unittest import TestCase

import numpy as np

from tensor3d import (
    InvalidArgumentError,
    ITensor,
    Position,
    PositionOutOfBoundsError,
    Shape,
    Tensor,
    configure,
    reshape,
)


def _range_tensor(depth: int, height: int, width: int) -> Tensor:
    shape = Shape(depth, height, width)
    return Tensor(shape, [float(i) for i in range(shape.volume)])


class TestTensorConstruction(TestCase):

    def test_zero_filled_by_default(self):
        t = Tensor(Shape(2, 3, 4))
        self.assertEqual(t.shape, Shape(2, 3, 4))
        arr = t.as_flat_sequence()
        self.assertEqual(arr.shape, (24,))
        self.assertEqual(arr.dtype, np.float32)
        self.assertTrue(np.all(arr == 0.0))

    def test_shape_tuple_is_accepted(self):
        t = Tensor((1, 2, 2), [1, 2, 3, 4])
        self.assertEqual(t.shape, Shape(1, 2, 2))

    def test_values_follow_linearization(self):
        """(1, 2, 2) with [1, 2, 3, 4] lays out rows then columns."""
        t = Tensor(Shape(1, 2, 2), [1, 2, 3, 4])
        self.assertEqual(t.get(0, 0, 0), 1.0)
        self.assertEqual(t.get(0, 0, 1), 2.0)
        self.assertEqual(t.get(0, 1, 0), 3.0)
        self.assertEqual(t.get(0, 1, 1), 4.0)

    def test_length_mismatch_raises_invalid_argument(self):
        with self.assertRaises(InvalidArgumentError):
            Tensor(Shape(1, 2, 2), [1.0, 2.0, 3.0])
        with self.assertRaises(InvalidArgumentError):
            Tensor(Shape(1, 2, 2), [1.0] * 5)

    def test_nested_values_raise_invalid_argument(self):
        with self.assertRaises(InvalidArgumentError):
            Tensor(Shape(1, 2, 2), [[1.0, 2.0], [3.0, 4.0]])

    def test_non_numeric_values_raise_invalid_argument(self):
        with self.assertRaises(InvalidArgumentError):
            Tensor(Shape(1, 1, 2), [1.0, object()])

    def test_generator_values_are_accepted(self):
        t = Tensor(Shape(1, 1, 3), (float(i) for i in range(3)))
        np.testing.assert_array_equal(t.as_flat_sequence(), [0.0, 1.0, 2.0])

    def test_construction_copies_input(self):
        src = np.array([1, 2, 3, 4], dtype=np.float32)
        t = Tensor(Shape(1, 2, 2), src)
        src[0] = 100.0
        self.assertEqual(t.get(0, 0, 0), 1.0)

    def test_empty_shape(self):
        t = Tensor(Shape(0, 2, 2), [])
        self.assertEqual(t.as_flat_sequence().size, 0)

    def test_factories(self):
        z = Tensor.zeros((1, 1, 2))
        np.testing.assert_array_equal(z.as_flat_sequence(), [0.0, 0.0])

        f = Tensor.full((2, 1, 2), 1.5)
        np.testing.assert_array_equal(f.as_flat_sequence(), [1.5] * 4)

        arr = np.arange(12, dtype=np.float64).reshape(2, 2, 3)
        n = Tensor.from_numpy(arr)
        self.assertEqual(n.shape, Shape(2, 2, 3))
        self.assertEqual(n.get(1, 0, 2), 8.0)
        np.testing.assert_array_equal(n.to_numpy(), arr.astype(np.float32))

    def test_from_numpy_requires_three_dims(self):
        with self.assertRaises(InvalidArgumentError):
            Tensor.from_numpy(np.zeros((2, 2)))

    def test_satisfies_protocol(self):
        self.assertIsInstance(Tensor(Shape(1, 1, 1)), ITensor)


class TestTensorElementAccess(TestCase):

    def test_set_then_get(self):
        t = Tensor(Shape(2, 3, 4))
        for p in t.positions():
            before = t.to_numpy()
            t.set(p, 2.5)
            self.assertEqual(t.get(p), 2.5)
            after = t.to_numpy()
            after[p.z, p.y, p.x] = before[p.z, p.y, p.x]
            np.testing.assert_array_equal(after, before)
            t.set(p, 0.0)

    def test_set_with_coordinates(self):
        t = Tensor(Shape(1, 2, 2))
        t.set(0, 1, 0, -7.25)
        self.assertEqual(t.get(Position(0, 1, 0)), -7.25)
        self.assertEqual(t.get((0, 1, 0)), -7.25)

    def test_get_returns_python_float(self):
        t = _range_tensor(1, 1, 2)
        self.assertIs(type(t.get(0, 0, 1)), float)

    def test_wrong_argument_count_raises_type_error(self):
        t = _range_tensor(1, 1, 2)
        with self.assertRaises(TypeError):
            t.get(0, 0)
        with self.assertRaises(TypeError):
            t.set(1.0)

    def test_out_of_bounds_raises(self):
        t = _range_tensor(1, 2, 2)
        for p in (Position(1, 0, 0), Position(0, 2, 0), Position(0, 0, 2), Position(0, -1, 0)):
            with self.assertRaises(PositionOutOfBoundsError):
                t.get(p)
            with self.assertRaises(PositionOutOfBoundsError):
                t.set(p, 1.0)

    def test_out_of_bounds_is_also_index_error(self):
        t = _range_tensor(1, 2, 2)
        with self.assertRaises(IndexError):
            t.get(0, 0, 9)

    def test_bounds_check_can_be_disabled(self):
        t = _range_tensor(1, 2, 2)
        with configure(check_bounds=False):
            # (0, 0, 2) linearizes to offset 2 == (0, 1, 0)
            self.assertEqual(t.get(0, 0, 2), 2.0)
        with self.assertRaises(PositionOutOfBoundsError):
            t.get(0, 0, 2)

    def test_flat_sequence_is_read_only_view(self):
        t = _range_tensor(1, 2, 2)
        flat = t.as_flat_sequence()
        with self.assertRaises(ValueError):
            flat[0] = 10.0
        t.set(0, 0, 0, 9.0)
        self.assertEqual(flat[0], 9.0)

    def test_to_numpy_is_a_copy(self):
        t = _range_tensor(2, 2, 2)
        arr = t.to_numpy()
        self.assertEqual(arr.shape, (2, 2, 2))
        arr[0, 0, 0] = 42.0
        self.assertEqual(t.get(0, 0, 0), 0.0)

    def test_clone_does_not_alias(self):
        t = _range_tensor(1, 2, 2)
        c = t.clone()
        c.set(0, 0, 0, 5.0)
        self.assertEqual(t.get(0, 0, 0), 0.0)
        self.assertEqual(c.shape, t.shape)


class TestTensorReshape(TestCase):

    def test_reshape_preserves_flat_sequence(self):
        t = _range_tensor(2, 3, 4)
        r = t.reshape(Shape(4, 3, 2))
        self.assertEqual(r.shape, Shape(4, 3, 2))
        np.testing.assert_array_equal(r.as_flat_sequence(), t.as_flat_sequence())
        self.assertEqual(r.get(1, 0, 0), 6.0)

    def test_reshape_function_accepts_tuple(self):
        t = _range_tensor(1, 2, 2)
        r = reshape(t, (4, 1, 1))
        self.assertEqual(r.shape, Shape(4, 1, 1))
        self.assertEqual(r.get(3, 0, 0), 3.0)

    def test_reshape_volume_mismatch_raises(self):
        t = _range_tensor(1, 2, 2)
        with self.assertRaises(InvalidArgumentError):
            t.reshape(Shape(1, 2, 3))

    def test_reshape_does_not_alias_source(self):
        t = _range_tensor(1, 2, 2)
        r = t.reshape(Shape(2, 2, 1))
        r.set(0, 0, 0, 99.0)
        self.assertEqual(t.get(0, 0, 0), 0.0)


if __name__ == "__main__":
    unittest.main()
