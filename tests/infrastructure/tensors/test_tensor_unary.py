import math
import unittest
from unittest import TestCase

import numpy as np

from tensor3d import Shape, Tensor, abs_values, transform


class _Affine:
    def __init__(self, a: float, b: float) -> None:
        self.a = a
        self.b = b

    def __call__(self, v: float) -> float:
        return self.a * v + self.b


class TestTensorTransform(TestCase):

    def setUp(self) -> None:
        rng = np.random.default_rng(0)
        self.arr = rng.standard_normal((2, 3, 4)).astype(np.float32)
        self.t = Tensor.from_numpy(self.arr)

    def test_transform_applies_pointwise(self):
        out = transform(lambda v: v * v + 1.0, self.t)
        self.assertEqual(out.shape, self.t.shape)
        for p in self.t.positions():
            v = self.t.get(p)
            self.assertAlmostEqual(out.get(p), v * v + 1.0, places=5)

    def test_transform_accepts_function_and_callable_object(self):
        out = self.t.transform(math.tanh)
        np.testing.assert_allclose(out.to_numpy(), np.tanh(self.arr), rtol=1e-6)

        out = self.t.transform(_Affine(2.0, -1.0))
        np.testing.assert_allclose(out.to_numpy(), 2.0 * self.arr - 1.0, rtol=1e-6)

    def test_transform_does_not_modify_input(self):
        before = self.t.to_numpy()
        _ = self.t.transform(lambda v: 0.0)
        np.testing.assert_array_equal(self.t.to_numpy(), before)

    def test_transform_calls_in_storage_order(self):
        seen = []
        t = Tensor(Shape(2, 1, 2), [0, 1, 2, 3])

        def record(v: float) -> float:
            seen.append(v)
            return v

        t.transform(record)
        self.assertEqual(seen, [0.0, 1.0, 2.0, 3.0])

    def test_transform_empty_tensor(self):
        t = Tensor(Shape(0, 3, 3))
        out = t.transform(lambda v: v + 1.0)
        self.assertEqual(out.shape, Shape(0, 3, 3))
        self.assertEqual(out.as_flat_sequence().size, 0)


class TestTensorAbs(TestCase):

    def test_abs_values(self):
        t = Tensor(Shape(1, 2, 2), [-1.5, 2.0, -0.0, -4.0])
        out = abs_values(t)
        np.testing.assert_array_equal(out.as_flat_sequence(), [1.5, 2.0, 0.0, 4.0])

    def test_abs_method_and_builtin(self):
        t = Tensor(Shape(1, 1, 2), [-3.0, 3.0])
        np.testing.assert_array_equal(t.abs().as_flat_sequence(), [3.0, 3.0])
        np.testing.assert_array_equal(abs(t).as_flat_sequence(), [3.0, 3.0])


if __name__ == "__main__":
    unittest.main()
