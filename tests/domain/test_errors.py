import unittest
from unittest import TestCase

from tensor3d.domain import (
    EmptyInputError,
    InvalidArgumentError,
    Position,
    PositionOutOfBoundsError,
    Shape,
    ShapeMismatchError,
    Tensor3DError,
)


class TestErrorTaxonomy(TestCase):

    def test_all_errors_share_base_class(self):
        for cls in (
            InvalidArgumentError,
            ShapeMismatchError,
            EmptyInputError,
            PositionOutOfBoundsError,
        ):
            self.assertTrue(issubclass(cls, Tensor3DError), cls)

    def test_builtin_compatibility(self):
        self.assertTrue(issubclass(InvalidArgumentError, ValueError))
        self.assertTrue(issubclass(ShapeMismatchError, ValueError))
        self.assertTrue(issubclass(EmptyInputError, ValueError))
        self.assertTrue(issubclass(PositionOutOfBoundsError, IndexError))

    def test_shape_mismatch_carries_shapes(self):
        err = ShapeMismatchError("add", Shape(1, 2, 2), Shape(2, 1, 2))
        self.assertEqual(err.op, "add")
        self.assertEqual(err.shape_a, Shape(1, 2, 2))
        self.assertEqual(err.shape_b, Shape(2, 1, 2))
        self.assertIn("(1, 2, 2)", str(err))
        self.assertIn("(2, 1, 2)", str(err))

    def test_out_of_bounds_carries_position(self):
        err = PositionOutOfBoundsError(Position(0, 5, 0), Shape(1, 2, 2))
        self.assertEqual(err.position, Position(0, 5, 0))
        self.assertEqual(err.shape, Shape(1, 2, 2))

    def test_empty_input_message(self):
        err = EmptyInputError("min_max_positions")
        self.assertEqual(err.op, "min_max_positions")
        self.assertIn("zero elements", str(err))


if __name__ == "__main__":
    unittest.main()
