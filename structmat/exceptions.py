"""Exceptions raised by ``structmat``."""

from typing import Sequence, Tuple


class StructmatError(Exception):
    """Base class for all errors raised by ``structmat``."""


class ShapeMismatchError(StructmatError, ValueError):
    """The supplied matrix shapes are incompatible with the requested operation.

    Attributes:
        shape1: Shape of the first offending operand.
        shape2: Shape of the second offending operand, or the requested shape.
    """

    def __init__(
        self, message: str, shape1: Sequence[int], shape2: Sequence[int]
    ) -> None:
        """Store the offending shapes.

        Args:
            message: Description of the mismatch.
            shape1: Shape of the first offending operand.
            shape2: Shape of the second offending operand, or the requested shape.
        """
        super().__init__(message)
        self.shape1: Tuple[int, ...] = tuple(shape1)
        self.shape2: Tuple[int, ...] = tuple(shape2)
