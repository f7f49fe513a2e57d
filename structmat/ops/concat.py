"""Concatenation of matrices along rows or columns."""

from torch import Tensor, cat

from structmat.exceptions import ShapeMismatchError
from structmat.ops.utils import check_matrix

_AXIS_NAMES = {0: "rows", 1: "columns"}


def _stack(mat1: Tensor, mat2: Tensor, dim: int, fn_name: str) -> Tensor:
    """Concatenate two matrices along `dim`, absorbing empty operands.

    Args:
        mat1: First matrix.
        mat2: Second matrix.
        dim: The concatenation axis (`0` for rows, `1` for columns).
        fn_name: Name of the calling function, used in error messages.

    Returns:
        The concatenated matrix.

    Raises:
        ShapeMismatchError: If the extents along the other axis disagree and
            cannot be resolved by absorbing an empty operand.
    """
    check_matrix(mat1, name="mat1")
    check_matrix(mat2, name="mat2")

    other = 1 - dim
    empty1, empty2 = mat1.shape[dim] == 0, mat2.shape[dim] == 0

    if empty1 and empty2 and mat1.shape[other] != mat2.shape[other]:
        raise ShapeMismatchError(
            f"{fn_name}: empty operands of shapes {tuple(mat1.shape)} and"
            + f" {tuple(mat2.shape)} disagree in {_AXIS_NAMES[other]}.",
            mat1.shape,
            mat2.shape,
        )
    if empty1:
        return mat2.clone()
    if empty2:
        return mat1.clone()

    if mat1.shape[other] != mat2.shape[other]:
        raise ShapeMismatchError(
            f"{fn_name}: matrices of shapes {tuple(mat1.shape)} and"
            + f" {tuple(mat2.shape)} must have the same number of"
            + f" {_AXIS_NAMES[other]}.",
            mat1.shape,
            mat2.shape,
        )

    return cat([mat1, mat2], dim=dim)


def vstack(mat1: Tensor, mat2: Tensor) -> Tensor:
    """Stack two matrices vertically (`mat1` on top of `mat2`).

    Inspired by `numpy.vstack`. An operand without rows is absorbed, that is the
    result is a copy of the other operand, regardless of its number of columns.
    If both operands have no rows, their numbers of columns must agree.

    Args:
        mat1: Top matrix.
        mat2: Bottom matrix.

    Returns:
        A newly allocated matrix of shape `(rows1 + rows2) x cols`.

    Raises:
        ShapeMismatchError: If the numbers of columns disagree.

    Examples:
        >>> from structmat import as_matrix
        >>> vstack(as_matrix([[1, 2], [3, 4]]), as_matrix([[5, 6]]))
        tensor([[1., 2.],
                [3., 4.],
                [5., 6.]])
    """
    return _stack(mat1, mat2, 0, "vstack")


def hstack(mat1: Tensor, mat2: Tensor) -> Tensor:
    """Stack two matrices horizontally (`mat1` left of `mat2`).

    Inspired by `numpy.hstack`. An operand without columns is absorbed, that is the
    result is a copy of the other operand, regardless of its number of rows. If both
    operands have no columns, their numbers of rows must agree.

    Args:
        mat1: Left matrix.
        mat2: Right matrix.

    Returns:
        A newly allocated matrix of shape `rows x (cols1 + cols2)`.

    Raises:
        ShapeMismatchError: If the numbers of rows disagree.
    """
    return _stack(mat1, mat2, 1, "hstack")
