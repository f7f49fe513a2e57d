"""Shape operations on matrices."""

from typing import Tuple

from torch import Tensor, contiguous_format

from structmat.exceptions import ShapeMismatchError
from structmat.ops.utils import DEFAULT_ORDER, check_matrix, check_order


def _resolve_shape(mat: Tensor, rows: int, cols: int) -> Tuple[int, int]:
    """Infer a dimension given as `-1` and verify that the element count matches.

    Args:
        mat: The matrix to be reshaped.
        rows: Requested number of rows, or `-1`.
        cols: Requested number of columns, or `-1`.

    Returns:
        The resolved `(rows, cols)`.

    Raises:
        ShapeMismatchError: If the requested shape cannot hold `mat`'s elements.
    """
    numel = mat.numel()

    def mismatch() -> ShapeMismatchError:
        return ShapeMismatchError(
            f"Cannot reshape matrix of shape {tuple(mat.shape)} into ({rows}, {cols}).",
            mat.shape,
            (rows, cols),
        )

    if rows == -1 and cols >= 1 and numel % cols == 0:
        return numel // cols, cols
    if cols == -1 and rows >= 1 and numel % rows == 0:
        return rows, numel // rows
    if rows < 0 or cols < 0 or rows * cols != numel:
        raise mismatch()

    return rows, cols


def reshape(mat: Tensor, rows: int, cols: int, order: str = DEFAULT_ORDER) -> Tensor:
    """Give a new shape to a matrix without changing its data.

    Inspired by `numpy.reshape`. The entries are read from `mat` and written into the
    result in the same storage order. The default is column-major order (`"F"`), for
    which entry `(i, j)` of the result is entry `i + j * rows` of `mat` enumerated
    column by column. Use `order="C"` to enumerate row by row instead, which is the
    order of `torch.reshape`.

    Args:
        mat: The matrix to be reshaped.
        rows: Number of rows of the result. One of `rows` and `cols` may be `-1`,
            in which case it is inferred.
        cols: Number of columns of the result.
        order: Storage order, `"F"` (column-major) or `"C"` (row-major).
            Default: `"F"`.

    Returns:
        A newly allocated `rows x cols` matrix that does not share memory with `mat`.

    Examples:
        >>> from structmat import as_matrix
        >>> mat = as_matrix([[1, 2, 3], [4, 5, 6]])
        >>> reshape(mat, 3, 2)
        tensor([[1., 5.],
                [4., 3.],
                [2., 6.]])
        >>> reshape(mat, 3, 2, order="C")
        tensor([[1., 2.],
                [3., 4.],
                [5., 6.]])
    """
    check_matrix(mat)
    check_order(order)
    rows, cols = _resolve_shape(mat, rows, cols)

    if order == "C":
        view = mat.reshape(rows, cols)
    else:
        view = mat.T.reshape(cols, rows).T

    return view.clone(memory_format=contiguous_format)
