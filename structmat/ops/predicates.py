"""Structural predicates on matrices."""

from torch import Tensor

from structmat.ops.utils import DIAGONAL_ATOL, check_matrix, check_tolerance


def is_diagonal(mat: Tensor, atol: float = DIAGONAL_ATOL, strict: bool = False) -> bool:
    """Determine whether a matrix is diagonal.

    Inspired by MATLAB's `isdiag`. Non-square matrices are never diagonal.

    Let `D` be the matrix that carries the diagonal of `mat` and zeros elsewhere.
    The matrix is considered diagonal if `|sum(mat - D)| < atol`. The residuals are
    summed with their sign, hence off-diagonal entries that cancel each other pass
    the test (e.g. `+1` at `(0, 1)` and `-1` at `(0, 2)`). Use `strict=True` to
    sum the absolute residuals instead.

    Args:
        mat: A matrix.
        atol: Tolerance on the summed off-diagonal residual. Default: `1e-5`.
        strict: Whether to sum the absolute values of the off-diagonal residuals.
            Default: `False`.

    Returns:
        Whether the matrix is diagonal.

    Examples:
        >>> from structmat import as_matrix
        >>> is_diagonal(as_matrix([[2, 0], [0, 3]]))
        True
        >>> is_diagonal(as_matrix([[1, 1, -1], [0, 1, 0], [0, 0, 1]]))
        True
        >>> is_diagonal(as_matrix([[1, 1, -1], [0, 1, 0], [0, 0, 1]]), strict=True)
        False
    """
    check_matrix(mat)
    check_tolerance(atol)

    num_rows, num_cols = mat.shape
    if num_rows != num_cols:
        return False

    residual = mat - mat.diagonal().diag()
    if strict:
        residual = residual.abs()

    return bool(residual.sum().abs() < atol)
