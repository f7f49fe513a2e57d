"""Utility functions and defaults shared by the matrix operations."""

from numbers import Real
from typing import Any, Sequence, Union
from warnings import warn

import torch
from torch import Tensor, float32, zeros

MATRIX_DTYPE = float32
"""Element type of all matrices handled by ``structmat``."""

DIAGONAL_ATOL = 1e-5
"""Default tolerance of ``is_diagonal``."""

SUPPORTED_ORDERS = ("C", "F")
DEFAULT_ORDER = "F"
"""Default storage order of ``reshape`` (column-major)."""


def check_matrix(mat: Any, name: str = "mat") -> None:
    """Make sure the supplied object is a dense single-precision matrix.

    Args:
        mat: The object to be checked.
        name: Optional name of the object to be printed in the error message.
            Default: `"mat"`.

    Raises:
        TypeError: If `mat` is not a tensor or its data type is not `float32`.
        ValueError: If `mat` is not 2-dimensional.
    """
    if not isinstance(mat, Tensor):
        raise TypeError(f"{name} must be a torch.Tensor. Got {type(mat).__name__}.")
    if mat.ndim != 2:
        raise ValueError(f"{name} must be a matrix. Got shape {tuple(mat.shape)}.")
    if mat.dtype != MATRIX_DTYPE:
        raise TypeError(
            f"{name} must have dtype {MATRIX_DTYPE}. Got {mat.dtype}."
            + " Use `structmat.as_matrix` to convert explicitly."
        )


def check_order(order: str) -> None:
    """Make sure the storage order is supported.

    Args:
        order: Storage order, `"C"` (row-major) or `"F"` (column-major).

    Raises:
        ValueError: If the order is not supported.
    """
    if order not in SUPPORTED_ORDERS:
        raise ValueError(f"order must be one of {SUPPORTED_ORDERS}. Got {order!r}.")


def check_tolerance(atol: Any, name: str = "atol") -> None:
    """Make sure a tolerance is a non-negative real number.

    Args:
        atol: The tolerance to be checked.
        name: Optional name of the tolerance to be printed in the error message.
            Default: `"atol"`.

    Raises:
        ValueError: If the tolerance is not a non-negative real number.
    """
    if isinstance(atol, bool) or not isinstance(atol, Real) or atol < 0:
        raise ValueError(f"{name} must be a non-negative number. Got {atol!r}.")


def as_matrix(
    data: Union[Tensor, Sequence[Sequence[float]]],
    device: Union[torch.device, None] = None,
) -> Tensor:
    """Convert nested sequences or a tensor into a single-precision matrix.

    Tensors that already satisfy the requirements are returned as is (no copy).

    Args:
        data: A 2d tensor or a nested sequence of numbers. `[[]]` yields a `1x0`
            matrix.
        device: Optional device of the matrix. If not specified, tensors keep their
            device and sequences are placed on the default device.

    Returns:
        A 2d tensor of data type `float32`.

    Raises:
        ValueError: If the data is not 2-dimensional.
    """
    if isinstance(data, Tensor):
        if data.dtype != MATRIX_DTYPE:
            warn(f"Converting tensor of dtype {data.dtype} to {MATRIX_DTYPE}.")
        mat = data.to(dtype=MATRIX_DTYPE, device=device)
    else:
        mat = torch.tensor(data, dtype=MATRIX_DTYPE, device=device)

    if mat.ndim != 2:
        raise ValueError(f"Expected 2d data. Got shape {tuple(mat.shape)}.")

    return mat


def empty(
    rows: int, cols: int, device: Union[torch.device, None] = None
) -> Tensor:
    """Create a zero-filled matrix, which may have zero rows or columns.

    Unlike `torch.empty`, the entries are initialized to zero. The name refers
    to the common use of creating matrices without rows or columns, e.g. as the
    start value when stacking matrices in a loop.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        device: Optional device of the matrix. If not specified, uses the default
            device.

    Returns:
        A `rows x cols` matrix of zeros.

    Raises:
        ValueError: If one of the dimensions is negative.
    """
    if rows < 0 or cols < 0:
        raise ValueError(f"Dimensions must be non-negative. Got ({rows}, {cols}).")
    return zeros((rows, cols), dtype=MATRIX_DTYPE, device=device)
