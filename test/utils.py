"""Utility functions for the tests."""

from typing import List, Tuple

from torch import Tensor, allclose, cuda, device, isclose, rand, zeros

DEVICE_IDS = ["cpu", "cuda"] if cuda.is_available() else ["cpu"]
DEVICES = [device(name) for name in DEVICE_IDS]

SHAPES: List[Tuple[int, int]] = [(0, 0), (0, 3), (2, 0), (1, 1), (2, 3), (4, 2)]
SHAPE_IDS = [f"shape={rows}x{cols}" for rows, cols in SHAPES]


def report_nonclose(
    tensor1: Tensor,
    tensor2: Tensor,
    rtol: float = 1e-5,
    atol: float = 1e-8,
    equal_nan: bool = False,
    name: str = "array",
):
    """Compare two tensors, raise exception if nonclose values and print them.

    Args:
        tensor1: First tensor.
        tensor2: Second tensor.
        rtol: Relative tolerance (see ``torch.allclose``). Default: ``1e-5``.
        atol: Absolute tolerance (see ``torch.allclose``). Default: ``1e-8``.
        equal_nan: Whether comparing two NaNs should be considered as ``True``
            (see ``torch.allclose``). Default: ``False``.
        name: Optional name what the compared tensors mean. Default: ``'array'``.

    Raises:
        ValueError: If the two tensors don't match in shape or have nonclose values.
    """
    if tensor1.shape != tensor2.shape:
        raise ValueError(
            f"{name} shapes don't match: {tuple(tensor1.shape)}"
            + f" vs. {tuple(tensor2.shape)}."
        )

    if allclose(tensor1, tensor2, rtol=rtol, atol=atol, equal_nan=equal_nan):
        print(f"{name} values match.")
    else:
        mismatch = 0
        for a1, a2 in zip(tensor1.flatten(), tensor2.flatten()):
            if not isclose(a1, a2, atol=atol, rtol=rtol, equal_nan=equal_nan):
                mismatch += 1
                print(f"{a1} ≠ {a2}")
        print(f"Min entries: {tensor1.min()}, {tensor2.min()}")
        print(f"Max entries: {tensor1.max()}, {tensor2.max()}")
        raise ValueError(f"{name} values don't match ({mismatch} / {tensor1.numel()}).")


def assert_same(result: Tensor, truth: Tensor):
    """Assert that two matrices have the same shape, device, and identical entries.

    Args:
        result: The computed matrix.
        truth: The expected matrix.
    """
    assert result.shape == truth.shape
    assert result.dtype == truth.dtype
    assert result.device == truth.device
    assert result.eq(truth).all()


def rand_int_matrix(rows: int, cols: int, dev: device, high: int = 10) -> Tensor:
    """Create a random matrix with integer-valued single-precision entries.

    Products and sums of such entries are exact in single precision as long as
    they stay small, which allows comparing results for equality.

    Args:
        rows: Number of rows.
        cols: Number of columns.
        dev: Device of the matrix.
        high: Entries are drawn from ``{-high, ..., high - 1}``. Default: ``10``.

    Returns:
        A ``rows x cols`` matrix.
    """
    return (2 * high * rand(rows, cols, device=dev)).floor() - high


def naive_kron(mat1: Tensor, mat2: Tensor) -> Tensor:
    """Compute the Kronecker product by placing scaled blocks one by one.

    Args:
        mat1: Matrix whose entries scale the blocks.
        mat2: Matrix that forms the blocks.

    Returns:
        The Kronecker product.
    """
    (m, n), (p, q) = mat1.shape, mat2.shape
    result = zeros(m * p, n * q, dtype=mat1.dtype, device=mat1.device)
    for i in range(m):
        for j in range(n):
            result[i * p : (i + 1) * p, j * q : (j + 1) * q] = mat1[i, j] * mat2
    return result
