"""Kronecker product of matrices."""

from einops import rearrange
from torch import Tensor, einsum

from structmat.ops.utils import check_matrix


def kron(mat1: Tensor, mat2: Tensor) -> Tensor:
    r"""Compute the Kronecker product of two matrices.

    Inspired by `numpy.kron`. For \(\mathbf{A} \in \mathbb{R}^{M \times N}\) and
    \(\mathbf{B} \in \mathbb{R}^{P \times Q}\), the result
    \(\mathbf{A} \otimes \mathbf{B} \in \mathbb{R}^{MP \times NQ}\) consists of
    `M x N` blocks of shape `P x Q`, where block `(i, j)` is
    \(A_{ij} \mathbf{B}\).

    Args:
        mat1: The matrix \(\mathbf{A}\) whose entries scale the blocks.
        mat2: The matrix \(\mathbf{B}\) that forms the blocks.

    Returns:
        A newly allocated matrix of shape `[M * P, N * Q]`. If one of the inputs
        has a zero dimension, so does the result.

    Examples:
        >>> from structmat import as_matrix
        >>> kron(as_matrix([[1, 2], [3, 4]]), as_matrix([[0, 1], [1, 0]]))
        tensor([[0., 1., 0., 2.],
                [1., 0., 2., 0.],
                [0., 3., 0., 4.],
                [3., 0., 4., 0.]])
    """
    check_matrix(mat1, name="mat1")
    check_matrix(mat2, name="mat2")

    # every entry is a single product A[i, j] * B[k, l]
    outer = einsum("ij,kl->ikjl", mat1, mat2)
    return rearrange(outer, "i k j l -> (i k) (j l)").contiguous()
