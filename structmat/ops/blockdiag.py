"""Assembly of block-diagonal matrices."""

from torch import Tensor

from structmat.ops.utils import check_matrix, empty


def block_diag(*mats: Tensor) -> Tensor:
    r"""Create a block-diagonal matrix from the supplied matrices.

    Inspired by `scipy.linalg.block_diag`. For matrices
    \(\mathbf{M}_1, \dots, \mathbf{M}_k\) the result is

    \(
    \begin{pmatrix}
    \mathbf{M}_1 & \mathbf{0} & \cdots & \mathbf{0} \\
    \mathbf{0} & \mathbf{M}_2 & \ddots & \vdots \\
    \vdots & \ddots & \ddots & \mathbf{0} \\
    \mathbf{0} & \cdots & \mathbf{0} & \mathbf{M}_k
    \end{pmatrix}
    \)

    Blocks need not be square. A block without rows (columns) still shifts the
    following blocks by its number of columns (rows).

    Args:
        *mats: The diagonal blocks, from top left to bottom right.

    Returns:
        A newly allocated matrix whose number of rows (columns) is the sum of the
        blocks' rows (columns). All entries outside the blocks are zero. Without
        blocks, a `0x0` matrix is returned.

    Examples:
        >>> from structmat import as_matrix
        >>> block_diag(as_matrix([[1, 2], [3, 4]]), as_matrix([[5]]))
        tensor([[1., 2., 0.],
                [3., 4., 0.],
                [0., 0., 5.]])
    """
    for idx, mat in enumerate(mats):
        check_matrix(mat, name=f"mats[{idx}]")

    if not mats:
        return empty(0, 0)

    total_rows = sum(mat.shape[0] for mat in mats)
    total_cols = sum(mat.shape[1] for mat in mats)
    result = mats[0].new_zeros(total_rows, total_cols)

    row, col = 0, 0
    for mat in mats:
        num_rows, num_cols = mat.shape
        result[row : row + num_rows, col : col + num_cols] = mat
        row, col = row + num_rows, col + num_cols

    return result
