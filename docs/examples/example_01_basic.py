"""# Basic usage.

This example walks through the matrix construction primitives of `structmat`.
They mirror familiar routines from NumPy, SciPy and MATLAB, but operate on
single-precision PyTorch matrices.

First, the imports.
"""

from torch import allclose, manual_seed, rand

from structmat import (
    ShapeMismatchError,
    as_matrix,
    block_diag,
    empty,
    hstack,
    is_diagonal,
    kron,
    reshape,
    vstack,
)

manual_seed(0)  # make deterministic

# %%
#
# ## Creating Matrices
#
# All operations expect 2d tensors of type `float32`. `as_matrix` converts nested
# lists (or tensors of another floating point type) explicitly:

A = as_matrix([[1, 2], [3, 4]])
B = as_matrix([[5, 6]])
print(A.dtype, A.shape)

# %%
#
# ## Stacking
#
# `vstack` and `hstack` concatenate two matrices along rows and columns:

print(vstack(A, B))
print(hstack(A, B.T))

# %%
#
# An operand without rows (for `vstack`) or without columns (for `hstack`) is
# absorbed, which is convenient when accumulating matrices in a loop:

accumulated = empty(0, 2)
for _ in range(3):
    accumulated = vstack(accumulated, B)
print(accumulated)

# %%
#
# Incompatible shapes raise a `ShapeMismatchError` which carries both shapes:

try:
    vstack(A, as_matrix([[1, 2, 3]]))
except ShapeMismatchError as error:
    print(error, error.shape1, error.shape2)

# %%
#
# ## Block-Diagonal Matrices and Kronecker Products

print(block_diag(A, as_matrix([[5]])))
print(block_diag(as_matrix([[1]]), as_matrix([[2, 3], [4, 5]]), as_matrix([[6]])))
print(kron(A, as_matrix([[0, 1], [1, 0]])))

# %%
#
# ## Reshaping
#
# `reshape` reads entries in column-major order by default. Pass `order="C"` to
# read them row by row, like `torch.reshape`:

C = as_matrix([[1, 2, 3], [4, 5, 6]])
print(reshape(C, 3, 2))
print(reshape(C, 3, 2, order="C"))

# Reshaping back and forth recovers the original matrix
M = rand(4, 6)
assert allclose(reshape(reshape(M, 8, 3), 4, 6), M)

# %%
#
# ## Testing for Diagonality
#
# `is_diagonal` tests whether the summed off-diagonal entries vanish. Note that
# entries of opposite sign cancel, unless `strict=True` is passed:

print(is_diagonal(as_matrix([[2, 0, 0], [0, 3, 0], [0, 0, 4]])))
print(is_diagonal(as_matrix([[2, 0, 0], [0, 3, 1], [0, 0, 4]])))
print(is_diagonal(as_matrix([[1, 0], [0, 1], [0, 0]])))

cancelling = as_matrix([[1, 1, -1], [0, 1, 0], [0, 0, 1]])
print(is_diagonal(cancelling), is_diagonal(cancelling, strict=True))
