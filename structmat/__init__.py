"""Matrix construction primitives in the style of NumPy and SciPy, for PyTorch."""

from structmat.exceptions import ShapeMismatchError, StructmatError
from structmat.ops import (
    as_matrix,
    block_diag,
    empty,
    hstack,
    is_diagonal,
    kron,
    reshape,
    vstack,
)

__all__ = [
    "ShapeMismatchError",
    "StructmatError",
    "as_matrix",
    "block_diag",
    "empty",
    "hstack",
    "is_diagonal",
    "kron",
    "reshape",
    "vstack",
]
