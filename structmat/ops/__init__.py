"""Structural operations on dense single-precision matrices."""

from structmat.ops.blockdiag import block_diag
from structmat.ops.concat import hstack, vstack
from structmat.ops.kron import kron
from structmat.ops.predicates import is_diagonal
from structmat.ops.shape import reshape
from structmat.ops.utils import as_matrix, empty

__all__ = [
    "as_matrix",
    "block_diag",
    "empty",
    "hstack",
    "is_diagonal",
    "kron",
    "reshape",
    "vstack",
]
