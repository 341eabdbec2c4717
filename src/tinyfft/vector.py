"""
Vector Algebra Helpers

Elementwise and matrix-vector arithmetic over complex128 sequences,
shared by the naive and fast engines.
"""

import numpy as np

from .errors import DimensionMismatchError


def as_complex(x) -> np.ndarray:
    """Lift a real sequence to complex128 (imaginary part zero). Always copies."""
    return np.array(x, dtype=np.complex128)


def conjugate(x) -> np.ndarray:
    return np.conj(np.asarray(x, dtype=np.complex128))


def _as_vector(x, name: str) -> np.ndarray:
    v = np.asarray(x, dtype=np.complex128)
    if v.ndim != 1:
        raise DimensionMismatchError(1, v.ndim, f"{name} ndim")
    return v


def vec_add(a, b) -> np.ndarray:
    """Elementwise a + b."""
    a = _as_vector(a, "vec_add lhs")
    b = _as_vector(b, "vec_add rhs")
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b), "vec_add length")
    return a + b


def vec_mul(a, b) -> np.ndarray:
    """Elementwise a * b."""
    a = _as_vector(a, "vec_mul lhs")
    b = _as_vector(b, "vec_mul rhs")
    if len(a) != len(b):
        raise DimensionMismatchError(len(a), len(b), "vec_mul length")
    return a * b


def mat_vec(matrix, vector) -> np.ndarray:
    """
    Multiply an N x N matrix by a length-N vector.

        out[i] = sum_j matrix[i, j] * vector[j]
    """
    m = np.asarray(matrix, dtype=np.complex128)
    v = _as_vector(vector, "mat_vec vector")

    if m.ndim != 2 or m.shape[0] != m.shape[1]:
        raise DimensionMismatchError((len(v), len(v)), m.shape, "mat_vec matrix shape")
    if m.shape[1] != len(v):
        raise DimensionMismatchError(m.shape[1], len(v), "mat_vec vector length")

    return m @ v
