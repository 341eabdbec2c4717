"""
Naive Transform Engine

Direct O(N^2) evaluation of the DFT and its inverse:

    X[k] = sum_n x[n] * e^(+2*pi*i*k*n/N)
    x[n] = (1/N) * sum_k X[k] * e^(-2*pi*i*k*n/N)

The transform matrix is rebuilt on every call. Callers that transform many
sequences of the same length can build a DFTMatrix once and pass it in.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

import numpy as np

from .errors import DimensionMismatchError, InvalidTransformSizeError, MatrixDirectionError
from .vector import as_complex, mat_vec

logger = logging.getLogger(__name__)


def dft_matrix(n: int, inverse: bool = False) -> np.ndarray:
    """
    Build the N x N transform matrix, entry (i, j) = e^(w*i*j).

    w = +2*pi*i/N for the forward transform, -2*pi*i/N for the inverse.
    This is the conjugate of the numpy/scipy convention.
    The exponent i*j is reduced mod N first; e^(w*N) == 1, so the values
    are unchanged but large N keeps full precision.
    """
    if n < 1:
        raise InvalidTransformSizeError(n, "length must be at least 1")

    sign = -1.0 if inverse else 1.0
    w = sign * 2j * np.pi / n
    k = np.arange(n)
    return np.exp(w * (np.outer(k, k) % n))


@dataclass
class DFTMatrix:
    """
    Caller-owned precomputed transform matrix.

    Example:
        fwd = DFTMatrix(256)
        inv = DFTMatrix(256, inverse=True)
        for x in signals:
            X = dft(x, matrix=fwd)
            y = idft(X, matrix=inv)
    """
    n: int
    inverse: bool = False
    values: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        self.values = dft_matrix(self.n, self.inverse)

    def apply(self, x) -> np.ndarray:
        """Raw matrix-vector product, no 1/N scaling."""
        return mat_vec(self.values, x)


MatrixLike = Union[DFTMatrix, np.ndarray]


def _resolve_matrix(matrix: Optional[MatrixLike], n: int, inverse: bool) -> np.ndarray:
    if matrix is None:
        return dft_matrix(n, inverse)

    if isinstance(matrix, DFTMatrix):
        if matrix.inverse != inverse:
            raise MatrixDirectionError(inverse)
        if matrix.n != n:
            raise DimensionMismatchError(n, matrix.n, "DFTMatrix size")
        return matrix.values

    # Raw arrays are checked by mat_vec
    return matrix


def _check_length(n: int):
    if n == 0:
        raise InvalidTransformSizeError(0, "length must be at least 1")


def dft_complex(x, matrix: Optional[MatrixLike] = None) -> np.ndarray:
    """Forward DFT of a complex sequence."""
    x = as_complex(x)
    if x.ndim != 1:
        raise DimensionMismatchError(1, x.ndim, "dft input ndim")
    _check_length(len(x))

    m = _resolve_matrix(matrix, len(x), inverse=False)
    return mat_vec(m, x)


def dft(x, matrix: Optional[MatrixLike] = None) -> np.ndarray:
    """
    Discrete Fourier Transform of a real sequence.

    Args:
        x: real sequence, any length N >= 1
        matrix: optional precomputed forward matrix of size N

    Returns:
        complex128 array of N coefficients. X[0] is the sum of x.
    """
    x = np.asarray(x, dtype=np.float64)
    logger.debug("dft: n=%d", x.size)
    return dft_complex(x, matrix)


def idft(X, matrix: Optional[MatrixLike] = None) -> np.ndarray:
    """
    Inverse Discrete Fourier Transform.

    Applies the inverse matrix, scales by 1/N and returns only the real
    component. Any imaginary residue from rounding is discarded.
    """
    X = as_complex(X)
    if X.ndim != 1:
        raise DimensionMismatchError(1, X.ndim, "idft input ndim")
    n = len(X)
    _check_length(n)
    logger.debug("idft: n=%d", n)

    m = _resolve_matrix(matrix, n, inverse=True)
    r = mat_vec(m, X) / n
    return r.real.copy()
