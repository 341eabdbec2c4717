"""
Fast Transform Engine

Recursive radix-2 Cooley-Tukey FFT for power-of-two lengths.

    fft_complex(x), N > 2:
        even = fft_complex(x[0::2])
        odd  = fft_complex(x[1::2])
        t[k] = e^(+2*pi*i*k/N),  k in [0, N)
        X[:N/2] = even + odd * t[:N/2]
        X[N/2:] = even + odd * t[N/2:]

Because t[k + N/2] == -t[k], the second half is the usual
even - t[k]*odd butterfly. Lengths 1 and 2 go straight to the naive DFT.

The inverse uses IFFT(X) = conj(FFT(conj(X))) / N, so there is only one
recursion.
"""

import logging

import numpy as np

from .dft import dft_complex
from .errors import DimensionMismatchError, InvalidTransformSizeError
from .vector import as_complex, conjugate, vec_add, vec_mul

logger = logging.getLogger(__name__)


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def twiddle_factors(n: int) -> np.ndarray:
    """t[k] = e^(+2*pi*i*k/N) for k in [0, N)."""
    return np.exp(2j * np.pi * np.arange(n) / n)


def fft_complex(x) -> np.ndarray:
    """
    Recursive FFT of a complex sequence.

    Raises InvalidTransformSizeError at the first level whose length is odd
    and greater than 2, so any non-power-of-two length fails before a result
    is produced.
    """
    x = as_complex(x)
    if x.ndim != 1:
        raise DimensionMismatchError(1, x.ndim, "fft input ndim")
    n = len(x)

    if n <= 2:
        return dft_complex(x)
    if n % 2:
        raise InvalidTransformSizeError(n)

    # Slicing with a step gives views; copy so each branch owns its half
    even = fft_complex(x[0::2].copy())
    odd = fft_complex(x[1::2].copy())

    half = n // 2
    t = twiddle_factors(n)
    first = vec_add(even, vec_mul(odd, t[:half]))
    second = vec_add(even, vec_mul(odd, t[half:]))
    return np.concatenate([first, second])


def _check_size(n: int):
    if not is_power_of_two(n):
        reason = "length must be at least 1" if n == 0 else "not a power of two"
        raise InvalidTransformSizeError(n, reason)


def fft(x) -> np.ndarray:
    """
    Fast Fourier Transform of a real sequence.

    Args:
        x: real sequence whose length is a power of two

    Returns:
        complex128 array, numerically equal to dft(x)
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim != 1:
        raise DimensionMismatchError(1, x.ndim, "fft input ndim")
    _check_size(len(x))
    logger.debug("fft: n=%d depth=%d", len(x), len(x).bit_length() - 1)
    return fft_complex(x)


def ifft(X) -> np.ndarray:
    """
    Inverse FFT, returning the real component only.

    Computed as conj(fft_complex(conj(X))) / N.
    """
    X = as_complex(X)
    if X.ndim != 1:
        raise DimensionMismatchError(1, X.ndim, "ifft input ndim")
    n = len(X)
    _check_size(n)
    logger.debug("ifft: n=%d", n)

    y = conjugate(fft_complex(conjugate(X))) / n
    return y.real.copy()
