"""
tinyfft - Discrete Fourier Transforms, Naive and Fast

Two engines for the same transform pair:
- Naive DFT/IDFT: O(N^2) matrix evaluation, any length N >= 1
- Radix-2 FFT/IFFT: O(N log N) Cooley-Tukey recursion, N a power of two

Quick Start:
    from tinyfft import dft, idft, fft, ifft

    x = [0.2, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8]

    X = fft(x)        # complex128 array, same as dft(x)
    y = ifft(X)       # float64 array, y ~= x

Repeated naive transforms at one length:
    from tinyfft import DFTMatrix

    fwd = DFTMatrix(len(x))
    X = dft(x, matrix=fwd)

Errors:
    DimensionMismatchError     operand lengths disagree
    InvalidTransformSizeError  empty input, or fft/ifft on a non-power-of-two
    MatrixDirectionError       DFTMatrix of the wrong direction passed in
    All subclass TransformError, which subclasses ValueError.
"""

__version__ = "0.1.0"

# =============================================================================
# PUBLIC ENTRY POINTS
# =============================================================================

from .dft import dft, idft
from .fft import fft, ifft

# =============================================================================
# ENGINES: complex-input transforms and their building blocks
# =============================================================================

from .dft import (
    dft_complex,
    dft_matrix,
    DFTMatrix,
)
from .fft import (
    fft_complex,
    twiddle_factors,
    is_power_of_two,
)

# =============================================================================
# VECTOR ALGEBRA
# =============================================================================

from .vector import (
    vec_add,
    vec_mul,
    mat_vec,
    as_complex,
    conjugate,
)

# =============================================================================
# ERRORS
# =============================================================================

from .errors import (
    TransformError,
    DimensionMismatchError,
    InvalidTransformSizeError,
    MatrixDirectionError,
)

__all__ = [
    # Version
    "__version__",

    # Entry points
    "dft",
    "idft",
    "fft",
    "ifft",

    # Engines
    "dft_complex",
    "dft_matrix",
    "DFTMatrix",
    "fft_complex",
    "twiddle_factors",
    "is_power_of_two",

    # Vector algebra
    "vec_add",
    "vec_mul",
    "mat_vec",
    "as_complex",
    "conjugate",

    # Errors
    "TransformError",
    "DimensionMismatchError",
    "InvalidTransformSizeError",
    "MatrixDirectionError",
]
