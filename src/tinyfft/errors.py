"""
Transform Errors

Every failure in tinyfft is a precondition violation raised where it is
detected. All concrete errors subclass ValueError, so callers that only
care about "bad input" can catch that, while callers that want to retry
with a corrected input can tell them apart.
"""

from typing import Tuple, Union


class TransformError(ValueError):
    """Base class for all tinyfft errors."""


class DimensionMismatchError(TransformError):
    """Vector or matrix operands have inconsistent lengths."""

    def __init__(self, expected: Union[int, Tuple[int, ...]],
                 actual: Union[int, Tuple[int, ...]], what: str = "operand"):
        self.expected = expected
        self.actual = actual
        super().__init__(f"{what}: expected {expected}, got {actual}")


class InvalidTransformSizeError(TransformError):
    """Sequence length is not valid for the requested transform."""

    def __init__(self, size: int, reason: str = "not a power of two"):
        self.size = size
        super().__init__(f"invalid transform size {size}: {reason}")


class MatrixDirectionError(TransformError):
    """A precomputed matrix was built for the other transform direction."""

    def __init__(self, expected_inverse: bool):
        self.expected_inverse = expected_inverse
        direction = "inverse" if expected_inverse else "forward"
        super().__init__(f"expected a {direction} DFTMatrix")
