"""
Exceptions raised by the Fourier transform engine.

Length problems derive from ``ValueError`` so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class FourierError(Exception):
    """Base class for all errors raised by radixfft."""


class FourierLengthError(FourierError, ValueError):
    """The interleaved buffer has a length the radix-2 engine cannot handle."""


class InvalidLengthError(FourierLengthError):
    """len(data) is odd or smaller than 4."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"len(data)=2*n must be >= 4 and even. {length} is invalid"
        )


class NotPowerOfTwoError(FourierLengthError):
    """n = len(data)/2 is smaller than 2 or not a power of two."""

    def __init__(self, n: int):
        self.n = n
        super().__init__(f"n=len(data)/2 must be a power of 2. n={n} is invalid")
