"""
radixfft - In-place Radix-2 Fast Fourier Transform

Hand-written iterative FFT working directly on an interleaved
``[re0, im0, re1, im1, ...]`` real buffer, with no allocation beyond
scalar temporaries.

Modules:
    - fourier: validation, bit reversal, butterflies, normalization
    - errors: exceptions raised for invalid buffer lengths
    - benchmark: accuracy and timing against scipy.fft
"""

from .errors import (
    FourierError,
    FourierLengthError,
    InvalidLengthError,
    NotPowerOfTwoError,
)
from .fourier import (
    NORM_MODES,
    check_length,
    fourier_transform,
    is_power_of_two,
    normalization_factor,
    swap,
)

__all__ = [
    # Transform
    'fourier_transform',
    'normalization_factor',
    'NORM_MODES',
    # Helpers
    'check_length',
    'is_power_of_two',
    'swap',
    # Errors
    'FourierError',
    'FourierLengthError',
    'InvalidLengthError',
    'NotPowerOfTwoError',
]

__version__ = '1.0.0'
