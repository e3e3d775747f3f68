"""
In-place Radix-2 FFT using Numba JIT

This module implements the iterative radix-2 Cooley-Tukey FFT on a complex
sequence stored as an interleaved real array ``[re0, im0, re1, im1, ...]``.

Stages:
1. Size validation before the buffer is touched
2. In-place bit-reversal permutation (pairwise swaps, no index table)
3. Danielson-Lanczos butterflies, log2(n) stages
4. Trigonometric recurrence for the twiddle factors (two sin() calls per stage)
5. Normalization of the result

Only scalar temporaries are allocated; the caller's buffer is overwritten.
"""

import logging
import math
import numbers
from collections.abc import MutableSequence

import numpy as np
from numba import jit

from .errors import InvalidLengthError, NotPowerOfTwoError

logger = logging.getLogger(__name__)

NORM_MODES = ("backward", "ortho", "forward")

_SUPPORTED_DTYPES = (np.dtype(np.float64), np.dtype(np.float32))


def is_power_of_two(n: int) -> bool:
    """Check if n is a power of 2; i.e. 1, 2, 4, 8, 16, ..."""
    if n < 1:
        return False
    return n & (n - 1) == 0


@jit(nopython=True, cache=True)
def swap(data, i, j):
    """Exchange data[i] and data[j] in place."""
    data[i], data[j] = data[j], data[i]


def check_length(length: int) -> int:
    """Validate len(data) and return the number of complex samples n."""
    if length < 4 or length % 2 != 0:
        raise InvalidLengthError(length)
    n = length // 2
    if n < 2 or not is_power_of_two(n):
        raise NotPowerOfTwoError(n)
    return n


@jit(nopython=True, cache=True)
def _bit_reverse_permute(data, n):
    """
    Reorder the n complex samples of data into bit-reversed order.

    Indices below are 1-based positions of the real parts, so ``i`` and ``j``
    walk 1, 3, 5, ...; ``j`` is advanced by adding one to its reversed bits.
    """
    nn = n << 1
    j = 1
    for i in range(1, nn, 2):
        if j > i:
            swap(data, j - 1, i - 1)
            swap(data, j, i)
        m = n
        while m >= 2 and j > m:
            j -= m
            m >>= 1
        j += m


@jit(nopython=True, cache=True)
def _twiddle_seed(mmax, isign):
    """Return (wpr, wpi), the per-stage increments of the twiddle recurrence."""
    theta = isign * (2.0 * math.pi / mmax)
    wtemp = math.sin(0.5 * theta)
    wpr = -2.0 * wtemp * wtemp
    wpi = math.sin(theta)
    return wpr, wpi


@jit(nopython=True, cache=True)
def _twiddle_advance(wr, wi, wpr, wpi):
    """Rotate (wr, wi) by one step: w <- w * (1 + wpr + i*wpi)."""
    return wr * wpr - wi * wpi + wr, wi * wpr + wr * wpi + wi


@jit(nopython=True, cache=True)
def _danielson_lanczos(data, n, isign):
    """
    Run the log2(n) butterfly stages on bit-reversed data.

    ``mmax`` is the span (in reals) of the sub-transforms being merged; each
    stage doubles it until it covers the whole buffer.
    """
    nn = n << 1
    mmax = 2
    while nn > mmax:
        istep = mmax << 1
        wpr, wpi = _twiddle_seed(mmax, isign)
        wr = 1.0
        wi = 0.0
        for m in range(1, mmax, 2):
            for i in range(m, nn + 1, istep):
                j = i + mmax
                tempr = wr * data[j - 1] - wi * data[j]
                tempi = wr * data[j] + wi * data[j - 1]
                data[j - 1] = data[i - 1] - tempr
                data[j] = data[i] - tempi
                data[i - 1] += tempr
                data[i] += tempi
            wr, wi = _twiddle_advance(wr, wi, wpr, wpi)
        mmax = istep


@jit(nopython=True, cache=True)
def _scale(data, factor):
    for i in range(len(data)):
        data[i] *= factor


def normalization_factor(n: int, inverse: bool = False, norm: str = "backward") -> float:
    """
    Scale applied to every real of the result.

    backward: forward 1, inverse 1/n
    ortho:    1/sqrt(n) both ways
    forward:  forward 1/n, inverse 1
    """
    if norm not in NORM_MODES:
        raise ValueError(f"Unknown norm {norm!r}; expected one of {NORM_MODES}")
    if norm == "ortho":
        return 1.0 / math.sqrt(n)
    if (norm == "backward") == inverse:
        return 1.0 / n
    return 1.0


def _as_buffer(data):
    """Return an ndarray that the kernels can work on, rejecting bad input."""
    if isinstance(data, np.ndarray):
        if data.ndim != 1:
            raise ValueError(f"Input must be 1D, got shape {data.shape}")
        if data.dtype not in _SUPPORTED_DTYPES:
            raise TypeError(
                f"Input dtype must be float64 or float32, got {data.dtype}"
            )
        if not data.flags.writeable:
            raise ValueError("Input array is read-only")
        return data

    if not isinstance(data, MutableSequence):
        raise TypeError(
            f"Input must be a mutable sequence of reals, got {type(data).__name__}"
        )
    for value in data:
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            raise TypeError(f"Input elements must be real numbers, got {value!r}")
    return np.array(data, dtype=np.float64)


def fourier_transform(data, inverse: bool = False, norm: str = "backward") -> None:
    """
    Replace data by its discrete Fourier transform, in place.

    Computes, for the n = len(data)/2 complex samples x[l]::

                 N-1         -i 2 pi k l / N
        X[k] =    Σ  x[l] * e                     (inverse=False)
                 l=0

    The forward transform uses exponent sign -1, the same convention as
    numpy.fft.fft and scipy.fft.fft (Numerical Recipes' four1 uses the
    opposite sign for its direct transform). ``inverse=True`` uses sign +1.

    Parameters
    ----------
    data : np.ndarray or list
        Complex samples stored as reals ``[re0, im0, re1, im1, ...]``. A 1-D
        float64/float32 ndarray is transformed without copying; any other
        mutable sequence is transformed through a float64 work buffer and
        then written back element by element.
    inverse : bool
        Compute the inverse transform.
    norm : str
        "backward" (default): forward unscaled, inverse divided by n, so
        that an inverse after a forward transform returns the input.
        "ortho": both directions scaled by 1/sqrt(n).
        "forward": forward divided by n, inverse unscaled.

    Raises
    ------
    InvalidLengthError
        len(data) is odd or smaller than 4.
    NotPowerOfTwoError
        n is not a power of two.

    Length checks come first, then the buffer type and contents, then
    norm. All checks run before the buffer is modified. NaN and Inf in
    the input propagate through the result.

    Examples
    --------
    >>> import numpy as np
    >>> x = np.array([1.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0])
    >>> fourier_transform(x)
    >>> np.allclose(x, [1.0, 0.0] * 4)  # impulse -> flat spectrum
    True
    """
    n = check_length(len(data))
    buf = _as_buffer(data)
    factor = normalization_factor(n, inverse, norm)

    logger.debug(f"fourier_transform n={n} inverse={inverse} norm={norm}")

    _bit_reverse_permute(buf, n)
    _danielson_lanczos(buf, n, 1.0 if inverse else -1.0)
    if factor != 1.0:
        _scale(buf, factor)

    if buf is not data:
        for k, value in enumerate(buf.tolist()):
            data[k] = value
