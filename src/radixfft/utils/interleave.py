"""
Conversions between complex arrays and the interleaved real layout
``[re0, im0, re1, im1, ...]`` used by the transform engine.
"""

import numpy as np


def interleave(z: np.ndarray) -> np.ndarray:
    """Pack complex samples into a new float64 array of twice the length."""
    z = np.asarray(z, dtype=np.complex128)
    if z.ndim != 1:
        raise ValueError(f"Input must be 1D, got shape {z.shape}")
    data = np.empty(2 * len(z), dtype=np.float64)
    data[0::2] = z.real
    data[1::2] = z.imag
    return data


def deinterleave(data: np.ndarray) -> np.ndarray:
    """Inverse of interleave: view pairs of reals as complex samples."""
    data = np.asarray(data, dtype=np.float64)
    if data.ndim != 1 or len(data) % 2 != 0:
        raise ValueError(f"Expected a 1D array of even length, got shape {data.shape}")
    return data[0::2] + 1j * data[1::2]
