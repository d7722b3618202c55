"""Two-dimensional convolution with a 5x5 kernel and edge-extended borders."""

from __future__ import annotations

import numpy as np

_KERNEL_SHAPE = (5, 5)
_RADIUS = 2


def convolve_5x5(data, kernel) -> np.ndarray:
    """Convolve ``data`` with a 5x5 ``kernel``, extending the borders of ``data``.

    Each output cell is the sum of ``kernel[ky, kx] * data[y + ky - 2, x + kx - 2]``.
    Indices that fall outside of ``data`` are clamped to the nearest edge, so the
    border values are repeated instead of being treated as zero. The kernel is
    applied as given, without flipping.

    The result has the shape of ``data`` and a floating point dtype wide enough
    for both inputs.
    """
    arr = np.asarray(data)
    kern = np.asarray(kernel)

    if arr.ndim != 2:
        raise ValueError(f"expected two-dimensional data, got {arr.ndim} dimension(s)")
    if kern.shape != _KERNEL_SHAPE:
        raise ValueError(f"expected a 5x5 kernel, got shape {kern.shape}")

    dtype = np.result_type(arr.dtype, kern.dtype, np.float32)
    rows, cols = arr.shape
    out = np.zeros((rows, cols), dtype=dtype)

    if out.size == 0:
        return out

    padded = np.pad(arr.astype(dtype, copy=False), _RADIUS, mode="edge")

    for (ky, kx), weight in np.ndenumerate(kern):
        out += padded[ky : ky + rows, kx : kx + cols] * weight

    return out