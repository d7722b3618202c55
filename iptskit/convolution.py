"""Two-dimensional convolution with edge-extended borders."""

from __future__ import annotations

import numpy as np

from iptskit.convolution5 import convolve_5x5


def _prepare(data, kernel) -> tuple[np.ndarray, np.ndarray, np.dtype]:
    arr = np.asarray(data)
    kern = np.asarray(kernel)

    if arr.ndim != 2:
        raise ValueError(f"expected two-dimensional data, got {arr.ndim} dimension(s)")
    if kern.ndim != 2:
        raise ValueError(f"expected a two-dimensional kernel, got {kern.ndim} dimension(s)")

    dtype = np.result_type(arr.dtype, kern.dtype, np.float32)
    return arr, kern, dtype


def convolve_generic(data, kernel) -> np.ndarray:
    """Convolve ``data`` with a kernel of any size, extending the borders of ``data``.

    Each output cell is the sum of ``kernel[ky, kx] * data[y + ky - dy, x + kx - dx]``
    where ``dy = (kernel_rows - 1) // 2`` and ``dx = (kernel_cols - 1) // 2``.
    Indices outside of ``data`` are clamped to the nearest edge. The kernel is
    applied as given, without flipping. An empty kernel yields all zeros.
    """
    arr, kern, dtype = _prepare(data, kernel)

    rows, cols = arr.shape
    out = np.zeros((rows, cols), dtype=dtype)

    kernel_rows, kernel_cols = kern.shape
    if out.size == 0 or kern.size == 0:
        return out

    dy = (kernel_rows - 1) // 2
    dx = (kernel_cols - 1) // 2

    padded = np.pad(
        arr.astype(dtype, copy=False),
        ((dy, kernel_rows - 1 - dy), (dx, kernel_cols - 1 - dx)),
        mode="edge",
    )

    for (ky, kx), weight in np.ndenumerate(kern):
        out += padded[ky : ky + rows, kx : kx + cols] * weight

    return out


def convolve(data, kernel) -> np.ndarray:
    """Convolve ``data`` with ``kernel``, extending the borders of ``data``.

    A 5x5 kernel is handled by the dedicated 5x5 routine; every other size
    goes through :func:`convolve_generic`. Both give the same result.
    """
    kern = np.asarray(kernel)
    if kern.shape == (5, 5):
        return convolve_5x5(data, kern)
    return convolve_generic(data, kern)