"""Local maximum search on two-dimensional data such as capacitive heatmaps."""

from __future__ import annotations

import numpy as np

# Neighbour offsets (dy, dx) and whether the neighbour must be strictly lower.
# Half of the neighbours use "less than", the other half "less or equal", so
# that a plateau of equal values is reported exactly once and never dropped.
_NEIGHBOURS: tuple[tuple[int, int, bool], ...] = (
    (0, -1, True),
    (0, 1, False),
    (-1, 0, True),
    (-1, -1, True),
    (-1, 1, False),
    (1, 0, False),
    (1, -1, True),
    (1, 1, False),
)


def _span(offset: int, length: int) -> tuple[slice, slice]:
    """Slices selecting the cells that have a neighbour at ``offset`` and those neighbours."""
    lo = max(0, -offset)
    hi = length - max(0, offset)
    return slice(lo, hi), slice(lo + offset, hi + offset)


def find_maxima(data, threshold) -> list[tuple[int, int]]:
    """Return the ``(x, y)`` positions of all local maxima above ``threshold``.

    Points are returned in row-major order (by row, then by column).
    """
    arr = np.asarray(data)
    if arr.ndim != 2:
        raise ValueError(f"expected two-dimensional data, got {arr.ndim} dimension(s)")

    rows, cols = arr.shape
    mask = ~(arr <= threshold)

    for dy, dx, strict in _NEIGHBOURS:
        ys, nys = _span(dy, rows)
        xs, nxs = _span(dx, cols)

        center = arr[ys, xs]
        neighbour = arr[nys, nxs]
        mask[ys, xs] &= (neighbour < center) if strict else (neighbour <= center)

    ys_found, xs_found = np.nonzero(mask)
    return [(int(x), int(y)) for y, x in zip(ys_found, xs_found)]