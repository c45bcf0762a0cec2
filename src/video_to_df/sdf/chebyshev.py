"""
Chebyshev Distance Transform
============================

Two-pass chamfer transform under the king-move metric.

Algorithm:
    1. Seed pixels start at 0, all others at the sentinel width + height
    2. Forward raster pass: relax each pixel against its left, up-left,
       up and up-right neighbours (cost + 1)
    3. Reverse the whole buffer, run the SAME forward pass, reverse back.
       Reversing a row-major buffer flips both axes, so the second pass
       sweeps bottom-right to top-left without a mirrored routine.

The sequential left-neighbour dependency inside a row is resolved with a
running minimum: d'[x] = min(v[x], d'[x-1] + 1) == x + cummin(v[k] - k).
Rows still run top to bottom, each against the already finished row above.
"""

import numpy as np


def _forward_pass(field: np.ndarray) -> None:
    """Relax `field` in place in reading order."""
    height, width = field.shape
    offsets = np.arange(width, dtype=field.dtype)

    for y in range(height):
        row = field[y]
        if y > 0:
            above = field[y - 1] + 1
            # Up
            np.minimum(row, above, out=row)
            # Up-right
            np.minimum(row[:-1], above[1:], out=row[:-1])
            # Up-left
            np.minimum(row[1:], above[:-1], out=row[1:])
        # Left
        row[:] = np.minimum.accumulate(row - offsets) + offsets


def chebyshev_distance(seeds: np.ndarray) -> np.ndarray:
    """
    Distance from every pixel to the nearest seed pixel.

    Args:
        seeds: Boolean mask (H, W), True where the pixel is a seed

    Returns:
        np.ndarray (H, W), dtype=int64. Pixels with no reachable seed
        (an empty mask) keep the sentinel width + height.
    """
    height, width = seeds.shape
    field = np.full((height, width), width + height, dtype=np.int64)
    field[seeds] = 0

    _forward_pass(field)

    reversed_field = field[::-1, ::-1].copy()
    _forward_pass(reversed_field)

    return reversed_field[::-1, ::-1].copy()
