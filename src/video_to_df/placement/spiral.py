"""
Spiral Placement
================

Deterministic layout of frame indices on an outward square spiral.

Ring k (k >= 1) covers indices [(2k-1)^2, (2k+1)^2) and is walked in four
legs of length 2k:
    0: up the right edge, starting at (k, -k + 1)
    1: left along the top edge
    2: down the left edge
    3: right along the bottom edge
"""

import logging
import math
from pathlib import Path
from typing import Tuple

from video_to_df.output.writers import ensure_directory, write_text


logger = logging.getLogger(__name__)


def index_to_spiral_coords(n: int) -> Tuple[int, int]:
    """
    Map a non-negative index to its spiral cell.

    Args:
        n: Index (0-based)

    Returns:
        (x, z) grid coordinates, (0, 0) for n == 0
    """
    if n < 0:
        raise ValueError(f"Spiral index must be non-negative, got {n}")
    if n == 0:
        return (0, 0)

    layer = (math.isqrt(n) - 1) // 2 + 1
    layer_start = (2 * layer - 1) ** 2
    pos = n - layer_start
    side = 2 * layer

    if pos < side:
        return (layer, -layer + 1 + pos)
    if pos < 2 * side:
        return (layer - 1 - (pos - side), layer)
    if pos < 3 * side:
        return (-layer, layer - 1 - (pos - 2 * side))
    return (-layer + 1 + (pos - 3 * side), -layer)


def placement_coords(n: int, frame_dim: Tuple[int, int]) -> Tuple[int, int]:
    """
    World position of the centre of frame `n`.

    Cells are spaced two frames apart and offset by half a frame.
    """
    x, z = index_to_spiral_coords(n)
    width, height = frame_dim
    return (x * 2 * width + width // 2, z * 2 * height + height // 2)


def placement_command(n: int, frame_dim: Tuple[int, int], height: int) -> str:
    """Teleport command that positions viewers above frame `n`."""
    x, z = placement_coords(n, frame_dim)
    return f"tp @a {x} {height} {z} 180 90"


def write_placement_commands(
    index_range: Tuple[int, int],
    frame_dim: Tuple[int, int],
    height: int,
    output_dir: Path,
) -> int:
    """
    Write one `<index+1>.mcfunction` file per index in [start, end).

    Returns:
        Number of files written
    """
    output_dir = Path(output_dir)
    ensure_directory(output_dir)

    start, end = index_range
    written = 0
    for index in range(start, end):
        write_text(
            output_dir / f"{index + 1}.mcfunction",
            placement_command(index, frame_dim, height),
        )
        written += 1

    logger.info(f"Wrote {written} placement commands to {output_dir}")
    return written
