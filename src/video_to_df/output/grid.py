"""
Grid Record Output
==================

Builds the spiral grid record that references every frame record.
"""

import logging
from pathlib import Path
from typing import List, Tuple

from video_to_df.models.records import GridReferenceStyle, SpiralGridRecord
from video_to_df.output.writers import ensure_directory, write_record


logger = logging.getLogger(__name__)


GRID_FILENAME = "all_frames.json"


def frame_namespace(namespace: str, frame_dir: Path) -> str:
    """
    Reference prefix for frame records, e.g. "ns:frames/".

    The frame directory is taken relative to the output root and any
    leading "./" is dropped.
    """
    relative = Path(frame_dir).as_posix()
    if relative == ".":
        relative = ""
    return f"{namespace}:{relative}/"


def grid_references(
    index_range: Tuple[int, int],
    prefix: str,
    style: GridReferenceStyle = GridReferenceStyle.NAMESPACED,
) -> List[str]:
    """
    Per-index references for [start, end).

    Namespaced references use the 1-based record number, term references
    use the 0-based index.
    """
    start, end = index_range
    if style == GridReferenceStyle.TERM:
        return [f"term{index}" for index in range(start, end)]
    return [f"{prefix}{index + 1}" for index in range(start, end)]


def write_grid_record(
    index_range: Tuple[int, int],
    frame_dim: Tuple[int, int],
    prefix: str,
    output_dir: Path,
    style: GridReferenceStyle = GridReferenceStyle.NAMESPACED,
) -> Path:
    """
    Write `all_frames.json` for the given index range.

    Returns:
        Path of the written file
    """
    output_dir = Path(output_dir)
    ensure_directory(output_dir)

    record = SpiralGridRecord(
        x_size=frame_dim[0],
        z_size=frame_dim[1],
        grid_cell_args=grid_references(index_range, prefix, style),
    )
    path = output_dir / GRID_FILENAME
    write_record(path, record)

    logger.info(f"Wrote grid record with {len(record.grid_cell_args)} cells to {path}")
    return path
