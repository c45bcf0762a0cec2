"""
Batch Frame Processing
======================

Parallel per-frame pipeline: border -> transform -> compress -> encode -> write.

Concurrency Model:
    - A fixed ThreadPoolExecutor runs one unit of work per frame index
    - Frames are shared read-only, each unit owns its intermediate buffers
    - Units report failure through their future, nothing shared is mutated
    - Every index is attempted; the batch then raises the FIRST failure
      observed (completion order) and discards the rest
    - No retries, no cancellation, no rollback of files already written

numpy releases the GIL for the vectorized row passes, and zlib does the
same while compressing, so threads overlap the heavy parts of each unit.
"""

import logging
import time
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from video_to_df.models.frame import Frame
from video_to_df.models.records import (
    FrameRecordStyle,
    build_frame_record,
    frame_record_filename,
)
from video_to_df.output.encoder import encode_payload
from video_to_df.output.writers import ensure_directory, write_record
from video_to_df.sdf.transform import TransformMode, transform_frame


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BatchReport:
    """
    Outcome of a successful batch.

    Attributes:
        requested: Number of indices dispatched
        written: Number of frame records written
        elapsed_seconds: Wall time for the whole batch
    """

    requested: int
    written: int
    elapsed_seconds: float

    def to_dict(self) -> dict:
        """Export as dictionary for logging/serialization."""
        return {
            "requested": self.requested,
            "written": self.written,
            "elapsed_seconds": round(self.elapsed_seconds, 3),
        }


def process_single_frame(
    frame: Frame,
    index: int,
    border_width: int,
    border_color: int,
    output_dir: Path,
    mode: TransformMode = TransformMode.SIGNED,
    style: FrameRecordStyle = FrameRecordStyle.CACHED,
    invert: bool = False,
) -> Path:
    """
    Run the full pipeline for one frame and write its record.

    Args:
        frame: Source frame
        index: 0-based frame index (record file uses index + 1)
        border_width: Border thickness in pixels
        border_color: Border fill value
        output_dir: Directory receiving the record
        mode: Distance field encoding
        style: Frame record shape
        invert: Invert pixel values before padding

    Returns:
        Path of the written record
    """
    if invert:
        frame = frame.inverted()

    graded = transform_frame(frame.add_border(border_width, border_color), mode)
    payload = encode_payload(graded.to_bytes())
    record = build_frame_record(payload, graded.width, graded.height, style)

    path = Path(output_dir) / frame_record_filename(index, style)
    write_record(path, record)
    return path


def write_frame_records(
    frames: Sequence[Frame],
    index_range: Tuple[int, int],
    border_width: int,
    border_color: int,
    output_dir: Path,
    mode: TransformMode = TransformMode.SIGNED,
    style: FrameRecordStyle = FrameRecordStyle.CACHED,
    invert: bool = False,
    max_workers: Optional[int] = None,
) -> BatchReport:
    """
    Write one frame record per index in [start, end), in parallel.

    Indices past the end of `frames` are skipped.

    Args:
        frames: Full ordered frame collection (read-only)
        index_range: 0-based half-open range
        border_width: Border thickness in pixels
        border_color: Border fill value
        output_dir: Directory receiving the records
        mode: Distance field encoding
        style: Frame record shape
        invert: Invert pixel values before padding
        max_workers: Thread pool size (None = executor default)

    Returns:
        BatchReport for the batch

    Raises:
        V2DFError: The first failure observed, after all units finished
    """
    output_dir = Path(output_dir)
    ensure_directory(output_dir)

    start, end = index_range
    indices = range(start, min(end, len(frames)))
    start_time = time.time()

    errors: List[Tuple[int, BaseException]] = []
    written: List[Path] = []
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        futures: Dict[Future, int] = {
            pool.submit(
                process_single_frame,
                frames[index],
                index,
                border_width,
                border_color,
                output_dir,
                mode,
                style,
                invert,
            ): index
            for index in indices
        }

        for future in as_completed(futures):
            error = future.exception()
            if error is not None:
                index = futures[future]
                logger.error(f"Frame {index + 1} failed: {error}")
                errors.append((index, error))
            else:
                written.append(future.result())

    elapsed = time.time() - start_time

    if errors:
        logger.error(
            f"{len(errors)} of {len(indices)} frames failed in {output_dir} "
            f"({len(written)} written), reporting frame {errors[0][0] + 1}"
        )
        raise errors[0][1]

    report = BatchReport(
        requested=len(indices),
        written=len(written),
        elapsed_seconds=elapsed,
    )
    logger.info(f"Wrote {report.written} frame records to {output_dir} in {elapsed:.2f}s")
    return report
