"""
Project Runner
==============

Drives the frame, grid and placement writers for each configured project.

Frame Range Convention:
    frame_start / frame_end in config are 1-based and INCLUSIVE.
    Internally every range is 0-based and half-open:
        start = frame_start - 1     (0 when unset)
        end   = frame_end           (frame count when unset)
    A range is rejected when min(start, end) > frame_count. An end past
    the last frame is clamped, so all three outputs cover the same indices.

Projects run sequentially; frames inside a project run in parallel.
"""

import logging
from pathlib import Path
from typing import Optional, Sequence, Tuple

from video_to_df.config import ProjectConfig, Settings
from video_to_df.errors import EmptyFrameCollectionError, FrameRangeError, PreviewFrameError
from video_to_df.models.frame import Frame
from video_to_df.output.grid import frame_namespace, write_grid_record
from video_to_df.output.writers import ensure_directory
from video_to_df.pipeline.batch import write_frame_records
from video_to_df.placement.spiral import write_placement_commands
from video_to_df.sdf.transform import transform_frame
from video_to_df.video import save_png


logger = logging.getLogger(__name__)


def resolve_index_range(project: ProjectConfig, frame_count: int) -> Tuple[int, int]:
    """
    Convert the project's 1-based inclusive bounds to a 0-based [start, end).

    Raises:
        FrameRangeError: If min(start, end) > frame_count
    """
    start = project.frame_start - 1 if project.frame_start is not None else 0
    end = project.frame_end if project.frame_end is not None else frame_count

    if min(start, end) > frame_count:
        raise FrameRangeError((start + 1, end), frame_count)

    return (start, max(start, min(end, frame_count)))


def bordered_dimensions(frames: Sequence[Frame], border_width: int) -> Tuple[int, int]:
    """
    Size of every bordered frame, taken from the first frame.

    Raises:
        EmptyFrameCollectionError: If there are no frames
    """
    if not frames:
        raise EmptyFrameCollectionError()
    return (frames[0].width + 2 * border_width, frames[0].height + 2 * border_width)


def _write_outputs(
    frames: Sequence[Frame],
    project: ProjectConfig,
    index_range: Tuple[int, int],
    output_root: Path,
    workers: Optional[int],
) -> None:
    frame_dim = bordered_dimensions(frames, project.border_width)

    if project.make_frames:
        write_frame_records(
            frames,
            index_range,
            project.border_width,
            project.border_color,
            output_root / project.frame_dfs_dir,
            mode=project.transform_mode,
            style=project.frame_record_style,
            invert=bool(project.invert_colors),
            max_workers=workers,
        )

    if project.make_grid:
        write_grid_record(
            index_range,
            frame_dim,
            frame_namespace(project.namespace, project.frame_dfs_dir),
            output_root / project.grid_df_dir,
            style=project.grid_reference_style,
        )

    if project.make_tp:
        write_placement_commands(
            index_range,
            frame_dim,
            project.tp_height,
            output_root / project.tp_dir,
        )


def write_project(
    frames: Sequence[Frame],
    project: ProjectConfig,
    output_root: Path,
    workers: Optional[int] = None,
) -> Tuple[int, int]:
    """
    Write every enabled output of one project.

    Returns:
        The resolved 0-based [start, end) range
    """
    if not frames:
        raise EmptyFrameCollectionError()

    index_range = resolve_index_range(project, len(frames))
    logger.info(
        f"Project '{project.namespace}': frames {index_range[0] + 1}..{index_range[1]} "
        f"of {len(frames)}"
    )
    _write_outputs(frames, project, index_range, Path(output_root), workers)
    return index_range


def write_projects(frames: Sequence[Frame], settings: Settings) -> None:
    """Run every configured project in order."""
    ensure_directory(settings.output_root_dir)
    for project in settings.projects:
        write_project(frames, project, settings.output_root_dir, settings.workers)


def preview_project(
    frames: Sequence[Frame],
    project: ProjectConfig,
    output_root: Path,
    workers: Optional[int] = None,
) -> int:
    """
    Single-frame preview of a project.

    Writes `test_frame_<n>.png` (source) and `gradated_test_frame_<n>.png`
    (bordered and transformed) into the output root, then every enabled
    output for that one frame.

    Returns:
        The 0-based index of the test frame

    Raises:
        PreviewFrameError: If the configured test frame does not exist
    """
    output_root = Path(output_root)
    index = project.test_frame - 1 if project.test_frame is not None else 0
    if index >= len(frames):
        raise PreviewFrameError(index + 1, len(frames))

    ensure_directory(output_root)
    target = frames[index]
    save_png(target, output_root / f"test_frame_{index + 1}.png")

    source = target.inverted() if project.invert_colors else target
    graded = transform_frame(
        source.add_border(project.border_width, project.border_color),
        project.transform_mode,
    )
    save_png(graded, output_root / f"gradated_test_frame_{index + 1}.png")

    _write_outputs(frames, project, (index, index + 1), output_root, workers)
    return index


def preview_projects(frames: Sequence[Frame], settings: Settings) -> None:
    """Run the single-frame preview for every configured project."""
    ensure_directory(settings.output_root_dir)
    for project in settings.projects:
        preview_project(frames, project, settings.output_root_dir, settings.workers)

