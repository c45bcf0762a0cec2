"""
Pipeline Module
===============

Batch orchestration of the per-frame pipeline and the per-project runner.

This module provides:
    - write_frame_records: parallel border/transform/encode/write over a range
    - write_project / write_projects: full output for configured projects
    - preview_project / preview_projects: single-frame preview (`v2df test`)
    - resolve_index_range: 1-based inclusive config bounds -> [start, end)
"""

from video_to_df.pipeline.batch import BatchReport, process_single_frame, write_frame_records
from video_to_df.pipeline.project import (
    bordered_dimensions,
    preview_project,
    preview_projects,
    resolve_index_range,
    write_project,
    write_projects,
)

__all__ = [
    # Batch
    "BatchReport",
    "process_single_frame",
    "write_frame_records",
    # Projects
    "bordered_dimensions",
    "resolve_index_range",
    "write_project",
    "write_projects",
    "preview_project",
    "preview_projects",
]
