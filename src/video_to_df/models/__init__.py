"""
Data Models
===========

Frame buffers and output record models for video_to_df.

Models:
    Frame:
        - Frame: Immutable single-channel pixel buffer

    Records:
        - TessellationRecord: Encoded frame payload
        - FlatCacheRecord / Cache2DRecord: Caching wrappers
        - SpiralGridRecord: Spiral layout of frame references
        - FrameRecordStyle / GridReferenceStyle: Output variants
"""

from video_to_df.models.frame import Frame
from video_to_df.models.records import (
    Cache2DRecord,
    FlatCacheRecord,
    FrameRecord,
    FrameRecordStyle,
    GridReferenceStyle,
    SpiralGridRecord,
    TessellationRecord,
    build_frame_record,
    frame_record_filename,
)

__all__ = [
    # Frame
    "Frame",
    # Records
    "TessellationRecord",
    "Cache2DRecord",
    "FlatCacheRecord",
    "FrameRecord",
    "SpiralGridRecord",
    "FrameRecordStyle",
    "GridReferenceStyle",
    "build_frame_record",
    "frame_record_filename",
]
