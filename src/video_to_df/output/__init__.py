"""
Output Module
=============

Payload encoding and record writing.

This module provides:
    - compress / encode / encode_payload / decode_payload
    - ensure_directory / write_text / render_json / write_record
    - frame_namespace / grid_references / write_grid_record
"""

from video_to_df.output.encoder import compress, decode_payload, encode, encode_payload
from video_to_df.output.writers import ensure_directory, render_json, write_record, write_text
from video_to_df.output.grid import (
    GRID_FILENAME,
    frame_namespace,
    grid_references,
    write_grid_record,
)

__all__ = [
    # Encoding
    "compress",
    "encode",
    "encode_payload",
    "decode_payload",
    # Writing
    "ensure_directory",
    "write_text",
    "render_json",
    "write_record",
    # Grid
    "GRID_FILENAME",
    "frame_namespace",
    "grid_references",
    "write_grid_record",
]
