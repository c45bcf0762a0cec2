"""
Placement Module
================

Spiral layout of frame indices and the placement commands derived from it.
"""

from video_to_df.placement.spiral import (
    index_to_spiral_coords,
    placement_command,
    placement_coords,
    write_placement_commands,
)

__all__ = [
    "index_to_spiral_coords",
    "placement_coords",
    "placement_command",
    "write_placement_commands",
]
