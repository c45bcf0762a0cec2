"""
Distance Field Module
=====================

Chebyshev distance transforms over thresholded frames.

This module provides:
    - chebyshev_distance: two-pass king-move distance to a seed mask
    - signed_distance_frame: dual-sided byte encoding (default)
    - magnitude_distance_frame: single-sided inverted gradient
"""

from video_to_df.sdf.chebyshev import chebyshev_distance
from video_to_df.sdf.transform import (
    BOUNDARY_BYTE,
    THRESHOLD,
    TransformMode,
    checked_normalize,
    magnitude_distance_frame,
    signed_distance_frame,
    transform_frame,
)

__all__ = [
    "chebyshev_distance",
    "checked_normalize",
    "magnitude_distance_frame",
    "signed_distance_frame",
    "transform_frame",
    "TransformMode",
    "THRESHOLD",
    "BOUNDARY_BYTE",
]
