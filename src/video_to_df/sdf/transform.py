"""
Distance Field Transforms
=========================

Turn a thresholded frame into an 8-bit distance gradient.

The threshold splits the byte domain in two:
    below: 0..=127
    above: 128..=255

Modes:
    MAGNITUDE: distance to the above region, inverted and scaled to 0..255
    SIGNED: two one-sided fields packed into one byte
        0..127   -> below pixels, 127 at the boundary, 0 farthest out
        129..255 -> above pixels, rising with depth into the region
        128      -> tie-break marker, never emitted

Arithmetic is done in float32 and rounded half away from zero so the
produced bytes are stable across platforms and match existing outputs.
"""

import logging
from enum import Enum

import numpy as np

from video_to_df.errors import EmptyDistanceFieldError
from video_to_df.models.frame import Frame
from video_to_df.sdf.chebyshev import chebyshev_distance


logger = logging.getLogger(__name__)


THRESHOLD = 127

# Byte value of a below-region seed in the signed encoding. Where the
# below-derived byte equals this, the above-derived byte is used instead.
BOUNDARY_BYTE = 128

HALF_RANGE = 127
FULL_RANGE = 255


class TransformMode(str, Enum):
    """Distance field encoding."""

    SIGNED = "signed"
    MAGNITUDE = "magnitude"


def checked_normalize(distances: np.ndarray, maximum: int) -> np.ndarray:
    """
    Divide `distances` by `maximum`.

    Returns all zeros when `maximum` is 0 instead of dividing by zero.
    """
    if maximum == 0:
        return np.zeros(distances.shape, dtype=np.float32)
    return distances.astype(np.float32) / np.float32(maximum)


def _round_half_away(values: np.ndarray) -> np.ndarray:
    """Round non-negative values, with .5 going up."""
    floor = np.floor(values)
    return np.where(values - floor >= 0.5, floor + 1, floor)


def _quantize(values: np.ndarray, scale: int) -> np.ndarray:
    scaled = _round_half_away(values * np.float32(scale))
    return np.clip(scaled, 0, scale).astype(np.uint8)


def _require_area(frame: Frame) -> None:
    if frame.area == 0:
        raise EmptyDistanceFieldError(frame.width, frame.height)


def magnitude_distance_frame(frame: Frame) -> Frame:
    """
    Single-sided gradient around the above-threshold region.

    Seed pixels map to 255 and the farthest pixel maps to 0. If every
    pixel is a seed the result is uniformly 255.

    Raises:
        EmptyDistanceFieldError: If the frame has zero area
    """
    _require_area(frame)

    distances = chebyshev_distance(frame.data > THRESHOLD)
    normalized = checked_normalize(distances, int(distances.max()))
    return Frame(_quantize(np.float32(1.0) - normalized, FULL_RANGE))


def signed_distance_frame(frame: Frame) -> Frame:
    """
    Dual-sided gradient packing both threshold regions into one byte.

    Computes:
        above_bytes = round((1 - d_above / max_above) * 127)        in [0, 127]
        below_bytes = 128 + round((d_below / max_below) * 127)      in [128, 255]

    Per pixel the below byte wins unless it is exactly BOUNDARY_BYTE
    (the pixel is itself below threshold), in which case the above byte
    is used.

    Raises:
        EmptyDistanceFieldError: If the frame has zero area
    """
    _require_area(frame)

    above_seeds = frame.data > THRESHOLD
    above_distances = chebyshev_distance(above_seeds)
    below_distances = chebyshev_distance(~above_seeds)

    above_bytes = _quantize(
        np.float32(1.0) - checked_normalize(above_distances, int(above_distances.max())),
        HALF_RANGE,
    )
    below_bytes = BOUNDARY_BYTE + _quantize(
        checked_normalize(below_distances, int(below_distances.max())),
        HALF_RANGE,
    )

    combined = np.where(below_bytes == BOUNDARY_BYTE, above_bytes, below_bytes)
    return Frame(combined.astype(np.uint8))


def transform_frame(frame: Frame, mode: TransformMode = TransformMode.SIGNED) -> Frame:
    """Apply the distance field transform selected by `mode`."""
    if mode == TransformMode.MAGNITUDE:
        return magnitude_distance_frame(frame)
    return signed_distance_frame(frame)
