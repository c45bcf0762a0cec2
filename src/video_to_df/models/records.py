"""
Output Record Models
====================

Pydantic models for the JSON records consumed by the density-function mod.

Output Contract (frame record, cached style):
    {
      "argument": {
        "argument": {
          "deflated_frame_data": "<base64 zlib payload>",
          "type": "moredfs:single_channel_image_tessellation",
          "x_size": 320,
          "z_size": 240
        },
        "type": "minecraft:cache_2d"
      },
      "type": "minecraft:flat_cache"
    }

Output Contract (grid record):
    {
      "grid_cell_args": ["namespace:frames/1", "namespace:frames/2"],
      "out_of_bounds_argument": 256,
      "spacing": 1,
      "type": "moredfs:gapped_grid_square_spiral",
      "x_size": 320,
      "z_size": 240
    }

Keys are written sorted, matching the layout downstream tooling expects.
"""

from enum import Enum
from typing import List, Literal, Union

from pydantic import BaseModel, Field


TESSELLATION_TYPE = "moredfs:single_channel_image_tessellation"
FLAT_CACHE_TYPE = "minecraft:flat_cache"
CACHE_2D_TYPE = "minecraft:cache_2d"
SPIRAL_GRID_TYPE = "moredfs:gapped_grid_square_spiral"

# Value sampled outside every grid cell
OUT_OF_BOUNDS_ARGUMENT = 256


class FrameRecordStyle(str, Enum):
    """
    Shape of the per-frame record.

    Attributes:
        CACHED: Tessellation wrapped in flat_cache + cache_2d, file <n>.json
        PLAIN: Bare tessellation object, file frame_<n>.json
    """

    CACHED = "cached"
    PLAIN = "plain"


class GridReferenceStyle(str, Enum):
    """
    Form of the per-index references inside the grid record.

    Attributes:
        NAMESPACED: "<namespace>:<frame_dir>/<index+1>"
        TERM: "term<index>"
    """

    NAMESPACED = "namespaced"
    TERM = "term"


class TessellationRecord(BaseModel):
    """Single-channel image tessellation carrying one encoded frame."""

    type: Literal["moredfs:single_channel_image_tessellation"] = TESSELLATION_TYPE
    x_size: int = Field(..., ge=0, description="Bordered frame width")
    z_size: int = Field(..., ge=0, description="Bordered frame height")
    deflated_frame_data: str = Field(
        ...,
        description="Base64 encoding of the zlib-compressed pixel payload",
    )


class Cache2DRecord(BaseModel):
    """Inner caching layer around a tessellation."""

    type: Literal["minecraft:cache_2d"] = CACHE_2D_TYPE
    argument: TessellationRecord


class FlatCacheRecord(BaseModel):
    """Outer caching layer around a tessellation."""

    type: Literal["minecraft:flat_cache"] = FLAT_CACHE_TYPE
    argument: Cache2DRecord


FrameRecord = Union[FlatCacheRecord, TessellationRecord]


class SpiralGridRecord(BaseModel):
    """
    Grid that lays out per-frame records along an outward square spiral.

    Attributes:
        spacing: Gap between cells
        x_size: Cell width (bordered frame width)
        z_size: Cell height (bordered frame height)
        out_of_bounds_argument: Value outside all cells
        grid_cell_args: Ordered per-index references
    """

    type: Literal["moredfs:gapped_grid_square_spiral"] = SPIRAL_GRID_TYPE
    spacing: int = Field(default=1, ge=0)
    x_size: int = Field(..., ge=0)
    z_size: int = Field(..., ge=0)
    out_of_bounds_argument: int = OUT_OF_BOUNDS_ARGUMENT
    grid_cell_args: List[str] = Field(default_factory=list)


def build_frame_record(
    payload: str,
    x_size: int,
    z_size: int,
    style: FrameRecordStyle = FrameRecordStyle.CACHED,
) -> FrameRecord:
    """
    Build a frame record in the requested style.

    Args:
        payload: Base64 text of the compressed frame bytes
        x_size: Bordered frame width
        z_size: Bordered frame height
        style: Record shape

    Returns:
        FlatCacheRecord (cached) or TessellationRecord (plain)
    """
    tessellation = TessellationRecord(
        x_size=x_size,
        z_size=z_size,
        deflated_frame_data=payload,
    )
    if style == FrameRecordStyle.PLAIN:
        return tessellation
    return FlatCacheRecord(argument=Cache2DRecord(argument=tessellation))


def frame_record_filename(index: int, style: FrameRecordStyle) -> str:
    """Filename for the record of 0-based frame `index`."""
    if style == FrameRecordStyle.PLAIN:
        return f"frame_{index + 1}.json"
    return f"{index + 1}.json"
