"""
Frame Data Model
================

Single-channel frame representation shared by every pipeline stage.

Design Rules:
    - Frames are immutable: each Frame owns a read-only copy of its pixels
    - Every operation returns a NEW Frame, nothing mutates in place
    - data.shape == (height, width), dtype uint8, row-major
"""

from dataclasses import dataclass

import numpy as np

from video_to_df.errors import FrameShapeError


# Frame dimensions are stored as u16 by the downstream consumer
MAX_DIMENSION = 0xFFFF


@dataclass(frozen=True, slots=True, eq=False)
class Frame:
    """
    Immutable 8-bit single-channel image.

    Attributes:
        data: Pixel buffer as np.ndarray (H, W), dtype=uint8

    Example:
        frame = Frame.from_bytes(bytes([0, 255, 0, 255]), width=2, height=2)
        bordered = frame.add_border(1, 255)
        assert bordered.width == 4
    """

    data: np.ndarray

    def __post_init__(self) -> None:
        """Validate invariants, then take a private read-only copy of the buffer."""
        if not isinstance(self.data, np.ndarray) or self.data.ndim != 2:
            raise FrameShapeError("Frame data must be a 2D array")
        if self.data.dtype != np.uint8:
            raise FrameShapeError(f"Frame data must be uint8, got {self.data.dtype}")
        height, width = self.data.shape
        if width > MAX_DIMENSION or height > MAX_DIMENSION:
            raise FrameShapeError(
                f"Frame dimensions {width}x{height} exceed {MAX_DIMENSION}"
            )
        object.__setattr__(self, "data", np.array(self.data, dtype=np.uint8, copy=True))
        self.data.flags.writeable = False

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def area(self) -> int:
        return self.data.size

    @classmethod
    def solid(cls, width: int, height: int, value: int) -> "Frame":
        """Create a frame filled uniformly with `value`."""
        return cls(np.full((height, width), value, dtype=np.uint8))

    @classmethod
    def from_bytes(cls, data: bytes, width: int, height: int) -> "Frame":
        """
        Build a frame from a row-major byte sequence.

        Raises:
            FrameShapeError: If len(data) != width * height
        """
        if len(data) != width * height:
            raise FrameShapeError(
                f"Expected {width * height} bytes for a {width}x{height} frame, "
                f"got {len(data)}"
            )
        buffer = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width)
        return cls(buffer)

    def to_bytes(self) -> bytes:
        """Row-major pixel payload."""
        return self.data.tobytes()

    def inverted(self) -> "Frame":
        """Return a copy with every pixel v replaced by 255 - v."""
        return Frame(np.subtract(255, self.data, dtype=np.uint8))

    def add_border(self, border_width: int, border_color: int) -> "Frame":
        """
        Pad the frame on all four sides.

        The result is (width + 2*border_width) x (height + 2*border_width),
        filled with border_color, with the source copied into the interior
        at offset (border_width, border_width).

        Args:
            border_width: Border thickness in pixels
            border_color: Fill value (0-255)

        Returns:
            New bordered Frame

        Raises:
            FrameShapeError: If the bordered size no longer fits in u16
        """
        new_width = self.width + 2 * border_width
        new_height = self.height + 2 * border_width
        if new_width > MAX_DIMENSION or new_height > MAX_DIMENSION:
            raise FrameShapeError(
                f"Border of {border_width}px makes frame {new_width}x{new_height}, "
                f"exceeding {MAX_DIMENSION}"
            )

        padded = np.full((new_height, new_width), border_color, dtype=np.uint8)
        padded[
            border_width:border_width + self.height,
            border_width:border_width + self.width,
        ] = self.data
        return Frame(padded)

    def __repr__(self) -> str:
        """Compact repr that doesn't dump the pixel buffer."""
        return f"Frame(width={self.width}, height={self.height})"
