"""
Error Taxonomy
==============

All failures raised by video_to_df derive from V2DFError so the CLI can
report them uniformly.

Hierarchy:
    V2DFError
    ├── ConfigError
    │   ├── ConfigNotFoundError
    │   └── ConfigParseError
    ├── InputError
    │   ├── FrameRangeError
    │   ├── EmptyFrameCollectionError
    │   ├── PreviewFrameError
    │   └── FrameShapeError
    ├── TransformError
    │   └── EmptyDistanceFieldError
    ├── OutputError
    │   ├── CreateDirectoryError
    │   ├── FileWriteError
    │   ├── CompressionError
    │   └── SerializationError
    └── VideoDecodeError

I/O errors are always raised `from` the underlying exception.
"""

from pathlib import Path
from typing import Tuple


class V2DFError(Exception):
    """Base class for every error reported by video_to_df."""
    pass


# =============================================================================
# Configuration
# =============================================================================

class ConfigError(V2DFError):
    """Raised when project configuration cannot be used."""
    pass


class ConfigNotFoundError(ConfigError):
    """Raised when no config file exists in the project directory."""

    def __init__(self, directory: Path) -> None:
        self.directory = Path(directory)
        super().__init__(
            f"Failed to find 'v2df_config.yaml' or 'v2df_config.json' in directory: {self.directory}"
        )


class ConfigParseError(ConfigError):
    """Raised when the config file is unreadable or fails validation."""
    pass


# =============================================================================
# Input
# =============================================================================

class InputError(V2DFError):
    """Raised for invalid frames or frame selections."""
    pass


class FrameRangeError(InputError):
    """Raised when a requested frame range lies outside the frame collection."""

    def __init__(self, frame_range: Tuple[int, int], frame_count: int) -> None:
        self.frame_range = frame_range
        self.frame_count = frame_count
        super().__init__(
            f"Frame range [{frame_range[0]}, {frame_range[1]}] is out of range "
            f"of frame count: {frame_count}"
        )


class EmptyFrameCollectionError(InputError):
    """Raised when there are no frames to process."""

    def __init__(self) -> None:
        super().__init__("Frame collection is empty")


class PreviewFrameError(InputError):
    """Raised when the configured test frame does not exist."""

    def __init__(self, test_frame: int, frame_count: int) -> None:
        self.test_frame = test_frame
        self.frame_count = frame_count
        super().__init__(
            f"Test frame {test_frame} is out of range of frame count: {frame_count}"
        )


class FrameShapeError(InputError):
    """Raised when pixel data does not match the declared frame dimensions."""
    pass


# =============================================================================
# Transform
# =============================================================================

class TransformError(V2DFError):
    """Raised when a distance field cannot be computed."""
    pass


class EmptyDistanceFieldError(TransformError):
    """Raised when a transform is asked to process a zero-area frame."""

    def __init__(self, width: int, height: int) -> None:
        self.width = width
        self.height = height
        super().__init__(
            f"Cannot compute a distance field over a zero-area frame ({width}x{height})"
        )


# =============================================================================
# Output
# =============================================================================

class OutputError(V2DFError):
    """Raised when output cannot be produced or written."""
    pass


class CreateDirectoryError(OutputError):
    """Raised when an output directory cannot be created."""

    def __init__(self, path: Path, cause: object) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to create directory during output: {self.path}: {cause}")


class FileWriteError(OutputError):
    """Raised when an output file cannot be written."""

    def __init__(self, path: Path, cause: object) -> None:
        self.path = Path(path)
        super().__init__(f"Failed to write file during output: {self.path}: {cause}")


class CompressionError(OutputError):
    """Raised when zlib compression of a payload fails."""
    pass


class SerializationError(OutputError):
    """Raised when an output record cannot be rendered as JSON."""
    pass


# =============================================================================
# Video
# =============================================================================

class VideoDecodeError(V2DFError):
    """Raised when the input video cannot be opened or decoded."""
    pass
