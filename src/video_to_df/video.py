"""
Video Source
============

Decode a video file into an ordered list of single-channel Frames.

Design Rules:
    - This is the ONLY place in the codebase that decodes video or images
    - Every decoded picture becomes one Frame (grayscale, uint8)
    - All frames are held in memory before any transform runs
"""

import logging
from pathlib import Path
from typing import List

import cv2
import numpy as np

from video_to_df.errors import FileWriteError, FrameShapeError, VideoDecodeError
from video_to_df.models.frame import Frame


logger = logging.getLogger(__name__)


def _to_grayscale(image: np.ndarray) -> np.ndarray:
    if image.ndim == 2:
        return image
    if image.ndim == 3 and image.shape[2] == 3:
        return cv2.cvtColor(image, cv2.COLOR_BGR2GRAY)
    if image.ndim == 3 and image.shape[2] == 4:
        return cv2.cvtColor(image, cv2.COLOR_BGRA2GRAY)
    raise VideoDecodeError(f"Unsupported picture shape: {image.shape}")


def read_single_channel_frames(video_path: Path) -> List[Frame]:
    """
    Decode every picture of `video_path` to grayscale.

    Args:
        video_path: Path to any container/codec OpenCV can read

    Returns:
        Frames in presentation order

    Raises:
        VideoDecodeError: If the file cannot be opened or a picture is invalid
    """
    video_path = Path(video_path)
    if not video_path.is_file():
        raise VideoDecodeError(f"Video file not found: {video_path}")

    capture = cv2.VideoCapture(str(video_path))
    if not capture.isOpened():
        raise VideoDecodeError(f"Failed to open video stream: {video_path}")

    frames: List[Frame] = []
    try:
        while True:
            ok, image = capture.read()
            if not ok:
                break
            if image.dtype != np.uint8:
                raise VideoDecodeError(
                    f"Invalid dtype for frame {len(frames) + 1}: {image.dtype}"
                )
            gray = np.ascontiguousarray(_to_grayscale(image))
            try:
                frames.append(Frame(gray))
            except FrameShapeError as e:
                raise VideoDecodeError(f"Invalid frame {len(frames) + 1}: {e}") from e
    finally:
        capture.release()

    if frames:
        logger.info(
            f"Decoded {len(frames)} frames ({frames[0].width}x{frames[0].height}) "
            f"from {video_path}"
        )
    else:
        logger.warning(f"No frames decoded from {video_path}")
    return frames


def save_png(frame: Frame, path: Path) -> None:
    """
    Write `frame` as an 8-bit grayscale PNG.

    Raises:
        FileWriteError: If OpenCV cannot encode or write the image
    """
    try:
        ok = cv2.imwrite(str(path), frame.data.copy())
    except cv2.error as e:
        raise FileWriteError(path, e) from e
    if not ok:
        raise FileWriteError(path, "cv2.imwrite returned False")
    logger.info(f"Saved PNG to {path}")
