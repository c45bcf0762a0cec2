"""
Test Configuration
==================

Pytest fixtures and test configuration for video_to_df.
"""

import numpy as np
import pytest

from video_to_df.models.frame import Frame


@pytest.fixture
def checker_frame():
    """2x2 frame alternating below/above threshold columns."""
    return Frame.from_bytes(bytes([0, 255, 0, 255]), width=2, height=2)


@pytest.fixture
def disc_frame():
    """9x7 frame with a bright disc on a dark background."""
    yy, xx = np.mgrid[0:7, 0:9]
    inside = (xx - 4) ** 2 + (yy - 3) ** 2 <= 4
    return Frame(np.where(inside, 230, 20).astype(np.uint8))


@pytest.fixture
def frames():
    """Five deterministic 6x4 frames with varied content."""
    rng = np.random.default_rng(1234)
    return [
        Frame(rng.integers(0, 256, size=(4, 6), dtype=np.uint8))
        for _ in range(5)
    ]


@pytest.fixture
def sample_config_json():
    """Config in the JSON project format."""
    return """{
  "video_file": "input.mp4",
  "output_root_dir": "./output",
  "projects": [
    {
      "border_width": 2,
      "border_color": 255,
      "frame_start": 2,
      "frame_end": 4,
      "namespace": "bad_apple",
      "make_frames": true,
      "frame_dfs_dir": "./frames",
      "make_grid": true,
      "grid_df_dir": "./",
      "make_tp": true,
      "tp_height": 220,
      "tp_dir": "./frame_tp",
      "test_frame": 1
    }
  ]
}
"""
