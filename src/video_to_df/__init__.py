"""
video_to_df
===========

Video to distance-field density functions.

This package converts the frames of a video into per-frame signed
distance gradients, packs each into a zlib + base64 payload inside a
JSON density-function record, and lays the records out on an outward
square spiral.

Components:
    - models: Frame buffer and output record models
    - sdf: Two-pass Chebyshev distance transforms
    - output: Payload encoding and record writers
    - placement: Spiral index -> grid coordinate mapping
    - pipeline: Parallel batch orchestration and project runner
    - video: OpenCV video decoding
    - config: Project configuration and logging setup

Example:
    from video_to_df.config import load_config
    from video_to_df.pipeline import write_projects
    from video_to_df.video import read_single_channel_frames

    settings = load_config(Path("./my-project"))
    frames = read_single_channel_frames(settings.video_file)
    write_projects(frames, settings)
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
