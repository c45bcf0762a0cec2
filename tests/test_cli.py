"""
CLI Tests
=========

Tests for the v2df command line (video decoding stubbed out) and the OpenCV adapter.
"""

import json

import numpy as np
import pytest

from video_to_df import cli
from video_to_df.config import DEFAULT_CONFIG_FILENAME, load_config
from video_to_df.errors import VideoDecodeError
from video_to_df.models.frame import Frame
from video_to_df.video import read_single_channel_frames, save_png


@pytest.fixture
def small_project(tmp_path):
    """Project directory with a tiny single-project config."""
    (tmp_path / DEFAULT_CONFIG_FILENAME).write_text(
        "video_file: clip.mp4\n"
        "output_root_dir: ./output\n"
        "projects:\n"
        "  - border_width: 1\n"
        "    namespace: demo\n"
        "    test_frame: 2\n"
    )
    return tmp_path


@pytest.fixture
def stub_video(monkeypatch, frames):
    """Replace video decoding with the synthetic frames fixture."""
    monkeypatch.setattr(cli, "read_single_channel_frames", lambda path: frames)
    return frames


class TestFormatDuration:
    """Tests for duration formatting."""

    def test_milliseconds(self):
        assert cli.format_duration(850) == "850.00ms"

    def test_seconds(self):
        assert cli.format_duration(2350) == "2.35s"


class TestCommands:
    """Tests for command dispatch."""

    def test_help(self, capsys):
        """help prints usage and succeeds."""
        assert cli.main(["help"]) == 0
        assert "init" in capsys.readouterr().out

    def test_no_command(self, capsys):
        """No command behaves like help."""
        assert cli.main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_init_writes_loadable_config(self, tmp_path):
        """init creates the directory and a default config."""
        project_dir = tmp_path / "new-project"

        assert cli.main(["init", str(project_dir)]) == 0

        settings = load_config(project_dir)
        assert settings.video_file == project_dir / "input.mp4"
        assert len(settings.projects) == 1

    def test_run(self, small_project, stub_video):
        """run writes every output for every frame."""
        assert cli.main(["run", str(small_project)]) == 0

        output = small_project / "output"
        assert len(list((output / "frames").iterdir())) == len(stub_video)
        grid = json.loads((output / "all_frames.json").read_text())
        assert grid["grid_cell_args"][0] == "demo:frames/1"
        assert len(list((output / "frame_tp").iterdir())) == len(stub_video)

    def test_test_command(self, small_project, stub_video):
        """test writes previews and a single frame's outputs."""
        assert cli.main(["test", str(small_project)]) == 0

        output = small_project / "output"
        assert (output / "test_frame_2.png").is_file()
        assert (output / "gradated_test_frame_2.png").is_file()
        assert [p.name for p in (output / "frames").iterdir()] == ["2.json"]

    def test_missing_config_reports_error(self, tmp_path, capsys):
        """Reported errors exit with 1 and a v2df: prefix."""
        assert cli.main(["run", str(tmp_path)]) == 1
        assert "v2df: " in capsys.readouterr().err

    def test_empty_video_reports_error(self, small_project, monkeypatch, capsys):
        """A video with no frames is reported, not crashed on."""
        monkeypatch.setattr(cli, "read_single_channel_frames", lambda path: [])

        assert cli.main(["run", str(small_project)]) == 1
        assert "empty" in capsys.readouterr().err


class TestVideo:
    """Tests for the OpenCV adapter."""

    def test_missing_video(self, tmp_path):
        """A missing file is a decode error."""
        with pytest.raises(VideoDecodeError):
            read_single_channel_frames(tmp_path / "missing.mp4")

    def test_decodes_colour_clip_to_gray(self, tmp_path):
        """Every picture of a colour clip becomes one grayscale Frame."""
        import cv2

        path = tmp_path / "clip.avi"
        width, height = 64, 48
        colours = [(255, 0, 0), (0, 255, 0), (0, 0, 255)]
        writer = cv2.VideoWriter(
            str(path), cv2.VideoWriter_fourcc(*"MJPG"), 10.0, (width, height)
        )
        if not writer.isOpened():
            pytest.skip("MJPG writer unavailable in this OpenCV build")
        for colour in colours:
            writer.write(np.full((height, width, 3), colour, dtype=np.uint8))
        writer.release()

        decoded = read_single_channel_frames(path)

        assert len(decoded) == len(colours)
        for frame, colour in zip(decoded, colours):
            assert frame.data.shape == (height, width)
            assert frame.data.dtype == np.uint8
            pixel = np.array([[colour]], dtype=np.uint8)
            expected = int(cv2.cvtColor(pixel, cv2.COLOR_BGR2GRAY)[0, 0])
            assert abs(int(np.median(frame.data)) - expected) <= 12

    def test_save_png(self, tmp_path):
        """Frames are saved as lossless grayscale PNG."""
        import cv2

        frame = Frame(np.arange(12, dtype=np.uint8).reshape(3, 4))
        path = tmp_path / "frame.png"

        save_png(frame, path)

        assert np.array_equal(cv2.imread(str(path), cv2.IMREAD_GRAYSCALE), frame.data)
