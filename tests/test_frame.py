"""
Frame Tests
===========

Tests for the immutable Frame buffer and border padding.
"""

import numpy as np
import pytest

from video_to_df.errors import FrameShapeError
from video_to_df.models.frame import MAX_DIMENSION, Frame


class TestFrameConstruction:
    """Tests for building frames."""

    def test_from_bytes_row_major(self):
        """Bytes are laid out row by row."""
        frame = Frame.from_bytes(bytes([1, 2, 3, 4, 5, 6]), width=3, height=2)

        assert frame.width == 3
        assert frame.height == 2
        assert frame.data[0].tolist() == [1, 2, 3]
        assert frame.data[1].tolist() == [4, 5, 6]
        assert frame.to_bytes() == bytes([1, 2, 3, 4, 5, 6])

    def test_from_bytes_length_mismatch(self):
        """Payload length must equal width * height."""
        with pytest.raises(FrameShapeError):
            Frame.from_bytes(bytes([1, 2, 3]), width=2, height=2)

    def test_rejects_wrong_dtype(self):
        """Only uint8 buffers are accepted."""
        with pytest.raises(FrameShapeError):
            Frame(np.zeros((2, 2), dtype=np.int32))

    def test_rejects_non_2d(self):
        """Multi-channel arrays are rejected."""
        with pytest.raises(FrameShapeError):
            Frame(np.zeros((2, 2, 3), dtype=np.uint8))

    def test_buffer_is_read_only(self):
        """Frames cannot be mutated through their buffer."""
        frame = Frame.solid(3, 3, 7)

        with pytest.raises(ValueError):
            frame.data[0, 0] = 1

    def test_source_array_left_writable(self):
        """Constructing a Frame does not freeze the caller's array."""
        source = np.zeros((2, 2), dtype=np.uint8)

        Frame(source)

        assert source.flags.writeable
        source[0, 0] = 9

    def test_pixels_detached_from_source_view(self):
        """Writes to the buffer behind a view do not reach the Frame."""
        base = np.zeros((2, 4), dtype=np.uint8)
        frame = Frame(base[:, :2])

        base[0, 0] = 200

        assert frame.data[0, 0] == 0
        assert not np.shares_memory(frame.data, base)

    def test_solid(self):
        """Solid frames are filled uniformly."""
        frame = Frame.solid(4, 2, 9)

        assert frame.area == 8
        assert np.all(frame.data == 9)

    def test_inverted(self):
        """Inversion maps v to 255 - v and leaves the source intact."""
        frame = Frame.from_bytes(bytes([0, 100, 255, 128]), width=2, height=2)
        inverted = frame.inverted()

        assert inverted.to_bytes() == bytes([255, 155, 0, 127])
        assert frame.to_bytes() == bytes([0, 100, 255, 128])


class TestAddBorder:
    """Tests for border padding."""

    @pytest.mark.parametrize("border", [0, 1, 3])
    def test_border_geometry(self, border):
        """Area grows by 2*border per axis and the source is offset by border."""
        rng = np.random.default_rng(7)
        frame = Frame(rng.integers(0, 256, size=(3, 5), dtype=np.uint8))

        bordered = frame.add_border(border, 42)

        assert bordered.width == frame.width + 2 * border
        assert bordered.height == frame.height + 2 * border
        assert bordered.area == (5 + 2 * border) * (3 + 2 * border)

        for y in range(frame.height):
            for x in range(frame.width):
                assert bordered.data[y + border, x + border] == frame.data[y, x]

    def test_border_pixels_use_fill(self):
        """Every pixel outside the interior equals the fill value."""
        frame = Frame.solid(2, 2, 0)
        bordered = frame.add_border(2, 200)

        mask = np.ones(bordered.data.shape, dtype=bool)
        mask[2:4, 2:4] = False
        assert np.all(bordered.data[mask] == 200)
        assert np.all(bordered.data[~mask] == 0)

    def test_returns_new_frame(self):
        """Padding never aliases the source buffer."""
        frame = Frame.solid(2, 2, 5)
        bordered = frame.add_border(0, 0)

        assert bordered is not frame
        assert not np.shares_memory(bordered.data, frame.data)

    def test_border_overflow(self):
        """A border pushing dimensions past u16 is rejected."""
        frame = Frame.solid(10, 10, 0)

        with pytest.raises(FrameShapeError):
            frame.add_border(MAX_DIMENSION // 2, 0)
