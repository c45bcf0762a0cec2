"""
Spiral Placement Tests
======================

Tests for the index -> spiral cell mapping and placement commands.
"""

import pytest

from video_to_df.placement import (
    index_to_spiral_coords,
    placement_command,
    placement_coords,
    write_placement_commands,
)


class TestSpiralCoords:
    """Tests for index_to_spiral_coords."""

    def test_origin(self):
        """Index 0 sits at the origin."""
        assert index_to_spiral_coords(0) == (0, 0)

    def test_first_ring(self):
        """Ring 1 goes up the right edge, left, down, then right."""
        expected = [
            (1, 0), (1, 1),
            (0, 1), (-1, 1),
            (-1, 0), (-1, -1),
            (0, -1), (1, -1),
        ]
        assert [index_to_spiral_coords(n) for n in range(1, 9)] == expected

    def test_second_ring_starts_right_edge(self):
        """Each ring begins at (layer, -layer + 1)."""
        assert index_to_spiral_coords(9) == (2, -1)
        assert index_to_spiral_coords(25) == (3, -2)

    def test_injective(self):
        """No two indices share a cell."""
        n = 5000
        cells = {index_to_spiral_coords(i) for i in range(n)}

        assert len(cells) == n

    def test_consecutive_cells_are_adjacent(self):
        """The spiral moves one orthogonal step per index."""
        previous = index_to_spiral_coords(0)
        for i in range(1, 2000):
            current = index_to_spiral_coords(i)
            assert abs(current[0] - previous[0]) + abs(current[1] - previous[1]) == 1
            previous = current

    def test_fills_square_rings(self):
        """The first (2k+1)^2 indices cover exactly the square of radius k."""
        k = 6
        cells = {index_to_spiral_coords(i) for i in range((2 * k + 1) ** 2)}

        assert cells == {(x, z) for x in range(-k, k + 1) for z in range(-k, k + 1)}

    def test_large_index_is_exact(self):
        """Ring starts stay exact far beyond float precision."""
        layer = 10 ** 12
        n = (2 * layer - 1) ** 2

        assert index_to_spiral_coords(n) == (layer, -layer + 1)
        assert index_to_spiral_coords(n - 1) == (layer - 1, -(layer - 1))

    def test_negative_index(self):
        """Negative indices are rejected."""
        with pytest.raises(ValueError):
            index_to_spiral_coords(-1)


class TestPlacement:
    """Tests for world placement and command output."""

    def test_placement_coords(self):
        """Cells are two frames apart plus half a frame."""
        assert placement_coords(0, (10, 20)) == (5, 10)
        assert placement_coords(1, (10, 20)) == (25, 10)
        assert placement_coords(4, (10, 20)) == (-15, 50)

    def test_odd_dimensions_floor(self):
        """Half-frame offset uses integer division."""
        assert placement_coords(0, (7, 9)) == (3, 4)

    def test_placement_command(self):
        """Commands face down at the configured height."""
        assert placement_command(2, (10, 20), 220) == "tp @a 25 220 50 180 90"

    def test_write_placement_commands(self, tmp_path):
        """One file per index, named index + 1, no trailing newline."""
        out_dir = tmp_path / "nested" / "tp"

        written = write_placement_commands((1, 4), (10, 20), -5, out_dir)

        assert written == 3
        assert sorted(p.name for p in out_dir.iterdir()) == [
            "2.mcfunction",
            "3.mcfunction",
            "4.mcfunction",
        ]
        assert (out_dir / "2.mcfunction").read_text() == "tp @a 25 -5 10 180 90"

    def test_empty_range(self, tmp_path):
        """An empty range creates the directory and writes nothing."""
        out_dir = tmp_path / "tp"

        assert write_placement_commands((3, 3), (4, 4), 0, out_dir) == 0
        assert out_dir.is_dir()
        assert list(out_dir.iterdir()) == []
