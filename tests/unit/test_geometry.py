"""Tests for geometric reductions over segment chains."""

import math

import pytest

from spacefill.core import geometry
from spacefill.core.geometry import compute_bounding_box, compute_endpoint, walk_points
from spacefill.domain import make_line, make_template


@pytest.fixture
def square():
    """Unit square traced counter-clockwise from the origin."""
    return [make_line(0, 1), make_line(90, 1), make_line(180, 1), make_line(270, 1)]


class TestComputeEndpoint:
    """Tests for compute_endpoint."""

    def test_empty(self):
        """Test empty chain ends at the origin."""
        assert compute_endpoint([]) == (0.0, 0.0)

    def test_straight_chain(self):
        """Test collinear segments add up."""
        assert compute_endpoint([make_line(0, 1), make_line(0, 2)]) == (3.0, 0.0)

    def test_right_angle(self):
        """Test two perpendicular segments."""
        x, y = compute_endpoint([make_line(0, 1), make_line(90, 1)])
        assert x == pytest.approx(1.0)
        assert y == pytest.approx(1.0)

    def test_closed_loop(self, square):
        """Test a closed loop returns to the origin."""
        x, y = compute_endpoint(square)
        assert x == pytest.approx(0.0, abs=1e-12)
        assert y == pytest.approx(0.0, abs=1e-12)

    def test_degrees_not_radians(self):
        """Test rotation is interpreted in degrees."""
        x, y = compute_endpoint([make_line(180, 2)])
        assert x == pytest.approx(-2.0)
        assert y == pytest.approx(0.0, abs=1e-12)

    def test_matches_template_endpoint(self):
        """Test the cached template endpoint agrees exactly."""
        template = make_template(
            [make_line(30, math.sqrt(3), twist=True), make_line(120, 1), make_line(0, 1)]
        )
        assert compute_endpoint(template.lines) == template.endpoint

    def test_accepts_generator(self):
        """Test any iterable of lines is accepted."""
        x, _ = compute_endpoint(make_line(0, 1) for _ in range(5))
        assert x == pytest.approx(5.0)


class TestWalkPoints:
    """Tests for walk_points."""

    def test_starts_at_origin(self):
        """Test the first point is the origin."""
        assert next(walk_points([make_line(45, 1)])) == (0.0, 0.0)

    def test_point_count(self, square):
        """Test one point per segment plus the origin."""
        assert len(list(walk_points(square))) == len(square) + 1

    def test_positions(self):
        """Test cursor positions accumulate displacements."""
        points = list(walk_points([make_line(0, 2), make_line(90, 1)]))
        assert points[1] == pytest.approx((2.0, 0.0))
        assert points[2] == pytest.approx((2.0, 1.0))


class TestComputeBoundingBox:
    """Tests for compute_bounding_box."""

    def test_empty(self):
        """Test empty chain gives a zero box at the origin."""
        assert compute_bounding_box([]) == (0.0, 0.0, 0.0, 0.0)

    def test_single_segment(self):
        """Test box of a single horizontal segment."""
        assert compute_bounding_box([make_line(0, 2)]) == (0.0, 0.0, 2.0, 0.0)

    def test_square(self, square):
        """Test box of the unit square."""
        min_x, min_y, width, height = compute_bounding_box(square)
        assert min_x == pytest.approx(0.0, abs=1e-12)
        assert min_y == pytest.approx(0.0, abs=1e-12)
        assert width == pytest.approx(1.0)
        assert height == pytest.approx(1.0)

    def test_origin_always_included(self):
        """Test the origin is part of the box even when the path moves away."""
        min_x, min_y, width, height = compute_bounding_box([make_line(45, math.sqrt(2))])
        assert min_x == 0.0
        assert min_y == 0.0
        assert width == pytest.approx(1.0)
        assert height == pytest.approx(1.0)

    def test_negative_extent(self):
        """Test paths into negative coordinates move the corner."""
        min_x, min_y, width, height = compute_bounding_box(
            [make_line(180, 1), make_line(270, 2)]
        )
        assert min_x == pytest.approx(-1.0)
        assert min_y == pytest.approx(-2.0)
        assert width == pytest.approx(1.0)
        assert height == pytest.approx(2.0)

    def test_intermediate_extremes(self):
        """Test extremes reached mid-path are kept."""
        lines = [make_line(90, 3), make_line(270, 3), make_line(0, 1)]
        _, _, width, height = compute_bounding_box(lines)
        assert height == pytest.approx(3.0)
        assert width == pytest.approx(1.0)


class TestAliases:
    """Tests for the short host-facing names."""

    def test_aliases(self):
        """Test endpoint and bounding_box alias the full names."""
        assert geometry.endpoint is compute_endpoint
        assert geometry.bounding_box is compute_bounding_box
