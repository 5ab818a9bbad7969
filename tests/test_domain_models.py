"""Tests for domain models to verify they work correctly."""

import math

import pytest

from rasterclip.domain import (
    CanvasBounds,
    ClipResult,
    ClipWindow,
    Pixel,
    Point,
    Segment,
)
from rasterclip.exceptions import GeometryError, WindowError


class TestPoint:
    """Tests for Point class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = Point(10.5, -3.0)
        assert p.x == 10.5
        assert p.y == -3.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert Point(1.0, 2.0).to_tuple() == (1.0, 2.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = Point(100.25, -200.5)
        p2 = Point.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_from_dict_coerces_ints(self) -> None:
        """Test integer coordinates in dicts become floats."""
        p = Point.from_dict({"x": 3, "y": 4})
        assert isinstance(p.x, float)
        assert p == Point(3.0, 4.0)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test equal points collapse in a set."""
        assert len({Point(1.0, 2.0), Point(1.0, 2.0), Point(2.0, 1.0)}) == 2


class TestPixel:
    """Tests for Pixel class."""

    def test_equality_is_component_wise(self) -> None:
        """Test pixels compare by value."""
        assert Pixel(3, 4) == Pixel(3, 4)
        assert Pixel(3, 4) != Pixel(4, 3)

    def test_set_deduplicates(self) -> None:
        """Test duplicate pixels collapse in a set."""
        pixels = {Pixel(0, 0), Pixel(0, 0), Pixel(1, 0)}
        assert pixels == {Pixel(0, 0), Pixel(1, 0)}

    def test_ordering(self) -> None:
        """Test pixels sort by x then y."""
        pixels = [Pixel(2, 0), Pixel(1, 5), Pixel(1, 2)]
        assert sorted(pixels) == [Pixel(1, 2), Pixel(1, 5), Pixel(2, 0)]

    def test_to_tuple(self) -> None:
        """Test pixel to tuple conversion."""
        assert Pixel(-1, 7).to_tuple() == (-1, 7)

    def test_pixel_immutable(self) -> None:
        """Test that pixel is immutable."""
        p = Pixel(0, 0)
        with pytest.raises(AttributeError):
            p.y = 1  # type: ignore


class TestSegment:
    """Tests for Segment class."""

    def test_from_coords(self) -> None:
        """Test building a segment from raw coordinates."""
        s = Segment.from_coords(0, 1, 2, 3)
        assert s.a == Point(0.0, 1.0)
        assert s.b == Point(2.0, 3.0)
        assert s.to_tuple() == (0.0, 1.0, 2.0, 3.0)

    def test_degenerate(self) -> None:
        """Test zero-length detection."""
        assert Segment.from_coords(10, 10, 10, 10).is_degenerate
        assert not Segment.from_coords(10, 10, 10, 11).is_degenerate

    def test_length(self) -> None:
        """Test Euclidean length."""
        assert math.isclose(Segment.from_coords(0, 0, 3, 4).length, 5.0)
        assert Segment.from_coords(1, 1, 1, 1).length == 0.0

    def test_segment_serialization(self) -> None:
        """Test segment serialization and deserialization."""
        s1 = Segment.from_coords(-1.5, 2.0, 3.25, -4.0)
        assert Segment.from_dict(s1.to_dict()) == s1


class TestClipWindow:
    """Tests for ClipWindow class."""

    def test_valid_window(self) -> None:
        """Test a normalized window is accepted."""
        w = ClipWindow(-50, -50, 50, 50)
        assert w.width == 100
        assert w.height == 100

    def test_zero_area_window_allowed(self) -> None:
        """Test xmin == xmax and ymin == ymax is still a valid window."""
        w = ClipWindow(5, 5, 5, 5)
        assert w.contains(Point(5, 5))

    def test_inverted_x_rejected(self) -> None:
        """Test xmin > xmax raises WindowError."""
        with pytest.raises(WindowError, match="Inverted clip window"):
            ClipWindow(10, 0, 0, 10)

    def test_inverted_y_rejected(self) -> None:
        """Test ymin > ymax raises WindowError."""
        with pytest.raises(WindowError):
            ClipWindow(0, 10, 10, 0)

    def test_window_error_is_geometry_error(self) -> None:
        """Test WindowError sits under GeometryError."""
        with pytest.raises(GeometryError):
            ClipWindow(1, 1, 0, 0)

    def test_from_corners_normalizes(self) -> None:
        """Test from_corners swaps inverted bounds."""
        w = ClipWindow.from_corners(50, 50, -50, -50)
        assert w.to_tuple() == (-50.0, -50.0, 50.0, 50.0)

    def test_contains_is_inclusive(self) -> None:
        """Test points on the boundary are inside."""
        w = ClipWindow(0, 0, 10, 10)
        assert w.contains(Point(0, 0))
        assert w.contains(Point(10, 5))
        assert w.contains(Point(5, 5))
        assert not w.contains(Point(10.001, 5))
        assert not w.contains(Point(5, -1))

    def test_window_serialization(self) -> None:
        """Test window serialization and deserialization."""
        w1 = ClipWindow(-1.0, -2.0, 3.0, 4.0)
        assert ClipWindow.from_dict(w1.to_dict()) == w1


class TestCanvasBounds:
    """Tests for CanvasBounds class."""

    def test_contains(self) -> None:
        """Test half-open canvas extent."""
        canvas = CanvasBounds(800, 600)
        assert canvas.contains(0, 0)
        assert canvas.contains(799, 599)
        assert not canvas.contains(800, 0)
        assert not canvas.contains(0, 600)
        assert not canvas.contains(-1, 10)

    def test_clamp(self) -> None:
        """Test clamping onto the canvas."""
        canvas = CanvasBounds(800, 600)
        assert canvas.clamp(-20, 1000) == (0, 599)
        assert canvas.clamp(900, -3) == (799, 0)
        assert canvas.clamp(400, 300) == (400, 300)


class TestClipResult:
    """Tests for ClipResult class."""

    def test_visible(self) -> None:
        """Test visibility flag follows the clipped segment."""
        source = Segment.from_coords(0, 0, 1, 1)
        assert ClipResult(0, source, source).visible
        assert not ClipResult(1, source, None).visible

    def test_serialization_not_visible(self) -> None:
        """Test a not-visible result survives serialization."""
        r1 = ClipResult(3, Segment.from_coords(60, 60, 70, 70), None)
        data = r1.to_dict()
        assert data["clipped"] is None
        assert ClipResult.from_dict(data) == r1

    def test_serialization_visible(self) -> None:
        """Test a visible result survives serialization."""
        r1 = ClipResult(
            0,
            Segment.from_coords(-100, 0, 100, 0),
            Segment.from_coords(-50, 0, 50, 0),
        )
        assert ClipResult.from_dict(r1.to_dict()) == r1
