"""Unit tests for thick line construction."""

import pytest

from rasterclip.core.circle import filled_disk
from rasterclip.core.line import bresenham_line
from rasterclip.core.thick import ThickLineBuilder, thick_line
from rasterclip.domain import CanvasBounds, Pixel


@pytest.fixture
def canvas() -> CanvasBounds:
    """Create a test canvas."""
    return CanvasBounds(100, 100)


@pytest.fixture
def builder(canvas: CanvasBounds) -> ThickLineBuilder:
    """Create a builder on the test canvas."""
    return ThickLineBuilder(canvas)


class TestStampRadius:
    """Tests for width to radius mapping."""

    @pytest.mark.parametrize(
        ("width", "radius"),
        [(1, 0), (2, 1), (3, 1), (4, 2), (7, 3), (255, 127), (0, 0), (-4, 0)],
    )
    def test_radius(self, width: int, radius: int) -> None:
        """Test radius is width // 2, never negative."""
        assert ThickLineBuilder.stamp_radius(width) == radius


class TestThickLine:
    """Tests for ThickLineBuilder.build and thick_line."""

    def test_width_one_matches_centerline(self, builder: ThickLineBuilder) -> None:
        """Test width 1 covers exactly the Bresenham pixels."""
        pixels = builder.build(10, 10, 40, 25, 1)
        assert pixels == set(bresenham_line(10, 10, 40, 25))

    def test_horizontal_width_three(self, builder: ThickLineBuilder) -> None:
        """Test a horizontal width 3 line gains one row each side and rounded caps."""
        pixels = builder.build(10, 10, 20, 10, 3)
        assert len(pixels) == 35
        assert {p.x for p in pixels if p.y == 10} == set(range(9, 22))
        assert {p.x for p in pixels if p.y == 9} == set(range(10, 21))
        assert {p.x for p in pixels if p.y == 11} == set(range(10, 21))

    def test_even_width_matches_odd(self, builder: ThickLineBuilder) -> None:
        """Test widths 2 and 3 share the same stamp radius."""
        assert builder.build(5, 5, 30, 17, 2) == builder.build(5, 5, 30, 17, 3)

    @pytest.mark.parametrize("width", [1, 2, 3, 5, 8])
    def test_contains_centerline(self, builder: ThickLineBuilder, width: int) -> None:
        """Test every centerline pixel is covered."""
        pixels = builder.build(12, 80, 70, 20, width)
        assert set(bresenham_line(12, 80, 70, 20)) <= pixels

    @pytest.mark.parametrize("width", [2, 5, 8])
    def test_union_of_disks(self, canvas: CanvasBounds, builder: ThickLineBuilder, width: int) -> None:
        """Test the result is exactly the union of the stamped disks."""
        radius = ThickLineBuilder.stamp_radius(width)
        expected: set[Pixel] = set()
        for center in bresenham_line(20, 30, 45, 60):
            expected |= filled_disk(center.x, center.y, radius, canvas)
        assert builder.build(20, 30, 45, 60, width) == expected

    def test_no_duplicates(self, builder: ThickLineBuilder) -> None:
        """Test overlapping stamps are merged."""
        pixels = builder.build(10, 10, 60, 35, 9)
        assert isinstance(pixels, set)
        assert len(sorted(pixels)) == len(set(pixels))

    def test_clipped_to_canvas(self) -> None:
        """Test stamps near the border are clipped to the canvas."""
        small = CanvasBounds(20, 20)
        pixels = thick_line(0, 0, 5, 0, 3, small)
        assert pixels
        assert all(small.contains(p.x, p.y) for p in pixels)
        assert Pixel(0, 0) in pixels

    def test_functional_form(self, canvas: CanvasBounds, builder: ThickLineBuilder) -> None:
        """Test thick_line agrees with the builder."""
        assert thick_line(3, 4, 50, 60, 5, canvas) == builder.build(3, 4, 50, 60, 5)
