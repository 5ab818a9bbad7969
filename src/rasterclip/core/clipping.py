"""Parametric line clipping (Liang-Barsky).

The segment is written as P(t) = p0 + t * (p1 - p0) for t in [0, 1]. Each
window edge contributes one half-plane constraint p_i * t <= q_i:

    i   edge     p_i    q_i
    0   left     -dx    x0 - xmin
    1   right     dx    xmax - x0
    2   bottom   -dy    y0 - ymin
    3   top       dy    ymax - y0

Constraints with p_i < 0 bound t from below (entering), those with p_i > 0
from above (leaving). The visible range is [u1, u2] = [max entering,
min leaving], empty when u1 > u2. A constraint with p_i == 0 is parallel to
its edge and either rejects the whole segment (q_i < 0) or does not restrict
it at all, so no division by zero can happen.

An endpoint moved by the clip is placed exactly on the edge that bounded it,
with the other coordinate kept inside the window. Both endpoints of a
visible result therefore lie in the closed window, and clipping the result
again returns it unchanged.
"""

from collections.abc import Iterable

from rasterclip.domain import ClipResult, ClipWindow, Point, Segment

LEFT, RIGHT, BOTTOM, TOP = range(4)


def _parameter_range(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    window: ClipWindow,
) -> tuple[float, float, int | None, int | None] | None:
    """Visible range plus the edges that set u1 and u2 (None if unmoved)."""
    dx = x1 - x0
    dy = y1 - y0

    p = (-dx, dx, -dy, dy)
    q = (
        x0 - window.xmin,
        window.xmax - x0,
        y0 - window.ymin,
        window.ymax - y0,
    )

    u1 = 0.0
    u2 = 1.0
    entering_edge: int | None = None
    leaving_edge: int | None = None

    for edge, (pi, qi) in enumerate(zip(p, q)):
        if pi == 0:
            if qi < 0:
                return None
            continue

        t = qi / pi
        if pi < 0:
            if t > u1:
                u1 = t
                entering_edge = edge
        elif t < u2:
            u2 = t
            leaving_edge = edge

    if u1 > u2:
        return None

    return u1, u2, entering_edge, leaving_edge


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _inside(point: Point, window: ClipWindow) -> Point:
    # Rounding in the parameter range can leave a kept endpoint an ulp outside.
    if window.contains(point):
        return point
    return Point(
        _clamp(point.x, window.xmin, window.xmax),
        _clamp(point.y, window.ymin, window.ymax),
    )


def _point_on_edge(segment: Segment, t: float, edge: int, window: ClipWindow) -> Point:
    x = segment.a.x + t * (segment.b.x - segment.a.x)
    y = segment.a.y + t * (segment.b.y - segment.a.y)

    if edge == LEFT:
        x = window.xmin
    elif edge == RIGHT:
        x = window.xmax
    elif edge == BOTTOM:
        y = window.ymin
    else:
        y = window.ymax

    return _inside(Point(x, y), window)


def liang_barsky(
    x0: float,
    y0: float,
    x1: float,
    y1: float,
    window: ClipWindow,
) -> tuple[float, float] | None:
    """Compute the visible parameter range of a segment.

    Args:
        x0: Start X
        y0: Start Y
        x1: End X
        y1: End Y
        window: Clip rectangle (must already be normalized)

    Returns:
        Tuple (u1, u2) with 0 <= u1 <= u2 <= 1, or None if no part of the
        segment is inside the window. Points exactly on an edge count as
        inside.
    """
    found = _parameter_range(x0, y0, x1, y1, window)
    if found is None:
        return None
    u1, u2, _, _ = found
    return u1, u2


def clip_segment(segment: Segment, window: ClipWindow) -> Segment | None:
    """Clip a segment to a window.

    Args:
        segment: Segment to clip; zero-length segments are allowed
        window: Clip rectangle

    Returns:
        The visible sub-segment (equal to the input when it lies wholly
        inside), or None if the segment does not meet the window. Clipping
        a returned segment again yields an equal segment.

    Examples:
        >>> window = ClipWindow(-50, -50, 50, 50)
        >>> clip_segment(Segment.from_coords(-100, 0, 100, 0), window).to_tuple()
        (-50.0, 0.0, 50.0, 0.0)
        >>> clip_segment(Segment.from_coords(60, 60, 70, 70), window) is None
        True
    """
    found = _parameter_range(segment.a.x, segment.a.y, segment.b.x, segment.b.y, window)
    if found is None:
        return None

    u1, u2, entering_edge, leaving_edge = found
    if entering_edge is None:
        a = _inside(segment.a, window)
    else:
        a = _point_on_edge(segment, u1, entering_edge, window)
    if leaving_edge is None:
        b = _inside(segment.b, window)
    else:
        b = _point_on_edge(segment, u2, leaving_edge, window)

    return Segment(a, b)


def clip_segments(segments: Iterable[Segment], window: ClipWindow, start_index: int = 0) -> list[ClipResult]:
    """Clip a sequence of segments against one window.

    Args:
        segments: Segments to clip
        window: Clip rectangle
        start_index: Index assigned to the first segment

    Returns:
        One ClipResult per input segment, in input order
    """
    return [
        ClipResult(index=index, source=segment, clipped=clip_segment(segment, window))
        for index, segment in enumerate(segments, start=start_index)
    ]
