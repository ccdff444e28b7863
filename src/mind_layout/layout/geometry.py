"""Angle and rectangle helpers shared by the layout passes."""

from __future__ import annotations

import math
from collections.abc import Iterable

from mind_layout.parser.model import Dims, Point

TAU = 2 * math.pi


def normalize_angle(angle: float) -> float:
    """Map an angle into [0, 2*pi)."""
    wrapped = math.fmod(angle, TAU)
    if wrapped < 0:
        wrapped += TAU
    # fmod of a tiny negative number can round up to exactly TAU
    return 0.0 if wrapped >= TAU else wrapped


def angle_distance(a: float, b: float) -> float:
    """Smallest absolute difference between two angles, in [0, pi]."""
    diff = abs(normalize_angle(a) - normalize_angle(b))
    return TAU - diff if diff > math.pi else diff


def largest_gap_mid_angle(angles: Iterable[float]) -> float | None:
    """Return the direction in the middle of the widest empty arc.

    None for no angles; the opposite direction for a single angle.
    """
    ordered = sorted(normalize_angle(a) for a in angles)
    if not ordered:
        return None
    if len(ordered) == 1:
        return normalize_angle(ordered[0] + math.pi)

    best_gap = -1.0
    best_mid = ordered[0]
    for i, current in enumerate(ordered):
        nxt = ordered[i + 1] if i + 1 < len(ordered) else ordered[0] + TAU
        gap = nxt - current
        if gap > best_gap:
            best_gap = gap
            best_mid = current + gap / 2
    return normalize_angle(best_mid)


def center_of(position: Point, dims: Dims) -> Point:
    return Point(position.x + dims.w / 2, position.y + dims.h / 2)


def top_left_of(center: Point, dims: Dims) -> Point:
    return Point(center.x - dims.w / 2, center.y - dims.h / 2)


def rect_clearance(
    a_center: Point, a_dims: Dims, b_center: Point, b_dims: Dims
) -> float:
    """Gap between two centered rectangles.

    Positive: Euclidean distance between the closest edges.  Negative:
    the rectangles overlap, by the smaller of the two overlap extents.
    """
    gap_x = abs(a_center.x - b_center.x) - (a_dims.w + b_dims.w) / 2
    gap_y = abs(a_center.y - b_center.y) - (a_dims.h + b_dims.h) / 2
    if gap_x < 0 and gap_y < 0:
        return max(gap_x, gap_y)
    return math.hypot(max(gap_x, 0.0), max(gap_y, 0.0))
