"""Per-wall local coordinate frame used when dropping new templates."""

from __future__ import annotations
import logging
import math

from placement.models import (
    DEGENERATE_LENGTH_SQ, DROP_MARGIN,
    Point2D, Point3D, clamp, direction_from_points, segment_endpoints,
)

logger = logging.getLogger(__name__)


def to_wall_frame(point: Point3D, start: Point2D, end: Point2D, height: float) -> Point3D:
    """
    Express a world point in the local frame of the wall start -> end.

    The origin is the wall midpoint at half the building height. Local x
    runs along the wall (from -L/2 at `start` to +L/2 at `end`), local z is
    the perpendicular offset and local y is height above mid-wall.
    """
    center = start.midpoint(end)
    angle = direction_from_points(start, end).angle()

    # Translate to the wall center, then rotate by -angle about the vertical axis
    dx = point.x - center.x
    dy = point.y - height / 2
    dz = point.z - center.z
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point3D(
        x=dx * cos_a + dz * sin_a,
        y=dy,
        z=-dx * sin_a + dz * cos_a,
    )


def calculate_template_drop_position(
    point: Point3D,
    wall_index: int,
    coordinates: list[Point2D],
    height: float,
    margin: tuple[float, float] = DROP_MARGIN,
) -> float | None:
    """
    Normalized position of a drop onto a known wall.

    Exact for any wall orientation and polygon winding. The result is
    clamped into `margin`; a zero-length wall yields its center. Returns
    None when `wall_index` does not name a wall of the footprint.
    """
    if not 0 <= wall_index < len(coordinates):
        logger.debug(f"Drop on unknown wall {wall_index} ({len(coordinates)} vertices)")
        return None

    start, end = segment_endpoints(coordinates, wall_index)
    if direction_from_points(start, end).length_squared() < DEGENERATE_LENGTH_SQ:
        return clamp(0.5, *margin)
    wall_length = start.distance_to(end)

    local = to_wall_frame(point, start, end, height)
    relative = (local.x + wall_length / 2) / wall_length
    return clamp(relative, *margin)
