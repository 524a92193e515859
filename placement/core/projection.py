"""Closest-wall search: project a floor-plane point onto footprint walls."""

from __future__ import annotations
import logging
import math

from placement.models import (
    DEGENERATE_LENGTH_SQ, REPOSITION_MARGIN, NEAREST_MARGIN,
    Opening, Point2D, Point3D, PointerHit, WallPosition,
)

logger = logging.getLogger(__name__)


def project_onto_segment(point: Point2D | Point3D, start: Point2D, end: Point2D) -> float | None:
    """
    Scalar projection of `point` onto the segment start -> end.

    Returns the unclamped parameter t, where 0 is `start` and 1 is `end`,
    or None for a zero-length segment.
    """
    wx = end.x - start.x
    wz = end.z - start.z
    length_sq = wx * wx + wz * wz
    if length_sq < DEGENERATE_LENGTH_SQ:
        return None
    return ((point.x - start.x) * wx + (point.z - start.z) * wz) / length_sq


def find_closest_wall(
    point: Point2D | Point3D,
    coordinates: list[Point2D],
    margin: tuple[float, float] = NEAREST_MARGIN,
    world_y: float = 0.0,
) -> WallPosition | None:
    """
    Find the footprint wall closest to `point` on the floor plane.

    The y axis of the point is ignored. The projection parameter is clamped
    into `margin` before measuring distance, so the result never sits closer
    to a corner than the margin allows. Zero-length walls are never selected.
    Returns None when no wall is selectable.
    """
    n = len(coordinates)
    lo, hi = margin
    px, pz = point.x, point.z

    best_index: int | None = None
    best_dist_sq = math.inf
    best_t = 0.5

    for i in range(n):
        start = coordinates[i]
        end = coordinates[(i + 1) % n]
        wx = end.x - start.x
        wz = end.z - start.z
        length_sq = wx * wx + wz * wz
        if length_sq < DEGENERATE_LENGTH_SQ:
            logger.debug(f"Skipping zero-length wall {i}")
            continue

        t = ((px - start.x) * wx + (pz - start.z) * wz) / length_sq
        t = max(lo, min(hi, t))

        dx = px - (start.x + t * wx)
        dz = pz - (start.z + t * wz)
        dist_sq = dx * dx + dz * dz
        if dist_sq < best_dist_sq:
            best_dist_sq = dist_sq
            best_index = i
            best_t = t

    if best_index is None:
        return None

    start = coordinates[best_index]
    end = coordinates[(best_index + 1) % n]
    return WallPosition(
        wall_index=best_index,
        position=best_t,
        world_x=start.x + best_t * (end.x - start.x),
        world_y=world_y,
        world_z=start.z + best_t * (end.z - start.z),
        distance=math.sqrt(best_dist_sq),
    )


def calculate_position_from_pointer(
    hit: PointerHit,
    dragged_opening: Opening | None,
    coordinates: list[Point2D],
    margin: tuple[float, float] = REPOSITION_MARGIN,
) -> WallPosition | None:
    """Snap a dragged opening to the wall under the pointer.

    Returns None when nothing is being dragged. The result is vertically
    centered on the opening.
    """
    if dragged_opening is None:
        return None
    return find_closest_wall(
        hit.to_point(),
        coordinates,
        margin=margin,
        world_y=dragged_opening.center_height,
    )
