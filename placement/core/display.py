"""Render position of an opening, whether resting or mid-drag."""

from __future__ import annotations

from placement.models import (
    DisplayPosition, Opening, Point2D, WallPosition, segment_endpoints,
)


def calculate_display_position(
    opening: Opening,
    is_being_dragged: bool,
    preview: WallPosition | None,
    coordinates: list[Point2D],
) -> DisplayPosition:
    """
    World coordinates at which to draw `opening` this frame.

    While dragged with a preview available, the preview is returned as-is;
    it already carries the wall projection, clamping and vertical centering.
    Otherwise the stored position is interpolated along the stored wall.
    """
    if is_being_dragged and preview is not None:
        return DisplayPosition(x=preview.world_x, y=preview.world_y, z=preview.world_z)

    if not coordinates:
        return DisplayPosition(x=0.0, y=opening.center_height, z=0.0)

    start, end = segment_endpoints(coordinates, opening.wall_index)
    t = opening.position
    return DisplayPosition(
        x=start.x + t * (end.x - start.x),
        y=opening.center_height,
        z=start.z + t * (end.z - start.z),
    )
