"""Building element models: footprint walls and openings."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .geometry import DEGENERATE_LENGTH_SQ, Point2D, direction_from_points


class OpeningType(str, Enum):
    WINDOW = "window"
    DOOR = "door"


class WallSegment(BaseModel):
    """A wall derived from two consecutive footprint vertices."""
    index: int
    start: Point2D
    end: Point2D

    @property
    def length(self) -> float:
        return self.start.distance_to(self.end)

    @property
    def is_degenerate(self) -> bool:
        return direction_from_points(self.start, self.end).length_squared() < DEGENERATE_LENGTH_SQ


class Opening(BaseModel):
    """An opening (window/door) anchored to one footprint wall."""
    id: str = ""
    type: OpeningType = OpeningType.WINDOW
    wall_index: int
    position: float         # Normalized center along the wall [0, 1]
    width: float
    height: float
    bottom_offset: float = 0.0  # Height from floor to bottom of opening

    @property
    def center_height(self) -> float:
        return self.bottom_offset + self.height / 2


class OpeningTemplate(BaseModel):
    """A catalog element being dragged onto a wall, before it has a position."""
    type: OpeningType
    width: float        # Physical width (meters)
    height: float       # Physical height (meters)
    bottom_offset: float = 0.0
