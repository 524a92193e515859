"""Engine output models, recomputed every interaction frame."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .building import WallSegment


class WallPosition(BaseModel):
    """A point snapped onto a footprint wall."""
    wall_index: int
    position: float     # Clamped normalized position along the wall
    world_x: float
    world_y: float
    world_z: float
    distance: float = 0.0  # Euclidean distance from the query point on the floor plane


class DisplayPosition(BaseModel):
    """Render coordinates for one opening in the current frame."""
    x: float
    y: float
    z: float


class RejectionReason(str, Enum):
    OVERLAP = "overlap"
    OUT_OF_BOUNDS = "out-of-bounds"


class PlacementResult(BaseModel):
    """Outcome of validating a candidate opening placement."""
    valid: bool
    reason: RejectionReason | None = None
    message: str | None = None
    conflicting_opening_id: str | None = None

    @classmethod
    def accept(cls) -> PlacementResult:
        return cls(valid=True)

    @classmethod
    def reject(
        cls,
        reason: RejectionReason,
        message: str,
        conflicting_opening_id: str | None = None,
    ) -> PlacementResult:
        return cls(
            valid=False,
            reason=reason,
            message=message,
            conflicting_opening_id=conflicting_opening_id,
        )


class FootprintSummary(BaseModel):
    """Derived walls of a footprint polygon."""
    segments: list[WallSegment]
    degenerate_walls: list[int] = []
    perimeter: float = 0.0
