"""Pointer events and explicit drag/hover state for the interaction layer."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .building import Opening, OpeningTemplate
from .geometry import Point3D
from .results import PlacementResult, WallPosition


class PointerHit(BaseModel):
    """World-space point where the pointer ray hit the scene."""
    world_x: float
    world_y: float
    world_z: float
    button: int = 0

    def to_point(self) -> Point3D:
        return Point3D(x=self.world_x, y=self.world_y, z=self.world_z)


class InteractionState(BaseModel):
    """
    Drag and hover state owned by the caller.

    Handlers in `placement.core.interaction` take a state and return a new
    one; instances are never mutated.
    """
    model_config = ConfigDict(frozen=True)

    hovered_wall: int | None = None
    dragged_opening: Opening | None = None
    preview: WallPosition | None = None
    dragged_template: OpeningTemplate | None = None

    @property
    def is_dragging_opening(self) -> bool:
        return self.dragged_opening is not None

    @property
    def is_dragging_template(self) -> bool:
        return self.dragged_template is not None

    def is_dragging(self, opening: Opening) -> bool:
        """Whether `opening` is the dragged one; id-less openings match by identity."""
        if self.dragged_opening is None:
            return False
        if not opening.id:
            return self.dragged_opening is opening
        return self.dragged_opening.id == opening.id


class DropOutcome(BaseModel):
    """Result of dropping a template onto a wall."""
    wall_index: int
    position: float | None
    result: PlacementResult
    opening: Opening | None = None  # Present only when the drop is accepted
