"""API request/response schemas."""

from __future__ import annotations
from typing import Literal
from pydantic import BaseModel

from placement.models import (
    Opening, ValidationConfig, WallPosition,
)
from placement.models.geometry import Point2D, Point3D


class ClosestWallRequest(BaseModel):
    """Request body for the /closest-wall endpoint."""
    point: Point3D
    coordinates: list[Point2D]
    mode: Literal["nearest", "reposition"] = "nearest"
    world_y: float = 0.0


class DropPositionRequest(BaseModel):
    point: Point3D
    wall_index: int
    coordinates: list[Point2D]
    height: float


class DropPositionResponse(BaseModel):
    position: float | None


class ValidateRequest(BaseModel):
    """Candidate opening; widths are fractions of the wall length."""
    wall_index: int
    position: float
    width: float
    height: float = 0.0
    openings: list[Opening] = []
    exclude_id: str | None = None
    config: ValidationConfig = ValidationConfig()


class DisplayPositionRequest(BaseModel):
    opening: Opening
    coordinates: list[Point2D]
    is_dragging: bool = False
    preview: WallPosition | None = None


class RuleInfo(BaseModel):
    id: str
    name: str
    priority: int
