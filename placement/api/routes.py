"""FastAPI route definitions."""

from __future__ import annotations

from fastapi import APIRouter

from placement.models import DisplayPosition, PlacementResult, WallPosition
from placement.services.placement_service import PlacementService
from placement.api.exceptions import require_footprint
from placement.api.schemas import (
    ClosestWallRequest, DisplayPositionRequest, DropPositionRequest,
    DropPositionResponse, RuleInfo, ValidateRequest,
)

router = APIRouter()

# Shared service instance
_service = PlacementService()


@router.post("/closest-wall", response_model=WallPosition | None)
async def closest_wall(request: ClosestWallRequest) -> WallPosition | None:
    """Snap a point to the nearest footprint wall."""
    require_footprint(request.coordinates)
    return _service.closest_wall(
        request.point,
        request.coordinates,
        reposition=request.mode == "reposition",
        world_y=request.world_y,
    )


@router.post("/drop-position", response_model=DropPositionResponse)
async def drop_position(request: DropPositionRequest) -> DropPositionResponse:
    """Normalized position of a template dropped onto a known wall."""
    require_footprint(request.coordinates)
    position = _service.drop_position(
        request.point, request.wall_index, request.coordinates, request.height,
    )
    return DropPositionResponse(position=position)


@router.post("/validate", response_model=PlacementResult)
async def validate_placement(request: ValidateRequest) -> PlacementResult:
    return _service.validate(
        request.wall_index,
        request.position,
        request.width,
        request.height,
        request.openings,
        exclude_id=request.exclude_id,
        config=request.config,
    )


@router.post("/display-position", response_model=DisplayPosition)
async def display_position(request: DisplayPositionRequest) -> DisplayPosition:
    return _service.display_position(
        request.opening, request.coordinates, request.is_dragging, request.preview,
    )


@router.get("/rules", response_model=list[RuleInfo])
async def list_rules() -> list[RuleInfo]:
    """List all registered placement rules."""
    return [RuleInfo(**r) for r in _service.list_rules()]


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}
