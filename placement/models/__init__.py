from .geometry import (
    Point2D, Point3D, Vector2D, direction_from_points, clamp, segment_endpoints,
    DEGENERATE_LENGTH_SQ,
)
from .building import Opening, OpeningType, OpeningTemplate, WallSegment
from .results import (
    WallPosition, DisplayPosition, PlacementResult, RejectionReason, FootprintSummary,
)
from .parameters import (
    PlacementParams, ValidationConfig, REPOSITION_MARGIN, DROP_MARGIN, NEAREST_MARGIN,
)
from .context import PlacementContext
from .interaction import PointerHit, InteractionState, DropOutcome

__all__ = [
    "Point2D", "Point3D", "Vector2D", "direction_from_points", "clamp",
    "segment_endpoints", "DEGENERATE_LENGTH_SQ",
    "Opening", "OpeningType", "OpeningTemplate", "WallSegment",
    "WallPosition", "DisplayPosition", "PlacementResult", "RejectionReason",
    "FootprintSummary",
    "PlacementParams", "ValidationConfig",
    "REPOSITION_MARGIN", "DROP_MARGIN", "NEAREST_MARGIN",
    "PlacementContext",
    "PointerHit", "InteractionState", "DropOutcome",
]
