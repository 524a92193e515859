"""High-level placement service: facade for the API layer."""

from __future__ import annotations
import logging

from placement.models import (
    DisplayPosition, FootprintSummary, Opening, PlacementParams, PlacementResult,
    Point2D, Point3D, ValidationConfig, WallPosition, PlacementContext,
)
from placement.core.analyzer import FootprintAnalyzer
from placement.core.display import calculate_display_position
from placement.core.frame import calculate_template_drop_position
from placement.core.projection import find_closest_wall
from placement.core.registry import PlacementRuleRegistry, create_default_registry
from placement.core.validator import PlacementValidator

logger = logging.getLogger(__name__)


class PlacementService:
    """Applies the configured margins and delegates to the geometry engine."""

    def __init__(
        self,
        params: PlacementParams | None = None,
        registry: PlacementRuleRegistry | None = None,
    ) -> None:
        self.params = params or PlacementParams()
        self.registry = registry or create_default_registry()
        self.validator = PlacementValidator(self.registry)
        self.analyzer = FootprintAnalyzer()

    def closest_wall(
        self,
        point: Point3D,
        coordinates: list[Point2D],
        reposition: bool = False,
        world_y: float = 0.0,
    ) -> WallPosition | None:
        """Nearest wall to `point`; `reposition` applies the drag margin."""
        margin = self.params.reposition_margin if reposition else self.params.nearest_margin
        result = find_closest_wall(point, coordinates, margin=margin, world_y=world_y)
        logger.debug(f"Closest wall to ({point.x}, {point.z}): {result}")
        return result

    def drop_position(
        self,
        point: Point3D,
        wall_index: int,
        coordinates: list[Point2D],
        height: float,
    ) -> float | None:
        return calculate_template_drop_position(
            point, wall_index, coordinates, height, margin=self.params.drop_margin,
        )

    def validate(
        self,
        wall_index: int,
        position: float,
        width: float,
        height: float,
        openings: list[Opening],
        exclude_id: str | None = None,
        config: ValidationConfig | None = None,
    ) -> PlacementResult:
        context = PlacementContext(
            wall_index=wall_index,
            position=position,
            width=width,
            height=height,
            openings=openings,
            exclude_id=exclude_id,
            config=config or ValidationConfig(),
        )
        result = self.validator.validate(context)
        logger.debug(f"Validated wall {wall_index} @ {position:.3f}: {result.reason or 'ok'}")
        return result

    def display_position(
        self,
        opening: Opening,
        coordinates: list[Point2D],
        is_dragging: bool = False,
        preview: WallPosition | None = None,
    ) -> DisplayPosition:
        return calculate_display_position(opening, is_dragging, preview, coordinates)

    def describe_footprint(self, coordinates: list[Point2D]) -> FootprintSummary:
        return self.analyzer.analyze(coordinates)

    def list_rules(self) -> list[dict[str, str | int]]:
        return self.registry.describe()
