"""Placement validator: runs the rule registry against a candidate opening."""

from __future__ import annotations
import math

from placement.models import (
    DEGENERATE_LENGTH_SQ,
    Opening, PlacementContext, PlacementResult, Point2D, ValidationConfig,
)
from placement.core.analyzer import FootprintAnalyzer
from placement.core.registry import PlacementRuleRegistry, create_default_registry


class PlacementValidator:
    """
    Stateless placement validator.

    Takes a candidate and the existing openings, runs the applicable
    rules in order and returns the first rejection, or an acceptance.
    """

    def __init__(self, registry: PlacementRuleRegistry | None = None) -> None:
        self.registry = registry or create_default_registry()

    def validate(self, context: PlacementContext) -> PlacementResult:
        for rule in self.registry.get_applicable_rules(context):
            result = rule.check(context)
            if result is not None:
                return result
        return PlacementResult.accept()


_default_validator = PlacementValidator()


def validate_opening_placement(
    wall_index: int,
    position: float,
    width: float,
    height: float,
    existing_openings: list[Opening],
    exclude_id: str | None = None,
    config: ValidationConfig | None = None,
) -> PlacementResult:
    """
    Check whether a candidate opening may sit at `position` on a wall.

    `width` and the widths of `existing_openings` are fractions of the wall
    length; see `normalize_openings` for converting physical sizes.
    """
    context = PlacementContext(
        wall_index=wall_index,
        position=position,
        width=width,
        height=height,
        openings=existing_openings,
        exclude_id=exclude_id,
        config=config or ValidationConfig(),
    )
    return _default_validator.validate(context)


def wall_fraction(width: float, coordinates: list[Point2D], wall_index: int) -> float:
    """Physical width as a fraction of the wall's length (infinite for a zero-length wall)."""
    length = FootprintAnalyzer().wall_length(coordinates, wall_index)
    if length * length < DEGENERATE_LENGTH_SQ:
        return math.inf
    return width / length


def normalize_openings(openings: list[Opening], coordinates: list[Point2D]) -> list[Opening]:
    """Copies of `openings` with widths expressed as fractions of their wall."""
    return [
        o.model_copy(update={"width": wall_fraction(o.width, coordinates, o.wall_index)})
        for o in openings
    ]
