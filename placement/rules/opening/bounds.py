"""Wall bounds check: the whole opening must fit on its wall."""

from __future__ import annotations

from placement.rules.base import PlacementRule
from placement.models import PlacementContext, PlacementResult, RejectionReason


class WallBoundsRule(PlacementRule):
    """Keep the candidate center within [width/2, 1 - width/2]."""

    priority = 20
    dependencies = ["opening.overlap"]

    def get_id(self) -> str:
        return "opening.wall_bounds"

    def get_name(self) -> str:
        return "Wall Bounds"

    def applies(self, context: PlacementContext) -> bool:
        return True

    def check(self, context: PlacementContext) -> PlacementResult | None:
        min_pos = context.width / 2
        max_pos = 1 - context.width / 2
        if context.position < min_pos or context.position > max_pos:
            return PlacementResult.reject(
                RejectionReason.OUT_OF_BOUNDS,
                "Opening does not fit within the wall",
            )
        return None
