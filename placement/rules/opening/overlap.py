"""Overlap check: openings on the same wall may not share wall length.

Each opening occupies [position - width/2, position + width/2] in
normalized wall units. Two intervals are disjoint only when one ends
strictly before the other starts, so touching openings overlap.
"""

from __future__ import annotations
import logging

from placement.rules.base import PlacementRule
from placement.models import PlacementContext, PlacementResult, RejectionReason

logger = logging.getLogger(__name__)


class OpeningOverlapRule(PlacementRule):
    """Reject a candidate whose interval intersects an existing opening."""

    priority = 10  # Overlap is reported before bounds

    def get_id(self) -> str:
        return "opening.overlap"

    def get_name(self) -> str:
        return "Opening Overlap"

    def applies(self, context: PlacementContext) -> bool:
        return len(context.openings) > 0

    def check(self, context: PlacementContext) -> PlacementResult | None:
        start, end = context.start, context.end
        for existing in context.wall_openings():
            ex_start = existing.position - existing.width / 2
            ex_end = existing.position + existing.width / 2
            if not (end < ex_start or start > ex_end):
                logger.debug(
                    f"Candidate [{start:.3f}, {end:.3f}] on wall {context.wall_index} "
                    f"overlaps [{ex_start:.3f}, {ex_end:.3f}]"
                )
                return PlacementResult.reject(
                    RejectionReason.OVERLAP,
                    "Overlaps an existing opening",
                    conflicting_opening_id=existing.id or None,
                )
        return None
