"""Footprint analysis: derive wall segments and flag degenerate walls."""

from __future__ import annotations
import logging

from placement.models import FootprintSummary, Point2D, WallSegment, segment_endpoints

logger = logging.getLogger(__name__)


class FootprintAnalyzer:
    """Derives the closed wall path of a footprint polygon."""

    def analyze(self, coordinates: list[Point2D]) -> FootprintSummary:
        """Materialize every wall and report the zero-length ones."""
        segments = self.segments(coordinates)
        degenerate = [s.index for s in segments if s.is_degenerate]
        if degenerate:
            logger.debug(f"Footprint has zero-length walls: {degenerate}")

        return FootprintSummary(
            segments=segments,
            degenerate_walls=degenerate,
            perimeter=sum(s.length for s in segments),
        )

    def segments(self, coordinates: list[Point2D]) -> list[WallSegment]:
        """Consecutive vertex pairs, wrapping from the last vertex to the first."""
        result: list[WallSegment] = []
        for i in range(len(coordinates)):
            start, end = segment_endpoints(coordinates, i)
            result.append(WallSegment(index=i, start=start, end=end))
        return result

    def wall_length(self, coordinates: list[Point2D], wall_index: int) -> float:
        if not coordinates:
            return 0.0
        start, end = segment_endpoints(coordinates, wall_index)
        return start.distance_to(end)
