"""Unit tests for placement validation and the rule registry.

Covers:
- validate_opening_placement() overlap and bounds outcomes
- check order (overlap is reported before bounds)
- PlacementRuleRegistry ordering and enable/disable lists
- wall_fraction() and normalize_openings()
"""

from __future__ import annotations

import math

import pytest

from placement.core.registry import PlacementRuleRegistry, create_default_registry
from placement.core.validator import (
    PlacementValidator,
    normalize_openings,
    validate_opening_placement,
    wall_fraction,
)
from placement.models import (
    PlacementContext, PlacementResult, Point2D, RejectionReason, ValidationConfig,
)
from placement.rules.base import PlacementRule

from conftest import make_opening


class TestOverlap:
    """Tests for the overlap rule."""

    def test_overlapping_candidate_rejected(self) -> None:
        existing = [make_opening(position=0.5, width=0.2, opening_id="w1")]
        result = validate_opening_placement(0, 0.55, 0.1, 1.0, existing)
        assert not result.valid
        assert result.reason == RejectionReason.OVERLAP
        assert result.conflicting_opening_id == "w1"

    def test_clear_candidate_accepted(self) -> None:
        existing = [make_opening(position=0.5, width=0.2)]
        result = validate_opening_placement(0, 0.8, 0.1, 1.0, existing)
        assert result.valid
        assert result.reason is None

    def test_touching_intervals_overlap(self) -> None:
        existing = [make_opening(position=0.25, width=0.5)]
        result = validate_opening_placement(0, 0.75, 0.5, 1.0, existing)
        assert result.reason == RejectionReason.OVERLAP

    def test_other_walls_ignored(self) -> None:
        existing = [make_opening(position=0.5, width=0.2, wall_index=1)]
        assert validate_opening_placement(0, 0.5, 0.2, 1.0, existing).valid

    def test_moved_opening_ignores_itself(self) -> None:
        existing = [
            make_opening(position=0.3, width=0.2, opening_id="a"),
            make_opening(position=0.8, width=0.1, opening_id="b"),
        ]
        result = validate_opening_placement(0, 0.35, 0.2, 1.0, existing, exclude_id="a")
        assert result.valid
        blocked = validate_opening_placement(0, 0.7, 0.2, 1.0, existing, exclude_id="a")
        assert blocked.conflicting_opening_id == "b"

    @pytest.mark.parametrize(
        "a,b",
        [
            ((0.5, 0.2), (0.55, 0.1)),
            ((0.3, 0.1), (0.6, 0.2)),
            ((0.2, 0.2), (0.4, 0.2)),
            ((0.45, 0.3), (0.5, 0.05)),
            ((0.2, 0.1), (0.26, 0.02)),
        ],
    )
    def test_overlap_is_symmetric(
        self, a: tuple[float, float], b: tuple[float, float]
    ) -> None:
        a_on_b = validate_opening_placement(0, a[0], a[1], 1.0, [make_opening(*b)])
        b_on_a = validate_opening_placement(0, b[0], b[1], 1.0, [make_opening(*a)])
        assert (a_on_b.reason == RejectionReason.OVERLAP) == (
            b_on_a.reason == RejectionReason.OVERLAP
        )


class TestBounds:
    """Tests for the wall bounds rule."""

    def test_too_close_to_start(self) -> None:
        result = validate_opening_placement(0, 0.1, 0.3, 1.0, [])
        assert not result.valid
        assert result.reason == RejectionReason.OUT_OF_BOUNDS

    def test_too_close_to_end(self) -> None:
        result = validate_opening_placement(0, 0.9, 0.3, 1.0, [])
        assert result.reason == RejectionReason.OUT_OF_BOUNDS

    def test_fits_exactly(self) -> None:
        assert validate_opening_placement(0, 0.25, 0.5, 1.0, []).valid

    def test_wider_than_wall(self) -> None:
        result = validate_opening_placement(0, 0.5, 1.2, 1.0, [])
        assert result.reason == RejectionReason.OUT_OF_BOUNDS

    def test_overlap_reported_before_bounds(self) -> None:
        existing = [make_opening(position=0.1, width=0.1)]
        result = validate_opening_placement(0, 0.05, 0.3, 1.0, existing)
        assert result.reason == RejectionReason.OVERLAP


class AlwaysReject(PlacementRule):
    priority = 5

    def get_id(self) -> str:
        return "test.always_reject"

    def get_name(self) -> str:
        return "Always Reject"

    def applies(self, context: PlacementContext) -> bool:
        return True

    def check(self, context: PlacementContext) -> PlacementResult | None:
        return PlacementResult.reject(RejectionReason.OUT_OF_BOUNDS, "nope")


class TestRegistry:
    """Tests for PlacementRuleRegistry."""

    def test_default_rules(self) -> None:
        ids = [r.get_id() for r in create_default_registry().list_rules()]
        assert ids == ["opening.overlap", "opening.wall_bounds"]

    def test_priority_order(self) -> None:
        registry = create_default_registry()
        registry.register(AlwaysReject())
        context = PlacementContext(
            wall_index=0, position=0.5, width=0.1, openings=[make_opening(position=0.9)],
        )
        ids = [r.get_id() for r in registry.get_applicable_rules(context)]
        assert ids == ["test.always_reject", "opening.overlap", "opening.wall_bounds"]

    def test_describe_in_run_order(self) -> None:
        registry = create_default_registry()
        registry.register(AlwaysReject())
        described = registry.describe()
        assert [r["id"] for r in described] == [
            "test.always_reject", "opening.overlap", "opening.wall_bounds",
        ]
        assert described[1] == {"id": "opening.overlap", "name": "Opening Overlap", "priority": 10}

    def test_overlap_skipped_without_openings(self) -> None:
        context = PlacementContext(wall_index=0, position=0.5, width=0.1)
        ids = [r.get_id() for r in create_default_registry().get_applicable_rules(context)]
        assert ids == ["opening.wall_bounds"]

    def test_disabled_rule(self) -> None:
        existing = [make_opening(position=0.5, width=0.2)]
        config = ValidationConfig(disabled_rules=["opening.overlap"])
        result = validate_opening_placement(0, 0.5, 0.2, 1.0, existing, config=config)
        assert result.valid

    def test_enabled_rules_only(self) -> None:
        config = ValidationConfig(enabled_rules=["opening.overlap"])
        result = validate_opening_placement(0, 0.01, 0.5, 1.0, [], config=config)
        assert result.valid

    def test_unregister(self) -> None:
        registry = create_default_registry()
        registry.unregister("opening.wall_bounds")
        assert [r["id"] for r in registry.describe()] == ["opening.overlap"]
        validator = PlacementValidator(registry)
        context = PlacementContext(wall_index=0, position=0.0, width=0.5)
        assert validator.validate(context).valid

    def test_empty_registry_accepts(self) -> None:
        validator = PlacementValidator(PlacementRuleRegistry())
        context = PlacementContext(wall_index=0, position=5.0, width=3.0)
        assert validator.validate(context).valid


class TestWallFraction:
    """Tests for converting physical widths to wall fractions."""

    def test_fraction_of_wall(self, square: list[Point2D]) -> None:
        assert wall_fraction(2.0, square, 1) == pytest.approx(0.2)

    def test_zero_length_wall(self) -> None:
        p = Point2D(x=1, z=1)
        assert math.isinf(wall_fraction(1.0, [p, p], 0))

    def test_near_zero_wall(self) -> None:
        coords = [Point2D(x=1, z=1), Point2D(x=1 + 1e-7, z=1), Point2D(x=5, z=4)]
        assert math.isinf(wall_fraction(1.0, coords, 0))

    def test_normalize_openings(self) -> None:
        coords = [Point2D(x=0, z=0), Point2D(x=4, z=0), Point2D(x=4, z=8)]
        openings = [
            make_opening(width=1.0, wall_index=0),
            make_opening(width=2.0, wall_index=1),
        ]
        normalized = normalize_openings(openings, coords)
        assert normalized[0].width == pytest.approx(0.25)
        assert normalized[1].width == pytest.approx(0.25)
        assert openings[0].width == 1.0
