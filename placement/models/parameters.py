"""Placement margins and validation configuration."""

from __future__ import annotations
from pydantic import BaseModel, field_validator

# Normalized (low, high) clamp ranges. Positions never reach 0 or 1 so
# openings stay clear of wall joints. Drag and drop use different tolerances.
REPOSITION_MARGIN: tuple[float, float] = (0.05, 0.95)
DROP_MARGIN: tuple[float, float] = (0.1, 0.9)
NEAREST_MARGIN: tuple[float, float] = (0.0, 1.0)


class PlacementParams(BaseModel):
    """User-adjustable clamp margins for the placement engine."""
    reposition_margin: tuple[float, float] = REPOSITION_MARGIN  # Dragging an existing opening
    drop_margin: tuple[float, float] = DROP_MARGIN              # Dropping a new template
    nearest_margin: tuple[float, float] = NEAREST_MARGIN        # Plain nearest-wall query

    @field_validator("reposition_margin", "drop_margin", "nearest_margin")
    @classmethod
    def validate_margin(cls, v: tuple[float, float]) -> tuple[float, float]:
        low, high = v
        if not 0.0 <= low <= high <= 1.0:
            raise ValueError(f"margin must satisfy 0 <= low <= high <= 1, got {v}")
        return v


class ValidationConfig(BaseModel):
    """Controls which placement rules are applied."""
    enabled_rules: list[str] = []        # Empty = use all registered defaults
    disabled_rules: list[str] = []       # Explicitly disable specific rules
