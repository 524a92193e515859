"""Placement context: the candidate and what it is checked against."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .building import Opening
from .parameters import ValidationConfig


class PlacementContext(BaseModel):
    """
    Holds everything one validation pass needs.

    All widths are fractions of the wall length. The registry picks the
    applicable rules, and each rule inspects the context independently.
    """
    wall_index: int
    position: float
    width: float
    height: float = 0.0
    openings: list[Opening] = []
    exclude_id: str | None = None  # Opening being moved; never conflicts with itself
    config: ValidationConfig = Field(default_factory=ValidationConfig)

    @property
    def start(self) -> float:
        return self.position - self.width / 2

    @property
    def end(self) -> float:
        return self.position + self.width / 2

    def wall_openings(self) -> list[Opening]:
        """Existing openings on the candidate's wall, minus the one being moved."""
        return [
            o for o in self.openings
            if o.wall_index == self.wall_index
            and (not self.exclude_id or o.id != self.exclude_id)
        ]
