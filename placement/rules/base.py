"""Abstract base class for all placement rules.

Every rule in the system implements this interface. Rules are:
- Self-contained: each checks one constraint on a candidate opening
- Composable: multiple rules run in sequence via the registry
- Conditional: each rule decides if it applies to the current context

The first rule that rejects a candidate decides the outcome, so rule
priority fixes which rejection reason a caller sees.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from placement.models.context import PlacementContext
from placement.models.results import PlacementResult


class PlacementRule(ABC):
    """
    Base class for all placement rules.

    Subclasses implement `applies()` and `check()`.
    The validator queries the registry, filters by `applies()`,
    sorts by `priority`, and calls `check()` in order.
    """

    # Lower priority = runs first. Default 100.
    priority: int = 100

    # IDs of rules that must run before this one.
    dependencies: list[str] = []

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this rule (e.g., 'opening.overlap')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Opening Overlap')."""
        ...

    @abstractmethod
    def applies(self, context: PlacementContext) -> bool:
        """Return True if this rule should run for the given context."""
        ...

    @abstractmethod
    def check(self, context: PlacementContext) -> PlacementResult | None:
        """
        Check the candidate in `context`.

        Return a rejecting PlacementResult, or None if the candidate
        passes this rule.
        """
        ...
